# faq_chat/retrieval/text.py - Text normalization and tokenization
import re

# Anything that is not a Unicode letter, digit or whitespace (\w also admits "_")
_NON_WORD = re.compile(r"[^\w\s]|_")
_WHITESPACE = re.compile(r"\s+")


def normalize(text: str | None) -> str:
    """
    Canonicalize text for keyword matching.

    Lowercases, removes punctuation and symbols, collapses whitespace runs to
    a single space and trims. Punctuation is removed before whitespace is
    collapsed, so normalize(normalize(x)) == normalize(x).
    """
    if not text:
        return ""
    s = text.lower()
    s = _NON_WORD.sub("", s)
    s = _WHITESPACE.sub(" ", s)
    return s.strip()


def tokenize(text: str | None) -> list[str]:
    """Split normalized text into tokens; empty input gives []"""
    return [tok for tok in normalize(text).split(" ") if tok]
