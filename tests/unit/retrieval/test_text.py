"""
Unit tests for text normalization and tokenization
"""

import pytest

from faq_chat.retrieval.text import normalize, tokenize


@pytest.mark.unit
class TestNormalize:
    """Test suite for normalize()"""

    def test_lowercases(self):
        assert normalize("Password RESET") == "password reset"

    def test_strips_punctuation(self):
        assert normalize("환불은 7일 이내 가능합니다.") == "환불은 7일 이내 가능합니다"

    def test_punctuation_removed_without_inserting_space(self):
        assert normalize("e-mail") == "email"

    def test_collapses_whitespace(self):
        assert normalize("  a \t\n b   c  ") == "a b c"

    def test_whitespace_left_by_removed_symbols_is_collapsed(self):
        assert normalize("배송 - 교환") == "배송 교환"

    def test_underscore_is_stripped(self):
        assert normalize("snake_case") == "snakecase"

    def test_keeps_unicode_letters_and_digits(self):
        assert normalize("Café ２０２４ 한국어") == "café ２０２４ 한국어"

    def test_empty_and_none(self):
        assert normalize("") == ""
        assert normalize(None) == ""
        assert normalize("?!...") == ""

    @pytest.mark.parametrize(
        "text",
        [
            "환불 정책",
            "  Hello,   World!! ",
            "a - b -- c",
            "교환/반품 (14일)",
            "tabs\tand\nnewlines",
            "İstanbul",
            "___",
            "",
        ],
    )
    def test_idempotent(self, text):
        once = normalize(text)
        assert normalize(once) == once


@pytest.mark.unit
class TestTokenize:
    """Test suite for tokenize()"""

    def test_basic(self):
        assert tokenize("환불 정책") == ["환불", "정책"]

    def test_order_preserved(self):
        assert tokenize("b a c a") == ["b", "a", "c", "a"]

    def test_empty_input(self):
        assert tokenize("") == []
        assert tokenize("   ") == []
        assert tokenize(None) == []

    def test_no_empty_tokens(self):
        tokens = tokenize("배송 - 교환 ,, 환불")
        assert tokens == ["배송", "교환", "환불"]
        assert all(tokens)
