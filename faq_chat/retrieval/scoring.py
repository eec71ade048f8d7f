"""
Keyword overlap scoring

Scores a document for a tokenized query by counting query terms found in its
title and body. Two matching modes are supported:

- containment: substring test against the normalized title/content strings,
  so "환불" also matches inside "환불은"
- set: exact membership in the title/body token sets (whole words only)

Title matches always outweigh body-only matches.
"""

from dataclasses import dataclass
from enum import Enum

from ..core.exceptions import ConfigurationError
from ..domain.models import Document
from .text import normalize, tokenize


class MatchMode(str, Enum):
    CONTAINMENT = "containment"
    SET = "set"

    @classmethod
    def parse(cls, value: "str | MatchMode") -> "MatchMode":
        try:
            return cls(value)
        except ValueError as e:
            allowed = ", ".join(m.value for m in cls)
            raise ConfigurationError(
                f"Unknown match mode {value!r} (expected one of: {allowed})"
            ) from e


# (title_weight, body_weight, body_includes_title) per mode
_MODE_DEFAULTS = {
    MatchMode.CONTAINMENT: (2, 1, False),
    MatchMode.SET: (1, 2, True),
}


@dataclass(frozen=True)
class ScoringConfig:
    """
    Weighting and matching options for the scorer.

    Attributes:
        mode: Matching mode
        title_weight: Points per query token matching the title
        body_weight: Points per query token matching the body
        body_includes_title: Whether the body haystack also contains the title
        min_token_length: Shorter query tokens are ignored as noise
        filter_zero_scores: Whether the ranker drops candidates scoring <= 0
    """

    mode: MatchMode = MatchMode.CONTAINMENT
    title_weight: int = 2
    body_weight: int = 1
    body_includes_title: bool = False
    min_token_length: int = 2
    filter_zero_scores: bool = True

    def __post_init__(self):
        if self.title_weight < 0 or self.body_weight < 0:
            raise ConfigurationError("Scoring weights cannot be negative")

        if self.min_token_length < 1:
            raise ConfigurationError("min_token_length must be at least 1")

        # A title hit must be worth more than the same token found only in the body
        if self.body_includes_title:
            title_hit = self.title_weight + self.body_weight
        else:
            title_hit = self.title_weight
        if title_hit <= self.body_weight:
            raise ConfigurationError(
                "Title matches must outweigh body-only matches",
                {"title_weight": self.title_weight, "body_weight": self.body_weight},
            )

    @classmethod
    def for_mode(
        cls,
        mode: "str | MatchMode" = MatchMode.CONTAINMENT,
        title_weight: int | None = None,
        body_weight: int | None = None,
        min_token_length: int = 2,
        filter_zero_scores: bool = True,
    ) -> "ScoringConfig":
        """
        Build a config from a mode, filling unset weights with the mode defaults.
        """
        mode = MatchMode.parse(mode)
        default_title, default_body, includes_title = _MODE_DEFAULTS[mode]
        return cls(
            mode=mode,
            title_weight=default_title if title_weight is None else int(title_weight),
            body_weight=default_body if body_weight is None else int(body_weight),
            body_includes_title=includes_title,
            min_token_length=min_token_length,
            filter_zero_scores=filter_zero_scores,
        )

    @classmethod
    def from_settings(cls, settings) -> "ScoringConfig":
        return cls.for_mode(
            mode=settings.mode,
            title_weight=settings.title_weight,
            body_weight=settings.body_weight,
            min_token_length=settings.min_token_length,
            filter_zero_scores=settings.filter_zero_scores,
        )


DEFAULT_SCORING = ScoringConfig()


def _body_text(document: Document, config: ScoringConfig) -> str:
    if config.body_includes_title:
        return f"{document.title} {document.content}"
    return document.content


def score_document(
    query_tokens: list[str], document: Document, config: ScoringConfig = DEFAULT_SCORING
) -> int:
    """
    Compute the keyword overlap score of a document.

    Args:
        query_tokens: Tokens produced by tokenize()
        document: Document to score
        config: Weights and matching mode

    Returns:
        Non-negative integer score, 0 when nothing matches
    """
    terms = [t for t in query_tokens if len(t) >= config.min_token_length]
    if not terms:
        return 0

    if config.mode is MatchMode.SET:
        title_hay = set(tokenize(document.title))
        body_hay = set(tokenize(_body_text(document, config)))
    else:
        title_hay = normalize(document.title)
        body_hay = normalize(_body_text(document, config))

    score = 0
    for term in terms:
        if term in title_hay:
            score += config.title_weight
        if term in body_hay:
            score += config.body_weight
    return score
