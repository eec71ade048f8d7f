"""
Ranker - scores every document and keeps the top-K
"""

from collections.abc import Iterable

from ..domain.models import Document, ScoredCandidate
from .scoring import DEFAULT_SCORING, ScoringConfig, score_document
from .text import tokenize

TOPK_DEFAULT = 3


def rank(
    query: str,
    documents: Iterable[Document],
    k: int = TOPK_DEFAULT,
    config: ScoringConfig = DEFAULT_SCORING,
) -> list[ScoredCandidate]:
    """
    Rank documents by keyword overlap with the query.

    Steps:
    1. Tokenize the query once
    2. Score each document
    3. Sort by descending score; ties keep source order (sorted() is stable)
    4. Drop candidates scoring <= 0 when config.filter_zero_scores is set
    5. Truncate to k entries

    Args:
        query: Raw query text
        documents: Documents in source order (list or DocumentStore)
        k: Maximum number of candidates to return
        config: Scoring configuration

    Returns:
        Candidates sorted by descending score, at most k of them
    """
    if k <= 0:
        return []

    query_tokens = tokenize(query)
    if not query_tokens:
        return []

    candidates = [
        ScoredCandidate(document=doc, score=score_document(query_tokens, doc, config))
        for doc in documents
    ]
    candidates = sorted(candidates, key=lambda c: c.score, reverse=True)

    if config.filter_zero_scores:
        candidates = [c for c in candidates if c.score > 0]

    return candidates[:k]
