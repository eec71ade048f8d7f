"""
Retrieval - tokenization, keyword scoring and ranking
"""

from .ranker import TOPK_DEFAULT, rank
from .scoring import DEFAULT_SCORING, MatchMode, ScoringConfig, score_document
from .text import normalize, tokenize

__all__ = [
    "normalize",
    "tokenize",
    "MatchMode",
    "ScoringConfig",
    "DEFAULT_SCORING",
    "score_document",
    "rank",
    "TOPK_DEFAULT",
]
