"""
Domain Models - Core business entities

This module contains the main business entities:
- Document: A static FAQ entry
- DocumentStore: Immutable snapshot of the FAQ collection
- ScoredCandidate: A document paired with its relevance score
- AnswerResult: The answer, citations, metadata and hints for one question
"""

from .answer_result import LOCAL_SEARCH_MODEL, AnswerResult, Citation, Hints
from .document import Document
from .document_store import DocumentStore
from .search_result import ScoredCandidate

__all__ = [
    "Document",
    "DocumentStore",
    "ScoredCandidate",
    "AnswerResult",
    "Citation",
    "Hints",
    "LOCAL_SEARCH_MODEL",
]
