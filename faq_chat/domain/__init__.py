"""
Domain Layer - Business logic and domain models

This layer contains:
- Domain models: Documents, the document store, scored candidates, answers
- Repositories: Abstract interfaces for loading documents

Independent of the web framework and of the storage format.
"""

from .models import (
    AnswerResult,
    Citation,
    Document,
    DocumentStore,
    Hints,
    ScoredCandidate,
)
from .repositories import DocumentRepository

__all__ = [
    "Document",
    "DocumentStore",
    "ScoredCandidate",
    "AnswerResult",
    "Citation",
    "Hints",
    "DocumentRepository",
]
