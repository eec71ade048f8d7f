"""
Infrastructure layer - concrete document sources
"""

from .document_repository import (
    InMemoryDocumentRepository,
    JsonFileDocumentRepository,
    build_store,
)

__all__ = [
    "JsonFileDocumentRepository",
    "InMemoryDocumentRepository",
    "build_store",
]
