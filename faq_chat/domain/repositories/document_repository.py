"""
DocumentRepository Interface

Abstract interface for loading the FAQ document collection.
Implementations can read a JSON file, an in-memory constant or any other
read-only source.
"""

from abc import ABC, abstractmethod

from ..models.document_store import DocumentStore


class DocumentRepository(ABC):
    """
    Abstract repository interface for the document source.

    The source is read-only: repositories only ever produce a fresh
    DocumentStore snapshot.
    """

    @abstractmethod
    def load(self) -> DocumentStore:
        """
        Load the full document collection.

        Returns:
            Immutable DocumentStore in source order

        Raises:
            DocumentSourceUnavailableError: If the source cannot be read or parsed
        """
        pass

    @abstractmethod
    def describe(self) -> str:
        """
        Human-readable description of the source (path, "memory", ...).

        Returns:
            Source description used in logs and health output
        """
        pass
