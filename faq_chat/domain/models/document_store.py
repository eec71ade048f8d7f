"""
DocumentStore Domain Model

Immutable snapshot of the FAQ document collection.
"""

from collections import Counter
from collections.abc import Iterable, Iterator

from .document import Document


class DocumentStore:
    """
    Read-only, ordered collection of documents.

    The store is built once from a document source and shared between
    requests. Source order is preserved since ranking ties fall back to it.
    """

    __slots__ = ("_documents", "_by_id", "source")

    def __init__(self, documents: Iterable[Document], source: str = "memory"):
        docs = tuple(documents)
        by_id: dict[str, Document] = {}
        for doc in docs:
            if doc.id in by_id:
                raise ValueError(f"Duplicate document id: {doc.id}")
            by_id[doc.id] = doc

        self._documents = docs
        self._by_id = by_id
        self.source = source

    @property
    def documents(self) -> tuple[Document, ...]:
        return self._documents

    def get(self, doc_id: str) -> Document | None:
        """Look up a document by id."""
        return self._by_id.get(doc_id)

    def head(self, n: int) -> list[Document]:
        """First n documents in source order."""
        return list(self._documents[: max(n, 0)])

    def categories(self) -> list[tuple[str, int]]:
        """
        Aggregate tags across the store.

        Returns:
            (tag, count) pairs, most frequent first. Ties keep the order in
            which tags were first seen.
        """
        counts = Counter(
            tag.strip() for doc in self._documents for tag in doc.tags if tag.strip()
        )
        # Counter preserves insertion order and sorted() is stable
        return sorted(counts.items(), key=lambda item: item[1], reverse=True)

    def is_empty(self) -> bool:
        return not self._documents

    def __iter__(self) -> Iterator[Document]:
        return iter(self._documents)

    def __len__(self) -> int:
        return len(self._documents)

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._by_id

    def __repr__(self) -> str:
        return f"DocumentStore(source={self.source!r}, documents={len(self)})"
