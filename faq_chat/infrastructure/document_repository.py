"""
Document repositories - JSON file and in-memory document sources
"""

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from ..core.exceptions import DocumentSourceUnavailableError
from ..core.logging_config import get_logger, log_with_context
from ..domain.models import Document, DocumentStore
from ..domain.repositories import DocumentRepository

logger = get_logger(__name__)


def build_store(records: Iterable[Any], source: str) -> DocumentStore:
    """
    Validate raw records and build a DocumentStore.

    Args:
        records: Iterable of mappings or Document instances
        source: Source description for error details

    Returns:
        New DocumentStore

    Raises:
        DocumentSourceUnavailableError: If any record is malformed or ids collide
    """
    docs = []
    for position, record in enumerate(records):
        if isinstance(record, Document):
            docs.append(record)
            continue
        if not isinstance(record, dict):
            raise DocumentSourceUnavailableError(
                f"Document #{position} in {source} is not an object",
                {"source": source, "position": position},
            )
        try:
            docs.append(Document.from_dict(record))
        except KeyError as e:
            raise DocumentSourceUnavailableError(
                f"Document #{position} in {source} is missing field {e}",
                {"source": source, "position": position},
            ) from e
        except (TypeError, ValueError) as e:
            raise DocumentSourceUnavailableError(
                f"Document #{position} in {source} is invalid: {e}",
                {"source": source, "position": position},
            ) from e

    try:
        return DocumentStore(docs, source=source)
    except ValueError as e:
        raise DocumentSourceUnavailableError(str(e), {"source": source}) from e


class JsonFileDocumentRepository(DocumentRepository):
    """Reads the FAQ collection from a JSON array on disk"""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def describe(self) -> str:
        return str(self.path)

    def load(self) -> DocumentStore:
        try:
            raw = self.path.read_bytes()
        except OSError as e:
            log_with_context(
                logger, "error", "document_source_unreadable", path=str(self.path), error=str(e)
            )
            raise DocumentSourceUnavailableError(
                f"Cannot read document source {self.path}", {"path": str(self.path)}
            ) from e

        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            log_with_context(
                logger,
                "error",
                "document_source_invalid_encoding",
                path=str(self.path),
                error=str(e),
            )
            raise DocumentSourceUnavailableError(
                f"Document source {self.path} is not valid UTF-8", {"path": str(self.path)}
            ) from e

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            log_with_context(
                logger, "error", "document_source_invalid_json", path=str(self.path), error=str(e)
            )
            raise DocumentSourceUnavailableError(
                f"Document source {self.path} is not valid JSON", {"path": str(self.path)}
            ) from e

        if not isinstance(data, list):
            raise DocumentSourceUnavailableError(
                f"Document source {self.path} must contain a JSON array", {"path": str(self.path)}
            )

        store = build_store(data, source=str(self.path))
        log_with_context(logger, "info", "documents_loaded", path=str(self.path), count=len(store))
        return store


class InMemoryDocumentRepository(DocumentRepository):
    """Serves an embedded, in-memory FAQ collection"""

    def __init__(self, records: Iterable[Any]):
        self._records = tuple(records)

    def describe(self) -> str:
        return "memory"

    def load(self) -> DocumentStore:
        return build_store(self._records, source="memory")
