"""
Document Domain Model

Represents a static FAQ document loaded from the document source.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Document:
    """
    Document domain model representing one FAQ entry.

    Documents are created at load time and never mutated:
    - Identification (id)
    - Content (title, content)
    - Optional category tags
    """

    id: str
    title: str
    content: str
    tags: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        """Validate document on construction."""
        for name in ("id", "title", "content"):
            if not isinstance(getattr(self, name), str):
                raise TypeError(f"Document {name} must be a string")

        if not self.id.strip():
            raise ValueError("Document id cannot be empty")

        # Accept any iterable of strings for tags but store a tuple
        if not isinstance(self.tags, tuple):
            object.__setattr__(self, "tags", tuple(self.tags))

        if not all(isinstance(tag, str) for tag in self.tags):
            raise TypeError("Document tags must be strings")

    def create_snippet(self, max_length: int | None = 120) -> str:
        """
        Create a text snippet from the document content.

        Args:
            max_length: Maximum length of snippet, None for the full content

        Returns:
            Content prefix of at most max_length characters
        """
        if max_length is None or len(self.content) <= max_length:
            return self.content
        return self.content[:max_length]

    def to_suggestion(self) -> dict:
        """Project the document to the suggestion format used in hints."""
        return {"id": self.id, "title": self.title, "tags": list(self.tags)}

    def to_dict(self) -> dict:
        """
        Convert document to dictionary format.

        Returns:
            Dictionary with document data
        """
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "tags": list(self.tags),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Document":
        """
        Create Document from a raw record.

        Args:
            data: Mapping with id, title, content and optional tags

        Returns:
            New Document instance

        Raises:
            KeyError: If a required field is missing
            TypeError, ValueError: If a field has the wrong shape
        """
        tags = data.get("tags") or ()
        if isinstance(tags, str):
            raise TypeError("Document tags must be a list of strings")

        return cls(
            id=data["id"],
            title=data["title"],
            content=data["content"],
            tags=tuple(tags),
        )
