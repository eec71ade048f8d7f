"""
Search Result Domain Models

ScoredCandidate pairs a document with its relevance score during ranking.
"""

from dataclasses import dataclass

from .answer_result import Citation
from .document import Document


@dataclass(frozen=True)
class ScoredCandidate:
    """
    A document together with its integer relevance score.

    Produced transiently by the ranker and discarded once the answer
    has been assembled.
    """

    document: Document
    score: int

    def __post_init__(self):
        """Validate score on construction."""
        if isinstance(self.score, bool) or not isinstance(self.score, int):
            raise TypeError(f"Score must be an integer, got {type(self.score)}")

        if self.score < 0:
            raise ValueError(f"Score cannot be negative, got {self.score}")

    def is_match(self) -> bool:
        """Check if the candidate cleared the zero-score threshold."""
        return self.score > 0

    def to_citation(self, snippet_length: int | None = 120) -> Citation:
        """
        Project the candidate to a citation.

        Args:
            snippet_length: Snippet truncation length, None for full content

        Returns:
            New Citation instance
        """
        return Citation(
            id=self.document.id,
            title=self.document.title,
            snippet=self.document.create_snippet(snippet_length),
            score=self.score,
        )

    def to_dict(self) -> dict:
        return {"id": self.document.id, "title": self.document.title, "score": self.score}
