"""
AnswerResult Domain Model

Encapsulates the answer returned for one question: answer text, citations,
response metadata and optional fallback hints.
"""

from dataclasses import dataclass, field

# Static label for the retrieval strategy; no generative model is involved
LOCAL_SEARCH_MODEL = "local-search"


@dataclass(frozen=True)
class Citation:
    """Reference to a source document returned alongside an answer."""

    id: str
    title: str
    snippet: str
    score: int

    def to_dict(self) -> dict:
        return {"id": self.id, "title": self.title, "snippet": self.snippet, "score": self.score}


@dataclass(frozen=True)
class Hints:
    """Fallback categories and suggested documents for unanswered questions."""

    categories: list[str] = field(default_factory=list)
    suggestions: list[dict] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"categories": list(self.categories), "suggestions": list(self.suggestions)}


@dataclass
class AnswerResult:
    """
    Answer result domain model for chat responses.

    Contains:
    - Answer text (document content, never generated text)
    - Citations of the ranked documents
    - Metadata (strategy label, latency)
    - Hints when nothing matched
    """

    answer: str
    citations: list[Citation] = field(default_factory=list)
    model: str = LOCAL_SEARCH_MODEL
    latency_ms: int = 0
    hints: Hints | None = None

    def has_citations(self) -> bool:
        """Check if the answer is grounded in at least one document."""
        return len(self.citations) > 0

    def is_fallback(self) -> bool:
        """Check if result is the no-match fallback."""
        return self.hints is not None

    def top_score(self) -> int:
        """Score of the best citation, 0 when there is none."""
        return self.citations[0].score if self.citations else 0

    def to_dict(self) -> dict:
        """
        Convert answer result to the response payload format.

        The hints key is only present on fallback answers.

        Returns:
            Dictionary with answer, citations, meta and optional hints
        """
        result = {
            "answer": self.answer,
            "citations": [citation.to_dict() for citation in self.citations],
            "meta": {"model": self.model, "latencyMs": self.latency_ms},
        }

        if self.hints is not None:
            result["hints"] = self.hints.to_dict()

        return result

    @classmethod
    def create_match(
        cls, answer: str, citations: list[Citation], latency_ms: int
    ) -> "AnswerResult":
        """Create an answer grounded in ranked documents."""
        return cls(answer=answer, citations=citations, latency_ms=latency_ms)

    @classmethod
    def create_fallback(
        cls,
        answer: str,
        categories: list[str],
        suggestions: list[dict],
        latency_ms: int,
    ) -> "AnswerResult":
        """
        Create the no-match answer with hints.

        Args:
            answer: Fixed not-found text
            categories: Category labels to offer
            suggestions: Suggested documents (id, title, tags)
            latency_ms: Elapsed time in milliseconds

        Returns:
            New AnswerResult instance with empty citations
        """
        return cls(
            answer=answer,
            citations=[],
            latency_ms=latency_ms,
            hints=Hints(categories=list(categories), suggestions=list(suggestions)),
        )

    @classmethod
    def create_empty_question(cls, answer: str) -> "AnswerResult":
        """Create the fixed response for an empty question."""
        return cls(answer=answer, citations=[], latency_ms=0)
