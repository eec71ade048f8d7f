"""
Answer Service - Turns ranked candidates into a user-facing answer

This service handles:
- Surfacing the top document's content as the answer (verbatim or truncated)
- Building citations for every ranked candidate
- The not-found fallback with category and suggestion hints
"""

from ..domain.models import AnswerResult, DocumentStore, ScoredCandidate

EMPTY_QUESTION_ANSWER = "질문이 비어있습니다."
NOT_FOUND_ANSWER = "관련 문서를 찾지 못했습니다."
DISAMBIGUATION_PROMPT = "비슷한 문서가 여러 개 있습니다. 어떤 항목을 문의하시는지 조금 더 자세히 알려주세요."
DEFAULT_CATEGORIES = ("계정", "결제", "배송", "고객센터", "오류")


class AnswerAssembler:
    """Assembles AnswerResult objects from ranking output"""

    def __init__(
        self,
        snippet_length: int | None = 120,
        answer_max_chars: int | None = None,
        max_suggestions: int = 6,
        categories: tuple[str, ...] | list[str] = DEFAULT_CATEGORIES,
    ):
        """
        Initialize answer assembler

        Args:
            snippet_length: Citation snippet length, None for the full content
            answer_max_chars: Answer truncation length, None for the full content
            max_suggestions: Number of suggested documents in fallback hints
            categories: Fixed category labels offered in fallback hints
        """
        self.snippet_length = snippet_length
        self.answer_max_chars = answer_max_chars
        self.max_suggestions = max_suggestions
        self.categories = list(categories)

    @staticmethod
    def is_ambiguous(candidates: list[ScoredCandidate]) -> bool:
        """Check if more than one candidate shares the top score."""
        return len(candidates) > 1 and candidates[1].score == candidates[0].score

    def build_answer_text(
        self, candidates: list[ScoredCandidate], ambiguous: bool | None = None
    ) -> str:
        """
        Answer text from the best candidate.

        The top document's content is surfaced verbatim (or as a prefix),
        followed by a disambiguation prompt when the top score is shared.
        """
        if ambiguous is None:
            ambiguous = self.is_ambiguous(candidates)
        text = candidates[0].document.create_snippet(self.answer_max_chars)
        if ambiguous:
            text = f"{text}\n\n{DISAMBIGUATION_PROMPT}"
        return text

    def assemble(
        self,
        query: str,
        candidates: list[ScoredCandidate],
        store: DocumentStore,
        latency_ms: int = 0,
        ambiguous: bool | None = None,
    ) -> AnswerResult:
        """
        Assemble the answer for one question

        Args:
            query: Question text
            candidates: Ranked candidates, best first
            store: Document store used for fallback suggestions
            latency_ms: Elapsed time since the request was received
            ambiguous: Whether the top score is shared. Callers that cut the
                ranking to k pass this, since a single citation hides the tie.
                None decides it from candidates

        Returns:
            AnswerResult with citations on a match, hints otherwise
        """
        if not candidates or not candidates[0].is_match():
            return self.fallback(store, latency_ms)

        matches = [c for c in candidates if c.is_match()]
        citations = [c.to_citation(self.snippet_length) for c in matches]
        return AnswerResult.create_match(
            answer=self.build_answer_text(matches, ambiguous),
            citations=citations,
            latency_ms=latency_ms,
        )

    def fallback(self, store: DocumentStore, latency_ms: int = 0) -> AnswerResult:
        """Not-found answer with categories and suggestions from the head of the store"""
        suggestions = [doc.to_suggestion() for doc in store.head(self.max_suggestions)]
        return AnswerResult.create_fallback(
            answer=NOT_FOUND_ANSWER,
            categories=self.categories,
            suggestions=suggestions,
            latency_ms=latency_ms,
        )

    @staticmethod
    def empty_question() -> AnswerResult:
        return AnswerResult.create_empty_question(EMPTY_QUESTION_ANSWER)
