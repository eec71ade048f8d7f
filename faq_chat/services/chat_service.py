"""
Chat Service - Encapsulates the question answering flow

This service handles:
- The empty-question policy
- Document store lifecycle (load once, or reload per request)
- Ranking and answer assembly
- Latency measurement
"""

import time

from ..core.config import Settings
from ..core.exceptions import InvalidInputError
from ..core.logging_config import get_logger, log_with_context
from ..domain.models import AnswerResult, DocumentStore
from ..domain.repositories import DocumentRepository
from ..retrieval import TOPK_DEFAULT, ScoringConfig, rank
from .answer_service import AnswerAssembler

logger = get_logger(__name__)


class ChatService:
    """Service for answering questions against the FAQ collection"""

    def __init__(
        self,
        repository: DocumentRepository,
        scoring: ScoringConfig | None = None,
        assembler: AnswerAssembler | None = None,
        topk_default: int = TOPK_DEFAULT,
        topk_max: int = 10,
        reload_per_request: bool = False,
    ):
        """
        Initialize chat service

        Args:
            repository: Document source
            scoring: Scoring configuration (defaults to containment mode)
            assembler: Answer assembler (defaults to standard strings and limits)
            topk_default: Number of candidates kept when the caller passes none
            topk_max: Upper bound for caller-supplied k
            reload_per_request: Re-read the document source on every question
        """
        self.repository = repository
        self.scoring = scoring or ScoringConfig()
        self.assembler = assembler or AnswerAssembler()
        self.topk_default = topk_default
        self.topk_max = topk_max
        self.reload_per_request = reload_per_request
        self._store: DocumentStore | None = None

    @classmethod
    def from_settings(cls, settings: Settings, repository: DocumentRepository) -> "ChatService":
        """Build a service from application settings"""
        return cls(
            repository=repository,
            scoring=ScoringConfig.from_settings(settings),
            assembler=AnswerAssembler(
                snippet_length=settings.snippet_length,
                answer_max_chars=settings.answer_max_chars,
                max_suggestions=settings.max_suggestions,
                categories=settings.categories,
            ),
            topk_default=settings.topk_default,
            topk_max=settings.topk_max,
            reload_per_request=settings.reload_per_request,
        )

    def load_store(self) -> DocumentStore:
        """
        Load the document store and keep it for later requests

        Raises:
            DocumentSourceUnavailableError: If the source cannot be loaded
        """
        self._store = self.repository.load()
        return self._store

    def get_store(self) -> DocumentStore:
        """Current document snapshot, loading it on first use or on every call when reloading"""
        if self.reload_per_request or self._store is None:
            return self.load_store()
        return self._store

    def document_count(self) -> int | None:
        """Size of the cached snapshot, None if nothing has been loaded yet"""
        return len(self._store) if self._store is not None else None

    def resolve_k(self, k: int | None) -> int:
        """Validate caller-supplied k against the configured bounds"""
        if k is None:
            return self.topk_default
        if isinstance(k, bool) or not isinstance(k, int) or k < 1 or k > self.topk_max:
            raise InvalidInputError(
                f"k must be an integer between 1 and {self.topk_max}", {"k": k}
            )
        return k

    def ask(
        self, question: str | None, k: int | None = None, started_at: float | None = None
    ) -> AnswerResult:
        """
        Answer a question

        Args:
            question: Raw question text; empty or missing gives the fixed empty-question answer
            k: Maximum number of citations (defaults to topk_default)
            started_at: time.perf_counter() value at request receipt (defaults to now)

        Returns:
            AnswerResult

        Raises:
            InvalidInputError: If k is out of range
            DocumentSourceUnavailableError: If the document source cannot be loaded
        """
        start = started_at if started_at is not None else time.perf_counter()
        q = (question or "").strip()
        if not q:
            return self.assembler.empty_question()

        k = self.resolve_k(k)
        store = self.get_store()
        # Rank at least two so a tie on the top score survives k == 1
        ranked = rank(q, store, k=max(k, 2), config=self.scoring)
        ambiguous = AnswerAssembler.is_ambiguous(ranked)
        candidates = ranked[:k]
        latency_ms = max(int((time.perf_counter() - start) * 1000), 0)

        result = self.assembler.assemble(
            q, candidates, store, latency_ms=latency_ms, ambiguous=ambiguous
        )

        log_with_context(
            logger,
            "info",
            "answer_assembled",
            latency_ms=latency_ms,
            candidate_count=len(candidates),
            top_score=result.top_score(),
            fallback=result.is_fallback(),
            mode=self.scoring.mode.value,
        )
        return result
