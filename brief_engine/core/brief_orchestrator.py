"""
Brief Orchestrator
Runs one conversation turn end to end for a draft.

Architecture:
    Incoming Message → Inference → Merge into LiveBrief → Clarifying Question → Store
"""
import asyncio
import time
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any, AsyncIterator, Callable, Dict, List, Optional, Sequence

from loguru import logger

from brief_engine.config import settings
from brief_engine.core.brief_merger import BriefMerger
from brief_engine.inference.engine import infer_from_message
from brief_engine.inference.questions import select_clarifying_question
from brief_engine.inference.summary import FALLBACK_SUMMARY
from brief_engine.models.brief import LiveBrief
from brief_engine.models.inference import InferenceResult
from brief_engine.models.question import ClarifyingQuestion
from brief_engine.services.brief_store import BriefStore, InMemoryBriefStore
from brief_engine.utils.observability import log_brief_event, log_inference_event

Inferencer = Callable[..., InferenceResult]


class BriefNotFoundError(Exception):
    """Raised when a draft has no brief yet."""
    pass


@dataclass
class TurnResult:
    """
    Outcome of processing one message.
    A degraded turn leaves the brief exactly as it was before the message.
    """
    brief: LiveBrief
    inference: Optional[InferenceResult]
    summary: str
    clarifying_question: Optional[ClarifyingQuestion]
    duration_ms: float
    degraded: bool = False


class BriefOrchestrator:
    """
    Coordinates inference, merging and persistence per draft.

    Turns for the same draft run one at a time behind a per-draft lock;
    different drafts never wait on each other.

    Usage:
        >>> orchestrator = BriefOrchestrator()
        >>> result = await orchestrator.process_message("draft-1", "I need a 30 day content calendar")
        >>> result.clarifying_question.id
        'platform'
    """

    def __init__(
        self,
        store: BriefStore | None = None,
        merger: BriefMerger | None = None,
        inferencer: Inferencer | None = None,
        history_window: int | None = None,
        history_limit: int | None = None,
        max_message_length: int | None = None,
    ):
        """
        Args:
            store: Brief persistence (in-memory if None)
            merger: BriefMerger (default dimensions table if None)
            inferencer: Callable with the signature of infer_from_message
            history_window: Prior messages used for inference (settings if None)
            history_limit: Messages remembered per draft (settings if None)
            max_message_length: Longer messages are truncated (settings if None)
        """
        self.store = store or InMemoryBriefStore()
        self.merger = merger or BriefMerger()
        self.inferencer = inferencer or infer_from_message

        self.history_window = settings.history_window_size if history_window is None else history_window
        self.history_limit = settings.conversation_history_limit if history_limit is None else history_limit
        self.max_message_length = settings.max_message_length if max_message_length is None else max_message_length

        self._locks: Dict[str, asyncio.Lock] = {}
        self._lock_users: Dict[str, int] = {}
        self._histories: Dict[str, List[str]] = {}

        logger.info("Brief Orchestrator initialized")

    @asynccontextmanager
    async def _draft_lock(self, draft_id: str) -> AsyncIterator[None]:
        # A lock lives while any caller holds or waits on it
        lock = self._locks.setdefault(draft_id, asyncio.Lock())
        self._lock_users[draft_id] = self._lock_users.get(draft_id, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._lock_users[draft_id] -= 1
            if self._lock_users[draft_id] == 0:
                del self._lock_users[draft_id]
                self._locks.pop(draft_id, None)

    def history(self, draft_id: str) -> List[str]:
        """Remembered user messages for a draft, most recent last."""
        return list(self._histories.get(draft_id, []))

    def _remember(self, draft_id: str, message: str) -> None:
        history = self._histories.setdefault(draft_id, [])
        history.append(message)
        if len(history) > self.history_limit:
            del history[:-self.history_limit]

    def _truncate(self, draft_id: str, message: str) -> str:
        if len(message) <= self.max_message_length:
            return message
        logger.warning(
            f"Message for {draft_id} truncated from {len(message)} to {self.max_message_length} characters"
        )
        return message[:self.max_message_length]

    async def process_message(
        self,
        draft_id: str,
        message: str,
        brand_audiences: Optional[Sequence[Any]] = None,
    ) -> TurnResult:
        """
        Process one user message for a draft.

        Steps:
        1. Load the draft's brief (or start an empty one)
        2. Infer from the message plus recent history
        3. Merge into the brief
        4. Pick at most one clarifying question not asked before
        5. Save the brief and remember the message

        Args:
            draft_id: Draft identifier
            message: The user's message
            brand_audiences: Saved audience profiles for the brand

        Returns:
            TurnResult; degraded=True if inference or merging failed
        """
        start_time = time.time()

        async with self._draft_lock(draft_id):
            brief = await self.store.get(draft_id)
            if brief is None:
                brief = LiveBrief.create_empty(draft_id)
                log_brief_event("brief_created", draft_id)

            message = self._truncate(draft_id, message)
            history = self._histories.get(draft_id, [])

            try:
                inference = self.inferencer(
                    message,
                    conversation_history=history,
                    brand_audiences=brand_audiences,
                    history_window=self.history_window,
                )
                updated = self.merger.apply(brief, inference, brand_audiences, message_text=message)
                summary = updated.task_summary.value or FALLBACK_SUMMARY

                question = select_clarifying_question(updated, updated.clarifying_questions_asked)
                if question:
                    updated.record_question(question.id)

            except Exception as e:
                duration_ms = (time.time() - start_time) * 1000
                logger.exception(f"Turn failed for {draft_id} after {duration_ms:.0f}ms: {e}")
                return TurnResult(
                    brief=brief,
                    inference=None,
                    summary=brief.task_summary.value or FALLBACK_SUMMARY,
                    clarifying_question=None,
                    duration_ms=duration_ms,
                    degraded=True,
                )

            await self.store.save(updated)
            self._remember(draft_id, message)

        duration_ms = (time.time() - start_time) * 1000

        log_inference_event(
            draft_id=draft_id,
            action="process_message",
            duration_ms=duration_ms,
            platform=updated.platform.value,
            task_type=updated.task_type.value,
            completion=updated.completion_percentage,
            question=question.id if question else None,
        )

        return TurnResult(
            brief=updated,
            inference=inference,
            summary=summary,
            clarifying_question=question,
            duration_ms=duration_ms,
        )

    async def get_brief(self, draft_id: str) -> LiveBrief:
        brief = await self.store.get(draft_id)
        if brief is None:
            raise BriefNotFoundError(f"No brief for draft {draft_id}")
        return brief

    async def override_field(self, draft_id: str, field: str, value: Any) -> LiveBrief:
        """
        Apply an explicit user edit. Passing None clears the field.

        Raises:
            BriefNotFoundError: Unknown draft
            UnknownFieldError / InvalidFieldValueError: From the merger
        """
        async with self._draft_lock(draft_id):
            brief = await self.get_brief(draft_id)
            updated = self.merger.override_field(brief, field, value)
            await self.store.save(updated)

        log_brief_event("field_overridden", draft_id, field=field, cleared=value is None)
        return updated

    async def confirm_field(self, draft_id: str, field: str) -> LiveBrief:
        async with self._draft_lock(draft_id):
            brief = await self.get_brief(draft_id)
            updated = self.merger.confirm_field(brief, field)
            await self.store.save(updated)

        log_brief_event("field_confirmed", draft_id, field=field)
        return updated

    async def discard(self, draft_id: str) -> None:
        """Drop a draft's brief and history."""
        async with self._draft_lock(draft_id):
            removed = await self.store.delete(draft_id)
            self._histories.pop(draft_id, None)

        if not removed:
            raise BriefNotFoundError(f"No brief for draft {draft_id}")

        log_brief_event("brief_discarded", draft_id)
