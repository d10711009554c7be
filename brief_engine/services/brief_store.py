"""
LiveBrief Store

Abstract persistence interface for per-draft briefs, plus an in-memory
implementation for tests, the CLI runner and single-instance deployments.
"""

import asyncio
from abc import ABC, abstractmethod
from typing import Optional

from brief_engine.models.brief import LiveBrief


class BriefStore(ABC):
    """
    Abstract brief store interface.

    Implementations must provide:
    - Get: Load the brief for a draft
    - Save: Persist a brief (insert or replace)
    - Delete: Drop a draft's brief
    - List: Enumerate stored draft ids
    """

    @abstractmethod
    async def get(self, draft_id: str) -> Optional[LiveBrief]:
        """
        Load the brief for a draft.

        Returns:
            The stored brief or None if the draft is unknown
        """
        pass

    @abstractmethod
    async def save(self, brief: LiveBrief) -> None:
        pass

    @abstractmethod
    async def delete(self, draft_id: str) -> bool:
        """
        Remove a draft's brief.

        Returns:
            True if a brief was removed
        """
        pass

    @abstractmethod
    async def list_ids(self) -> list[str]:
        pass


class InMemoryBriefStore(BriefStore):
    """
    In-memory brief store.

    Stores deep copies so callers can never mutate a saved brief in place.
    Data is lost on restart.
    """

    def __init__(self):
        self._briefs: dict[str, LiveBrief] = {}
        self._lock = asyncio.Lock()

    async def get(self, draft_id: str) -> Optional[LiveBrief]:
        async with self._lock:
            brief = self._briefs.get(draft_id)
            return brief.model_copy(deep=True) if brief else None

    async def save(self, brief: LiveBrief) -> None:
        async with self._lock:
            self._briefs[brief.id] = brief.model_copy(deep=True)

    async def delete(self, draft_id: str) -> bool:
        async with self._lock:
            return self._briefs.pop(draft_id, None) is not None

    async def list_ids(self) -> list[str]:
        async with self._lock:
            return list(self._briefs)
