"""Tests for the in-memory brief store."""

import pytest

from brief_engine.models.base import FieldValue
from brief_engine.models.brief import LiveBrief
from brief_engine.services.brief_store import BriefStore, InMemoryBriefStore


class TestInMemoryBriefStore:
    """Tests for InMemoryBriefStore."""

    async def test_get_missing(self, store):
        assert await store.get("nope") is None

    async def test_save_and_get(self, store):
        brief = LiveBrief.create_empty("d1")
        await store.save(brief)

        loaded = await store.get("d1")
        assert loaded == brief
        assert loaded is not brief

    async def test_saved_brief_is_a_snapshot(self, store):
        brief = LiveBrief.create_empty("d1")
        await store.save(brief)

        brief.record_question("platform")
        assert (await store.get("d1")).clarifying_questions_asked == []

    async def test_loaded_brief_is_a_copy(self, store):
        await store.save(LiveBrief.create_empty("d1"))

        loaded = await store.get("d1")
        loaded.record_question("intent")
        assert (await store.get("d1")).clarifying_questions_asked == []

    async def test_save_overwrites(self, store):
        await store.save(LiveBrief.create_empty("d1"))
        updated = LiveBrief.create_empty("d1").model_copy(
            update={"topic": FieldValue.scored("Spring menu", 0.85)}
        )
        await store.save(updated)

        assert (await store.get("d1")).topic.value == "Spring menu"

    async def test_delete(self, store):
        await store.save(LiveBrief.create_empty("d1"))

        assert await store.delete("d1") is True
        assert await store.delete("d1") is False
        assert await store.get("d1") is None

    async def test_list_ids(self, store):
        for draft_id in ("a", "b"):
            await store.save(LiveBrief.create_empty(draft_id))

        assert sorted(await store.list_ids()) == ["a", "b"]


def test_store_is_abstract():
    with pytest.raises(TypeError):
        BriefStore()
