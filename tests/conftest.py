import pytest
from brief_engine.core.brief_merger import BriefMerger
from brief_engine.core.brief_orchestrator import BriefOrchestrator
from brief_engine.models.brief import LiveBrief
from brief_engine.services.brief_store import InMemoryBriefStore


@pytest.fixture
def empty_brief():
    """Returns a fresh LiveBrief with every slot pending."""
    return LiveBrief.create_empty("draft-test")


@pytest.fixture
def merger():
    return BriefMerger()


@pytest.fixture
def store():
    return InMemoryBriefStore()


@pytest.fixture
def orchestrator(store):
    """Orchestrator with explicit limits so tests don't depend on .env values."""
    return BriefOrchestrator(
        store=store,
        history_window=3,
        history_limit=6,
        max_message_length=5000,
    )


@pytest.fixture
def brand_audiences():
    """Audience records as the UI layer sends them (camelCase keys)."""
    return [
        {
            "name": "Fitness Enthusiasts",
            "isPrimary": False,
            "demographics": {"ageRange": {"min": 25, "max": 40}, "income": "middle"},
            "psychographics": {
                "values": ["wellness", "discipline"],
                "painPoints": ["no time to train"],
                "goals": ["stay in shape"],
            },
        },
        {
            "name": "HR Leaders",
            "isPrimary": True,
            "firmographics": {"jobTitles": ["HR director", "people ops"], "industries": ["saas"]},
        },
    ]
