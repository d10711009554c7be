"""
Tests for LiveBrief
"""
import pytest

from brief_engine.models.audience import AudienceBrief, AudienceProfile
from brief_engine.models.base import FieldValue
from brief_engine.models.brief import Dimension, LiveBrief
from brief_engine.models.taxonomy import Intent, Platform, TaskType


@pytest.fixture
def ready_brief():
    return LiveBrief.create_empty("d1").model_copy(update={
        "task_summary": FieldValue.scored("LinkedIn Post for Authority", 0.9),
        "task_type": FieldValue.scored(TaskType.SINGLE_ASSET, 0.8),
        "intent": FieldValue.scored(Intent.AUTHORITY, 0.9),
        "platform": FieldValue.scored(Platform.LINKEDIN, 0.98),
        "audience": FieldValue.scored(AudienceBrief(name="HR Leaders"), 0.85),
        "topic": FieldValue.scored("Hiring season", 0.85),
        "dimensions": [Dimension(width=1200, height=627, label="Landscape", aspect_ratio="1.91:1", is_default=True)],
    })


class TestLiveBrief:
    """Tests for LiveBrief"""

    def test_create_empty(self):
        brief = LiveBrief.create_empty("d1")

        assert brief.id == "d1"
        assert brief.platform == FieldValue.empty()
        assert brief.dimensions == []
        assert brief.clarifying_questions_asked == []
        assert brief.completion_percentage == 0
        assert not brief.is_ready_for_designer

    def test_completion_counts_known_core_fields(self):
        brief = LiveBrief.create_empty("d1").model_copy(update={
            "platform": FieldValue.scored(Platform.INSTAGRAM, 0.95),
            "intent": FieldValue.scored(Intent.SALES, 0.6),
            "topic": FieldValue.confirmed("Spring menu"),
        })
        # platform + topic out of six core slots
        assert brief.completion_percentage == 33

    def test_ready_for_designer(self, ready_brief):
        assert ready_brief.completion_percentage == 100
        assert ready_brief.is_ready_for_designer

    def test_not_ready_without_dimensions(self, ready_brief):
        assert not ready_brief.model_copy(update={"dimensions": []}).is_ready_for_designer

    def test_not_ready_with_weak_audience(self, ready_brief):
        weak = ready_brief.model_copy(update={"audience": FieldValue.scored(AudienceBrief(name="HR"), 0.6)})
        assert not weak.is_ready_for_designer

    def test_is_multi_asset(self):
        brief = LiveBrief.create_empty("d1").model_copy(
            update={"task_type": FieldValue.scored(TaskType.MULTI_ASSET_PLAN, 0.95)}
        )
        assert brief.is_multi_asset
        assert not LiveBrief.create_empty("d2").is_multi_asset

    def test_record_question_once(self):
        brief = LiveBrief.create_empty("d1")
        brief.record_question("platform")
        brief.record_question("platform")

        assert brief.clarifying_questions_asked == ["platform"]

    def test_serializes_computed_fields(self, ready_brief):
        data = ready_brief.model_dump(mode="json")

        assert data["completion_percentage"] == 100
        assert data["is_ready_for_designer"] is True
        assert data["platform"]["value"] == "linkedin"
        assert data["platform"]["source"] == "inferred"
        assert isinstance(data["updated_at"], str)

    def test_touch_moves_updated_at(self):
        brief = LiveBrief.create_empty("d1")
        before = brief.updated_at
        brief.touch()
        assert brief.updated_at >= before


class TestAudienceModels:
    """Audience profile parsing and conversion"""

    def test_profile_accepts_camel_case(self, brand_audiences):
        profile = AudienceProfile.model_validate(brand_audiences[0])

        assert profile.demographics.age_range.min == 25
        assert profile.psychographics.pain_points == ["no time to train"]
        assert not profile.is_primary

    def test_keywords(self, brand_audiences):
        profile = AudienceProfile.model_validate(brand_audiences[1])
        assert profile.keywords == ["hr leaders", "hr director", "people ops", "saas"]

    def test_brief_from_profile(self, brand_audiences):
        brief = AudienceBrief.from_profile(AudienceProfile.model_validate(brand_audiences[0]))

        assert brief.name == "Fitness Enthusiasts"
        assert brief.demographics == "Ages 25-40, middle income"
        assert brief.psychographics == "wellness, discipline"
        assert brief.goals == ["stay in shape"]
