"""
Tests for audience matching.
"""
from brief_engine.inference.audience import (
    extract_audience_from_text,
    match_audience,
    parse_audience_profiles,
)
from brief_engine.models.audience import AudienceProfile, AudienceSource
from brief_engine.models.base import FieldSource


class TestExtractAudienceFromText:
    def test_targeting_phrase(self):
        audience = extract_audience_from_text("Instagram posts targeting busy moms in Austin")

        assert audience.name == "Busy moms in Austin"
        assert audience.source == AudienceSource.INFERRED

    def test_for_people_noun(self):
        audience = extract_audience_from_text("A post for small business owners")
        assert audience.name == "Small business owners"

    def test_for_without_people_noun_is_ignored(self):
        assert extract_audience_from_text("A post for our webinar") is None

    def test_age_range_is_split_out(self):
        audience = extract_audience_from_text("targeting young parents ages 25-35")

        assert audience.name == "Young parents"
        assert audience.demographics == "Ages 25-35"

    def test_demographic_keyword(self):
        audience = extract_audience_from_text("Gen Z will love this")
        assert audience.name == "Gen Z"


class TestParseAudienceProfiles:
    def test_skips_malformed_entries(self):
        profiles = parse_audience_profiles([{"isPrimary": True}, {"name": "Gardeners"}, "nonsense"])

        assert [p.name for p in profiles] == ["Gardeners"]

    def test_accepts_profile_instances(self):
        profile = AudienceProfile(name="Gamers")
        assert parse_audience_profiles([profile]) == [profile]

    def test_none_is_empty(self):
        assert parse_audience_profiles(None) == []


class TestMatchAudience:
    def test_explicit_text_wins(self, brand_audiences):
        result = match_audience("targeting retirees who travel", brand_audiences)

        assert result.value.name == "Retirees"
        assert result.confidence == 0.85

    def test_profile_keyword_match(self, brand_audiences):
        result = match_audience("posts about wellness routines", brand_audiences)

        assert result.value.name == "Fitness Enthusiasts"
        assert result.value.demographics == "Ages 25-40, middle income"
        assert result.value.pain_points == ["no time to train"]
        assert result.confidence == 0.85
        assert result.source == FieldSource.INFERRED

    def test_primary_fallback_is_pending(self, brand_audiences):
        result = match_audience("Make a banner", brand_audiences)

        assert result.value.name == "HR Leaders"
        assert result.confidence == 0.6
        assert result.source == FieldSource.PENDING

    def test_malformed_profiles_do_not_fail(self):
        result = match_audience("Make a banner", [{"isPrimary": True}, {"name": "Gardeners", "isPrimary": True}])
        assert result.value.name == "Gardeners"

    def test_nothing_known_is_empty(self):
        result = match_audience("Make a banner", None)

        assert result.value is None
        assert result.confidence == 0
