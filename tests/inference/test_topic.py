"""
Tests for topic extraction.
"""
import pytest

from brief_engine.inference.topic import extract_topic, is_modification_message
from brief_engine.models.base import FieldSource


class TestModificationGuard:
    """Refinements of an existing plan never yield a topic."""

    @pytest.mark.parametrize("message", [
        "instead of that, make it more playful",
        "make it less corporate",
        "fewer posts please",
        "I'd rather have carousels",
        "carousels rather than single images",
        "change it to something warmer",
        "tone it down a bit",
    ])
    def test_detects_modifications(self, message):
        assert is_modification_message(message)
        assert extract_topic(message).value is None

    def test_new_request_is_not_a_modification(self):
        assert not is_modification_message("Create 5 Instagram posts about our product launch")


class TestExtractTopic:
    def test_explicit_about_phrase(self):
        result = extract_topic("Create 5 Instagram posts about our product launch")

        assert result.value == "Product launch"
        assert result.confidence == 0.85
        assert result.source == FieldSource.INFERRED
        assert result.inferred_from == "explicit"

    def test_skips_platform_only_phrase(self):
        result = extract_topic("a post on LinkedIn about summer sale")
        assert result.value == "Summer sale"

    def test_content_noun_for_phrase(self):
        assert extract_topic("Create a LinkedIn post for our webinar").value == "Webinar"

    def test_phrase_stops_at_connective(self):
        result = extract_topic("Make a reel promoting our yoga retreat to drive signups")
        assert result.value == "Yoga retreat"

    def test_quoted_text(self):
        result = extract_topic('Create a banner that says "Summer Vibes"')

        assert result.value == "Summer Vibes"
        assert result.confidence == 0.9

    def test_product_name(self):
        result = extract_topic("Make something for my Brewly app")

        assert result.value == "Brewly"
        assert result.confidence == 0.8

    def test_descriptive_clause_is_pending(self):
        result = extract_topic("I want a reel that showcases our new coffee blend")

        assert result.value == "New coffee blend"
        assert result.confidence == 0.7
        assert result.source == FieldSource.PENDING

    def test_adjectival_phrase(self):
        result = extract_topic("Make a polished cinematic video")

        assert result.value == "Polished cinematic video"
        assert result.confidence == 0.7

    def test_residual_text(self):
        result = extract_topic("Sustainable fashion Instagram post")

        assert result.value == "Sustainable fashion"
        assert result.confidence == 0.5
        assert result.source == FieldSource.PENDING

    @pytest.mark.parametrize("message", [
        "make a LinkedIn post to build authority",
        "I need a 30 day content calendar",
        "Hello",
        "",
    ])
    def test_no_topic(self, message):
        result = extract_topic(message)

        assert result.value is None
        assert result.confidence == 0

    def test_overlong_explicit_phrase_is_rejected(self):
        message = "a post about " + "very " * 20 + "long things"
        result = extract_topic(message)
        assert result.inferred_from != "explicit"
