"""Tests for the platform dimensions table."""

import pytest

from brief_engine.models.brief import Dimension
from brief_engine.models.taxonomy import ContentType, Platform
from brief_engine.services.dimensions import (
    PLATFORM_DIMENSIONS,
    PlatformDimensionsTable,
    content_types_for,
    normalize_content_type,
    normalize_platform,
)


@pytest.fixture
def table():
    return PlatformDimensionsTable()


class TestLookup:
    """Tests for PlatformDimensionsTable.lookup"""

    def test_content_type_narrows_sizes(self, table):
        dims = table.lookup(Platform.INSTAGRAM, ContentType.STORY)

        assert len(dims) == 1
        assert (dims[0].width, dims[0].height) == (1080, 1920)
        assert dims[0].aspect_ratio == "9:16"

    def test_plain_strings_accepted(self, table):
        assert table.lookup("instagram", "story") == table.lookup(Platform.INSTAGRAM, ContentType.STORY)

    def test_platform_only_returns_unique_sizes(self, table):
        dims = table.lookup(Platform.INSTAGRAM)
        sizes = [(d.width, d.height) for d in dims]

        assert sizes == [(1080, 1080), (1080, 1350), (1080, 566), (1080, 1920)]

    def test_unknown_content_type_falls_back_to_platform(self, table):
        assert table.lookup(Platform.INSTAGRAM, ContentType.THUMBNAIL) == table.lookup(Platform.INSTAGRAM)

    def test_unknown_platform(self, table):
        assert table.lookup("myspace") == []

    def test_returns_fresh_list(self, table):
        dims = table.lookup(Platform.INSTAGRAM, ContentType.POST)
        dims.clear()

        assert len(table.lookup(Platform.INSTAGRAM, ContentType.POST)) == 3

    def test_custom_tables(self):
        custom = PlatformDimensionsTable(tables={
            "print": {"flyer": (Dimension(width=10, height=20, label="Tiny", aspect_ratio="1:2"),)},
        })

        assert custom.lookup("print", "flyer")[0].label == "Tiny"
        assert custom.lookup("instagram") == []


class TestDefaults:
    """Tests for default_dimension"""

    def test_default_flagged_entry(self, table):
        assert table.default_dimension(Platform.LINKEDIN, ContentType.BANNER).label == "Company Banner"

    def test_no_default_for_unknown_platform(self, table):
        assert table.default_dimension("myspace") is None


@pytest.mark.parametrize("platform", list(Platform))
def test_every_platform_has_sizes(platform):
    assert platform in PLATFORM_DIMENSIONS
    assert PlatformDimensionsTable().lookup(platform)


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        PLATFORM_DIMENSIONS[Platform.INSTAGRAM]["post"] = ()


class TestNormalization:
    """Loose platform and content type names"""

    @pytest.mark.parametrize("value,expected", [
        ("instagram", Platform.INSTAGRAM),
        ("LinkedIn", Platform.LINKEDIN),
        ("IG", Platform.INSTAGRAM),
        ("fb", Platform.FACEBOOK),
        ("X", Platform.TWITTER),
        ("Twitter/X", Platform.TWITTER),
        ("YouTube Shorts", Platform.YOUTUBE),
        ("newsletter", Platform.EMAIL),
        ("deck", Platform.PRESENTATION),
        ("myspace", None),
        ("ab", None),
        ("", None),
    ])
    def test_normalize_platform(self, value, expected):
        assert normalize_platform(value) == expected

    @pytest.mark.parametrize("value,expected", [
        ("post", ContentType.POST),
        ("Stories", ContentType.STORY),
        ("shorts", ContentType.REEL),
        ("advertisement", ContentType.AD),
        ("presentation", ContentType.SLIDE),
        ("hologram", None),
    ])
    def test_normalize_content_type(self, value, expected):
        assert normalize_content_type(value) == expected

    def test_content_types_for_platform(self):
        assert content_types_for(Platform.INSTAGRAM) == ["post", "story", "reel", "carousel"]
        assert content_types_for("presentation") == ["slide"]

    def test_content_types_for_unknown_platform(self):
        assert content_types_for("myspace") == []
