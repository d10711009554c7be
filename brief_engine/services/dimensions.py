"""
Platform Dimensions

Read-only lookup of canvas sizes per platform and content type. The brief
merger derives a brief's `dimensions` from here whenever the platform or
content type changes, and resolves loose user-typed names ("IG",
"Twitter/X", "stories") through the alias tables below.
"""
import re
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Protocol, Tuple

from brief_engine.models.brief import Dimension
from brief_engine.models.taxonomy import ContentType, Platform

# (label, width, height, aspect ratio, is default)
_Row = Tuple[str, int, int, str, bool]


def _table(rows: Dict[str, List[_Row]]) -> Mapping[str, Tuple[Dimension, ...]]:
    return MappingProxyType({
        content_type: tuple(
            Dimension(label=label, width=w, height=h, aspect_ratio=aspect, is_default=default)
            for label, w, h, aspect, default in entries
        )
        for content_type, entries in rows.items()
    })


PLATFORM_DIMENSIONS: Mapping[Platform, Mapping[str, Tuple[Dimension, ...]]] = MappingProxyType({
    Platform.INSTAGRAM: _table({
        "post": [
            ("Square", 1080, 1080, "1:1", True),
            ("Portrait", 1080, 1350, "4:5", False),
            ("Landscape", 1080, 566, "1.91:1", False),
        ],
        "story": [("Story", 1080, 1920, "9:16", True)],
        "reel": [("Reel", 1080, 1920, "9:16", True)],
        "carousel": [
            ("Square Carousel", 1080, 1080, "1:1", True),
            ("Portrait Carousel", 1080, 1350, "4:5", False),
        ],
    }),
    Platform.LINKEDIN: _table({
        "post": [
            ("Landscape", 1200, 627, "1.91:1", True),
            ("Square", 1080, 1080, "1:1", False),
            ("Portrait", 1080, 1350, "4:5", False),
        ],
        "banner": [
            ("Company Banner", 1128, 191, "5.9:1", True),
            ("Personal Banner", 1584, 396, "4:1", False),
        ],
        "carousel": [
            ("Document Carousel", 1080, 1080, "1:1", True),
            ("PDF Carousel", 1080, 1350, "4:5", False),
        ],
        "ad": [
            ("Sponsored Content", 1200, 627, "1.91:1", True),
            ("Square Ad", 1080, 1080, "1:1", False),
        ],
    }),
    Platform.FACEBOOK: _table({
        "post": [
            ("Landscape", 1200, 630, "1.91:1", True),
            ("Square", 1080, 1080, "1:1", False),
        ],
        "story": [("Story", 1080, 1920, "9:16", True)],
        "ad": [
            ("Feed Ad", 1200, 628, "1.91:1", True),
            ("Square Ad", 1080, 1080, "1:1", False),
            ("Carousel Ad", 1080, 1080, "1:1", False),
        ],
        "banner": [
            ("Page Cover", 820, 312, "2.63:1", True),
            ("Event Cover", 1920, 1005, "1.91:1", False),
        ],
    }),
    Platform.TWITTER: _table({
        "post": [
            ("Single Image", 1200, 675, "16:9", True),
            ("Two Images", 700, 800, "7:8", False),
            ("Square", 1080, 1080, "1:1", False),
        ],
        "banner": [("Header", 1500, 500, "3:1", True)],
        "ad": [("Promoted Tweet", 1200, 675, "16:9", True)],
    }),
    Platform.YOUTUBE: _table({
        "thumbnail": [("Thumbnail", 1280, 720, "16:9", True)],
        "banner": [
            ("Channel Art", 2560, 1440, "16:9", True),
            ("Safe Area", 1546, 423, "3.66:1", False),
        ],
        "video": [
            ("Standard HD", 1920, 1080, "16:9", True),
            ("4K", 3840, 2160, "16:9", False),
            ("Shorts", 1080, 1920, "9:16", False),
        ],
    }),
    Platform.TIKTOK: _table({
        "video": [("Standard", 1080, 1920, "9:16", True)],
        "ad": [
            ("In-Feed Ad", 1080, 1920, "9:16", True),
            ("TopView", 1080, 1920, "9:16", False),
        ],
    }),
    Platform.PRINT: _table({
        "poster": [
            ("A4 Portrait", 2480, 3508, "1:1.41", True),
            ("A4 Landscape", 3508, 2480, "1.41:1", False),
            ("A3 Portrait", 3508, 4961, "1:1.41", False),
            ("Letter Portrait", 2550, 3300, "1:1.29", False),
        ],
        "flyer": [
            ("A5 Portrait", 1748, 2480, "1:1.42", True),
            ("A5 Landscape", 2480, 1748, "1.42:1", False),
            ("DL Flyer", 1240, 2480, "1:2", False),
        ],
        "banner": [
            ("Roll-up (85x200cm)", 2551, 6000, "1:2.35", True),
            ("Wide Banner", 4800, 1200, "4:1", False),
        ],
        "card": [("Business Card", 1050, 600, "1.75:1", True)],
    }),
    Platform.WEB: _table({
        "banner": [
            ("Leaderboard", 728, 90, "8:1", True),
            ("Medium Rectangle", 300, 250, "1.2:1", False),
            ("Large Rectangle", 336, 280, "1.2:1", False),
            ("Skyscraper", 160, 600, "1:3.75", False),
            ("Wide Skyscraper", 300, 600, "1:2", False),
        ],
        "hero": [
            ("Desktop Hero", 1920, 1080, "16:9", True),
            ("Wide Hero", 1920, 600, "3.2:1", False),
            ("Mobile Hero", 750, 1334, "1:1.78", False),
        ],
        "ad": [
            ("Google Display", 300, 250, "1.2:1", True),
            ("Billboard", 970, 250, "3.88:1", False),
            ("Half Page", 300, 600, "1:2", False),
        ],
    }),
    Platform.EMAIL: _table({
        "header": [
            ("Email Header", 600, 200, "3:1", True),
            ("Wide Header", 600, 150, "4:1", False),
        ],
        "banner": [
            ("Full Width", 600, 300, "2:1", True),
            ("Hero Banner", 600, 400, "1.5:1", False),
        ],
        "thumbnail": [
            ("Product Image", 200, 200, "1:1", True),
            ("Feature Image", 280, 280, "1:1", False),
        ],
    }),
    Platform.PRESENTATION: _table({
        "slide": [
            ("Widescreen (16:9)", 1920, 1080, "16:9", True),
            ("Standard (4:3)", 1024, 768, "4:3", False),
            ("A4 Slide", 1024, 768, "4:3", False),
        ],
    }),
})


PLATFORM_ALIASES: Mapping[Platform, Tuple[str, ...]] = MappingProxyType({
    Platform.INSTAGRAM: ("ig", "insta", "gram"),
    Platform.LINKEDIN: ("li",),
    Platform.FACEBOOK: ("fb", "meta"),
    Platform.TWITTER: ("x", "tweet"),
    Platform.YOUTUBE: ("yt", "tube"),
    Platform.TIKTOK: ("tt", "tok"),
    Platform.PRINT: ("poster", "flyer", "brochure", "leaflet", "pamphlet"),
    Platform.WEB: ("website", "site", "landing", "display"),
    Platform.EMAIL: ("newsletter", "mail"),
    Platform.PRESENTATION: ("slides", "deck", "pitch", "powerpoint", "ppt", "keynote"),
})

CONTENT_TYPE_ALIASES: Mapping[ContentType, Tuple[str, ...]] = MappingProxyType({
    ContentType.POST: ("image", "photo", "static", "feed"),
    ContentType.STORY: ("stories",),
    ContentType.REEL: ("reels", "short", "shorts"),
    ContentType.CAROUSEL: ("carousels", "slider", "swipe"),
    ContentType.BANNER: ("banners", "header", "cover"),
    ContentType.AD: ("ads", "advertisement", "sponsored", "promoted"),
    ContentType.THUMBNAIL: ("thumbnails", "thumb"),
    ContentType.SLIDE: ("slides", "presentation"),
    ContentType.FLYER: ("flyers", "leaflet"),
    ContentType.POSTER: ("posters",),
    ContentType.VIDEO: ("videos", "motion", "animation"),
})

# Shorter names only match exactly or through an alias
MIN_PARTIAL_MATCH_LENGTH = 3


def _letters(value: object) -> str:
    return re.sub(r"[^a-z]", "", str(value).lower())


def normalize_platform(value: object) -> Optional[Platform]:
    """
    Resolve a user-typed platform name.

    Tries the exact name, then the alias table, then a containment match
    in either direction ("Twitter/X" -> twitter).

    Returns:
        The platform, or None if nothing matches
    """
    name = _letters(value)
    if not name:
        return None
    if name in {p.value for p in Platform}:
        return Platform(name)

    for platform, aliases in PLATFORM_ALIASES.items():
        if name in aliases:
            return platform

    if len(name) >= MIN_PARTIAL_MATCH_LENGTH:
        for platform in Platform:
            if platform.value in name or name in platform.value:
                return platform
    return None


def normalize_content_type(value: object) -> Optional[ContentType]:
    """Resolve a user-typed content type by exact name or alias; None otherwise."""
    name = _letters(value)
    if name in {c.value for c in ContentType}:
        return ContentType(name)

    for content_type, aliases in CONTENT_TYPE_ALIASES.items():
        if name in aliases:
            return content_type
    return None


def content_types_for(platform: str) -> List[str]:
    """Content types that have canvas sizes on a platform, in table order."""
    return list(PLATFORM_DIMENSIONS.get(platform, {}))


class DimensionsLookup(Protocol):
    """Anything that can list canvas sizes for a platform."""

    def lookup(self, platform: str, content_type: Optional[str] = None) -> List[Dimension]:
        ...


class PlatformDimensionsTable:
    """
    Default in-process dimensions lookup.

    Usage:
        >>> table = PlatformDimensionsTable()
        >>> table.lookup("instagram", "story")[0].label
        'Story'
    """

    def __init__(self, tables: Optional[Mapping[str, Mapping[str, Tuple[Dimension, ...]]]] = None):
        self.tables = tables if tables is not None else PLATFORM_DIMENSIONS

    def lookup(self, platform: str, content_type: Optional[str] = None) -> List[Dimension]:
        """
        Dimensions for a platform, narrowed to a content type when known.

        Without a matching content type every size of the platform is
        returned once, keyed by WxH, in table order.
        """
        platform_dims = self.tables.get(platform)
        if not platform_dims:
            return []

        if content_type and content_type in platform_dims:
            return list(platform_dims[content_type])

        seen = set()
        unique: List[Dimension] = []
        for dims in platform_dims.values():
            for dim in dims:
                key = f"{dim.width}x{dim.height}"
                if key not in seen:
                    seen.add(key)
                    unique.append(dim)
        return unique

    def default_dimension(self, platform: str, content_type: Optional[str] = None) -> Optional[Dimension]:
        dims = self.lookup(platform, content_type)
        return next((d for d in dims if d.is_default), dims[0] if dims else None)
