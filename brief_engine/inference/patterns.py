"""
Pattern Registries

Ordered (pattern, value, base confidence) tables, one per inferred field.
Built once at import time and never mutated; registry order is the
tie-break order used by the field inferencer.
"""
import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Tuple

from brief_engine.models.taxonomy import ContentType, Intent, Platform, TaskType


@dataclass(frozen=True)
class PatternRule:
    """One piece of evidence: if `pattern` matches, vote `value` with `confidence`."""
    pattern: re.Pattern
    value: str
    confidence: float

    @property
    def source(self) -> str:
        return self.pattern.pattern


Registry = Tuple[PatternRule, ...]


def _rule(regex: str, value: str, confidence: float) -> PatternRule:
    return PatternRule(re.compile(regex, re.IGNORECASE), value, confidence)


PLATFORM_PATTERNS: Registry = (
    # Instagram
    _rule(r"\b(instagram|insta|ig)\b", Platform.INSTAGRAM, 0.95),
    _rule(r"\b(story|stories)\b", Platform.INSTAGRAM, 0.7),
    _rule(r"\b(reel|reels)\b", Platform.INSTAGRAM, 0.85),
    _rule(r"\b(carousel)\b", Platform.INSTAGRAM, 0.6),

    # LinkedIn
    _rule(r"\b(linkedin|li)\b", Platform.LINKEDIN, 0.95),
    _rule(r"\b(professional|b2b|business)\s*(post|content)", Platform.LINKEDIN, 0.65),

    # Facebook
    _rule(r"\b(facebook|fb)\b", Platform.FACEBOOK, 0.95),

    # Twitter/X
    _rule(r"\b(twitter|tweet|x\s+post)\b", Platform.TWITTER, 0.95),

    # YouTube
    _rule(r"\b(youtube|yt)\b", Platform.YOUTUBE, 0.95),
    _rule(r"\b(thumbnail)\b", Platform.YOUTUBE, 0.75),

    # TikTok
    _rule(r"\b(tiktok|tik\s*tok)\b", Platform.TIKTOK, 0.95),

    # Print
    _rule(r"\b(print|poster|flyer|brochure|leaflet)\b", Platform.PRINT, 0.9),

    # Web
    _rule(r"\b(web|website|banner|display\s*ad|landing)\b", Platform.WEB, 0.85),

    # Email
    _rule(r"\b(email|newsletter|mail)\b", Platform.EMAIL, 0.9),

    # Presentation
    _rule(r"\b(presentation|slide|deck|pitch|powerpoint|keynote)\b", Platform.PRESENTATION, 0.9),
)

INTENT_PATTERNS: Registry = (
    # Signups / downloads / conversions: a specific action was requested
    _rule(r"\b(sign\s*up|signup|register|registration|join|subscribe)\b", Intent.SIGNUPS, 0.9),
    _rule(r"\b(get\s*(more\s*)?(users|members|subscribers))\b", Intent.SIGNUPS, 0.85),
    _rule(r"\b(grow\s*(my|our|the)?\s*(audience|list|base))\b", Intent.SIGNUPS, 0.75),
    _rule(r"\b(download|downloads|install|installs|app\s*download)\b", Intent.SIGNUPS, 0.9),
    _rule(
        r"\b(drive|increase|boost|get)\s*(more\s*)?(downloads?|installs?|signups?|registrations?)\b",
        Intent.SIGNUPS,
        0.95,
    ),

    # Authority / thought leadership
    _rule(r"\b(authority|thought\s*leader|expertise|expert)\b", Intent.AUTHORITY, 0.9),
    _rule(r"\b(establish|build|position)\s*(as|myself|ourselves|us)\b", Intent.AUTHORITY, 0.7),
    _rule(r"\b(industry\s*(leader|expert|insight))\b", Intent.AUTHORITY, 0.85),
    _rule(r"\b(thought\s*leadership)\b", Intent.AUTHORITY, 0.95),

    # Awareness
    _rule(r"\b(awareness|brand\s*awareness|visibility)\b", Intent.AWARENESS, 0.9),
    _rule(r"\b(get\s*(the\s*)?word\s*out|spread\s*the\s*word)\b", Intent.AWARENESS, 0.85),
    _rule(r"\b(introduce|introducing)\b", Intent.AWARENESS, 0.7),

    # Sales
    _rule(r"\b(sale|sales|sell|selling|purchase|buy|revenue)\b", Intent.SALES, 0.9),
    _rule(r"\b(convert|conversion|checkout|cart)\b", Intent.SALES, 0.85),
    _rule(r"\b(promo|promotion|discount|offer|deal)\b", Intent.SALES, 0.8),

    # Engagement
    _rule(r"\b(engage|engagement|interact|interaction)\b", Intent.ENGAGEMENT, 0.9),
    _rule(r"\b(community|followers|fans)\b", Intent.ENGAGEMENT, 0.7),
    _rule(r"\b(comments?|likes?|shares?)\b", Intent.ENGAGEMENT, 0.65),

    # Education
    _rule(r"\b(educate|education|teach|learn|tutorial|how\s*to)\b", Intent.EDUCATION, 0.9),
    _rule(r"\b(tips?|advice|guide|explain)\b", Intent.EDUCATION, 0.75),

    # Announcement: ranked below the conversion intents
    _rule(r"\b(announce|announcement|news|update|release)\b", Intent.ANNOUNCEMENT, 0.85),
    _rule(
        r"\b(launch|launching)\s*(my|our|the|a|an)?\s*(new\s*)?(product|feature|service|app|business)?\b",
        Intent.ANNOUNCEMENT,
        0.7,
    ),
)

TASK_TYPE_PATTERNS: Registry = (
    # Multi-asset plan, duration based
    _rule(
        r"\b(\d+)[\s-]*(day|week|month)s?[\s-]*(content\s*)?(plan|calendar|schedule)\b",
        TaskType.MULTI_ASSET_PLAN,
        0.95,
    ),
    _rule(
        r"\b(content\s*)?(plan|calendar|schedule)\s*for\s*(\d+)\s*(day|week|month)",
        TaskType.MULTI_ASSET_PLAN,
        0.95,
    ),
    _rule(r"\b(series|multiple|batch|set\s*of)\s*(post|content|asset)", TaskType.MULTI_ASSET_PLAN, 0.85),

    # Multi-asset plan, quantity based (3+ items, words allowed in between)
    _rule(
        r"\b([3-9]|\d{2,})\s+(?:\w+\s+){0,4}?(posts?|images?|graphics?|carousels?|assets?|slides?|banners?)\b",
        TaskType.MULTI_ASSET_PLAN,
        0.9,
    ),
    _rule(
        r"\b(several|many|few)\s+(?:\w+\s+){0,4}?(posts?|images?|graphics?|carousels?)\b",
        TaskType.MULTI_ASSET_PLAN,
        0.8,
    ),

    # Campaign
    _rule(r"\b(campaign|launch\s*campaign|marketing\s*campaign)\b", TaskType.CAMPAIGN, 0.9),

    # Single asset
    _rule(
        r"\b(a|an|one|1|single)\s*(post|image|graphic|banner|ad|flyer|poster|carousel|thumbnail)\b",
        TaskType.SINGLE_ASSET,
        0.85,
    ),
    _rule(r"\b(create|make|design)\s*(a|an|the)?\s*(post|image|graphic|thumbnail)\b", TaskType.SINGLE_ASSET, 0.7),
    # Two items is borderline: often one design with a variation
    _rule(r"\b(2|two)\s*(posts?|images?|graphics?|carousels?)\b", TaskType.SINGLE_ASSET, 0.6),
)

CONTENT_TYPE_PATTERNS: Registry = (
    _rule(r"\b(posts?|feed\s*posts?)\b", ContentType.POST, 0.85),
    _rule(r"\b(stor(y|ies))\b", ContentType.STORY, 0.9),
    _rule(r"\b(reels?)\b", ContentType.REEL, 0.9),
    _rule(r"\b(carousels?|slide\s*shows?|swipes?)\b", ContentType.CAROUSEL, 0.9),
    _rule(r"\b(banners?|headers?|covers?)\b", ContentType.BANNER, 0.85),
    _rule(r"\b(ads?|advertisements?|sponsored)\b", ContentType.AD, 0.85),
    _rule(r"\b(thumbnails?)\b", ContentType.THUMBNAIL, 0.9),
    _rule(r"\b(slides?|presentations?)\b", ContentType.SLIDE, 0.85),
    _rule(r"\b(flyers?|leaflets?)\b", ContentType.FLYER, 0.9),
    _rule(r"\b(posters?)\b", ContentType.POSTER, 0.9),
    _rule(r"\b(videos?|motion|animations?)\b", ContentType.VIDEO, 0.85),
)

# Field name -> registry, for callers that iterate over every table
REGISTRIES = MappingProxyType({
    "platform": PLATFORM_PATTERNS,
    "intent": INTENT_PATTERNS,
    "task_type": TASK_TYPE_PATTERNS,
    "content_type": CONTENT_TYPE_PATTERNS,
})
