"""
Quantity & Duration Extraction

Pulls "how much work" out of a request: a day-normalized count for
planning, and a human-readable duration for summaries.
"""
import re
from dataclasses import dataclass
from typing import Callable, Tuple

from brief_engine.models.base import FieldValue

DAYS_PER_UNIT = {"day": 1, "week": 7, "month": 30}

_ITEM_NOUNS = (
    r"posts?|pieces?|assets?|images?|graphics?|carousels?|slides?|banners?"
    r"|stories|story|reels?|videos?|ads?|flyers?|posters?|thumbnails?"
)


@dataclass(frozen=True)
class QuantityRule:
    pattern: re.Pattern
    unit: str | None  # None when the number counts items, not time
    confidence: float


# Time spans first, then item counts ("5 Instagram posts")
QUANTITY_RULES: Tuple[QuantityRule, ...] = (
    QuantityRule(re.compile(r"\b(\d+)[\s-]*days?\b", re.IGNORECASE), "day", 0.9),
    QuantityRule(re.compile(r"\b(\d+)[\s-]*weeks?\b", re.IGNORECASE), "week", 0.9),
    QuantityRule(re.compile(r"\b(\d+)[\s-]*months?\b", re.IGNORECASE), "month", 0.85),
    QuantityRule(re.compile(rf"\b(\d+)\s+(?:\w+\s+){{0,4}}?(?:{_ITEM_NOUNS})\b", re.IGNORECASE), None, 0.9),
)


@dataclass(frozen=True)
class DurationRule:
    pattern: re.Pattern
    format: Callable[[int], str]


DURATION_RULES: Tuple[DurationRule, ...] = (
    DurationRule(re.compile(r"\b(\d+)[\s-]*days?\b", re.IGNORECASE), lambda n: f"{n} days"),
    DurationRule(re.compile(r"\b(\d+)[\s-]*weeks?\b", re.IGNORECASE), lambda n: f"{n} weeks"),
    DurationRule(re.compile(r"\b(\d+)[\s-]*months?\b", re.IGNORECASE), lambda n: f"{n} months"),
)


def extract_quantity(text: str) -> FieldValue:
    """
    Extract a day-normalized quantity.

    Weeks count 7 days and months 30. The first matching rule decides;
    confidences are not aggregated across rules.

    Examples:
        "3 weeks" -> 21, "2 months" -> 60, "5 Instagram posts" -> 5
    """
    for rule in QUANTITY_RULES:
        match = rule.pattern.search(text)
        if not match:
            continue
        number = int(match.group(1))
        if rule.unit is not None:
            number *= DAYS_PER_UNIT[rule.unit]
        return FieldValue.scored(number, rule.confidence, inferred_from=match.group(0))

    return FieldValue.empty()


def extract_duration(text: str) -> FieldValue:
    """Extract a display duration such as "30 days" or "2 weeks"."""
    for rule in DURATION_RULES:
        match = rule.pattern.search(text)
        if match:
            return FieldValue.scored(rule.format(int(match.group(1))), 0.9, inferred_from=match.group(0))
    return FieldValue.empty()
