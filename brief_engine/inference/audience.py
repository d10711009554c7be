"""
Audience Matching

Resolves who the work is for: an audience named in the text, a known
demographic, one of the brand's saved audience profiles, or the brand's
primary audience as a low-confidence fallback.
"""
import re
from typing import Any, Iterable, List, Optional, Tuple

from loguru import logger
from pydantic import ValidationError

from brief_engine.models.audience import AudienceBrief, AudienceProfile
from brief_engine.models.base import FieldValue
from brief_engine.utils.text import capitalize_first, clean_phrase, collapse_whitespace

EXPLICIT_CONFIDENCE = 0.85
PROFILE_CONFIDENCE = 0.85
PRIMARY_FALLBACK_CONFIDENCE = 0.6

AGE_RANGE_PATTERN = re.compile(r"(?:ages?|aged)\s*(\d+)\s*(?:-|–|to)\s*(\d+)", re.IGNORECASE)

_PEOPLE_NOUNS = (
    r"owners|founders|parents|moms|dads|families|students|professionals|developers"
    r"|engineers|designers|marketers|executives|leaders|managers|customers|clients"
    r"|users|buyers|shoppers|travell?ers|millennials|teens|teenagers|kids|women|men"
    r"|people|seniors|retirees|entrepreneurs|creators|athletes|gamers|homeowners"
    r"|investors|nurses|doctors|teachers|audiences?"
)

AUDIENCE_TEXT_PATTERNS: Tuple[re.Pattern, ...] = (
    re.compile(
        r"\b(?:targeting|target\s+audience\s+(?:is|are)|aimed\s+at|audience\s*(?::|is|are)|reaching)"
        r"\s+(.+?)(?=\s*[.,;!?]|\s+(?:who|that)\b|$)",
        re.IGNORECASE,
    ),
    # "for" only counts when it names people ("for busy parents")
    re.compile(rf"\bfor\s+((?:[\w'-]+\s+){{0,4}}?(?:{_PEOPLE_NOUNS}))\b", re.IGNORECASE),
)

DEMOGRAPHIC_KEYWORDS: Tuple[Tuple[re.Pattern, str], ...] = tuple(
    (re.compile(p, re.IGNORECASE), name) for p, name in (
        (r"\b(millennials?)\b", "Millennials"),
        (r"\b(gen\s*z|generation\s*z)\b", "Gen Z"),
        (r"\b(boomers?|baby\s*boomers?)\b", "Baby Boomers"),
        (r"\b(gen\s*x|generation\s*x)\b", "Gen X"),
        (r"\b(small\s*business\s*owners?|smb\s*owners?)\b", "Small Business Owners"),
        (r"\b(enterprise|enterprises|large\s*companies)\b", "Enterprise Companies"),
        (r"\b(startups?|founders?)\b", "Startups & Founders"),
        (r"\b(developers?|engineers?|programmers?)\b", "Developers"),
        (r"\b(ctos?|ceos?|executives?|c-suite|decision\s*makers?)\b", "C-Suite Executives"),
        (r"\b(marketers?|marketing\s*(team|professionals?)?)\b", "Marketing Professionals"),
        (r"\b(designers?|creatives?)\b", "Designers & Creatives"),
        (r"\b(health\s*conscious|fitness\s*enthusiasts?|health\s*focused)\b", "Health-Conscious Consumers"),
        (r"\b(parents?|moms?|dads?|families)\b", "Parents & Families"),
        (r"\b(students?|college|university)\b", "Students"),
        (r"\b(professionals?|working\s*professionals?)\b", "Working Professionals"),
    )
)


def _age_range(text: str) -> Optional[str]:
    match = AGE_RANGE_PATTERN.search(text)
    return f"Ages {match.group(1)}-{match.group(2)}" if match else None


def extract_audience_from_text(text: str) -> Optional[AudienceBrief]:
    """Audience stated directly in the message, or a well-known demographic."""
    for pattern in AUDIENCE_TEXT_PATTERNS:
        match = pattern.search(text)
        if not match:
            continue
        raw = match.group(1).strip()
        if not 3 < len(raw) < 100:
            continue
        name = clean_phrase(collapse_whitespace(AGE_RANGE_PATTERN.sub(" ", raw)))
        return AudienceBrief(
            name=capitalize_first(name or raw),
            demographics=_age_range(text),
        )

    for pattern, name in DEMOGRAPHIC_KEYWORDS:
        if pattern.search(text):
            return AudienceBrief(name=name, demographics=_age_range(text))

    return None


def parse_audience_profiles(audiences: Optional[Iterable[Any]]) -> List[AudienceProfile]:
    """Validate raw brand audience records, skipping the malformed ones."""
    profiles: List[AudienceProfile] = []
    for index, raw in enumerate(audiences or []):
        if isinstance(raw, AudienceProfile):
            profiles.append(raw)
            continue
        try:
            profiles.append(AudienceProfile.model_validate(raw))
        except ValidationError as e:
            logger.warning(f"Skipping malformed audience profile at index {index}: {e.error_count()} error(s)")
    return profiles


def match_audience(text: str, audiences: Optional[Iterable[Any]] = None) -> FieldValue:
    """
    Match the audience for a request.

    Order: explicit text (0.85), brand profile keyword match (0.85), the
    brand's primary audience (0.6, stays pending), otherwise empty.
    """
    extracted = extract_audience_from_text(text)
    if extracted:
        return FieldValue.scored(extracted, EXPLICIT_CONFIDENCE, inferred_from="text")

    profiles = parse_audience_profiles(audiences)
    if not profiles:
        return FieldValue.empty()

    text_lower = text.lower()
    for profile in profiles:
        keyword = next((k for k in profile.keywords if k in text_lower), None)
        if keyword:
            return FieldValue.scored(
                AudienceBrief.from_profile(profile), PROFILE_CONFIDENCE, inferred_from=f"profile:{keyword}"
            )

    primary = next((p for p in profiles if p.is_primary), None)
    if primary:
        return FieldValue.scored(
            AudienceBrief.from_profile(primary), PRIMARY_FALLBACK_CONFIDENCE, inferred_from="primary"
        )

    return FieldValue.empty()
