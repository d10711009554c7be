"""
Topic Extraction

Heuristic phrase extraction for "what is this about". Runs on the current
message only; a refinement of an existing plan never yields a topic.
"""
import re
from typing import Iterable, Optional, Tuple

from loguru import logger

from brief_engine.models.base import FieldValue
from brief_engine.utils.text import capitalize_first, clean_phrase, collapse_whitespace

# Refinements of an existing plan ("instead of that, make it more playful")
MODIFICATION_PATTERNS: Tuple[re.Pattern, ...] = tuple(re.compile(p, re.IGNORECASE) for p in (
    r"\binstead\b",
    r"\bmake\s+(?:it|them|this|these|that)\s+(?:more|less|a\s+bit|a\s+little)\b",
    r"\b(?:fewer|less)\s+(?:\w+\s+)?(?:posts?|slides?|images?|items?|graphics?|words?|text)\b",
    r"\bmore\s+(?:posts?|slides?|images?|graphics?)\b",
    r"\bi[’']?d\s+rather\b",
    r"\bi\s+would\s+rather\b",
    r"\brather\s+than\b",
    r"\bchange\s+(?:it|that|this|them)\b",
    r"\btone\s+it\s+(?:down|up)\b",
))

_CONTENT_NOUNS = (
    r"posts?|content|ads?|banners?|campaign|videos?|reels?|carousels?|stor(?:y|ies)"
    r"|flyers?|posters?|graphics?|images?|thumbnails?|slides?"
)

# A topic phrase ends at a connective, punctuation or the end of the message
_END = r"(?=\s+(?:to|for|that|which|on|and|with|so|about|regarding)\b|\s*[,.!?;:]|$)"

EXPLICIT_PATTERNS: Tuple[re.Pattern, ...] = tuple(re.compile(p, re.IGNORECASE) for p in (
    rf"\b(?:about|on|regarding)\s+(.+?){_END}",
    rf"\b(?:{_CONTENT_NOUNS})\s+for\s+(.+?){_END}",
    rf"\b(?:promoting|promote|launching|launch)\s+(.+?){_END}",
    rf"\b(?:introduces|introducing|introduce)\s+(.+?){_END}",
))

QUOTED_PATTERN = re.compile(r"\"([^\"]+)\"|“([^”]+)”|(?<!\w)'([^']+)'(?!\w)")

PRODUCT_PATTERN = re.compile(
    r"\b(?:my|our|the)\s+([\w\s-]{1,60}?)\s+"
    r"(?:app|product|service|platform|business|company|brand|tool|shop|store)\b",
    re.IGNORECASE,
)

DESCRIPTIVE_PATTERNS: Tuple[re.Pattern, ...] = tuple(re.compile(p, re.IGNORECASE) for p in (
    r"\b(?:that|which)\s+(?:shows?|showcases?|highlights?|features?|captures?|explains?"
    r"|celebrates?|demonstrates?)\s+(.+?)(?=\s*[,.!?;:]|$)",
    r"\b(?:showing|showcasing|highlighting|featuring|capturing|celebrating|demonstrating)"
    r"\s+(.+?)(?=\s*[,.!?;:]|$)",
))

ADJECTIVAL_PATTERN = re.compile(
    rf"\b(?:a|an)\s+((?:[a-z][\w-]*\s+){{2,4}}?)({_CONTENT_NOUNS})\b", re.IGNORECASE
)

# Words that never make a topic on their own
NOISE_WORDS = frozenset({
    "instagram", "insta", "ig", "linkedin", "facebook", "fb", "twitter", "x", "tiktok",
    "youtube", "yt", "print", "web", "website", "email", "newsletter", "presentation",
    "social", "media", "post", "posts", "story", "stories", "reel", "reels", "carousel",
    "carousels", "banner", "banners", "ad", "ads", "content", "video", "videos",
    "graphic", "graphics", "image", "images", "slide", "slides", "deck", "feed",
})

RESIDUAL_STRIP_PATTERNS: Tuple[re.Pattern, ...] = tuple(re.compile(p, re.IGNORECASE) for p in (
    r"\b\d+[\s-]*(?:days?|weeks?|months?)\b",
    r"\b\d+\b",
    r"\b(?:create|make|design|build|need|want|help|me|with|a|an|the|for|my|our|please|can"
    r"|could|would|i|i'm|im|we|you|some|just|like|to|do|give|us|it|is|are|be|of|and"
    r"|hi|hey|hello|new)\b",
    r"\b(?:instagram|insta|ig|linkedin|facebook|fb|twitter|tweet|tiktok|youtube|yt|posts?"
    r"|stor(?:y|ies)|reels?|carousels?|banners?|ads?|content|plan|calendar|schedule|campaign"
    r"|series|videos?|thumbnails?|slides?|flyers?|posters?|graphics?|images?|social|media"
    r"|email|newsletter|presentation|deck)\b",
    r"\b(?:drive|increase|boost|get|more|downloads?|signups?|awareness|sales|engagement"
    r"|authority|establish|grow|thought|leadership|educate|education|announce|announcement"
    r"|promote)\b",
    r"[.,!?;:\"'“”]",
))


def is_modification_message(message: str) -> bool:
    """True when the message refines an existing plan rather than describing a new one."""
    return any(p.search(message) for p in MODIFICATION_PATTERNS)


def _is_noise(phrase: str) -> bool:
    return all(word.lower() in NOISE_WORDS for word in phrase.split())


def _accept(raw: str, min_len: int, max_len: int) -> Optional[str]:
    phrase = clean_phrase(raw)
    if not (min_len <= len(phrase) <= max_len) or _is_noise(phrase):
        return None
    return capitalize_first(phrase)


def _first_capture(pattern: re.Pattern, text: str, min_len: int, max_len: int) -> Optional[str]:
    for match in pattern.finditer(text):
        captured = next((g for g in match.groups() if g), None)
        if captured and (phrase := _accept(captured, min_len, max_len)):
            return phrase
    return None


def _scan(patterns: Iterable[re.Pattern], text: str, min_len: int, max_len: int) -> Optional[str]:
    for pattern in patterns:
        if phrase := _first_capture(pattern, text, min_len, max_len):
            return phrase
    return None


def _adjectival_phrase(text: str) -> Optional[str]:
    for match in ADJECTIVAL_PATTERN.finditer(text):
        modifiers = [
            w for w in match.group(1).split()
            if w.lower() not in NOISE_WORDS and not w.isdigit()
        ]
        if len(modifiers) >= 2:
            if phrase := _accept(" ".join(modifiers + [match.group(2)]), 4, 60):
                return phrase
    return None


def _residual_phrase(text: str) -> Optional[str]:
    cleaned = text
    for pattern in RESIDUAL_STRIP_PATTERNS:
        cleaned = pattern.sub(" ", cleaned)
    cleaned = clean_phrase(collapse_whitespace(cleaned))
    if 3 <= len(cleaned) <= 40 and len(cleaned.split()) <= 6:
        return capitalize_first(cleaned)
    return None


def extract_topic(message: str) -> FieldValue:
    """
    Extract the subject of the request from the current message.

    Tries, in order: explicit "about X" style phrases (0.85), quoted text
    (0.9), product/service names (0.8), descriptive phrases (0.7) and the
    stop-word-stripped remainder (0.5).
    """
    if is_modification_message(message):
        logger.debug("Modification message detected, topic left pending")
        return FieldValue.empty()

    if topic := _scan(EXPLICIT_PATTERNS, message, 4, 60):
        return FieldValue.scored(topic, 0.85, inferred_from="explicit")

    if topic := _first_capture(QUOTED_PATTERN, message, 3, 60):
        return FieldValue.scored(topic, 0.9, inferred_from="quoted")

    if topic := _first_capture(PRODUCT_PATTERN, message, 3, 40):
        return FieldValue.scored(topic, 0.8, inferred_from="product")

    if topic := _scan(DESCRIPTIVE_PATTERNS, message, 4, 60) or _adjectival_phrase(message):
        return FieldValue.scored(topic, 0.7, inferred_from="descriptive")

    if topic := _residual_phrase(message):
        return FieldValue.scored(topic, 0.5, inferred_from="residual")

    return FieldValue.empty()
