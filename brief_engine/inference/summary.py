"""
Task Summary Generator

Builds the one-line title shown at the top of a brief, e.g.
"5 Instagram Posts - Product launch" or "LinkedIn Post for Authority".
"""
from typing import List, Optional

from brief_engine.models.base import CONFIDENCE_THRESHOLD
from brief_engine.models.inference import InferenceResult
from brief_engine.models.taxonomy import (
    CONTENT_TYPE_NAMES,
    PLATFORM_NAMES,
    ContentType,
    Intent,
    TaskType,
)
from brief_engine.utils.text import capitalize_first, clean_phrase

FALLBACK_SUMMARY = "New Brief"

INTENT_PHRASES: dict[Intent, str] = {
    Intent.SIGNUPS: "for Signups",
    Intent.AUTHORITY: "for Authority",
    Intent.AWARENESS: "for Awareness",
    Intent.SALES: "for Sales",
    Intent.ENGAGEMENT: "for Engagement",
    Intent.EDUCATION: "Educational",
    Intent.ANNOUNCEMENT: "Announcement",
}

PLURAL_LABELS: dict[ContentType, str] = {
    ContentType.CAROUSEL: "Carousels",
    ContentType.STORY: "Stories",
    ContentType.REEL: "Reels",
}


def format_topic(topic: Optional[str]) -> Optional[str]:
    """Cleaned, capitalized topic, or None when it is too short or too long to show."""
    if not topic:
        return None
    cleaned = clean_phrase(str(topic))
    if not 4 <= len(cleaned) <= 50:
        return None
    return capitalize_first(cleaned)


def _asset_label(inference: InferenceResult) -> Optional[str]:
    task_type = inference.task_type.value
    quantity = inference.quantity.value

    if task_type == TaskType.MULTI_ASSET_PLAN:
        if quantity and quantity >= 2:
            return PLURAL_LABELS.get(inference.content_type.value, "Posts")
        return "Content Plan"
    if task_type == TaskType.CAMPAIGN:
        return "Campaign"
    if inference.content_type.value:
        return CONTENT_TYPE_NAMES[inference.content_type.value]
    return None


def generate_task_summary(inference: InferenceResult) -> str:
    """
    Generate a human-readable task title.

    Layout: [duration or quantity] [platform] [content/task label] [intent] [- topic]
    """
    parts: List[str] = []

    if inference.duration.value:
        parts.append(str(inference.duration.value))
    elif (
        inference.quantity.value
        and inference.quantity.value >= 2
        and inference.task_type.value == TaskType.MULTI_ASSET_PLAN
    ):
        parts.append(str(inference.quantity.value))

    if inference.platform.value:
        parts.append(PLATFORM_NAMES[inference.platform.value])

    label = _asset_label(inference)
    if label:
        parts.append(label)
    elif inference.platform.value and len(parts) == 1:
        parts.append("Content")

    topic = format_topic(inference.topic.value)

    intent = inference.intent
    if intent.value and (len(parts) <= 1 or (topic is None and intent.confidence >= CONFIDENCE_THRESHOLD)):
        parts.append(INTENT_PHRASES[intent.value])

    if topic:
        parts.append(f"- {topic}" if parts else topic)

    return " ".join(parts) if parts else FALLBACK_SUMMARY
