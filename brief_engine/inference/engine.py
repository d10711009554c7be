"""
Inference Engine
Turns one user message (plus a short window of history) into an InferenceResult.

Pipeline:
    context text → platform / intent / task type / content type registries
                 → quantity + duration extractors
                 → topic (current message only)
                 → audience matcher
"""
from typing import Any, List, Optional, Sequence

from loguru import logger

from brief_engine.config import settings
from brief_engine.inference.audience import match_audience
from brief_engine.inference.field_inferencer import infer_field, saturating_add
from brief_engine.inference.patterns import (
    CONTENT_TYPE_PATTERNS,
    INTENT_PATTERNS,
    PLATFORM_PATTERNS,
    TASK_TYPE_PATTERNS,
)
from brief_engine.inference.quantity import extract_duration, extract_quantity
from brief_engine.inference.topic import extract_topic
from brief_engine.models.base import FieldValue
from brief_engine.models.inference import InferenceInput, InferenceResult
from brief_engine.models.taxonomy import TaskType

PLATFORM_MENTION_BOOST = 0.1


def build_context(
    message: str,
    conversation_history: Optional[Sequence[str]],
    window: int,
    max_length: Optional[int] = None,
) -> str:
    """Join the last `window` prior messages with the current one, each cut to `max_length`."""
    recent: List[str] = list(conversation_history or [])[-window:] if window > 0 else []
    if max_length is not None:
        recent = [m[:max_length] for m in recent]
        message = message[:max_length]
    return " ".join([*recent, message]).strip()


def _platform_named_in(platform: FieldValue, message: str) -> bool:
    """True when the first (most direct) rule for the winning platform matches the message."""
    rule = next((r for r in PLATFORM_PATTERNS if r.value == platform.value), None)
    return rule is not None and bool(rule.pattern.search(message))


def _boost_platform(platform: FieldValue, message: str) -> FieldValue:
    if platform.value is None or not _platform_named_in(platform, message):
        return platform
    boosted = saturating_add(platform.confidence, PLATFORM_MENTION_BOOST)
    if boosted == platform.confidence:
        return platform
    return FieldValue.scored(platform.value, boosted, inferred_from=f"{platform.inferred_from}, mention")


def infer_from_message(
    message: str,
    conversation_history: Optional[Sequence[str]] = None,
    brand_audiences: Optional[Sequence[Any]] = None,
    history_window: Optional[int] = None,
    platform_boost: Optional[bool] = None,
) -> InferenceResult:
    """
    Infer every brief slot from a message.

    Args:
        message: The current user message
        conversation_history: Prior user messages, most recent last
        brand_audiences: Saved audience profiles for the brand (dicts or AudienceProfile)
        history_window: Prior messages to include (defaults to settings)
        platform_boost: Boost a platform named in the current message (defaults to settings)

    Returns:
        InferenceResult; never raises for string input

    Example:
        >>> result = infer_from_message("Create 5 Instagram posts about our product launch")
        >>> result.platform.value
        'instagram'
    """
    window = settings.history_window_size if history_window is None else history_window
    boost = settings.enable_platform_mention_boost if platform_boost is None else platform_boost

    # Bounds the cost of every rule scan, whatever the entry point
    message = message[:settings.max_message_length]
    context = build_context(message, conversation_history, window, settings.max_message_length)

    platform = infer_field(context, PLATFORM_PATTERNS)
    if boost:
        platform = _boost_platform(platform, message)

    audience = match_audience(context, brand_audiences)

    result = InferenceResult(
        task_type=infer_field(context, TASK_TYPE_PATTERNS, default=TaskType.SINGLE_ASSET),
        intent=infer_field(context, INTENT_PATTERNS),
        platform=platform,
        content_type=infer_field(context, CONTENT_TYPE_PATTERNS),
        quantity=extract_quantity(context),
        duration=extract_duration(context),
        topic=extract_topic(message),
        audience_id=FieldValue.scored(
            audience.value.name if audience.value else None,
            audience.confidence,
            inferred_from=audience.inferred_from,
        ),
    )

    logger.debug(
        f"Inferred task_type={result.task_type.value} platform={result.platform.value} "
        f"intent={result.intent.value} topic={result.topic.value!r}"
    )
    return result


def infer(request: InferenceInput) -> InferenceResult:
    """Convenience wrapper for a validated InferenceInput."""
    return infer_from_message(
        request.message,
        conversation_history=request.conversation_history,
        brand_audiences=request.brand_audiences,
    )
