"""
Brief Merger
Folds a fresh InferenceResult into the long-lived LiveBrief of a draft.

Policy:
    A stored field is only replaced by a non-empty value of strictly higher
    confidence, so what the brief knows never gets worse from one turn to the
    next. User overrides are the one path allowed to lower a confidence.
"""
from typing import Any, Callable, Dict, Optional, Sequence

from loguru import logger

from brief_engine.inference.audience import match_audience
from brief_engine.inference.summary import FALLBACK_SUMMARY, generate_task_summary
from brief_engine.models.audience import AudienceBrief, AudienceSource
from brief_engine.models.base import FieldValue
from brief_engine.models.brief import LiveBrief
from brief_engine.models.inference import InferenceResult
from brief_engine.models.taxonomy import Intent, TaskType
from brief_engine.services.dimensions import (
    DimensionsLookup,
    PlatformDimensionsTable,
    normalize_content_type,
    normalize_platform,
)

# Fields copied one-to-one from an InferenceResult
MERGEABLE_FIELDS = (
    "task_type",
    "intent",
    "platform",
    "content_type",
    "quantity",
    "duration",
    "topic",
)

# Summary confidence when no contributing field carries any
NEUTRAL_SUMMARY_CONFIDENCE = 0.5


class UnknownFieldError(ValueError):
    """Raised when an override names a field the brief does not have."""
    pass


class InvalidFieldValueError(ValueError):
    """Raised when an override value does not fit the field."""
    pass


def _to_audience(value: Any) -> AudienceBrief:
    if isinstance(value, AudienceBrief):
        return value.model_copy(update={"source": AudienceSource.CUSTOM})
    if isinstance(value, dict):
        return AudienceBrief.model_validate({**value, "source": AudienceSource.CUSTOM})
    return AudienceBrief(name=str(value), source=AudienceSource.CUSTOM)


def _enum(enum_cls) -> Callable[[Any], Any]:
    return lambda value: enum_cls(str(value).strip().lower())


def _normalized(normalize: Callable[[Any], Any], kind: str) -> Callable[[Any], Any]:
    def coerce(value: Any) -> Any:
        resolved = normalize(value)
        if resolved is None:
            raise ValueError(f"unknown {kind}: {value!r}")
        return resolved
    return coerce


def _to_quantity(value: Any) -> int:
    quantity = int(value)
    if quantity < 0:
        raise ValueError("quantity must not be negative")
    return quantity


# Field name -> converter for user-supplied values
FIELD_COERCERS: Dict[str, Callable[[Any], Any]] = {
    "task_summary": str,
    "task_type": _enum(TaskType),
    "intent": _enum(Intent),
    "platform": _normalized(normalize_platform, "platform"),
    "content_type": _normalized(normalize_content_type, "content type"),
    "quantity": _to_quantity,
    "duration": str,
    "topic": str,
    "audience": _to_audience,
}


def _summary_confidence(merged: InferenceResult) -> float:
    confidences = [
        f.confidence
        for f in (merged.platform, merged.task_type, merged.topic)
        if f.confidence > 0
    ]
    if not confidences:
        return NEUTRAL_SUMMARY_CONFIDENCE
    return sum(confidences) / len(confidences)


class BriefMerger:
    """
    Applies inference results and user overrides to LiveBriefs.

    Every method returns a new brief; the brief passed in is never modified.

    Usage:
        >>> merger = BriefMerger()
        >>> brief = merger.apply(LiveBrief.create_empty("d1"), inference, message_text=msg)
    """

    def __init__(self, dimensions: DimensionsLookup | None = None):
        """
        Args:
            dimensions: Lookup used to derive canvas sizes (default table if None)
        """
        self.dimensions = dimensions or PlatformDimensionsTable()

    def _derive_dimensions(self, platform: Optional[str], content_type: Optional[str]) -> list:
        if not platform:
            return []
        return self.dimensions.lookup(platform, content_type)

    def apply(
        self,
        brief: LiveBrief,
        inference: InferenceResult,
        brand_audiences: Optional[Sequence[Any]] = None,
        message_text: str = "",
    ) -> LiveBrief:
        """
        Merge one turn's inference into the brief.

        Args:
            brief: Current brief for the draft
            inference: Result for the latest message
            brand_audiences: Brand audience profiles for re-matching the audience
            message_text: The latest message only; audience matching runs on it

        Returns:
            Updated copy of the brief
        """
        updates: Dict[str, Any] = {}

        for name in MERGEABLE_FIELDS:
            incoming: FieldValue = getattr(inference, name)
            current: FieldValue = getattr(brief, name)
            if incoming.value is not None and incoming.confidence > current.confidence:
                logger.debug(
                    f"[{brief.id}] {name}: {current.value!r} ({current.confidence:.2f}) "
                    f"-> {incoming.value!r} ({incoming.confidence:.2f})"
                )
                updates[name] = incoming

        if "platform" in updates or "content_type" in updates:
            platform = updates.get("platform", brief.platform).value
            if platform:
                content_type = updates.get("content_type", brief.content_type).value
                updates["dimensions"] = self._derive_dimensions(platform, content_type)

        audience = match_audience(message_text, brand_audiences)
        if audience.value is not None and audience.confidence > brief.audience.confidence:
            updates["audience"] = audience

        # Summary describes the merged brief, not just this turn
        merged = InferenceResult(**{name: updates.get(name, getattr(brief, name)) for name in MERGEABLE_FIELDS})
        summary = generate_task_summary(merged)
        if summary != FALLBACK_SUMMARY or brief.task_summary.value is None:
            if summary == FALLBACK_SUMMARY and merged.topic.value:
                summary = merged.topic.value
            confidence = _summary_confidence(merged)
            if confidence > brief.task_summary.confidence:
                updates["task_summary"] = FieldValue.scored(summary, confidence, inferred_from="summary")

        updated = brief.model_copy(update=updates, deep=True)
        updated.touch()
        return updated

    def override_field(self, brief: LiveBrief, field: str, value: Any) -> LiveBrief:
        """
        Set a field from explicit user input, or clear it when `value` is None.

        The stored value becomes CONFIRMED at confidence 1.0 regardless of
        what was there before.

        Raises:
            UnknownFieldError: `field` is not an overridable brief field
            InvalidFieldValueError: `value` cannot be converted for the field
        """
        coerce = FIELD_COERCERS.get(field)
        if coerce is None:
            raise UnknownFieldError(f"Unknown brief field: {field}")

        if value is None:
            new_value = FieldValue.empty()
        else:
            try:
                new_value = FieldValue.confirmed(coerce(value))
            except (TypeError, ValueError) as e:
                raise InvalidFieldValueError(f"Invalid value for {field}: {value!r}") from e

        updates: Dict[str, Any] = {field: new_value}
        if field in ("platform", "content_type"):
            platform = new_value.value if field == "platform" else brief.platform.value
            content_type = new_value.value if field == "content_type" else brief.content_type.value
            updates["dimensions"] = self._derive_dimensions(platform, content_type)

        updated = brief.model_copy(update=updates, deep=True)
        updated.touch()
        return updated

    def confirm_field(self, brief: LiveBrief, field: str) -> LiveBrief:
        """Promote the field's current value to CONFIRMED."""
        if field not in FIELD_COERCERS:
            raise UnknownFieldError(f"Unknown brief field: {field}")

        current: FieldValue = getattr(brief, field)
        if current.value is None:
            raise InvalidFieldValueError(f"Nothing to confirm for {field}")

        value = current.value
        if isinstance(value, AudienceBrief) and value.source == AudienceSource.INFERRED:
            value = value.model_copy(update={"source": AudienceSource.SELECTED})

        updated = brief.model_copy(update={field: FieldValue.confirmed(value)}, deep=True)
        updated.touch()
        return updated


_default_merger = BriefMerger()


def apply_inference_to_brief(
    brief: LiveBrief,
    inference: InferenceResult,
    brand_audiences: Optional[Sequence[Any]] = None,
    message_text: str = "",
) -> LiveBrief:
    """Merge with the default dimensions table."""
    return _default_merger.apply(brief, inference, brand_audiences, message_text)
