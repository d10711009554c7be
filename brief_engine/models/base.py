import datetime as dt
from enum import StrEnum
from typing import Any, Optional
from pydantic import BaseModel, Field, ConfigDict, field_serializer, model_validator

# Ask clarifying questions below this
CONFIDENCE_THRESHOLD = 0.75


class FieldSource(StrEnum):
    PENDING = "pending"
    INFERRED = "inferred"
    CONFIRMED = "confirmed"


class FieldValue(BaseModel):
    """
    One slot of a brief together with how sure we are about it.

    `source` follows the confidence: INFERRED at or above the threshold,
    PENDING below it. CONFIRMED is reserved for values the user set.
    """
    model_config = ConfigDict(frozen=True)

    value: Optional[Any] = None
    confidence: float = Field(default=0.0, ge=0, le=1.0)
    source: FieldSource = FieldSource.PENDING
    inferred_from: Optional[str] = Field(
        default=None, description="Patterns or rule that produced the value."
    )

    @model_validator(mode="after")
    def check_confidence_consistency(self):
        if self.value is None and self.confidence != 0:
            raise ValueError("an empty field must have zero confidence")
        if self.source == FieldSource.INFERRED and self.confidence < CONFIDENCE_THRESHOLD:
            raise ValueError(f"inferred fields need confidence >= {CONFIDENCE_THRESHOLD}")
        if self.source == FieldSource.PENDING and self.confidence >= CONFIDENCE_THRESHOLD:
            raise ValueError(f"pending fields need confidence < {CONFIDENCE_THRESHOLD}")
        if self.source == FieldSource.CONFIRMED and self.confidence != 1.0:
            raise ValueError("confirmed fields carry confidence 1.0")
        return self

    @classmethod
    def empty(cls) -> "FieldValue":
        return cls()

    @classmethod
    def scored(cls, value: Any, confidence: float, inferred_from: str | None = None) -> "FieldValue":
        """Build a field whose source is derived from the confidence threshold."""
        if value is None:
            return cls()
        confidence = min(1.0, max(0.0, confidence))
        source = FieldSource.INFERRED if confidence >= CONFIDENCE_THRESHOLD else FieldSource.PENDING
        return cls(value=value, confidence=confidence, source=source, inferred_from=inferred_from)

    @classmethod
    def confirmed(cls, value: Any) -> "FieldValue":
        return cls(value=value, confidence=1.0, source=FieldSource.CONFIRMED, inferred_from="user")

    @property
    def is_known(self) -> bool:
        return self.value is not None and self.source in (FieldSource.INFERRED, FieldSource.CONFIRMED)


class TimestampedModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    created_at: dt.datetime = Field(default_factory=lambda: dt.datetime.now(dt.UTC))
    updated_at: dt.datetime = Field(default_factory=lambda: dt.datetime.now(dt.UTC))

    @field_serializer("created_at", "updated_at")
    def serialize_dt(self, value: dt.datetime):
        return value.isoformat()

    def touch(self) -> None:
        self.updated_at = dt.datetime.now(dt.UTC)
