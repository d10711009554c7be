from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, Field
from brief_engine.models.base import FieldValue


class InferenceResult(BaseModel):
    """
    Everything one message told us about the task.
    Produced fresh on every call and never mutated.
    """
    model_config = ConfigDict(frozen=True)

    task_type: FieldValue = Field(default_factory=FieldValue.empty)
    intent: FieldValue = Field(default_factory=FieldValue.empty)
    platform: FieldValue = Field(default_factory=FieldValue.empty)
    content_type: FieldValue = Field(default_factory=FieldValue.empty)
    quantity: FieldValue = Field(default_factory=FieldValue.empty)   # day-normalized int
    duration: FieldValue = Field(default_factory=FieldValue.empty)   # "30 days", "2 weeks"
    topic: FieldValue = Field(default_factory=FieldValue.empty)
    audience_id: FieldValue = Field(default_factory=FieldValue.empty)


class InferenceInput(BaseModel):
    message: str
    conversation_history: List[str] = Field(
        default_factory=list, description="Prior user messages, most recent last."
    )
    # Raw dicts on purpose: malformed audience entries are skipped, not rejected
    brand_audiences: Optional[List[Any]] = None
