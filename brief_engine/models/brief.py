from typing import List
from pydantic import BaseModel, ConfigDict, Field, computed_field
from brief_engine.models.base import FieldValue, FieldSource, TimestampedModel
from brief_engine.models.taxonomy import TaskType


class Dimension(BaseModel):
    model_config = ConfigDict(frozen=True)

    width: int = Field(gt=0)
    height: int = Field(gt=0)
    label: str
    aspect_ratio: str
    is_default: bool = False


class LiveBrief(TimestampedModel):
    """
    The designer brief being built for one draft, turn by turn.

    Only the BriefMerger writes the inferred slots, and it replaces them
    rather than editing them in place. The asked-question log is the one
    list appended to directly, via record_question.
    """
    id: str = Field(..., description="Draft identifier")

    task_summary: FieldValue = Field(default_factory=FieldValue.empty)

    task_type: FieldValue = Field(default_factory=FieldValue.empty)
    intent: FieldValue = Field(default_factory=FieldValue.empty)
    platform: FieldValue = Field(default_factory=FieldValue.empty)
    content_type: FieldValue = Field(default_factory=FieldValue.empty)
    quantity: FieldValue = Field(default_factory=FieldValue.empty)
    duration: FieldValue = Field(default_factory=FieldValue.empty)
    topic: FieldValue = Field(default_factory=FieldValue.empty)
    audience: FieldValue = Field(default_factory=FieldValue.empty)

    # Derived from platform + content type, never inferred directly
    dimensions: List[Dimension] = Field(default_factory=list)

    # Question ids already surfaced to the user for this draft
    clarifying_questions_asked: List[str] = Field(default_factory=list)

    @classmethod
    def create_empty(cls, draft_id: str) -> "LiveBrief":
        return cls(id=draft_id)

    @computed_field
    @property
    def completion_percentage(self) -> int:
        core = [
            self.task_summary,
            self.task_type,
            self.intent,
            self.platform,
            self.audience,
            self.topic,
        ]
        filled = sum(
            1 for f in core
            if f.value is not None and f.source in (FieldSource.INFERRED, FieldSource.CONFIRMED)
        )
        return round(filled / len(core) * 100)

    @computed_field
    @property
    def is_ready_for_designer(self) -> bool:
        required = [self.task_summary, self.intent, self.platform, self.audience]
        if any(f.value is None or f.confidence < 0.7 for f in required):
            return False
        return len(self.dimensions) > 0

    @property
    def is_multi_asset(self) -> bool:
        return self.task_type.value == TaskType.MULTI_ASSET_PLAN

    def record_question(self, question_id: str) -> None:
        if question_id not in self.clarifying_questions_asked:
            self.clarifying_questions_asked.append(question_id)
