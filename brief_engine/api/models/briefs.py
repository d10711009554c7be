"""
Request and response models for the brief endpoints.
"""
from pydantic import BaseModel, Field
from typing import Any, List, Optional

from brief_engine.core.brief_orchestrator import TurnResult
from brief_engine.models.brief import LiveBrief
from brief_engine.models.inference import InferenceResult
from brief_engine.models.question import ClarifyingQuestion


class InferenceResponse(BaseModel):
    """Stateless inference output for a single message."""
    inference: InferenceResult
    summary: str
    clarifying_question: Optional[ClarifyingQuestion] = None


class DraftMessageRequest(BaseModel):
    message: str = Field(..., description="The user's chat message")
    brand_audiences: Optional[List[Any]] = Field(
        None, description="Saved audience profiles for the brand (camelCase keys accepted)"
    )


class FieldOverrideRequest(BaseModel):
    value: Optional[Any] = Field(None, description="New value; null clears the field")


class TurnResponse(BaseModel):
    """
    Result of one processed message.
    `degraded` is true when the turn failed and the brief was left unchanged.
    """
    brief: LiveBrief
    inference: Optional[InferenceResult] = None
    summary: str
    clarifying_question: Optional[ClarifyingQuestion] = None
    duration_ms: float
    degraded: bool = False

    @classmethod
    def from_result(cls, result: TurnResult) -> "TurnResponse":
        return cls(
            brief=result.brief,
            inference=result.inference,
            summary=result.summary,
            clarifying_question=result.clarifying_question,
            duration_ms=round(result.duration_ms, 2),
            degraded=result.degraded,
        )
