from typing import Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field


class QuestionOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    value: str
    description: Optional[str] = None


class ClarifyingQuestion(BaseModel):
    """A single follow-up prompt. Recomputed every turn, never persisted."""
    model_config = ConfigDict(frozen=True)

    id: str
    field: str
    prompt: str
    options: Tuple[QuestionOption, ...] = Field(..., min_length=1)
    priority: int = Field(ge=1)
