from brief_engine.models.base import CONFIDENCE_THRESHOLD, FieldSource, FieldValue
from brief_engine.models.taxonomy import ContentType, Intent, Platform, TaskType
from brief_engine.models.audience import AudienceBrief, AudienceProfile, AudienceSource
from brief_engine.models.inference import InferenceInput, InferenceResult
from brief_engine.models.question import ClarifyingQuestion, QuestionOption
from brief_engine.models.brief import Dimension, LiveBrief

__all__ = [
    "CONFIDENCE_THRESHOLD",
    "FieldSource",
    "FieldValue",
    "ContentType",
    "Intent",
    "Platform",
    "TaskType",
    "AudienceBrief",
    "AudienceProfile",
    "AudienceSource",
    "InferenceInput",
    "InferenceResult",
    "ClarifyingQuestion",
    "QuestionOption",
    "Dimension",
    "LiveBrief",
]
