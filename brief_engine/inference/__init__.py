from brief_engine.inference.field_inferencer import infer_field
from brief_engine.inference.quantity import extract_duration, extract_quantity
from brief_engine.inference.topic import extract_topic
from brief_engine.inference.audience import match_audience
from brief_engine.inference.engine import infer_from_message
from brief_engine.inference.summary import generate_task_summary
from brief_engine.inference.questions import (
    generate_clarifying_questions,
    select_clarifying_question,
    should_ask_clarifying_question,
)

__all__ = [
    "infer_field",
    "extract_duration",
    "extract_quantity",
    "extract_topic",
    "match_audience",
    "infer_from_message",
    "generate_task_summary",
    "generate_clarifying_questions",
    "select_clarifying_question",
    "should_ask_clarifying_question",
]
