"""
Clarifying Question Selector

Decides whether a single follow-up question is worth asking, and which one.
Works on anything exposing `platform`, `intent` and `task_type` FieldValues,
so both a raw InferenceResult and a merged LiveBrief can be passed in.
"""
from typing import Any, Callable, Collection, List, Optional, Tuple

from brief_engine.models.base import CONFIDENCE_THRESHOLD, FieldValue
from brief_engine.models.question import ClarifyingQuestion, QuestionOption
from brief_engine.models.taxonomy import TaskType

Predicate = Callable[[Any], bool]


def _uncertain(field: FieldValue) -> bool:
    return field.value is None or field.confidence < CONFIDENCE_THRESHOLD


def _needs_platform(state: Any) -> bool:
    return _uncertain(state.platform)


def _needs_intent(state: Any) -> bool:
    # A single asset can go ahead without a stated goal
    return state.task_type.value == TaskType.MULTI_ASSET_PLAN and _uncertain(state.intent)


PLATFORM_QUESTION = ClarifyingQuestion(
    id="platform",
    field="platform",
    prompt="Which platform is this for?",
    options=(
        QuestionOption(label="Instagram", value="instagram"),
        QuestionOption(label="LinkedIn", value="linkedin"),
        QuestionOption(label="YouTube", value="youtube"),
        QuestionOption(label="Facebook", value="facebook"),
        QuestionOption(label="Twitter/X", value="twitter"),
        QuestionOption(label="TikTok", value="tiktok"),
        QuestionOption(label="Web/Banner", value="web"),
        QuestionOption(label="Print", value="print"),
    ),
    priority=1,
)

INTENT_QUESTION = ClarifyingQuestion(
    id="intent",
    field="intent",
    prompt="What's the main goal?",
    options=(
        QuestionOption(label="Get signups", value="signups", description="Drive registrations"),
        QuestionOption(label="Build authority", value="authority", description="Establish expertise"),
        QuestionOption(label="Increase awareness", value="awareness", description="Brand visibility"),
        QuestionOption(label="Drive sales", value="sales", description="Generate revenue"),
    ),
    priority=2,
)

QUESTION_TABLE: Tuple[Tuple[ClarifyingQuestion, Predicate], ...] = (
    (PLATFORM_QUESTION, _needs_platform),
    (INTENT_QUESTION, _needs_intent),
)


def generate_clarifying_questions(
    state: Any, already_asked: Collection[str] = ()
) -> List[ClarifyingQuestion]:
    """
    Return at most one question, the highest-priority one still open.

    Args:
        state: InferenceResult or LiveBrief
        already_asked: Question ids the user has already seen for this draft
    """
    candidates = [
        question for question, needed in QUESTION_TABLE
        if question.id not in already_asked and needed(state)
    ]
    candidates.sort(key=lambda q: q.priority)
    return candidates[:1]


def select_clarifying_question(
    state: Any, already_asked: Collection[str] = ()
) -> Optional[ClarifyingQuestion]:
    questions = generate_clarifying_questions(state, already_asked)
    return questions[0] if questions else None


def should_ask_clarifying_question(state: Any) -> bool:
    """True when platform is unclear, or a multi-asset plan has no clear goal."""
    return any(needed(state) for _, needed in QUESTION_TABLE)
