"""
Stateless Inference Endpoint

Runs the inference engine on one message without touching any draft.
"""
from fastapi import APIRouter

from brief_engine.api.models.briefs import InferenceResponse
from brief_engine.inference.engine import infer
from brief_engine.inference.questions import select_clarifying_question
from brief_engine.inference.summary import generate_task_summary
from brief_engine.models.inference import InferenceInput

router = APIRouter(tags=["Inference"])


@router.post("/inference", response_model=InferenceResponse)
def run_inference(payload: InferenceInput):
    """
    Infer brief slots from a message and its recent history.

    The clarifying question is computed from this message alone; nothing
    is recorded as asked.
    """
    inference = infer(payload)
    return InferenceResponse(
        inference=inference,
        summary=generate_task_summary(inference),
        clarifying_question=select_clarifying_question(inference),
    )
