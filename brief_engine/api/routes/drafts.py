"""
Draft Endpoints

Turn processing, brief retrieval and user overrides for a draft's LiveBrief.
"""
from fastapi import APIRouter, Depends, HTTPException, Response, status

from brief_engine.api.dependencies import get_orchestrator
from brief_engine.api.models.briefs import DraftMessageRequest, FieldOverrideRequest, TurnResponse
from brief_engine.core.brief_merger import InvalidFieldValueError, UnknownFieldError
from brief_engine.core.brief_orchestrator import BriefNotFoundError, BriefOrchestrator
from brief_engine.models.brief import LiveBrief

router = APIRouter(prefix="/drafts", tags=["Drafts"])


def _not_found(e: BriefNotFoundError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


def _unprocessable(e: ValueError) -> HTTPException:
    return HTTPException(status_code=422, detail=str(e))


@router.post("/{draft_id}/messages", response_model=TurnResponse)
async def post_message(
    draft_id: str,
    payload: DraftMessageRequest,
    orchestrator: BriefOrchestrator = Depends(get_orchestrator),
):
    """
    Process a chat message for a draft.

    Creates the brief on the first message. Always returns 200; a failed
    turn comes back with `degraded: true` and the brief unchanged.
    """
    result = await orchestrator.process_message(
        draft_id, payload.message, brand_audiences=payload.brand_audiences
    )
    return TurnResponse.from_result(result)


@router.get("/{draft_id}", response_model=LiveBrief)
async def get_draft(draft_id: str, orchestrator: BriefOrchestrator = Depends(get_orchestrator)):
    try:
        return await orchestrator.get_brief(draft_id)
    except BriefNotFoundError as e:
        raise _not_found(e)


@router.put("/{draft_id}/fields/{field}", response_model=LiveBrief)
async def override_field(
    draft_id: str,
    field: str,
    payload: FieldOverrideRequest,
    orchestrator: BriefOrchestrator = Depends(get_orchestrator),
):
    """Set a field from user input (confirmed, confidence 1.0), or clear it with null."""
    try:
        return await orchestrator.override_field(draft_id, field, payload.value)
    except BriefNotFoundError as e:
        raise _not_found(e)
    except (UnknownFieldError, InvalidFieldValueError) as e:
        raise _unprocessable(e)


@router.post("/{draft_id}/fields/{field}/confirm", response_model=LiveBrief)
async def confirm_field(
    draft_id: str,
    field: str,
    orchestrator: BriefOrchestrator = Depends(get_orchestrator),
):
    try:
        return await orchestrator.confirm_field(draft_id, field)
    except BriefNotFoundError as e:
        raise _not_found(e)
    except (UnknownFieldError, InvalidFieldValueError) as e:
        raise _unprocessable(e)


@router.delete("/{draft_id}", status_code=status.HTTP_204_NO_CONTENT)
async def discard_draft(draft_id: str, orchestrator: BriefOrchestrator = Depends(get_orchestrator)):
    try:
        await orchestrator.discard(draft_id)
    except BriefNotFoundError as e:
        raise _not_found(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
