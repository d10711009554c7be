"""
Health and Readiness Endpoints

Kubernetes-compatible health probes for load balancers and orchestration.
"""
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from loguru import logger

router = APIRouter(tags=["Health"])

# API version - single source of truth
API_VERSION = "0.4.0"


@router.get("/health")
async def health_check():
    """
    Basic health check endpoint.

    Returns 200 if service is running.
    """
    return {
        "status": "healthy",
        "service": "brief-engine",
        "version": API_VERSION
    }


@router.get("/ready")
async def readiness_check(request: Request):
    """
    Readiness probe - checks the orchestrator and its brief store.

    Returns 200 if ready, 503 if not ready.
    """
    orchestrator = getattr(request.app.state, "orchestrator", None)
    if orchestrator is None:
        return JSONResponse(
            status_code=503,
            content={
                "status": "not_ready",
                "reason": "Orchestrator not initialized"
            }
        )

    try:
        draft_ids = await orchestrator.store.list_ids()
    except Exception as e:
        logger.error(f"Readiness check failed: {e}")
        return JSONResponse(
            status_code=503,
            content={
                "status": "not_ready",
                "reason": str(e)
            }
        )

    return {
        "status": "ready",
        "orchestrator": "initialized",
        "drafts": len(draft_ids)
    }


@router.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "service": "Brief Engine API",
        "version": API_VERSION,
        "endpoints": {
            "health": "/health",
            "ready": "/ready",
            "inference": "/inference (POST)",
            "draft_messages": "/drafts/{draft_id}/messages (POST)",
            "draft": "/drafts/{draft_id} (GET, DELETE)",
            "field_override": "/drafts/{draft_id}/fields/{field} (PUT)",
            "field_confirm": "/drafts/{draft_id}/fields/{field}/confirm (POST)"
        }
    }
