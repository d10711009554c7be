"""
FastAPI Dependencies

Reusable dependencies for the brief routes.
"""

from fastapi import Request, HTTPException, status
from loguru import logger

from brief_engine.core.brief_orchestrator import BriefOrchestrator


def get_orchestrator(request: Request) -> BriefOrchestrator:
    """
    Dependency returning the orchestrator created at startup.

    Raises:
        HTTPException: 503 if the application has not finished starting
    """
    orchestrator = getattr(request.app.state, "orchestrator", None)
    if orchestrator is None:
        logger.error("Orchestrator requested before startup completed")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Service not initialized"
        )
    return orchestrator
