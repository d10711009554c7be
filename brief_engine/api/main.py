"""
FastAPI Application

Main entry point for the Brief Engine API.
Handles application lifecycle and router mounting.
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI
from loguru import logger

from brief_engine.core.brief_orchestrator import BriefOrchestrator
from brief_engine.services.brief_store import InMemoryBriefStore
from brief_engine.utils.observability import configure_logging
from brief_engine.api.routes import health_router, inference_router, drafts_router
from brief_engine.api.routes.health import API_VERSION


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifecycle: startup and shutdown events.

    Startup:
    - Configure logging
    - Create the brief store and orchestrator

    Shutdown:
    - Release the orchestrator
    """
    configure_logging()
    logger.info("Starting Brief Engine API server...")

    store = InMemoryBriefStore()
    orchestrator = BriefOrchestrator(store=store)

    # Store in app state for access in routes
    app.state.store = store
    app.state.orchestrator = orchestrator

    logger.info("API server ready to receive messages")

    yield

    logger.info("Shutting down API server...")
    app.state.orchestrator = None
    logger.info("Shutdown complete")


# Create FastAPI application
app = FastAPI(
    title="Brief Engine API",
    description="Silent brief inference: turns chat messages into structured design briefs",
    version=API_VERSION,
    lifespan=lifespan
)

# Mount routers
app.include_router(health_router)
app.include_router(inference_router)
app.include_router(drafts_router)
