"""
API Routes

Modular route definitions for the Brief Engine API.
"""
from brief_engine.api.routes.health import router as health_router
from brief_engine.api.routes.inference import router as inference_router
from brief_engine.api.routes.drafts import router as drafts_router

__all__ = [
    "health_router",
    "inference_router",
    "drafts_router",
]
