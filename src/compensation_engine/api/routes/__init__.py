"""API routes."""

from compensation_engine.api.routes.compensation import router as compensation_router
from compensation_engine.api.routes.differentials import router as differentials_router
from compensation_engine.api.routes.health import router as health_router

__all__ = ["compensation_router", "differentials_router", "health_router"]
