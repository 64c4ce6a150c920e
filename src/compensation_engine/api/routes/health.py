"""Health check endpoints."""

from datetime import datetime, timezone

from fastapi import APIRouter, status
from pydantic import BaseModel

from compensation_engine.api.dependencies import Catalog
from compensation_engine.config import settings

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: datetime
    catalog: str
    differential_types: int
    engine_version: str


@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
)
async def health_check(catalog: Catalog) -> HealthResponse:
    """Check API health and catalog availability."""
    catalog_status = "loaded" if len(catalog) > 0 else "empty"

    return HealthResponse(
        status="healthy" if catalog_status == "loaded" else "degraded",
        timestamp=datetime.now(timezone.utc),
        catalog=catalog_status,
        differential_types=len(catalog),
        engine_version=settings.engine_version,
    )


@router.get("/ready", status_code=status.HTTP_200_OK)
async def readiness_check() -> dict[str, str]:
    """Readiness check for container orchestration."""
    return {"status": "ready"}


@router.get("/live", status_code=status.HTTP_200_OK)
async def liveness_check() -> dict[str, str]:
    """Liveness check for container orchestration."""
    return {"status": "alive"}
