"""FastAPI application factory."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from compensation_engine.api.routes import (
    compensation_router,
    differentials_router,
    health_router,
)
from compensation_engine.calculators.catalog import (
    DifferentialCatalog,
    DuplicateDifferentialTypeError,
    UnknownDifferentialTypeError,
    load_catalog,
)
from compensation_engine.calculators.validation import CompensationRules
from compensation_engine.config import settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    # Startup
    logger.info(
        "Compensation engine %s serving %d differential types",
        settings.engine_version,
        len(app.state.catalog),
    )
    yield
    # Shutdown
    logger.info("Compensation engine shutting down")


def create_app(
    catalog: DifferentialCatalog | None = None,
    rules: CompensationRules | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    The catalog is loaded once here and shared read-only by all requests.
    """
    app = FastAPI(
        title="Compensation Engine API",
        description="Nursing compensation and shift differential calculations",
        version=settings.engine_version,
        lifespan=lifespan,
    )
    app.state.catalog = catalog if catalog is not None else load_catalog(settings.catalog_path)
    app.state.rules = rules if rules is not None else settings.compensation_rules()

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    @app.exception_handler(UnknownDifferentialTypeError)
    async def unknown_differential_handler(
        request: Request, exc: UnknownDifferentialTypeError
    ) -> JSONResponse:
        """Reject differentials that are not in the catalog."""
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={
                "detail": str(exc),
                "code": "UNKNOWN_DIFFERENTIAL_TYPE",
            },
        )

    @app.exception_handler(DuplicateDifferentialTypeError)
    async def duplicate_differential_handler(
        request: Request, exc: DuplicateDifferentialTypeError
    ) -> JSONResponse:
        """Reject previews that list a differential type twice."""
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={
                "detail": str(exc),
                "code": "DUPLICATE_DIFFERENTIAL_TYPE",
            },
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "detail": "An unexpected error occurred",
                "code": "INTERNAL_ERROR",
            },
        )

    # Include routers
    app.include_router(health_router)
    app.include_router(differentials_router, prefix="/api/v1")
    app.include_router(compensation_router, prefix="/api/v1")

    return app


# Default app instance for uvicorn
app = create_app()
