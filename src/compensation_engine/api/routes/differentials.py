"""Differential catalog and preview endpoints."""

import logging

from fastapi import APIRouter, HTTPException, Path, status

from compensation_engine.api.dependencies import Catalog, Rules
from compensation_engine.api.schemas import (
    DifferentialConfigResponse,
    DifferentialPreviewRequest,
    DifferentialPreviewResponse,
    DifferentialTypesResponse,
    ErrorResponse,
)
from compensation_engine.calculators.breakdown import preview_differentials

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/differentials", tags=["differentials"])


# ============================================================================
# Catalog
# ============================================================================


@router.get("/types", response_model=DifferentialTypesResponse)
async def list_differential_types(catalog: Catalog) -> DifferentialTypesResponse:
    """List differential type keys grouped by category."""
    return DifferentialTypesResponse(**catalog.types_by_category())


@router.get("/config", response_model=dict[str, DifferentialConfigResponse])
async def get_catalog_config(catalog: Catalog) -> dict[str, DifferentialConfigResponse]:
    """Get the full differential catalog."""
    return {
        key: DifferentialConfigResponse.from_config(config)
        for key, config in catalog.configs.items()
    }


@router.get(
    "/config/{differential_type}",
    response_model=DifferentialConfigResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_differential_config(
    catalog: Catalog,
    differential_type: str = Path(..., description="Catalog key, e.g. Night"),
) -> DifferentialConfigResponse:
    """Get the config of one differential type."""
    config = catalog.get(differential_type)
    if config is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Differential type '{differential_type}' not found",
        )
    return DifferentialConfigResponse.from_config(config)


# ============================================================================
# Preview
# ============================================================================


@router.post(
    "/preview",
    response_model=DifferentialPreviewResponse,
    responses={422: {"model": ErrorResponse}},
)
async def preview(
    catalog: Catalog,
    rules: Rules,
    payload: DifferentialPreviewRequest,
) -> DifferentialPreviewResponse:
    """
    Price a list of differentials against base pay.

    Nothing is persisted. Values outside their catalog range are still priced
    and reported in ``warnings``; unknown types are rejected.
    """
    instances = [item.to_instance() for item in payload.differentials]
    warnings = catalog.validate_instances(instances)

    result = preview_differentials(
        instances,
        payload.base_pay,
        catalog,
        base_pay_unit=payload.base_pay_unit,
        shift_hours=payload.shift_hours,
        rules=rules,
    )
    logger.debug(
        "Previewed %d differentials: total_monthly=%s confidence=%s",
        len(result.items),
        result.total_monthly,
        result.confidence.value,
    )
    return DifferentialPreviewResponse.from_preview(result, warnings)
