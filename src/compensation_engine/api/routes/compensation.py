"""Compensation breakdown and validation endpoints."""

from fastapi import APIRouter

from compensation_engine.api.dependencies import Rules
from compensation_engine.api.schemas import (
    BreakdownRequest,
    CompensationBreakdownResponse,
    ShiftPatternResponse,
    ValidateRequest,
    ValidateResponse,
)
from compensation_engine.calculators.breakdown import calculate_compensation_breakdown
from compensation_engine.calculators.conversions import to_hourly_rate
from compensation_engine.calculators.shift_patterns import SHIFT_PATTERNS
from compensation_engine.calculators.validation import is_outlier, validate_hourly_rate

router = APIRouter(prefix="/compensation", tags=["compensation"])


@router.get("/shift-patterns", response_model=dict[str, ShiftPatternResponse])
async def list_shift_patterns() -> dict[str, ShiftPatternResponse]:
    """List the canonical shift patterns keyed by shift length."""
    return {
        str(length.value): ShiftPatternResponse(
            hours_per_shift=pattern.hours_per_shift,
            days_per_week=pattern.days_per_week,
            hours_per_week=pattern.hours_per_week,
            hours_per_month=pattern.hours_per_month,
            hours_per_year=pattern.hours_per_year,
        )
        for length, pattern in SHIFT_PATTERNS.items()
    }


@router.post("/breakdown", response_model=CompensationBreakdownResponse)
async def breakdown(payload: BreakdownRequest) -> CompensationBreakdownResponse:
    """Build a full breakdown from base pay and a monthly differential total."""
    result = calculate_compensation_breakdown(
        payload.base_pay,
        payload.base_pay_unit,
        payload.monthly_differentials,
        payload.shift_hours,
    )
    return CompensationBreakdownResponse.from_breakdown(result)


@router.post("/validate", response_model=ValidateResponse)
async def validate(rules: Rules, payload: ValidateRequest) -> ValidateResponse:
    """Check whether an amount maps to a plausible hourly rate."""
    hourly = to_hourly_rate(payload.amount, payload.unit, payload.shift_hours)
    min_monthly, max_monthly = rules.monthly_bounds(payload.shift_hours)
    min_annual, max_annual = rules.annual_bounds(payload.shift_hours)

    return ValidateResponse(
        valid=validate_hourly_rate(hourly, rules),
        hourly_rate=hourly,
        min_hourly_rate=rules.min_hourly_rate,
        max_hourly_rate=rules.max_hourly_rate,
        min_monthly=min_monthly,
        max_monthly=max_monthly,
        min_annual=min_annual,
        max_annual=max_annual,
        is_outlier=(
            is_outlier(payload.amount, payload.median, rules)
            if payload.median is not None
            else None
        ),
    )
