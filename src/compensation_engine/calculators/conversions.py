"""Pay unit conversions aware of shift patterns.

All conversions go through the resolved shift pattern's hour totals:
hourly and monthly results are rounded to cents, annual results to whole
dollars (ROUND_HALF_UP).
"""

from __future__ import annotations

import logging
from decimal import Decimal

from compensation_engine.calculators.shift_patterns import DEFAULT_SHIFT_HOURS, resolve_pattern
from compensation_engine.calculators.types import (
    Number,
    PayUnit,
    round_to_cents,
    round_to_dollars,
    to_decimal,
)

logger = logging.getLogger(__name__)

# Magnitude heuristic boundaries for amounts with no declared unit
HOURLY_CEILING = Decimal("200")
MONTHLY_CEILING = Decimal("10000")


def annual_to_hourly(annual: Number, shift_hours: Number = DEFAULT_SHIFT_HOURS) -> Decimal:
    """Convert an annual salary to an hourly rate."""
    pattern = resolve_pattern(shift_hours)
    return round_to_cents(to_decimal(annual) / pattern.hours_per_year)


def hourly_to_annual(hourly: Number, shift_hours: Number = DEFAULT_SHIFT_HOURS) -> Decimal:
    """Convert an hourly rate to an annual salary (whole dollars)."""
    pattern = resolve_pattern(shift_hours)
    return round_to_dollars(to_decimal(hourly) * pattern.hours_per_year)


def hourly_to_monthly(hourly: Number, shift_hours: Number = DEFAULT_SHIFT_HOURS) -> Decimal:
    """Convert an hourly rate to a monthly salary."""
    pattern = resolve_pattern(shift_hours)
    return round_to_cents(to_decimal(hourly) * pattern.hours_per_month)


def monthly_to_hourly(monthly: Number, shift_hours: Number = DEFAULT_SHIFT_HOURS) -> Decimal:
    """Convert a monthly salary to an hourly rate."""
    pattern = resolve_pattern(shift_hours)
    return round_to_cents(to_decimal(monthly) / pattern.hours_per_month)


def infer_pay_unit(amount: Number) -> PayUnit:
    """Guess the unit of an amount from its magnitude.

    Fallback for free-form input only: < 200 is hourly, < 10000 is monthly,
    anything larger is annual. The guess is lossy ($250 may be a daily
    stipend), so every inference is logged.
    """
    value = to_decimal(amount)
    if value < HOURLY_CEILING:
        unit = PayUnit.HOURLY
    elif value < MONTHLY_CEILING:
        unit = PayUnit.MONTHLY
    else:
        unit = PayUnit.ANNUAL

    logger.warning(
        "Pay unit not specified for amount %s; inferred '%s' from magnitude",
        value,
        unit.value,
    )
    return unit


def to_hourly_rate(
    amount: Number,
    unit: PayUnit | str | None,
    shift_hours: Number = DEFAULT_SHIFT_HOURS,
) -> Decimal:
    """Convert an amount in any pay unit to an hourly rate.

    Unrecognized or missing units fall back to infer_pay_unit() instead of
    failing.
    """
    pay_unit = PayUnit.parse(unit)
    if pay_unit is None:
        if unit is not None:
            logger.warning("Unrecognized pay unit %r", unit)
        pay_unit = infer_pay_unit(amount)

    if pay_unit is PayUnit.ANNUAL:
        return annual_to_hourly(amount, shift_hours)
    if pay_unit is PayUnit.MONTHLY:
        return monthly_to_hourly(amount, shift_hours)
    return round_to_cents(to_decimal(amount))


def calculate_effective_hourly_rate(
    base_hourly: Number,
    total_monthly_differentials: Number,
    shift_hours: Number = DEFAULT_SHIFT_HOURS,
) -> Decimal:
    """Blend monthly differentials into an hourly rate.

    The base rate is lifted to monthly, differentials are added there and the
    total is brought back to hourly, diluting flat monthly amounts over the
    pattern's monthly hours.
    """
    base_monthly = hourly_to_monthly(base_hourly, shift_hours)
    total_monthly = base_monthly + to_decimal(total_monthly_differentials)
    return monthly_to_hourly(total_monthly, shift_hours)
