"""Shift pattern table and resolver."""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from types import MappingProxyType

from compensation_engine.calculators.types import (
    Number,
    ShiftLength,
    ShiftPattern,
    round_to_cents,
    to_decimal,
)

WEEKS_PER_YEAR = 52
MONTHS_PER_YEAR = 12

DEFAULT_SHIFT_HOURS = 12

# Typical days worked per week for each shift length
_DAYS_PER_WEEK: dict[ShiftLength, int] = {
    ShiftLength.EIGHT_HOUR: 5,
    ShiftLength.TWELVE_HOUR: 3,
    ShiftLength.SIXTEEN_HOUR: 2,
}


def _build_pattern(shift_length: ShiftLength) -> ShiftPattern:
    days = _DAYS_PER_WEEK[shift_length]
    hours_per_week = shift_length.value * days
    hours_per_year = hours_per_week * WEEKS_PER_YEAR
    return ShiftPattern(
        shift_length=shift_length,
        hours_per_shift=shift_length.value,
        days_per_week=days,
        hours_per_week=hours_per_week,
        hours_per_month=round_to_cents(Decimal(hours_per_year) / MONTHS_PER_YEAR),
        hours_per_year=hours_per_year,
    )


SHIFT_PATTERNS: Mapping[ShiftLength, ShiftPattern] = MappingProxyType(
    {length: _build_pattern(length) for length in ShiftLength}
)


def resolve_shift_length(shift_hours: Number | None) -> ShiftLength:
    """Snap an arbitrary shift length to a canonical one.

    Policy:
    - 0 < hours <= 8  -> 8-hour
    - 8 < hours <= 12 -> 12-hour
    - 12 < hours <= 16 -> 16-hour
    - anything else (missing, non-positive, over 16) -> 12-hour

    Never raises; unusable input falls back to the 12-hour default.
    """
    if shift_hours is None:
        return ShiftLength.TWELVE_HOUR
    try:
        hours = to_decimal(shift_hours)
    except (ArithmeticError, TypeError, ValueError):
        return ShiftLength.TWELVE_HOUR
    if not hours.is_finite() or hours <= 0:
        return ShiftLength.TWELVE_HOUR

    for length in ShiftLength:
        if hours <= length.value:
            return length
    return ShiftLength.TWELVE_HOUR


def resolve_pattern(shift_hours: Number | None = DEFAULT_SHIFT_HOURS) -> ShiftPattern:
    """Get the canonical shift pattern for a shift length."""
    return SHIFT_PATTERNS[resolve_shift_length(shift_hours)]
