"""Type definitions for compensation calculations."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Any, Union

Number = Union[Decimal, int, float, str]

CENTS = Decimal("0.01")
DOLLARS = Decimal("1")


def to_decimal(value: Number) -> Decimal:
    """Coerce a numeric input to Decimal.

    Floats go through str() so 0.1 becomes Decimal("0.1") rather than its
    binary expansion.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def round_to_cents(amount: Decimal) -> Decimal:
    """Round amount to 2 decimal places (cents)."""
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


def round_to_dollars(amount: Decimal) -> Decimal:
    """Round amount to whole dollars."""
    return amount.quantize(DOLLARS, rounding=ROUND_HALF_UP)


class PayUnit(str, Enum):
    """Unit a pay amount is expressed in."""

    HOURLY = "hourly"
    MONTHLY = "monthly"
    ANNUAL = "annual"

    @classmethod
    def parse(cls, value: Any) -> PayUnit | None:
        """Parse a free-form unit string.

        Returns None for missing or unrecognized units so callers can fall
        back to magnitude inference.
        """
        if isinstance(value, PayUnit):
            return value
        if not isinstance(value, str):
            return None
        normalized = value.strip().lower()
        if normalized == "yearly":
            return cls.ANNUAL
        try:
            return cls(normalized)
        except ValueError:
            return None


class ShiftLength(int, Enum):
    """Canonical nominal shift lengths in hours."""

    EIGHT_HOUR = 8
    TWELVE_HOUR = 12
    SIXTEEN_HOUR = 16


@dataclass(frozen=True)
class ShiftPattern:
    """Work-hour totals implied by a nominal shift length.

    hours_per_week = hours_per_shift * days_per_week
    hours_per_year = hours_per_week * 52
    hours_per_month = hours_per_year / 12 (rounded to cents)
    """

    shift_length: ShiftLength
    hours_per_shift: int
    days_per_week: int
    hours_per_week: int
    hours_per_month: Decimal
    hours_per_year: int

    @property
    def shifts_per_month(self) -> Decimal:
        """Average number of shifts worked in a month."""
        return Decimal(self.days_per_week) * 52 / 12


class ConfidenceLevel(str, Enum):
    """How much differential data backs a compensation estimate."""

    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


@dataclass(frozen=True)
class CompensationBreakdown:
    """Full compensation picture for one base pay and differential total.

    Every field is derived; a new instance is built on each calculation.
    """

    base_hourly: Decimal
    base_monthly: Decimal
    base_annual: Decimal

    differential_monthly: Decimal
    differential_annual: Decimal

    total_hourly: Decimal
    total_monthly: Decimal
    total_annual: Decimal
    effective_hourly_rate: Decimal

    shift_hours: Decimal
    monthly_work_hours: Decimal
    annual_work_hours: int
    days_per_week: int

    def to_dict(self) -> dict[str, Any]:
        """Return a camelCase dict matching the preview wire format."""
        return {
            "baseHourly": self.base_hourly,
            "baseMonthly": self.base_monthly,
            "baseAnnual": self.base_annual,
            "differentialMonthly": self.differential_monthly,
            "differentialAnnual": self.differential_annual,
            "totalHourly": self.total_hourly,
            "totalMonthly": self.total_monthly,
            "totalAnnual": self.total_annual,
            "effectiveHourlyRate": self.effective_hourly_rate,
            "shiftHours": self.shift_hours,
            "monthlyWorkHours": self.monthly_work_hours,
            "annualWorkHours": self.annual_work_hours,
            "daysPerWeek": self.days_per_week,
        }


@dataclass(frozen=True)
class DifferentialResult:
    """Computed contribution of a single differential instance."""

    type: str
    value: Decimal
    frequency: Decimal
    monthly: Decimal
    annual: Decimal
    description: str = ""
