"""Compensation breakdown aggregation and differential preview."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any

from compensation_engine.calculators.catalog import (
    DifferentialCatalog,
    DifferentialInstance,
    DuplicateDifferentialTypeError,
)
from compensation_engine.calculators.conversions import (
    hourly_to_annual,
    hourly_to_monthly,
    monthly_to_hourly,
    to_hourly_rate,
)
from compensation_engine.calculators.differentials import (
    calculate_differentials,
    total_monthly_differentials,
)
from compensation_engine.calculators.shift_patterns import (
    DEFAULT_SHIFT_HOURS,
    MONTHS_PER_YEAR,
    resolve_pattern,
)
from compensation_engine.calculators.types import (
    CompensationBreakdown,
    ConfidenceLevel,
    DifferentialResult,
    Number,
    PayUnit,
    round_to_cents,
    round_to_dollars,
    to_decimal,
)
from compensation_engine.calculators.validation import (
    DEFAULT_RULES,
    CompensationRules,
    get_confidence_level,
    validate_hourly_rate,
)


def calculate_compensation_breakdown(
    base_pay: Number,
    base_pay_unit: PayUnit | str | None = None,
    monthly_differentials: Number = 0,
    shift_hours: Number = DEFAULT_SHIFT_HOURS,
) -> CompensationBreakdown:
    """Combine base pay and monthly differentials into a full breakdown.

    Invariants:
    - total_monthly = base_monthly + differential_monthly (both in cents)
    - total_annual = total_monthly * 12
    - total_hourly = total_monthly / pattern monthly hours

    Zero or negative pay still yields a structurally valid breakdown; use
    validate_compensation() before trusting it.
    """
    pattern = resolve_pattern(shift_hours)

    base_hourly = to_hourly_rate(base_pay, base_pay_unit, shift_hours)
    base_monthly = hourly_to_monthly(base_hourly, shift_hours)
    base_annual = hourly_to_annual(base_hourly, shift_hours)

    differential_monthly = round_to_cents(to_decimal(monthly_differentials))
    differential_annual = round_to_dollars(differential_monthly * MONTHS_PER_YEAR)

    total_monthly = base_monthly + differential_monthly
    total_annual = round_to_dollars(total_monthly * MONTHS_PER_YEAR)
    total_hourly = monthly_to_hourly(total_monthly, shift_hours)

    return CompensationBreakdown(
        base_hourly=base_hourly,
        base_monthly=base_monthly,
        base_annual=base_annual,
        differential_monthly=differential_monthly,
        differential_annual=differential_annual,
        total_hourly=total_hourly,
        total_monthly=total_monthly,
        total_annual=total_annual,
        effective_hourly_rate=total_hourly,
        shift_hours=to_decimal(shift_hours),
        monthly_work_hours=pattern.hours_per_month,
        annual_work_hours=pattern.hours_per_year,
        days_per_week=pattern.days_per_week,
    )


@dataclass(frozen=True)
class DifferentialPreview:
    """Result of previewing a differential list against base pay."""

    items: list[DifferentialResult]
    breakdown: CompensationBreakdown
    confidence: ConfidenceLevel
    is_valid: bool
    calculation_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def total_monthly(self) -> Decimal:
        return self.breakdown.total_monthly

    def to_dict(self) -> dict[str, Any]:
        """Return the preview wire format (items keyed by type plus metadata)."""
        return {
            "items": {
                item.type: {
                    "value": item.value,
                    "frequency": item.frequency,
                    "monthly": item.monthly,
                    "annual": item.annual,
                    "description": item.description,
                }
                for item in self.items
            },
            "metadata": {
                "base_monthly": self.breakdown.base_monthly,
                "total_monthly": self.breakdown.total_monthly,
                "annual_total": self.breakdown.total_annual,
                "effective_hourly": self.breakdown.effective_hourly_rate,
                "confidence": self.confidence.value,
                "is_valid": self.is_valid,
                "calculation_date": self.calculation_date.isoformat(),
            },
            "breakdown": self.breakdown.to_dict(),
        }


def preview_differentials(
    differentials: Iterable[DifferentialInstance],
    base_pay: Number,
    catalog: DifferentialCatalog,
    base_pay_unit: PayUnit | str | None = PayUnit.HOURLY,
    shift_hours: Number = DEFAULT_SHIFT_HOURS,
    rules: CompensationRules = DEFAULT_RULES,
) -> DifferentialPreview:
    """Price every differential and aggregate them with base pay.

    Items are keyed by type, so each type may appear once.

    Raises:
        UnknownDifferentialTypeError: If a differential type is not in the catalog
        DuplicateDifferentialTypeError: If a differential type is listed twice
    """
    instances = list(differentials)
    seen: set[str] = set()
    for instance in instances:
        if instance.type in seen:
            raise DuplicateDifferentialTypeError(instance.type)
        seen.add(instance.type)

    base_hourly = to_hourly_rate(base_pay, base_pay_unit, shift_hours)

    items = calculate_differentials(instances, catalog, base_hourly, shift_hours)
    monthly_total = total_monthly_differentials(items)

    breakdown = calculate_compensation_breakdown(
        base_hourly, PayUnit.HOURLY, monthly_total, shift_hours
    )
    # Confidence counts differentials that actually add pay
    contributing = sum(1 for item in items if item.monthly > 0)

    return DifferentialPreview(
        items=items,
        breakdown=breakdown,
        confidence=get_confidence_level(contributing, rules),
        is_valid=validate_hourly_rate(base_hourly, rules),
    )
