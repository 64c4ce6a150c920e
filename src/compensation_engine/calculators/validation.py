"""Compensation validation, outlier and confidence rules."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from compensation_engine.calculators.conversions import to_hourly_rate
from compensation_engine.calculators.shift_patterns import DEFAULT_SHIFT_HOURS, resolve_pattern
from compensation_engine.calculators.types import (
    ConfidenceLevel,
    Number,
    PayUnit,
    to_decimal,
)


@dataclass(frozen=True)
class CompensationRules:
    """
    Thresholds for validation and confidence scoring.

    Only the hourly bounds are configured; monthly and annual bounds are the
    hourly bounds times the active shift pattern's hour totals.

    Attributes:
        min_hourly_rate: Lowest plausible nursing hourly rate. Default 15.
        max_hourly_rate: Highest plausible hourly rate. Default 200.
        outlier_threshold: Fraction above the median that marks an
            outlier. Default 0.3 (30%).
        confidence_high_threshold: Differential count for HIGH. Default 3.
        confidence_medium_threshold: Differential count for MEDIUM. Default 1.
    """

    min_hourly_rate: Decimal = Decimal("15")
    max_hourly_rate: Decimal = Decimal("200")
    outlier_threshold: Decimal = Decimal("0.3")
    confidence_high_threshold: int = 3
    confidence_medium_threshold: int = 1

    def __post_init__(self) -> None:
        """Validate configuration."""
        if self.min_hourly_rate <= 0:
            raise ValueError("min_hourly_rate must be positive")
        if self.max_hourly_rate < self.min_hourly_rate:
            raise ValueError("max_hourly_rate cannot be below min_hourly_rate")
        if self.outlier_threshold < 0:
            raise ValueError("outlier_threshold cannot be negative")
        if self.confidence_medium_threshold < 0:
            raise ValueError("confidence_medium_threshold cannot be negative")
        if self.confidence_high_threshold < self.confidence_medium_threshold:
            raise ValueError(
                "confidence_high_threshold cannot be below confidence_medium_threshold"
            )

    def monthly_bounds(self, shift_hours: Number = DEFAULT_SHIFT_HOURS) -> tuple[Decimal, Decimal]:
        pattern = resolve_pattern(shift_hours)
        return (
            self.min_hourly_rate * pattern.hours_per_month,
            self.max_hourly_rate * pattern.hours_per_month,
        )

    def annual_bounds(self, shift_hours: Number = DEFAULT_SHIFT_HOURS) -> tuple[Decimal, Decimal]:
        pattern = resolve_pattern(shift_hours)
        return (
            self.min_hourly_rate * pattern.hours_per_year,
            self.max_hourly_rate * pattern.hours_per_year,
        )


DEFAULT_RULES = CompensationRules()


def validate_hourly_rate(rate: Number, rules: CompensationRules = DEFAULT_RULES) -> bool:
    """Check an hourly rate against the configured bounds."""
    return rules.min_hourly_rate <= to_decimal(rate) <= rules.max_hourly_rate


def validate_monthly_salary(
    salary: Number,
    shift_hours: Number = DEFAULT_SHIFT_HOURS,
    rules: CompensationRules = DEFAULT_RULES,
) -> bool:
    low, high = rules.monthly_bounds(shift_hours)
    return low <= to_decimal(salary) <= high


def validate_annual_salary(
    salary: Number,
    shift_hours: Number = DEFAULT_SHIFT_HOURS,
    rules: CompensationRules = DEFAULT_RULES,
) -> bool:
    low, high = rules.annual_bounds(shift_hours)
    return low <= to_decimal(salary) <= high


def validate_compensation(
    amount: Number,
    unit: PayUnit | str | None,
    shift_hours: Number = DEFAULT_SHIFT_HOURS,
    rules: CompensationRules = DEFAULT_RULES,
) -> bool:
    """Check whether an amount in any unit maps to a plausible hourly rate.

    Zero or negative pay always fails; callers gate on this before trusting a
    breakdown for display or submission.
    """
    return validate_hourly_rate(to_hourly_rate(amount, unit, shift_hours), rules)


def is_outlier(amount: Number, median: Number, rules: CompensationRules = DEFAULT_RULES) -> bool:
    """Check if an amount sits more than the outlier threshold above the median."""
    return to_decimal(amount) > to_decimal(median) * (1 + rules.outlier_threshold)


def get_confidence_level(
    differential_count: int,
    rules: CompensationRules = DEFAULT_RULES,
) -> ConfidenceLevel:
    """Classify how much differential data backs an estimate."""
    if differential_count >= rules.confidence_high_threshold:
        return ConfidenceLevel.HIGH
    if differential_count >= rules.confidence_medium_threshold:
        return ConfidenceLevel.MEDIUM
    return ConfidenceLevel.LOW
