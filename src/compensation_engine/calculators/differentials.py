"""Differential pay contribution calculator.

Converts a differential instance (catalog key, value, frequency) into the
monthly dollar amount it adds on top of base pay.

Calculation (per instance):
1) Unknown config -> UnknownDifferentialTypeError (never a silent zero)
2) value <= 0 -> 0
3) Resolve coverage: the monthly hours and occurrences the differential
   applies to, from the frequency and its unit
4) Price the coverage by the value unit:
   - flat $/hour       value * covered hours
   - flat $/shift, $   value * covered occurrences
   - flat $/month      value * share of the monthly schedule covered
   - percentage        base_hourly * value/100 * covered hours
   - multiplier        base_hourly * (value - 1) * covered hours
   Only the portion of a multiplier above 1.0x counts; the base portion is
   already in base pay.
5) Eligibility flags (yes/no) cover the full schedule when frequency == 1.
   Lump sums (one-time, annual) spread value/12 over the month.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal

from compensation_engine.calculators.catalog import (
    DifferentialCatalog,
    DifferentialInstance,
    DifferentialTypeConfig,
    FlatBasis,
    FrequencyMeasure,
    FrequencyPeriod,
    FrequencyUnitKind,
    UnknownDifferentialTypeError,
    ValueUnitKind,
)
from compensation_engine.calculators.shift_patterns import (
    DEFAULT_SHIFT_HOURS,
    MONTHS_PER_YEAR,
    WEEKS_PER_YEAR,
    resolve_pattern,
)
from compensation_engine.calculators.types import (
    DifferentialResult,
    Number,
    ShiftPattern,
    round_to_cents,
    to_decimal,
)

logger = logging.getLogger(__name__)

ZERO = Decimal("0")

# Hours credited to each occurrence-type event (call-back, short-notice pickup)
HOURS_PER_OCCURRENCE = Decimal("4")

PERIODS_PER_MONTH: dict[FrequencyPeriod, Decimal] = {
    FrequencyPeriod.WEEK: Decimal(WEEKS_PER_YEAR) / MONTHS_PER_YEAR,
    FrequencyPeriod.MONTH: Decimal("1"),
    FrequencyPeriod.YEAR: Decimal("1") / MONTHS_PER_YEAR,
}


@dataclass(frozen=True)
class Coverage:
    """Monthly hours and occurrences a differential applies to."""

    hours: Decimal
    occurrences: Decimal

    @classmethod
    def none(cls) -> Coverage:
        return cls(ZERO, ZERO)

    @classmethod
    def full_schedule(cls, pattern: ShiftPattern) -> Coverage:
        return cls(pattern.hours_per_month, pattern.shifts_per_month)


def monthly_coverage(
    frequency: Decimal,
    config: DifferentialTypeConfig,
    pattern: ShiftPattern,
) -> Coverage:
    """Resolve how much of a month a differential's frequency covers."""
    fr = config.frequency_range
    kind = fr.kind

    if kind is not FrequencyUnitKind.COUNT:
        # Eligibility flag: 1 means the whole schedule, anything else nothing
        if frequency != 1:
            return Coverage.none()
        return Coverage.full_schedule(pattern)

    if frequency <= 0:
        return Coverage.none()

    measure = fr.measure
    if measure is FrequencyMeasure.PERCENT_OF_SHIFTS:
        share = frequency / 100
        return Coverage(pattern.hours_per_month * share, pattern.shifts_per_month * share)
    if measure is FrequencyMeasure.LEVELS:
        return Coverage(pattern.hours_per_month * frequency, pattern.shifts_per_month * frequency)

    count = frequency * PERIODS_PER_MONTH[fr.period or FrequencyPeriod.MONTH]
    if measure is FrequencyMeasure.HOURS:
        return Coverage(count, count / pattern.hours_per_shift)
    if measure is FrequencyMeasure.SHIFTS:
        return Coverage(count * pattern.hours_per_shift, count)
    return Coverage(count * HOURS_PER_OCCURRENCE, count)


def _price_flat(
    value: Decimal,
    basis: FlatBasis | None,
    coverage: Coverage,
    pattern: ShiftPattern,
) -> Decimal:
    if basis is FlatBasis.PER_HOUR:
        return value * coverage.hours
    if basis is FlatBasis.PER_OCCURRENCE:
        return value * coverage.occurrences

    share_of_month = coverage.hours / pattern.hours_per_month
    if basis is FlatBasis.PER_YEAR:
        return value / MONTHS_PER_YEAR * share_of_month
    return value * share_of_month


def monthly_contribution(
    instance: DifferentialInstance,
    config: DifferentialTypeConfig | None,
    base_hourly: Number,
    shift_hours: Number = DEFAULT_SHIFT_HOURS,
) -> Decimal:
    """Monthly dollar contribution of one differential instance.

    Ranges are not re-checked here; callers validate against the catalog at
    data entry (DifferentialCatalog.validate_instance).

    Raises:
        UnknownDifferentialTypeError: If config is None
    """
    if config is None:
        raise UnknownDifferentialTypeError(instance.type)

    value = to_decimal(instance.value)
    frequency = to_decimal(instance.frequency)
    if value <= 0:
        return ZERO

    pattern = resolve_pattern(shift_hours)
    hourly = to_decimal(base_hourly)
    value_kind = config.value_range.kind

    if config.frequency_range.kind is FrequencyUnitKind.LUMP_SUM and value_kind in (
        ValueUnitKind.FLAT,
        ValueUnitKind.DESCRIPTIVE,
    ):
        if frequency != 1:
            return ZERO
        return round_to_cents(value / MONTHS_PER_YEAR)

    coverage = monthly_coverage(frequency, config, pattern)

    if value_kind is ValueUnitKind.MULTIPLIER:
        amount = hourly * max(value - 1, ZERO) * coverage.hours
    elif value_kind is ValueUnitKind.PERCENTAGE:
        amount = hourly * value / 100 * coverage.hours
    elif value_kind is ValueUnitKind.FLAT:
        amount = _price_flat(value, config.value_range.flat_basis, coverage, pattern)
    else:
        logger.warning(
            "Differential '%s' has descriptive value unit '%s'; pricing as a monthly amount",
            instance.type,
            config.value_range.unit,
        )
        amount = _price_flat(value, FlatBasis.PER_MONTH, coverage, pattern)

    return round_to_cents(amount)


def calculate_differentials(
    instances: Iterable[DifferentialInstance],
    catalog: DifferentialCatalog,
    base_hourly: Number,
    shift_hours: Number = DEFAULT_SHIFT_HOURS,
) -> list[DifferentialResult]:
    """Compute the contribution of every instance against the catalog.

    Raises:
        UnknownDifferentialTypeError: If any instance's type is not in the catalog
    """
    results: list[DifferentialResult] = []
    for instance in instances:
        config = catalog.require(instance.type)
        monthly = monthly_contribution(instance, config, base_hourly, shift_hours)
        logger.debug("Differential %s contributes %s/month", instance.type, monthly)
        results.append(
            DifferentialResult(
                type=instance.type,
                value=to_decimal(instance.value),
                frequency=to_decimal(instance.frequency),
                monthly=monthly,
                annual=round_to_cents(monthly * MONTHS_PER_YEAR),
                description=config.description,
            )
        )
    return results


def total_monthly_differentials(results: Iterable[DifferentialResult]) -> Decimal:
    """Sum per-instance monthly contributions."""
    return round_to_cents(sum((r.monthly for r in results), ZERO))
