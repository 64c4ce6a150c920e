"""Adapter for the legacy additive differential model.

Early onboarding data stored differentials as {type, amount, unit, group}
and summed them flatly. The catalog-driven {type, value, frequency} model is
authoritative; this module reproduces the old totals and migrates legacy
items once into instances plus a synthetic catalog.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from compensation_engine.calculators.catalog import (
    DifferentialCatalog,
    DifferentialCategory,
    DifferentialInstance,
    DifferentialTypeConfig,
    FrequencyRange,
    ValueRange,
)
from compensation_engine.calculators.shift_patterns import DEFAULT_SHIFT_HOURS, resolve_pattern
from compensation_engine.calculators.types import Number, to_decimal

logger = logging.getLogger(__name__)


class LegacyUnit(str, Enum):
    """Units used by the legacy differential form."""

    HOURLY = "hourly"
    SHIFT = "shift"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    ANNUAL = "annual"


# Legacy unit -> (value unit, frequency unit) reproducing its meaning
_UNIT_MAPPING: dict[LegacyUnit, tuple[str, str]] = {
    LegacyUnit.HOURLY: ("$/hour", "yes/no"),
    LegacyUnit.SHIFT: ("$/shift", "yes/no"),
    LegacyUnit.WEEKLY: ("$ fixed", "times/week"),
    LegacyUnit.MONTHLY: ("$/month", "yes/no"),
    LegacyUnit.ANNUAL: ("$", "annual"),
}


@dataclass(frozen=True)
class LegacyDifferential:
    """A differential in the legacy additive model."""

    type: str
    amount: Decimal
    unit: LegacyUnit = LegacyUnit.HOURLY
    group: str = "Custom"

    @classmethod
    def of(
        cls, type: str, amount: Number, unit: str = "hourly", group: str = "Custom"
    ) -> LegacyDifferential:
        return cls(type=type, amount=to_decimal(amount), unit=LegacyUnit(unit), group=group)


@dataclass(frozen=True)
class LegacyTotals:
    """Totals of the legacy model.

    ``hourly`` is the flat sum of every non-annual item. ``annual`` is that
    hourly sum over a default-pattern year plus the annual items.
    """

    hourly: Decimal
    annual: Decimal


def legacy_totals(items: Iterable[LegacyDifferential]) -> LegacyTotals:
    """Sum legacy differentials the way the old form did.

    The old form treated every amount without an annual unit as dollars per
    hour, whatever its stated unit, and annualized it over the 12-hour
    pattern.
    """
    hourly = Decimal("0")
    lump_sums = Decimal("0")
    for item in items:
        if item.unit is LegacyUnit.ANNUAL:
            lump_sums += item.amount
        else:
            hourly += item.amount

    hours_per_year = resolve_pattern(DEFAULT_SHIFT_HOURS).hours_per_year
    return LegacyTotals(hourly=hourly, annual=hourly * hours_per_year + lump_sums)


def migrate_legacy_differential(
    item: LegacyDifferential, key: str | None = None
) -> tuple[DifferentialInstance, DifferentialTypeConfig]:
    """Convert one legacy item into an instance and its synthetic config."""
    value_unit, frequency_unit = _UNIT_MAPPING[item.unit]
    key = key or item.type
    category = (
        DifferentialCategory.BONUS if item.unit is LegacyUnit.ANNUAL else DifferentialCategory.COMMON
    )
    amount = abs(item.amount)

    config = DifferentialTypeConfig(
        key=key,
        category=category,
        question=f"Migrated {item.unit.value} differential",
        value_range=ValueRange(min=Decimal("0"), max=amount, unit=value_unit),
        frequency_range=FrequencyRange(min=Decimal("0"), max=Decimal("1"), unit=frequency_unit),
        description=f"{item.type} ({item.group})",
        display_name=item.type,
    )
    instance = DifferentialInstance(type=key, value=item.amount, frequency=Decimal("1"))
    return instance, config


def migrate_legacy_differentials(
    items: Iterable[LegacyDifferential],
) -> tuple[list[DifferentialInstance], DifferentialCatalog]:
    """Migrate a legacy list into instances plus the catalog that prices them.

    Repeated types get a numeric suffix so each legacy line keeps its own
    catalog entry.
    """
    instances: list[DifferentialInstance] = []
    configs: dict[str, DifferentialTypeConfig] = {}

    for item in items:
        key = item.type
        suffix = 2
        while key in configs:
            key = f"{item.type}_{suffix}"
            suffix += 1
        if key != item.type:
            logger.warning("Duplicate legacy differential '%s' migrated as '%s'", item.type, key)

        instance, config = migrate_legacy_differential(item, key)
        instances.append(instance)
        configs[key] = config

    return instances, DifferentialCatalog(configs)
