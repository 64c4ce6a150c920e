"""Differential type catalog.

The catalog is supplied externally (configuration service or static asset)
and consumed read-only. Each entry describes the legal value and frequency
semantics of one differential type:

    {
        "Night": {
            "category": "essential",
            "question": "How many night shifts do you work per week?",
            "valueRange": {"min": 1, "max": 10, "unit": "$/hour"},
            "frequencyRange": {"min": 0, "max": 7, "unit": "days/week"},
            "description": "Extra pay per hour for night shifts",
            "displayName": "Night Shift"   // optional
        },
        ...
    }

Unit strings are free-form; they are classified on construction into the
kinds the contribution calculator dispatches on.

Countable frequencies measure hours ("hours/week"), shifts ("days/week",
"shifts per month" or a bare "per week") or other occurrences ("times/month"),
each occurrence being credited a fixed number of hours.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from importlib import resources
from pathlib import Path
from typing import Any

from compensation_engine.calculators.types import Number, to_decimal

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_RESOURCE = "differential_catalog.json"


class CatalogError(Exception):
    """Raised when a catalog document cannot be parsed."""

    def __init__(self, message: str, differential_type: str | None = None):
        self.differential_type = differential_type
        if differential_type:
            message = f"{differential_type}: {message}"
        super().__init__(message)


class UnknownDifferentialTypeError(Exception):
    """Raised when a differential instance references a type missing from the catalog.

    This is a catalog consistency bug; contributions are never silently
    zeroed for unknown types.
    """

    def __init__(self, differential_type: str):
        self.differential_type = differential_type
        super().__init__(f"Unknown differential type '{differential_type}'")


class DuplicateDifferentialTypeError(Exception):
    """Raised when a preview lists the same differential type more than once."""

    def __init__(self, differential_type: str):
        self.differential_type = differential_type
        super().__init__(f"Differential type '{differential_type}' listed more than once")


class DifferentialCategory(str, Enum):
    """Presentation groups for differential types."""

    ESSENTIAL = "essential"
    COMMON = "common"
    RARE = "rare"
    BONUS = "bonus"


class ValueUnitKind(str, Enum):
    """How a differential's value is interpreted."""

    FLAT = "flat"
    PERCENTAGE = "percentage"
    MULTIPLIER = "multiplier"
    DESCRIPTIVE = "descriptive"


class FlatBasis(str, Enum):
    """What a flat dollar amount is paid per."""

    PER_HOUR = "per_hour"
    PER_OCCURRENCE = "per_occurrence"
    PER_MONTH = "per_month"
    PER_YEAR = "per_year"


class FrequencyUnitKind(str, Enum):
    """How a differential's frequency is interpreted."""

    COUNT = "count"
    BOOLEAN = "boolean"
    LUMP_SUM = "lump_sum"


class FrequencyMeasure(str, Enum):
    """What a countable frequency counts."""

    HOURS = "hours"
    SHIFTS = "shifts"
    OCCURRENCES = "occurrences"
    PERCENT_OF_SHIFTS = "percent_of_shifts"
    LEVELS = "levels"


class FrequencyPeriod(str, Enum):
    """Period a countable frequency is measured over."""

    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


_LUMP_SUM_UNITS = frozenset({"one-time", "one time", "once", "annual", "annually", "yearly"})

# A period with no counted noun counts shifts
_BARE_PERIOD_UNITS = frozenset({"per week", "per month", "per year"})


def classify_value_unit(unit: str) -> tuple[ValueUnitKind, FlatBasis | None]:
    """Classify a valueRange unit string."""
    text = unit.strip().lower()
    if "multiplier" in text:
        return ValueUnitKind.MULTIPLIER, None
    if "percent" in text or "%" in text:
        return ValueUnitKind.PERCENTAGE, None
    if "$" in text or "dollar" in text:
        if "hour" in text or "/hr" in text or "per level" in text:
            return ValueUnitKind.FLAT, FlatBasis.PER_HOUR
        if "month" in text:
            return ValueUnitKind.FLAT, FlatBasis.PER_MONTH
        if "year" in text or "annual" in text:
            return ValueUnitKind.FLAT, FlatBasis.PER_YEAR
        return ValueUnitKind.FLAT, FlatBasis.PER_OCCURRENCE
    return ValueUnitKind.DESCRIPTIVE, None


def classify_frequency_unit(
    unit: str,
) -> tuple[FrequencyUnitKind, FrequencyMeasure | None, FrequencyPeriod | None]:
    """Classify a frequencyRange unit string."""
    text = unit.strip().lower()
    if "yes" in text or "binary" in text:
        return FrequencyUnitKind.BOOLEAN, None, None
    if text in _LUMP_SUM_UNITS:
        return FrequencyUnitKind.LUMP_SUM, None, None

    if "percent" in text or "%" in text:
        return FrequencyUnitKind.COUNT, FrequencyMeasure.PERCENT_OF_SHIFTS, None
    if "level" in text:
        return FrequencyUnitKind.COUNT, FrequencyMeasure.LEVELS, None

    if "hour" in text:
        measure = FrequencyMeasure.HOURS
    elif "shift" in text or "day" in text or text in _BARE_PERIOD_UNITS:
        measure = FrequencyMeasure.SHIFTS
    else:
        measure = FrequencyMeasure.OCCURRENCES

    # Period comes from the text after the measure: "days/year" is yearly
    _, _, tail = text.partition("/")
    period_text = tail or text.replace("per", "", 1)
    if "week" in period_text:
        period = FrequencyPeriod.WEEK
    elif "year" in period_text or "annual" in period_text:
        period = FrequencyPeriod.YEAR
    else:
        period = FrequencyPeriod.MONTH
    return FrequencyUnitKind.COUNT, measure, period


def _parse_bound(raw: Any, name: str, differential_type: str | None) -> Decimal:
    try:
        return to_decimal(raw)
    except (ArithmeticError, TypeError, ValueError) as e:
        raise CatalogError(f"invalid {name}: {raw!r}", differential_type) from e


@dataclass(frozen=True)
class ValueRange:
    """Legal values of a differential and how to read them."""

    min: Decimal
    max: Decimal
    unit: str

    @property
    def kind(self) -> ValueUnitKind:
        return classify_value_unit(self.unit)[0]

    @property
    def flat_basis(self) -> FlatBasis | None:
        return classify_value_unit(self.unit)[1]

    def contains(self, value: Number) -> bool:
        return self.min <= to_decimal(value) <= self.max


@dataclass(frozen=True)
class FrequencyRange:
    """Legal frequencies of a differential and how to read them."""

    min: Decimal
    max: Decimal
    unit: str

    @property
    def kind(self) -> FrequencyUnitKind:
        return classify_frequency_unit(self.unit)[0]

    @property
    def measure(self) -> FrequencyMeasure | None:
        return classify_frequency_unit(self.unit)[1]

    @property
    def period(self) -> FrequencyPeriod | None:
        return classify_frequency_unit(self.unit)[2]

    @property
    def is_eligibility_flag(self) -> bool:
        """True when frequency is a 0/1 flag rather than a count."""
        return self.kind is not FrequencyUnitKind.COUNT

    def contains(self, frequency: Number) -> bool:
        return self.min <= to_decimal(frequency) <= self.max


@dataclass(frozen=True)
class DifferentialTypeConfig:
    """Catalog entry for one differential type."""

    key: str
    category: DifferentialCategory
    question: str
    value_range: ValueRange
    frequency_range: FrequencyRange
    description: str = ""
    display_name: str | None = None

    @classmethod
    def from_dict(cls, key: str, data: Mapping[str, Any]) -> DifferentialTypeConfig:
        """Build a config from its wire representation."""
        try:
            category = DifferentialCategory(str(data["category"]).lower())
        except KeyError as e:
            raise CatalogError("missing category", key) from e
        except ValueError as e:
            raise CatalogError(f"unknown category {data['category']!r}", key) from e

        ranges: dict[str, tuple[Decimal, Decimal, str]] = {}
        for name in ("valueRange", "frequencyRange"):
            raw = data.get(name)
            if not isinstance(raw, Mapping):
                raise CatalogError(f"missing {name}", key)
            low = _parse_bound(raw.get("min"), f"{name}.min", key)
            high = _parse_bound(raw.get("max"), f"{name}.max", key)
            if low > high:
                raise CatalogError(f"{name}.min exceeds {name}.max", key)
            unit = raw.get("unit")
            if not isinstance(unit, str) or not unit.strip():
                raise CatalogError(f"missing {name}.unit", key)
            ranges[name] = (low, high, unit)

        return cls(
            key=key,
            category=category,
            question=str(data.get("question", "")),
            value_range=ValueRange(*ranges["valueRange"]),
            frequency_range=FrequencyRange(*ranges["frequencyRange"]),
            description=str(data.get("description", "")),
            display_name=data.get("displayName"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the wire representation."""
        result: dict[str, Any] = {
            "category": self.category.value,
            "question": self.question,
            "valueRange": {
                "min": self.value_range.min,
                "max": self.value_range.max,
                "unit": self.value_range.unit,
            },
            "frequencyRange": {
                "min": self.frequency_range.min,
                "max": self.frequency_range.max,
                "unit": self.frequency_range.unit,
            },
            "description": self.description,
        }
        if self.display_name:
            result["displayName"] = self.display_name
        return result


@dataclass(frozen=True)
class DifferentialInstance:
    """A differential reported for one job: catalog key, value and frequency."""

    type: str
    value: Decimal
    frequency: Decimal

    @classmethod
    def of(cls, type: str, value: Number, frequency: Number) -> DifferentialInstance:
        return cls(type=type, value=to_decimal(value), frequency=to_decimal(frequency))


@dataclass(frozen=True)
class DifferentialCatalog:
    """Read-only mapping of differential type key to its config."""

    configs: Mapping[str, DifferentialTypeConfig] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Own copy; later edits to the caller's dict must not show through
        object.__setattr__(self, "configs", dict(self.configs))

    def __contains__(self, key: object) -> bool:
        return key in self.configs

    def __iter__(self) -> Iterator[str]:
        return iter(self.configs)

    def __len__(self) -> int:
        return len(self.configs)

    def get(self, key: str) -> DifferentialTypeConfig | None:
        return self.configs.get(key)

    def require(self, key: str) -> DifferentialTypeConfig:
        """Get a config or raise UnknownDifferentialTypeError."""
        config = self.configs.get(key)
        if config is None:
            raise UnknownDifferentialTypeError(key)
        return config

    def types_by_category(self) -> dict[str, list[str]]:
        """Group type keys by category, preserving catalog order."""
        groups: dict[str, list[str]] = {c.value: [] for c in DifferentialCategory}
        for key, config in self.configs.items():
            groups[config.category.value].append(key)
        return groups

    def validate_instance(self, instance: DifferentialInstance) -> list[str]:
        """Check an instance against its catalog ranges.

        Returns list of error messages (empty if valid). The contribution
        calculator does not re-validate; callers run this at data entry.
        """
        config = self.require(instance.type)
        errors: list[str] = []

        vr = config.value_range
        if not vr.contains(instance.value):
            errors.append(
                f"{instance.type}: value {instance.value} outside "
                f"[{vr.min}, {vr.max}] {vr.unit}"
            )

        fr = config.frequency_range
        if fr.is_eligibility_flag:
            if instance.frequency not in (0, 1):
                errors.append(
                    f"{instance.type}: frequency {instance.frequency} must be 0 or 1 for '{fr.unit}'"
                )
        elif not fr.contains(instance.frequency):
            errors.append(
                f"{instance.type}: frequency {instance.frequency} outside "
                f"[{fr.min}, {fr.max}] {fr.unit}"
            )

        return errors

    def validate_instances(self, instances: Iterable[DifferentialInstance]) -> list[str]:
        errors: list[str] = []
        for instance in instances:
            errors.extend(self.validate_instance(instance))
        return errors

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DifferentialCatalog:
        if not isinstance(data, Mapping):
            raise CatalogError("catalog must be a JSON object")
        return cls({key: DifferentialTypeConfig.from_dict(key, entry) for key, entry in data.items()})

    def to_dict(self) -> dict[str, dict[str, Any]]:
        return {key: config.to_dict() for key, config in self.configs.items()}


def load_catalog(path: str | Path | None = None) -> DifferentialCatalog:
    """Load a catalog from a JSON file, or the bundled default catalog."""
    try:
        if path is None:
            source = f"package:{DEFAULT_CATALOG_RESOURCE}"
            text = (
                resources.files("compensation_engine.data")
                .joinpath(DEFAULT_CATALOG_RESOURCE)
                .read_text(encoding="utf-8")
            )
        else:
            source = str(path)
            text = Path(path).read_text(encoding="utf-8")
        data = json.loads(text)
    except (OSError, json.JSONDecodeError) as e:
        raise CatalogError(f"cannot read catalog from {path or DEFAULT_CATALOG_RESOURCE}: {e}") from e

    catalog = DifferentialCatalog.from_dict(data)
    logger.info("Loaded %d differential types from %s", len(catalog), source)
    return catalog
