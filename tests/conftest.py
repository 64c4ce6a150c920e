"""Pytest fixtures for compensation engine tests."""

from __future__ import annotations

from decimal import Decimal

import pytest

from compensation_engine.calculators.catalog import (
    DifferentialCatalog,
    DifferentialCategory,
    DifferentialTypeConfig,
    FrequencyRange,
    ValueRange,
    load_catalog,
)


def make_config(
    key: str,
    value_unit: str,
    frequency_unit: str,
    value_max: str = "100",
    frequency_max: str = "10",
    category: DifferentialCategory = DifferentialCategory.COMMON,
) -> DifferentialTypeConfig:
    """Build a catalog entry with permissive ranges."""
    return DifferentialTypeConfig(
        key=key,
        category=category,
        question=f"{key}?",
        value_range=ValueRange(min=Decimal("0"), max=Decimal(value_max), unit=value_unit),
        frequency_range=FrequencyRange(
            min=Decimal("0"), max=Decimal(frequency_max), unit=frequency_unit
        ),
        description=f"{key} differential",
    )


@pytest.fixture(scope="session")
def catalog() -> DifferentialCatalog:
    """The bundled default catalog."""
    return load_catalog()


@pytest.fixture
def flat_hourly_catalog() -> DifferentialCatalog:
    """Night, weekend and holiday premiums all paid as flat $/hour on every hour."""
    return DifferentialCatalog(
        {
            key: make_config(key, "$/hour", "yes/no", frequency_max="1")
            for key in ("Night", "Weekend", "Holiday")
        }
    )
