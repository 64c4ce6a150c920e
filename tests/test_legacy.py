"""Tests for the legacy differential adapter."""

import logging
from decimal import Decimal

import pytest

from compensation_engine.calculators.catalog import DifferentialCategory
from compensation_engine.calculators.differentials import (
    calculate_differentials,
    monthly_contribution,
)
from compensation_engine.calculators.legacy import (
    LegacyDifferential,
    LegacyTotals,
    legacy_totals,
    migrate_legacy_differential,
    migrate_legacy_differentials,
)


class TestLegacyTotals:
    """Test the flat sums of the old form."""

    def test_non_annual_units_sum_as_hourly(self):
        totals = legacy_totals(
            [
                LegacyDifferential.of("Night", 3),
                LegacyDifferential.of("Weekend", 2),
                LegacyDifferential.of("Double_Back", 50, "shift"),
                LegacyDifferential.of("Sign_On_Bonus", 5000, "annual"),
            ]
        )
        assert totals.hourly == Decimal("55")
        # 55 x 1872 hours plus the annual bonus
        assert totals.annual == Decimal("107960")

    def test_annual_items_never_mixed_into_hourly(self):
        totals = legacy_totals(
            [
                LegacyDifferential.of("Sign_On_Bonus", 1000, "annual"),
                LegacyDifferential.of("Night", 3),
            ]
        )
        assert totals.hourly == Decimal("3")
        assert totals.annual == Decimal("6616")

    def test_empty(self):
        assert legacy_totals([]) == LegacyTotals(hourly=Decimal("0"), annual=Decimal("0"))

    def test_unknown_unit_rejected(self):
        with pytest.raises(ValueError):
            LegacyDifferential.of("Night", 3, "fortnightly")


class TestMigration:
    """Test converting legacy items to catalog instances."""

    @pytest.mark.parametrize(
        "amount,unit,expected",
        [
            (3, "hourly", Decimal("468.00")),
            (50, "shift", Decimal("650.00")),
            (100, "weekly", Decimal("433.33")),
            (200, "monthly", Decimal("200.00")),
            (6000, "annual", Decimal("500.00")),
        ],
    )
    def test_unit_meaning_preserved(self, amount, unit, expected):
        instance, config = migrate_legacy_differential(LegacyDifferential.of("Item", amount, unit))
        assert monthly_contribution(instance, config, 38, 12) == expected

    def test_synthetic_config(self):
        instance, config = migrate_legacy_differential(
            LegacyDifferential.of("Retention", 6000, "annual", group="Bonuses")
        )
        assert instance.frequency == 1
        assert config.category is DifferentialCategory.BONUS
        assert config.display_name == "Retention"
        assert config.description == "Retention (Bonuses)"

    def test_migrated_catalog_prices_every_item(self):
        instances, catalog = migrate_legacy_differentials(
            [
                LegacyDifferential.of("Night", 3),
                LegacyDifferential.of("Bilingual", 100, "monthly"),
            ]
        )
        assert catalog.validate_instances(instances) == []
        results = calculate_differentials(instances, catalog, 38, 12)
        assert [r.monthly for r in results] == [Decimal("468.00"), Decimal("100.00")]

    def test_duplicate_types_kept_apart(self, caplog):
        with caplog.at_level(logging.WARNING):
            instances, catalog = migrate_legacy_differentials(
                [
                    LegacyDifferential.of("Night", 3),
                    LegacyDifferential.of("Night", 1),
                ]
            )
        assert [i.type for i in instances] == ["Night", "Night_2"]
        assert len(catalog) == 2
        assert "Night_2" in caplog.text
