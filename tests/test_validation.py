"""Tests for compensation validation and confidence rules."""

from decimal import Decimal

import pytest

from compensation_engine.calculators.types import ConfidenceLevel
from compensation_engine.calculators.validation import (
    DEFAULT_RULES,
    CompensationRules,
    get_confidence_level,
    is_outlier,
    validate_annual_salary,
    validate_compensation,
    validate_hourly_rate,
    validate_monthly_salary,
)


class TestCompensationRules:
    """Test threshold configuration."""

    def test_defaults(self):
        assert DEFAULT_RULES.min_hourly_rate == Decimal("15")
        assert DEFAULT_RULES.max_hourly_rate == Decimal("200")
        assert DEFAULT_RULES.outlier_threshold == Decimal("0.3")

    def test_bounds_follow_pattern(self):
        assert DEFAULT_RULES.monthly_bounds(12) == (Decimal("2340.00"), Decimal("31200.00"))
        assert DEFAULT_RULES.annual_bounds(12) == (Decimal("28080"), Decimal("374400"))
        assert DEFAULT_RULES.annual_bounds(8) == (Decimal("31200"), Decimal("416000"))

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"min_hourly_rate": Decimal("0")},
            {"min_hourly_rate": Decimal("50"), "max_hourly_rate": Decimal("40")},
            {"outlier_threshold": Decimal("-0.1")},
            {"confidence_medium_threshold": -1},
            {"confidence_high_threshold": 1, "confidence_medium_threshold": 2},
        ],
    )
    def test_inconsistent_rules_rejected(self, kwargs):
        with pytest.raises(ValueError):
            CompensationRules(**kwargs)


class TestValidation:
    """Test plausibility checks."""

    def test_hourly_bounds_inclusive(self):
        assert validate_hourly_rate(15)
        assert validate_hourly_rate(200)
        assert not validate_hourly_rate(Decimal("14.99"))
        assert not validate_hourly_rate(Decimal("200.01"))

    def test_monthly_salary(self):
        assert validate_monthly_salary(2340, 12)
        assert not validate_monthly_salary(Decimal("2339.99"), 12)

    def test_annual_salary(self):
        assert validate_annual_salary(95000, 12)
        assert not validate_annual_salary(20000, 12)
        assert not validate_annual_salary(400000, 12)

    def test_compensation_any_unit(self):
        assert validate_compensation(95000, "annual", 12)
        assert validate_compensation(7488, "monthly", 12)
        assert not validate_compensation(10, "hourly", 12)

    @pytest.mark.parametrize("amount", [0, -5])
    def test_non_positive_pay_fails(self, amount):
        assert not validate_compensation(amount, "hourly")

    def test_custom_rules(self):
        rules = CompensationRules(min_hourly_rate=Decimal("20"))
        assert validate_hourly_rate(18)
        assert not validate_hourly_rate(18, rules)


class TestOutliers:
    """Test outlier detection against a median."""

    def test_above_threshold(self):
        assert is_outlier(131, 100)

    def test_at_threshold_is_not_outlier(self):
        assert not is_outlier(130, 100)

    def test_below_median(self):
        assert not is_outlier(50, 100)

    def test_custom_threshold(self):
        rules = CompensationRules(outlier_threshold=Decimal("0.1"))
        assert is_outlier(115, 100, rules)


class TestConfidence:
    """Test confidence levels by differential count."""

    @pytest.mark.parametrize(
        "count,expected",
        [
            (0, ConfidenceLevel.LOW),
            (1, ConfidenceLevel.MEDIUM),
            (2, ConfidenceLevel.MEDIUM),
            (3, ConfidenceLevel.HIGH),
            (10, ConfidenceLevel.HIGH),
        ],
    )
    def test_levels(self, count, expected):
        assert get_confidence_level(count) is expected
