"""Compensation calculation engine."""

from compensation_engine.calculators.breakdown import (
    DifferentialPreview,
    calculate_compensation_breakdown,
    preview_differentials,
)
from compensation_engine.calculators.conversions import (
    annual_to_hourly,
    calculate_effective_hourly_rate,
    hourly_to_annual,
    hourly_to_monthly,
    infer_pay_unit,
    monthly_to_hourly,
    to_hourly_rate,
)
from compensation_engine.calculators.differentials import (
    calculate_differentials,
    monthly_contribution,
    total_monthly_differentials,
)
from compensation_engine.calculators.shift_patterns import (
    SHIFT_PATTERNS,
    resolve_pattern,
    resolve_shift_length,
)
from compensation_engine.calculators.types import (
    CompensationBreakdown,
    ConfidenceLevel,
    DifferentialResult,
    PayUnit,
    ShiftLength,
    ShiftPattern,
)
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

__all__ = [
    "SHIFT_PATTERNS",
    "DEFAULT_RULES",
    "CompensationBreakdown",
    "CompensationRules",
    "ConfidenceLevel",
    "DifferentialPreview",
    "DifferentialResult",
    "PayUnit",
    "ShiftLength",
    "ShiftPattern",
    "annual_to_hourly",
    "calculate_compensation_breakdown",
    "calculate_differentials",
    "calculate_effective_hourly_rate",
    "get_confidence_level",
    "hourly_to_annual",
    "hourly_to_monthly",
    "infer_pay_unit",
    "is_outlier",
    "monthly_contribution",
    "monthly_to_hourly",
    "preview_differentials",
    "resolve_pattern",
    "resolve_shift_length",
    "to_hourly_rate",
    "total_monthly_differentials",
    "validate_annual_salary",
    "validate_compensation",
    "validate_hourly_rate",
    "validate_monthly_salary",
]
