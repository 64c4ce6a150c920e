"""Pydantic schemas for API request/response models."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from compensation_engine.calculators.breakdown import DifferentialPreview
from compensation_engine.calculators.catalog import DifferentialInstance, DifferentialTypeConfig
from compensation_engine.calculators.types import CompensationBreakdown, ConfidenceLevel


# ============================================================================
# Base schemas
# ============================================================================


class CamelModel(BaseModel):
    """Base schema using camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ErrorResponse(BaseModel):
    """Schema for error responses."""

    detail: str
    code: str | None = None


# ============================================================================
# Catalog schemas
# ============================================================================


class RangeSchema(BaseModel):
    """Legal range of a differential value or frequency."""

    min: Decimal
    max: Decimal
    unit: str


class DifferentialConfigResponse(CamelModel):
    """Schema for one catalog entry."""

    category: str
    question: str
    value_range: RangeSchema
    frequency_range: RangeSchema
    description: str
    display_name: str | None = None

    @classmethod
    def from_config(cls, config: DifferentialTypeConfig) -> "DifferentialConfigResponse":
        return cls(
            category=config.category.value,
            question=config.question,
            value_range=RangeSchema(
                min=config.value_range.min,
                max=config.value_range.max,
                unit=config.value_range.unit,
            ),
            frequency_range=RangeSchema(
                min=config.frequency_range.min,
                max=config.frequency_range.max,
                unit=config.frequency_range.unit,
            ),
            description=config.description,
            display_name=config.display_name,
        )


class DifferentialTypesResponse(BaseModel):
    """Type keys grouped by presentation category."""

    essential: list[str]
    common: list[str]
    rare: list[str]
    bonus: list[str]


# ============================================================================
# Compensation schemas
# ============================================================================


class CompensationBreakdownResponse(CamelModel):
    """Schema for a full compensation breakdown."""

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

    @classmethod
    def from_breakdown(cls, breakdown: CompensationBreakdown) -> "CompensationBreakdownResponse":
        return cls(
            base_hourly=breakdown.base_hourly,
            base_monthly=breakdown.base_monthly,
            base_annual=breakdown.base_annual,
            differential_monthly=breakdown.differential_monthly,
            differential_annual=breakdown.differential_annual,
            total_hourly=breakdown.total_hourly,
            total_monthly=breakdown.total_monthly,
            total_annual=breakdown.total_annual,
            effective_hourly_rate=breakdown.effective_hourly_rate,
            shift_hours=breakdown.shift_hours,
            monthly_work_hours=breakdown.monthly_work_hours,
            annual_work_hours=breakdown.annual_work_hours,
            days_per_week=breakdown.days_per_week,
        )


class BreakdownRequest(CamelModel):
    """Schema for a breakdown request.

    Base pay is not bounded here; degenerate pay still yields a breakdown.
    """

    base_pay: Decimal
    base_pay_unit: str | None = None
    monthly_differentials: Decimal = Decimal("0")
    shift_hours: Decimal = Decimal("12")


class ValidateRequest(CamelModel):
    """Schema for a compensation plausibility check."""

    amount: Decimal
    unit: str | None = None
    shift_hours: Decimal = Decimal("12")
    median: Decimal | None = Field(default=None, gt=0)


class ValidateResponse(CamelModel):
    """Schema for a compensation plausibility result."""

    valid: bool
    hourly_rate: Decimal
    min_hourly_rate: Decimal
    max_hourly_rate: Decimal
    min_monthly: Decimal
    max_monthly: Decimal
    min_annual: Decimal
    max_annual: Decimal
    is_outlier: bool | None = None


class ShiftPatternResponse(CamelModel):
    """Schema for a canonical shift pattern."""

    hours_per_shift: int
    days_per_week: int
    hours_per_week: int
    hours_per_month: Decimal
    hours_per_year: int


# ============================================================================
# Preview schemas
# ============================================================================


class DifferentialItem(BaseModel):
    """Schema for a differential reported by the caller."""

    type: str = Field(min_length=1)
    value: Decimal
    frequency: Decimal = Field(ge=0)

    def to_instance(self) -> DifferentialInstance:
        return DifferentialInstance(type=self.type, value=self.value, frequency=self.frequency)


class DifferentialPreviewRequest(CamelModel):
    """Schema for a differential preview request."""

    differentials: list[DifferentialItem] = Field(default_factory=list)
    base_pay: Decimal = Field(gt=0)
    base_pay_unit: str | None = "hourly"
    shift_hours: Decimal = Decimal("12")


class DifferentialItemResult(BaseModel):
    """Schema for one priced differential."""

    value: Decimal
    frequency: Decimal
    monthly: Decimal
    annual: Decimal
    description: str


class PreviewMetadata(BaseModel):
    """Schema for preview totals and data-quality metadata."""

    base_monthly: Decimal
    total_monthly: Decimal
    annual_total: Decimal
    effective_hourly: Decimal
    confidence: ConfidenceLevel
    is_valid: bool
    calculation_date: datetime


class DifferentialPreviewResponse(BaseModel):
    """Schema for preview response."""

    items: dict[str, DifferentialItemResult]
    metadata: PreviewMetadata
    breakdown: CompensationBreakdownResponse
    warnings: list[str] = Field(default_factory=list)

    @classmethod
    def from_preview(
        cls, preview: DifferentialPreview, warnings: list[str] | None = None
    ) -> "DifferentialPreviewResponse":
        breakdown = preview.breakdown
        return cls(
            items={
                item.type: DifferentialItemResult(
                    value=item.value,
                    frequency=item.frequency,
                    monthly=item.monthly,
                    annual=item.annual,
                    description=item.description,
                )
                for item in preview.items
            },
            metadata=PreviewMetadata(
                base_monthly=breakdown.base_monthly,
                total_monthly=breakdown.total_monthly,
                annual_total=breakdown.total_annual,
                effective_hourly=breakdown.effective_hourly_rate,
                confidence=preview.confidence,
                is_valid=preview.is_valid,
                calculation_date=preview.calculation_date,
            ),
            breakdown=CompensationBreakdownResponse.from_breakdown(breakdown),
            warnings=warnings or [],
        )
