"""Display formatting for compensation figures (en-US, USD)."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from compensation_engine.calculators.catalog import (
    DifferentialCatalog,
    FlatBasis,
    ValueUnitKind,
    classify_value_unit,
)
from compensation_engine.calculators.types import Number, PayUnit, to_decimal

_UNIT_SUFFIX = {
    PayUnit.HOURLY: "/hr",
    PayUnit.MONTHLY: "/mo",
    PayUnit.ANNUAL: "/year",
}

_UNIT_DECIMALS = {
    PayUnit.HOURLY: 2,
    PayUnit.MONTHLY: 2,
    PayUnit.ANNUAL: 0,
}

# Display names for catalog keys that ship without one
DISPLAY_NAMES: dict[str, str] = {
    "Night": "Night Shift",
    "Holiday": "Holiday Pay",
    "Charge_Nurse": "Charge Nurse",
    "On_Call": "On-Call",
    "Float_Pool": "Float Pool",
    "Call_Back": "Call-Back",
    "Evening_Shift": "Evening Shift",
    "Specialty_Unit": "Specialty Unit",
    "Education_BSN": "Education (BSN+)",
    "Experience_Longevity": "Experience/Longevity",
    "Per_Diem_PRN": "PRN/Per Diem",
    "Mandatory_Overtime": "Mandatory Overtime",
    "Clinical_Ladder": "Clinical Ladder",
    "Resource_Nurse": "Resource Nurse",
    "Short_Notice": "Short Notice",
    "Consecutive_Shift": "Consecutive Shifts",
    "Hazard_Pay": "Hazard Pay",
    "Double_Back": "Double-Back",
    "Relief_Charge_Nurse": "Relief Charge Nurse",
    "Special_Skills_ECMO": "Special Skills (ECMO/CRRT)",
    "Team_Leader": "Team Leader",
    "High_Cost_Living": "High Cost of Living",
    "Rural_Remote": "Rural/Remote",
    "Seven_On_Seven_Off": "7-on/7-off Program",
    "Transport_Transfer": "Patient Transport",
    "Rapid_Response_Team": "Rapid Response Team",
    "Crisis_Market_Adjustment": "Crisis/Market Adjustment",
    "Senior_Nurse": "Senior Nurse",
    "Sign_On_Bonus": "Sign-On Bonus",
    "Retention_Bonus": "Retention Bonus",
    "Referral_Bonus": "Referral Bonus",
    "Completion_Bonus": "Completion Bonus",
}

DEGREE_LEVELS = ["ADN", "BSN", "MSN", "DNP"]
LADDER_LEVELS = ["I", "II", "III", "IV"]

# Named multipliers: value -> (display, description)
MULTIPLIER_NAMES: dict[Decimal, tuple[str, str]] = {
    Decimal("1"): ("Regular rate", ""),
    Decimal("1.5"): ("1.5× rate", "Time and a half"),
    Decimal("2"): ("2× rate", "Double time"),
    Decimal("2.5"): ("2.5× rate", "Double and a half"),
    Decimal("3"): ("3× rate", "Triple time"),
}


@dataclass(frozen=True)
class ValueDisplay:
    """Short label for a differential value plus a one-line description."""

    display: str
    description: str = ""


def format_currency(amount: Number, decimals: int = 0) -> str:
    """Format an amount as US dollars, e.g. $89,856 or -$1,234.50."""
    rounded = to_decimal(amount).quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)
    sign = "-" if rounded < 0 else ""
    return f"{sign}${abs(rounded):,.{decimals}f}"


def format_pay(amount: Number, unit: PayUnit | str) -> str:
    """Format an amount with its unit suffix: $48.00/hr, $89,856/year."""
    pay_unit = PayUnit.parse(unit) or PayUnit.HOURLY
    return format_currency(amount, _UNIT_DECIMALS[pay_unit]) + _UNIT_SUFFIX[pay_unit]


def format_differential_type(key: str, catalog: DifferentialCatalog | None = None) -> str:
    """User-facing name for a differential type key."""
    if catalog is not None:
        config = catalog.get(key)
        if config is not None and config.display_name:
            return config.display_name
    return DISPLAY_NAMES.get(key, key)


def format_frequency(frequency: Number, unit: str) -> str:
    """Describe a frequency in the words of its unit."""
    value = to_decimal(frequency)
    text = unit.strip().lower()
    count = f"{value.normalize():f}"

    if "yes" in text or "binary" in text:
        return "Yes" if value > 0 else "No"
    if text == "one-time":
        return "Received" if value > 0 else "Not received"
    if text == "annual":
        return "Yes (Annual)" if value > 0 else "No"
    if "percent" in text:
        return f"{count}%"
    if "degree" in text:
        index = int(value)
        return DEGREE_LEVELS[index] if 0 <= index < len(DEGREE_LEVELS) else f"Level {count}"
    if "level" in text:
        index = int(value)
        label = LADDER_LEVELS[index] if 0 <= index < len(LADDER_LEVELS) else count
        return f"Level {label}"
    return f"{count} {unit}"


def _plain(value: Decimal) -> str:
    return f"{value.normalize():f}"


def format_differential_value(value: Number, unit: str, frequency: Number = 1) -> ValueDisplay:
    """Describe a differential value in the words of its unit.

    Examples: "+$3/hr" extra per hour, "1.5× rate" time and a half,
    "+10% of base", "+$100/mo". A zero count reads "Not Applied".
    """
    amount = to_decimal(value)
    text = unit.strip().lower()
    if to_decimal(frequency) == 0:
        return ValueDisplay("Not Applied")

    kind, basis = classify_value_unit(unit)
    if kind is ValueUnitKind.MULTIPLIER:
        if amount in MULTIPLIER_NAMES:
            return ValueDisplay(*MULTIPLIER_NAMES[amount])
        bonus = ((amount - 1) * 100).quantize(Decimal(1), rounding=ROUND_HALF_UP)
        return ValueDisplay(f"{_plain(amount)}× rate", f"+{bonus}% extra")
    if kind is ValueUnitKind.PERCENTAGE:
        return ValueDisplay(f"+{_plain(amount)}% of base", "salary bonus")
    if kind is ValueUnitKind.DESCRIPTIVE:
        return ValueDisplay(f"${_plain(amount)}", unit)

    dollars = f"+${_plain(amount)}"
    if "per level" in text:
        return ValueDisplay(f"{dollars}/hr", "per level")
    if basis is FlatBasis.PER_HOUR:
        return ValueDisplay(f"{dollars}/hr", "extra per hour")
    if basis is FlatBasis.PER_MONTH:
        return ValueDisplay(f"{dollars}/mo", "monthly bonus")
    if basis is FlatBasis.PER_YEAR:
        return ValueDisplay(f"{dollars}/year", "annual bonus")
    if "shift" in text:
        return ValueDisplay(dollars, "per shift")
    return ValueDisplay(dollars, "per occurrence")
