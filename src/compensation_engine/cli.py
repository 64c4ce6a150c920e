"""Compensation calculator command line interface.

Provides offline access to the engine for:
- Pay unit conversion
- Compensation breakdowns
- Differential previews
- Catalog inspection

Usage:
    compensation-engine-calc convert 45 --from hourly --shift-hours 12
    compensation-engine-calc breakdown 95000 --unit annual --differentials 850
    compensation-engine-calc preview 38 --differential Night:4:3 --differential Holiday:1.5:8
    compensation-engine-calc catalog --category essential
"""

from __future__ import annotations

import argparse
import json
import sys
from decimal import Decimal, InvalidOperation
from typing import Any, Callable

from compensation_engine.calculators.breakdown import (
    calculate_compensation_breakdown,
    preview_differentials,
)
from compensation_engine.calculators.catalog import (
    CatalogError,
    DifferentialInstance,
    DuplicateDifferentialTypeError,
    UnknownDifferentialTypeError,
    load_catalog,
)
from compensation_engine.calculators.conversions import (
    hourly_to_annual,
    hourly_to_monthly,
    to_hourly_rate,
)
from compensation_engine.calculators.shift_patterns import resolve_pattern
from compensation_engine.calculators.types import PayUnit
from compensation_engine.config import settings
from compensation_engine.formatting import (
    format_differential_type,
    format_differential_value,
    format_frequency,
    format_pay,
)


def parse_decimal(s: str) -> Decimal:
    """Parse a decimal amount."""
    try:
        return Decimal(s)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"not a number: {s!r}") from None


def parse_differential(s: str) -> DifferentialInstance:
    """Parse a TYPE:VALUE:FREQUENCY triple."""
    parts = s.split(":")
    if len(parts) != 3:
        raise argparse.ArgumentTypeError(
            f"expected TYPE:VALUE:FREQUENCY, got {s!r}"
        )
    key, value, frequency = parts
    return DifferentialInstance(
        type=key, value=parse_decimal(value), frequency=parse_decimal(frequency)
    )


def _dump(data: Any) -> None:
    print(json.dumps(data, indent=2, default=str))


class CompensationCli:
    """Compensation calculator command line interface."""

    def __init__(self) -> None:
        self.parser = self._build_parser()

    def _build_parser(self) -> argparse.ArgumentParser:
        """Build argument parser."""
        parser = argparse.ArgumentParser(
            prog="compensation-engine-calc",
            description="Nursing compensation calculator",
        )
        parser.add_argument(
            "--catalog",
            dest="catalog_path",
            default=settings.catalog_path,
            help="Differential catalog JSON (default: bundled catalog)",
        )
        subparsers = parser.add_subparsers(dest="command", help="Commands")

        # convert command
        convert = subparsers.add_parser(
            "convert",
            help="Convert a pay amount to hourly, monthly and annual",
        )
        convert.add_argument("amount", type=parse_decimal, help="Pay amount")
        convert.add_argument(
            "--from",
            dest="unit",
            choices=[u.value for u in PayUnit],
            help="Unit of the amount (inferred from magnitude when omitted)",
        )
        convert.add_argument(
            "--shift-hours",
            type=parse_decimal,
            default=Decimal(settings.default_shift_hours),
            help="Nominal shift length in hours",
        )

        # breakdown command
        breakdown = subparsers.add_parser(
            "breakdown",
            help="Full compensation breakdown for base pay plus differentials",
        )
        breakdown.add_argument("base_pay", type=parse_decimal, help="Base pay amount")
        breakdown.add_argument(
            "--unit",
            choices=[u.value for u in PayUnit],
            help="Unit of base pay (inferred from magnitude when omitted)",
        )
        breakdown.add_argument(
            "--differentials",
            type=parse_decimal,
            default=Decimal("0"),
            help="Monthly differential total",
        )
        breakdown.add_argument(
            "--shift-hours",
            type=parse_decimal,
            default=Decimal(settings.default_shift_hours),
            help="Nominal shift length in hours",
        )

        # preview command
        preview = subparsers.add_parser(
            "preview",
            help="Price differentials against base pay",
        )
        preview.add_argument("base_pay", type=parse_decimal, help="Base pay amount")
        preview.add_argument(
            "--unit",
            default=PayUnit.HOURLY.value,
            choices=[u.value for u in PayUnit],
            help="Unit of base pay",
        )
        preview.add_argument(
            "--differential",
            dest="differentials",
            type=parse_differential,
            action="append",
            default=[],
            metavar="TYPE:VALUE:FREQUENCY",
            help="Differential to price (repeatable)",
        )
        preview.add_argument(
            "--shift-hours",
            type=parse_decimal,
            default=Decimal(settings.default_shift_hours),
            help="Nominal shift length in hours",
        )

        # catalog command
        catalog = subparsers.add_parser(
            "catalog",
            help="Show the differential catalog",
        )
        catalog.add_argument(
            "--category",
            choices=["essential", "common", "rare", "bonus"],
            help="Only list types in this category",
        )
        catalog.add_argument(
            "--type",
            dest="differential_type",
            help="Show the full config of one type",
        )

        return parser

    def run(self, args: list[str] | None = None) -> int:
        """Run the CLI with given arguments."""
        parsed = self.parser.parse_args(args)

        if not parsed.command:
            self.parser.print_help()
            return 1

        # Dispatch to command handler
        handlers: dict[str, Callable[..., int]] = {
            "convert": self._cmd_convert,
            "breakdown": self._cmd_breakdown,
            "preview": self._cmd_preview,
            "catalog": self._cmd_catalog,
        }

        handler = handlers.get(parsed.command)
        if handler is None:
            print(f"Unknown command: {parsed.command}", file=sys.stderr)
            return 1

        try:
            return handler(parsed)
        except (
            CatalogError,
            DuplicateDifferentialTypeError,
            UnknownDifferentialTypeError,
        ) as e:
            print(f"ERROR: {e}", file=sys.stderr)
            return 1

    def _cmd_convert(self, args: argparse.Namespace) -> int:
        """Convert an amount across pay units."""
        hourly = to_hourly_rate(args.amount, args.unit, args.shift_hours)
        monthly = hourly_to_monthly(hourly, args.shift_hours)
        annual = hourly_to_annual(hourly, args.shift_hours)
        pattern = resolve_pattern(args.shift_hours)

        _dump(
            {
                "hourly": hourly,
                "monthly": monthly,
                "annual": annual,
                "formatted": {
                    "hourly": format_pay(hourly, PayUnit.HOURLY),
                    "monthly": format_pay(monthly, PayUnit.MONTHLY),
                    "annual": format_pay(annual, PayUnit.ANNUAL),
                },
                "shiftPattern": {
                    "hoursPerShift": pattern.hours_per_shift,
                    "daysPerWeek": pattern.days_per_week,
                    "hoursPerMonth": pattern.hours_per_month,
                    "hoursPerYear": pattern.hours_per_year,
                },
            }
        )
        return 0

    def _cmd_breakdown(self, args: argparse.Namespace) -> int:
        """Print a full compensation breakdown."""
        result = calculate_compensation_breakdown(
            args.base_pay, args.unit, args.differentials, args.shift_hours
        )
        _dump(result.to_dict())
        return 0

    def _cmd_preview(self, args: argparse.Namespace) -> int:
        """Price differentials and print the preview."""
        catalog = load_catalog(args.catalog_path)
        warnings = catalog.validate_instances(args.differentials)
        for warning in warnings:
            print(f"WARNING: {warning}", file=sys.stderr)

        result = preview_differentials(
            args.differentials,
            args.base_pay,
            catalog,
            base_pay_unit=args.unit,
            shift_hours=args.shift_hours,
            rules=settings.compensation_rules(),
        )
        data = result.to_dict()
        data["labels"] = {}
        for item in result.items:
            config = catalog.require(item.type)
            value = format_differential_value(
                item.value, config.value_range.unit, item.frequency
            )
            data["labels"][item.type] = {
                "name": format_differential_type(item.type, catalog),
                "value": value.display,
                "detail": value.description,
                "frequency": format_frequency(item.frequency, config.frequency_range.unit),
            }
        _dump(data)
        return 0

    def _cmd_catalog(self, args: argparse.Namespace) -> int:
        """Show catalog types or one type's config."""
        catalog = load_catalog(args.catalog_path)

        if args.differential_type:
            _dump({args.differential_type: catalog.require(args.differential_type).to_dict()})
        elif args.category:
            _dump(catalog.types_by_category()[args.category])
        else:
            _dump(catalog.types_by_category())
        return 0


def main() -> int:
    """CLI entry point."""
    cli = CompensationCli()
    return cli.run()


if __name__ == "__main__":
    sys.exit(main())
