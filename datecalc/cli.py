"""Command-line date calculator.

Usage:
    datecalc 2025-01-15 5
    datecalc 2025-01-31T10:00 1 --unit months
    datecalc now 3 --unit hours --subtract
    DATECALC_DEFAULT_OPERATOR=subtract datecalc 2025-01-15 2 --add
"""

import argparse
import logging
import sys

from datecalc.calculator import CalculationRequest, CalculatorState, calculate
from datecalc.instant import Instant
from datecalc.logging_config import setup_logging
from datecalc.settings import Settings
from datecalc.units import TIME_UNITS

logger = logging.getLogger(__name__)


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="datecalc",
        description="Add or subtract minutes, hours, days, weeks or months from a date",
    )
    parser.add_argument(
        "base",
        help="Base date as ISO-8601 (2025-01-15, 2025-01-15T10:30) or 'now'",
    )
    parser.add_argument("quantity", type=int, help="Number of units to apply")
    parser.add_argument(
        "--unit",
        choices=TIME_UNITS,
        default=settings.default_unit,
        help=f"Time unit (default: {settings.default_unit})",
    )
    direction = parser.add_mutually_exclusive_group()
    direction.add_argument(
        "--add",
        dest="operator",
        action="store_const",
        const="add",
        help="Add the quantity",
    )
    direction.add_argument(
        "--subtract",
        dest="operator",
        action="store_const",
        const="subtract",
        help="Subtract the quantity",
    )
    parser.set_defaults(operator=settings.default_operator)
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    try:
        settings = Settings.from_env()
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    args = build_parser(settings).parse_args(argv)
    setup_logging(logging.DEBUG if args.debug else logging.WARNING)

    if args.base.strip().lower() == "now":
        base = Instant.now()
    else:
        base = Instant.parse(args.base)
    outcome = calculate(
        CalculationRequest(
            base=base,
            quantity=args.quantity,
            unit=args.unit,
            operator=args.operator,
        )
    )

    if outcome.state is not CalculatorState.COMPUTED:
        print(f"Error: {outcome.error_message}", file=sys.stderr)
        return 1

    logger.debug("Computed %s from %s", outcome.result, base)
    print(outcome.description)
    print(outcome.formatted)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
