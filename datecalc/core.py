"""The date engine: arithmetic, formatting, validation and description.

All four operations are pure functions of their arguments and never raise.
Failure is reported through return values: an invalid Instant, ``False``
or the empty string.
"""

import logging
import math
from datetime import date, datetime
from typing import Any

from datecalc.instant import Instant
from datecalc.units import (
    MINUTES_PER_UNIT,
    Operator,
    TimeUnit,
    is_operator,
    is_time_unit,
)

logger = logging.getLogger(__name__)


def _signed_quantity(quantity: Any, operator: Operator) -> int | None:
    """Apply the operator's sign; None when the quantity is unusable."""
    if isinstance(quantity, bool) or not isinstance(quantity, (int, float)):
        return None
    if not math.isfinite(quantity):
        return None
    if not is_operator(operator):
        return None
    # Fractional quantities truncate toward zero
    amount = int(quantity)
    return amount if operator == "add" else -amount


def calculate_date(
    base: Instant, quantity: int, unit: TimeUnit, operator: Operator
) -> Instant:
    """Apply ``quantity`` units to ``base`` and return a new Instant.

    Subtraction is addition of the negated quantity. Minutes, hours, days and
    weeks are converted to minutes and added with field carrying. Months move
    the calendar month and clamp the day to the end of the target month:

        >>> jan_31 = Instant.from_fields(2025, 0, 31, 10)
        >>> str(calculate_date(jan_31, 1, "months", "add"))
        '2025-02-28T10:00:00'

    Returns the invalid Instant if ``base`` is invalid, the quantity is not a
    finite number, or the unit/operator is unrecognized.
    """
    if not isinstance(base, Instant) or not base.is_valid:
        return Instant.invalid()

    amount = _signed_quantity(quantity, operator)
    if amount is None or not is_time_unit(unit):
        logger.debug(
            "Rejected quantity=%r unit=%r operator=%r", quantity, unit, operator
        )
        return Instant.invalid()

    if unit == "months":
        result = base.plus_months(amount)
    else:
        result = base.plus_minutes(amount * MINUTES_PER_UNIT[unit])

    logger.debug("%s %s %d %s -> %s", base, operator, abs(amount), unit, result)
    return result


def format_date_time(instant: Instant, unit: TimeUnit) -> str:
    """Render ``instant`` for display.

    ``"days"`` renders the date alone (``2025-01-15``). Every other unit,
    weeks and months included, adds a zero-padded 12-hour clock time
    (``2025-01-15 02:30:45 PM``). Midnight is ``12:..AM`` and noon is
    ``12:..PM``. An invalid instant renders as the empty string.
    """
    if not isinstance(instant, Instant) or instant.moment is None:
        return ""

    moment = instant.moment
    date_part = f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"
    if unit == "days":
        return date_part

    hour = moment.hour % 12 or 12
    meridiem = "PM" if moment.hour >= 12 else "AM"
    return (
        f"{date_part} {hour:02d}:{moment.minute:02d}:{moment.second:02d} "
        f"{meridiem}"
    )


def is_valid_date(value: Any) -> bool:
    """True unless ``value`` is the invalid Instant or not a date at all."""
    if isinstance(value, Instant):
        return value.is_valid
    return isinstance(value, (datetime, date))


def _unit_label(unit: str, quantity: Any) -> str:
    if quantity == 1 and unit.endswith("s"):
        return unit[:-1]
    return unit


def operation_description(
    quantity: int | None,
    unit: TimeUnit,
    operator: Operator,
    *,
    result: Instant | None,
    base: Instant | None,
) -> str:
    """Describe the operation behind ``result``, e.g. ``"Adding 1 day"``.

    The quantity is truncated the way ``calculate_date`` truncates it and
    rendered without a sign: adding ``-3`` days reads ``"Subtracting 3 days"``.
    Empty until there is both a base date and a valid result.
    """
    if base is None or result is None or not is_valid_date(result):
        return ""
    amount = _signed_quantity(quantity, operator)
    if amount is None:
        return ""

    if amount < 0 or (amount == 0 and operator == "subtract"):
        verb = "Subtracting"
    else:
        verb = "Adding"
    return f"{verb} {abs(amount)} {_unit_label(str(unit), abs(amount))}"
