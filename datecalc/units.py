"""Time units and operators understood by the date engine."""

from typing import Any, Literal, TypeAlias

from datecalc.util import DAY, HOUR, MINUTE, WEEK

TimeUnit: TypeAlias = Literal["minutes", "hours", "days", "weeks", "months"]
Operator: TypeAlias = Literal["add", "subtract"]

# "months" has no fixed size
MINUTES_PER_UNIT: dict[str, int] = {
    "minutes": MINUTE,
    "hours": HOUR,
    "days": DAY,
    "weeks": WEEK,
}

UNIT_CHOICES: tuple[tuple[str, TimeUnit], ...] = (
    ("Minutes", "minutes"),
    ("Hours", "hours"),
    ("Days", "days"),
    ("Weeks", "weeks"),
    ("Months", "months"),
)

OPERATOR_CHOICES: tuple[tuple[str, Operator], ...] = (
    ("Add", "add"),
    ("Subtract", "subtract"),
)

TIME_UNITS: tuple[TimeUnit, ...] = tuple(value for _, value in UNIT_CHOICES)
OPERATORS: tuple[Operator, ...] = tuple(value for _, value in OPERATOR_CHOICES)


def is_time_unit(value: Any) -> bool:
    return isinstance(value, str) and value in TIME_UNITS


def is_operator(value: Any) -> bool:
    return isinstance(value, str) and value in OPERATORS
