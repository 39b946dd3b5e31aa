"""Immutable calendar instants.

An Instant wraps a naive ``datetime`` holding host-local wall-clock time.
Arithmetic never mutates: every step returns a new Instant. Malformed input
and results outside the representable range produce the *invalid* Instant,
which every operation propagates instead of raising.
"""

import logging
import math
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta

from dateutil.parser import isoparse
from dateutil.relativedelta import relativedelta
from typing_extensions import override

logger = logging.getLogger(__name__)

_EPOCH = datetime(1970, 1, 1)


@dataclass(frozen=True, kw_only=True)
class Instant:
    moment: datetime | None = None

    @classmethod
    def invalid(cls) -> "Instant":
        return cls(moment=None)

    @classmethod
    def now(cls) -> "Instant":
        """Current time on the host's local clock."""
        return cls(moment=datetime.now())

    @classmethod
    def from_datetime(cls, value: datetime | date) -> "Instant":
        """Wrap a ``datetime`` or ``date``.

        Timezone-aware datetimes are converted to host-local wall-clock time.
        Plain dates map to local midnight.
        """
        if not isinstance(value, datetime):
            return cls(moment=datetime.combine(value, time.min))
        if value.tzinfo is None:
            return cls(moment=value)
        try:
            return cls(moment=value.astimezone().replace(tzinfo=None))
        except (OverflowError, OSError, ValueError):
            logger.debug("Cannot convert %r to local time", value)
            return cls.invalid()

    @classmethod
    def parse(cls, text: str) -> "Instant":
        """Parse an ISO-8601 date or date-time string.

        Returns the invalid Instant for anything unparseable, e.g.
        ``Instant.parse("invalid")``.
        """
        if not isinstance(text, str):
            return cls.invalid()
        try:
            parsed = isoparse(text.strip())
        except (ValueError, OverflowError) as exc:
            logger.debug("Unparseable date %r: %s", text, exc)
            return cls.invalid()
        return cls.from_datetime(parsed)

    @classmethod
    def from_fields(
        cls,
        year: int,
        month_index: int,
        day: int = 1,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
    ) -> "Instant":
        """Build an Instant from calendar fields with a 0-based month.

        Out-of-range fields carry into the next larger field, so
        ``from_fields(2025, 0, 32)`` is February 1st, 2025.
        """
        try:
            carry_years, month_index = divmod(month_index, 12)
            first_of_month = datetime(year + carry_years, month_index + 1, 1)
            moment = first_of_month + timedelta(
                days=day - 1, hours=hour, minutes=minute, seconds=second
            )
        except (OverflowError, TypeError, ValueError):
            logger.debug(
                "Fields out of range: %r",
                (year, month_index, day, hour, minute, second),
            )
            return cls.invalid()
        return cls(moment=moment)

    @property
    def is_valid(self) -> bool:
        return self.moment is not None

    @property
    def year(self) -> int | None:
        return None if self.moment is None else self.moment.year

    @property
    def month(self) -> int | None:
        """Month of the year, 1-12."""
        return None if self.moment is None else self.moment.month

    @property
    def month_index(self) -> int | None:
        """Month of the year, 0-11."""
        return None if self.moment is None else self.moment.month - 1

    @property
    def day(self) -> int | None:
        return None if self.moment is None else self.moment.day

    @property
    def hour(self) -> int | None:
        return None if self.moment is None else self.moment.hour

    @property
    def minute(self) -> int | None:
        return None if self.moment is None else self.moment.minute

    @property
    def second(self) -> int | None:
        return None if self.moment is None else self.moment.second

    def get_time(self) -> float:
        """Milliseconds since the Unix epoch, or ``nan`` if invalid."""
        if self.moment is None:
            return math.nan
        try:
            return self.moment.timestamp() * 1000
        except (OverflowError, OSError, ValueError):
            # Platform mktime cannot place this year; count wall-clock time
            return (self.moment - _EPOCH) / timedelta(milliseconds=1)

    def to_datetime(self) -> datetime | None:
        return self.moment

    def plus_minutes(self, minutes: int) -> "Instant":
        """Return a new Instant ``minutes`` later (earlier if negative).

        Overflow carries through hours, days, months and years.
        """
        if self.moment is None:
            return self
        try:
            return Instant(moment=self.moment + timedelta(minutes=minutes))
        except OverflowError:
            logger.debug("Adding %d minutes to %s overflows", minutes, self)
            return Instant.invalid()

    def plus_months(self, months: int) -> "Instant":
        """Return a new Instant ``months`` calendar months later.

        The day of month is clamped to the last day of the target month;
        time of day is unchanged.
        """
        if self.moment is None:
            return self
        try:
            return Instant(moment=self.moment + relativedelta(months=months))
        except (OverflowError, ValueError):
            logger.debug("Adding %d months to %s overflows", months, self)
            return Instant.invalid()

    @override
    def __str__(self) -> str:
        if self.moment is None:
            return "Invalid Date"
        return self.moment.isoformat()
