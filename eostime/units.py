"""Date and time units and days of the week used to step dates and times."""

from __future__ import annotations

import enum

__all__ = ["Unit", "Weekday"]

_NANOS_PER_SEC = 1_000_000_000


class Unit(enum.Enum):
    """A calendar or clock unit that a date or time can be moved by."""

    YEAR = "year"
    MONTH = "month"
    WEEK = "week"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"
    MILLISECOND = "millisecond"
    MICROSECOND = "microsecond"
    NANOSECOND = "nanosecond"

    @property
    def nanoseconds(self) -> int | None:
        """Fixed length of a clock unit in nanoseconds, or None for calendar units."""
        return _CLOCK_UNIT_NANOS.get(self)

    @property
    def is_clock_unit(self) -> bool:
        """True for units that can move a time of day."""
        return self in _CLOCK_UNIT_NANOS


_CLOCK_UNIT_NANOS = {
    Unit.HOUR: 3600 * _NANOS_PER_SEC,
    Unit.MINUTE: 60 * _NANOS_PER_SEC,
    Unit.SECOND: _NANOS_PER_SEC,
    Unit.MILLISECOND: 1_000_000,
    Unit.MICROSECOND: 1_000,
    Unit.NANOSECOND: 1,
}


class Weekday(enum.IntEnum):
    """A day of the week, numbered the ISO-8601 way from Monday."""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7