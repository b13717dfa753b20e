"""A calendar-free time of day with nanosecond precision."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace
from datetime import timedelta
from typing import ClassVar

from .units import Unit

__all__ = ["IsoFormatPrecision", "Time"]

NANOS_PER_SEC = 1_000_000_000
NANOS_PER_MIN = 60 * NANOS_PER_SEC
NANOS_PER_HOUR = 60 * NANOS_PER_MIN
MICROS_PER_SEC = 1_000_000
MICROS_PER_MIN = 60 * MICROS_PER_SEC
MICROS_PER_HOUR = 60 * MICROS_PER_MIN

_I32_MAX = 2**31 - 1
_I32_MIN = -(2**31)
MAXIMUM_SECONDS_FROM_DURATION = _I32_MAX * 24 * 60 * 60


def _check_range(name: str, value: int, low: int, high: int) -> None:
    if not low <= value <= high:
        raise ValueError(f"{name} must be within {low}..={high}, got {value}")


def _timedelta_nanos(delta: timedelta) -> int:
    return (delta.days * 86400 + delta.seconds) * NANOS_PER_SEC + delta.microseconds * 1000


class IsoFormatPrecision(enum.Enum):
    """How much of a time to write in ISO-8601 form."""

    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"
    MILLISECOND = "millisecond"
    MICROSECOND = "microsecond"
    NANOSECOND = "nanosecond"


@dataclass(frozen=True, order=True)
class Time:
    """A time of day, not tied to any date or time zone.

    The nanosecond component may go up to 1,999,999,999 to allow leap seconds.
    """

    hour: int
    minute: int
    second: int
    nanosecond: int = field(default=0)

    MIN: ClassVar[Time]
    MIDNIGHT: ClassVar[Time]
    MAX: ClassVar[Time]

    def __post_init__(self) -> None:
        _check_range("hour", self.hour, 0, 23)
        _check_range("minute", self.minute, 0, 59)
        _check_range("second", self.second, 0, 59)
        _check_range("nanosecond", self.nanosecond, 0, 1_999_999_999)

    @classmethod
    def new(cls, hour: int, minute: int, second: int) -> Time:
        """Create a time from hour, minute and second; raises ValueError when out of range."""
        return cls(hour, minute, second)

    def next(self, step: Unit) -> Time:
        """Return the time moved forward by one clock unit, wrapping past midnight."""
        return self.add_with_duration(self._step_nanos(step))[1]

    def prev(self, step: Unit) -> Time:
        """Return the time moved back by one clock unit, wrapping past midnight."""
        return self.sub_with_duration(self._step_nanos(step))[1]

    @staticmethod
    def _step_nanos(step: Unit) -> int:
        if not isinstance(step, Unit) or step.nanoseconds is None:
            raise TypeError(f"cannot step a Time by {step!r}")
        return step.nanoseconds

    def total_seconds(self) -> int:
        """Whole seconds since midnight."""
        return self.hour * 3600 + self.minute * 60 + self.second

    def total_nanos(self) -> int:
        """Nanoseconds since midnight."""
        return (
            self.hour * NANOS_PER_HOUR
            + self.minute * NANOS_PER_MIN
            + self.second * NANOS_PER_SEC
            + self.nanosecond
        )

    def total_micros(self) -> int:
        """Microseconds since midnight, truncating the nanoseconds."""
        return (
            self.hour * MICROS_PER_HOUR
            + self.minute * MICROS_PER_MIN
            + self.second * MICROS_PER_SEC
            + self.nanosecond // 1000
        )

    @classmethod
    def adjust_from_nanos(cls, nanos: int) -> tuple[int, Time]:
        """Split a nanosecond count into whole days and the remaining time of day."""
        hour, nanos = divmod(nanos, NANOS_PER_HOUR)
        minute, nanos = divmod(nanos, NANOS_PER_MIN)
        second, nanos = divmod(nanos, NANOS_PER_SEC)
        days, hour = divmod(hour, 24)
        return days, cls(hour, minute, second, nanos)

    def add_with_duration(self, nanoseconds: int) -> tuple[int, Time]:
        """Add a non-negative duration; return the days that passed and the new time."""
        if nanoseconds < 0:
            raise ValueError("duration must not be negative")
        if nanoseconds // NANOS_PER_SEC > MAXIMUM_SECONDS_FROM_DURATION:
            return _I32_MAX, self
        return self.adjust_from_nanos(self.total_nanos() + nanoseconds)

    def sub_with_duration(self, nanoseconds: int) -> tuple[int, Time]:
        """Subtract a non-negative duration; return the days that passed and the new time."""
        if nanoseconds < 0:
            raise ValueError("duration must not be negative")
        if nanoseconds // NANOS_PER_SEC > MAXIMUM_SECONDS_FROM_DURATION:
            return _I32_MIN + 1, self
        return self.adjust_from_nanos(self.total_nanos() - nanoseconds)

    def millisecond(self) -> int:
        """The millisecond within the second."""
        return self.nanosecond // 1_000_000

    def microsecond(self) -> int:
        """The microsecond within the second."""
        return self.nanosecond // 1_000

    def with_hour(self, hour: int) -> Time:
        """Return a copy with the given hour (0..=23)."""
        return replace(self, hour=hour)

    def with_minute(self, minute: int) -> Time:
        """Return a copy with the given minute (0..=59)."""
        return replace(self, minute=minute)

    def with_second(self, second: int) -> Time:
        """Return a copy with the given second (0..=59)."""
        return replace(self, second=second)

    def with_millisecond(self, millisecond: int) -> Time:
        """Return a copy whose sub-second part is the given millisecond count."""
        _check_range("millisecond", millisecond, 0, 1999)
        return replace(self, nanosecond=millisecond * 1_000_000)

    def with_microsecond(self, microsecond: int) -> Time:
        """Return a copy whose sub-second part is the given microsecond count."""
        _check_range("microsecond", microsecond, 0, 1_999_999)
        return replace(self, nanosecond=microsecond * 1_000)

    def with_nanosecond(self, nanosecond: int) -> Time:
        """Return a copy whose sub-second part is the given nanosecond count."""
        return replace(self, nanosecond=nanosecond)

    def to_iso_format(self, precision: IsoFormatPrecision | None = None) -> str:
        """Write the time in ISO-8601 form.

        Without a precision, microseconds are written only when the time has a
        sub-second part.
        """
        if precision is None:
            precision = (
                IsoFormatPrecision.MICROSECOND if self.nanosecond else IsoFormatPrecision.SECOND
            )
        hms = f"{self.hour:02}:{self.minute:02}:{self.second:02}"
        if precision is IsoFormatPrecision.HOUR:
            return f"{self.hour:02}:00"
        if precision is IsoFormatPrecision.MINUTE:
            return f"{self.hour:02}:{self.minute:02}"
        if precision is IsoFormatPrecision.SECOND:
            return hms
        if precision is IsoFormatPrecision.MILLISECOND:
            return f"{hms}.{self.millisecond():03}"
        if precision is IsoFormatPrecision.MICROSECOND:
            return f"{hms}.{self.microsecond():06}"
        return f"{hms}.{self.nanosecond:07}"

    def _shift(self, nanos: int) -> Time:
        if nanos < 0:
            return self.sub_with_duration(-nanos)[1]
        return self.add_with_duration(nanos)[1]

    def __add__(self, other: object) -> Time:
        if isinstance(other, timedelta):
            return self._shift(_timedelta_nanos(other))
        return NotImplemented

    def __sub__(self, other: object) -> Time | timedelta:
        if isinstance(other, timedelta):
            return self._shift(-_timedelta_nanos(other))
        if isinstance(other, Time):
            return timedelta(microseconds=self.total_micros() - other.total_micros())
        return NotImplemented

    def __str__(self) -> str:
        hms = f"{self.hour:02}:{self.minute:02}:{self.second:02}"
        if self.nanosecond:
            return f"{hms}.{self.nanosecond:07}"
        return hms


Time.MIN = Time(0, 0, 0, 0)
Time.MIDNIGHT = Time.MIN
Time.MAX = Time(23, 59, 59, 999_999_999)