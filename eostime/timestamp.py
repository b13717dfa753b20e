"""UNIX timestamps: seconds since 1970-01-01 00:00 UTC plus nanoseconds."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date as Date

from .offset import UtcOffset
from .time import NANOS_PER_SEC, Time
from .utils import divrem
from .zoned import DateTime, Utc

__all__ = ["Timestamp"]

_NANOS_PER_MILLI = 1_000_000
_NANOS_PER_MICRO = 1_000
_MILLIS_PER_SEC = 1_000
_MICROS_PER_SEC = 1_000_000
_MAX_NANOSECONDS = 1_999_999_999

_EPOCH_ORDINAL = Date(1970, 1, 1).toordinal()
_MIN_EPOCH_DAYS = Date.min.toordinal() - _EPOCH_ORDINAL
_MAX_EPOCH_DAYS = Date.max.toordinal() - _EPOCH_ORDINAL
_MIN_VALID = _MIN_EPOCH_DAYS * 86400
_MAX_VALID = _MAX_EPOCH_DAYS * 86400 + 23 * 3600 + 59 * 60 + 59


@dataclass(frozen=True, order=True)
class Timestamp:
    """A UNIX timestamp made of whole seconds and a nanosecond fraction.

    The fraction may reach 1,999,999,999 to allow leap seconds.
    """

    seconds: int = 0
    nanoseconds: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.nanoseconds <= _MAX_NANOSECONDS:
            raise ValueError(
                f"nanoseconds must be within 0..={_MAX_NANOSECONDS}, got {self.nanoseconds}"
            )

    @classmethod
    def new(cls, seconds: int, nanoseconds: int) -> Timestamp:
        """Create a timestamp; nanoseconds of two billion or more are clamped."""
        if nanoseconds < 0:
            raise ValueError(f"nanoseconds must not be negative, got {nanoseconds}")
        return cls(seconds, min(nanoseconds, _MAX_NANOSECONDS))

    @classmethod
    def from_seconds(cls, seconds: int) -> Timestamp:
        """Create a timestamp from whole seconds."""
        return cls(seconds, 0)

    @classmethod
    def from_milliseconds(cls, milliseconds: int) -> Timestamp:
        """Create a timestamp from a number of milliseconds."""
        seconds, millis = divmod(milliseconds, _MILLIS_PER_SEC)
        return cls(seconds, millis * _NANOS_PER_MILLI)

    @classmethod
    def from_microseconds(cls, microseconds: int) -> Timestamp:
        """Create a timestamp from a number of microseconds."""
        seconds, micros = divmod(microseconds, _MICROS_PER_SEC)
        return cls(seconds, micros * _NANOS_PER_MICRO)

    def as_seconds(self) -> int:
        """The whole seconds, without the fraction."""
        return self.seconds

    def as_milliseconds(self) -> int:
        """The total number of milliseconds."""
        return self.seconds * _MILLIS_PER_SEC + self.nanoseconds // _NANOS_PER_MILLI

    def as_seconds_float(self) -> float:
        """The seconds including the fraction, as a float."""
        return float(self.seconds) + self.nanoseconds / NANOS_PER_SEC

    def to_utc(self) -> DateTime:
        """The date time in UTC, saturating at the supported date range."""
        if self.seconds >= _MAX_VALID:
            return DateTime(Date.max, Time.MAX, UtcOffset.UTC, Utc())
        if self.seconds <= _MIN_VALID:
            return DateTime(Date.min, Time.MIN, UtcOffset.UTC, Utc())

        days, seconds = divmod(self.seconds, 86400)
        hours, seconds = divrem(seconds, 3600)
        minutes, seconds = divrem(seconds, 60)
        return DateTime(
            Date.fromordinal(_EPOCH_ORDINAL + days),
            Time(hours, minutes, seconds, self.nanoseconds),
            UtcOffset.UTC,
            Utc(),
        )

    def __repr__(self) -> str:
        if self.nanoseconds == 0:
            return f"Timestamp({self.seconds})"
        return f"Timestamp({self.as_seconds_float()!r})"