"""Fixed offsets from UTC, usable as a time zone."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from .utils import divrem

__all__ = ["UtcOffset"]

_LIMIT = 86400


def _split(total: int) -> tuple[int, int, int]:
    hours, rest = divrem(total, 3600)
    minutes, seconds = divrem(rest, 60)
    return hours, minutes, seconds


def _check(name: str, value: int, low: int, high: int) -> None:
    if not low <= value <= high:
        raise ValueError(f"{name} must be within {low}..={high}, got {value}")


@dataclass(frozen=True, order=True)
class UtcOffset:
    """An offset from UTC of at most ±24:00:00.

    All three components carry the same sign.
    """

    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    MIN: ClassVar[UtcOffset]
    MAX: ClassVar[UtcOffset]
    UTC: ClassVar[UtcOffset]

    def __post_init__(self) -> None:
        total = self.hours * 3600 + self.minutes * 60 + self.seconds
        _check("offset seconds", total, -_LIMIT, _LIMIT)
        if (self.hours, self.minutes, self.seconds) != _split(total):
            raise ValueError(
                "offset components must share one sign and stay within their ranges"
            )

    @classmethod
    def from_hms(cls, hours: int, minutes: int, seconds: int) -> UtcOffset:
        """Create an offset from hours, minutes and seconds.

        Mismatched signs are flipped to follow the hours, or the minutes when
        the hours are zero. Raises ValueError when out of range.
        """
        _check("hours", hours, -24, 24)
        _check("minutes", minutes, -59, 59)
        _check("seconds", seconds, -59, 59)
        if hours < 0:
            minutes = -abs(minutes)
            seconds = -abs(seconds)
        elif hours > 0:
            minutes = abs(minutes)
            seconds = abs(seconds)
        elif (seconds > 0) != (minutes > 0):
            seconds = -seconds
        return cls.from_seconds(hours * 3600 + minutes * 60 + seconds)

    @classmethod
    def from_seconds(cls, seconds: int) -> UtcOffset:
        """Create an offset from a total number of seconds within ±86400."""
        _check("offset seconds", seconds, -_LIMIT, _LIMIT)
        return cls._from_seconds_unchecked(seconds)

    @classmethod
    def _from_seconds_unchecked(cls, seconds: int) -> UtcOffset:
        return cls(*_split(seconds))

    def total_seconds(self) -> int:
        """Total number of seconds in this offset."""
        return self.hours * 3600 + self.minutes * 60 + self.seconds

    def into_hms(self) -> tuple[int, int, int]:
        """The (hours, minutes, seconds) components."""
        return self.hours, self.minutes, self.seconds

    def is_utc(self) -> bool:
        """True if this offset is zero."""
        return self.hours == 0 and self.minutes == 0 and self.seconds == 0

    def is_negative(self) -> bool:
        """True if all three components are negative."""
        return self.hours < 0 and self.minutes < 0 and self.seconds < 0

    def checked_add(self, other: UtcOffset) -> UtcOffset | None:
        """Add two offsets, or return None if the sum is out of bounds."""
        total = self.total_seconds() + other.total_seconds()
        if not -_LIMIT <= total <= _LIMIT:
            return None
        return self._from_seconds_unchecked(total)

    def checked_sub(self, other: UtcOffset) -> UtcOffset | None:
        """Subtract two offsets, or return None if the result is out of bounds."""
        total = self.total_seconds() - other.total_seconds()
        if not -_LIMIT <= total <= _LIMIT:
            return None
        return self._from_seconds_unchecked(total)

    @classmethod
    def _saturated(cls, total: int) -> UtcOffset:
        if total <= -_LIMIT:
            return cls.MIN
        if total >= _LIMIT:
            return cls.MAX
        return cls._from_seconds_unchecked(total)

    def saturating_add(self, other: UtcOffset) -> UtcOffset:
        """Add two offsets, clamping at the bounds."""
        return self._saturated(self.total_seconds() + other.total_seconds())

    def saturating_sub(self, other: UtcOffset) -> UtcOffset:
        """Subtract two offsets, clamping at the bounds."""
        return self._saturated(self.total_seconds() - other.total_seconds())

    # Time zone behaviour: a fixed offset never transitions.

    def name(self, ts: Any) -> str | None:
        """A fixed offset has no name."""
        return None

    def offset(self, ts: Any) -> UtcOffset:
        """The offset at any moment is this offset."""
        return self

    def resolve(self, date: Any, time: Any) -> Any:
        """Resolve a local date and time; always unambiguous."""
        from .zoned import DateTimeResolution

        return DateTimeResolution.unambiguous(date, time, self, self)

    def convert_utc(self, utc: Any) -> Any:
        """Convert a UTC date time into local time at this offset."""
        return utc.shift(self).with_timezone(self)

    def is_fixed(self) -> bool:
        """A fixed offset is always fixed."""
        return True

    def __str__(self) -> str:
        m, s = abs(self.minutes), abs(self.seconds)
        if s > 0:
            return f"{self.hours:+03d}:{m:02d}:{s:02d}"
        return f"{self.hours:+03d}:{m:02d}"

    def __neg__(self) -> UtcOffset:
        return UtcOffset(-self.hours, -self.minutes, -self.seconds)

    def __add__(self, other: object) -> UtcOffset:
        if not isinstance(other, UtcOffset):
            return NotImplemented
        result = self.checked_add(other)
        if result is None:
            raise ValueError("out of bounds when adding offsets")
        return result

    def __sub__(self, other: object) -> UtcOffset:
        if not isinstance(other, UtcOffset):
            return NotImplemented
        result = self.checked_sub(other)
        if result is None:
            raise ValueError("out of bounds when subtracting offsets")
        return result


UtcOffset.MIN = UtcOffset(-24, 0, 0)
UtcOffset.MAX = UtcOffset(24, 0, 0)
UtcOffset.UTC = UtcOffset(0, 0, 0)