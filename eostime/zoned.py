"""Date times bound to a time zone, and the resolution of local times."""

from __future__ import annotations

import abc
import enum
import functools
import time as _systime
from dataclasses import dataclass, replace
from datetime import date as Date
from datetime import timedelta
from typing import Any

from .offset import UtcOffset
from .step import next_date, prev_date
from .time import NANOS_PER_SEC, Time
from .units import Unit, Weekday

__all__ = [
    "SkippedDateTimeError",
    "AmbiguousDateTimeError",
    "TimeZone",
    "Utc",
    "DateTime",
    "DateTimeResolutionKind",
    "DateTimeResolution",
]

_UNIX_EPOCH = Date(1970, 1, 1)
_NANOS_PER_DAY = 86400 * NANOS_PER_SEC


class SkippedDateTimeError(ValueError):
    """The local date time does not exist in the time zone."""

    def __init__(self, date: Date, time: Time) -> None:
        super().__init__(f"{date.isoformat()} {time} was skipped in this time zone")
        self.date = date
        self.time = time


class AmbiguousDateTimeError(ValueError):
    """The local date time occurs more than once in the time zone."""

    def __init__(self, date: Date, time: Time) -> None:
        super().__init__(f"{date.isoformat()} {time} is ambiguous in this time zone")
        self.date = date
        self.time = time


class TimeZone(abc.ABC):
    """Behaviour shared by every time zone."""

    def name(self, ts: Any) -> str | None:
        """The name of the zone at the given timestamp, if it has one."""
        return None

    @abc.abstractmethod
    def offset(self, ts: Any) -> UtcOffset:
        """The UTC offset in effect at the given timestamp, DST included."""

    @abc.abstractmethod
    def resolve(self, date: Date, time: Time) -> DateTimeResolution:
        """Resolve a local date and time in this zone."""

    def at(self, date: Date, time: Time) -> DateTime:
        """Resolve leniently: gaps are skipped forward, folds take the earlier time."""
        return self.resolve(date, time).lenient()

    def at_exactly(self, date: Date, time: Time) -> DateTime:
        """Resolve exactly, raising when the local time is missing or ambiguous."""
        return self.resolve(date, time).exact()

    @abc.abstractmethod
    def convert_utc(self, utc: DateTime) -> DateTime:
        """Convert a UTC date time into this zone."""

    def is_fixed(self) -> bool:
        """True if the zone never transitions between offsets."""
        return False


TimeZone.register(UtcOffset)


@dataclass(frozen=True)
class Utc(TimeZone):
    """The UTC time zone."""

    def name(self, ts: Any) -> str | None:
        return "UTC"

    def offset(self, ts: Any) -> UtcOffset:
        return UtcOffset.UTC

    def resolve(self, date: Date, time: Time) -> DateTimeResolution:
        return DateTimeResolution.unambiguous(date, time, UtcOffset.UTC, self)

    def convert_utc(self, utc: DateTime) -> DateTime:
        return utc

    def is_fixed(self) -> bool:
        return True

    @classmethod
    def now(cls) -> DateTime:
        """The current date time in UTC."""
        days, rest = divmod(_systime.time_ns(), _NANOS_PER_DAY)
        return DateTime(_UNIX_EPOCH + timedelta(days=days), Time.adjust_from_nanos(rest)[1])


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class DateTime:
    """A local date and time together with its UTC offset and time zone.

    Date times compare by the instant they denote, whatever their zones.
    """

    date: Date
    time: Time
    offset: UtcOffset = UtcOffset.UTC
    timezone: Any = Utc()

    def _instant(self) -> tuple[int, int]:
        seconds = (
            self.date.toordinal() * 86400
            + self.time.total_seconds()
            - self.offset.total_seconds()
        )
        return seconds, self.time.nanosecond

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._instant() == other._instant()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._instant() < other._instant()

    def __hash__(self) -> int:
        return hash(self._instant())

    def shift(self, offset: UtcOffset) -> DateTime:
        """Return the same instant written at another UTC offset."""
        delta = (offset.total_seconds() - self.offset.total_seconds()) * NANOS_PER_SEC
        if delta >= 0:
            days, time = self.time.add_with_duration(delta)
        else:
            days, time = self.time.sub_with_duration(-delta)
        return replace(self, date=self.date + timedelta(days=days), time=time, offset=offset)

    def with_timezone(self, timezone: Any) -> DateTime:
        """Keep the local date and time but place them in another zone, leniently."""
        return timezone.resolve(self.date, self.time).lenient()

    def weekday(self) -> Weekday:
        """The day of the week of the local date."""
        return Weekday(self.date.isoweekday())

    def next(self, step: Unit | Weekday | Time) -> DateTime:
        """Return the date time moved to the next step, even if already at it."""
        return self._move(step, True)

    def prev(self, step: Unit | Weekday | Time) -> DateTime:
        """Return the date time moved to the previous step, even if already at it."""
        return self._move(step, False)

    def _reresolve(self, date: Date, time: Time) -> DateTime:
        if self.timezone.is_fixed():
            return replace(self, date=date, time=time)
        return self.timezone.resolve(date, time).lenient()

    def _move(self, step: Unit | Weekday | Time, forward: bool) -> DateTime:
        if isinstance(step, Weekday) or (isinstance(step, Unit) and not step.is_clock_unit):
            moved = next_date(self.date, step) if forward else prev_date(self.date, step)
            return self._reresolve(moved, self.time)
        if isinstance(step, Time):
            if forward:
                crosses = step.total_nanos() - self.time.total_nanos() <= 0
            else:
                crosses = self.time.total_nanos() - step.total_nanos() <= 0
            date = self.date
            if crosses:
                date += timedelta(days=1 if forward else -1)
            return self._reresolve(date, step)
        if isinstance(step, Unit):
            nanos = step.nanoseconds
            if forward:
                days, time = self.time.add_with_duration(nanos)
            else:
                days, time = self.time.sub_with_duration(nanos)
            return self._reresolve(self.date + timedelta(days=days), time)
        raise TypeError(f"cannot step a DateTime by {step!r}")


class DateTimeResolutionKind(enum.Enum):
    """How a local date time maps onto a time zone."""

    MISSING = "missing"
    UNAMBIGUOUS = "unambiguous"
    AMBIGUOUS = "ambiguous"


@dataclass(frozen=True)
class DateTimeResolution:
    """The outcome of resolving a local date and time in a time zone.

    For a transition the earlier offset is the one before it and the later
    offset the one after it.
    """

    date: Date
    time: Time
    timezone: Any
    earlier_offset: UtcOffset
    later_offset: UtcOffset
    kind: DateTimeResolutionKind

    @classmethod
    def ambiguous(
        cls, date: Date, time: Time, earlier: UtcOffset, later: UtcOffset, timezone: Any
    ) -> DateTimeResolution:
        """A local time that occurs twice, once at each offset."""
        return cls(date, time, timezone, earlier, later, DateTimeResolutionKind.AMBIGUOUS)

    @classmethod
    def missing(
        cls, date: Date, time: Time, earlier: UtcOffset, later: UtcOffset, timezone: Any
    ) -> DateTimeResolution:
        """A local time skipped over by a transition."""
        return cls(date, time, timezone, earlier, later, DateTimeResolutionKind.MISSING)

    @classmethod
    def unambiguous(
        cls, date: Date, time: Time, offset: UtcOffset, timezone: Any
    ) -> DateTimeResolution:
        """A local time that occurs exactly once."""
        return cls(date, time, timezone, offset, offset, DateTimeResolutionKind.UNAMBIGUOUS)

    def with_timezone(self, timezone: Any) -> DateTimeResolution:
        """The same resolution pointing at another zone."""
        return replace(self, timezone=timezone)

    def is_ambiguous(self) -> bool:
        return self.kind is DateTimeResolutionKind.AMBIGUOUS

    def is_unambiguous(self) -> bool:
        return self.kind is DateTimeResolutionKind.UNAMBIGUOUS

    def is_missing(self) -> bool:
        return self.kind is DateTimeResolutionKind.MISSING

    def _at(self, offset: UtcOffset) -> DateTime:
        return DateTime(self.date, self.time, offset, self.timezone)

    def earlier(self) -> DateTime:
        """The earlier date time; raises SkippedDateTimeError when missing."""
        if self.is_missing():
            raise SkippedDateTimeError(self.date, self.time)
        return self._at(self.earlier_offset)

    def later(self) -> DateTime:
        """The later date time; raises SkippedDateTimeError when missing."""
        if self.is_missing():
            raise SkippedDateTimeError(self.date, self.time)
        return self._at(self.later_offset)

    def into_pair(self) -> tuple[DateTime, DateTime]:
        """The local time at the earlier and at the later offset, whatever the kind."""
        return self._at(self.earlier_offset), self._at(self.later_offset)

    def _skip(self, delta: UtcOffset, offset: UtcOffset) -> DateTime:
        shifted = DateTime(self.date, self.time).shift(delta)
        return DateTime(shifted.date, shifted.time, offset, self.timezone)

    def lenient(self) -> DateTime:
        """A date time for any resolution.

        A missing time is moved forward past the gap; an ambiguous one takes
        the earlier offset.
        """
        if self.is_missing():
            delta = self.later_offset.saturating_sub(self.earlier_offset)
            return self._skip(delta, self.later_offset)
        return self._at(self.earlier_offset)

    def exact(self) -> DateTime:
        """The date time, raising when it is missing or ambiguous."""
        if self.is_missing():
            raise SkippedDateTimeError(self.date, self.time)
        if self.is_ambiguous():
            raise AmbiguousDateTimeError(self.date, self.time)
        return self._at(self.earlier_offset)

    def backwards(self) -> DateTime:
        """Like lenient, but a missing time is moved backward before the gap."""
        if self.is_missing():
            delta = self.earlier_offset.saturating_sub(self.later_offset)
            return self._skip(delta, self.earlier_offset)
        return self._at(self.earlier_offset)