"""The time zone configured on the host system."""

from __future__ import annotations

import time as _systime
from dataclasses import dataclass
from datetime import date as Date
from datetime import timedelta
from typing import Any

from .offset import UtcOffset
from .time import NANOS_PER_SEC, Time
from .zoned import DateTime, DateTimeResolution, TimeZone, Utc

__all__ = ["NoSystemTimeError", "System", "system_time_components"]

_UNIX_EPOCH = Date(1970, 1, 1)
_NANOS_PER_DAY = 86400 * NANOS_PER_SEC


class NoSystemTimeError(OSError):
    """The system clock or local time zone could not be read."""


def _current_nanos() -> int:
    try:
        return _systime.time_ns()
    except OSError as exc:
        raise NoSystemTimeError("could not read the system clock") from exc


def _local_zone_at(seconds: int) -> System:
    tzset = getattr(_systime, "tzset", None)
    if tzset is not None:
        tzset()
    try:
        local = _systime.localtime(seconds)
    except (OSError, OverflowError, ValueError) as exc:
        raise NoSystemTimeError("could not read the local time zone") from exc

    gmtoff = getattr(local, "tm_gmtoff", None)
    if gmtoff is None:
        raise NoSystemTimeError("the system does not report a UTC offset")
    try:
        offset = UtcOffset.from_seconds(int(gmtoff))
    except ValueError as exc:
        raise NoSystemTimeError(f"the system reported an invalid UTC offset: {gmtoff}") from exc

    name = getattr(local, "tm_zone", None) or None
    return System(offset, name)


def system_time_components() -> tuple[DateTime, System]:
    """Read the clock and the local zone together.

    The date time returned carries the local wall-clock date and time, labelled
    as UTC; the zone carries the offset that was applied.
    """
    nanos = _current_nanos()
    zone = _local_zone_at(nanos // NANOS_PER_SEC)
    shifted = nanos + zone.utc_offset.total_seconds() * NANOS_PER_SEC
    if shifted < 0:
        raise NoSystemTimeError("local time falls before the UNIX epoch")
    days, rest = divmod(shifted, _NANOS_PER_DAY)
    local = DateTime(
        _UNIX_EPOCH + timedelta(days=days),
        Time.adjust_from_nanos(rest)[1],
        UtcOffset.UTC,
        Utc(),
    )
    return local, zone


@dataclass(frozen=True)
class System(TimeZone):
    """The system's local time zone, as seen when it was read.

    The offset and name are those in effect at that moment; the zone is
    treated as fixed from then on.
    """

    utc_offset: UtcOffset = UtcOffset.UTC
    zone_name: str | None = None

    @classmethod
    def new(cls) -> System:
        """Read the local zone in effect now; raises NoSystemTimeError on failure."""
        return _local_zone_at(_current_nanos() // NANOS_PER_SEC)

    @classmethod
    def now(cls) -> DateTime:
        """The current date time in the local zone."""
        local, zone = system_time_components()
        return DateTime(local.date, local.time, zone.utc_offset, zone)

    def name(self, ts: Any) -> str | None:
        """The abbreviated zone name reported by the system, if any."""
        return self.zone_name

    def offset(self, ts: Any) -> UtcOffset:
        """The UTC offset read from the system."""
        return self.utc_offset

    def resolve(self, date: Date, time: Time) -> DateTimeResolution:
        """Resolve a local date and time; always unambiguous."""
        return DateTimeResolution.unambiguous(date, time, self.utc_offset, self)

    def convert_utc(self, utc: DateTime) -> DateTime:
        """Convert a UTC date time into this zone."""
        return utc.shift(self.utc_offset).with_timezone(self)

    def is_fixed(self) -> bool:
        """The system zone is treated as a fixed offset."""
        return True