from dataclasses import dataclass
from datetime import date

import pytest

from eostime.offset import UtcOffset
from eostime.step import next_date
from eostime.time import Time
from eostime.units import Unit, Weekday
from eostime.zoned import (
    AmbiguousDateTimeError,
    DateTime,
    DateTimeResolution,
    DateTimeResolutionKind,
    SkippedDateTimeError,
    TimeZone,
    Utc,
)


def off(hours, minutes=0):
    return UtcOffset.from_hms(hours, minutes, 0)


def dt(y, mo, d, h=0, mi=0, s=0, offset=None):
    if offset is None:
        return DateTime(date(y, mo, d), Time(h, mi, s))
    return DateTime(date(y, mo, d), Time(h, mi, s), offset, offset)


def this_or_next_sunday(day):
    if day.isoweekday() == Weekday.SUNDAY:
        return day
    return next_date(day, Weekday.SUNDAY)


@dataclass(frozen=True)
class AmericanTimeZone(TimeZone):
    base: UtcOffset
    std_name: str
    dst_name: str

    def _dst(self):
        return self.base.saturating_add(off(1))

    def is_dst(self, utc):
        start = this_or_next_sunday(date(utc.date.year, 3, 8))
        end = this_or_next_sunday(date(utc.date.year, 11, 1))
        return DateTime(start, Time(7, 0, 0)) <= utc < DateTime(end, Time(6, 0, 0))

    def offset(self, ts):
        return self.base

    def convert_utc(self, utc):
        offset = self._dst() if self.is_dst(utc) else self.base
        shifted = utc.shift(offset)
        return DateTime(shifted.date, shifted.time, offset, self)

    def resolve(self, day, time):
        start = this_or_next_sunday(date(day.year, 3, 8))
        end = this_or_next_sunday(date(day.year, 11, 1))
        dst = self._dst()
        if day == end and 1 <= time.hour < 2:
            return DateTimeResolution.ambiguous(day, time, dst, self.base, self)
        if day == start and 2 <= time.hour < 3:
            return DateTimeResolution.missing(day, time, self.base, dst, self)
        if (start, Time(2, 0, 0)) <= (day, time) < (end, Time(1, 0, 0)):
            return DateTimeResolution.unambiguous(day, time, dst, self)
        return DateTimeResolution.unambiguous(day, time, self.base, self)


@dataclass(frozen=True)
class AlwaysEasternStandard(TimeZone):
    def offset(self, ts):
        return off(-5)

    def convert_utc(self, utc):
        shifted = utc.shift(off(-5))
        return DateTime(shifted.date, shifted.time, off(-5), self)

    def resolve(self, day, time):
        return DateTimeResolution.unambiguous(day, time, off(-5), self)


EAST = AmericanTimeZone(off(-5), "EST", "EDT")
CENTRAL = AmericanTimeZone(off(-6), "CST", "CDT")
MOUNTAIN = AmericanTimeZone(off(-7), "MST", "MDT")
PACIFIC = AmericanTimeZone(off(-8), "PST", "PDT")


# --- stepping -----------------------------------------------------------


def test_advance_time():
    base = dt(2022, 2, 8, 3)
    assert base.next(Time(4, 0, 0)) == dt(2022, 2, 8, 4)
    assert base.next(Time(9, 0, 0)) == dt(2022, 2, 8, 9)
    assert base.next(Time(2, 0, 0)) == dt(2022, 2, 9, 2)
    assert base.next(Time(3, 0, 0)) == dt(2022, 2, 9, 3)

    assert base.prev(Time(9, 0, 0)) == dt(2022, 2, 7, 9)
    assert base.prev(Time(3, 0, 0)) == dt(2022, 2, 7, 3)
    assert base.prev(Time(4, 0, 0)) == dt(2022, 2, 7, 4)
    assert base.prev(Time(1, 0, 0)) == dt(2022, 2, 8, 1)
    assert base.prev(Time(0, 0, 0)) == dt(2022, 2, 8, 0)


def test_advance_units():
    base = dt(2022, 2, 8, 3)
    assert base.next(Unit.YEAR) == dt(2023, 2, 8, 3)
    assert base.next(Unit.MONTH) == dt(2022, 3, 8, 3)
    assert base.next(Unit.WEEK) == dt(2022, 2, 15, 3)
    assert base.next(Unit.DAY) == dt(2022, 2, 9, 3)
    assert base.next(Unit.HOUR) == dt(2022, 2, 8, 4)
    assert base.next(Unit.MINUTE) == dt(2022, 2, 8, 3, 1)
    assert base.next(Unit.SECOND) == dt(2022, 2, 8, 3, 0, 1)


def test_prev_units_cross_day():
    base = dt(2022, 2, 8, 0)
    assert base.prev(Unit.SECOND) == dt(2022, 2, 7, 23, 59, 59)
    assert base.prev(Unit.DAY) == dt(2022, 2, 7)
    assert base.prev(Unit.MONTH) == dt(2022, 1, 8)
    assert base.next(Unit.NANOSECOND).time.nanosecond == 1


def test_weekday_steps():
    base = dt(2022, 2, 8, 3)
    assert base.weekday() is Weekday.TUESDAY
    assert base.next(Weekday.TUESDAY) == dt(2022, 2, 15, 3)
    assert base.next(Weekday.FRIDAY) == dt(2022, 2, 11, 3)
    assert base.prev(Weekday.MONDAY) == dt(2022, 2, 7, 3)
    assert base.prev(Weekday.TUESDAY) == dt(2022, 2, 1, 3)


def test_fixed_offset_step_keeps_offset():
    local = dt(2022, 2, 8, 23, 30, offset=off(-5))
    moved = local.next(Unit.HOUR)
    assert (moved.date, moved.time, moved.offset) == (date(2022, 2, 9), Time(0, 30, 0), off(-5))


def test_step_rejects_bad_step():
    with pytest.raises(TypeError):
        dt(2022, 2, 8).next("hour")


def test_step_over_dst_gap():
    local = EAST.resolve(date(2021, 3, 14), Time(1, 59, 0)).lenient()
    assert local.offset == off(-5)
    moved = local.next(Unit.MINUTE)
    assert moved.time == Time(3, 0, 0)
    assert moved.offset == off(-4)
    assert moved == dt(2021, 3, 14, 3, 0, offset=off(-4))


# --- DateTime basics ----------------------------------------------------


def test_shift_keeps_instant():
    utc = dt(2021, 12, 31)
    shifted = utc.shift(off(-5))
    assert (shifted.date, shifted.time) == (date(2021, 12, 30), Time(19, 0, 0))
    assert shifted.offset == off(-5)
    assert shifted == utc


def test_equality_is_by_instant():
    assert dt(2023, 6, 30, 21, 0, 20, offset=off(-4)) == dt(2023, 7, 1, 1, 0, 20)
    assert dt(2023, 6, 30, 21, offset=off(-4)) > dt(2023, 7, 1, 0, 59)


def test_with_timezone_keeps_wall_time():
    moved = dt(2001, 2, 3, 4, 5, 1).with_timezone(off(5))
    assert (moved.date, moved.time, moved.offset) == (date(2001, 2, 3), Time(4, 5, 1), off(5))


# --- time zones ---------------------------------------------------------


def test_from_utc():
    base = dt(2021, 12, 31)
    for tz in (EAST, CENTRAL, MOUNTAIN, PACIFIC):
        local = tz.convert_utc(base)
        assert local == base
        assert local.offset == tz.base
        assert local.timezone == tz


def test_utc_now_converts():
    now = Utc.now()
    assert now.offset == UtcOffset.UTC
    assert EAST.convert_utc(now) == now


def test_convert_utc_spring_forward():
    start = dt(2021, 3, 14, 4)
    for hour in (23, 0, 1, 3, 4, 5):
        got = EAST.convert_utc(start)
        assert got.time.hour == hour
        assert got == start
        standard = AlwaysEasternStandard().convert_utc(start)
        assert standard == start
        assert standard.offset == off(-5)
        start = start.next(Unit.HOUR)


def test_convert_utc_fall_back():
    start = dt(2021, 11, 7, 4)
    expected = [(0, -4), (1, -4), (1, -5), (2, -5), (3, -5), (4, -5)]
    for hour, hours_offset in expected:
        got = EAST.convert_utc(start)
        assert got.time.hour == hour
        assert got.offset == off(hours_offset)
        assert got == start
        start = start.next(Unit.HOUR)


def test_datetime_resolve_ambiguous():
    resolution = EAST.resolve(date(2021, 11, 7), Time(1, 30, 0))
    assert resolution.is_ambiguous()
    assert resolution.earlier() == dt(2021, 11, 7, 1, 30, offset=off(-4))
    assert resolution.earlier().offset == off(-4)
    assert resolution.later() == dt(2021, 11, 7, 1, 30, offset=off(-5))
    assert resolution.lenient() == dt(2021, 11, 7, 1, 30, offset=off(-4))
    with pytest.raises(AmbiguousDateTimeError):
        resolution.exact()


def test_datetime_resolve_unambiguous():
    resolution = EAST.resolve(date(2021, 11, 7), Time(0, 30, 0))
    assert resolution.is_unambiguous()
    assert resolution.earlier() == dt(2021, 11, 7, 0, 30, offset=off(-4))
    assert resolution.lenient() == dt(2021, 11, 7, 0, 30, offset=off(-4))
    assert resolution.exact().offset == off(-4)
    assert EAST.at_exactly(date(2021, 11, 7), Time(0, 30, 0)).offset == off(-4)


def test_datetime_resolve_missing():
    resolution = EAST.resolve(date(2021, 3, 14), Time(2, 30, 0))
    assert resolution.is_missing()
    with pytest.raises(SkippedDateTimeError):
        resolution.earlier()
    with pytest.raises(SkippedDateTimeError):
        resolution.later()
    with pytest.raises(SkippedDateTimeError):
        EAST.at_exactly(date(2021, 3, 14), Time(2, 30, 0))
    lenient = resolution.lenient()
    assert (lenient.time, lenient.offset) == (Time(3, 30, 0), off(-4))
    assert EAST.at(date(2021, 3, 14), Time(2, 30, 0)) == dt(2021, 3, 14, 3, 30, offset=off(-4))


def test_resolution_backwards():
    missing = EAST.resolve(date(2021, 3, 14), Time(2, 30, 0)).backwards()
    assert (missing.time, missing.offset) == (Time(1, 30, 0), off(-5))
    ambiguous = EAST.resolve(date(2021, 11, 7), Time(1, 30, 0)).backwards()
    assert ambiguous.offset == off(-4)


def test_resolution_into_pair_and_with_timezone():
    resolution = DateTimeResolution.ambiguous(
        date(2021, 11, 7), Time(1, 30, 0), off(-4), off(-5), EAST
    )
    first, second = resolution.into_pair()
    assert (first.offset, second.offset) == (off(-4), off(-5))
    other = resolution.with_timezone(CENTRAL)
    assert other.timezone == CENTRAL
    assert other.kind is DateTimeResolutionKind.AMBIGUOUS
    assert other.earlier_offset == off(-4)


def test_utc_zone():
    tz = Utc()
    assert tz.name(None) == "UTC"
    assert tz.offset(None) == UtcOffset.UTC
    assert tz.is_fixed() is True
    resolved = tz.resolve(date(2020, 1, 1), Time(5, 0, 0))
    assert resolved.is_unambiguous()
    assert resolved.exact() == dt(2020, 1, 1, 5)
    value = dt(2020, 1, 1, 5)
    assert tz.convert_utc(value) is value


def test_offset_zone_resolution_and_conversion():
    zone = off(5, 30)
    resolved = zone.resolve(date(2020, 1, 1), Time(5, 0, 0))
    assert resolved.is_unambiguous()
    assert resolved.exact().offset == zone
    converted = zone.convert_utc(dt(2020, 1, 1))
    assert (converted.time, converted.offset) == (Time(5, 30, 0), zone)
    assert converted.timezone == zone


def test_base_time_zone_is_not_fixed():
    assert TimeZone.is_fixed(EAST) is False
    assert TimeZone.name(EAST, None) is None