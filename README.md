# eostime

This package provides times of day that are not tied to any calendar, fixed
UTC offsets, and UNIX timestamps. It also resolves local times in a time zone,
including across DST gaps and folds. Everything works to nanosecond precision.
Dates are plain `datetime.date` objects.

## Installation

```
pip install eostime
```

## Times of day

```python
from datetime import timedelta

from eostime.time import Time, IsoFormatPrecision
from eostime.units import Unit

t = Time.new(23, 59, 59)
print(t.next(Unit.SECOND))            # 00:00:00
print(t.with_millisecond(123).to_iso_format(IsoFormatPrecision.MILLISECOND))
# 23:59:59.123
print(Time.new(0, 0, 0) - timedelta(minutes=2))   # 23:58:00
```

`Time.new` raises `ValueError` when a component is out of range. The
`with_*` methods raise it in the same way.

Adding or subtracting a `timedelta` wraps around midnight. Subtracting one
`Time` from another gives a `timedelta`. `add_with_duration` and
`sub_with_duration` take a duration in nanoseconds. They return the number of
days crossed together with the new time.

`to_iso_format()` writes microseconds only when the time has a sub-second part.

## Units and weekdays

`eostime.units.Unit` lists the steps from `YEAR` down to `NANOSECOND`.
`Weekday` numbers the days the ISO way, from `MONDAY = 1`.

`eostime.step` moves a `datetime.date` with `next_date` and `prev_date`. It
also provides `add_years` and `add_months`, which clamp the day to the end of
the month.

## UTC offsets

```python
from eostime.offset import UtcOffset

east = UtcOffset.from_hms(-5, 0, 0)
west = UtcOffset.from_hms(-8, 0, 0)
print(west.checked_sub(east))                              # -03:00
print(UtcOffset.from_hms(18, 0, 0).saturating_sub(west))   # +24:00
```

Offsets are limited to ±24:00:00.

- `checked_add` and `checked_sub` return `None` when the result is out of range.
- The saturating forms clamp to the limit.
- The `+` and `-` operators raise `ValueError`.

A `UtcOffset` can also be used as a fixed time zone.

## Time zones and resolution

`eostime.zoned.TimeZone` is the base class for time zones. A zone's `resolve`
turns a local date and time into a `DateTimeResolution`, which is one of:

- unambiguous;
- ambiguous: the local time happens twice;
- missing: the local time falls in a gap.

From a resolution you can take:

- `earlier()` or `later()`;
- `exact()`, which raises `SkippedDateTimeError` or `AmbiguousDateTimeError`;
- `lenient()`, which moves forward over gaps and takes the earlier side of folds.

`TimeZone.at` and `TimeZone.at_exactly` are shortcuts for these.

A `DateTime` holds a date, a `Time`, an offset and a zone. Two `DateTime`
values compare equal when they denote the same instant. `shift` rewrites a
`DateTime` at another offset. `next` and `prev` step it by a `Unit`, a
`Weekday` or a `Time`:

```python
from datetime import date

from eostime.time import Time
from eostime.zoned import DateTime

dt = DateTime(date(2022, 2, 8), Time(3, 0, 0))
print(dt.next(Time(2, 0, 0)).date)    # 2022-02-09
```

`Utc` and `UtcOffset` are fixed zones, and `Utc.now()` gives the current UTC
date time.

`eostime.system.System` reads the machine's local offset and zone name. It
raises `NoSystemTimeError` when they are unavailable. It treats the offset it
read as fixed.

## Timestamps

```python
from eostime.timestamp import Timestamp

utc = Timestamp.from_seconds(3723).to_utc()
print(utc.date, utc.time)              # 1970-01-01 01:02:03
```

Converting a timestamp beyond the supported date range saturates at the
earliest or latest date time that can be represented.

## What this package does not do

- It has no named time zone database. Only `Utc`, fixed `UtcOffset`s, the
  system zone and your own `TimeZone` subclasses are available.
- It does not parse strings, and it has no format-pattern output. The only text
  output is `Time.to_iso_format` and the `str()` of `Time` and `UtcOffset`.
- It has no interval type, and `DateTime` has no arithmetic operators. Move a
  `DateTime` with `next`, `prev` and `shift`.
- It provides no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```