"""Moving calendar dates forward and backward by calendar steps."""

from __future__ import annotations

import calendar
from datetime import MAXYEAR, MINYEAR, date, timedelta

from .units import Unit, Weekday

__all__ = ["add_years", "add_months", "next_date", "prev_date"]

_DAYS_PER_UNIT = {Unit.WEEK: 7, Unit.DAY: 1}


def _clamped(year: int, month: int, day: int) -> date:
    if not MINYEAR <= year <= MAXYEAR:
        raise ValueError(f"year {year} is out of range {MINYEAR}..={MAXYEAR}")
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day, last_day))


def add_years(date: date, years: int) -> date:
    """Return the date moved by whole years, clamping the day to the month's end."""
    return _clamped(date.year + years, date.month, date.day)


def add_months(date: date, months: int) -> date:
    """Return the date moved by whole months, clamping the day to the month's end."""
    year, month0 = divmod(date.year * 12 + date.month - 1 + months, 12)
    return _clamped(year, month0 + 1, date.day)


def _weekday_delta(target: Weekday, current: date, forward: bool) -> int:
    diff = int(target) - current.isoweekday()
    if forward:
        return diff + 7 if diff <= 0 else diff
    return diff - 7 if diff >= 0 else diff


def _move(current: date, step: Unit | Weekday, forward: bool) -> date:
    if isinstance(step, Weekday):
        return current + timedelta(days=_weekday_delta(step, current, forward))
    sign = 1 if forward else -1
    if step is Unit.YEAR:
        return add_years(current, sign)
    if step is Unit.MONTH:
        return add_months(current, sign)
    if step in _DAYS_PER_UNIT:
        return current + timedelta(days=sign * _DAYS_PER_UNIT[step])
    raise TypeError(f"cannot step a date by {step!r}")


def next_date(date: date, step: Unit | Weekday) -> date:
    """Return the date moved to the next step.

    A weekday always moves forward, between one and seven days, even when the
    date already falls on that weekday.
    """
    return _move(date, step, True)


def prev_date(date: date, step: Unit | Weekday) -> date:
    """Return the date moved to the previous step.

    A weekday always moves backward, between one and seven days, even when the
    date already falls on that weekday.
    """
    return _move(date, step, False)