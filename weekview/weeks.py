"""
Calendar / week engine.

Pure functions over (instant, zone):
- instant: milliseconds since 1970-01-01T00:00:00Z
- zone:    fixed offset from UTC in minutes (e.g. +120 for UTC+2)

Weekdays here are ISO ordered (Monday=1 ... Sunday=7). Note that Course.weekday
uses the shifted Monday=2 ... Sunday=8 numbering; convert with `+ 1`.

A week is always exactly 7 * 24h of milliseconds. There is no DST handling,
a single fixed offset is all this module knows about zones.
"""

from __future__ import annotations

from typing import List, NamedTuple, Tuple

MILLIS_PER_DAY = 86_400_000
MILLIS_PER_WEEK = 7 * MILLIS_PER_DAY
MILLIS_PER_MINUTE = 60_000

# Days from 0000-03-01 to 1970-01-01 in the proleptic Gregorian calendar
_EPOCH_SHIFT = 719_468
_DAYS_PER_ERA = 146_097

# Jan..Dec, February is patched for leap years in _month_lengths()
_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


class _CivilDay(NamedTuple):
    year: int
    month: int
    day: int
    weekday: int  # Monday=1 ... Sunday=7


def _civil(instant: int, zone: int) -> _CivilDay:
    """
    Civil date of the instant seen through the zone offset.

    Plain integer arithmetic on days since the epoch (years counted in
    400-year eras starting in March), so there is no year range limit.
    """
    days = (instant + zone * MILLIS_PER_MINUTE) // MILLIS_PER_DAY

    era, day_of_era = divmod(days + _EPOCH_SHIFT, _DAYS_PER_ERA)
    year_of_era = (day_of_era - day_of_era // 1460 + day_of_era // 36524 - day_of_era // 146096) // 365
    day_of_march_year = day_of_era - (365 * year_of_era + year_of_era // 4 - year_of_era // 100)
    mp = (5 * day_of_march_year + 2) // 153

    day = day_of_march_year - (153 * mp + 2) // 5 + 1
    month = mp + 3 if mp < 10 else mp - 9
    year = year_of_era + era * 400 + (1 if month <= 2 else 0)

    # 1970-01-01 was a Thursday
    weekday = (days + 3) % 7 + 1
    return _CivilDay(int(year), int(month), int(day), int(weekday))


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def _month_lengths(year: int) -> Tuple[int, ...]:
    if is_leap_year(year):
        return _MONTH_LENGTHS[:1] + (29,) + _MONTH_LENGTHS[2:]
    return _MONTH_LENGTHS


# ---------------------------------------------------------------------------
# Civil fields
# ---------------------------------------------------------------------------


def day_of_week(instant: int, zone: int) -> int:
    """
    Monday=1 ... Sunday=7.
    """
    return _civil(instant, zone).weekday


def civil_date(instant: int, zone: int) -> Tuple[int, int]:
    """
    (day of month, month 1..12) for display.
    """
    civil = _civil(instant, zone)
    return (civil.day, civil.month)


def civil_year(instant: int, zone: int) -> int:
    return _civil(instant, zone).year


def day_of_year(instant: int, zone: int) -> int:
    """
    1-based ordinal day within the civil year.
    """
    civil = _civil(instant, zone)
    return sum(_month_lengths(civil.year)[: civil.month - 1]) + civil.day


# ---------------------------------------------------------------------------
# ISO week numbers
# ---------------------------------------------------------------------------


def _p(year: int) -> int:
    return (year + year // 4 - year // 100 + year // 400) % 7


def weeks_in_year(year: int) -> int:
    """
    52 or 53: a year has 53 ISO weeks when it starts on a Thursday,
    or is a leap year starting on a Wednesday.
    """
    if _p(year) == 4 or _p(year - 1) == 3:
        return 53
    return 52


def iso_week_number(instant: int, zone: int) -> int:
    """
    ISO-8601 week number of the civil date at `instant`.

    Days before the first week of the year belong to the last week of the
    previous year; only that year's week count is needed, the weekday of
    the current instant is kept as-is.
    """
    year = civil_year(instant, zone)
    w = (day_of_year(instant, zone) - day_of_week(instant, zone) + 10) // 7

    if w < 1:
        return weeks_in_year(year - 1)
    if w > weeks_in_year(year):
        return 1
    return w


# ---------------------------------------------------------------------------
# Navigation
# ---------------------------------------------------------------------------


def add_weeks(instant: int, n: int) -> int:
    return instant + n * MILLIS_PER_WEEK


def week_dates(instant: int, zone: int) -> List[Tuple[int, int]]:
    """
    (day, month) for Monday..Sunday of the week that contains `instant`.
    Used for the column headers of the timetable.
    """
    monday = instant - (day_of_week(instant, zone) - 1) * MILLIS_PER_DAY
    return [civil_date(monday + i * MILLIS_PER_DAY, zone) for i in range(7)]
