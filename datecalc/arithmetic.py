"""Calendar arithmetic: month lengths, periods, week numbers, quarters, leap years."""

from __future__ import annotations

import math
from datetime import date, datetime
from typing import Mapping, Union

from datecalc.conventions.calendars import WeekendCalendar
from datecalc.conventions.types import Weekday
from datecalc.exceptions import InvalidArgumentError
from datecalc.schedule.core import DatePeriod
from datecalc.utils.date import ONE_DAY, DateLike, get_month_end, to_local, to_utc


_WEEKEND_CALENDAR = WeekendCalendar()


def _check_month(month: int) -> None:
    if isinstance(month, bool) or not isinstance(month, int):
        raise InvalidArgumentError(f"month must be an integer, got {month!r}")
    if not 1 <= month <= 12:
        raise InvalidArgumentError(f"month must be in 1..12, got {month}")


def _check_year(year: int) -> None:
    if isinstance(year, bool) or not isinstance(year, int):
        raise InvalidArgumentError(f"year must be an integer, got {year!r}")
    if not 1 <= year <= 9999:
        raise InvalidArgumentError(f"year out of range: {year}")


def get_count_days_in_month(month: int, year: int) -> int:
    """Number of days in the month (1-12) of the given year."""
    _check_month(month)
    _check_year(year)
    return get_month_end(year, month).day


def get_count_days_on_period(start: DateLike, end: DateLike) -> int:
    """
    Days from start to end, counting both ends.

    '2024-02-01T00:00:00.000Z', '2024-02-12T00:00:00.000Z' -> 12
    """
    start_dt = to_utc(start)
    end_dt = to_utc(end)
    if end_dt < start_dt:
        raise InvalidArgumentError(f"Period end {end!r} is before start {start!r}")
    return (end_dt - start_dt) // ONE_DAY + 1


def is_date_in_period(
    date_like: DateLike, period: Union[DatePeriod, Mapping[str, DateLike]]
) -> bool:
    """True if the date lies within the period, both ends included."""
    period = DatePeriod.coerce(period)
    return to_utc(period.start) <= to_utc(date_like) <= to_utc(period.end)


def get_count_weekends_in_month(month: int, year: int) -> int:
    """Number of Saturdays and Sundays in the month."""
    _check_month(month)
    _check_year(year)
    first = date(year, month, 1)
    last = get_month_end(year, month)
    weekends = _WEEKEND_CALENDAR.weekend_days_between(first, last)
    return weekends + int(_WEEKEND_CALENDAR.is_weekend(last))


def get_week_number_by_date(date_like: DateLike) -> int:
    """
    Week of the year, where week 1 is the one containing January 1 and weeks
    start on Monday.

    date(2024, 1, 3) -> 1
    date(2024, 1, 31) -> 5
    date(2024, 2, 23) -> 8
    """
    local = to_local(date_like)
    start_of_year = datetime(local.year, 1, 1)
    days_elapsed = (local - start_of_year) // ONE_DAY
    offset = Weekday.of(start_of_year).iso_number
    return math.ceil((days_elapsed + offset) / 7)


def get_quarter(date_like: DateLike) -> int:
    """Quarter of the year (1-4) of the local date."""
    return (to_local(date_like).month - 1) // 3 + 1


def is_leap_year(date_like: Union[DateLike, int]) -> bool:
    """
    True if the year of the local date is a leap year.

    A bare integer is read as the year itself, not as a timestamp.
    """
    if isinstance(date_like, int) and not isinstance(date_like, bool):
        year = date_like
    else:
        year = to_local(date_like).year
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0
