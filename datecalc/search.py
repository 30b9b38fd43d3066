"""Searches for the next date matching a weekday rule."""

import logging
from datetime import date, datetime, time, timedelta

from dateutil.relativedelta import relativedelta

from datecalc.config import get_local_timezone
from datecalc.conventions.types import Weekday
from datecalc.utils.date import DateLike, js_weekday, to_datetime, to_local, to_utc

logger = logging.getLogger(__name__)

# Every 14-month window contains a Friday the 13th
_MAX_SCAN_DAYS = 14 * 31


def get_next_friday(date_like: DateLike):
    """
    Date of the next Friday strictly after the given date.

    The weekday is read in UTC. A Friday maps to the Friday one week later.
    Returns a new value of the same kind as the input; the input is not modified.

    date(2024, 2, 3) -> date(2024, 2, 9)
    date(2024, 2, 16) -> date(2024, 2, 23)
    """
    if isinstance(date_like, date) and not isinstance(date_like, datetime):
        current_day = js_weekday(date_like)
        base = date_like
    else:
        base = to_datetime(date_like)
        current_day = js_weekday(to_utc(base))

    added_days = Weekday.FRIDAY - current_day
    if current_day >= Weekday.FRIDAY:
        added_days += 7
    return base + relativedelta(days=added_days)


def get_next_friday_the_13th(date_like: DateLike):
    """
    Date of the next Friday the 13th on or after the given date, in local time.

    Days are counted forward from the first of the starting month, so day 32
    of January is February 1 and the scan runs across months and years.
    """
    if isinstance(date_like, date) and not isinstance(date_like, datetime):
        start = date_like
        given = None
    else:
        given = to_datetime(date_like)
        start = to_local(given).date()

    first_of_month = start.replace(day=1)
    day = start.day
    while day - start.day <= _MAX_SCAN_DAYS:
        candidate = first_of_month + timedelta(days=day - 1)
        if candidate.day == 13 and Weekday.of(candidate) is Weekday.FRIDAY:
            logger.debug(
                "Friday the 13th found after scanning %s days from %s",
                day - start.day,
                start,
            )
            if given is None:
                return candidate
            if given.tzinfo is None:
                return datetime.combine(candidate, time())
            return datetime.combine(candidate, time(), tzinfo=get_local_timezone())
        day += 1
    raise RuntimeError(f"No Friday the 13th within {_MAX_SCAN_DAYS} days of {start}")
