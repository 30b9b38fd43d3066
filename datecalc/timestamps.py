"""
Timestamp conversion and formatting.
"""

from datetime import datetime

from datecalc.conventions.types import Weekday
from datecalc.utils.date import (
    EPOCH,
    ONE_MILLISECOND,
    DateLike,
    js_weekday,
    to_local,
    to_utc,
)


def date_to_timestamp(date_like: DateLike) -> int:
    """
    Milliseconds elapsed since 1970-01-01T00:00:00Z.

    '01 Jan 1970 00:00:00 UTC' -> 0
    '04 Dec 1995 00:12:00 UTC' -> 818035920000
    """
    return (to_utc(date_like) - EPOCH) // ONE_MILLISECOND


def get_time(date_like: DateLike) -> str:
    """Local time of day as 'hh:mm:ss' on a 24-hour clock."""
    return to_local(date_like).strftime("%H:%M:%S")


def _twelve_hour(dt: datetime) -> str:
    hour = dt.hour % 12 or 12
    suffix = "PM" if dt.hour >= 12 else "AM"
    return f"{hour}:{dt.minute:02d}:{dt.second:02d} {suffix}"


def format_date(date_like: DateLike) -> str:
    """
    Format the UTC components as 'M/D/YYYY, h:mm:ss AM|PM'.

    Midnight is shown as 12 AM.
    """
    dt = to_utc(date_like)
    return f"{dt.month}/{dt.day}/{dt.year}, {_twelve_hour(dt)}"


def get_day_name(date_like: DateLike) -> str:
    """English name of the UTC day of week."""
    return Weekday(js_weekday(to_utc(date_like))).label
