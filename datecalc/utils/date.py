"""Conversion of date-likes into instants, and local/UTC views of them."""

import calendar
import logging
import re
from datetime import date, datetime, time, timedelta
from typing import Union

import pandas as pd
from dateutil import parser as date_parser
from dateutil import tz

from datecalc.config import get_local_timezone
from datecalc.exceptions import InvalidDateError

logger = logging.getLogger(__name__)

DateLike = Union[str, int, date, datetime, pd.Timestamp]

EPOCH = datetime(1970, 1, 1, tzinfo=tz.UTC)
ONE_DAY = timedelta(days=1)
ONE_MILLISECOND = timedelta(milliseconds=1)

# ISO date-only strings are UTC midnight; every other zone-less form is local
_ISO_DATE_ONLY = re.compile(r"^\d{4}(-\d{2}(-\d{2})?)?$")

# Two distinct fill-in values expose which fields a free-form string left out
_PARSE_DEFAULT = datetime(2001, 1, 1)
_PARSE_ALT_DEFAULT = datetime(2002, 2, 2)


def _parse_free_form(text: str) -> datetime:
    parsed = date_parser.parse(text, default=_PARSE_DEFAULT)
    alternate = date_parser.parse(text, default=_PARSE_ALT_DEFAULT)
    defaulted = [
        field
        for field in ("year", "month", "day")
        if getattr(parsed, field) != getattr(alternate, field)
    ]
    if len(defaulted) == 3:
        raise InvalidDateError(f"No date in {text!r}")
    return parsed


def _parse_string(text: str) -> datetime:
    stripped = text.strip()
    if _ISO_DATE_ONLY.match(stripped):
        try:
            return date_parser.isoparse(stripped).replace(tzinfo=tz.UTC)
        except ValueError as exc:
            raise InvalidDateError(f"Invalid date: {text!r}") from exc
    try:
        return date_parser.isoparse(stripped)
    except ValueError:
        logger.debug("Not ISO-8601, falling back to free-form parsing: %r", text)
    try:
        return _parse_free_form(stripped)
    except (ValueError, OverflowError) as exc:
        raise InvalidDateError(f"Invalid date: {text!r}") from exc


def to_datetime(date_like: DateLike) -> datetime:
    """
    Convert a date-like into a datetime.

    Accepts datetimes (including pandas Timestamps), dates (local midnight),
    integer epoch milliseconds, ISO-8601 strings and free-form date strings.
    Naive results are wall time in the configured local zone.
    """
    if date_like is pd.NaT:
        raise InvalidDateError("NaT is not a valid date")
    if isinstance(date_like, pd.Timestamp):
        return date_like.to_pydatetime()
    if isinstance(date_like, datetime):
        return date_like
    if isinstance(date_like, date):
        return datetime.combine(date_like, time())
    if isinstance(date_like, int) and not isinstance(date_like, bool):
        try:
            return EPOCH + date_like * ONE_MILLISECOND
        except OverflowError as exc:
            raise InvalidDateError(f"Timestamp out of range: {date_like}") from exc
    if isinstance(date_like, str):
        return _parse_string(date_like)
    raise TypeError(f"Unsupported type for date: {type(date_like)}")


def to_utc(date_like: DateLike) -> datetime:
    """Return the instant as an aware UTC datetime."""
    dt = to_datetime(date_like)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=get_local_timezone())
    return dt.astimezone(tz.UTC)


def to_local(date_like: DateLike) -> datetime:
    """Return the instant as naive wall time in the configured local zone."""
    dt = to_datetime(date_like)
    if dt.tzinfo is None:
        return dt
    return dt.astimezone(get_local_timezone()).replace(tzinfo=None)


def js_weekday(dt: Union[date, datetime]) -> int:
    """Day of week numbered 0=Sunday .. 6=Saturday."""
    return (dt.weekday() + 1) % 7


def get_month_end(year: int, month: int) -> date:
    """Get the last calendar day of a given month."""
    return date(year, month, calendar.monthrange(year, month)[1])
