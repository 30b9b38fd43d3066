"""
Work/off-day schedule generation.
"""

import logging
from datetime import date, datetime, timedelta
from typing import Iterator, List, Mapping, Union

from datecalc.exceptions import InvalidArgumentError, InvalidDateError

from .core import DatePeriod

logger = logging.getLogger(__name__)

SCHEDULE_DATE_FMT = "%d-%m-%Y"


def parse_schedule_date(value: Union[str, date]) -> date:
    """Parse a 'DD-MM-YYYY' string; dates pass through unchanged."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.strptime(value.strip(), SCHEDULE_DATE_FMT).date()
        except ValueError as exc:
            raise InvalidDateError(f"Expected DD-MM-YYYY, got {value!r}") from exc
    raise TypeError(f"Unsupported type for schedule date: {type(value)}")


def format_schedule_date(day: date) -> str:
    """Format a date as 'DD-MM-YYYY'."""
    return f"{day.day:02d}-{day.month:02d}-{day.year}"


def _check_count(name: str, value: int, minimum: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")
    if value < minimum:
        raise InvalidArgumentError(f"{name} must be at least {minimum}, got {value}")


def iter_work_schedule(
    period: Union[DatePeriod, Mapping[str, Union[str, date]]],
    count_work_days: int,
    count_off_days: int,
) -> Iterator[date]:
    """
    Iterate over the working days of a repeating work/off cycle.

    Arguments are validated before the iterator is returned.

    Args:
        period: Start and end dates ('DD-MM-YYYY' or date), both included
        count_work_days: Consecutive working days per cycle (>= 1)
        count_off_days: Consecutive days off per cycle (>= 0)

    Returns:
        Iterator over the working days in ascending order
    """
    _check_count("count_work_days", count_work_days, 1)
    _check_count("count_off_days", count_off_days, 0)

    period = DatePeriod.coerce(period)
    start = parse_schedule_date(period.start)
    end = parse_schedule_date(period.end)
    return _cycle(start, end, count_work_days, count_off_days)


def _cycle(
    start: date, end: date, count_work_days: int, count_off_days: int
) -> Iterator[date]:
    current = start
    while current <= end:
        for _ in range(count_work_days):
            if current > end:
                break
            yield current
            current += timedelta(days=1)
        # Off days
        if current <= end:
            current += timedelta(days=count_off_days)


def get_work_schedule(
    period: Union[DatePeriod, Mapping[str, Union[str, date]]],
    count_work_days: int,
    count_off_days: int,
) -> List[str]:
    """
    Working days of a work/off cycle as 'DD-MM-YYYY' strings.

    {'start': '01-01-2024', 'end': '15-01-2024'}, 1, 3
        -> ['01-01-2024', '05-01-2024', '09-01-2024', '13-01-2024']
    """
    schedule = [
        format_schedule_date(day)
        for day in iter_work_schedule(period, count_work_days, count_off_days)
    ]
    logger.debug(
        "Generated %s working days for %s/%s cycle", len(schedule), count_work_days, count_off_days
    )
    return schedule
