"""Calendar utilities.

Independent date-calculation functions: timestamp conversion, formatting,
weekday and weekend counting, week numbering, leap years and recurring
work schedules.

Key modules:
- timestamps: Epoch milliseconds, time-of-day and date formatting
- arithmetic: Month lengths, periods, week numbers, quarters, leap years
- search: Next Friday and next Friday the 13th
- schedule: Work/off-day schedule generation
- config: Local time zone setting
"""

from .arithmetic import (
    get_count_days_in_month,
    get_count_days_on_period,
    get_count_weekends_in_month,
    get_quarter,
    get_week_number_by_date,
    is_date_in_period,
    is_leap_year,
)
from .config import get_local_timezone, set_local_timezone
from .conventions import Weekday, WeekendCalendar
from .exceptions import InvalidArgumentError, InvalidDateError
from .schedule import DatePeriod, get_work_schedule, iter_work_schedule
from .search import get_next_friday, get_next_friday_the_13th
from .timestamps import date_to_timestamp, format_date, get_day_name, get_time

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "date_to_timestamp",
    "get_time",
    "format_date",
    "get_day_name",
    "get_count_days_in_month",
    "get_count_days_on_period",
    "is_date_in_period",
    "get_count_weekends_in_month",
    "get_week_number_by_date",
    "get_quarter",
    "is_leap_year",
    "get_next_friday",
    "get_next_friday_the_13th",
    "get_work_schedule",
    "iter_work_schedule",
    "DatePeriod",
    "Weekday",
    "WeekendCalendar",
    "InvalidDateError",
    "InvalidArgumentError",
    "get_local_timezone",
    "set_local_timezone",
]
