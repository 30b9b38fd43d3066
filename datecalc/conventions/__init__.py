from .calendars import WeekendCalendar
from .types import DAY_NAMES, Weekday

__all__ = ["DAY_NAMES", "Weekday", "WeekendCalendar"]
