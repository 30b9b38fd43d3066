"""
Weekend calendar backed by numpy's business-day routines.
"""

from datetime import date, datetime
from typing import Union

import numpy as np


def _to_np_day(dt: Union[date, datetime]) -> np.datetime64:
    """Convert Python date/datetime to a numpy day."""
    if isinstance(dt, datetime):
        dt = dt.date()
    return np.datetime64(dt, "D")


class WeekendCalendar:
    """Calendar that only considers Saturdays and Sundays as non-working days."""

    # numpy weekmasks start on Monday
    WORKDAY_MASK = "1111100"
    WEEKEND_MASK = "0000011"

    def __init__(self):
        self.name = "WEEKEND"

    def is_business_day(self, dt: Union[date, datetime]) -> bool:
        """Check if date is a working day."""
        return bool(np.is_busday(_to_np_day(dt), weekmask=self.WORKDAY_MASK))

    def is_weekend(self, dt: Union[date, datetime]) -> bool:
        return not self.is_business_day(dt)

    def weekend_days_between(
        self, start: Union[date, datetime], end: Union[date, datetime]
    ) -> int:
        """Count weekend days between two dates (inclusive of start, exclusive of end)."""
        if end <= start:
            return 0
        return int(
            np.busday_count(
                _to_np_day(start), _to_np_day(end), weekmask=self.WEEKEND_MASK
            )
        )
