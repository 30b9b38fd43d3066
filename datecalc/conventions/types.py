"""
Basic types and enums used across the calendar functions.
"""

from datetime import date, datetime
from enum import IntEnum
from typing import Union


class Weekday(IntEnum):
    """Days of the week, numbered from Sunday."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @property
    def label(self) -> str:
        return DAY_NAMES[self.value]

    @property
    def iso_number(self) -> int:
        """Monday=1 .. Sunday=7."""
        return 7 if self is Weekday.SUNDAY else self.value

    @classmethod
    def of(cls, dt: Union[date, datetime]) -> "Weekday":
        """Weekday of a date, using its own calendar fields."""
        return cls((dt.weekday() + 1) % 7)


DAY_NAMES = {
    0: "Sunday",
    1: "Monday",
    2: "Tuesday",
    3: "Wednesday",
    4: "Thursday",
    5: "Friday",
    6: "Saturday",
}
