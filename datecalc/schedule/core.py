"""
Core data structures for periods and schedules.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Union

from datecalc.exceptions import InvalidArgumentError


@dataclass(frozen=True)
class DatePeriod:
    """A date range with both ends included."""

    start: Any
    end: Any

    @classmethod
    def coerce(cls, period: Union["DatePeriod", Mapping[str, Any]]) -> "DatePeriod":
        """Build a period from a DatePeriod or a mapping with 'start' and 'end'."""
        if isinstance(period, DatePeriod):
            return period
        if isinstance(period, Mapping):
            missing = [key for key in ("start", "end") if key not in period]
            if missing:
                raise InvalidArgumentError(f"Period is missing {', '.join(missing)}")
            return cls(start=period["start"], end=period["end"])
        raise TypeError(f"Unsupported type for period: {type(period)}")
