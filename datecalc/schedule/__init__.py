# Re-export schedule components
from .core import DatePeriod
from .generator import (
    format_schedule_date,
    get_work_schedule,
    iter_work_schedule,
    parse_schedule_date,
)
