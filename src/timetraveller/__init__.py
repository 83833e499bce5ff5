"""timetraveller — local calendar boundaries as UTC instants."""

from timetraveller.api import (
    boundary_utc,
    start_of_day_utc,
    start_of_month_utc,
    start_of_week_utc,
    start_of_year_utc,
    to_utc,
)
from timetraveller.domain.errors import (
    InvalidWeekStart,
    MalformedDateString,
    TimeTravellerError,
    UnknownTimezone,
    UnresolvableLocalTime,
)
from timetraveller.domain.types import Period, Weekday

__version__ = "0.1.0"

__all__ = [
    "InvalidWeekStart",
    "MalformedDateString",
    "Period",
    "TimeTravellerError",
    "UnknownTimezone",
    "UnresolvableLocalTime",
    "Weekday",
    "__version__",
    "boundary_utc",
    "start_of_day_utc",
    "start_of_month_utc",
    "start_of_week_utc",
    "start_of_year_utc",
    "to_utc",
]
