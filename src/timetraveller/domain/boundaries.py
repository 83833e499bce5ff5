"""Boundary operators over wall-clock readings.

Each operator returns the first wall-clock reading of the period that
contains its input, keeping the input's ``tzinfo`` untouched. All steps are
calendar steps (``replace`` and whole-day ``timedelta`` on the wall clock),
never elapsed-time arithmetic, so a 23- or 25-hour day shifts nothing.
Resolving the resulting reading to an instant is the job of
:func:`timetraveller.domain.zones.project_to_utc`.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, datetime, timedelta

from timetraveller.domain.errors import UnresolvableLocalTime
from timetraveller.domain.types import DEFAULT_WEEK_START, Period, Weekday


def start_of_day(value: datetime) -> datetime:
    return value.replace(hour=0, minute=0, second=0, microsecond=0, fold=0)


def days_since_week_start(value: datetime, week_start: Weekday = DEFAULT_WEEK_START) -> int:
    """Number of calendar days back from *value* to the most recent *week_start*."""
    return (value.isoweekday() - int(week_start) + 7) % 7


def start_of_week(value: datetime, week_start: Weekday = DEFAULT_WEEK_START) -> datetime:
    try:
        return start_of_day(value) - timedelta(days=days_since_week_start(value, week_start))
    except OverflowError as exc:
        msg = f"Week containing {value.date().isoformat()} starts before {date.min.isoformat()}"
        raise UnresolvableLocalTime(msg, value=value) from exc


def start_of_month(value: datetime) -> datetime:
    return start_of_day(value).replace(day=1)


def start_of_year(value: datetime) -> datetime:
    return start_of_day(value).replace(month=1, day=1)


_OPERATORS: dict[Period, Callable[[datetime], datetime]] = {
    Period.DAY: start_of_day,
    Period.MONTH: start_of_month,
    Period.YEAR: start_of_year,
}


def apply_boundary(
    period: Period,
    value: datetime,
    week_start: Weekday = DEFAULT_WEEK_START,
) -> datetime:
    """Dispatch to the operator for *period*."""
    period = Period(period)
    if period is Period.WEEK:
        return start_of_week(value, week_start)
    return _OPERATORS[period](value)
