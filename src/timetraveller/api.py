"""Public entry points: local calendar boundaries as UTC instants.

Every function takes a date-like *value* in one of four shapes:

- ``"YYYY-MM-DD"`` string
- ``datetime.date``
- naive ``datetime.datetime`` (wall clock in *timezone*)
- aware ``datetime.datetime`` (wall clock reinterpreted in *timezone*)

and an IANA *timezone*, and returns an aware ``datetime`` in UTC.

Examples:
    >>> start_of_day_utc("2018-09-01", "America/Denver").isoformat()
    '2018-09-01T06:00:00+00:00'
    >>> start_of_week_utc("2018-09-01", "America/Denver").isoformat()
    '2018-08-26T06:00:00+00:00'
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from timetraveller.domain.boundaries import apply_boundary
from timetraveller.domain.normalize import normalize_input
from timetraveller.domain.parsing import parse_week_start
from timetraveller.domain.types import Period, Weekday
from timetraveller.domain.zones import project_to_utc, resolve_timezone

DateLike = str | date | datetime
WeekStartLike = Weekday | int | str | None


def boundary_utc(
    value: DateLike,
    timezone: str,
    period: Period | str,
    week_start: WeekStartLike = None,
) -> datetime:
    """UTC instant at which the local *period* containing *value* begins.

    *week_start* is only consulted for :attr:`Period.WEEK`, but it is
    validated regardless.

    Raises:
        MalformedDateString: *value* is a string not in ``YYYY-MM-DD`` form.
        UnknownTimezone: *timezone* is not in the tz database.
        InvalidWeekStart: *week_start* is not a recognised encoding.
        UnresolvableLocalTime: the zone rules cannot place the boundary.
    """
    tz = resolve_timezone(timezone)
    weekday = parse_week_start(week_start)
    local = normalize_input(value, tz)
    return project_to_utc(apply_boundary(Period(period), local, weekday))


def start_of_day_utc(value: DateLike, timezone: str) -> datetime:
    """UTC instant of local midnight on the day of *value* in *timezone*."""
    return boundary_utc(value, timezone, Period.DAY)


def start_of_week_utc(
    value: DateLike,
    timezone: str,
    week_start: WeekStartLike = None,
) -> datetime:
    """UTC instant of local midnight on the first day of the week of *value*.

    Weeks start on Sunday unless *week_start* says otherwise. It may be a
    :class:`Weekday`, an ISO number 1..7 (Monday=1), a token like ``"mon"``
    or ``":mon"``, or a full name like ``"Monday"``.
    """
    return boundary_utc(value, timezone, Period.WEEK, week_start)


def start_of_month_utc(value: DateLike, timezone: str) -> datetime:
    """UTC instant of local midnight on the 1st of the month of *value*."""
    return boundary_utc(value, timezone, Period.MONTH)


def start_of_year_utc(value: DateLike, timezone: str) -> datetime:
    """UTC instant of local midnight on January 1st of the year of *value*."""
    return boundary_utc(value, timezone, Period.YEAR)


def to_utc(timezone: str, local: Any) -> datetime:
    """Read the naive *local* datetime as wall clock in *timezone*, return UTC.

    Example:
        >>> to_utc("America/Denver", datetime(2018, 9, 3)).isoformat()
        '2018-09-03T06:00:00+00:00'
    """
    if not isinstance(local, datetime) or local.tzinfo is not None:
        msg = f"to_utc expects a naive datetime, got {local!r}"
        raise TypeError(msg)
    return project_to_utc(local.replace(tzinfo=resolve_timezone(timezone)))
