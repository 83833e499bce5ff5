"""Boundary periods, weekdays, and input shape enums."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class Weekday(IntEnum):
    """Day of week, ISO numbered (Monday=1 .. Sunday=7).

    Matches ``date.isoweekday()`` so offsets can be computed directly.
    """

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7


DEFAULT_WEEK_START = Weekday.SUNDAY


class Period(StrEnum):
    """Calendar periods whose start instant can be computed."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


class InputShape(StrEnum):
    """The four accepted temporal input shapes.

    ``ZONED_TIMESTAMP`` is an aware ``datetime``; ``LOCAL_TIMESTAMP`` is a
    naive one.
    """

    STRING = "string"
    CIVIL_DATE = "civil_date"
    LOCAL_TIMESTAMP = "local_timestamp"
    ZONED_TIMESTAMP = "zoned_timestamp"
