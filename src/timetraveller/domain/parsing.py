"""Parsing for the two textual inputs: date strings and week starts.

Only one date format is accepted: ``YYYY-MM-DD`` with zero-padded month
and day. Week starts accept ISO numbers, short tokens, and full names.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Any

from timetraveller.domain.errors import InvalidWeekStart, MalformedDateString
from timetraveller.domain.types import DEFAULT_WEEK_START, Weekday

DATE_PATTERN: re.Pattern[str] = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")

WEEKDAY_TOKENS: dict[str, Weekday] = {
    "mon": Weekday.MONDAY,
    "tue": Weekday.TUESDAY,
    "wed": Weekday.WEDNESDAY,
    "thu": Weekday.THURSDAY,
    "fri": Weekday.FRIDAY,
    "sat": Weekday.SATURDAY,
    "sun": Weekday.SUNDAY,
}

WEEKDAY_NAMES: dict[str, Weekday] = {day.name.lower(): day for day in Weekday}


def parse_date_string(text: str) -> datetime:
    """Parse ``YYYY-MM-DD`` into a naive datetime at midnight.

    Raises:
        MalformedDateString: wrong shape, or not a real calendar date.
    """
    match = DATE_PATTERN.fullmatch(text)
    if match is None:
        msg = f"Expected a date in YYYY-MM-DD form, got {text!r}"
        raise MalformedDateString(msg, value=text)

    year, month, day = (int(part) for part in match.groups())
    try:
        parsed = date(year, month, day)
    except ValueError as exc:
        msg = f"Not a valid calendar date: {text!r} ({exc})"
        raise MalformedDateString(msg, value=text) from exc
    return datetime(parsed.year, parsed.month, parsed.day)


def parse_week_start(value: Any) -> Weekday:
    """Normalize any accepted week-start encoding to a :class:`Weekday`.

    Accepted forms:
        - ``None`` (Sunday)
        - a :class:`Weekday` member
        - an integer 1..7 (ISO, Monday=1)
        - a token such as ``"mon"`` or ``":mon"``
        - a full day name such as ``"Monday"`` (case-insensitive)
    """
    if value is None:
        return DEFAULT_WEEK_START
    if isinstance(value, Weekday):
        return value
    if isinstance(value, bool):
        msg = f"Week start must be 1..7 or a day name, got {value!r}"
        raise InvalidWeekStart(msg, value=value)
    if isinstance(value, int):
        try:
            return Weekday(value)
        except ValueError as exc:
            msg = f"Week start must be between 1 and 7, got {value}"
            raise InvalidWeekStart(msg, value=value) from exc
    if isinstance(value, str):
        key = value.strip().lower().removeprefix(":")
        weekday = WEEKDAY_TOKENS.get(key) or WEEKDAY_NAMES.get(key)
        if weekday is None:
            msg = f"Unrecognised week start: {value!r}"
            raise InvalidWeekStart(msg, value=value)
        return weekday

    msg = f"Week start must be an int or str, got {type(value).__name__}"
    raise InvalidWeekStart(msg, value=value)
