"""Input normalization: four input shapes to one zone-attached wall time.

INVARIANT: the passed timezone always wins. A zoned ``datetime`` is
reinterpreted (its wall-clock fields are read as local time in the passed
zone), never converted.
"""

from __future__ import annotations

from datetime import date, datetime, tzinfo
from typing import Any

from timetraveller.domain.parsing import parse_date_string
from timetraveller.domain.types import InputShape


def classify_input(value: Any) -> InputShape:
    """Tag *value* with its input shape.

    ``datetime`` is tested before ``date`` because it subclasses it.

    Raises:
        TypeError: *value* is none of the four accepted shapes.
    """
    if isinstance(value, str):
        return InputShape.STRING
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return InputShape.LOCAL_TIMESTAMP
        return InputShape.ZONED_TIMESTAMP
    if isinstance(value, date):
        return InputShape.CIVIL_DATE
    msg = f"Expected str, date, or datetime, got {type(value).__name__}"
    raise TypeError(msg)


def to_wall_clock(value: Any) -> datetime:
    """Reduce *value* to a naive wall-clock reading."""
    shape = classify_input(value)
    if shape is InputShape.STRING:
        return parse_date_string(value)
    if shape is InputShape.CIVIL_DATE:
        return datetime(value.year, value.month, value.day)
    if shape is InputShape.ZONED_TIMESTAMP:
        return value.replace(tzinfo=None, fold=0)
    return value


def normalize_input(value: Any, tz: tzinfo) -> datetime:
    """Attach *tz* to the wall-clock reading of *value*.

    The result is a wall-clock label in *tz*; it may still name a skipped
    or repeated reading, which projection to UTC resolves.
    """
    return to_wall_clock(value).replace(tzinfo=tz)
