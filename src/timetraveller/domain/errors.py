"""Error taxonomy for boundary conversion.

Every error carries a stable ``code`` so the service layer can surface it
as a structured :class:`~timetraveller.services.result.ServiceError`
without string matching.
"""

from __future__ import annotations

from typing import Any


class TimeTravellerError(ValueError):
    """Base class for all conversion failures."""

    code = "TIMETRAVELLER_ERROR"

    def __init__(self, message: str, *, value: Any = None) -> None:
        super().__init__(message)
        self.value = value


class MalformedDateString(TimeTravellerError):
    """A date string is not a valid ``YYYY-MM-DD`` calendar date."""

    code = "MALFORMED_DATE_STRING"


class UnknownTimezone(TimeTravellerError):
    """A zone identifier is not in the timezone database."""

    code = "UNKNOWN_TIMEZONE"


class InvalidWeekStart(TimeTravellerError):
    """A week start is outside 1..7 or not a recognised day name."""

    code = "INVALID_WEEK_START"


class UnresolvableLocalTime(TimeTravellerError):
    """A local wall time could not be mapped to a UTC instant."""

    code = "UNRESOLVABLE_LOCAL_TIME"
