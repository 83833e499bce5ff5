"""Zone resolution, wall-clock attachment, and projection to UTC.

Attaching a zone to a wall-clock reading is where daylight-saving
transitions bite. Two readings need an explicit rule:

- Ambiguous (clocks fall back, the reading occurs twice): the earlier
  occurrence wins, i.e. the offset in force before the transition
  (``fold=0``).
- Nonexistent (clocks spring forward, the reading is skipped): the result
  is the transition instant itself, the first instant whose local reading
  is past the gap. A skipped midnight therefore starts the day at the
  moment the clocks jump.

Projection to UTC never changes the instant, only its zone label.
"""

from __future__ import annotations

import logging
import math
from datetime import UTC, datetime, timedelta, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from timetraveller.domain.errors import UnknownTimezone, UnresolvableLocalTime

logger = logging.getLogger(__name__)


def resolve_timezone(name: str) -> ZoneInfo:
    """Resolve an IANA zone identifier (or ``"UTC"``) against the tz database.

    Raises:
        UnknownTimezone: *name* is empty, malformed, or not in the database.
    """
    if not isinstance(name, str):
        msg = f"Timezone must be a string identifier, got {type(name).__name__}"
        raise TypeError(msg)
    if not name.strip():
        msg = "Timezone identifier is empty"
        raise UnknownTimezone(msg, value=name)
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
        msg = f"Unknown timezone: {name!r}"
        raise UnknownTimezone(msg, value=name) from exc


def _offset(local: datetime, tz: tzinfo, fold: int) -> timedelta:
    offset = local.replace(tzinfo=tz, fold=fold).utcoffset()
    if offset is None:
        msg = f"Zone {tz} has no UTC offset for {local.isoformat()}"
        raise UnresolvableLocalTime(msg, value=local)
    return offset


def is_nonexistent(local: datetime, tz: tzinfo) -> bool:
    """True if the naive wall time *local* is skipped in *tz*."""
    aware = local.replace(tzinfo=tz, fold=0)
    round_trip = aware.astimezone(UTC).astimezone(tz).replace(tzinfo=None)
    return round_trip != local.replace(fold=0)


def is_ambiguous(local: datetime, tz: tzinfo) -> bool:
    """True if the naive wall time *local* occurs twice in *tz*."""
    if is_nonexistent(local, tz):
        return False
    return _offset(local, tz, 0) != _offset(local, tz, 1)


def _first_instant_after_gap(local: datetime, tz: tzinfo) -> datetime:
    """Bisect the UTC instants bracketing a skipped wall time for the transition."""
    before = _offset(local, tz, 0)
    after = _offset(local, tz, 1)
    lo = math.floor((local - after).replace(tzinfo=UTC).timestamp())
    hi = math.ceil((local - before).replace(tzinfo=UTC).timestamp())

    def offset_at(ts: int) -> timedelta | None:
        return datetime.fromtimestamp(ts, tz).utcoffset()

    if lo >= hi or offset_at(lo) != before or offset_at(hi) == before:
        msg = f"Cannot place skipped local time {local.isoformat()} in {tz}"
        raise UnresolvableLocalTime(msg, value=local)

    while hi - lo > 1:
        mid = (lo + hi) // 2
        if offset_at(mid) == before:
            lo = mid
        else:
            hi = mid
    return datetime.fromtimestamp(hi, tz)


def attach_timezone(local: datetime, tz: tzinfo) -> datetime:
    """Pin the naive wall time *local* to *tz*, applying the DST rules above."""
    if local.tzinfo is not None:
        msg = "attach_timezone expects a naive datetime"
        raise TypeError(msg)

    if is_nonexistent(local, tz):
        resolved = _first_instant_after_gap(local, tz)
        logger.debug(
            "Skipped local time %s in %s moved to %s",
            local.isoformat(),
            tz,
            resolved.isoformat(),
        )
        return resolved

    if _offset(local, tz, 0) != _offset(local, tz, 1):
        logger.debug("Ambiguous local time %s in %s: using earlier", local.isoformat(), tz)
    return local.replace(tzinfo=tz, fold=0)


def project_to_utc(local: datetime) -> datetime:
    """Re-express a zone-attached wall time as the same instant in UTC."""
    tz = local.tzinfo
    if tz is None:
        msg = "project_to_utc expects a zone-attached datetime"
        raise TypeError(msg)
    wall = local.replace(tzinfo=None)
    try:
        return attach_timezone(wall, tz).astimezone(UTC)
    except OverflowError as exc:
        msg = f"{wall.isoformat()} in {tz} falls outside the representable UTC range"
        raise UnresolvableLocalTime(msg, value=wall) from exc
