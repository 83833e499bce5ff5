"""BoundaryService — conversion operations returning ServiceResult.

The library functions in :mod:`timetraveller.api` raise; this service
catches the :class:`TimeTravellerError` taxonomy and turns it into a
structured error so the CLI can render it. Defaults for zone and week
start come from :class:`~timetraveller.config.models.BoundaryConfig`.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import TYPE_CHECKING, Any

from timetraveller import api
from timetraveller.domain.errors import TimeTravellerError
from timetraveller.domain.normalize import classify_input, to_wall_clock
from timetraveller.domain.parsing import parse_week_start
from timetraveller.domain.types import InputShape, Period
from timetraveller.domain.zones import is_nonexistent, resolve_timezone
from timetraveller.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from timetraveller.config.models import BoundaryConfig

logger = logging.getLogger(__name__)


def _describe(value: Any) -> str:
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return str(value)


def _failure(op: str, exc: TimeTravellerError) -> ServiceResult:
    logger.debug("%s failed: %s", op, exc)
    detail: dict[str, Any] = {}
    if exc.value is not None:
        detail["value"] = _describe(exc.value)
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=exc.code, message=str(exc), detail=detail),
    )


class BoundaryService:
    """Boundary conversions with configured defaults.

    Usage::

        svc = BoundaryService(settings.boundary)
        result = svc.boundary(Period.WEEK, "2018-09-01", timezone="America/Denver")
    """

    def __init__(self, config: BoundaryConfig) -> None:
        self._config = config

    def boundary(
        self,
        period: Period | str,
        value: Any,
        *,
        timezone: str | None = None,
        week_start: Any = None,
    ) -> ServiceResult:
        """Compute the UTC start of *period* containing *value*."""
        period = Period(period)
        op = f"start_of_{period}"
        zone = timezone if timezone is not None else self._config.timezone
        warnings: list[str] = []

        try:
            weekday = parse_week_start(
                week_start if week_start is not None else self._config.week_start
            )
            utc = api.boundary_utc(value, zone, period, weekday)
            tz = resolve_timezone(zone)
        except TimeTravellerError as exc:
            return _failure(op, exc)

        if classify_input(value) is InputShape.ZONED_TIMESTAMP and str(value.tzinfo) != zone:
            warnings.append(
                f"Input zone {value.tzinfo} ignored; wall clock read as {zone} local time"
            )

        local = utc.astimezone(tz)
        wall = to_wall_clock(value)
        midnight = local.replace(tzinfo=None, hour=0, minute=0, second=0, microsecond=0)
        if local.replace(tzinfo=None) != midnight and is_nonexistent(midnight, tz):
            warnings.append(
                f"Local midnight on {local.date().isoformat()} does not exist in {zone}; "
                f"period starts at {local.time().isoformat()}"
            )

        data: dict[str, Any] = {
            "input": _describe(value),
            "wall_clock": wall.isoformat(),
            "timezone": zone,
            "period": str(period),
            "local": local.isoformat(),
            "utc": utc.isoformat(),
        }
        if period is Period.WEEK:
            data["week_start"] = weekday.name.lower()
        logger.debug("%s %s in %s -> %s", op, data["input"], zone, data["utc"])
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    def to_utc(self, local: datetime, *, timezone: str | None = None) -> ServiceResult:
        """Project the naive wall time *local* in *timezone* to UTC."""
        op = "to_utc"
        zone = timezone if timezone is not None else self._config.timezone
        warnings: list[str] = []

        try:
            utc = api.to_utc(zone, local)
            tz = resolve_timezone(zone)
        except TimeTravellerError as exc:
            return _failure(op, exc)

        if is_nonexistent(local, tz):
            moved = utc.astimezone(tz).replace(tzinfo=None)
            warnings.append(
                f"{local.isoformat()} does not exist in {zone}; "
                f"moved forward to {moved.isoformat()}"
            )

        data = {
            "input": local.isoformat(),
            "timezone": zone,
            "utc": utc.isoformat(),
        }
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)
