"""Commands: day, week, month, year — start of a local period in UTC."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from timetraveller.commands._base import TtCommand
from timetraveller.domain.types import Period

if TYPE_CHECKING:
    from timetraveller.commands._context import AppContext

_TZ_HELP = "IANA zone the date is local to (default: [boundary] timezone)."


@click.command(
    cls=TtCommand,
    examples="""\
  timetraveller day 2018-09-01 --tz America/Denver
  timetraveller --json day 2018-11-04 --tz America/Sao_Paulo""",
)
@click.argument("value")
@click.option("--tz", "timezone", default=None, help=_TZ_HELP)
@click.pass_obj
def day(app: AppContext, value: str, timezone: str | None) -> None:
    """UTC instant of local midnight on VALUE (YYYY-MM-DD)."""
    app.emit(app.service.boundary(Period.DAY, value, timezone=timezone))


@click.command(
    cls=TtCommand,
    examples="""\
  timetraveller week 2018-09-01 --tz America/Denver
  timetraveller week 2018-09-01 --tz America/Denver --week-start mon
  timetraveller week 2018-09-01 --tz America/Denver --week-start 1""",
)
@click.argument("value")
@click.option("--tz", "timezone", default=None, help=_TZ_HELP)
@click.option(
    "--week-start",
    default=None,
    help="First day of the week: 1-7 (Monday=1), mon..sun, or a full day name.",
)
@click.pass_obj
def week(app: AppContext, value: str, timezone: str | None, week_start: str | None) -> None:
    """UTC instant at which the local week containing VALUE begins."""
    start: int | str | None = week_start
    if week_start is not None and week_start.strip().isdigit():
        start = int(week_start)
    app.emit(app.service.boundary(Period.WEEK, value, timezone=timezone, week_start=start))


@click.command(
    cls=TtCommand,
    examples="""\
  timetraveller month 2018-09-03 --tz America/Denver""",
)
@click.argument("value")
@click.option("--tz", "timezone", default=None, help=_TZ_HELP)
@click.pass_obj
def month(app: AppContext, value: str, timezone: str | None) -> None:
    """UTC instant at which the local month containing VALUE begins."""
    app.emit(app.service.boundary(Period.MONTH, value, timezone=timezone))


@click.command(
    cls=TtCommand,
    examples="""\
  timetraveller year 2018-09-03 --tz America/Denver""",
)
@click.argument("value")
@click.option("--tz", "timezone", default=None, help=_TZ_HELP)
@click.pass_obj
def year(app: AppContext, value: str, timezone: str | None) -> None:
    """UTC instant at which the local year containing VALUE begins."""
    app.emit(app.service.boundary(Period.YEAR, value, timezone=timezone))
