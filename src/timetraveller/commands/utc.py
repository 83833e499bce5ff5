"""Command: utc — project a local wall-clock time to UTC."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

import click

from timetraveller.commands._base import TtCommand

if TYPE_CHECKING:
    from timetraveller.commands._context import AppContext


@click.command(
    cls=TtCommand,
    examples="""\
  timetraveller utc 2018-09-03T00:00:00 --tz America/Denver
  timetraveller utc "2018-11-04 01:30:00" --tz America/Denver""",
)
@click.argument(
    "local",
    type=click.DateTime(formats=["%Y-%m-%dT%H:%M:%S", "%Y-%m-%d %H:%M:%S", "%Y-%m-%d"]),
)
@click.option("--tz", "timezone", default=None, help="IANA zone LOCAL is read in.")
@click.pass_obj
def utc(app: AppContext, local: datetime, timezone: str | None) -> None:
    """UTC instant for the wall-clock time LOCAL in a zone."""
    app.emit(app.service.to_utc(local, timezone=timezone))
