"""Root CLI group for timetraveller with global flags and command registration."""

from __future__ import annotations

import click
from pydantic import ValidationError

from timetraveller import __version__
from timetraveller.commands import register_commands
from timetraveller.commands._base import TtGroup
from timetraveller.commands._context import AppContext
from timetraveller.config.settings import TimeTravellerSettings


@click.group(
    cls=TtGroup,
    invoke_without_command=True,
    examples="""\
  timetraveller day 2018-09-01 --tz America/Denver
  timetraveller week 2018-09-01 --tz America/Denver --week-start monday
  timetraveller --json year 2018-09-03 --tz Europe/Berlin
  timetraveller utc 2018-03-11T02:30:00 --tz America/Denver""",
)
@click.version_option(version=__version__, prog_name="timetraveller")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """timetraveller — local calendar boundaries as UTC instants."""
    try:
        settings = TimeTravellerSettings.from_cli(
            config_path=config_path,
            json_output=json_output or None,
            verbose=verbose or None,
            log_json=log_json or None,
        )
    except ValidationError as exc:
        msg = f"Invalid configuration: {exc}"
        raise click.ClickException(msg) from exc
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
