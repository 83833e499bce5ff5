"""Subcommand modules for timetraveller.

Provides register_commands() which uses deferred imports to keep
``timetraveller --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the boundary commands and ``utc`` on the root CLI group."""
    from timetraveller.commands.boundary import day, month, week, year
    from timetraveller.commands.utc import utc

    cli.add_command(day)
    cli.add_command(week)
    cli.add_command(month)
    cli.add_command(year)
    cli.add_command(utc)
