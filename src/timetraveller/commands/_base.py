"""Click base classes carrying an ``--examples`` flag.

``--help`` stays short; ``--examples`` prints the canned invocations for a
command and exits before any argument is validated, so
``timetraveller week --examples`` works without a VALUE.
"""

from __future__ import annotations

from typing import Any

import click


def _examples_option(examples: str) -> click.Option:
    def show(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if value:
            click.echo(f"Examples for '{ctx.command_path}':\n\n{examples}")
            ctx.exit(0)

    return click.Option(
        ["--examples"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=show,
        help="Show usage examples.",
    )


class _ExamplesMixin:
    params: list[click.Parameter]

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(_examples_option(examples))


class TtCommand(_ExamplesMixin, click.Command):
    """Command accepting ``examples=`` in its decorator."""


class TtGroup(_ExamplesMixin, click.Group):
    """Root group; subcommands default to :class:`TtCommand`."""

    command_class = TtCommand
