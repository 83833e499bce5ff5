"""Rich/JSON output helpers.

The CLI renders ServiceResult for humans (Rich) or machines (--json).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.text import Text

from timetraveller.output.console import create_console, get_output, style_for_key

if TYPE_CHECKING:
    from timetraveller.services.result import ServiceResult


def _render_human(result: ServiceResult) -> str:
    console = create_console()
    if result.ok:
        console.print(Text("OK", style="tt.ok"), Text(f" {result.op}", style="tt.op"))
        width = max((len(key) for key in result.data), default=0)
        for key, value in result.data.items():
            line = Text(f"  {key.ljust(width)}  ", style="tt.key")
            line.append(str(value), style=style_for_key(key))
            console.print(line)
    else:
        message = result.error.message if result.error else "Unknown error"
        code = result.error.code if result.error else "UNKNOWN"
        console.print(
            Text("ERROR", style="tt.error"),
            Text(f" {result.op}", style="tt.op"),
            Text(f" [{code}] {message}"),
        )
    return get_output(console).rstrip("\n")


def format_result(result: ServiceResult, *, json_output: bool = False) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        json_output: If True, return JSON; otherwise return human-readable text.
    """
    if json_output:
        return result.model_dump_json(indent=2)
    return _render_human(result)
