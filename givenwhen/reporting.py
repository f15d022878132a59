"""Rich rendering of scenario failures.

Example:
    >>> try:
    ...     given({"count": 1}).then(should_equal({"count": 2}))
    ... except ScenarioAssertionError as error:
    ...     print(render_failure(error))
"""

from __future__ import annotations

import io

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from givenwhen.config import get_config
from givenwhen.diff import DiffType, shorten
from givenwhen.errors import ScenarioAssertionError

_CHANGE_STYLES = {
    DiffType.MISSING: "yellow",
    DiffType.UNEXPECTED: "magenta",
    DiffType.CHANGED: "red",
    DiffType.TYPE_CHANGED: "bold red",
}


def _differences_table(error: ScenarioAssertionError, limit: int, max_rows: int) -> Table:
    table = Table(show_header=True, header_style="bold", expand=False)
    table.add_column("Path", style="cyan", no_wrap=True)
    table.add_column("Change")
    table.add_column("Expected", style="green")
    table.add_column("Actual", style="red")

    for item in error.differences[:max_rows]:
        expected = "" if item.diff_type is DiffType.UNEXPECTED else shorten(repr(item.expected), limit)
        actual = "" if item.diff_type is DiffType.MISSING else shorten(repr(item.actual), limit)
        table.add_row(
            Text(item.path),
            Text(item.diff_type.value, style=_CHANGE_STYLES[item.diff_type]),
            Text(expected),
            Text(actual),
        )

    hidden = len(error.differences) - max_rows
    if hidden > 0:
        table.caption = f"{hidden} more difference(s) not shown"
    return table


def render_failure(
    error: ScenarioAssertionError,
    *,
    color: bool | None = None,
    width: int = 100,
) -> str:
    """Render a failed scenario assertion as a boxed report.

    Args:
        error: The failure to render.
        color: Emit ANSI styles; defaults to the configured ``color`` setting.
        width: Console width in characters.

    Returns:
        The rendered report as a string.
    """
    config = get_config()
    if color is None:
        color = config.color

    buffer = io.StringIO()
    console = Console(
        file=buffer,
        width=width,
        force_terminal=color,
        color_system="standard" if color else None,
        no_color=not color,
        highlight=False,
    )

    summary = error.message.splitlines()[0] if error.message else error.default_message
    parts: list = [Text(summary, style="bold")]

    if error.context.scenario:
        parts.append(Text(f"Scenario: {error.context.scenario}"))
    if error.context.steps:
        parts.append(Text("Steps: " + " -> ".join(error.context.steps)))
    if error.context.phase:
        parts.append(Text(f"Failed at: {error.context.phase}"))
    if error.differences:
        parts.append(_differences_table(error, config.max_repr_length, config.max_diff_items))

    console.print(
        Panel(
            Group(*parts),
            title=Text(f"[{error.error_code.value}] {type(error).__name__}"),
            title_align="left",
            border_style="red",
        )
    )
    return buffer.getvalue()
