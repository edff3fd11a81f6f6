"""Rich console setup for human-readable output.

Renderers draw into an in-memory console and return the text, so callers
decide where it goes (stdout for results, stderr for failures).
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

from regform.domain.types import FieldState

DEFAULT_WIDTH = 100

REGFORM_THEME = Theme(
    {
        "rf.ok": "bold green",
        "rf.error": "bold red",
        "rf.warning": "bold yellow",
        "rf.op": "bold cyan",
        "rf.key": "dim",
        "rf.field": "bold",
        "rf.value": "",
        "rf.state.empty": "dim",
        "rf.state.invalid": "red",
        "rf.state.valid": "green",
    }
)


def create_console(*, no_color: bool = False, width: int = DEFAULT_WIDTH) -> Console:
    """An off-screen Console using the regform theme.

    Rich drops ANSI codes on its own when the buffer is not a terminal.
    """
    return Console(
        file=StringIO(),
        theme=REGFORM_THEME,
        no_color=no_color,
        highlight=False,
        width=width,
    )


def get_output(console: Console) -> str:
    buffer = console.file
    if not isinstance(buffer, StringIO):
        msg = "console was not created by create_console()"
        raise TypeError(msg)
    return buffer.getvalue()


def style_for_state(state: FieldState | str) -> str:
    """Theme style for a field state; unknown states render unstyled."""
    try:
        return f"rf.state.{FieldState(state).value}"
    except ValueError:
        return "rf.value"
