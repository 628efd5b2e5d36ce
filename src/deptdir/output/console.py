"""Rich Console factory and theme for deptdir output.

Consoles render into a StringIO buffer so renderers keep a
``-> str`` contract. Outside a terminal (tests, pipes) Rich emits no
color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

DEPTDIR_THEME = Theme(
    {
        "dept.department": "bold cyan",
        "dept.employee": "",
        "dept.ok": "bold green",
        "dept.error": "bold red",
        "dept.key": "dim",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width.
    """
    return Console(
        file=StringIO(),
        theme=DEPTDIR_THEME,
        no_color=no_color,
        highlight=False,
        emoji=False,
        markup=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
