"""Rich Console factory, theme, and the session banner.

Creates Console instances that render to a StringIO buffer, so callers get
plain strings back.  In non-TTY environments (tests, pipes) Rich
automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.panel import Panel
from rich.text import Text
from rich.theme import Theme

DEPT_THEME = Theme(
    {
        "dept.company": "bold cyan",
        "dept.name": "green",
        "dept.keyword": "bold",
        "dept.hint": "dim",
    }
)

_COMMANDS = (
    ("add", "<NAME> to <DEPT>"),
    ("list", "[<DEPT>]"),
    ("quit", ""),
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=DEPT_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 100,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def render_banner(company: str, departments: list[str], *, no_color: bool = False) -> str:
    """Render the greeting shown when an interactive session starts."""
    console = create_console(no_color=no_color)

    body = Text()
    body.append("Departments: ", style="dept.hint")
    body.append(", ".join(departments), style="dept.name")
    body.append("\n")
    body.append("Commands: ", style="dept.hint")
    for i, (keyword, args) in enumerate(_COMMANDS):
        if i:
            body.append(" | ")
        body.append(keyword, style="dept.keyword")
        if args:
            body.append(f" {args}")

    console.print(Panel(body, title=Text(company, style="dept.company"), expand=False))
    return get_output(console).rstrip("\n")
