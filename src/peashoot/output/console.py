"""Rich Console factory and theme for peashoot output.

Consoles render into a StringIO buffer so formatters can return plain
strings.  Rich disables color codes when the output is not a terminal
(tests, pipes).
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

PEASHOOT_THEME = Theme(
    {
        "pea.ok": "bold green",
        "pea.error": "bold red",
        "pea.warning": "bold yellow",
        "pea.op": "bold cyan",
        "pea.key": "dim",
        "pea.id": "bold blue",
        "pea.path": "magenta",
        "pea.date": "bold green",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=PEASHOOT_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
