"""Rich Console factory and theme for restrack output.

Consoles render into a StringIO buffer so renderers keep a
``-> str`` contract.  Outside a terminal (tests, pipes) Rich emits no
color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

RESTRACK_THEME = Theme(
    {
        "rt.ok": "bold green",
        "rt.error": "bold red",
        "rt.op": "bold cyan",
        "rt.key": "dim",
        "rt.index": "bold blue",
        "rt.name": "bold",
        "rt.clean": "green",
        "rt.dirty": "yellow",
    }
)

_CLEAN_STYLES: dict[str, str] = {
    "clean": "rt.clean",
    "dirty": "rt.dirty",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=RESTRACK_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_clean(label: str) -> str:
    """Return the Rich style for a clean-status label."""
    return _CLEAN_STYLES.get(label, "")
