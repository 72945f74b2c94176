"""Rich Console factory and theme for rangeprint output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract. In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

RANGE_THEME = Theme(
    {
        "rp.ok": "bold green",
        "rp.error": "bold red",
        "rp.op": "bold cyan",
        "rp.key": "dim",
        "rp.code": "magenta",
        "rp.hex": "dim",
        "rp.char": "bold",
        "rp.control": "yellow",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=RANGE_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def display_char(char: str) -> str:
    """Glyph for a table cell; control characters and space are escaped."""
    if char.isprintable() and char != " ":
        return char
    return repr(char)


def style_for_char(char: str) -> str:
    """Return the Rich style name for a character cell."""
    return "rp.char" if char.isprintable() and char != " " else "rp.control"
