"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from rangeprint.output.console import create_console, display_char, get_output, style_for_char

if TYPE_CHECKING:
    from rich.console import Console

    from rangeprint.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    width: int | None = None,
    no_color: bool = False,
) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console(no_color=no_color, width=width)

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {msg}"

    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(str(item["char"]) for item in items)

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="rp.ok"), Text(f"  {result.op}", style="rp.op"))


def _field(console: Console, key: str, value: Any) -> None:
    console.print(Text(f"  {key}: ", style="rp.key"), Text(str(value)), sep="")


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="rp.error")
    op = Text(f"  {result.op}", style="rp.op")
    console.print(label, op, "-", Text(msg))
    if verbose and err and err.detail:
        for key, value in err.detail.items():
            _field(console, key, value)


# ── Operation renderers ───────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


def _render_span(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Chart of the range: one row per code point, in print order."""
    data = result.data
    console.print(
        Text(f"{data['table']}  ", style="rp.op"),
        Text(f"{data['high']!r} down to {data['low']!r}  ({data['count']} characters)"),
        sep="",
    )
    if not data["items"]:
        return

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Code", style="rp.code", justify="right")
    table.add_column("Hex", style="rp.hex")
    table.add_column("Char", no_wrap=True)

    for item in data["items"]:
        char = item["char"]
        table.add_row(
            str(item["code"]),
            item["hex"],
            Text(display_char(char), style=style_for_char(char)),
        )
    console.print(table)


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "span": _render_span,
}
