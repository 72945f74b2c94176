"""Command: tabulate a descending range with code points."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rangeprint.commands._base import RangeCommand

if TYPE_CHECKING:
    from rangeprint.commands._context import AppContext


@click.command(
    cls=RangeCommand,
    examples="""\
  rangeprint chart Z a
  rangeprint chart --codes 0 31
  rangeprint -q chart a f""",
)
@click.argument("low")
@click.argument("high")
@click.option("--codes", is_flag=True, help="Read LOW and HIGH as integer code points.")
@click.pass_obj
def chart(app: AppContext, low: str, high: str, codes: bool) -> None:
    """Show code point, hex, and glyph from HIGH down to LOW."""
    from rangeprint.services.span import RangeService

    app.emit(RangeService().span(low, high, codes=codes))
