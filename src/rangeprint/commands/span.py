"""Command: print a descending character range."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rangeprint.commands._base import RangeCommand

if TYPE_CHECKING:
    from rangeprint.commands._context import AppContext


@click.command(
    cls=RangeCommand,
    examples="""\
  rangeprint span a d
  rangeprint span --codes 65 90
  rangeprint span --codes 0x30 0x39
  rangeprint --json span A F""",
)
@click.argument("low")
@click.argument("high")
@click.option("--codes", is_flag=True, help="Read LOW and HIGH as integer code points.")
@click.pass_obj
def span(app: AppContext, low: str, high: str, codes: bool) -> None:
    """Print every character from HIGH down to LOW, one per line.

    LOW above HIGH prints nothing.
    """
    if app.settings.json_output:
        from rangeprint.services.span import RangeService

        app.emit(RangeService().span(low, high, codes=codes))
        return

    from rangeprint.domain.charset import Bound, InvalidRange, parse_code
    from rangeprint.printer import print_range

    try:
        lo: Bound = parse_code(low) if codes else low
        hi: Bound = parse_code(high) if codes else high
        print_range(lo, hi)
    except InvalidRange as exc:
        raise click.ClickException(exc.reason) from exc
