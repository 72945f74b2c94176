"""Command: print the shipped ``a`` down to ``Z`` range."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rangeprint.commands._base import RangeCommand

if TYPE_CHECKING:
    from rangeprint.commands._context import AppContext


@click.command(
    cls=RangeCommand,
    examples="""\
  rangeprint a2z
  rangeprint --json a2z""",
)
@click.pass_obj
def a2z(app: AppContext) -> None:
    """Print from 'a' down to 'Z' in the ASCII chart, one per line."""
    if app.settings.json_output:
        from rangeprint.services.span import RangeService

        app.emit(RangeService().a2z())
        return

    from rangeprint.printer import print_a2z

    print_a2z()
