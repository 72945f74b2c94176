"""Subcommand modules for rangeprint.

Provides register_commands() which uses deferred imports to keep
``rangeprint --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from rangeprint.commands.a2z import a2z
    from rangeprint.commands.chart import chart
    from rangeprint.commands.span import span

    cli.add_command(a2z)
    cli.add_command(span)
    cli.add_command(chart)
