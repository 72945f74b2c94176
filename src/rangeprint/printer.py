"""RangePrinter: write a descending character range, one per line."""

from __future__ import annotations

import logging
from typing import IO

import click

from rangeprint.domain.charset import ASCII, Bound, CharacterTable, descending_codes

logger = logging.getLogger(__name__)

# Shipped bounds: 'a' sits after 'Z' in ASCII, so 'a' is the descending start.
A2Z_LOW = "Z"
A2Z_HIGH = "a"


def print_range(
    low: Bound,
    high: Bound,
    *,
    table: CharacterTable = ASCII,
    file: IO[str] | None = None,
) -> None:
    """Print every character from *high* down to *low*, each on its own line.

    Bounds are validated before the first write, so an invalid bound
    prints nothing. ``low > high`` prints nothing and is not an error.

    Raises:
        InvalidRange: A bound is not a single character or lies outside *table*.
    """
    codes = descending_codes(low, high, table=table)
    logger.debug("Printing %d code points, %r down to %r (%s)", len(codes), high, low, table.name)
    for code in codes:
        click.echo(table.symbol(code), file=file)


def print_a2z(*, file: IO[str] | None = None) -> None:
    """Print from ``a`` down to ``Z`` in the ASCII chart."""
    print_range(A2Z_LOW, A2Z_HIGH, file=file)
