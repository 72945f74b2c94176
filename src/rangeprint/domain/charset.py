"""Character table and descending range rules.

A table is a contiguous, totally ordered block of code points. Only the
7-bit ASCII table ships; bounds are given either as a single character
or as an integer code point.

INVARIANT: the descending start is always ``high`` and the end is ``low``.
A range with ``low > high`` is valid and empty unless ``strict`` is set.
"""

from __future__ import annotations

from pydantic import BaseModel

Bound = str | int


class InvalidRange(ValueError):
    """A bound is not in the table, or the range is empty under strict rules."""

    def __init__(self, bound: Bound | None, reason: str) -> None:
        super().__init__(reason)
        self.bound = bound
        self.reason = reason


class CharacterTable(BaseModel):
    """A fixed, ordered block of code points."""

    model_config = {"frozen": True}

    name: str
    first: int
    last: int

    def contains(self, code: int) -> bool:
        return self.first <= code <= self.last

    def code_of(self, bound: Bound) -> int:
        """Resolve *bound* to a code point inside this table.

        Raises:
            InvalidRange: *bound* is a string that is not exactly one
                character, or its code point lies outside the table.
        """
        if isinstance(bound, bool):
            raise InvalidRange(bound, f"Bound must be a character or code point, got {bound!r}")
        if isinstance(bound, str):
            if len(bound) != 1:
                raise InvalidRange(bound, f"Bound must be a single character, got {bound!r}")
            code = ord(bound)
        else:
            code = bound
        if not self.contains(code):
            raise InvalidRange(
                bound,
                f"{bound!r} is outside the {self.name} table ({self.first}..{self.last})",
            )
        return code

    def symbol(self, code: int) -> str:
        if not self.contains(code):
            raise InvalidRange(code, f"{code} is outside the {self.name} table")
        return chr(code)


ASCII = CharacterTable(name="ascii", first=0, last=127)


def descending_codes(
    low: Bound,
    high: Bound,
    *,
    table: CharacterTable = ASCII,
    strict: bool = False,
) -> list[int]:
    """Return code points from *high* down to *low*, both inclusive.

    An empty list when *low* sorts after *high*; with *strict* that case
    raises :class:`InvalidRange` instead.
    """
    lo = table.code_of(low)
    hi = table.code_of(high)
    if strict and lo > hi:
        raise InvalidRange(low, f"Empty range: low {low!r} is above high {high!r}")
    return list(range(hi, lo - 1, -1))


def parse_code(bound: Bound) -> int:
    """Read a bound as an integer code point.

    Plain digits are decimal, leading zeros allowed (``"065"``); ``0x`` and
    ``0o`` prefixes select hex and octal.
    """
    if isinstance(bound, int):
        return bound
    try:
        if bound.isascii() and bound.isdigit():
            return int(bound, 10)
        return int(bound, 0)
    except ValueError:
        raise InvalidRange(bound, f"Bound must be an integer code point, got {bound!r}") from None


def parse_lines(text: str) -> list[int]:
    """Read printed output back into code points, one per line.

    Only the newline character separates lines; every other control
    character reads back as itself. A range that includes code 10 cannot be read back this way:
    the newline character prints as an empty line.

    Raises:
        InvalidRange: A line does not hold exactly one character.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    codes: list[int] = []
    for line in lines:
        if len(line) != 1:
            raise InvalidRange(line, f"Expected one character per line, got {line!r}")
        codes.append(ord(line))
    return codes
