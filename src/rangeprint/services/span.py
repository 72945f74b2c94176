"""RangeService: the descending range as structured data.

Backs ``--json`` output and the ``chart`` command. Text output goes
through :func:`rangeprint.printer.print_range` instead.
"""

from __future__ import annotations

import logging
from typing import Any

from rangeprint.domain.charset import (
    ASCII,
    Bound,
    CharacterTable,
    InvalidRange,
    descending_codes,
    parse_code,
)
from rangeprint.printer import A2Z_HIGH, A2Z_LOW
from rangeprint.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


class RangeService:
    """Builds descending range listings for one character table."""

    def __init__(self, table: CharacterTable = ASCII) -> None:
        self._table = table

    def span(self, low: Bound, high: Bound, *, codes: bool = False) -> ServiceResult:
        """List code points from *high* down to *low*.

        Args:
            low: Lower bound (character, or code point string when *codes*).
            high: Upper bound, the first item listed.
            codes: Read string bounds as integer code points
                (``"65"``, ``"0x41"``).
        """
        try:
            if codes:
                low = parse_code(low)
                high = parse_code(high)
            points = descending_codes(low, high, table=self._table)
        except InvalidRange as exc:
            logger.debug("Rejected range %r..%r: %s", low, high, exc.reason)
            return ServiceResult(
                ok=False,
                op="span",
                error=ServiceError(
                    code="INVALID_RANGE",
                    message=exc.reason,
                    detail={"bound": exc.bound, "table": self._table.name},
                ),
            )

        warnings: list[str] = []
        if not points:
            warnings.append(f"Empty range: {low!r} is above {high!r}")

        items = [self._item(code) for code in points]
        return ServiceResult(
            ok=True,
            op="span",
            data={
                "table": self._table.name,
                "low": low,
                "high": high,
                "count": len(items),
                "items": items,
            },
            warnings=warnings,
        )

    def a2z(self) -> ServiceResult:
        """The shipped fixed range, ``a`` down to ``Z``."""
        return self.span(A2Z_LOW, A2Z_HIGH)

    def _item(self, code: int) -> dict[str, Any]:
        return {"code": code, "hex": f"0x{code:02X}", "char": self._table.symbol(code)}
