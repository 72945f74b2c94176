"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, rangeprint.toml only contains
overrides. Only presentation is configurable; the character table and the
printed bounds are not.
"""

from __future__ import annotations

from pydantic import BaseModel


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    width: int = 120
    color: bool = True