"""Tests for format_result mode selection."""

import json

from rangeprint.output.formatters import OutputSettings, format_result
from rangeprint.services.span import RangeService


class TestFormatResult:
    def test_default_is_rich(self) -> None:
        output = format_result(RangeService().span("a", "b"))
        assert "0x62" in output

    def test_json(self) -> None:
        output = format_result(
            RangeService().span("a", "b"), settings=OutputSettings(json_output=True)
        )
        data = json.loads(output)
        assert data["ok"] is True
        assert data["data"]["count"] == 2

    def test_json_wins_over_quiet(self) -> None:
        settings = OutputSettings(json_output=True, quiet=True)
        assert json.loads(format_result(RangeService().span("a", "b"), settings=settings))

    def test_quiet(self) -> None:
        output = format_result(RangeService().span("a", "b"), settings=OutputSettings(quiet=True))
        assert output == "b\na"

    def test_no_color(self) -> None:
        output = format_result(RangeService().span("a", "b"), settings=OutputSettings(color=False))
        assert "\x1b" not in output
