"""Tests for the chart CLI command."""

from __future__ import annotations

from pathlib import Path

from click.testing import CliRunner

from rangeprint.cli import cli


class TestChartCommand:
    def test_renders_table(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["chart", "Z", "a"])
        assert result.exit_code == 0
        assert "'a' down to 'Z'" in result.stdout
        assert "(8 characters)" in result.stdout
        assert "0x5A" in result.stdout
        assert result.stdout.index("0x61") < result.stdout.index("0x5A")

    def test_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "chart", "a", "c"])
        assert result.exit_code == 0
        assert result.stdout == "c\nb\na\n"

    def test_empty_range_warns_on_stderr(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["chart", "c", "a"])
        assert result.exit_code == 0
        assert "(0 characters)" in result.stdout
        assert "WARNING: Empty range" in result.stderr

    def test_invalid_bound(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["chart", "--codes", "0", "200"])
        assert result.exit_code == 1
        assert result.stdout == ""
        assert "ERROR" in result.stderr

    def test_width_from_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "rangeprint.toml").write_text("[output]\nwidth = 30\n")
        result = cli_runner.invoke(cli, ["chart", "a", "b"])
        assert result.exit_code == 0
        assert all(len(line) <= 30 for line in result.stdout.splitlines())
