"""Tests for the --examples flag on CLI commands."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from rangeprint.cli import cli

EXAMPLES_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["a2z", "--examples"], ["rangeprint a2z"]),
    (["span", "--examples"], ["rangeprint span a d", "--codes"]),
    (["chart", "--examples"], ["rangeprint chart Z a"]),
]


@pytest.mark.parametrize(
    ("args", "expected"),
    EXAMPLES_COMMANDS,
    ids=[args[0] for args, _ in EXAMPLES_COMMANDS],
)
def test_examples_flag(cli_runner: CliRunner, args: list[str], expected: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0, result.output
    assert "Examples for" in result.output
    for keyword in expected:
        assert keyword in result.output


def test_examples_not_in_output_without_flag(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["span", "--help"])
    assert "--examples" in result.output
    assert "Examples for" not in result.output
