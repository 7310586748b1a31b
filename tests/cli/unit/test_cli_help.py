"""CLI smoke tests."""

from click.testing import CliRunner
from message_codegen.cli import cli


def test_cli_displays_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "generate" in result.output
    assert "generate-config" in result.output
    assert "inspect" in result.output
    assert "stats" in result.output
