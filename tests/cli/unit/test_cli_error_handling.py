"""CLI error-handling tests."""

from __future__ import annotations

from pathlib import Path

from message_codegen.cli import main


def test_unknown_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["generate", "--bogus"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "No such option: --bogus" in captured.err
    assert "Traceback" not in captured.err


def test_missing_argument_returns_clean_click_error(capsys) -> None:
    exit_code = main(["inspect"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "Missing argument" in captured.err
    assert "Traceback" not in captured.err


def test_missing_schema_directory_is_reported_without_traceback(tmp_path: Path, capsys) -> None:
    exit_code = main(["stats", "--schema-dir", str(tmp_path / "absent")])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Schema directory does not exist" in captured.err
    assert "Traceback" not in captured.err


def test_invalid_configuration_is_reported(tmp_path: Path, capsys) -> None:
    config_path = tmp_path / "message-codegen.yaml"
    config_path.write_text("generate_mod_file: sometimes\n", encoding="utf-8")

    exit_code = main(["generate", "--config", str(config_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "generate_mod_file must be true or false" in captured.err
