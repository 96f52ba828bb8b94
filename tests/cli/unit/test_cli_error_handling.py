"""CLI error-handling tests."""

from __future__ import annotations

from pathlib import Path

from openapi_normalizer.cli import main


def test_missing_output_argument_returns_clean_click_error(capsys) -> None:
    exit_code = main(["normalize", "openapi.json"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "Missing argument" in captured.err
    assert "OUTPUT_PATH" in captured.err
    assert "Traceback" not in captured.err


def test_missing_both_arguments_returns_clean_click_error(capsys) -> None:
    exit_code = main(["fix"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "INPUT_PATH" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["extract", "--bogus"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "No such option" in captured.err
    assert "--bogus" in captured.err
    assert "Traceback" not in captured.err


def test_unreadable_input_returns_error_message(tmp_path: Path, capsys) -> None:
    exit_code = main(["normalize", str(tmp_path / "missing.json"), str(tmp_path / "out.json")])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Document file not found" in captured.err
    assert "Traceback" not in captured.err
    assert not (tmp_path / "out.json").exists()
