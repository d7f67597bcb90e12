"""CLI error-handling tests."""

from __future__ import annotations

from pathlib import Path

from graphql_schema_extender.cli import main


def test_missing_required_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["extend", "--output", "/tmp/out.graphql"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "Missing option" in captured.err
    assert "--config" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["extend", "--bogus"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "No such option: --bogus" in captured.err
    assert "Traceback" not in captured.err


def test_domain_error_is_reported_without_traceback(tmp_path: Path, capsys) -> None:
    exit_code = main(["extend", "--config", str(tmp_path / "missing.yaml")])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Configuration file not found" in captured.err
    assert "Traceback" not in captured.err
