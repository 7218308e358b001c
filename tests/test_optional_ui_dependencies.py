"""Regression tests for the optional Rich UI dependency.

These tests verify bootstrap commands and plain command output are
resilient when Rich is missing: output falls back to ``print`` and
errors are still rendered on stderr.
"""

from __future__ import annotations

import sys

import pytest

from myapp.cli import exit_codes
from myapp.cli.app import cli, main


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.table", None)
    monkeypatch.setitem(sys.modules, "rich.text", None)
    monkeypatch.setitem(sys.modules, "rich.logging", None)


def test_help_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0


def test_version_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0


def test_greet_works_without_rich(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    code = main(["greet", "Ada", "-c", "2"])
    assert code == exit_codes.SUCCESS
    assert capsys.readouterr().out == "Hello Ada, nice to meet you!\n" * 2


def test_verbose_logging_without_rich(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    code = main(["-v", "greet"])
    captured = capsys.readouterr()
    assert code == exit_codes.SUCCESS
    assert "resolved greet" in captured.err
    assert "invoking greet" in captured.err
    assert "resolved" not in captured.out
    assert "invoking" not in captured.out


def test_usage_error_without_rich(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        cli(["file", "process"])
    assert exc_info.value.code == exit_codes.USAGE_ERROR
    err = capsys.readouterr().err
    assert "Error: " in err
    assert "--input" in err
