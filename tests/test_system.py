"""Tests for host queries (infra/system_probe.py) and ``myapp system``.

Reported values are machine dependent; queries are mocked where exact
output matters and otherwise only checked for structure.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Callable
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

from myapp.cli import exit_codes
from myapp.cli.app import main
from myapp.cli.system import INFO_HEADER, MEMORY_HEADER, PROPERTIES_HEADER
from myapp.exceptions import EnvironmentError
from myapp.infra.system_probe import (
    PROPERTY_KEYS,
    MemoryStats,
    SystemInfo,
    read_memory_stats,
    read_properties,
    read_system_info,
)

RunCli = Callable[..., tuple[int, str]]

_MB = 1024 * 1024


def _fake_info() -> SystemInfo:
    return SystemInfo(os_name="Linux", os_release="6.1.0", python_version="3.12.1", user="ada")


def _fake_memory() -> MemoryStats:
    return MemoryStats(total=8192 * _MB, used=3072 * _MB, free=5120 * _MB)


# ---------------------------------------------------------------------------
# Host queries
# ---------------------------------------------------------------------------

class TestHostQueries:
    def test_system_info_structure(self) -> None:
        info = read_system_info()
        assert info.os_name
        assert info.python_version.count(".") >= 1
        assert isinstance(info.user, str)

    @patch("myapp.infra.system_probe.getpass.getuser", side_effect=OSError("no user"))
    def test_unknown_user(self, _mock_user: MagicMock) -> None:
        assert read_system_info().user == "unknown"

    def test_memory_from_psutil(self, monkeypatch: pytest.MonkeyPatch) -> None:
        fake = SimpleNamespace(
            virtual_memory=lambda: SimpleNamespace(total=4096 * _MB, available=1024 * _MB),
        )
        monkeypatch.setitem(sys.modules, "psutil", fake)
        stats = read_memory_stats()
        assert (stats.total_mb, stats.used_mb, stats.free_mb) == (4096, 3072, 1024)

    def test_memory_without_psutil(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setitem(sys.modules, "psutil", None)
        with pytest.raises(EnvironmentError, match="psutil is not installed"):
            read_memory_stats()

    def test_properties(self) -> None:
        props = read_properties()
        assert [key for key, _ in props] == list(PROPERTY_KEYS)
        assert dict(props)["file.separator"] == os.sep
        assert dict(props)["user.dir"] == os.getcwd()

    @patch("myapp.infra.system_probe.Path.home", side_effect=RuntimeError("no home"))
    def test_unknown_home(self, _mock_home: MagicMock) -> None:
        assert dict(read_properties())["user.home"] == "unknown"


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

@pytest.fixture
def fake_queries():
    with patch("myapp.cli.system.read_system_info", return_value=_fake_info()), \
            patch("myapp.cli.system.read_memory_stats", return_value=_fake_memory()), \
            patch(
                "myapp.cli.system.read_properties",
                return_value=[("python.home", "/py"), ("user.home", "/home/ada")],
            ):
        yield


@pytest.mark.usefixtures("fake_queries")
class TestSystemCommand:
    def test_info_by_default(self, run_cli: RunCli) -> None:
        code, out = run_cli("system")
        assert code == exit_codes.SUCCESS
        assert out.splitlines() == [
            INFO_HEADER,
            "  OS: Linux 6.1.0",
            "  Python: 3.12.1",
            "  User: ada",
        ]

    def test_memory_only(self, run_cli: RunCli) -> None:
        _, out = run_cli("system", "-m")
        assert INFO_HEADER not in out
        assert MEMORY_HEADER in out
        assert "  Total: 8192 MB" in out.splitlines()
        assert "  Used:  3072 MB" in out.splitlines()
        assert "  Free:  5120 MB" in out.splitlines()

    def test_properties_only(self, run_cli: RunCli) -> None:
        _, out = run_cli("system", "--properties")
        assert INFO_HEADER not in out
        assert PROPERTIES_HEADER in out
        assert "  user.home: /home/ada" in out.splitlines()

    def test_all_sections(self, run_cli: RunCli) -> None:
        _, out = run_cli("system", "-i", "-m", "-p")
        assert out.index(INFO_HEADER) < out.index(MEMORY_HEADER) < out.index(PROPERTIES_HEADER)


def test_failing_memory_query_prints_nothing(capsys: pytest.CaptureFixture[str]) -> None:
    with patch("myapp.cli.system.read_system_info", return_value=_fake_info()), \
            patch(
                "myapp.cli.system.read_memory_stats",
                side_effect=EnvironmentError("psutil is not installed"),
            ):
        with pytest.raises(EnvironmentError):
            main(["system", "-i", "-m"])
    assert capsys.readouterr().out == ""


def test_system_live_structure(run_cli: RunCli) -> None:
    pytest.importorskip("psutil")
    _, out = run_cli("system", "-i", "-m", "-p")
    for key in PROPERTY_KEYS:
        assert f"  {key}: " in out
    assert "  Total: " in out
