"""Tests for the sample user directory (core/users.py) and ``myapp user``."""

from __future__ import annotations

import json
import sys
from collections.abc import Callable

import pytest

from myapp.cli import exit_codes
from myapp.cli.app import main
from myapp.core.users import SAMPLE_USERS, render_csv, render_json, render_table
from myapp.exceptions import UsageError

RunCli = Callable[..., tuple[int, str]]


def _body(out: str) -> str:
    """Drop the ``Listing users`` header line."""
    header, _, body = out.partition("\n")
    assert header.startswith("Listing users (format: ")
    return body


# ---------------------------------------------------------------------------
# Renderers
# ---------------------------------------------------------------------------

class TestRenderers:
    def test_sample_users(self) -> None:
        assert [u.username for u in SAMPLE_USERS] == ["alice", "bob", "charlie"]
        assert all(u.email == f"{u.username}@example.com" for u in SAMPLE_USERS)
        assert all(u.role == "USER" for u in SAMPLE_USERS)

    def test_json(self) -> None:
        data = json.loads("\n".join(render_json()))
        assert data[0] == {"username": "alice", "email": "alice@example.com", "role": "USER"}

    def test_csv(self) -> None:
        assert render_csv() == [
            "username,email,role",
            "alice,alice@example.com,USER",
            "bob,bob@example.com,USER",
            "charlie,charlie@example.com,USER",
        ]

    def test_table_is_boxed_and_aligned(self) -> None:
        lines = render_table()
        assert lines[0].startswith("┌") and lines[-1].startswith("└")
        assert len({len(line) for line in lines}) == 1
        assert "│ Username │" in lines[1]
        assert sum("@example.com" in line for line in lines) == 3


# ---------------------------------------------------------------------------
# user create
# ---------------------------------------------------------------------------

class TestUserCreate:
    def test_without_email(self, run_cli: RunCli) -> None:
        code, out = run_cli("user", "create", "dana")
        assert code == exit_codes.SUCCESS
        assert out.splitlines() == [
            "Creating user: dana",
            "  Role: USER",
            "✅ User created successfully!",
        ]

    def test_with_email_and_role(self, run_cli: RunCli) -> None:
        _, out = run_cli("user", "create", "dana", "-e", "dana@corp.io", "--role", "ADMIN")
        assert "  Email: dana@corp.io" in out.splitlines()
        assert "  Role: ADMIN" in out.splitlines()

    def test_username_required(self) -> None:
        with pytest.raises(UsageError, match="<username>"):
            main(["user", "create"])


# ---------------------------------------------------------------------------
# user list
# ---------------------------------------------------------------------------

class TestUserList:
    def test_default_is_table(self, run_cli: RunCli) -> None:
        code, out = run_cli("user", "list")
        assert code == exit_codes.SUCCESS
        assert out.startswith("Listing users (format: TABLE):")
        for user in SAMPLE_USERS:
            assert user.email in out

    def test_table_without_rich(
        self, run_cli: RunCli, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setitem(sys.modules, "rich", None)
        monkeypatch.setitem(sys.modules, "rich.console", None)
        monkeypatch.setitem(sys.modules, "rich.table", None)
        _, out = run_cli("user", "list")
        assert _body(out).splitlines() == render_table()

    def test_json_is_valid(self, run_cli: RunCli) -> None:
        _, out = run_cli("user", "list", "-f", "json")
        data = json.loads(_body(out))
        assert isinstance(data, list)
        assert len(data) == 3
        assert all(set(item) == {"username", "email", "role"} for item in data)

    def test_csv(self, run_cli: RunCli) -> None:
        _, out = run_cli("user", "list", "--format", "CSV")
        assert _body(out).splitlines() == render_csv()

    def test_invalid_format(self) -> None:
        with pytest.raises(UsageError, match="TABLE, JSON, CSV"):
            main(["user", "list", "-f", "xml"])

    def test_group_alone_is_usage_error(self) -> None:
        with pytest.raises(UsageError, match="create, list"):
            main(["user"])

    def test_group_alone_hint_describes_group(self) -> None:
        with pytest.raises(UsageError) as exc_info:
            main(["user"])
        assert exc_info.value.hint is not None
        assert "User management commands" in exc_info.value.hint
        assert "myapp user --help" in exc_info.value.hint
