"""Fixed sample user directory and its text renderings.

The listing is hard-coded: there is no user store.  Renderers are pure
and return lines; the CLI layer decides how to print them.
"""

from __future__ import annotations

import csv
import io
import json
from dataclasses import asdict, dataclass

DEFAULT_ROLE = "USER"


@dataclass(frozen=True, slots=True)
class UserRecord:
    username: str
    email: str
    role: str = DEFAULT_ROLE


SAMPLE_USERS: tuple[UserRecord, ...] = tuple(
    UserRecord(username=name, email=f"{name}@example.com")
    for name in ("alice", "bob", "charlie")
)

TABLE_COLUMNS: tuple[str, ...] = ("Username", "Email", "Role")


def render_json(users: tuple[UserRecord, ...] = SAMPLE_USERS) -> list[str]:
    """Render *users* as an indented JSON array."""
    return json.dumps([asdict(u) for u in users], indent=2).splitlines()


def render_csv(users: tuple[UserRecord, ...] = SAMPLE_USERS) -> list[str]:
    """Render *users* as CSV with a ``username,email,role`` header."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(("username", "email", "role"))
    for user in users:
        writer.writerow((user.username, user.email, user.role))
    return buffer.getvalue().splitlines()


def render_table(users: tuple[UserRecord, ...] = SAMPLE_USERS) -> list[str]:
    """Render *users* as a box-drawing table without Rich."""
    rows = [(u.username, u.email, u.role) for u in users]
    widths = [
        max(len(TABLE_COLUMNS[i]), *(len(row[i]) for row in rows))
        for i in range(len(TABLE_COLUMNS))
    ]

    def rule(left: str, mid: str, right: str) -> str:
        return left + mid.join("─" * (w + 2) for w in widths) + right

    def line(cells: tuple[str, ...]) -> str:
        return "│" + "│".join(f" {c:<{w}} " for c, w in zip(cells, widths)) + "│"

    lines = [rule("┌", "┬", "┐"), line(TABLE_COLUMNS), rule("├", "┼", "┤")]
    lines.extend(line(row) for row in rows)
    lines.append(rule("└", "┴", "┘"))
    return lines
