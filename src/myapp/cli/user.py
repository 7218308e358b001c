"""``myapp user`` — simulated user management.

``create`` only echoes what it would store; ``list`` prints a fixed
three-user directory in table, JSON or CSV form.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from myapp.cli import exit_codes
from myapp.cli.console import stdout
from myapp.core.models import CommandNode, OptionKind, OptionSpec, OutputFormat, ParameterSpec
from myapp.core.users import (
    DEFAULT_ROLE,
    SAMPLE_USERS,
    TABLE_COLUMNS,
    render_csv,
    render_json,
    render_table,
)


# ---------------------------------------------------------------------------
# create
# ---------------------------------------------------------------------------

def run_create(values: Mapping[str, Any]) -> int:
    lines = [f"Creating user: {values['username']}"]
    if values["email"] is not None:
        lines.append(f"  Email: {values['email']}")
    lines.append(f"  Role: {values['role']}")
    lines.append("\N{WHITE HEAVY CHECK MARK} User created successfully!")
    stdout.lines(lines)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# list
# ---------------------------------------------------------------------------

def _print_rich_table() -> bool:
    """Render the directory as a Rich table; ``False`` if Rich is missing."""
    try:
        from rich import box
        from rich.table import Table
    except ModuleNotFoundError:
        return False

    table = Table(box=box.SQUARE, show_header=True, header_style="bold")
    for column in TABLE_COLUMNS:
        table.add_column(column, no_wrap=True)
    for user in SAMPLE_USERS:
        table.add_row(user.username, user.email, user.role)
    stdout.print(table)
    return True


def run_list(values: Mapping[str, Any]) -> int:
    fmt: OutputFormat = values["format"]
    stdout.print(f"Listing users (format: {fmt.name}):")

    if fmt is OutputFormat.JSON:
        stdout.lines(render_json())
    elif fmt is OutputFormat.CSV:
        stdout.lines(render_csv())
    elif not _print_rich_table():
        stdout.lines(render_table())
    return exit_codes.SUCCESS


USER = CommandNode(
    name="user",
    description="User management commands",
    children=(
        CommandNode(
            name="create",
            description="Create a new user",
            action=run_create,
            parameters=(
                ParameterSpec("username", required=True, help="Username for the new user"),
            ),
            options=(
                OptionSpec(
                    ("-e", "--email"),
                    "email",
                    kind=OptionKind.STRING,
                    help="User email address",
                ),
                OptionSpec(
                    ("-r", "--role"),
                    "role",
                    kind=OptionKind.STRING,
                    default=DEFAULT_ROLE,
                    help="User role",
                ),
            ),
        ),
        CommandNode(
            name="list",
            description="List all users",
            action=run_list,
            options=(
                OptionSpec(
                    ("-f", "--format"),
                    "format",
                    kind=OptionKind.ENUM,
                    choices=OutputFormat,
                    default=OutputFormat.TABLE,
                    help="Output format: TABLE, JSON, CSV",
                ),
            ),
        ),
    ),
)
