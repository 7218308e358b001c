"""``myapp system`` — host information display.

Collects read-only host details through :mod:`myapp.infra.system_probe`
and prints up to three sections.  The info section is shown when it is
requested explicitly or when no section flag is given at all.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from myapp.cli import exit_codes
from myapp.cli.console import stdout
from myapp.core.models import CommandNode, OptionSpec
from myapp.infra.system_probe import read_memory_stats, read_properties, read_system_info

INFO_HEADER = "\N{DESKTOP COMPUTER}\N{VARIATION SELECTOR-16}  System Information:"
MEMORY_HEADER = "\N{FLOPPY DISK} Memory Usage:"
PROPERTIES_HEADER = "\N{GEAR}\N{VARIATION SELECTOR-16}  Key System Properties:"


# ---------------------------------------------------------------------------
# Section builders
# ---------------------------------------------------------------------------

def _info_lines() -> list[str]:
    info = read_system_info()
    return [
        INFO_HEADER,
        f"  OS: {info.os_name} {info.os_release}",
        f"  Python: {info.python_version}",
        f"  User: {info.user}",
    ]


def _memory_lines() -> list[str]:
    stats = read_memory_stats()
    return [
        "",
        MEMORY_HEADER,
        f"  Total: {stats.total_mb} MB",
        f"  Used:  {stats.used_mb} MB",
        f"  Free:  {stats.free_mb} MB",
    ]


def _properties_lines() -> list[str]:
    lines = ["", PROPERTIES_HEADER]
    lines.extend(f"  {key}: {value}" for key, value in read_properties())
    return lines


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_system(values: Mapping[str, Any]) -> int:
    show_info = values["info"]
    show_memory = values["memory"]
    show_properties = values["properties"]

    # Collect every section before printing anything.
    lines: list[str] = []
    if show_info or not (show_memory or show_properties):
        lines.extend(_info_lines())
    if show_memory:
        lines.extend(_memory_lines())
    if show_properties:
        lines.extend(_properties_lines())
    stdout.lines(lines)
    return exit_codes.SUCCESS


SYSTEM = CommandNode(
    name="system",
    description="System information and utilities",
    action=run_system,
    options=(
        OptionSpec(("-i", "--info"), "info", help="Show system information"),
        OptionSpec(("-m", "--memory"), "memory", help="Show memory usage"),
        OptionSpec(("-p", "--properties"), "properties", help="Show system properties"),
    ),
)
