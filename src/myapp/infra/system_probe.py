"""Infrastructure: read-only host queries for the ``system`` command.

Rules
-----
* Queries only — nothing on the host is modified.
* No ``print()`` — callers handle user-facing output.
* psutil is imported lazily so that every other command works without it.
"""

from __future__ import annotations

import getpass
import os
import platform
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from myapp.exceptions import EnvironmentError

_MEBIBYTE = 1024 * 1024


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class SystemInfo:
    os_name: str
    os_release: str
    python_version: str
    user: str


@dataclass(frozen=True, slots=True)
class MemoryStats:
    """Host memory figures in bytes."""

    total: int
    used: int
    free: int

    @property
    def total_mb(self) -> int:
        return self.total // _MEBIBYTE

    @property
    def used_mb(self) -> int:
        return self.used // _MEBIBYTE

    @property
    def free_mb(self) -> int:
        return self.free // _MEBIBYTE


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------

def _current_user() -> str:
    """Login name, or ``"unknown"`` when the host cannot resolve one."""
    try:
        return getpass.getuser()
    except (OSError, KeyError):
        # No USER/LOGNAME and no passwd entry (e.g. bare containers).
        return "unknown"


def read_system_info() -> SystemInfo:
    """Collect OS, interpreter and user details."""
    return SystemInfo(
        os_name=platform.system() or "unknown",
        os_release=platform.release(),
        python_version=platform.python_version(),
        user=_current_user(),
    )


def _import_psutil() -> Any:
    try:
        import psutil
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "psutil is not installed. Install with: pip install psutil",
        ) from exc
    return psutil


def read_memory_stats() -> MemoryStats:
    """Return live host memory usage via psutil."""
    mem = _import_psutil().virtual_memory()
    return MemoryStats(
        total=int(mem.total),
        used=int(mem.total - mem.available),
        free=int(mem.available),
    )


PROPERTY_KEYS: tuple[str, ...] = (
    "python.home",
    "user.home",
    "user.dir",
    "file.separator",
)


def _home_directory() -> str:
    """Home directory, or ``"unknown"`` when the host cannot resolve one."""
    try:
        return str(Path.home())
    except (RuntimeError, KeyError):
        # No HOME and no passwd entry, same as in _current_user.
        return "unknown"


def read_properties() -> list[tuple[str, str]]:
    """Return ``(key, value)`` pairs for :data:`PROPERTY_KEYS`, in order."""
    values = {
        "python.home": sys.prefix,
        "user.home": _home_directory(),
        "user.dir": os.getcwd(),
        "file.separator": os.sep,
    }
    return [(key, values[key]) for key in PROPERTY_KEYS]
