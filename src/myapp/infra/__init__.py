"""Infrastructure layer — host integration.

Wraps every query against the operating system and interpreter used by
the ``system`` command.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from myapp.infra.system_probe import (
    MemoryStats,
    SystemInfo,
    read_memory_stats,
    read_properties,
    read_system_info,
)

__all__: list[str] = [
    "MemoryStats",
    "SystemInfo",
    "read_memory_stats",
    "read_properties",
    "read_system_info",
]
