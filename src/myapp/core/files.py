"""Simulated file operations.

Nothing here touches the filesystem: analysis counts are fixed and
processing/backup only produce the progress text a real run would show.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from myapp.core.models import FileOperation

DEFAULT_BACKUP_DESTINATION = "./backup/"
PROGRESS_BAR = "[" + "█" * 20 + "] 100%"


@dataclass(frozen=True, slots=True)
class AnalysisCounts:
    lines: int = 42
    words: int = 156
    characters: int = 892


SIMULATED_COUNTS = AnalysisCounts()


def analysis_lines(
    file_name: str,
    *,
    lines: bool = False,
    words: bool = False,
    chars: bool = False,
    counts: AnalysisCounts = SIMULATED_COUNTS,
) -> list[str]:
    """Report lines for ``file analyze``; no flag selected means all three."""
    if not (lines or words or chars):
        lines = words = chars = True

    out = [f"Analyzing file: {file_name}"]
    if lines:
        out.append(f"  Lines: {counts.lines}")
    if words:
        out.append(f"  Words: {counts.words}")
    if chars:
        out.append(f"  Characters: {counts.characters}")
    return out


def process_lines(
    input_file: str,
    output_file: str | None,
    operation: FileOperation | None,
) -> list[str]:
    """Report lines for ``file process``."""
    op = operation or FileOperation.COPY
    return [
        f"\N{ANTICLOCKWISE DOWNWARDS AND UPWARDS OPEN CIRCLE ARROWS} Processing file: {input_file}",
        f"   Operation: {op.name}",
        f"   Output: {output_file or 'stdout'}",
        f"   Progress: {PROGRESS_BAR}",
        "\N{WHITE HEAVY CHECK MARK} File processed successfully!",
    ]


NO_FILES_MESSAGE = "\N{CROSS MARK} No files specified for backup"


def backup_lines(files: Sequence[str], destination: str | None) -> list[str]:
    """Report lines for ``file backup``.

    An empty *files* yields only :data:`NO_FILES_MESSAGE`.
    """
    if not files:
        return [NO_FILES_MESSAGE]

    out = [
        f"\N{FLOPPY DISK} Creating backup of {len(files)} file(s)",
        f"   Destination: {destination or DEFAULT_BACKUP_DESTINATION}",
    ]
    out.extend(f"   Backing up: {f} \N{WHITE HEAVY CHECK MARK}" for f in files)
    out.append("\N{DIRECT HIT} Backup completed successfully!")
    return out
