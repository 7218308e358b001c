"""``myapp file`` — simulated file operations.

None of these commands read or write files; they print the report a
real run would produce.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from myapp.cli import exit_codes
from myapp.cli.console import stdout
from myapp.core.files import analysis_lines, backup_lines, process_lines
from myapp.core.models import (
    Arity,
    CommandNode,
    FileOperation,
    OptionKind,
    OptionSpec,
    ParameterSpec,
)


def run_analyze(values: Mapping[str, Any]) -> int:
    stdout.lines(
        analysis_lines(
            values["file"],
            lines=values["lines"],
            words=values["words"],
            chars=values["chars"],
        )
    )
    return exit_codes.SUCCESS


def run_process(values: Mapping[str, Any]) -> int:
    stdout.lines(process_lines(values["input"], values["output"], values["operation"]))
    return exit_codes.SUCCESS


def run_backup(values: Mapping[str, Any]) -> int:
    # An empty file list is reported but is not a failure.
    stdout.lines(backup_lines(values["files"], values["destination"]))
    return exit_codes.SUCCESS


FILE = CommandNode(
    name="file",
    description="File operations",
    children=(
        CommandNode(
            name="analyze",
            description="Analyze file contents",
            action=run_analyze,
            parameters=(ParameterSpec("file", required=True, help="File to analyze"),),
            options=(
                OptionSpec(("-l", "--lines"), "lines", help="Count lines"),
                OptionSpec(("-w", "--words"), "words", help="Count words"),
                OptionSpec(("-c", "--chars"), "chars", help="Count characters"),
            ),
        ),
        CommandNode(
            name="process",
            description="Process file with various operations",
            action=run_process,
            options=(
                OptionSpec(
                    ("-i", "--input"),
                    "input",
                    kind=OptionKind.STRING,
                    required=True,
                    help="Input file",
                ),
                OptionSpec(
                    ("-o", "--output"),
                    "output",
                    kind=OptionKind.STRING,
                    help="Output file (default: stdout)",
                ),
                OptionSpec(
                    ("--operation",),
                    "operation",
                    kind=OptionKind.ENUM,
                    choices=FileOperation,
                    help="Operation to perform (default: COPY)",
                ),
            ),
        ),
        CommandNode(
            name="backup",
            description="Create backup of files",
            action=run_backup,
            parameters=(
                ParameterSpec("files", arity=Arity.LIST, help="Files to backup"),
            ),
            options=(
                OptionSpec(
                    ("-d", "--destination"),
                    "destination",
                    kind=OptionKind.STRING,
                    help="Backup destination (default: ./backup/)",
                ),
            ),
        ),
    ),
)
