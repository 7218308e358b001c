"""CLI application entry point and command routing for myapp.

This module is the **sole error boundary** for the entire application.
It catches :class:`~myapp.exceptions.MyAppError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* The command tree is assembled here from the leaf modules and compiled
  once into a :class:`~myapp.core.dispatcher.Dispatcher`.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from myapp.cli import exit_codes
from myapp.cli.console import console, get_rich_console, stdout
from myapp.cli.file import FILE
from myapp.cli.greet import GREET
from myapp.cli.system import SYSTEM
from myapp.cli.user import USER
from myapp.core.dispatcher import Dispatcher
from myapp.core.models import CommandNode, OptionSpec
from myapp.exceptions import MyAppError, UsageError
from myapp.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Command tree
# ---------------------------------------------------------------------------

ROOT = CommandNode(
    name="myapp",
    description="A demonstration CLI application with nested subcommands",
    children=(GREET, USER, FILE, SYSTEM),
    options=(
        OptionSpec(("-v", "--verbose"), "verbose", help="Enable debug logging on stderr"),
    ),
)


def _print_banner(help_text: str) -> int:
    """Root action: shown when no command token is given."""
    stdout.print("Welcome to MyApp CLI!")
    stdout.print("Use --help to see available commands.")
    stdout.print(help_text.rstrip("\n"))
    return exit_codes.SUCCESS


def build_dispatcher() -> Dispatcher:
    return Dispatcher(ROOT, banner=_print_banner, version=__version__)


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

def _configure_logging(verbose: bool) -> None:
    """Route the ``myapp`` logger to stderr; DEBUG with ``--verbose``."""
    level = logging.DEBUG if verbose else logging.WARNING
    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler: logging.Handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    else:
        handler = RichHandler(
            console=get_rich_console(stderr=True),
            show_path=False,
            show_time=False,
        )

    package_logger = logging.getLogger("myapp")
    for existing in list(package_logger.handlers):
        package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: Sequence[str] | None = None) -> int:
    """Run the myapp CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    UsageError
        When the arguments do not resolve to a runnable command.  No
        action has run in that case.
    """
    dispatcher = build_dispatcher()
    invocation = dispatcher.resolve(sys.argv[1:] if argv is None else argv)
    _configure_logging(bool(invocation.values.get("verbose")))
    return dispatcher.invoke(invocation)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli(argv: Sequence[str] | None = None) -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main(argv)
        sys.exit(code)
    except UsageError as exc:
        console.error(str(exc), hint=exc.hint, usage=exc.usage)
        console.print("Use --help for more information.")
        sys.exit(exit_codes.USAGE_ERROR)
    except MyAppError as exc:
        console.error(str(exc), hint=exc.hint)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
