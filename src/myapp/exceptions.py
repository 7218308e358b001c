"""Custom exception hierarchy for myapp.

Every user-visible error condition inherits from :class:`MyAppError` so
that the CLI error boundary can render a clean message without leaking
internal stack traces.

Hierarchy
---------
MyAppError
├── UsageError
└── EnvironmentError
"""

from __future__ import annotations


class MyAppError(Exception):
    """Base exception for all myapp errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command line ----------------------------------------------------------

class UsageError(MyAppError):
    """Raised when command-line input is malformed or incomplete.

    Raised before any leaf action runs, so a usage error never leaves a
    command half-executed.
    """

    def __init__(
        self,
        message: str,
        *,
        usage: str | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.usage: str | None = usage
        """Usage line of the command the error was detected on."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(MyAppError):
    """Raised when a required runtime dependency is not available."""
