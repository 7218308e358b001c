"""Allow ``python -m myapp`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m myapp`` behaves identically to the ``myapp`` console
script.
"""

from __future__ import annotations

from myapp.cli.app import cli

if __name__ == "__main__":
    cli()
