"""Shared pytest fixtures and configuration for the myapp test suite.

Guidelines
----------
* No filesystem effects and no network access in any test.
* Host queries (memory, user, platform) are mocked or checked for
  structure only — their values depend on the machine.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator

import pytest

from myapp.cli.app import main


@pytest.fixture
def run_cli(capsys: pytest.CaptureFixture[str]) -> Callable[..., tuple[int, str]]:
    """Run :func:`main` with the given args; return ``(code, stdout)``."""

    def _run(*argv: str) -> tuple[int, str]:
        code = main(list(argv))
        return code, capsys.readouterr().out

    return _run


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Drop handlers installed by ``main`` so they never outlive a test."""
    yield
    package_logger = logging.getLogger("myapp")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
