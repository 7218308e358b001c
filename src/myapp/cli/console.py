"""CLI console helpers with optional Rich support.

Two proxies are exposed:

* :data:`console` — status and error messages on **stderr**, Rich markup
  enabled.
* :data:`stdout` — command output on **stdout**, written verbatim (no
  markup, highlighting or emoji-code substitution, no hard wrapping).

Rich is imported lazily on every call so bootstrap paths (``--help``,
``--version``) and all commands remain functional even when Rich is not
installed.
"""

from __future__ import annotations

import sys
from typing import Any

from myapp.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = True) -> Any:
	"""Create a Rich console instance targeting stderr (or stdout)."""
	console_class = _load_rich_console_class()
	if stderr:
		return console_class(stderr=True)
	return console_class(
		markup=False,
		highlight=False,
		emoji=False,
		soft_wrap=True,
	)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def __init__(self, *, stderr: bool) -> None:
		self._stderr = stderr

	@property
	def _stream(self) -> Any:
		return sys.stderr if self._stderr else sys.stdout

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain print."""
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except EnvironmentError:
			print(*objects, file=self._stream)
			return
		rich_console.print(*objects)

	def lines(self, lines: list[str]) -> None:
		"""Print each entry of *lines* on its own line."""
		for line in lines:
			self.print(line)

	def error(
		self,
		message: str,
		*,
		hint: str | None = None,
		usage: str | None = None,
	) -> None:
		"""Render ``Error: <message>`` without interpreting *message* as markup.

		A *usage* line, when given, is printed verbatim above the message.
		"""
		try:
			from rich.text import Text
			rich_console = get_rich_console(stderr=self._stderr)
		except (ModuleNotFoundError, EnvironmentError):
			if usage:
				print(usage, file=self._stream)
			print(f"Error: {message}", file=self._stream)
			if hint:
				print(f"Hint: {hint}", file=self._stream)
			return
		if usage:
			rich_console.print(Text(usage))
		rich_console.print(Text.assemble(("Error: ", "bold red"), message))
		if hint:
			rich_console.print(Text.assemble(("Hint: ", "yellow"), hint))


console = _ConsoleProxy(stderr=True)
stdout = _ConsoleProxy(stderr=False)
