"""myapp — demonstration command-line application.

Nested subcommands (``greet``, ``user``, ``file``, ``system``) routed by a
static command tree and printed to the console.
"""

from myapp.version import __version__

__all__: list[str] = ["__version__"]
