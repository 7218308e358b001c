"""Core layer — command-tree model, dispatcher, and pure output builders.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
"""

from myapp.core.dispatcher import Dispatcher
from myapp.core.models import (
    Arity,
    CommandNode,
    FileOperation,
    GreetingStyle,
    OptionKind,
    OptionSpec,
    OutputFormat,
    ParameterSpec,
    ParsedInvocation,
)

__all__: list[str] = [
    "Arity",
    "CommandNode",
    "Dispatcher",
    "FileOperation",
    "GreetingStyle",
    "OptionKind",
    "OptionSpec",
    "OutputFormat",
    "ParameterSpec",
    "ParsedInvocation",
]
