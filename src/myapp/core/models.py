"""Domain models for the myapp command tree.

All models are **frozen** dataclasses — immutable descriptors built once
at startup and never mutated.  Construction validates the structural
invariants so that a malformed tree fails at import time rather than
during a user's invocation.
"""

from __future__ import annotations

import enum
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any


Handler = Callable[[Mapping[str, Any]], int]
"""Leaf action: receives the bound values and returns an exit code."""


# ---------------------------------------------------------------------------
# Value kinds
# ---------------------------------------------------------------------------

class OptionKind(enum.Enum):
    """Value type accepted by an option or positional parameter."""

    BOOLEAN = "boolean"
    INTEGER = "integer"
    STRING = "string"
    ENUM = "enum"
    LIST = "list"


class Arity(enum.Enum):
    """How many tokens a positional parameter consumes."""

    SINGLE = "single"
    LIST = "list"


# ---------------------------------------------------------------------------
# Closed choice sets
# ---------------------------------------------------------------------------

class GreetingStyle(enum.Enum):
    FORMAL = "formal"
    CASUAL = "casual"
    FRIENDLY = "friendly"
    EXCITED = "excited"


class OutputFormat(enum.Enum):
    TABLE = "table"
    JSON = "json"
    CSV = "csv"


class FileOperation(enum.Enum):
    COPY = "copy"
    MOVE = "move"
    TRANSFORM = "transform"
    COMPRESS = "compress"
    DECOMPRESS = "decompress"
    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


# ---------------------------------------------------------------------------
# Option / parameter descriptors
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class OptionSpec:
    """A named flag such as ``-c/--count``."""

    flags: tuple[str, ...]
    """Short and/or long forms, e.g. ``("-c", "--count")``."""

    dest: str
    """Key under which the bound value appears in the value mapping."""

    kind: OptionKind = OptionKind.BOOLEAN
    default: Any = None
    required: bool = False
    choices: type[enum.Enum] | None = None
    """Enum class listing the accepted names for :attr:`OptionKind.ENUM`."""

    help: str = ""

    def __post_init__(self) -> None:
        if not self.flags or not all(flag.startswith("-") for flag in self.flags):
            raise ValueError(f"option {self.dest!r} needs flags starting with '-'")
        if self.required and self.default is not None:
            raise ValueError(f"required option {self.dest!r} cannot declare a default")
        if self.kind is OptionKind.BOOLEAN:
            if self.required:
                raise ValueError(f"boolean option {self.dest!r} cannot be required")
            if self.default is None:
                object.__setattr__(self, "default", False)
            elif self.default is not False:
                raise ValueError(f"boolean option {self.dest!r} must default to False")
        if self.kind is OptionKind.ENUM and self.choices is None:
            raise ValueError(f"enum option {self.dest!r} needs a choices enum")

    @property
    def long_name(self) -> str:
        """The ``--long`` form when present, else the first flag."""
        return next((f for f in self.flags if f.startswith("--")), self.flags[0])


@dataclass(frozen=True, slots=True)
class ParameterSpec:
    """A positional argument filled in declaration order."""

    name: str
    kind: OptionKind = OptionKind.STRING
    default: Any = None
    arity: Arity = Arity.SINGLE
    required: bool = False
    help: str = ""

    def __post_init__(self) -> None:
        if self.required and self.default is not None:
            raise ValueError(f"required parameter {self.name!r} cannot declare a default")
        if self.arity is Arity.LIST and self.default is None:
            object.__setattr__(self, "default", ())

    @property
    def metavar(self) -> str:
        return f"<{self.name}>"


# ---------------------------------------------------------------------------
# Command tree
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CommandNode:
    """One node of the command tree: either a group or a leaf.

    A group routes to :attr:`children` and has no action.  A leaf has an
    :attr:`action` and no children.  Groups may declare options (the root
    uses this for ``--verbose``) but never positional parameters.
    """

    name: str
    description: str = ""
    children: tuple[CommandNode, ...] = ()
    action: Handler | None = None
    options: tuple[OptionSpec, ...] = ()
    parameters: tuple[ParameterSpec, ...] = ()

    def __post_init__(self) -> None:
        if self.children and self.action is not None:
            raise ValueError(f"command {self.name!r} cannot have both children and an action")
        if not self.children and self.action is None:
            raise ValueError(f"command {self.name!r} needs either children or an action")
        if self.children and self.parameters:
            raise ValueError(f"group {self.name!r} cannot declare positional parameters")

        names = [child.name for child in self.children]
        if len(names) != len(set(names)):
            raise ValueError(f"group {self.name!r} has duplicate child names")

        list_params = [p for p in self.parameters if p.arity is Arity.LIST]
        if list_params and self.parameters[-1].arity is not Arity.LIST:
            raise ValueError(f"list parameter of {self.name!r} must be declared last")
        if len(list_params) > 1:
            raise ValueError(f"command {self.name!r} has more than one list parameter")

    @property
    def is_leaf(self) -> bool:
        return self.action is not None

    def child(self, name: str) -> CommandNode | None:
        """Return the child named exactly *name*, or ``None``."""
        return next((c for c in self.children if c.name == name), None)


@dataclass(frozen=True, slots=True)
class ParsedInvocation:
    """Result of resolving one argument list against the tree.

    Created once per run and discarded after the action executes.
    """

    command: CommandNode
    path: tuple[str, ...]
    """Command names walked below the root, e.g. ``("file", "backup")``."""

    values: Mapping[str, Any] = field(default_factory=dict)
