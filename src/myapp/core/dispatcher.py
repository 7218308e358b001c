"""Command dispatcher — maps an argument list to exactly one action.

The static :class:`~myapp.core.models.CommandNode` tree is compiled once
into a hierarchy of :mod:`argparse` parsers.  Resolution then happens in
two steps:

1. :meth:`Dispatcher.resolve` walks the tree and binds every option and
   parameter, raising :class:`~myapp.exceptions.UsageError` on bad input.
2. :meth:`Dispatcher.invoke` runs the single selected action.

Nothing is executed until resolution has fully succeeded.
"""

from __future__ import annotations

import argparse
import enum
import logging
from collections.abc import Callable, Sequence
from types import MappingProxyType
from typing import Any, NoReturn

from myapp.core.models import (
    Arity,
    CommandNode,
    OptionKind,
    OptionSpec,
    ParameterSpec,
    ParsedInvocation,
)
from myapp.exceptions import UsageError

logger = logging.getLogger(__name__)

_PATH_DEST = "_myapp_path_{depth}"


class _UsageParser(argparse.ArgumentParser):
    """ArgumentParser that raises :class:`UsageError` instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message, usage=self.format_usage().rstrip())


# ---------------------------------------------------------------------------
# Value converters
# ---------------------------------------------------------------------------

def candidate_names(choices: type[enum.Enum]) -> str:
    """Comma-separated member names, in declaration order."""
    return ", ".join(member.name for member in choices)


def enum_converter(choices: type[enum.Enum]) -> Callable[[str], enum.Enum]:
    """Build an argparse ``type=`` callable matching member names case-insensitively."""

    def convert(value: str) -> enum.Enum:
        member = choices.__members__.get(value.upper())
        if member is None:
            raise argparse.ArgumentTypeError(
                f"invalid choice: {value!r} (choose from {candidate_names(choices)})"
            )
        return member

    convert.__name__ = choices.__name__
    return convert


def _option_kwargs(spec: OptionSpec) -> dict[str, Any]:
    kwargs: dict[str, Any] = {"dest": spec.dest, "help": spec.help}
    if spec.kind is OptionKind.BOOLEAN:
        kwargs["action"] = "store_true"
        return kwargs

    kwargs["required"] = spec.required
    kwargs["default"] = spec.default
    kwargs["metavar"] = spec.dest.upper()
    if spec.kind is OptionKind.INTEGER:
        kwargs["type"] = int
    elif spec.kind is OptionKind.ENUM:
        assert spec.choices is not None
        kwargs["type"] = enum_converter(spec.choices)
        kwargs["metavar"] = "{" + ",".join(spec.choices.__members__) + "}"
    elif spec.kind is OptionKind.LIST:
        kwargs["action"] = "append"
        kwargs["default"] = None
    return kwargs


def _parameter_kwargs(spec: ParameterSpec) -> dict[str, Any]:
    kwargs: dict[str, Any] = {"metavar": spec.metavar, "help": spec.help}
    if spec.kind is OptionKind.INTEGER:
        kwargs["type"] = int
    if spec.arity is Arity.LIST:
        kwargs["nargs"] = "*"
        kwargs["default"] = list(spec.default)
    elif not spec.required:
        kwargs["nargs"] = "?"
        kwargs["default"] = spec.default
    return kwargs


# ---------------------------------------------------------------------------
# Dispatcher
# ---------------------------------------------------------------------------

class Dispatcher:
    """Resolve and invoke commands from a static tree.

    Parameters
    ----------
    root:
        The root group.  Its name is used as the program name.
    banner:
        Called with the root help text when no command token is given.
    version:
        Shown by ``--version`` on the root when provided.
    """

    def __init__(
        self,
        root: CommandNode,
        *,
        banner: Callable[[str], int],
        version: str | None = None,
    ) -> None:
        if root.is_leaf:
            raise ValueError("the root command must be a group")
        self._root: CommandNode = root
        self._banner = banner
        self._parsers: dict[tuple[str, ...], argparse.ArgumentParser] = {}
        self._parser = self._build(root, (), parser=None, version=version)

    @property
    def root(self) -> CommandNode:
        return self._root

    # ------------------------------------------------------------------
    # Parser construction
    # ------------------------------------------------------------------

    def _build(
        self,
        node: CommandNode,
        path: tuple[str, ...],
        *,
        parser: argparse.ArgumentParser | None,
        version: str | None = None,
    ) -> argparse.ArgumentParser:
        if parser is None:
            parser = _UsageParser(
                prog=node.name,
                description=node.description,
                allow_abbrev=False,
            )
        if version is not None:
            parser.add_argument(
                "--version",
                action="version",
                version=f"%(prog)s {version}",
            )
        for option in node.options:
            parser.add_argument(*option.flags, **_option_kwargs(option))
        for param in node.parameters:
            parser.add_argument(param.name, **_parameter_kwargs(param))

        if node.children:
            subparsers = parser.add_subparsers(
                dest=_PATH_DEST.format(depth=len(path)),
                metavar="<command>",
                title="commands",
                parser_class=_UsageParser,
            )
            for child in node.children:
                child_parser = subparsers.add_parser(
                    child.name,
                    help=child.description,
                    description=child.description,
                    allow_abbrev=False,
                )
                self._build(child, path + (child.name,), parser=child_parser)

        self._parsers[path] = parser
        return parser

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def format_help(self, path: Sequence[str] = ()) -> str:
        """Return the help text of the node at *path*."""
        return self._parsers[tuple(path)].format_help()

    def resolve(self, argv: Sequence[str]) -> ParsedInvocation:
        """Walk the tree along *argv* and bind all values.

        Group-level flags are parsed by each group's parser on the way
        down.  The first non-flag token names the next child.  Once a
        leaf is reached, the remaining tokens are bound with
        :meth:`argparse.ArgumentParser.parse_intermixed_args`, so
        positional tokens fill parameters in order even when options sit
        between them.

        Raises
        ------
        UsageError
            On unknown commands or flags, missing required input, values of
            the wrong type, or when the walk stops on a group below the root.
        """
        tokens = list(argv)
        values: dict[str, Any] = {}
        node = self._root
        path: tuple[str, ...] = ()

        while node.children:
            parser = self._parsers[path]
            split = _command_index(node, tokens)
            values.update(_bound(parser.parse_args(tokens[:split])))
            tokens = tokens[split:]
            if not tokens:
                break

            token = tokens.pop(0)
            child = node.child(token)
            if child is None:
                parser.error(
                    f"argument <command>: invalid choice: {token!r} "
                    f"(choose from {', '.join(c.name for c in node.children)})"
                )
            node = child
            path += (child.name,)

        if not node.is_leaf:
            if path:
                group_parser = self._parsers[path]
                hint = f"Use '{group_parser.prog} --help' to see subcommands."
                if node.description:
                    hint = f"{node.description}. {hint}"
                raise UsageError(
                    f"missing command for {' '.join(path)!r} "
                    f"(choose from {', '.join(c.name for c in node.children)})",
                    usage=group_parser.format_usage().rstrip(),
                    hint=hint,
                )
        else:
            values.update(_bound(self._parsers[path].parse_intermixed_args(tokens)))

        for key, value in values.items():
            if isinstance(value, list):
                values[key] = tuple(value)
            elif value is None and self._is_list_option(key):
                values[key] = ()

        return ParsedInvocation(
            command=node,
            path=path,
            values=MappingProxyType(values),
        )

    def invoke(self, invocation: ParsedInvocation) -> int:
        """Run the action selected by *invocation* and return its exit code."""
        name = " ".join(invocation.path) or "<root>"
        logger.debug("resolved %s with %r", name, dict(invocation.values))
        logger.debug("invoking %s", name)
        if invocation.command.is_leaf:
            assert invocation.command.action is not None
            return invocation.command.action(invocation.values)
        return self._banner(self.format_help())

    def dispatch(self, argv: Sequence[str]) -> int:
        """Resolve *argv* and invoke the result."""
        return self.invoke(self.resolve(argv))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _is_list_option(self, dest: str) -> bool:
        stack = [self._root]
        while stack:
            node = stack.pop()
            for option in node.options:
                if option.dest == dest and option.kind is OptionKind.LIST:
                    return True
            stack.extend(node.children)
        return False


def _command_index(group: CommandNode, tokens: Sequence[str]) -> int:
    """Index of the first token that is not a flag of *group* (or a flag's value)."""
    takes_value = {
        flag
        for option in group.options
        if option.kind is not OptionKind.BOOLEAN
        for flag in option.flags
    }
    index = 0
    while index < len(tokens):
        token = tokens[index]
        if token == "-" or not token.startswith("-"):
            return index
        index += 2 if token in takes_value else 1
    return len(tokens)


def _bound(namespace: argparse.Namespace) -> dict[str, Any]:
    return {
        key: value
        for key, value in vars(namespace).items()
        if not key.startswith("_myapp_path_")
    }
