"""Command tables and resolution of a line to a command handler.

A ``CommandTable`` maps command names to ``Command`` nodes.  A node may
have a handler, a table of sub-commands, or both::

    table = CommandTable({
        "scenes": bind_command(SceneQuery, subcommands={
            "delete": bind_command(DeleteScene),
        }),
        "quit": static_command(Quit()),
    })

    table.resolve(parse("scenes delete 42"))   # -> DeleteScene(id="42")
    table.resolve(parse("scenes sort=date"))   # -> SceneQuery(sort="date")

Resolution takes the first argument as the command name, then descends
into sub-commands for as long as the following arguments keep naming
one.  The first argument that does not name a sub-command is left for
the handler.  There is no backtracking.

Tables are immutable once built and can be shared between threads; the
argument iterators passed to ``resolve`` cannot.
"""
from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from cmdlang.binder.binder import bind_new, check_constructible
from cmdlang.errors import (
    CommandError,
    ConfigurationError,
    ExpectedCommandError,
    NoInputError,
    NoResolverError,
    UnmatchedCommandError,
)
from cmdlang.grammar.tokens import NAME_SEPARATOR, QUOTE_CHARS, Argument
from cmdlang.lexer.lexer import Lexer
from cmdlang.resolver.cursor import PeekableIterator

logger = logging.getLogger(__name__)

Handler = Callable[[Iterator[Argument]], Any]


@dataclass(frozen=True, eq=False)
class Command:
    """A node in a command tree.

    Parameters
    ----------
    handler:
        Called with the remaining arguments when resolution ends on this
        node.  Its return value is the result of the resolution.
    subcommands:
        Child commands, keyed by name.  Converted to a ``CommandTable``.
    description:
        Short help text, shown by ``cmdlang commands``.
    """

    handler: Handler | None = None
    subcommands: Mapping[str, "Command"] = field(default_factory=dict)
    description: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.subcommands, CommandTable):
            object.__setattr__(self, "subcommands", CommandTable(self.subcommands))

    @property
    def is_leaf(self) -> bool:
        """True if resolution may end on this node."""
        return self.handler is not None


class CommandTable(Mapping[str, Command]):
    """Immutable mapping of command names to ``Command`` nodes.

    Parameters
    ----------
    commands:
        Initial name to command mapping.
    **kwargs:
        Further commands, for names that are valid identifiers.

    Raises
    ------
    ConfigurationError
        If a name could never be matched by a lexed argument, or a value
        is not a ``Command``.
    """

    __slots__ = ("_commands",)

    def __init__(self, commands: Mapping[str, Command] | None = None, /, **kwargs: Command) -> None:
        merged: dict[str, Command] = dict(commands or {})
        merged.update(kwargs)
        for name, command in merged.items():
            if not _is_command_name(name):
                raise ConfigurationError(f"{name!r} cannot be used as a command name")
            if not isinstance(command, Command):
                raise ConfigurationError(
                    f"command {name!r} must be a Command, got {type(command).__name__}"
                )
        self._commands: Mapping[str, Command] = MappingProxyType(merged)

    def __getitem__(self, name: str) -> Command:
        return self._commands[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._commands)

    def __len__(self) -> int:
        return len(self._commands)

    def __repr__(self) -> str:
        return f"CommandTable({sorted(self._commands)!r})"

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def resolve(self, arguments: Iterable[Argument]) -> Any:
        """Match the leading arguments to a command and run its handler.

        Parameters
        ----------
        arguments:
            The arguments of one line.  Those not used to select the
            command are passed on to the handler.

        Returns
        -------
        Any
            Whatever the selected handler returns.

        Raises
        ------
        NoInputError
            If there are no arguments.
        ExpectedCommandError
            If the first argument is named or quoted.
        UnmatchedCommandError
            If the first argument names no command in this table.
        NoResolverError
            If the selected command has no handler.
        CommandError
            Anything the handler raises, with ``command`` set to the
            resolved command path.
        """
        cursor = PeekableIterator(arguments)

        first = next(cursor, None)
        if first is None:
            raise NoInputError()
        if not first.is_name:
            raise ExpectedCommandError(first)
        node = self._commands.get(first.raw)
        if node is None:
            raise UnmatchedCommandError(first)

        path = [first.raw]
        while node.subcommands:
            ahead = cursor.peek()
            if ahead is None or not ahead.is_name:
                break
            child = node.subcommands.get(ahead.raw)
            if child is None:
                break
            cursor.commit()
            node = child
            path.append(ahead.raw)

        name = " ".join(path)
        if node.handler is None:
            raise NoResolverError()

        logger.debug("Resolved command %r", name)
        try:
            return node.handler(cursor)
        except CommandError as exc:
            if exc.command is None:
                exc.command = name
            raise

    def walk(self) -> Iterator[tuple[tuple[str, ...], Command]]:
        """Yield ``(path, command)`` for every node, depth first, by name."""
        for name in sorted(self._commands):
            command = self._commands[name]
            yield (name,), command
            for path, child in command.subcommands.walk():  # type: ignore[attr-defined]
                yield (name, *path), child


def _is_command_name(name: object) -> bool:
    return (
        isinstance(name, str)
        and name != ""
        and name[0] not in QUOTE_CHARS
        and NAME_SEPARATOR not in name
        and not any(ch.isspace() for ch in name)
    )


# ---------------------------------------------------------------------------
# Command builders
# ---------------------------------------------------------------------------


def bind_command(
    cls: type,
    *,
    subcommands: Mapping[str, Command] | None = None,
    description: str = "",
) -> Command:
    """Return a command that binds its arguments into a new ``cls``.

    Raises
    ------
    BindDestinationError
        If ``cls`` is not a mutable dataclass whose fields all have
        defaults.  Checked here, when the table is built.
    """
    check_constructible(cls)

    def handler(arguments: Iterator[Argument]) -> Any:
        return bind_new(arguments, cls)

    handler.__qualname__ = f"bind_command({cls.__qualname__})"
    return Command(
        handler=handler,
        subcommands=subcommands or {},
        description=description,
    )


def static_command(
    value: Any,
    *,
    subcommands: Mapping[str, Command] | None = None,
    description: str = "",
) -> Command:
    """Return a command that ignores its arguments and returns ``value``."""

    def handler(arguments: Iterator[Argument]) -> Any:
        return value

    return Command(handler=handler, subcommands=subcommands or {}, description=description)


def resolve(table: CommandTable, line: str) -> Any:
    """Lex ``line`` and resolve it against ``table``."""
    return table.resolve(Lexer(line))
