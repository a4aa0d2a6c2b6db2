"""cmdlang — a small command argument language: lexer, binder, command resolver.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    from dataclasses import dataclass, field

    import cmdlang
    from cmdlang.binder import binding

    @dataclass
    class Open:
        id: str = binding(",positional", default="")
        skip: bool = False
        tags: list[str] = field(default_factory=list)

    # Lex a line into arguments
    arguments = cmdlang.tokenize('open 42 skip tags=a tags="b c"')

    # Bind the arguments after the command name into a record
    msg = Open()
    cmdlang.bind(cmdlang.parse('42 skip tags=a'), msg)

    # Or let a command table pick the record type
    table = cmdlang.CommandTable({"open": cmdlang.bind_command(Open)})
    msg = cmdlang.resolve(table, "open 42 skip")

    cmdlang.__version__
    '0.1.0'
"""
from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from cmdlang.convenience import CommandLine
from cmdlang.errors import (
    ArgumentSyntaxError,
    CommandError,
    ConfigurationError,
    InputError,
)
from cmdlang.grammar.tokens import Argument
from cmdlang.resolver.commands import Command, CommandTable, bind_command, static_command

__version__: str = "0.1.0"


def parse(line: str) -> Iterator[Argument]:
    """Return a lazy iterator over the arguments of ``line``.

    Raises
    ------
    cmdlang.errors.ArgumentSyntaxError
        While iterating, if the line is malformed.
    """
    from cmdlang.lexer.lexer import parse as _parse

    return _parse(line)


def tokenize(line: str) -> list[Argument]:
    """Lex ``line`` completely and return its arguments."""
    from cmdlang.lexer.lexer import tokenize as _tokenize

    return _tokenize(line)


def bind(arguments: Iterable[Argument], destination: object) -> None:
    """Bind ``arguments`` into the dataclass instance ``destination``.

    Raises
    ------
    cmdlang.errors.InputError
        If an argument matches no field or has an invalid value.
    cmdlang.errors.ConfigurationError
        If ``destination`` or one of its fields cannot be bound.
    """
    from cmdlang.binder.binder import bind as _bind

    _bind(arguments, destination)


def resolve(table: CommandTable, line: str) -> Any:
    """Lex ``line`` and resolve it against ``table``.

    Returns
    -------
    Any
        The result of the selected command's handler.
    """
    from cmdlang.resolver.commands import resolve as _resolve

    return _resolve(table, line)


__all__ = [
    "__version__",
    "parse",
    "tokenize",
    "bind",
    "resolve",
    "Argument",
    "Command",
    "CommandTable",
    "CommandLine",
    "bind_command",
    "static_command",
    "CommandError",
    "ArgumentSyntaxError",
    "InputError",
    "ConfigurationError",
]
