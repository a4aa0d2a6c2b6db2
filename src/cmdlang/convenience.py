"""Convenience API for cmdlang: one object per line of input.

Example
-------
::

    from cmdlang import CommandLine

    line = CommandLine('scenes "big buck" sort=date')
    line.arguments          # (Argument('scenes', ...), ...)
    line.resolve(table)     # -> whatever the "scenes" handler returns

"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from cmdlang.grammar.tokens import Argument
    from cmdlang.resolver.commands import CommandTable

T = TypeVar("T")


class CommandLine:
    """A single line of command input.

    The line is lexed eagerly, so a syntax error surfaces when the
    object is created.  Every operation starts from the first argument
    again, which makes it safe to bind or resolve the same line more
    than once.

    Parameters
    ----------
    text:
        The line as typed by the user.

    Raises
    ------
    cmdlang.errors.ArgumentSyntaxError
        If ``text`` is malformed.
    """

    def __init__(self, text: str) -> None:
        from cmdlang.lexer.lexer import tokenize

        self._text = text
        self._arguments: tuple[Argument, ...] = tuple(tokenize(text))

    @property
    def text(self) -> str:
        """The original line."""
        return self._text

    @property
    def arguments(self) -> tuple["Argument", ...]:
        """Every argument on the line, in order."""
        return self._arguments

    def bind(self, destination: object) -> None:
        """Bind all arguments into ``destination``."""
        from cmdlang.binder.binder import bind

        bind(iter(self._arguments), destination)

    def bind_new(self, cls: type[T]) -> T:
        """Bind all arguments into a fresh ``cls()`` and return it."""
        from cmdlang.binder.binder import bind_new

        return bind_new(iter(self._arguments), cls)

    def resolve(self, table: "CommandTable") -> Any:
        """Resolve the line against ``table`` and return the handler's result."""
        return table.resolve(iter(self._arguments))

    def __len__(self) -> int:
        return len(self._arguments)

    def __repr__(self) -> str:
        return f"CommandLine({self._text!r})"
