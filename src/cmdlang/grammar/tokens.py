"""Argument definitions for the command argument language.

A line of command input is lexed into a flat sequence of ``Argument``
values.  Each argument always has a value and optionally a name, which
is written ahead of the value and separated from it by
``NAME_SEPARATOR``.  Values containing whitespace or separators can be
quoted with either quote character.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final

NAME_SEPARATOR: Final[str] = "="
QUOTE_CHARS: Final[tuple[str, ...]] = ('"', "'")
ESCAPE_CHAR: Final[str] = "\\"


@dataclass(frozen=True, slots=True)
class Argument:
    """A single unit of command input.

    Parameters
    ----------
    raw:
        The exact text consumed for this argument, including quotes,
        escapes and any ``name=`` prefix.
    name:
        The argument name, or ``""`` for an unnamed (positional) argument.
    value:
        The argument value with quoting and escapes resolved.
    start:
        0-based index of the first character of ``raw`` in the input
        line.  Not part of equality.
    """

    raw: str
    name: str = ""
    value: str = ""
    start: int = field(default=0, compare=False)

    def __repr__(self) -> str:
        if self.name:
            return f"Argument({self.name}={self.value!r}, raw={self.raw!r})"
        return f"Argument({self.value!r}, raw={self.raw!r})"

    @property
    def is_name(self) -> bool:
        """Return True if this argument could be a command name.

        A name-shaped argument is unnamed, non-empty and not quoted.
        """
        return self.name == "" and self.raw != "" and self.raw[0] not in QUOTE_CHARS

    @property
    def is_quoted(self) -> bool:
        """Return True if the value was written as a quoted string."""
        text = self.raw
        if self.name:
            text = text[len(self.name) + len(NAME_SEPARATOR):]
        return text != "" and text[0] in QUOTE_CHARS
