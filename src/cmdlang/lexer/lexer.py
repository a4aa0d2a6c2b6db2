"""Lexer: converts one line of command input into a stream of arguments.

The lexer is a pull-based character scanner.  Each call to ``next()``
scans exactly one ``Argument`` from the current position, so callers can
stop consuming at any point and hand the remaining input to someone
else.  End of input is signalled with ``StopIteration``, as for any
Python iterator, and is signalled again on every later call.

Arguments are separated by runs of whitespace.  An argument is either a
bare word, a quoted string, or either of those prefixed with a name and
``=``::

    open scene "my favourite" sort=date order='desc'

Quoted strings use ``"`` or ``'``.  Inside a quoted string a backslash
directly before the quote character stands for a literal quote; every
other character, backslashes included, is taken as written.

Syntax errors report the UTF-8 byte offset at which scanning stopped.
Once a syntax error has been raised the lexer is spent: every further
call raises the same error again.
"""
from __future__ import annotations

import unicodedata

from cmdlang.errors import ArgumentSyntaxError
from cmdlang.grammar.tokens import ESCAPE_CHAR, NAME_SEPARATOR, QUOTE_CHARS, Argument


class Lexer:
    """Stateful, forward-only iterator over the arguments of one line.

    Parameters
    ----------
    source:
        A single line of command input.
    """

    __slots__ = ("_source", "_pos", "_error")

    def __init__(self, source: str) -> None:
        self._source: str = source
        self._pos: int = 0
        self._error: ArgumentSyntaxError | None = None

    # ------------------------------------------------------------------
    # Iterator protocol
    # ------------------------------------------------------------------

    def __iter__(self) -> "Lexer":
        return self

    def __next__(self) -> Argument:
        """Scan and return the next argument.

        Raises
        ------
        StopIteration
            When no arguments remain.
        ArgumentSyntaxError
            If the input at the current position is malformed.
        """
        if self._error is not None:
            raise self._error
        try:
            return self._scan_one()
        except ArgumentSyntaxError as exc:
            self._error = exc
            raise

    @property
    def position(self) -> int:
        """0-based index of the next character to be scanned."""
        return self._pos

    @property
    def source(self) -> str:
        """The line being scanned."""
        return self._source

    # ------------------------------------------------------------------
    # Internal scanner
    # ------------------------------------------------------------------

    def _scan_one(self) -> Argument:
        source = self._source
        while self._pos < len(source) and source[self._pos].isspace():
            self._pos += 1

        if self._pos >= len(source):
            raise StopIteration

        start = self._pos
        name = ""
        value, named = self._scan_value()
        if named:
            name = value
            value, named = self._scan_value()
            if named:
                raise self._syntax_error(
                    "argument contains multiple name separators = as position {}"
                )

        return Argument(raw=source[start : self._pos], name=name, value=value, start=start)

    def _scan_value(self) -> tuple[str, bool]:
        """Scan one value unit.

        Returns the unit text and whether scanning stopped on a name
        separator, in which case the separator has been consumed.
        """
        source = self._source
        if self._pos >= len(source):
            # Name separator at the very end of the line: empty value.
            return "", False

        ch = source[self._pos]
        if ch in QUOTE_CHARS:
            return _unquote(self._scan_quoted()), False

        if ch == NAME_SEPARATOR:
            raise self._syntax_error(
                "arguments may not start with the name separator = at position {}"
            )

        start = self._pos
        named = False
        while self._pos < len(source):
            ch = source[self._pos]
            if ch.isspace():
                break
            if ch == NAME_SEPARATOR:
                named = True
                break
            if _is_control(ch):
                raise self._syntax_error(f"unexpected character at pos {{}}: {ch!r}")
            self._pos += 1

        end = self._pos
        if named:
            self._pos += len(NAME_SEPARATOR)
        return source[start:end], named

    def _scan_quoted(self) -> str:
        """Consume a quoted string and return it with its quotes."""
        source = self._source
        quote = source[self._pos]
        start = self._pos
        self._pos += 1

        while self._pos < len(source):
            if source[self._pos] == quote and source[self._pos - 1] != ESCAPE_CHAR:
                break
            self._pos += 1

        if self._pos >= len(source):
            raise self._syntax_error("unterminated quote as position {}")

        self._pos += 1
        return source[start : self._pos]

    def _syntax_error(self, template: str) -> ArgumentSyntaxError:
        """Build an error whose message reports the current byte offset."""
        offset = len(self._source[: self._pos].encode("utf-8"))
        return ArgumentSyntaxError(template.format(offset), index=self._pos, offset=offset)


def _unquote(text: str) -> str:
    """Strip the quotes from a scanned string and resolve escaped quotes."""
    quote = text[0]
    buf: list[str] = []
    i = 1
    while i < len(text) - 1:
        if text[i] == ESCAPE_CHAR and text[i + 1] == quote:
            buf.append(quote)
            i += 2
            continue
        buf.append(text[i])
        i += 1
    return "".join(buf)


def _is_control(ch: str) -> bool:
    return unicodedata.category(ch) == "Cc"


# ---------------------------------------------------------------------------
# Module-level convenience functions
# ---------------------------------------------------------------------------


def parse(line: str) -> Lexer:
    """Return a lazy argument iterator over ``line``.

    Example
    -------
    ::

        from cmdlang.lexer import parse
        arguments = parse('scenes "big buck" sort=date')
        command = next(arguments)
    """
    return Lexer(line)


def tokenize(line: str) -> list[Argument]:
    """Lex ``line`` completely and return every argument.

    Raises
    ------
    ArgumentSyntaxError
        If the line is malformed anywhere.
    """
    return list(Lexer(line))
