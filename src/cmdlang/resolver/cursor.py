"""One-item lookahead over an argument iterator."""
from __future__ import annotations

from collections.abc import Iterable, Iterator

from cmdlang.grammar.tokens import Argument

_EMPTY = object()


class PeekableIterator:
    """Wrap an argument iterator so the next item can be inspected first.

    ``peek()`` pulls one argument from the source and buffers it.  The
    buffered argument is handed out by the next ``next()`` call, or
    dropped by ``commit()`` once the caller has used it.

    Parameters
    ----------
    source:
        The iterable to wrap.  Only one item is ever pulled ahead.
    """

    __slots__ = ("_source", "_buffered")

    def __init__(self, source: Iterable[Argument]) -> None:
        self._source: Iterator[Argument] = iter(source)
        self._buffered: object = _EMPTY

    def __iter__(self) -> "PeekableIterator":
        return self

    def __next__(self) -> Argument:
        if self._buffered is not _EMPTY:
            argument = self._buffered
            self._buffered = _EMPTY
            if argument is None:
                raise StopIteration
            return argument  # type: ignore[return-value]
        return next(self._source)

    def peek(self) -> Argument | None:
        """Return the next argument without consuming it, or None at the end."""
        if self._buffered is _EMPTY:
            self._buffered = next(self._source, None)
        return self._buffered  # type: ignore[return-value]

    def commit(self) -> None:
        """Consume the argument returned by the last ``peek()``."""
        self._buffered = _EMPTY
