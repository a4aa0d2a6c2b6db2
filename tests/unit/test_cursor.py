"""Unit tests for cmdlang.resolver.cursor — PeekableIterator."""
from __future__ import annotations

from collections.abc import Iterator

import pytest

from cmdlang.grammar.tokens import Argument
from cmdlang.lexer import tokenize
from cmdlang.resolver.cursor import PeekableIterator


class CountingSource:
    """Iterator that records how many items were pulled from it."""

    def __init__(self, items: list[Argument]) -> None:
        self._items = iter(items)
        self.pulled = 0

    def __iter__(self) -> Iterator[Argument]:
        return self

    def __next__(self) -> Argument:
        item = next(self._items)
        self.pulled += 1
        return item


class TestPeekableIterator:
    def test_iterates_like_the_source(self) -> None:
        assert [a.value for a in PeekableIterator(tokenize("a b c"))] == ["a", "b", "c"]

    def test_peek_does_not_consume(self) -> None:
        cursor = PeekableIterator(tokenize("a b"))
        assert cursor.peek().value == "a"  # type: ignore[union-attr]
        assert next(cursor).value == "a"
        assert next(cursor).value == "b"

    def test_repeated_peek_pulls_once(self) -> None:
        source = CountingSource(tokenize("a b"))
        cursor = PeekableIterator(source)
        first = cursor.peek()
        assert cursor.peek() is first
        assert source.pulled == 1

    def test_commit_drops_peeked_item(self) -> None:
        cursor = PeekableIterator(tokenize("a b"))
        cursor.peek()
        cursor.commit()
        assert next(cursor).value == "b"

    def test_commit_without_peek_is_a_no_op(self) -> None:
        cursor = PeekableIterator(tokenize("a"))
        cursor.commit()
        assert next(cursor).value == "a"

    def test_peek_at_end_returns_none(self) -> None:
        cursor = PeekableIterator([])
        assert cursor.peek() is None
        assert cursor.peek() is None

    def test_next_after_peeked_end_stops(self) -> None:
        cursor = PeekableIterator([])
        cursor.peek()
        with pytest.raises(StopIteration):
            next(cursor)
        with pytest.raises(StopIteration):
            next(cursor)

    def test_is_its_own_iterator(self) -> None:
        cursor = PeekableIterator([])
        assert iter(cursor) is cursor

    def test_nothing_pulled_before_use(self) -> None:
        source = CountingSource(tokenize("a"))
        PeekableIterator(source)
        assert source.pulled == 0
