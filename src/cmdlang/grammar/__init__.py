"""Grammar module.

Exports the ``Argument`` type, lexical constants and the formal grammar.
"""
from __future__ import annotations

from cmdlang.grammar.grammar import FULL_GRAMMAR, GRAMMAR_LINE, GRAMMAR_TAG
from cmdlang.grammar.tokens import ESCAPE_CHAR, NAME_SEPARATOR, QUOTE_CHARS, Argument

__all__ = [
    "Argument",
    "NAME_SEPARATOR",
    "QUOTE_CHARS",
    "ESCAPE_CHAR",
    "FULL_GRAMMAR",
    "GRAMMAR_LINE",
    "GRAMMAR_TAG",
]
