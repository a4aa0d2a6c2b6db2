"""Lexer module.

Exports the ``Lexer`` class and the ``parse`` and ``tokenize``
convenience functions.
"""
from __future__ import annotations

from cmdlang.errors import ArgumentSyntaxError
from cmdlang.lexer.lexer import Lexer, parse, tokenize

__all__ = ["Lexer", "parse", "tokenize", "ArgumentSyntaxError"]
