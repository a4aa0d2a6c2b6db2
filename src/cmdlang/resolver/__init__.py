"""Resolver module.

Exports command tables, command builders and the peekable cursor.
"""
from __future__ import annotations

from cmdlang.resolver.commands import (
    Command,
    CommandTable,
    Handler,
    bind_command,
    resolve,
    static_command,
)
from cmdlang.resolver.cursor import PeekableIterator

__all__ = [
    "Command",
    "CommandTable",
    "Handler",
    "PeekableIterator",
    "bind_command",
    "static_command",
    "resolve",
]
