#!/usr/bin/env python3
"""Example: Command tree with fall-back search

Reads lines from the demo media-library table.  A line whose first word
is not a command is treated as a scene search, using the argument kept
on ``UnmatchedCommandError``.

Usage:
    python examples/02_command_tree.py

Requirements:
    pip install cmdlang
"""
from __future__ import annotations

from cmdlang import CommandLine
from cmdlang.demo import COMMANDS, SceneQuery
from cmdlang.errors import CommandError, UnmatchedCommandError

LINES = [
    'scenes "big buck" sort=-date organised tags=a tags=b',
    "scenes open 12 13",
    "scenes delete 42 force",
    "galleries before=2024-01-01 page=2",
    "bunny sort=-date",
    "scenes page=many",
    "quit",
]


def run(text: str) -> object:
    line = CommandLine(text)
    try:
        return line.resolve(COMMANDS)
    except UnmatchedCommandError:
        return line.bind_new(SceneQuery)


def main() -> None:
    for path, command in COMMANDS.walk():
        print(f"{' '.join(path):<18} {command.description}")
    print()

    for text in LINES:
        try:
            result = run(text)
        except CommandError as exc:
            print(f"{text!r:<56} -> error: {exc}")
            continue
        print(f"{text!r:<56} -> {result}")


if __name__ == "__main__":
    main()
