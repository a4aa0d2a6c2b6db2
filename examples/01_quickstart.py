#!/usr/bin/env python3
"""Example: Quickstart — cmdlang

Minimal working example: lex a line, bind it into a dataclass, and
resolve it against a small command table.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install cmdlang
"""
from __future__ import annotations

from dataclasses import dataclass, field

import cmdlang
from cmdlang.binder import binding


@dataclass
class Open:
    id: str = binding(",positional", default="")
    skip: bool = False
    tags: list[str] = field(default_factory=list)


LINE = 'open 42 skip tags=drama tags="late night"'


def main() -> None:
    print(f"cmdlang version: {cmdlang.__version__}")

    # Step 1: Lex the line into arguments
    arguments = cmdlang.tokenize(LINE)
    print(f"Lexed {len(arguments)} arguments:")
    for arg in arguments:
        print(f"  {arg!r}")

    # Step 2: Bind everything after the command name into a record
    record = Open()
    cmdlang.bind(arguments[1:], record)
    print(f"\nBound record: {record}")

    # Step 3: Let a command table choose the record type
    table = cmdlang.CommandTable({"open": cmdlang.bind_command(Open)})
    print(f"Resolved: {cmdlang.resolve(table, LINE)}")

    # Step 4: Errors carry the command they occurred under
    try:
        cmdlang.resolve(table, "open 42 43")
    except cmdlang.InputError as exc:
        print(f"Input error: {exc}")


if __name__ == "__main__":
    main()
