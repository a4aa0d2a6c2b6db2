"""Formal grammar of the command argument language.

The lexer is hand-written (see ``cmdlang.lexer``); these constants are
reference documentation and are printed by ``cmdlang grammar``.

Grammar notation used here:
    ``:=``      production rule
    ``|``       alternation
    ``( )``     grouping
    ``?``       optional (zero or one)
    ``*``       zero or more repetitions
    ``+``       one or more repetitions
"""
from __future__ import annotations

# ---------------------------------------------------------------------------
# Input line
# ---------------------------------------------------------------------------

GRAMMAR_LINE = """
line      := (ws* argument)* ws*
argument  := name? value
name      := token '='            ; token contains no '=' and no whitespace
value     := quoted | bare
quoted    := '"' ( '\\"' | any-char-except-quote )* '"'
           | "'" ( "\\'" | any-char-except-quote )* "'"
bare      := (any-char-except-whitespace-and-'=')+
"""

# ---------------------------------------------------------------------------
# Binding tags on destination fields
# ---------------------------------------------------------------------------

GRAMMAR_TAG = """
tag       := binding-name? (',' 'positional')?
           ; an empty binding-name defaults to the lower-cased field name
"""

FULL_GRAMMAR: str = "\n".join([
    "# Command Argument Grammar (EBNF-like notation)",
    "# =============================================",
    "",
    "# Input line",
    GRAMMAR_LINE,
    "# Binding tags",
    GRAMMAR_TAG,
])
