"""Developer CLI for inspecting how lines lex, bind and resolve.

The Click application lives in ``cmdlang.cli.main``.
"""
from __future__ import annotations
