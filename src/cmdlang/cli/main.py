"""CLI entry point for cmdlang.

Invoked as::

    cmdlang [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m cmdlang.cli.main

Commands
--------
lex         Lex a line and show its arguments
bind        Bind a line into a dataclass and show the result
resolve     Resolve a line against a command table
commands    Show the commands of a command table
grammar     Print the argument grammar
version     Show version information
"""
from __future__ import annotations

import importlib
import logging
import sys
from typing import Any

import click
from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from cmdlang.errors import ArgumentSyntaxError, CommandError, ConfigurationError

console = Console()
err_console = Console(stderr=True)

DEFAULT_TABLE = "cmdlang.demo:COMMANDS"
DEFAULT_TARGET = "cmdlang.demo:SceneQuery"


def _load_object(reference: str) -> Any:
    """Import ``module:attribute`` and return the attribute."""
    module_name, sep, attribute = reference.partition(":")
    if not sep or not module_name or not attribute:
        raise click.BadParameter(f"expected MODULE:ATTRIBUTE, got {reference!r}")
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise click.BadParameter(f"cannot import {module_name!r}: {exc}") from exc
    try:
        return getattr(module, attribute)
    except AttributeError as exc:
        raise click.BadParameter(f"{module_name!r} has no attribute {attribute!r}") from exc


def _report_error(exc: CommandError, line: str) -> None:
    """Print a cmdlang error and exit with the matching status."""
    if isinstance(exc, ArgumentSyntaxError):
        err_console.print(f"[red]Syntax error:[/red] {exc}")
        err_console.print(Text(f"  {line}"))
        err_console.print(Text("  " + " " * exc.index + "^", style="red"))
        sys.exit(1)
    if isinstance(exc, ConfigurationError):
        err_console.print(f"[red]Configuration error:[/red] {exc}")
        sys.exit(2)
    err_console.print(f"[red]Error:[/red] {exc}")
    sys.exit(1)


def _record_table(record: object) -> Table:
    from cmdlang.serializer import record_to_dict

    table = Table(title=type(record).__name__, show_header=True)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    for name, value in record_to_dict(record).items():
        table.add_row(name, repr(value))
    return table


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="cmdlang")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Command argument language: lexer, binder and command resolver."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
            datefmt="%H:%M:%S",
        )


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from cmdlang import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]cmdlang[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# grammar command
# ---------------------------------------------------------------------------


@cli.command(name="grammar")
def grammar_command() -> None:
    """Print the argument grammar."""
    from cmdlang.grammar import FULL_GRAMMAR

    console.print(Text(FULL_GRAMMAR))


# ---------------------------------------------------------------------------
# lex command
# ---------------------------------------------------------------------------


@cli.command(name="lex")
@click.argument("line")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json", "yaml"], case_sensitive=False),
    default="table",
    help="Output format",
)
def lex_command(line: str, output_format: str) -> None:
    """Lex LINE and show its arguments.

    Examples:

    \b
        cmdlang lex 'scenes "big buck" sort=-date'
        cmdlang lex "open 42 skip" --format json
    """
    from cmdlang.lexer import tokenize
    from cmdlang.serializer import ArgumentSerializer

    try:
        arguments = tokenize(line)
    except ArgumentSyntaxError as exc:
        _report_error(exc, line)
        return

    serializer = ArgumentSerializer()
    if output_format == "json":
        click.echo(serializer.to_json(arguments))
        return
    if output_format == "yaml":
        click.echo(serializer.to_yaml(arguments), nl=False)
        return

    table = Table(title=f"{len(arguments)} argument(s)", show_lines=False)
    table.add_column("#", justify="right")
    table.add_column("Raw")
    table.add_column("Name", style="cyan")
    table.add_column("Value", style="green")
    for index, arg in enumerate(arguments):
        table.add_row(str(index), Text(arg.raw), Text(arg.name), Text(arg.value))
    console.print(table)


# ---------------------------------------------------------------------------
# bind command
# ---------------------------------------------------------------------------


@cli.command(name="bind")
@click.argument("line")
@click.option(
    "--target",
    "-t",
    default=DEFAULT_TARGET,
    show_default=True,
    help="Dataclass to bind into, as MODULE:CLASS",
)
def bind_command(line: str, target: str) -> None:
    """Bind LINE into a new instance of a dataclass and show its fields."""
    from cmdlang.binder import bind_new
    from cmdlang.lexer import parse

    cls = _load_object(target)
    if not isinstance(cls, type):
        raise click.BadParameter(f"{target!r} is not a class", param_hint="--target")

    try:
        record = bind_new(parse(line), cls)
    except CommandError as exc:
        _report_error(exc, line)
        return
    console.print(_record_table(record))


# ---------------------------------------------------------------------------
# resolve command
# ---------------------------------------------------------------------------


@cli.command(name="resolve")
@click.argument("line")
@click.option(
    "--table",
    "table_ref",
    default=DEFAULT_TABLE,
    show_default=True,
    help="Command table to resolve against, as MODULE:ATTRIBUTE",
)
def resolve_command(line: str, table_ref: str) -> None:
    """Resolve LINE against a command table and show the result."""
    import dataclasses

    from cmdlang.resolver import CommandTable, resolve

    table = _load_object(table_ref)
    if not isinstance(table, CommandTable):
        raise click.BadParameter(f"{table_ref!r} is not a CommandTable", param_hint="--table")

    try:
        result = resolve(table, line)
    except CommandError as exc:
        _report_error(exc, line)
        return

    if dataclasses.is_dataclass(result) and not isinstance(result, type):
        console.print(_record_table(result))
    else:
        console.print(repr(result))


# ---------------------------------------------------------------------------
# commands command
# ---------------------------------------------------------------------------


@cli.command(name="commands")
@click.option(
    "--table",
    "table_ref",
    default=DEFAULT_TABLE,
    show_default=True,
    help="Command table to show, as MODULE:ATTRIBUTE",
)
def commands_command(table_ref: str) -> None:
    """Show every command of a command table as a tree."""
    from cmdlang.resolver import CommandTable

    table = _load_object(table_ref)
    if not isinstance(table, CommandTable):
        raise click.BadParameter(f"{table_ref!r} is not a CommandTable", param_hint="--table")

    root = Tree(f"[bold]{table_ref}[/bold]")
    nodes: dict[tuple[str, ...], Tree] = {(): root}
    for path, command in table.walk():
        label = Text(path[-1], style="bold" if command.is_leaf else "dim")
        if command.description:
            label.append(f"  {command.description}", style="italic")
        nodes[path] = nodes[path[:-1]].add(label)
    console.print(root)


if __name__ == "__main__":
    cli()
