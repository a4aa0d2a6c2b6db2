"""A sample command table for a media-library browser.

Used as the default target of ``cmdlang bind`` and ``cmdlang resolve``,
and as a worked example of declaring commands::

    scenes query="big buck" sort=-date organised tags=a tags=b
    scenes open 42
    scenes delete 42 force
    galleries before=2024-01-01 page=2
    quit
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from cmdlang.binder.fields import binding
from cmdlang.resolver.commands import CommandTable, bind_command, static_command


@dataclass(frozen=True)
class Sort:
    """A sort key with direction; ``-date`` sorts by date descending."""

    key: str = "date"
    descending: bool = False

    @classmethod
    def parse_argument(cls, value: str) -> "Sort":
        descending = value.startswith("-")
        key = value.lstrip("-")
        if not key:
            raise ValueError("empty sort key")
        return cls(key=key, descending=descending)

    def __str__(self) -> str:
        return ("-" if self.descending else "") + self.key


@dataclass
class SceneQuery:
    """List scenes matching a filter."""

    query: str = binding(",positional", default="")
    sort: Sort = field(default_factory=Sort)
    organised: bool | None = None
    tags: list[str] = field(default_factory=list)
    page: int = 1


@dataclass
class GalleryQuery:
    """List galleries matching a filter."""

    query: str = binding(",positional", default="")
    sort: Sort = field(default_factory=Sort)
    before: date | None = None
    page: int = 1


@dataclass
class OpenItem:
    """Open one item in the external viewer."""

    ids: list[str] = binding("id,positional", default_factory=list)


@dataclass
class DeleteScene:
    """Delete a scene."""

    id: str = binding(",positional", default="")
    force: bool = False


@dataclass(frozen=True)
class Quit:
    """Leave the application."""


COMMANDS = CommandTable({
    "scenes": bind_command(
        SceneQuery,
        description="List scenes matching a filter",
        subcommands={
            "open": bind_command(OpenItem, description="Open scenes by id"),
            "delete": bind_command(DeleteScene, description="Delete a scene"),
        },
    ),
    "galleries": bind_command(
        GalleryQuery,
        description="List galleries matching a filter",
        subcommands={
            "open": bind_command(OpenItem, description="Open galleries by id"),
        },
    ),
    "quit": static_command(Quit(), description="Leave the application"),
})
