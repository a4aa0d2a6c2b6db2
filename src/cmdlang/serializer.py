"""Serialization of lexed arguments and bound records.

Arguments round-trip through a plain dict/list structure that maps
naturally to JSON and YAML; bound destination records serialize one way,
with dates written in ISO format.

Usage
-----
::

    from cmdlang.serializer import ArgumentSerializer

    serializer = ArgumentSerializer()
    text = serializer.to_json(tokenize('open "my scene" skip=true'))
    arguments = serializer.from_json(text)
"""
from __future__ import annotations

import dataclasses
import json
from collections.abc import Iterable
from datetime import date
from typing import Any

import yaml

from cmdlang.grammar.tokens import Argument


class ArgumentSerializer:
    """Convert lexed arguments to and from plain dicts, JSON and YAML.

    The dict form is ``{"arguments": [{"raw", "name", "value", "start"}, ...]}``;
    JSON and YAML are renderings of that dict.  Deserialization returns a
    tuple of ``Argument`` values with ``start`` restored.
    """

    # ------------------------------------------------------------------
    # Dict helpers
    # ------------------------------------------------------------------

    def to_dict(self, arguments: Iterable[Argument]) -> dict[str, Any]:
        """Serialize arguments to a plain dict."""
        return {
            "arguments": [
                {
                    "raw": arg.raw,
                    "name": arg.name,
                    "value": arg.value,
                    "start": arg.start,
                }
                for arg in arguments
            ]
        }

    def from_dict(self, data: dict[str, Any]) -> tuple[Argument, ...]:
        """Deserialize arguments from a dict produced by ``to_dict``."""
        return tuple(
            Argument(
                raw=str(item["raw"]),
                name=str(item.get("name", "")),
                value=str(item.get("value", "")),
                start=int(item.get("start", 0)),
            )
            for item in data.get("arguments", [])
        )

    # ------------------------------------------------------------------
    # JSON helpers
    # ------------------------------------------------------------------

    def to_json(self, arguments: Iterable[Argument], indent: int = 2) -> str:
        """Serialize arguments to a JSON string."""
        return json.dumps(self.to_dict(arguments), indent=indent, ensure_ascii=False)

    def from_json(self, text: str) -> tuple[Argument, ...]:
        """Deserialize arguments from a JSON string."""
        return self.from_dict(json.loads(text))

    # ------------------------------------------------------------------
    # YAML helpers
    # ------------------------------------------------------------------

    def to_yaml(self, arguments: Iterable[Argument]) -> str:
        """Serialize arguments to a YAML string."""
        return yaml.dump(self.to_dict(arguments), default_flow_style=False, allow_unicode=True)

    def from_yaml(self, text: str) -> tuple[Argument, ...]:
        """Deserialize arguments from a YAML string."""
        return self.from_dict(yaml.safe_load(text) or {})


def record_to_dict(record: object) -> dict[str, Any]:
    """Render a bound dataclass as a JSON-friendly dict.

    Private (``_``-prefixed) fields are left out, dates become ISO
    strings and any other non-builtin value becomes ``str(value)``.
    """
    if isinstance(record, type) or not dataclasses.is_dataclass(record):
        raise TypeError(f"expected a dataclass instance, got {type(record).__name__}")
    return {
        f.name: _plain(getattr(record, f.name))
        for f in dataclasses.fields(record)
        if not f.name.startswith("_")
    }


def _plain(value: Any) -> Any:
    if value is None or isinstance(value, (bool, int, float)):
        return value
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return str(value)
