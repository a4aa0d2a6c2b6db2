"""Unit tests for cmdlang.serializer — ArgumentSerializer and record_to_dict."""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import date

import pytest
import yaml

from cmdlang.demo import SceneQuery, Sort
from cmdlang.lexer import tokenize
from cmdlang.serializer import ArgumentSerializer, record_to_dict


@pytest.fixture()
def serializer() -> ArgumentSerializer:
    return ArgumentSerializer()


@dataclass
class Dated:
    _secret: str = "hidden"
    when: date | None = None
    count: int = 0
    flags: list[str] = field(default_factory=list)


LINE = 'open "my scene" skip=true café=crème'


# ---------------------------------------------------------------------------
# ArgumentSerializer
# ---------------------------------------------------------------------------


class TestArgumentSerializer:
    def test_to_dict_structure(self, serializer: ArgumentSerializer) -> None:
        data = serializer.to_dict(tokenize("open skip=true"))
        assert data == {
            "arguments": [
                {"raw": "open", "name": "", "value": "open", "start": 0},
                {"raw": "skip=true", "name": "skip", "value": "true", "start": 5},
            ]
        }

    def test_dict_round_trip_keeps_start(self, serializer: ArgumentSerializer) -> None:
        arguments = tokenize(LINE)
        restored = serializer.from_dict(serializer.to_dict(arguments))
        assert list(restored) == arguments
        assert [a.start for a in restored] == [a.start for a in arguments]

    def test_json_round_trip(self, serializer: ArgumentSerializer) -> None:
        arguments = tokenize(LINE)
        assert list(serializer.from_json(serializer.to_json(arguments))) == arguments

    def test_json_keeps_non_ascii(self, serializer: ArgumentSerializer) -> None:
        assert "crème" in serializer.to_json(tokenize(LINE))

    def test_json_is_valid(self, serializer: ArgumentSerializer) -> None:
        data = json.loads(serializer.to_json(tokenize(LINE)))
        assert len(data["arguments"]) == 4

    def test_yaml_round_trip(self, serializer: ArgumentSerializer) -> None:
        arguments = tokenize(LINE)
        assert list(serializer.from_yaml(serializer.to_yaml(arguments))) == arguments

    def test_yaml_is_valid(self, serializer: ArgumentSerializer) -> None:
        data = yaml.safe_load(serializer.to_yaml(tokenize("a b")))
        assert [item["value"] for item in data["arguments"]] == ["a", "b"]

    def test_empty_yaml(self, serializer: ArgumentSerializer) -> None:
        assert serializer.from_yaml("") == ()

    def test_from_dict_defaults(self, serializer: ArgumentSerializer) -> None:
        (argument,) = serializer.from_dict({"arguments": [{"raw": "x"}]})
        assert argument.name == ""
        assert argument.value == ""
        assert argument.start == 0


# ---------------------------------------------------------------------------
# record_to_dict
# ---------------------------------------------------------------------------


class TestRecordToDict:
    def test_private_fields_skipped(self) -> None:
        assert "_secret" not in record_to_dict(Dated())

    def test_dates_become_iso_strings(self) -> None:
        data = record_to_dict(Dated(when=date(2024, 1, 31), count=2, flags=["a"]))
        assert data == {"when": "2024-01-31", "count": 2, "flags": ["a"]}

    def test_none_kept(self) -> None:
        assert record_to_dict(Dated())["when"] is None

    def test_custom_values_use_str(self) -> None:
        data = record_to_dict(SceneQuery(sort=Sort("date", descending=True)))
        assert data["sort"] == "-date"

    def test_rejects_non_dataclass(self) -> None:
        with pytest.raises(TypeError):
            record_to_dict({"a": 1})

    def test_rejects_class(self) -> None:
        with pytest.raises(TypeError):
            record_to_dict(Dated)
