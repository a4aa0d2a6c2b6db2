"""Unit tests for cmdlang.binder.values — coercing argument text to field types."""
from __future__ import annotations

from datetime import date, datetime, timezone

import pytest

from cmdlang.binder.values import DATE_FORMAT, ValueParser, coerce
from cmdlang.errors import ConfigurationError, InvalidValueError, UnsupportedDestinationError


class Rating(int):
    @classmethod
    def parse_argument(cls, value: str) -> "Rating":
        if set(value) - {"*"}:
            raise ValueError("expected stars")
        return cls(len(value))


class Label(str):
    pass


class Shouting(str):
    @classmethod
    def parse_argument(cls, value: str) -> "Shouting":
        return cls(value.upper())


# ---------------------------------------------------------------------------
# Builtin targets
# ---------------------------------------------------------------------------


class TestStrings:
    def test_str_is_identity(self) -> None:
        assert coerce(str, "a b") == "a b"

    def test_empty_string(self) -> None:
        assert coerce(str, "") == ""

    def test_str_subclass(self) -> None:
        value = coerce(Label, "x")
        assert isinstance(value, Label)
        assert value == "x"


class TestIntegers:
    @pytest.mark.parametrize("text, expected", [("0", 0), ("99", 99), ("-7", -7), ("+3", 3), ("007", 7)])
    def test_valid(self, text: str, expected: int) -> None:
        assert coerce(int, text) == expected

    @pytest.mark.parametrize("text", ["", "abc", "1.5", "0x10", "1_000", " 1", "1e3"])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(InvalidValueError, match="as integer: invalid syntax"):
            coerce(int, text)

    def test_error_message(self) -> None:
        with pytest.raises(InvalidValueError) as info:
            coerce(int, "abc")
        assert str(info.value) == "invalid value: failed to parse 'abc' as integer: invalid syntax"
        assert info.value.value == "abc"
        assert info.value.kind == "integer"
        assert isinstance(info.value.__cause__, ValueError)


class TestFloats:
    def test_valid(self) -> None:
        assert coerce(float, "1.5") == 1.5
        assert coerce(float, "-2") == -2.0

    @pytest.mark.parametrize("text", ["", "one", "1_000", "1_0.5", " 1.5", "1.5 ", "1.5\n"])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(InvalidValueError, match="as float: invalid syntax"):
            coerce(float, text)

    def test_exponent_and_sign(self) -> None:
        assert coerce(float, "1e3") == 1000.0
        assert coerce(float, "+.5") == 0.5


class TestBools:
    @pytest.mark.parametrize("text", ["1", "t", "T", "TRUE", "true", "True"])
    def test_true(self, text: str) -> None:
        assert coerce(bool, text) is True

    @pytest.mark.parametrize("text", ["0", "f", "F", "FALSE", "false", "False"])
    def test_false(self, text: str) -> None:
        assert coerce(bool, text) is False

    @pytest.mark.parametrize("text", ["", "yes", "no", "tRuE", "2"])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(InvalidValueError, match="as bool: invalid syntax"):
            coerce(bool, text)


class TestDates:
    def test_date_format_constant(self) -> None:
        assert DATE_FORMAT == "%Y-%m-%d"

    def test_date(self) -> None:
        assert coerce(date, "2025-09-12") == date(2025, 9, 12)

    def test_datetime_is_midnight_utc(self) -> None:
        value = coerce(datetime, "2025-09-12")
        assert value == datetime(2025, 9, 12, tzinfo=timezone.utc)
        assert value.tzinfo is timezone.utc

    @pytest.mark.parametrize("text", ["2025-9-12", "12-09-2025", "2025-09-12T10:00", "2025/09/12", ""])
    def test_wrong_shape(self, text: str) -> None:
        with pytest.raises(InvalidValueError, match="expected format YYYY-MM-DD"):
            coerce(date, text)

    def test_impossible_date(self) -> None:
        with pytest.raises(InvalidValueError, match="as date"):
            coerce(date, "2025-02-30")


# ---------------------------------------------------------------------------
# Custom parsers
# ---------------------------------------------------------------------------


class TestValueParser:
    def test_protocol_recognises_parser(self) -> None:
        assert isinstance(Rating, ValueParser)
        assert not isinstance(Label, ValueParser)

    def test_custom_parser_used(self) -> None:
        assert coerce(Rating, "***") == 3

    def test_custom_parser_beats_str_subclass(self) -> None:
        assert coerce(Shouting, "hi") == "HI"

    def test_custom_parser_error_uses_class_name(self) -> None:
        with pytest.raises(InvalidValueError) as info:
            coerce(Rating, "**x")
        assert str(info.value) == "invalid value: failed to parse '**x' as Rating: expected stars"


# ---------------------------------------------------------------------------
# Unsupported targets
# ---------------------------------------------------------------------------


class TestUnsupported:
    @pytest.mark.parametrize("target", [dict, set, bytes, dict[str, str], object])
    def test_raises_configuration_error(self, target: object) -> None:
        with pytest.raises(UnsupportedDestinationError, match="unsupported destination kind"):
            coerce(target, "x")

    def test_is_configuration_error(self) -> None:
        with pytest.raises(ConfigurationError):
            coerce(complex, "1")

    def test_message_names_the_type(self) -> None:
        with pytest.raises(UnsupportedDestinationError) as info:
            coerce(bytes, "x")
        assert str(info.value) == "unsupported destination kind: bytes"
