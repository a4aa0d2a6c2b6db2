"""Value coercion from argument text to field types.

Supported targets:

- any class providing a ``parse_argument(value)`` classmethod
  (``ValueParser``), which takes precedence over everything below
- ``str`` and subclasses of ``str``
- ``int`` (base 10 only), ``float`` (no digit separators or padding)
- ``bool`` (``1 t T TRUE true True`` / ``0 f F FALSE false False``)
- ``datetime.date`` and ``datetime.datetime``, ``YYYY-MM-DD`` only; a
  ``datetime`` is midnight UTC

Anything else raises ``UnsupportedDestinationError``.
"""
from __future__ import annotations

import re
import typing
from collections.abc import Callable
from datetime import date, datetime, timezone
from typing import Any, Final, Protocol, runtime_checkable

from cmdlang.errors import InvalidValueError, UnsupportedDestinationError

DATE_FORMAT: Final[str] = "%Y-%m-%d"

_INT_PATTERN: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")
_DATE_PATTERN: Final[re.Pattern[str]] = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

_BOOL_VALUES: Final[dict[str, bool]] = {
    "1": True,
    "t": True,
    "T": True,
    "TRUE": True,
    "true": True,
    "True": True,
    "0": False,
    "f": False,
    "F": False,
    "FALSE": False,
    "false": False,
    "False": False,
}


@runtime_checkable
class ValueParser(Protocol):
    """A type that knows how to build itself from argument text.

    Example
    -------
    ::

        class Rating(int):
            @classmethod
            def parse_argument(cls, value: str) -> "Rating":
                return cls(value.count("*"))

    Raise ``ValueError`` for text that cannot be parsed; the binder
    reports it as an invalid value.
    """

    @classmethod
    def parse_argument(cls, value: str) -> Any: ...


def _parse_int(value: str) -> int:
    if not _INT_PATTERN.fullmatch(value):
        raise ValueError("invalid syntax")
    return int(value)


def _parse_float(value: str) -> float:
    if "_" in value or value != value.strip():
        raise ValueError("invalid syntax")
    try:
        return float(value)
    except ValueError:
        raise ValueError("invalid syntax") from None


def _parse_bool(value: str) -> bool:
    try:
        return _BOOL_VALUES[value]
    except KeyError:
        raise ValueError("invalid syntax") from None


def _parse_date(value: str) -> date:
    if not _DATE_PATTERN.fullmatch(value):
        raise ValueError("expected format YYYY-MM-DD")
    return datetime.strptime(value, DATE_FORMAT).date()


def _parse_datetime(value: str) -> datetime:
    parsed = _parse_date(value)
    return datetime(parsed.year, parsed.month, parsed.day, tzinfo=timezone.utc)


# datetime before date: datetime is a subclass of date.
_BUILTIN_PARSERS: Final[dict[type, tuple[str, Callable[[str], Any]]]] = {
    str: ("string", str),
    int: ("integer", _parse_int),
    float: ("float", _parse_float),
    bool: ("bool", _parse_bool),
    datetime: ("date", _parse_datetime),
    date: ("date", _parse_date),
}


def coerce(target: Any, value: str) -> Any:
    """Convert ``value`` to an instance of ``target``.

    Raises
    ------
    InvalidValueError
        If ``value`` is not valid text for ``target``.
    UnsupportedDestinationError
        If there is no known conversion to ``target``.
    """
    kind, parser = _parser_for(target)
    try:
        return parser(value)
    except ValueError as exc:
        raise InvalidValueError(value, kind, exc) from exc


def _parser_for(target: Any) -> tuple[str, Callable[[str], Any]]:
    if isinstance(target, type) and typing.get_origin(target) is None:
        if isinstance(target, ValueParser) and callable(target.parse_argument):
            return target.__name__, target.parse_argument
        if target in _BUILTIN_PARSERS:
            return _BUILTIN_PARSERS[target]
        if issubclass(target, str):
            return target.__name__, target
    raise UnsupportedDestinationError(target)
