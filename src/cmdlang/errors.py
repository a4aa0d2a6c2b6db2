"""Error types for the command argument language.

Errors fall into three disjoint classes so that callers can decide how
to surface them:

``ArgumentSyntaxError``
    Raised by the lexer for malformed quoting, stray separators and
    invalid characters.  Always fatal to the current line.
``InputError``
    Raised by the binder and resolver for input the user can correct:
    unknown commands, unknown arguments, values that fail to coerce.
``ConfigurationError``
    Raised when the calling code is wrong: a destination that is not a
    dataclass, a malformed binding tag, an unsupported field type, a
    command node without a handler.  These are defects, not user input.

All of them derive from ``CommandError``.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cmdlang.grammar.tokens import Argument


class CommandError(Exception):
    """Base class for every error raised by cmdlang.

    Parameters
    ----------
    message:
        Human-readable description of the problem.

    Attributes
    ----------
    command:
        Name of the resolved command the error occurred under, if any.
        Set by the resolver when a handler fails.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
        self.command: str | None = None

    def __str__(self) -> str:
        if self.command:
            return f"{self.command}: {self.message}"
        return self.message


# ---------------------------------------------------------------------------
# Syntax errors
# ---------------------------------------------------------------------------


class ArgumentSyntaxError(CommandError):
    """Raised when the lexer cannot scan a line of input.

    Parameters
    ----------
    message:
        Complete error text, including the reported position.
    index:
        0-based code-point index in the line where scanning stopped.
    offset:
        0-based UTF-8 byte offset in the line where scanning stopped.
    """

    def __init__(self, message: str, index: int, offset: int) -> None:
        super().__init__(message)
        self.index = index
        self.offset = offset


# ---------------------------------------------------------------------------
# Input errors
# ---------------------------------------------------------------------------


class InputError(CommandError):
    """Base class for errors the user can fix by changing their input."""


class UnrecognisedArgumentError(InputError):
    """An argument matched no field of the bind destination."""

    def __init__(self, argument: "Argument") -> None:
        super().__init__(f"unrecognised argument: '{argument.raw}'")
        self.argument = argument


class InvalidValueError(InputError):
    """A value could not be coerced to the type of its destination field."""

    def __init__(self, value: str, kind: str, cause: BaseException) -> None:
        super().__init__(f"invalid value: failed to parse '{value}' as {kind}: {cause}")
        self.value = value
        self.kind = kind


class NoInputError(InputError):
    """The resolver was handed an empty line."""

    def __init__(self) -> None:
        super().__init__("no arguments returned")


class ExpectedCommandError(InputError):
    """The first argument of a line is not shaped like a command name."""

    def __init__(self, argument: "Argument") -> None:
        super().__init__("invalid input: expected command")
        self.argument = argument


class UnmatchedCommandError(InputError):
    """The first argument names no command in the root table.

    The offending argument is kept so callers can fall back to other
    behaviour, e.g. treating the whole line as a search query.
    """

    def __init__(self, argument: "Argument") -> None:
        super().__init__(f"no matched command: '{argument.raw}'")
        self.argument = argument


# ---------------------------------------------------------------------------
# Configuration errors
# ---------------------------------------------------------------------------


class ConfigurationError(CommandError):
    """Base class for errors caused by the calling code rather than the user."""


class BindDestinationError(ConfigurationError, TypeError):
    """The bind destination is not a mutable dataclass instance."""

    def __init__(self, destination: object, message: str | None = None) -> None:
        super().__init__(
            message
            or f"bind destination must be a mutable dataclass instance, got {type(destination).__name__}"
        )
        self.destination = destination


class BindingTagError(ConfigurationError, ValueError):
    """A field's binding tag is malformed or clashes with another field."""


class UnsupportedDestinationError(ConfigurationError, TypeError):
    """A field's type has no known coercion."""

    def __init__(self, target: object) -> None:
        super().__init__(f"unsupported destination kind: {_type_name(target)}")
        self.target = target


class NoResolverError(ConfigurationError):
    """Resolution ended on a command node that has no handler."""

    def __init__(self) -> None:
        super().__init__("no resolver configured")


def _type_name(target: object) -> str:
    if isinstance(target, type) and getattr(target, "__origin__", None) is None:
        return target.__qualname__
    return repr(target)
