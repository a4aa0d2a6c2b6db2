"""Binding plans: how the fields of a destination dataclass accept arguments.

A destination is a plain dataclass.  Each field is matched to named
arguments by its *binding name*, which defaults to the lower-cased field
name and can be overridden with a tag in the field metadata::

    @dataclass
    class OpenScene:
        id: str = binding(",positional", default="")
        skip_intro: bool = binding("no-skip", default=False)
        tags: list[str] = field(default_factory=list)

The tag syntax is ``name[,positional]``.  Adding ``,positional`` makes
the field eligible for unnamed arguments; positional fields are filled
in declaration order.  Fields whose name starts with ``_`` are never
bound.

The plan for a class is computed once and cached, so binding a line
walks a static table instead of introspecting the class every time.
"""
from __future__ import annotations

import dataclasses
import functools
import logging
import types
import typing
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Final, Union

from cmdlang.errors import BindingTagError, ConfigurationError
from cmdlang.grammar.tokens import NAME_SEPARATOR, QUOTE_CHARS

logger = logging.getLogger(__name__)

TAG_KEY: Final[str] = "command"
POSITIONAL_FLAG: Final[str] = "positional"


def binding(tag: str = "", **kwargs: Any) -> Any:
    """Return a ``dataclasses.field`` carrying a binding tag.

    Parameters
    ----------
    tag:
        ``name[,positional]``; an empty name keeps the default binding
        name.
    **kwargs:
        Passed through to ``dataclasses.field`` (``default``,
        ``default_factory``, ...).
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[TAG_KEY] = tag
    return dataclasses.field(metadata=metadata, **kwargs)


@dataclass(frozen=True, slots=True)
class FieldBinding:
    """How one dataclass field receives argument values.

    Parameters
    ----------
    attr:
        The attribute name on the dataclass.
    name:
        The binding name arguments are matched against.
    positional:
        Whether unnamed arguments may be bound to this field.
    target:
        The field type with one level of ``| None`` removed.
    optional:
        True if the declared type allowed ``None``.
    """

    attr: str
    name: str
    positional: bool
    target: Any
    optional: bool = False

    @property
    def is_bool(self) -> bool:
        """True for ``bool`` and ``bool | None`` fields."""
        return self.target is bool

    @property
    def is_sequence(self) -> bool:
        """True for list fields, which append one element per argument."""
        return self.target is list or typing.get_origin(self.target) is list

    @property
    def element(self) -> Any:
        """The element type of a list field (``str`` for a bare ``list``)."""
        args = typing.get_args(self.target)
        return args[0] if args else str


@dataclass(frozen=True, slots=True)
class BindingPlan:
    """The complete field table for one destination class.

    Parameters
    ----------
    destination:
        The dataclass this plan was built for.
    named:
        Every bindable field keyed by binding name.
    positional:
        The positional fields in declaration order.
    """

    destination: type
    named: Mapping[str, FieldBinding]
    positional: tuple[FieldBinding, ...]


def parse_tag(field_name: str, tag: str | None) -> tuple[str, bool]:
    """Resolve the binding name and positional flag of one field.

    Raises
    ------
    BindingTagError
        If ``tag`` does not follow ``name[,positional]`` or names
        something that can never appear as an argument name.
    """
    name = field_name.lower()
    if tag is None:
        return name, False
    if not isinstance(tag, str):
        raise BindingTagError(
            f"binding tag on field {field_name!r} must be a string, got {type(tag).__name__}"
        )

    parts = tag.split(",")
    if len(parts) > 2 or (len(parts) == 2 and parts[1].strip() != POSITIONAL_FLAG):
        raise BindingTagError(
            f'misconfigured binding tag {tag!r} on field {field_name!r}, format "name[,positional]"'
        )

    if parts[0]:
        name = parts[0]
    if any(ch.isspace() for ch in name) or NAME_SEPARATOR in name or name[0] in QUOTE_CHARS:
        raise BindingTagError(
            f"binding name {name!r} on field {field_name!r} can never match an argument"
        )
    return name, len(parts) == 2


@functools.lru_cache(maxsize=None)
def binding_plan(cls: type) -> BindingPlan:
    """Build (once) the binding plan for a dataclass.

    Raises
    ------
    ConfigurationError
        If ``cls`` is not a dataclass or its annotations cannot be
        resolved.
    BindingTagError
        If a tag is malformed or two fields share a binding name.
    """
    if not (isinstance(cls, type) and dataclasses.is_dataclass(cls)):
        raise ConfigurationError(f"{cls!r} is not a dataclass")

    try:
        hints = typing.get_type_hints(cls)
    except NameError as exc:
        raise ConfigurationError(
            f"cannot resolve field types of {cls.__qualname__}: {exc}"
        ) from exc

    named: dict[str, FieldBinding] = {}
    positional: list[FieldBinding] = []
    for f in dataclasses.fields(cls):
        if f.name.startswith("_"):
            continue

        name, is_positional = parse_tag(f.name, f.metadata.get(TAG_KEY))
        if name in named:
            raise BindingTagError(
                f"fields {named[name].attr!r} and {f.name!r} of {cls.__qualname__} "
                f"share the binding name {name!r}"
            )

        target, optional = _unwrap_optional(hints.get(f.name, Any))
        fb = FieldBinding(
            attr=f.name,
            name=name,
            positional=is_positional,
            target=target,
            optional=optional,
        )
        named[name] = fb
        if is_positional:
            positional.append(fb)

    logger.debug(
        "Built binding plan for %s: %d field(s), %d positional",
        cls.__qualname__,
        len(named),
        len(positional),
    )
    return BindingPlan(
        destination=cls,
        named=types.MappingProxyType(named),
        positional=tuple(positional),
    )


def _unwrap_optional(annotation: Any) -> tuple[Any, bool]:
    """Strip a single ``None`` member from a two-member union."""
    origin = typing.get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        args = typing.get_args(annotation)
        rest = [a for a in args if a is not type(None)]
        if len(rest) == 1 and len(rest) < len(args):
            return rest[0], True
    return annotation, False
