"""Binder: applies a stream of arguments to the fields of a dataclass.

Matching rules, applied to each argument in turn:

1. An unnamed argument whose value is the binding name of a ``bool``
   field sets that field to ``True``, so ``open no-skip`` reads as
   ``open no-skip=true``.
2. Any other unnamed argument goes to the next positional field.  A
   positional ``list`` field never hands over to the next field: it
   collects every remaining unnamed argument.
3. A named argument goes to the field with that binding name.  A
   ``list`` field appends one element per argument, so a name may be
   repeated.

Binding is best-effort: when an argument fails, fields bound before it
keep their new values.
"""
from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from typing import TypeVar

from cmdlang.binder.fields import FieldBinding, binding_plan
from cmdlang.binder.values import coerce
from cmdlang.errors import BindDestinationError, UnrecognisedArgumentError
from cmdlang.grammar.tokens import Argument

T = TypeVar("T")


def bind(arguments: Iterable[Argument], destination: object) -> None:
    """Consume ``arguments`` and write them into ``destination``.

    Parameters
    ----------
    arguments:
        Any iterable of arguments, usually a lexer or the cursor a
        command handler was given.  It is consumed until exhausted.
    destination:
        A mutable dataclass instance.

    Raises
    ------
    BindDestinationError
        If ``destination`` is not a mutable dataclass instance.
    UnrecognisedArgumentError
        If an argument matches no field.
    InvalidValueError
        If a value cannot be converted to its field's type.
    ArgumentSyntaxError
        Propagated from the lexer.
    """
    if isinstance(destination, type) or not dataclasses.is_dataclass(destination):
        raise BindDestinationError(destination)
    if type(destination).__dataclass_params__.frozen:  # type: ignore[attr-defined]
        raise BindDestinationError(destination)

    plan = binding_plan(type(destination))
    index = 0
    for argument in arguments:
        if not argument.name:
            flag = plan.named.get(argument.value)
            if flag is not None and flag.is_bool:
                _assign(destination, flag, "true")
                continue

            if index >= len(plan.positional):
                raise UnrecognisedArgumentError(argument)
            target = plan.positional[index]
            _assign(destination, target, argument.value)
            if not target.is_sequence:
                index += 1
            continue

        target = plan.named.get(argument.name)
        if target is None:
            raise UnrecognisedArgumentError(argument)
        _assign(destination, target, argument.value)


def bind_new(arguments: Iterable[Argument], cls: type[T]) -> T:
    """Instantiate ``cls`` with no arguments and bind into it.

    Raises
    ------
    BindDestinationError
        If ``cls()`` cannot build a bind destination; see
        ``check_constructible``.
    """
    check_constructible(cls)
    destination = cls()
    bind(arguments, destination)
    return destination


def check_constructible(cls: type) -> None:
    """Check that ``cls()`` builds a mutable dataclass instance.

    Raises
    ------
    BindDestinationError
        If ``cls`` is not a dataclass, has an ``__init__`` field without a
        default, or is frozen.
    """
    if not (isinstance(cls, type) and dataclasses.is_dataclass(cls)):
        raise BindDestinationError(cls, f"bind destination must be a dataclass, got {cls!r}")

    required = [
        f.name
        for f in dataclasses.fields(cls)
        if f.init
        and f.default is dataclasses.MISSING
        and f.default_factory is dataclasses.MISSING
    ]
    if required:
        names = ", ".join(repr(name) for name in required)
        raise BindDestinationError(
            cls,
            f"{cls.__qualname__} cannot be built without arguments: no default for {names}",
        )

    if cls.__dataclass_params__.frozen:  # type: ignore[attr-defined]
        raise BindDestinationError(
            cls, f"bind destination must be a mutable dataclass, {cls.__qualname__} is frozen"
        )


def _assign(destination: object, target: FieldBinding, value: str) -> None:
    if target.is_sequence:
        items = getattr(destination, target.attr)
        if items is None:
            items = []
            setattr(destination, target.attr, items)
        items.append(coerce(target.element, value))
        return
    setattr(destination, target.attr, coerce(target.target, value))
