"""Binder module.

Exports ``bind`` and the helpers for declaring bind destinations.
"""
from __future__ import annotations

from cmdlang.binder.binder import bind, bind_new, check_constructible
from cmdlang.binder.fields import (
    TAG_KEY,
    BindingPlan,
    FieldBinding,
    binding,
    binding_plan,
    parse_tag,
)
from cmdlang.binder.values import DATE_FORMAT, ValueParser, coerce

__all__ = [
    "bind",
    "bind_new",
    "check_constructible",
    "binding",
    "binding_plan",
    "parse_tag",
    "BindingPlan",
    "FieldBinding",
    "ValueParser",
    "coerce",
    "TAG_KEY",
    "DATE_FORMAT",
]
