"""
Value classification for rendering.

Every filter value is tagged as one of :class:`NullValue`,
:class:`TextValue`, :class:`Int32Value`, :class:`Int64Value` or
:class:`UnsupportedValue`.  Dialects match on the tag instead of
looking the run-time type up in a table.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


@dataclass(frozen=True)
class NullValue:
    """The value is ``None``."""


@dataclass(frozen=True)
class TextValue:
    text: str


@dataclass(frozen=True)
class Int32Value:
    number: int


@dataclass(frozen=True)
class Int64Value:
    number: int


@dataclass(frozen=True)
class UnsupportedValue:
    """Carries the original type so the error can name it."""

    value_type: type


FilterValue = NullValue | TextValue | Int32Value | Int64Value | UnsupportedValue


def classify_value(value: Any) -> FilterValue:
    """
    Tag *value* by its exact run-time type.

    Subclasses do not count: ``bool`` is not an integer here and a ``str``
    subclass is not text.  Integers outside the 64-bit range are unsupported.
    """
    if value is None:
        return NullValue()
    value_type = type(value)
    if value_type is str:
        return TextValue(value)
    if value_type is int:
        if INT32_MIN <= value <= INT32_MAX:
            return Int32Value(value)
        if INT64_MIN <= value <= INT64_MAX:
            return Int64Value(value)
    return UnsupportedValue(value_type)


def full_type_name(value_type: type) -> str:
    """Return ``module.QualifiedName`` for *value_type* (``builtins.float``)."""
    return f"{value_type.__module__}.{value_type.__qualname__}"


def escape_text(text: str) -> str:
    """Escape ``\\`` and ``'`` for a single-quoted Groovy string literal."""
    return text.replace("\\", "\\\\").replace("'", "\\'")
