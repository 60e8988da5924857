"""
Gremlin rendering dialects.

A dialect is the fixed set of templates for one :class:`ComparisonMode`:
one per value kind, plus the separator placed between filters and the
template wrapped around the joined result.

New dialects are added by registering them on a :class:`DialectRegistry`.
"""

from __future__ import annotations

from dataclasses import dataclass

from .exceptions import UnsupportedComparisonModeError
from .filters import ComparisonMode
from .values import (
    FilterValue,
    Int32Value,
    Int64Value,
    NullValue,
    TextValue,
    UnsupportedValue,
    escape_text,
)


@dataclass(frozen=True)
class GremlinDialect:
    """
    Templates for one comparison mode.

    Attributes:
        mode: The comparison mode this dialect renders.
        text_template: Format for text values (``{name}``, ``{value}``).
        integer_template: Format for 32-bit and 64-bit integers.
        null_template: Format for ``None`` values (``{name}`` only).
        separator: Placed between formatted filters.
        wrap_template: Applied to the joined filters (``{joined}``).
    """

    mode: ComparisonMode
    text_template: str
    integer_template: str
    null_template: str
    separator: str
    wrap_template: str

    def format_filter(self, name: str, value: FilterValue) -> str | None:
        """Format one filter, or return ``None`` if the value is unsupported."""
        name = escape_text(name)
        match value:
            case NullValue():
                return self.null_template.format(name=name)
            case TextValue(text=text):
                return self.text_template.format(name=name, value=escape_text(text))
            case Int32Value(number=number) | Int64Value(number=number):
                return self.integer_template.format(name=name, value=str(number))
            case UnsupportedValue():
                return None

    def wrap(self, parts: list[str]) -> str:
        """Join *parts*; an empty or blank result is returned as ``""``."""
        joined = self.separator.join(parts)
        if not joined.strip():
            return ""
        return self.wrap_template.format(joined=joined)


EXACT_DIALECT = GremlinDialect(
    mode=ComparisonMode.EXACT,
    text_template="['{name}':'{value}']",
    integer_template="['{name}':{value}]",
    null_template="['{name}':null]",
    separator=",",
    wrap_template="[{joined}]",
)

CASE_INSENSITIVE_DIALECT = GremlinDialect(
    mode=ComparisonMode.CASE_INSENSITIVE,
    text_template="it.'{name}'.equalsIgnoreCase('{value}')",
    integer_template="it.'{name}' == {value}",
    null_template="it.'{name}' == null",
    separator=" && ",
    wrap_template="{{ {joined} }}",
)


class DialectRegistry:
    """
    Registry of :class:`GremlinDialect` instances keyed by comparison mode.

    Usage::

        registry = DialectRegistry()
        registry.register(EXACT_DIALECT)

        dialect = registry.resolve("exact")
    """

    def __init__(self) -> None:
        self._dialects: dict[ComparisonMode, GremlinDialect] = {}

    def register(self, dialect: GremlinDialect) -> None:
        self._dialects[dialect.mode] = dialect

    def get(self, mode: ComparisonMode) -> GremlinDialect | None:
        return self._dialects.get(mode)

    def has(self, mode: ComparisonMode) -> bool:
        return mode in self._dialects

    @property
    def supported_modes(self) -> set[ComparisonMode]:
        return set(self._dialects.keys())

    def resolve(self, mode: ComparisonMode | str) -> GremlinDialect:
        """
        Return the dialect for *mode*.

        Raises:
            UnsupportedComparisonModeError: If the mode is unknown or has
                no registered dialect.
        """
        resolved = ComparisonMode.coerce(mode)
        dialect = self.get(resolved)
        if dialect is None:
            raise UnsupportedComparisonModeError(
                resolved.value, [m.value for m in self.supported_modes]
            )
        return dialect


def build_default_registry() -> DialectRegistry:
    """Registry with the exact and case-insensitive dialects."""
    registry = DialectRegistry()
    registry.register(EXACT_DIALECT)
    registry.register(CASE_INSENSITIVE_DIALECT)
    return registry
