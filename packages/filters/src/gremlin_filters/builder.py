"""
Fluent builder for collecting filters.

Example::

    fragment = (
        FilterBuilder()
        .where("age", 30)
        .where_predicate(lambda p: p.status == Status.ACTIVE, Person)
        .render(ComparisonMode.CASE_INSENSITIVE)
    )
    # → "{ it.'age' == 30 && it.'status'.equalsIgnoreCase('ACTIVE') }"
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from .exceptions import DuplicateFilterError
from .extractor import Predicate, translate_filter
from .filters import ComparisonMode, Filter
from .renderer import format_gremlin_filter

if TYPE_CHECKING:
    from .dialects import DialectRegistry


class FilterBuilder:
    """
    Collects filters in insertion order.

    Each property may be filtered once; adding it again raises
    :class:`DuplicateFilterError`.
    """

    def __init__(self) -> None:
        self._filters: dict[str, Filter] = {}

    def where(self, property_name: str, value: Any = None) -> FilterBuilder:
        """Add ``property_name == value``."""
        return self.add(Filter(property_name=property_name, value=value))

    def where_predicate(self, predicate: Predicate, target_type: type) -> FilterBuilder:
        """Add the filter described by a single-equality predicate."""
        name, value = translate_filter(predicate, target_type)
        return self.where(name, value)

    def add(self, f: Filter) -> FilterBuilder:
        if f.property_name in self._filters:
            raise DuplicateFilterError(f.property_name)
        self._filters[f.property_name] = f
        return self

    def extend(self, filters: Mapping[str, Any] | Iterable[Filter]) -> FilterBuilder:
        """Add a ``{name: value}`` mapping or an iterable of filters."""
        if isinstance(filters, Mapping):
            for name, value in filters.items():
                self.where(name, value)
        else:
            for f in filters:
                self.add(f)
        return self

    def build(self) -> list[Filter]:
        return list(self._filters.values())

    def render(
        self,
        mode: ComparisonMode | str = ComparisonMode.EXACT,
        *,
        registry: DialectRegistry | None = None,
    ) -> str:
        """Render the collected filters; see :func:`format_gremlin_filter`."""
        return format_gremlin_filter(self.build(), mode, registry=registry)

    def reset(self) -> FilterBuilder:
        """Clear all filters and return ``self`` for reuse."""
        self._filters.clear()
        return self

    def __len__(self) -> int:
        return len(self._filters)
