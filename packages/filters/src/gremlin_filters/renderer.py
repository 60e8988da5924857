"""Render filter collections into Gremlin query fragments."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .dialects import DialectRegistry, build_default_registry
from .exceptions import UnsupportedFilterTypesError
from .filters import normalize_filters
from .values import UnsupportedValue, classify_value, full_type_name

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .filters import ComparisonMode, Filter

logger = logging.getLogger(__name__)


class GremlinFilterRenderer:
    """
    Renders ``(property_name, value)`` filters with a comparison dialect.

    Example::

        renderer = GremlinFilterRenderer()
        renderer.render([Filter(property_name="age", value=30)], "exact")
        # → "[['age':30]]"
    """

    def __init__(self, registry: DialectRegistry | None = None) -> None:
        self._registry = registry if registry is not None else build_default_registry()

    def render(self, filters: Iterable[Filter], mode: ComparisonMode | str) -> str:
        """
        Render *filters* in input order.

        Raises:
            UnsupportedComparisonModeError: If *mode* has no dialect.
            UnsupportedFilterTypesError: If any filter value is neither
                ``None``, text nor a 32/64-bit integer.  All offenders
                are listed in one error.
        """
        normalized = normalize_filters(filters)
        dialect = self._registry.resolve(mode)
        logger.debug(
            "Rendering %d filter(s) with %s dialect",
            len(normalized),
            dialect.mode.value,
        )

        parts: list[str] = []
        unsupported: list[tuple[str, str]] = []
        for f in normalized:
            value = classify_value(f.value)
            formatted = dialect.format_filter(f.property_name, value)
            if formatted is not None:
                parts.append(formatted)
            elif isinstance(value, UnsupportedValue):
                unsupported.append((f.property_name, full_type_name(value.value_type)))

        if unsupported:
            logger.warning("Unsupported filter value types: %s", unsupported)
            raise UnsupportedFilterTypesError(unsupported)

        return dialect.wrap(parts)


def format_gremlin_filter(
    filters: Iterable[Filter],
    mode: ComparisonMode | str,
    *,
    registry: DialectRegistry | None = None,
) -> str:
    """Render *filters* with the dialect registered for *mode*."""
    return GremlinFilterRenderer(registry).render(filters, mode)
