from .builder import FilterBuilder
from .dialects import (
    CASE_INSENSITIVE_DIALECT,
    EXACT_DIALECT,
    DialectRegistry,
    GremlinDialect,
    build_default_registry,
)
from .exceptions import (
    DuplicateFilterError,
    FilterTranslationError,
    InvalidFilterError,
    UnsupportedComparisonModeError,
    UnsupportedExpressionShapeError,
    UnsupportedFilterTypesError,
    UnsupportedLeftHandSideError,
)
from .expressions import cast_to
from .extractor import (
    translate_filter,
    translate_filter_into,
    translate_filter_to_filter,
)
from .filters import ComparisonMode, Filter, normalize_filters
from .renderer import GremlinFilterRenderer, format_gremlin_filter
from .values import classify_value, escape_text, full_type_name

__all__ = [
    # Core types
    "ComparisonMode",
    "Filter",
    "normalize_filters",
    # Rendering
    "GremlinFilterRenderer",
    "format_gremlin_filter",
    "GremlinDialect",
    "DialectRegistry",
    "EXACT_DIALECT",
    "CASE_INSENSITIVE_DIALECT",
    "build_default_registry",
    # Predicate extraction
    "translate_filter",
    "translate_filter_into",
    "translate_filter_to_filter",
    "cast_to",
    # Builder
    "FilterBuilder",
    # Exceptions
    "FilterTranslationError",
    "UnsupportedComparisonModeError",
    "UnsupportedFilterTypesError",
    "UnsupportedExpressionShapeError",
    "UnsupportedLeftHandSideError",
    "InvalidFilterError",
    "DuplicateFilterError",
    # Utilities
    "classify_value",
    "escape_text",
    "full_type_name",
]
