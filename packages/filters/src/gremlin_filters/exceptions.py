"""
Filter translation exception hierarchy.

All exceptions inherit from ``FilterTranslationError`` and provide
``to_dict()`` for API-friendly error responses.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any


class FilterTranslationError(Exception):
    """Base exception for all filter translation errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class UnsupportedComparisonModeError(FilterTranslationError):
    """
    Comparison mode has no rendering dialect.

    Provides fuzzy-matched suggestions for likely intended modes.
    """

    def __init__(self, mode: object, supported_modes: list[str]) -> None:
        self.mode = mode
        self.supported_modes = supported_modes
        self.suggestions = get_close_matches(
            str(mode), supported_modes, n=3, cutoff=0.6
        )

        message = f"Comparison mode {mode} is not supported."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "UNSUPPORTED_COMPARISON_MODE",
            "mode": str(self.mode),
            "suggestions": self.suggestions,
            "supported_modes": sorted(self.supported_modes),
        }


class UnsupportedFilterTypesError(FilterTranslationError):
    """
    One or more filters carry a value type with no rendering template.

    Every offender is reported, not only the first::

        One or more of the supplied filters is of an unsupported type.
        Unsupported filters were: score of type builtins.float, tags of type builtins.list
    """

    def __init__(self, unsupported: list[tuple[str, str]]) -> None:
        self.unsupported = unsupported
        details = ", ".join(
            f"{name} of type {type_name}" for name, type_name in unsupported
        )
        super().__init__(
            "One or more of the supplied filters is of an unsupported type. "
            f"Unsupported filters were: {details}"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "UNSUPPORTED_FILTER_TYPES",
            "filters": [
                {"property_name": name, "type": type_name}
                for name, type_name in self.unsupported
            ],
        }


class UnsupportedExpressionShapeError(FilterTranslationError):
    """Predicate is not a single top-level equality comparison."""


class UnsupportedLeftHandSideError(FilterTranslationError):
    """Left side of an equality predicate is not a property of the parameter."""


class InvalidFilterError(FilterTranslationError):
    """Filter structure could not be parsed."""


class DuplicateFilterError(FilterTranslationError):
    """A filter for the same property was already added."""

    def __init__(self, property_name: str) -> None:
        self.property_name = property_name
        super().__init__(
            f"A filter for property '{property_name}' was already added"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "DUPLICATE_FILTER",
            "property_name": self.property_name,
        }
