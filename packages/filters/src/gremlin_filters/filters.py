"""Filter records, comparison modes and value normalization."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from .exceptions import InvalidFilterError, UnsupportedComparisonModeError


class ComparisonMode(str, Enum):
    """Equality semantics used when rendering filters."""

    EXACT = "exact"
    CASE_INSENSITIVE = "case_insensitive"

    @classmethod
    def coerce(cls, mode: ComparisonMode | str) -> ComparisonMode:
        """Accept a member or its string value."""
        if isinstance(mode, cls):
            return mode
        try:
            return cls(mode)
        except ValueError:
            raise UnsupportedComparisonModeError(
                mode, [m.value for m in cls]
            ) from None


class Filter(BaseModel):
    """A single named-property equality constraint.

    Filters are immutable; normalization produces new instances.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    property_name: str
    value: Any = None

    def to_dict(self) -> dict[str, Any]:
        return {"property_name": self.property_name, "value": self.value}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Filter:
        """Build a filter from ``{"property_name": ..., "value": ...}``."""
        if not isinstance(data, dict):
            raise InvalidFilterError(
                f"Filter must be a JSON object, got {type(data).__name__}"
            )
        try:
            return cls.model_validate(data)
        except PydanticValidationError as exc:
            raise InvalidFilterError(f"Invalid filter {data!r}: {exc}") from exc


def normalize_filters(filters: Iterable[Filter]) -> list[Filter]:
    """
    Replace enum values by their member name.

    Compound ``Flag`` members without a name (Python 3.10) use ``str()``.

    Returns new filters in the same order; the input is left untouched.
    """
    normalized: list[Filter] = []
    for f in filters:
        if f.value is not None and isinstance(f.value, Enum):
            text = f.value.name if f.value.name is not None else str(f.value)
            f = f.model_copy(update={"value": text})
        normalized.append(f)
    return normalized
