"""
Translate single-equality predicates into ``(property_name, value)`` pairs.

Example::

    class Person(BaseModel):
        name: str
        status: Status

    translate_filter(lambda p: p.status == Status.ACTIVE, Person)
    # → ("status", Status.ACTIVE)
"""

from __future__ import annotations

import logging
from collections.abc import Callable, MutableMapping
from enum import Enum
from typing import Any

from .exceptions import (
    DuplicateFilterError,
    UnsupportedExpressionShapeError,
    UnsupportedLeftHandSideError,
)
from .expressions import (
    Cast,
    ComparisonPredicate,
    EqualityPredicate,
    ParameterRecorder,
    PropertyAccess,
    PropertyKey,
    references_parameter,
    unwrap_optional,
)
from .filters import Filter

logger = logging.getLogger(__name__)

Predicate = Callable[[Any], Any]


def translate_filter(predicate: Predicate, target_type: type) -> tuple[str, Any]:
    """
    Extract the property name and compared value from *predicate*.

    Only ``<property> == <value>`` (optionally ``cast_to(T, <property>)``
    on the left) is accepted.  When the property is declared as an
    ``Enum``, the value is coerced to the matching member.

    Raises:
        UnsupportedExpressionShapeError: If the predicate is not a single
            equality, or its right-hand side refers to the parameter.
        UnsupportedLeftHandSideError: If the left-hand side is not a
            declared property of *target_type*, including arithmetic on it
            or builtin conversions such as ``int(p.status)``.
        ValueError: If an enum-typed property is compared with a value
            that is not one of the enum's values.
    """
    try:
        body = predicate(ParameterRecorder(target_type))
    except TypeError as exc:
        raise UnsupportedLeftHandSideError(
            "Only property accessors are supported for the left-hand side "
            f"of the expression: {exc}"
        ) from exc
    if isinstance(body, ComparisonPredicate):
        raise UnsupportedExpressionShapeError(
            f"Only equality expressions are supported, got '{body.operator}'."
        )
    if not isinstance(body, EqualityPredicate):
        raise UnsupportedExpressionShapeError(
            "Only single equality expressions are supported, "
            f"got {type(body).__name__}."
        )

    key = _parse_key(body.left)
    value = _parse_value(body.right)
    declared = unwrap_optional(key.declared_type)
    if (
        value is not None
        and isinstance(declared, type)
        and issubclass(declared, Enum)
    ):
        value = declared(value)

    logger.debug("Translated predicate on %s to filter '%s'", target_type, key.name)
    return key.name, value


def translate_filter_into(
    predicate: Predicate,
    target_type: type,
    filters: MutableMapping[str, Any],
) -> None:
    """Add the translated pair to *filters*; an existing name is an error."""
    name, value = translate_filter(predicate, target_type)
    if name in filters:
        raise DuplicateFilterError(name)
    filters[name] = value


def translate_filter_to_filter(predicate: Predicate, target_type: type) -> Filter:
    name, value = translate_filter(predicate, target_type)
    return Filter(property_name=name, value=value)


def _parse_key(expression: object) -> PropertyKey:
    if isinstance(expression, Cast):
        expression = expression.operand
    if isinstance(expression, PropertyAccess):
        return expression.key()
    raise UnsupportedLeftHandSideError(
        "Only property accessors are supported for the left-hand side "
        f"of the expression, got {expression!r}."
    )


def _parse_value(expression: object) -> Any:
    if references_parameter(expression):
        raise UnsupportedExpressionShapeError(
            "The right-hand side must not refer to the predicate parameter, "
            f"got {expression!r}."
        )
    return expression
