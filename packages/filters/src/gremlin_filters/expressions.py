"""
Recorded predicate expressions.

A predicate such as ``lambda p: p.status == Status.ACTIVE`` is evaluated
against a :class:`ParameterRecorder` instead of a real record.  Attribute
access on the recorder yields :class:`PropertyAccess` nodes, and comparing
one of those builds a predicate node describing the comparison.  The
right-hand side is ordinary Python and is evaluated before the comparison
happens, so it arrives as a plain value.

Only the shapes needed for single-property equality are modelled.  Node
state lives in underscore attributes so that any public attribute name
can still be recorded as a member access.
"""

from __future__ import annotations

import typing
from dataclasses import dataclass
from types import NoneType, UnionType
from typing import Any

from .exceptions import UnsupportedExpressionShapeError


class Expression:
    """Base for nodes that reference the predicate parameter."""

    def __eq__(self, other: object) -> EqualityPredicate:  # type: ignore[override]
        return EqualityPredicate(self, other)

    def __ne__(self, other: object) -> ComparisonPredicate:  # type: ignore[override]
        return ComparisonPredicate("!=", self, other)

    def __lt__(self, other: object) -> ComparisonPredicate:
        return ComparisonPredicate("<", self, other)

    def __le__(self, other: object) -> ComparisonPredicate:
        return ComparisonPredicate("<=", self, other)

    def __gt__(self, other: object) -> ComparisonPredicate:
        return ComparisonPredicate(">", self, other)

    def __ge__(self, other: object) -> ComparisonPredicate:
        return ComparisonPredicate(">=", self, other)

    def __getattr__(self, name: str) -> MemberAccess:
        if name.startswith("__"):
            raise AttributeError(name)
        return MemberAccess(self, name)

    def __call__(self, *args: Any, **kwargs: Any) -> MemberAccess:
        return MemberAccess(self, "()")

    def _arithmetic(self, other: object) -> MemberAccess:
        return MemberAccess(self, "<arithmetic>")

    __add__ = __radd__ = __sub__ = __rsub__ = _arithmetic
    __mul__ = __rmul__ = __truediv__ = __rtruediv__ = _arithmetic
    __floordiv__ = __rfloordiv__ = __mod__ = __rmod__ = _arithmetic

    def __neg__(self) -> MemberAccess:
        return MemberAccess(self, "<negation>")

    def __str__(self) -> str:
        # str(), int() and len() must return real values; they cannot be recorded
        raise TypeError(f"{self!r} cannot be converted with str()")

    __hash__ = object.__hash__


class PropertyAccess(Expression):
    """A declared property read directly from the parameter."""

    def __init__(self, name: str, declared_type: Any) -> None:
        self._name = name
        self._declared_type = declared_type

    def key(self) -> PropertyKey:
        return PropertyKey(self._name, self._declared_type)

    def __repr__(self) -> str:
        return f"PropertyAccess({self._name!r})"


class MemberAccess(Expression):
    """Anything else reached from the parameter (methods, nested members)."""

    def __init__(self, owner: object, name: str) -> None:
        self._owner = owner
        self._name = name

    def __repr__(self) -> str:
        return f"MemberAccess({self._owner!r}, {self._name!r})"


class Cast(Expression):
    """An explicit type conversion of an expression, see :func:`cast_to`."""

    def __init__(self, target_type: type, operand: object) -> None:
        self._target_type = target_type
        self._operand = operand

    @property
    def operand(self) -> object:
        return self._operand

    def __repr__(self) -> str:
        return f"Cast({self._target_type.__name__}, {self._operand!r})"


def cast_to(target_type: type, expr: object) -> Cast:
    """Mark *expr* as converted to *target_type* (``cast_to(int, p.status)``)."""
    return Cast(target_type, expr)


class RecordedPredicate:
    """Result of comparing an :class:`Expression`."""

    def __bool__(self) -> bool:
        raise UnsupportedExpressionShapeError(
            "Predicates cannot be combined with 'and', 'or' or 'not'; "
            "only a single equality comparison is supported."
        )

    def __and__(self, other: object) -> CompositePredicate:
        return CompositePredicate("&", (self, other))

    def __or__(self, other: object) -> CompositePredicate:
        return CompositePredicate("|", (self, other))

    def __invert__(self) -> CompositePredicate:
        return CompositePredicate("~", (self,))


class EqualityPredicate(RecordedPredicate):
    """``left == right``; the only shape the extractor accepts."""

    def __init__(self, left: object, right: object) -> None:
        self.left = left
        self.right = right

    def __repr__(self) -> str:
        return f"EqualityPredicate({self.left!r}, {self.right!r})"


class ComparisonPredicate(RecordedPredicate):
    """A comparison other than equality."""

    def __init__(self, operator: str, left: object, right: object) -> None:
        self.operator = operator
        self.left = left
        self.right = right

    def __repr__(self) -> str:
        return f"ComparisonPredicate({self.operator!r}, {self.left!r}, {self.right!r})"


class CompositePredicate(RecordedPredicate):
    """Boolean combination of predicates (``&``, ``|``, ``~``)."""

    def __init__(self, operator: str, operands: tuple[object, ...]) -> None:
        self.operator = operator
        self.operands = operands


@dataclass(frozen=True)
class PropertyKey:
    """Name and declared type of the property on the left-hand side."""

    name: str
    declared_type: Any


class ParameterRecorder:
    """
    Stand-in for the predicate parameter.

    Attribute access returns :class:`PropertyAccess` for properties declared
    with a type hint on *target_type* (pydantic models, dataclasses and
    annotated classes) and :class:`MemberAccess` for anything else.
    """

    def __init__(self, target_type: type) -> None:
        self._target_type = target_type
        self._hints = declared_properties(target_type)

    def __getattr__(self, name: str) -> Expression:
        if name.startswith("__"):
            raise AttributeError(name)
        hint = self._hints.get(name)
        if hint is not None and not _is_class_var(hint):
            return PropertyAccess(name, hint)
        return MemberAccess(self, name)

    def __repr__(self) -> str:
        return f"ParameterRecorder({self._target_type.__name__})"


def declared_properties(target_type: type) -> dict[str, Any]:
    """Map property names to declared types.

    Pydantic models report their fields (annotations already resolved by
    pydantic); other classes use their resolved type hints.
    """
    fields = getattr(target_type, "model_fields", None)
    if isinstance(fields, dict):
        return {name: info.annotation for name, info in fields.items()}
    return typing.get_type_hints(target_type)


def references_parameter(value: object) -> bool:
    return isinstance(value, (Expression, ParameterRecorder, RecordedPredicate))


def unwrap_optional(declared_type: Any) -> Any:
    """Return ``X`` for ``X | None`` / ``Optional[X]``, else *declared_type*."""
    origin = typing.get_origin(declared_type)
    if origin is typing.Union or origin is UnionType:
        args = [a for a in typing.get_args(declared_type) if a is not NoneType]
        if len(args) == 1:
            return args[0]
    return declared_type


def _is_class_var(hint: Any) -> bool:
    return hint is typing.ClassVar or typing.get_origin(hint) is typing.ClassVar
