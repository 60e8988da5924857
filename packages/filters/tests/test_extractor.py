"""Tests for predicate extraction (translate_filter and friends)."""

from __future__ import annotations

import logging
import typing

import pytest

from gremlin_filters import (
    DuplicateFilterError,
    Filter,
    UnsupportedExpressionShapeError,
    UnsupportedLeftHandSideError,
    cast_to,
    format_gremlin_filter,
    translate_filter,
    translate_filter_into,
    translate_filter_to_filter,
)
from sample_records import Movie, Person, Status, Tier

# -- Supported shapes --------------------------------------------------------


def test_text_property():
    assert translate_filter(lambda p: p.name == "Bob", Person) == ("name", "Bob")


def test_int_property():
    assert translate_filter(lambda p: p.age == 30, Person) == ("age", 30)


def test_right_hand_side_is_evaluated():
    base = 20
    assert translate_filter(lambda p: p.age == base + 10, Person) == ("age", 30)
    assert translate_filter(lambda p: p.name == "b".upper() + "ob", Person) == (
        "name",
        "Bob",
    )


def test_null_value():
    assert translate_filter(lambda p: p.email == None, Person) == (  # noqa: E711
        "email",
        None,
    )


def test_reflected_equality():
    assert translate_filter(lambda p: 30 == p.age, Person) == ("age", 30)


def test_dataclass_target():
    assert translate_filter(lambda m: m.year == 1999, Movie) == ("year", 1999)


# -- Enum coercion -----------------------------------------------------------


def test_enum_member_is_kept():
    name, value = translate_filter(lambda p: p.status == Status.ACTIVE, Person)
    assert name == "status"
    assert value is Status.ACTIVE


def test_enum_underlying_value_is_coerced_to_member():
    _, value = translate_filter(lambda p: p.status == 2, Person)
    assert value is Status.SUSPENDED


def test_cast_of_enum_property():
    _, value = translate_filter(lambda p: cast_to(int, p.status) == 1, Person)
    assert value is Status.ACTIVE


def test_typing_cast_is_transparent():
    _, value = translate_filter(lambda p: typing.cast(int, p.age) == 5, Person)
    assert value == 5


def test_optional_enum_property():
    _, value = translate_filter(lambda p: p.tier == 10, Person)
    assert value is Tier.PRO


def test_optional_enum_compared_with_none():
    assert translate_filter(lambda p: p.tier == None, Person) == (  # noqa: E711
        "tier",
        None,
    )


def test_enum_value_without_member_fails():
    with pytest.raises(ValueError, match="99"):
        translate_filter(lambda p: p.status == 99, Person)


def test_extracted_enum_renders_as_name():
    f = translate_filter_to_filter(lambda p: p.status == Status.ACTIVE, Person)
    assert f == Filter(property_name="status", value=Status.ACTIVE)
    assert format_gremlin_filter([f], "exact") == "[['status':'ACTIVE']]"


# -- Unsupported shapes ------------------------------------------------------


@pytest.mark.parametrize(
    "predicate",
    [
        lambda p: p.age > 5,
        lambda p: p.age >= 5,
        lambda p: p.age < 5,
        lambda p: p.age <= 5,
        lambda p: p.age != 5,
    ],
)
def test_non_equality_comparison(predicate):
    with pytest.raises(UnsupportedExpressionShapeError, match="equality"):
        translate_filter(predicate, Person)


def test_boolean_and_is_rejected():
    with pytest.raises(UnsupportedExpressionShapeError):
        translate_filter(lambda p: p.age == 5 and p.name == "Bob", Person)


def test_bitwise_combination_is_rejected():
    with pytest.raises(UnsupportedExpressionShapeError):
        translate_filter(lambda p: (p.age == 5) | (p.name == "Bob"), Person)


def test_not_is_rejected():
    with pytest.raises(UnsupportedExpressionShapeError):
        translate_filter(lambda p: not (p.age == 5), Person)


def test_constant_predicate_is_rejected():
    with pytest.raises(UnsupportedExpressionShapeError):
        translate_filter(lambda p: True, Person)


def test_right_hand_side_referring_to_parameter():
    with pytest.raises(UnsupportedExpressionShapeError, match="right-hand side"):
        translate_filter(lambda p: p.name == p.email, Person)


# -- Unsupported left-hand sides ---------------------------------------------


@pytest.mark.parametrize(
    "predicate",
    [
        lambda p: p.display_name() == "Bob",
        lambda p: p.name.upper() == "BOB",
        lambda p: p.label == "person",
        lambda p: p.nickname == "Bobby",
        lambda p: cast_to(int, cast_to(int, p.status)) == 1,
        lambda p: p.age + 1 == 5,
        lambda p: 1 + p.age == 5,
        lambda p: -p.age == 5,
        lambda p: int(p.status) == 1,
        lambda p: len(p.name) == 3,
        lambda p: str(p.age) == "3",
    ],
)
def test_unsupported_left_hand_side(predicate):
    with pytest.raises(UnsupportedLeftHandSideError, match="property accessors"):
        translate_filter(predicate, Person)


def test_builtin_conversion_keeps_type_error_as_cause():
    with pytest.raises(UnsupportedLeftHandSideError) as exc_info:
        translate_filter(lambda p: int(p.status) == 1, Person)
    assert isinstance(exc_info.value.__cause__, TypeError)


# -- translate_filter_into ---------------------------------------------------


def test_translate_filter_into_adds_pair():
    filters: dict[str, object] = {}
    translate_filter_into(lambda p: p.age == 30, Person, filters)
    translate_filter_into(lambda p: p.name == "Bob", Person, filters)
    assert filters == {"age": 30, "name": "Bob"}


def test_translate_filter_into_duplicate():
    filters: dict[str, object] = {"age": 1}
    with pytest.raises(DuplicateFilterError, match="age"):
        translate_filter_into(lambda p: p.age == 30, Person, filters)
    assert filters == {"age": 1}


def test_translate_logs_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger="gremlin_filters.extractor"):
        translate_filter(lambda p: p.age == 30, Person)
    assert "'age'" in caplog.text
