from __future__ import annotations

import pytest

from json_to_swift.codegen.core.values import (
    ANY,
    BOOL,
    DOUBLE,
    INT,
    STRING,
    ValueType,
    classify_value,
    common_value_type,
)


def test_bool_is_not_an_int() -> None:
    assert classify_value(True) == ValueType("Bool", "false")
    assert classify_value(False) == BOOL


def test_numbers() -> None:
    assert classify_value(31) == ValueType("Int", "0")
    assert classify_value(0) == INT
    assert classify_value(1) == INT
    assert classify_value(-78.234) == ValueType("Double", "0.0")


def test_parsed_float_stays_double() -> None:
    assert classify_value(25.0) == DOUBLE


def test_string_and_null() -> None:
    assert classify_value("Frodo") == STRING
    assert STRING.default_literal == '""'
    assert classify_value(None) == ANY


def test_containers_are_rejected() -> None:
    with pytest.raises(TypeError):
        classify_value({"a": 1})
    with pytest.raises(TypeError):
        classify_value([1])


@pytest.mark.parametrize(
    ("values", "expected"),
    [
        ([2, 3], INT),
        ([1, 2.5], DOUBLE),
        (["a", "b"], STRING),
        ([True, False], BOOL),
        ([None, 4], INT),
        ([True, 1], ANY),
        ([1, "a"], ANY),
        ([[1], [2]], ANY),
        ([None, None], ANY),
    ],
)
def test_common_value_type(values, expected) -> None:
    assert common_value_type(values) == expected
