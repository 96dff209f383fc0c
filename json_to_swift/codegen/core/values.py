"""
Scalar value classification.

Maps parsed JSON scalars to the Swift type name and default literal
used when declaring a property for them.
"""

from dataclasses import dataclass
from typing import Any, Iterable


@dataclass(frozen=True)
class ValueType:
    """Inferred type of a scalar: type name plus its default literal."""

    type_name: str
    default_literal: str


BOOL = ValueType("Bool", "false")
INT = ValueType("Int", "0")
DOUBLE = ValueType("Double", "0.0")
STRING = ValueType("String", '""')
ANY = ValueType("Any", "nil")


def is_scalar(value: Any) -> bool:
    """Return True for JSON values that are neither objects nor arrays."""
    return not isinstance(value, (dict, list))


def classify_value(value: Any) -> ValueType:
    """
    Classify a scalar JSON value.

    bool must be checked before int: Python booleans are ints, and a JSON
    ``true`` has to stay a Bool rather than becoming an Int of value 1.
    The parsed kind decides between Int and Double, so ``25.0`` is a Double.

    Raises:
        TypeError: If value is an object or array.
    """
    if isinstance(value, bool):
        return BOOL
    if isinstance(value, int):
        return INT
    if isinstance(value, float):
        return DOUBLE
    if isinstance(value, str):
        return STRING
    if value is None:
        return ANY
    raise TypeError(f"Cannot classify non-scalar value of type {type(value).__name__}")


def common_value_type(values: Iterable[Any]) -> ValueType:
    """
    Infer the element type shared by a sequence of scalars.

    Nulls are skipped, Int and Double widen to Double, and anything else
    that disagrees (including nested arrays) collapses to Any.
    """
    found = set()
    for value in values:
        if value is None:
            continue
        if not is_scalar(value):
            return ANY
        found.add(classify_value(value))

    if len(found) == 1:
        return found.pop()
    if found == {INT, DOUBLE}:
        return DOUBLE
    return ANY
