"""
Type tags and reflection helpers.

``get_type`` computes the closed TypeTag for any value once, with a fixed
precedence; ``is_type``, ``is_one_of`` and ``is_equal`` compare tags rather
than re-deriving category checks.

Examples:
    >>> from type_checker.reflection import TypeTag, get_type, is_equal
    >>> get_type([1, 2]) is TypeTag.ARRAY
    True
    >>> get_type(None) == "null"
    True
    >>> is_equal([1, {"a": [2, 3]}], [1, {"a": [2, 3]}])
    True
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from type_checker.predicates.primitives import is_array, is_nullish
from type_checker.predicates.tagged import DATE_TYPES, is_error, is_promise, is_reg_exp
from type_checker.values import UNDEFINED, has_own_keys, own_keys, own_value, primitive_tag

__all__ = [
    "TypeTag",
    "get_type",
    "is_type",
    "is_one_of",
    "is_instance_of",
    "is_equal",
]


class TypeTag(str, Enum):
    """Semantic category of a value. Members compare equal to their plain names."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"
    NULL = "null"
    UNDEFINED = "undefined"
    DATE = "date"
    REGEXP = "regexp"
    ERROR = "error"
    PROMISE = "promise"
    SYMBOL = "symbol"
    BIGINT = "bigint"
    FUNCTION = "function"

    def __str__(self) -> str:
        return self.value


# Tags compared by value in is_equal; everything else needs identity or structure.
_VALUE_TAGS = frozenset({TypeTag.STRING, TypeTag.NUMBER, TypeTag.BOOLEAN, TypeTag.BIGINT})


def get_type(value: Any) -> TypeTag:
    """
    Classify ``value`` into exactly one TypeTag.

    Order matters: arrays, dates, patterns, errors and futures would otherwise
    all land in "object". An InvalidDate is still a "date".
    """
    if value is None:
        return TypeTag.NULL
    if value is UNDEFINED:
        return TypeTag.UNDEFINED
    if is_array(value):
        return TypeTag.ARRAY
    if isinstance(value, DATE_TYPES):
        return TypeTag.DATE
    if is_reg_exp(value):
        return TypeTag.REGEXP
    if is_error(value):
        return TypeTag.ERROR
    if is_promise(value):
        return TypeTag.PROMISE
    return TypeTag(primitive_tag(value))


def is_type(value: Any, tag: Any) -> bool:
    return get_type(value) == tag


def is_one_of(value: Any, tags: Any) -> bool:
    if not is_array(tags):
        return False
    actual = get_type(value)
    return any(actual == tag for tag in tags)


def is_instance_of(value: Any, cls: Any) -> bool:
    try:
        return isinstance(value, cls)
    except TypeError:
        return False


def is_equal(a: Any, b: Any) -> bool:
    """
    Deep structural equality.

    Arrays compare element-wise in order, objects by their own key set and
    values. Objects without keys (bytes, sets, Decimal, complex) compare with
    ==. Dates, patterns, errors, futures, symbols and functions are equal only
    to themselves. There is no cycle guard: self-referencing structures
    recurse until RecursionError.
    """
    if a is b:
        return True
    if is_nullish(a) or is_nullish(b):
        return False

    tag = get_type(a)
    if tag != get_type(b):
        return False

    if tag in _VALUE_TAGS:
        return a == b

    if tag is TypeTag.ARRAY:
        if len(a) != len(b):
            return False
        return all(is_equal(x, y) for x, y in zip(a, b))

    if tag is TypeTag.OBJECT:
        if not (has_own_keys(a) and has_own_keys(b)):
            # bytes, sets, Decimal, complex: no keys to walk, compare by value
            return bool(a == b)
        keys_a = own_keys(a)
        keys_b = own_keys(b)
        if len(keys_a) != len(keys_b):
            return False
        return all(key in keys_b and is_equal(own_value(a, key), own_value(b, key)) for key in keys_a)

    return False
