"""
Primitive and structural predicates.

Each checker takes one value of any kind and returns a bool; none raises.
"""

from __future__ import annotations

import math
from typing import Any

from type_checker.values import UNDEFINED, primitive_tag


def is_string(value: Any) -> bool:
    return primitive_tag(value) == "string"


def is_number(value: Any) -> bool:
    """
    True for a finite number: NaN and both infinities are rejected.

    Booleans are not numbers, and ints beyond MAX_SAFE_INTEGER are bigints.
    """
    return primitive_tag(value) == "number" and math.isfinite(value)


def is_boolean(value: Any) -> bool:
    return primitive_tag(value) == "boolean"


def is_function(value: Any) -> bool:
    return primitive_tag(value) == "function"


def is_symbol(value: Any) -> bool:
    return primitive_tag(value) == "symbol"


def is_big_int(value: Any) -> bool:
    return primitive_tag(value) == "bigint"


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_object(value: Any) -> bool:
    """True for non-null values in the generic object category that are not arrays."""
    return value is not None and primitive_tag(value) == "object" and not is_array(value)


def is_null(value: Any) -> bool:
    return value is None


def is_undefined(value: Any) -> bool:
    return value is UNDEFINED


def is_nullish(value: Any) -> bool:
    return value is None or value is UNDEFINED
