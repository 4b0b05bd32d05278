"""
Predicate functions grouped by domain.

Every predicate takes any value and returns a bool without raising.
"""

from type_checker.predicates.collections import (
    has_length,
    has_max_length,
    has_min_length,
    has_properties,
    has_property,
    is_empty_array,
    is_empty_object,
    is_non_empty_array,
    is_non_empty_object,
)
from type_checker.predicates.numeric import (
    is_finite,
    is_float,
    is_infinite,
    is_integer,
    is_negative,
    is_positive,
    is_zero,
    sign,
)
from type_checker.predicates.primitives import (
    is_array,
    is_big_int,
    is_boolean,
    is_function,
    is_null,
    is_nullish,
    is_number,
    is_object,
    is_string,
    is_symbol,
    is_undefined,
)
from type_checker.predicates.strings import (
    is_email,
    is_empty_string,
    is_non_empty_string,
    is_url,
    is_whitespace,
)
from type_checker.predicates.tagged import (
    is_date,
    is_error,
    is_invalid_date,
    is_promise,
    is_reference_error,
    is_reg_exp,
    is_syntax_error,
    is_thenable,
    is_type_error,
    is_valid_date,
)

__all__ = [
    # primitives
    "is_string",
    "is_number",
    "is_boolean",
    "is_function",
    "is_object",
    "is_array",
    "is_null",
    "is_undefined",
    "is_nullish",
    "is_symbol",
    "is_big_int",
    # numeric
    "is_integer",
    "is_float",
    "is_positive",
    "is_negative",
    "is_zero",
    "is_finite",
    "is_infinite",
    "sign",
    # strings
    "is_empty_string",
    "is_non_empty_string",
    "is_whitespace",
    "is_email",
    "is_url",
    # collections
    "is_empty_array",
    "is_non_empty_array",
    "has_length",
    "has_min_length",
    "has_max_length",
    "is_empty_object",
    "is_non_empty_object",
    "has_property",
    "has_properties",
    # tagged
    "is_date",
    "is_valid_date",
    "is_invalid_date",
    "is_reg_exp",
    "is_error",
    "is_type_error",
    "is_reference_error",
    "is_syntax_error",
    "is_promise",
    "is_thenable",
]
