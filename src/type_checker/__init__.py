"""
type_checker: runtime type inspection and validation.

Pure predicates that classify values by type and shape (primitives, numbers,
strings, collections, dates, errors, futures), plus composition helpers:
get_type / is_type / is_one_of, deep is_equal, validate / create_validator,
and the assert_* guards.

Every function is importable from the package root. CHECKS maps the
camelCase names (isString, getType, ...) to the same functions for callers
that look checks up by name.
"""

from types import MappingProxyType
from typing import Any, Callable, Mapping

from type_checker.errors import TypeCheckerError, TypeMismatchError
from type_checker.predicates import (
    __all__ as _predicate_names,
    has_length,
    has_max_length,
    has_min_length,
    has_properties,
    has_property,
    is_array,
    is_big_int,
    is_boolean,
    is_date,
    is_email,
    is_empty_array,
    is_empty_object,
    is_empty_string,
    is_error,
    is_finite,
    is_float,
    is_function,
    is_infinite,
    is_integer,
    is_invalid_date,
    is_negative,
    is_non_empty_array,
    is_non_empty_object,
    is_non_empty_string,
    is_null,
    is_nullish,
    is_number,
    is_object,
    is_positive,
    is_promise,
    is_reference_error,
    is_reg_exp,
    is_string,
    is_symbol,
    is_syntax_error,
    is_thenable,
    is_type_error,
    is_undefined,
    is_url,
    is_valid_date,
    is_whitespace,
    is_zero,
    sign,
)
from type_checker.reflection import TypeTag, get_type, is_equal, is_instance_of, is_one_of, is_type
from type_checker.validation import (
    assert_array,
    assert_number,
    assert_object,
    assert_string,
    create_validator,
    validate,
)
from type_checker.values import MAX_SAFE_INTEGER, UNDEFINED, InvalidDate, Symbol, primitive_tag, to_date

CHECKS: Mapping[str, Callable[..., Any]] = MappingProxyType(
    {
        # Basic types
        "isString": is_string,
        "isNumber": is_number,
        "isBoolean": is_boolean,
        "isFunction": is_function,
        "isObject": is_object,
        "isArray": is_array,
        "isNull": is_null,
        "isUndefined": is_undefined,
        "isNullish": is_nullish,
        # Advanced types
        "isInteger": is_integer,
        "isFloat": is_float,
        "isPositive": is_positive,
        "isNegative": is_negative,
        "isZero": is_zero,
        "isFinite": is_finite,
        "isInfinite": is_infinite,
        # String utilities
        "isEmptyString": is_empty_string,
        "isNonEmptyString": is_non_empty_string,
        "isWhitespace": is_whitespace,
        "isEmail": is_email,
        "isUrl": is_url,
        # Array utilities
        "isEmptyArray": is_empty_array,
        "isNonEmptyArray": is_non_empty_array,
        "hasLength": has_length,
        "hasMinLength": has_min_length,
        "hasMaxLength": has_max_length,
        # Object utilities
        "isEmptyObject": is_empty_object,
        "isNonEmptyObject": is_non_empty_object,
        "hasProperty": has_property,
        "hasProperties": has_properties,
        # Date utilities
        "isDate": is_date,
        "isValidDate": is_valid_date,
        "isInvalidDate": is_invalid_date,
        # Other types
        "isRegExp": is_reg_exp,
        "isError": is_error,
        "isTypeError": is_type_error,
        "isReferenceError": is_reference_error,
        "isSyntaxError": is_syntax_error,
        "isPromise": is_promise,
        "isThenable": is_thenable,
        "isSymbol": is_symbol,
        "isBigInt": is_big_int,
        # Utility functions
        "getType": get_type,
        "isType": is_type,
        "isOneOf": is_one_of,
        "isInstanceOf": is_instance_of,
        "isEqual": is_equal,
        "validate": validate,
        "createValidator": create_validator,
        "sign": sign,
        # Type guards
        "assertString": assert_string,
        "assertNumber": assert_number,
        "assertArray": assert_array,
        "assertObject": assert_object,
    }
)

__all__ = [
    *_predicate_names,
    "TypeTag",
    "get_type",
    "is_type",
    "is_one_of",
    "is_instance_of",
    "is_equal",
    "validate",
    "create_validator",
    "assert_string",
    "assert_number",
    "assert_array",
    "assert_object",
    "UNDEFINED",
    "Symbol",
    "InvalidDate",
    "MAX_SAFE_INTEGER",
    "primitive_tag",
    "to_date",
    "TypeCheckerError",
    "TypeMismatchError",
    "CHECKS",
]
