"""
Validator composition and assertion helpers.

``validate`` runs a list of predicates against a value; ``create_validator``
binds such a list into a reusable checker. The assert_* helpers are the only
functions in the package that raise: they return the value unchanged on
success so they can be used inline, and raise TypeMismatchError otherwise.
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from type_checker.errors import TypeMismatchError
from type_checker.predicates.primitives import is_array, is_function, is_number, is_object, is_string
from type_checker.reflection import TypeTag, get_type
from type_checker.utils.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


def validate(value: Any, validators: Any) -> bool:
    """
    True if every validator in the list accepts ``value``.

    Returns False when ``validators`` is not a list/tuple, and as soon as an
    entry is not callable or returns a falsy result. Exceptions raised by a
    validator propagate.
    """
    if not is_array(validators):
        return False
    for validator in validators:
        if not is_function(validator):
            logger.debug("validator_not_callable", validator=repr(validator))
            return False
        if not validator(value):
            return False
    return True


def create_validator(validators: Any) -> Callable[[Any], bool]:
    """Return ``lambda value: validate(value, validators)``; the list is read on every call."""

    def validator(value: Any) -> bool:
        return validate(value, validators)

    return validator


def _mismatch(value: Any, expected: TypeTag, message: str) -> TypeMismatchError:
    actual = get_type(value)
    logger.debug("assertion_failed", expected=expected.value, actual=actual.value)
    return TypeMismatchError(message, expected=expected.value, actual=actual.value)


def assert_string(value: T, message: str = "Expected a string") -> T:
    if not is_string(value):
        raise _mismatch(value, TypeTag.STRING, message)
    return value


def assert_number(value: T, message: str = "Expected a number") -> T:
    if not is_number(value):
        raise _mismatch(value, TypeTag.NUMBER, message)
    return value


def assert_array(value: T, message: str = "Expected an array") -> T:
    if not is_array(value):
        raise _mismatch(value, TypeTag.ARRAY, message)
    return value


def assert_object(value: T, message: str = "Expected an object") -> T:
    if not is_object(value):
        raise _mismatch(value, TypeTag.OBJECT, message)
    return value
