"""
Collection refinements for arrays (lists, tuples) and objects.
"""

from __future__ import annotations

from typing import Any

from type_checker.predicates.primitives import is_array, is_object
from type_checker.values import MISSING, own_keys, resolve_member

# -----------------------------------------------------------------------------
# Arrays
# -----------------------------------------------------------------------------


def is_empty_array(value: Any) -> bool:
    return is_array(value) and len(value) == 0


def is_non_empty_array(value: Any) -> bool:
    return is_array(value) and len(value) > 0


def has_length(value: Any, length: Any) -> bool:
    return is_array(value) and len(value) == length


def has_min_length(value: Any, min_length: Any) -> bool:
    try:
        return is_array(value) and len(value) >= min_length
    except TypeError:
        return False


def has_max_length(value: Any, max_length: Any) -> bool:
    try:
        return is_array(value) and len(value) <= max_length
    except TypeError:
        return False


# -----------------------------------------------------------------------------
# Objects
# -----------------------------------------------------------------------------


def is_empty_object(value: Any) -> bool:
    return is_object(value) and len(own_keys(value)) == 0


def is_non_empty_object(value: Any) -> bool:
    return is_object(value) and len(own_keys(value)) > 0


def has_property(value: Any, key: Any) -> bool:
    """
    True if ``key`` resolves on the object, own or inherited.

    Mapping keys and attributes both count, so ``has_property({"a": 1}, "keys")``
    is True: ``keys`` is inherited from dict.
    """
    return is_object(value) and resolve_member(value, key) is not MISSING


def has_properties(value: Any, keys: Any) -> bool:
    if not is_object(value) or not is_array(keys):
        return False
    return all(has_property(value, key) for key in keys)
