"""
Predicates for tagged classes: dates, patterns, errors and futures.
"""

from __future__ import annotations

import asyncio
import concurrent.futures
import re
from datetime import date
from typing import Any

from type_checker.values import MISSING, InvalidDate, primitive_tag, resolve_member

DATE_TYPES = (date, InvalidDate)
PROMISE_TYPES = (asyncio.Future, concurrent.futures.Future)
# Continuation-registration members looked up by is_thenable.
THENABLE_MEMBERS = ("then", "add_done_callback")


def is_date(value: Any) -> bool:
    """A date or datetime; InvalidDate values are dates but not valid ones."""
    return isinstance(value, date)


def is_valid_date(value: Any) -> bool:
    return is_date(value)


def is_invalid_date(value: Any) -> bool:
    return isinstance(value, InvalidDate)


def is_reg_exp(value: Any) -> bool:
    return isinstance(value, re.Pattern)


def is_error(value: Any) -> bool:
    return isinstance(value, BaseException)


def is_type_error(value: Any) -> bool:
    return isinstance(value, TypeError)


def is_reference_error(value: Any) -> bool:
    # NameError covers UnboundLocalError
    return isinstance(value, NameError)


def is_syntax_error(value: Any) -> bool:
    return isinstance(value, SyntaxError)


def is_promise(value: Any) -> bool:
    return isinstance(value, PROMISE_TYPES)


def is_thenable(value: Any) -> bool:
    """
    True for objects exposing a callable ``then`` or ``add_done_callback``.

    Broader than is_promise: every future is thenable, but so is any object
    (or mapping) carrying one of those callables.
    """
    if value is None or primitive_tag(value) != "object":
        return False
    for name in THENABLE_MEMBERS:
        member = resolve_member(value, name)
        if member is not MISSING and callable(member):
            return True
    return False
