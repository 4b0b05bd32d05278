"""
Value model shared by every predicate.

Python has no native counterpart for a few categories the checkers classify:
an "undefined" value distinct from None, symbols, a bigint/number split, and
date objects that hold an invalid timestamp. This module supplies them, plus
``primitive_tag``, the language-level category of a value that the rest of the
package builds on.
"""

from __future__ import annotations

import inspect
from collections.abc import Mapping
from datetime import date, datetime
from typing import Any, Final, Literal, Optional

from pydantic import TypeAdapter, ValidationError

from type_checker.utils.logging import get_logger

logger = get_logger(__name__)

# Largest integer a double represents exactly; ints beyond it are "bigint".
MAX_SAFE_INTEGER: Final[int] = 2**53 - 1

PrimitiveTag = Literal[
    "undefined",
    "object",
    "boolean",
    "number",
    "bigint",
    "string",
    "symbol",
    "function",
]


class _Undefined:
    """Singleton type of UNDEFINED."""

    _instance: Optional["_Undefined"] = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Final = _Undefined()


class Symbol:
    """Unique identity token. Two symbols are never equal unless they are the same object."""

    __slots__ = ("description",)

    def __init__(self, description: Optional[str] = None) -> None:
        self.description = description

    def __repr__(self) -> str:
        if self.description is None:
            return "Symbol()"
        return f"Symbol({self.description})"


class InvalidDate:
    """A date whose timestamp could not be determined; produced by ``to_date``."""

    __slots__ = ("source",)

    def __init__(self, source: Any = None) -> None:
        self.source = source

    def __repr__(self) -> str:
        return f"InvalidDate({self.source!r})"


_DATETIME_ADAPTER = TypeAdapter(datetime)


def to_date(value: Any) -> date | InvalidDate:
    """
    Build a date from ``value``, the way a date constructor would.

    ``date`` and ``datetime`` instances are returned unchanged. Anything else is
    handed to pydantic's datetime parser (ISO-8601 strings, unix timestamps in
    seconds or milliseconds). Input the parser rejects becomes an InvalidDate
    rather than an exception.
    """
    if isinstance(value, date):
        return value
    try:
        return _DATETIME_ADAPTER.validate_python(value)
    except ValidationError as exc:
        logger.debug("date_parse_failed", value=repr(value), error_count=exc.error_count())
        return InvalidDate(value)


def primitive_tag(value: Any) -> PrimitiveTag:
    """
    Return the language-level category of ``value``.

    None reports "object" here; ``get_type`` is where it becomes "null".
    Every callable, classes included, reports "function".
    """
    if value is UNDEFINED:
        return "undefined"
    if value is None:
        return "object"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "bigint" if abs(value) > MAX_SAFE_INTEGER else "number"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Symbol):
        return "symbol"
    if callable(value):
        return "function"
    return "object"


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


MISSING: Final = _Missing()


def resolve_member(value: Any, key: Any) -> Any:
    """
    Look ``key`` up on ``value`` as a mapping key first, then as an attribute.

    Attribute lookup walks the class hierarchy without running properties or
    ``__getattr__`` hooks. Returns MISSING when the key does not resolve; never
    raises.
    """
    if isinstance(value, Mapping):
        try:
            if key in value:
                return value[key]
        except (TypeError, KeyError):
            return MISSING
    if not isinstance(key, str):
        return MISSING
    try:
        found = inspect.getattr_static(value, key)
    except AttributeError:
        return MISSING
    if isinstance(found, (classmethod, staticmethod)):
        return found.__func__
    return found


def own_keys(value: Any) -> list[Any]:
    """Own enumerable keys: mapping keys, or the instance ``__dict__`` keys."""
    if isinstance(value, Mapping):
        return list(value)
    attrs = getattr(value, "__dict__", None)
    if isinstance(attrs, dict):
        return list(attrs)
    return []


def own_value(value: Any, key: Any) -> Any:
    if isinstance(value, Mapping):
        return value[key]
    return vars(value)[key]


def has_own_keys(value: Any) -> bool:
    """True for mappings and instances carrying a ``__dict__``; bytes, sets, Decimal etc. have no keys."""
    return isinstance(value, Mapping) or isinstance(getattr(value, "__dict__", None), dict)
