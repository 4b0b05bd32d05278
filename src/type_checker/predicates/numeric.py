"""
Numeric refinements and the sign helper.

"Number category" means floats and ints within MAX_SAFE_INTEGER; bools and
bigints are excluded everywhere in this module except ``sign``.
"""

from __future__ import annotations

import math
from typing import Any

from type_checker.predicates.primitives import is_number
from type_checker.values import primitive_tag


def _is_numeric(value: Any) -> bool:
    return primitive_tag(value) == "number"


def is_integer(value: Any) -> bool:
    if not _is_numeric(value):
        return False
    if isinstance(value, int):
        return True
    return value.is_integer()


def is_float(value: Any) -> bool:
    """A finite number with a non-zero fractional part; 2.0 is not a float here."""
    return is_number(value) and not is_integer(value)


def is_positive(value: Any) -> bool:
    return is_number(value) and value > 0


def is_negative(value: Any) -> bool:
    return is_number(value) and value < 0


def is_zero(value: Any) -> bool:
    # 0, 0.0 and -0.0 all qualify
    return _is_numeric(value) and value == 0


def is_finite(value: Any) -> bool:
    return _is_numeric(value) and math.isfinite(value)


def is_infinite(value: Any) -> bool:
    return _is_numeric(value) and math.isinf(value)


def sign(value: Any) -> int | float:
    """
    Return 1 or -1 for the sign of ``value``.

    Zero is positive unless it is negative zero: ``sign(0) == 1`` and
    ``sign(-0.0) == -1``. Infinities follow their sign. NaN gives ``math.nan``,
    and so does anything outside the number category. Strings, booleans and
    None are not coerced, so ``sign("5")`` and ``sign(True)`` are NaN rather than 1.

    Examples:
        >>> sign(-3)
        -1
        >>> sign(-0.0)
        -1
        >>> sign(0)
        1
    """
    if primitive_tag(value) not in ("number", "bigint"):
        return math.nan
    if isinstance(value, float) and math.isnan(value):
        return math.nan
    if value > 0:
        return 1
    if value < 0:
        return -1
    return -1 if math.copysign(1.0, value) < 0 else 1
