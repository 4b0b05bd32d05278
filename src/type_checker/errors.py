"""
Exception types raised by type_checker.

Predicates never raise; the assert_* helpers are the only throwing surface and
raise TypeMismatchError.
"""

from __future__ import annotations

from typing import Optional

__all__ = [
    "TypeCheckerError",
    "TypeMismatchError",
]


class TypeCheckerError(Exception):
    """Base class for errors raised by type_checker."""


class TypeMismatchError(TypeCheckerError, TypeError):
    """Raised when an assertion finds a value outside the expected category."""

    def __init__(
        self,
        message: str,
        expected: Optional[str] = None,
        actual: Optional[str] = None,
    ) -> None:
        self.message = message
        self.expected = expected
        self.actual = actual
        super().__init__(message)

    def __str__(self) -> str:
        return self.message
