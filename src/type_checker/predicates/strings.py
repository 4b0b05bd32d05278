"""
String refinements: emptiness, whitespace, e-mail and URL shape checks.
"""

from __future__ import annotations

import re
from typing import Any, Final

from pydantic import AnyUrl, TypeAdapter, ValidationError

from type_checker.predicates.primitives import is_string
from type_checker.utils.logging import get_logger

logger = get_logger(__name__)

WHITESPACE_RE = re.compile(r"\s*")
# Permissive on purpose: local@domain.tld with no spaces or extra "@".
EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

ALLOWED_URL_SCHEMES: Final[frozenset[str]] = frozenset({"http", "https", "ftp"})
LOCALHOST: Final[str] = "localhost"

_URL_ADAPTER = TypeAdapter(AnyUrl)


def is_empty_string(value: Any) -> bool:
    return is_string(value) and len(value) == 0


def is_non_empty_string(value: Any) -> bool:
    return is_string(value) and len(value) > 0


def is_whitespace(value: Any) -> bool:
    """True if the string holds only whitespace; the empty string counts."""
    return is_string(value) and WHITESPACE_RE.fullmatch(value) is not None


def is_email(value: Any) -> bool:
    return is_string(value) and EMAIL_RE.fullmatch(value) is not None


def is_url(value: Any) -> bool:
    """
    Check that a string is an absolute http, https or ftp URL with a plausible host.

    Parsing is delegated to pydantic's URL parser; strings it rejects are not
    URLs. Schemes outside ALLOWED_URL_SCHEMES (javascript:, data:, file:, ...)
    are rejected. The host must contain a "." (domain with a TLD, IPv4 address)
    or be exactly "localhost".

    Examples:
        >>> is_url("https://example.com")
        True
        >>> is_url("http://localhost:3000")
        True
        >>> is_url("http://example")
        False
        >>> is_url("javascript:alert(1)")
        False
    """
    if not is_string(value):
        return False
    try:
        url = _URL_ADAPTER.validate_python(value)
    except ValidationError as exc:
        logger.debug("url_parse_failed", value=value, error_count=exc.error_count())
        return False

    if url.scheme not in ALLOWED_URL_SCHEMES:
        return False

    host = url.host or ""
    if "." not in host and host != LOCALHOST:
        return False

    return True
