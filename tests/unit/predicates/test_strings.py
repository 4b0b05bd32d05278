"""Unit tests for string refinements, including the URL allow-list."""

import pytest
from structlog.testing import capture_logs

from type_checker.predicates.strings import (
    is_email,
    is_empty_string,
    is_non_empty_string,
    is_url,
    is_whitespace,
)
from type_checker.values import UNDEFINED


class TestEmptiness:
    def test_is_empty_string(self) -> None:
        assert is_empty_string("") is True
        assert is_empty_string("hello") is False
        assert is_empty_string(123) is False
        assert is_empty_string([]) is False

    def test_is_non_empty_string(self) -> None:
        assert is_non_empty_string("hello") is True
        assert is_non_empty_string(" ") is True
        assert is_non_empty_string("") is False
        assert is_non_empty_string(123) is False


class TestIsWhitespace:
    def test_whitespace_only(self) -> None:
        assert is_whitespace("   ") is True
        assert is_whitespace("\t\n") is True

    def test_empty_string_counts(self) -> None:
        assert is_whitespace("") is True

    def test_content(self) -> None:
        assert is_whitespace("hello") is False
        assert is_whitespace("  a  ") is False
        assert is_whitespace(None) is False


class TestIsEmail:
    @pytest.mark.parametrize("value", ["test@example.com", "user.name@domain.co.uk", "a@b.c"])
    def test_valid(self, value: str) -> None:
        assert is_email(value) is True

    @pytest.mark.parametrize(
        "value",
        ["invalid-email", "@example.com", "user@domain", "us er@example.com", "a@b@c.com", ""],
    )
    def test_invalid(self, value: str) -> None:
        assert is_email(value) is False

    def test_non_string(self) -> None:
        assert is_email(None) is False


class TestIsUrl:
    @pytest.mark.parametrize(
        "value",
        [
            "https://example.com",
            "http://localhost:3000",
            "http://localhost",
            "http://example.com/path?query=value#fragment",
            "https://sub.domain.co.uk",
            "http://192.168.1.1",
            "ftp://files.example.org/pub",
        ],
    )
    def test_valid(self, value: str) -> None:
        assert is_url(value) is True

    @pytest.mark.parametrize(
        "value",
        [
            "not-a-url",
            "",
            "example.com",
            "http://example",
            "http://intranet:8080",
        ],
    )
    def test_malformed_or_missing_tld(self, value: str) -> None:
        assert is_url(value) is False

    @pytest.mark.parametrize(
        "value",
        [
            "javascript:alert('xss')",
            "javascript:alert(1)",
            "data:text/plain,Hello%20World",
            "file:///etc/passwd",
            "ws://example.com/socket",
        ],
    )
    def test_schemes_outside_allow_list(self, value: str) -> None:
        assert is_url(value) is False

    @pytest.mark.parametrize("value", [123, None, UNDEFINED, ["https://example.com"]])
    def test_non_string(self, value: object) -> None:
        assert is_url(value) is False

    def test_parse_failure_logged_at_debug(self) -> None:
        with capture_logs() as logs:
            assert is_url("not-a-url") is False
        events = [e for e in logs if e["event"] == "url_parse_failed"]
        assert len(events) == 1
        assert events[0]["log_level"] == "debug"
        assert events[0]["value"] == "not-a-url"
