"""Unit tests for validate(), create_validator() and the assert_* guards."""

from typing import Any, Callable

import pytest
from structlog.testing import capture_logs

from type_checker.errors import TypeCheckerError, TypeMismatchError
from type_checker.predicates.primitives import is_string
from type_checker.predicates.strings import is_non_empty_string
from type_checker.validation import (
    assert_array,
    assert_number,
    assert_object,
    assert_string,
    create_validator,
    validate,
)


class TestValidate:
    def test_all_pass(self) -> None:
        assert validate("hello", [is_string, is_non_empty_string]) is True

    def test_one_fails(self) -> None:
        assert validate("", [is_string, is_non_empty_string]) is False
        assert validate(123, [is_string, is_non_empty_string]) is False

    def test_empty_list_passes(self) -> None:
        assert validate("anything", []) is True

    @pytest.mark.parametrize("validators", [None, "is_string", {"a": is_string}, is_string])
    def test_non_list_validators(self, validators: Any) -> None:
        assert validate("hello", validators) is False

    def test_non_callable_entry_fails(self) -> None:
        with capture_logs() as logs:
            assert validate("hello", [is_string, "not callable"]) is False
        assert any(e["event"] == "validator_not_callable" for e in logs)

    def test_short_circuits(self) -> None:
        calls: list[str] = []

        def never(value: Any) -> bool:
            calls.append("never")
            return True

        assert validate(1, [is_string, never]) is False
        assert calls == []

    def test_truthy_results_pass(self) -> None:
        assert validate("abc", [len]) is True
        assert validate("", [len]) is False


class TestCreateValidator:
    def test_closure(self) -> None:
        validator = create_validator([is_string, is_non_empty_string])
        assert validator("hello") is True
        assert validator("") is False
        assert validator(123) is False

    def test_reads_list_on_every_call(self) -> None:
        validators: list[Callable[[Any], bool]] = [is_string]
        validator = create_validator(validators)
        assert validator("") is True
        validators.append(is_non_empty_string)
        assert validator("") is False

    def test_non_list(self) -> None:
        assert create_validator(None)("hello") is False


class TestAssertions:
    def test_pass_through(self) -> None:
        payload = {"a": 1}
        items = [1, 2, 3]
        assert assert_string("hello") == "hello"
        assert assert_number(123) == 123
        assert assert_array(items) is items
        assert assert_object(payload) is payload

    @pytest.mark.parametrize(
        "guard,value,message",
        [
            (assert_string, 123, "Expected a string"),
            (assert_number, "123", "Expected a number"),
            (assert_array, {}, "Expected an array"),
            (assert_object, [], "Expected an object"),
        ],
    )
    def test_default_messages(self, guard: Callable[..., Any], value: Any, message: str) -> None:
        with pytest.raises(TypeMismatchError) as exc_info:
            guard(value)
        assert str(exc_info.value) == message
        assert exc_info.value.message == message

    def test_custom_message(self) -> None:
        with pytest.raises(TypeMismatchError, match="Custom message"):
            assert_string(123, "Custom message")

    def test_error_hierarchy(self) -> None:
        with pytest.raises(TypeError):
            assert_number("123")
        with pytest.raises(TypeCheckerError):
            assert_array("abc")

    def test_error_carries_tags(self) -> None:
        with pytest.raises(TypeMismatchError) as exc_info:
            assert_number("123")
        assert exc_info.value.expected == "number"
        assert exc_info.value.actual == "string"

    def test_nan_is_not_a_number(self) -> None:
        with pytest.raises(TypeMismatchError):
            assert_number(float("nan"))
