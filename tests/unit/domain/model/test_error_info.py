"""Tests for domain/model/error_info.py.

Tests:
- Field defaults (every field optional)
- Immutability
- from_exception() name/message/stack/comparison attributes
"""

from dataclasses import FrozenInstanceError

import pytest

from tapreporter.domain.model.error_info import ErrorInfo, ErrorKind


class _ComparisonError(AssertionError):
    """Assertion error carrying comparison details."""

    def __init__(self, message: str, actual: object, expected: object, operator: object) -> None:
        super().__init__(message)
        self.actual = actual
        self.expected = expected
        self.operator = operator


def _raise_and_capture(exc: BaseException) -> BaseException:
    try:
        raise exc
    except BaseException as caught:
        return caught


class TestErrorInfo:
    """Tests for ErrorInfo."""

    def test_all_fields_optional(self) -> None:
        """ErrorInfo() has no fields set."""
        error = ErrorInfo()

        assert error.name is None
        assert error.message is None
        assert error.operator is None
        assert error.actual is None
        assert error.expected is None
        assert error.stack is None
        assert error.kind is None

    def test_empty_actual_is_kept(self) -> None:
        """Empty string is stored as-is, not normalized to None."""
        error = ErrorInfo(actual="")

        assert error.actual == ""

    def test_frozen(self) -> None:
        """ErrorInfo is immutable."""
        error = ErrorInfo(name="Error")

        with pytest.raises(FrozenInstanceError):
            error.name = "Other"  # type: ignore[misc]


class TestFromException:
    """Tests for ErrorInfo.from_exception()."""

    def test_name_and_message(self) -> None:
        """Name is the exception type, message is str(exc)."""
        error = ErrorInfo.from_exception(_raise_and_capture(ValueError("bad value")))

        assert error.name == "ValueError"
        assert error.message == "bad value"

    def test_stack_is_formatted_traceback(self) -> None:
        """Stack holds the formatted traceback of the raise site."""
        error = ErrorInfo.from_exception(_raise_and_capture(ValueError("bad value")))

        assert error.stack is not None
        assert error.stack.startswith("Traceback (most recent call last):")
        assert "_raise_and_capture" in error.stack
        assert error.stack.rstrip().endswith("ValueError: bad value")

    def test_comparison_attributes_copied(self) -> None:
        """actual/expected/operator are copied from the exception."""
        exc = _ComparisonError("not equal", actual="1", expected="2", operator="==")

        error = ErrorInfo.from_exception(exc)

        assert error.actual == "1"
        assert error.expected == "2"
        assert error.operator == "=="

    def test_non_str_operator_dropped(self) -> None:
        """Non-str operator attribute is ignored."""
        exc = _ComparisonError("not equal", actual=1, expected=2, operator=object())

        error = ErrorInfo.from_exception(exc)

        assert error.operator is None
        assert error.actual == 1

    def test_kind_passed_through(self) -> None:
        """kind keyword is stored on the result."""
        error = ErrorInfo.from_exception(RuntimeError("x"), kind=ErrorKind.REJECTION)

        assert error.kind is ErrorKind.REJECTION

    def test_unraised_exception_has_no_frames(self) -> None:
        """Exception never raised: stack is only the final line."""
        error = ErrorInfo.from_exception(RuntimeError("x"))

        assert error.stack == "RuntimeError: x\n"
