"""Tests for domain/model/test_result.py."""

import pytest

from tapreporter.domain.model.error_info import ErrorInfo
from tapreporter.domain.model.test_result import TestResult


class TestTestResult:
    """Tests for TestResult."""

    def test_defaults(self) -> None:
        """Only title is required."""
        result = TestResult(title="works")

        assert result.todo is False
        assert result.skip is False
        assert result.error is None

    def test_passed_without_error(self) -> None:
        """No error means passed."""
        assert TestResult(title="works").passed is True

    def test_not_passed_with_error(self) -> None:
        """Attached error means failed."""
        result = TestResult(title="breaks", error=ErrorInfo(message="boom"))

        assert result.passed is False

    def test_skip_without_error_passed(self) -> None:
        """Skip flag does not affect derived pass state."""
        assert TestResult(title="later", skip=True).passed is True

    def test_non_str_title_rejected(self) -> None:
        """FAIL-FIRST: title must be str."""
        with pytest.raises(TypeError, match="title must be str"):
            TestResult(title=None)  # type: ignore[arg-type]

    def test_not_collected_by_pytest(self) -> None:
        """Class is marked as not a test class."""
        assert TestResult.__test__ is False
