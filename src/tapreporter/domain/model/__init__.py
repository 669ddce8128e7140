"""Domain model: immutable value objects for test-run events."""

from tapreporter.domain.model.error_info import ErrorInfo, ErrorKind
from tapreporter.domain.model.run_status import RunStatus
from tapreporter.domain.model.test_result import TestResult

__all__ = [
    "ErrorInfo",
    "ErrorKind",
    "RunStatus",
    "TestResult",
]
