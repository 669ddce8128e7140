"""tapreporter - TAP version 13 reporter for test-run events."""

__version__ = "0.1.0"

from tapreporter.application.reporters import TapConfig, TapReporter
from tapreporter.domain.model import ErrorInfo, ErrorKind, RunStatus, TestResult

__all__ = [
    "ErrorInfo",
    "ErrorKind",
    "RunStatus",
    "TapConfig",
    "TapReporter",
    "TestResult",
    "__version__",
]
