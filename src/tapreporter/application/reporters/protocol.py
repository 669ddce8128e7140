"""Reporter protocol: contract for event-driven reporters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from tapreporter.domain.model.error_info import ErrorInfo
    from tapreporter.domain.model.run_status import RunStatus
    from tapreporter.domain.model.test_result import TestResult


class ReporterProtocol(Protocol):
    """Protocol for run reporters.

    Render methods return str, not print(). Caller decides destination
    and writes through write().
    Call order: start() once, test()/unhandled_error() in completion
    order, finish() once.
    """

    def start(self) -> str:
        """Render run preamble."""
        ...

    def test(self, result: TestResult) -> str:
        """Render one test result."""
        ...

    def unhandled_error(self, error: ErrorInfo) -> str:
        """Render an error not attached to any test."""
        ...

    def finish(self, status: RunStatus) -> str:
        """Render plan and summary footer."""
        ...

    def write(self, line: str) -> None:
        """Write rendered text to the primary output."""
        ...

    def stdout(self, chunk: str) -> None:
        """Forward raw stdout chunk of the tested process."""
        ...

    def stderr(self, chunk: str) -> None:
        """Forward raw stderr chunk of the tested process."""
        ...
