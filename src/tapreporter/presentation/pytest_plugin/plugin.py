"""pytest hooks driving a TapReporter.

pytest reports each test in up to three phases (setup, call,
teardown). Each test produces one TAP line: on call, on setup when
setup did not pass, or on teardown when teardown failed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tapreporter.domain.model.error_info import ErrorInfo, ErrorKind
from tapreporter.domain.model.run_status import RunStatus
from tapreporter.domain.model.test_result import TestResult

if TYPE_CHECKING:
    from collections.abc import Generator

    from tapreporter.application.reporters.protocol import ReporterProtocol


class TapPlugin:
    """pytest plugin object owning one reporter for the session."""

    def __init__(self, reporter: ReporterProtocol) -> None:
        """Initialize plugin.

        Args:
            reporter: Reporter to render and write session events.
        """
        self._reporter = reporter
        self._errors: dict[tuple[str, str], ErrorInfo] = {}
        self._counts = {
            "pass_count": 0,
            "fail_count": 0,
            "skip_count": 0,
            "todo_count": 0,
            "exception_count": 0,
        }

    def pytest_sessionstart(self, session: pytest.Session) -> None:
        """Write TAP preamble."""
        self._reporter.write(self._reporter.start())

    @pytest.hookimpl(wrapper=True)
    def pytest_runtest_makereport(
        self,
        item: pytest.Item,
        call: pytest.CallInfo[None],
    ) -> Generator[None, pytest.TestReport, pytest.TestReport]:
        """Keep the raised exception of failed phases for diagnostics."""
        report = yield
        if report.failed and call.excinfo is not None:
            self._errors[(report.nodeid, report.when)] = ErrorInfo.from_exception(call.excinfo.value)
        return report

    def pytest_runtest_logreport(self, report: pytest.TestReport) -> None:
        """Render one TAP line per test outcome."""
        if not _is_reported_phase(report):
            return

        result = self._to_result(report)
        self._reporter.write(self._reporter.test(result))

        if report.failed:
            if report.capstdout:
                self._reporter.stdout(report.capstdout)
            if report.capstderr:
                self._reporter.stderr(report.capstderr)

    def pytest_collectreport(self, report: pytest.CollectReport) -> None:
        """Render failed collection as an unhandled error."""
        if not report.failed:
            return

        error = ErrorInfo(
            name="CollectError",
            message=f"Error collecting {report.nodeid or 'session'}",
            stack=str(report.longrepr),
            kind=ErrorKind.EXCEPTION,
        )
        self._counts["exception_count"] += 1
        self._reporter.write(self._reporter.unhandled_error(error))

    def pytest_sessionfinish(self, session: pytest.Session) -> None:
        """Write plan and summary footer."""
        status = RunStatus(rejection_count=0, **self._counts)
        self._reporter.write(self._reporter.finish(status))

    def _to_result(self, report: pytest.TestReport) -> TestResult:
        """Map pytest report to TestResult and count its outcome."""
        xfail = hasattr(report, "wasxfail")

        if report.skipped and xfail:
            self._counts["todo_count"] += 1
            return TestResult(title=report.nodeid, todo=True)

        if report.skipped:
            self._counts["skip_count"] += 1
            return TestResult(title=report.nodeid, skip=True)

        if report.failed:
            self._counts["fail_count"] += 1
            error = self._errors.pop((report.nodeid, report.when), None)
            if error is None:
                # Failed without exception (e.g. strict XPASS)
                error = ErrorInfo(message=str(report.longrepr))
            return TestResult(title=report.nodeid, error=error)

        self._counts["pass_count"] += 1
        return TestResult(title=report.nodeid)


def _is_reported_phase(report: pytest.TestReport) -> bool:
    """Check if this phase report stands for the test's outcome."""
    if report.when == "call":
        return True
    if report.when == "setup":
        return not report.passed
    return report.failed
