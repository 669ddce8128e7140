"""TAP reporter: run events → TAP version 13 text."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from tapreporter.application.reporters.yaml_block import render_yaml_block
from tapreporter.application.sequencer import Sequencer
from tapreporter.domain.model.error_info import ErrorKind
from tapreporter.infrastructure.ansi import strip_ansi
from tapreporter.infrastructure.sinks import StreamSink

if TYPE_CHECKING:
    from tapreporter.domain.model.error_info import ErrorInfo
    from tapreporter.domain.model.run_status import RunStatus
    from tapreporter.domain.model.test_result import TestResult
    from tapreporter.domain.ports.sink import OutputSinkProtocol
    from tapreporter.domain.ports.stack import StackExtractorProtocol

log = logging.getLogger(__name__)

TAP_VERSION = "TAP version 13"


@dataclass(frozen=True, slots=True)
class TapConfig:
    """Configuration for TAP reporter.

    All fields have defaults. Immutable (frozen dataclass).

    Attributes:
        internal_error_names: Error names of framework-level exceptions
            that carry no usable stack. Unhandled exceptions with these
            names are rendered without a diagnostic block.
        stack_extractor: Stack normalizer. None = default extractor.
    """

    internal_error_names: frozenset[str] = field(default_factory=lambda: frozenset({"UsageError"}))
    stack_extractor: StackExtractorProtocol | None = None


class TapReporter:
    """TAP version 13 reporter.

    Render methods return str, not print(). Caller decides destination
    and writes through write(). One instance per run: the ordinal
    counter is owned by the instance.
    """

    def __init__(
        self,
        config: TapConfig | None = None,
        sink: OutputSinkProtocol | None = None,
    ) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
            sink: Output sink for write()/stdout()/stderr().
                Uses StreamSink (stdout/stderr) if None.
        """
        self._config = config or TapConfig()
        self._sink = sink if sink is not None else StreamSink()
        self._sequencer = Sequencer()

    def start(self) -> str:
        """Render version preamble."""
        return TAP_VERSION

    def test(self, result: TestResult) -> str:
        """Render one test result.

        An attached error always renders "not ok" with a diagnostic
        block, whatever the other flags say.

        Args:
            result: Completed test.

        Returns:
            Comment line, status line and optional YAML block.
        """
        title = strip_ansi(result.title)
        ordinal = self._sequencer.next_ordinal()

        if result.error is not None:
            log.debug("test %d failed: %s", ordinal, title)
            return "\n".join(
                [
                    f"# {title}",
                    f"not ok {ordinal} - {title}",
                    self._yaml_block(result.error, include_message=True),
                ]
            )

        directive = ""
        if result.todo:
            directive = "# TODO"
        elif result.skip:
            directive = "# SKIP"

        status = "ok" if result.passed and not result.todo else "not ok"
        log.debug("test %d %s %s", ordinal, status, directive)
        return "\n".join(
            [
                f"# {title}",
                f"{status} {ordinal} - {title} {directive}".rstrip(),
            ]
        )

    def unhandled_error(self, error: ErrorInfo) -> str:
        """Render an error raised outside any test.

        Args:
            error: Error diagnostics.

        Returns:
            Comment line, status line and, unless the error is an
            internal framework exception, a YAML block without message.
            Header lines fall back to the name when message is empty.
        """
        ordinal = self._sequencer.next_ordinal()
        log.debug("unhandled error %d: %s", ordinal, error.name)

        description = error.message or error.name or "unhandled error"
        lines = [
            f"# {description}",
            f"not ok {ordinal} - {description}",
        ]
        if not self._is_internal_error(error):
            lines.append(self._yaml_block(error, include_message=False))

        return "\n".join(lines)

    def finish(self, status: RunStatus) -> str:
        """Render plan line and summary footer.

        Args:
            status: Final aggregate counts.

        Returns:
            Footer text, starting and ending with a blank line.
        """
        log.debug("plan 1..%d after %d result lines", status.total, self._sequencer.current)

        lines = [
            "",
            f"1..{status.total}",
            f"# tests {status.total}",
            f"# pass {status.pass_count}",
        ]
        if status.skip_count > 0:
            lines.append(f"# skip {status.skip_count}")
        if status.todo_count > 0:
            lines.append(f"# todo {status.todo_count}")
        lines.append(f"# fail {status.fail_total}")
        lines.append("")

        return "\n".join(lines)

    def write(self, line: str) -> None:
        """Write rendered text to the TAP stream."""
        self._sink.write_line(line)

    def stdout(self, chunk: str) -> None:
        """Forward stdout of the tested process to the diagnostic stream.

        Kept off the TAP stream so consumers can still parse it.
        """
        self._sink.write_raw(chunk)

    def stderr(self, chunk: str) -> None:
        """Forward stderr of the tested process to the diagnostic stream."""
        self.stdout(chunk)

    def _is_internal_error(self, error: ErrorInfo) -> bool:
        """Framework-level exception without a usable stack."""
        return error.kind is ErrorKind.EXCEPTION and error.name in self._config.internal_error_names

    def _yaml_block(self, error: ErrorInfo, *, include_message: bool) -> str:
        return render_yaml_block(
            error,
            include_message=include_message,
            extractor=self._config.stack_extractor,
        )
