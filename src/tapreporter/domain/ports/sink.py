"""Output sink protocol: where rendered TAP goes."""

from __future__ import annotations

from typing import Protocol


class OutputSinkProtocol(Protocol):
    """Contract for output sinks.

    Two independent channels: TAP lines on the primary channel,
    raw diagnostic chunks forwarded as-is on the secondary one.

    Example:
        class ListSink:
            def __init__(self) -> None:
                self.lines: list[str] = []

            def write_line(self, line: str) -> None:
                self.lines.append(line)

            def write_raw(self, chunk: str) -> None:
                pass
    """

    def write_line(self, line: str) -> None:
        """Write one line of text to the primary channel.

        Args:
            line: Text without trailing newline.
        """
        ...

    def write_raw(self, chunk: str) -> None:
        """Write a chunk unchanged to the diagnostic channel.

        Args:
            chunk: Raw text, written as-is.
        """
        ...
