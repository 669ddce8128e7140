"""Stream-backed output sink."""

from __future__ import annotations

import sys
from typing import TextIO


class StreamSink:
    """Output sink writing to text streams.

    TAP lines go to out (default: sys.stdout), raw diagnostic
    chunks go to err (default: sys.stderr) unchanged.
    Streams are resolved at write time so captured/redirected
    sys.stdout is honored.
    """

    def __init__(self, out: TextIO | None = None, err: TextIO | None = None) -> None:
        """Initialize sink.

        Args:
            out: Stream for TAP lines (default: sys.stdout)
            err: Stream for diagnostic chunks (default: sys.stderr)
        """
        self._out = out
        self._err = err

    def write_line(self, line: str) -> None:
        """Write line followed by newline to the TAP stream."""
        out = self._out if self._out is not None else sys.stdout
        print(line, file=out)

    def write_raw(self, chunk: str) -> None:
        """Write chunk as-is to the diagnostic stream."""
        err = self._err if self._err is not None else sys.stderr
        err.write(chunk)
        err.flush()
