"""Stack extractor protocol."""

from __future__ import annotations

from typing import Protocol


class StackExtractorProtocol(Protocol):
    """Contract for stack-trace normalizers.

    Output is a cleaned multi-line string. The first line identifies
    the original (non-framework) call site.
    """

    def __call__(self, stack: str) -> str:
        """Normalize raw traceback text.

        Args:
            stack: Raw traceback text.

        Returns:
            Cleaned frames, most recent call first, one per line.
        """
        ...
