"""Ordinal sequencer for TAP result lines."""

from __future__ import annotations


class Sequencer:
    """Assigns 1-based ordinals to result lines.

    The only mutable state of a reporter. One instance per run,
    never shared. Not thread-safe: the driver serializes calls.
    """

    __slots__ = ("_count",)

    def __init__(self) -> None:
        self._count = 0

    @property
    def current(self) -> int:
        """Last ordinal handed out (0 before the first)."""
        return self._count

    def next_ordinal(self) -> int:
        """Advance the counter by one and return the new ordinal."""
        self._count += 1
        return self._count
