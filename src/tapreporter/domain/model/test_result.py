"""Outcome of a single completed test."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tapreporter.domain.model.error_info import ErrorInfo


@dataclass(frozen=True, slots=True)
class TestResult:
    """One completed test, rendered once and discarded.

    Attributes:
        title: Test title, may contain ANSI color sequences.
        todo: Test is marked as not implemented yet.
        skip: Test was skipped.
        error: Failure diagnostics. Presence means failure.
    """

    __test__ = False

    title: str
    todo: bool = False
    skip: bool = False
    error: ErrorInfo | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.title, str):
            raise TypeError(f"title must be str, got {type(self.title).__name__}")

    @property
    def passed(self) -> bool:
        """Test passed: no error attached."""
        return self.error is None
