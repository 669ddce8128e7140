"""Aggregate counts of a finished run."""

from __future__ import annotations

from dataclasses import dataclass, fields


@dataclass(frozen=True, slots=True)
class RunStatus:
    """Final counts supplied by the test runner.

    Immutable value object, read once to render the plan and footer.

    Attributes:
        pass_count: Tests that passed
        fail_count: Tests that failed
        skip_count: Tests that were skipped
        rejection_count: Unhandled rejections outside any test
        exception_count: Unhandled exceptions outside any test
        todo_count: Tests marked as todo
    """

    pass_count: int
    fail_count: int
    skip_count: int
    rejection_count: int
    exception_count: int
    todo_count: int = 0

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for field in fields(self):
            value = getattr(self, field.name)
            if value < 0:
                raise ValueError(f"{field.name} must be >= 0, got {value}")

    @property
    def total(self) -> int:
        """Number of tests declared by the plan line."""
        return self.pass_count + self.fail_count + self.skip_count + self.todo_count

    @property
    def fail_total(self) -> int:
        """Failures including unhandled rejections and exceptions."""
        return self.fail_count + self.rejection_count + self.exception_count

    @classmethod
    def empty(cls) -> RunStatus:
        """Create run status for a run with no tests."""
        return cls(
            pass_count=0,
            fail_count=0,
            skip_count=0,
            rejection_count=0,
            exception_count=0,
        )
