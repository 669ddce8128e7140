"""Diagnostic payload of a failure."""

from __future__ import annotations

import traceback
from dataclasses import dataclass
from enum import Enum


class ErrorKind(Enum):
    """How an unhandled error surfaced during the run."""

    EXCEPTION = "exception"
    REJECTION = "rejection"


@dataclass(frozen=True, slots=True)
class ErrorInfo:
    """Failure diagnostics attached to a test or reported on its own.

    Every field is optional and rendered independently.
    actual/expected are typed object: only str values are rendered,
    and the empty string is a value, not absence.

    Attributes:
        name: Error type name (e.g. "AssertionError").
        message: Human-readable message.
        operator: Comparison operator of a failed assertion.
        actual: Actual value of a failed comparison.
        expected: Expected value of a failed comparison.
        stack: Raw traceback text.
        kind: How an unhandled error surfaced. None for test failures.
    """

    name: str | None = None
    message: str | None = None
    operator: str | None = None
    actual: object = None
    expected: object = None
    stack: str | None = None
    kind: ErrorKind | None = None

    @classmethod
    def from_exception(
        cls,
        exc: BaseException,
        *,
        kind: ErrorKind | None = None,
    ) -> ErrorInfo:
        """Build diagnostics from a raised exception.

        operator/actual/expected are copied from same-named attributes
        when the exception carries them (assertion libraries do).

        Args:
            exc: Exception instance.
            kind: How the error surfaced, for unhandled errors.

        Returns:
            ErrorInfo with name, message and formatted traceback.
        """
        operator = getattr(exc, "operator", None)
        return cls(
            name=type(exc).__name__,
            message=str(exc),
            operator=operator if isinstance(operator, str) else None,
            actual=getattr(exc, "actual", None),
            expected=getattr(exc, "expected", None),
            stack="".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
            kind=kind,
        )
