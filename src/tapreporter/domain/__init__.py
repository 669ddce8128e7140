"""tapreporter domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, dataclasses, enum, traceback
"""

from tapreporter.domain.model import ErrorInfo, ErrorKind, RunStatus, TestResult
from tapreporter.domain.ports import OutputSinkProtocol, StackExtractorProtocol

__all__ = [
    # Value objects
    "ErrorInfo",
    "ErrorKind",
    "RunStatus",
    "TestResult",
    # Ports
    "OutputSinkProtocol",
    "StackExtractorProtocol",
]
