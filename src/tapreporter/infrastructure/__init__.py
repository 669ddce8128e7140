"""Infrastructure: collaborators of the formatting core."""

from tapreporter.infrastructure.ansi import strip_ansi
from tapreporter.infrastructure.sinks import StreamSink
from tapreporter.infrastructure.stack import StackExtractor, extract_stack
from tapreporter.infrastructure.text import indent

__all__ = [
    "StackExtractor",
    "StreamSink",
    "extract_stack",
    "indent",
    "strip_ansi",
]
