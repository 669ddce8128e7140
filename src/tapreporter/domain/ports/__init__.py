"""Ports: contracts for collaborators outside the formatting core."""

from tapreporter.domain.ports.sink import OutputSinkProtocol
from tapreporter.domain.ports.stack import StackExtractorProtocol

__all__ = [
    "OutputSinkProtocol",
    "StackExtractorProtocol",
]
