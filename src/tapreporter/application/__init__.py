"""tapreporter application layer."""

from tapreporter.application.reporters import ReporterProtocol, TapConfig, TapReporter
from tapreporter.application.sequencer import Sequencer

__all__ = [
    "ReporterProtocol",
    "Sequencer",
    "TapConfig",
    "TapReporter",
]
