"""Reporters for test-run events.

Render methods return str. Callers write the result through
the reporter's output sink.
"""

from tapreporter.application.reporters.protocol import ReporterProtocol
from tapreporter.application.reporters.tap import TAP_VERSION, TapConfig, TapReporter
from tapreporter.application.reporters.yaml_block import render_yaml_block

__all__ = [
    "ReporterProtocol",
    "TAP_VERSION",
    "TapConfig",
    "TapReporter",
    "render_yaml_block",
]
