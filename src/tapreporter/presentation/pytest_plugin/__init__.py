"""pytest plugin for tapreporter.

Replaces pytest's terminal progress output with TAP version 13.

Configuration (command line, pytest.ini or pyproject.toml):
    --tap: Enable TAP output for this run
    tap_output: Enable TAP output by default (ini, bool)
"""

from __future__ import annotations

import logging

import pytest

from tapreporter.application.reporters import TapReporter
from tapreporter.presentation.pytest_plugin.plugin import TapPlugin

log = logging.getLogger(__name__)

__all__ = ["TapPlugin"]


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register --tap flag and tap_output ini option."""
    group = parser.getgroup("tap", "TAP version 13 output")
    group.addoption(
        "--tap",
        action="store_true",
        dest="tap",
        default=False,
        help="report results as TAP version 13 instead of terminal progress",
    )
    parser.addini(
        "tap_output",
        type="bool",
        default=False,
        help="report results as TAP version 13 by default",
    )


@pytest.hookimpl(trylast=True)
def pytest_configure(config: pytest.Config) -> None:
    """Swap the terminal reporter for the TAP plugin when enabled.

    trylast: the terminal reporter registers in its own pytest_configure.
    """
    if not (config.getoption("tap") or config.getini("tap_output")):
        return

    terminal = config.pluginmanager.getplugin("terminalreporter")
    if terminal is not None:
        config.pluginmanager.unregister(terminal)

    config.pluginmanager.register(TapPlugin(TapReporter()), "tapreporter-plugin")
    log.debug("TAP output enabled")
