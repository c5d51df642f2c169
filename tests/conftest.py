"""Shared fixtures."""

from __future__ import annotations

import io

import pytest

from guardlint.logging import GuardlintLogger, LogLevel, get_logger, set_logger


@pytest.fixture
def logger():
    """A TRACE-level logger writing to a buffer, installed as the global logger."""
    previous = get_logger()
    captured = GuardlintLogger(level=LogLevel.TRACE, color=False, stream=io.StringIO())
    set_logger(captured)
    yield captured
    set_logger(previous)
