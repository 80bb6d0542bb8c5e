# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Test fixtures for the hdfspp_logging package."""

from __future__ import annotations

import pytest

from hdfspp_logging import (
    CapturingSink,
    LogComponent,
    LogLevel,
    LogManager,
    LogMessage,
    set_default_manager,
)


@pytest.fixture
def capturing_sink() -> CapturingSink:
    """A fresh capturing sink accepting every level and component."""
    return CapturingSink()


@pytest.fixture
def manager(capturing_sink: CapturingSink) -> LogManager:
    """An isolated manager dispatching to ``capturing_sink``."""
    return LogManager(capturing_sink)


@pytest.fixture(autouse=True)
def reset_default_manager():
    """Reset the process-wide manager before and after each test."""
    set_default_manager(None)
    yield
    set_default_manager(None)


@pytest.fixture
def log_all_components(manager: LogManager):
    """Return a helper that emits one message per component at a level."""

    def _log(level: LogLevel) -> None:
        for component, text in zip(LogComponent, "abcde"):
            with LogMessage(level, component, manager=manager) as msg:
                msg.text(text)

    return _log
