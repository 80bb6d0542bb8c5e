# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Thread-safe dispatch of log messages to a single active sink."""

import logging
import threading
from typing import TYPE_CHECKING, Optional

from .console_sink import ConsoleSink
from .levels import LogComponent, LogLevel
from .sink import LogSink

if TYPE_CHECKING:
    from .message import LogMessage

logger = logging.getLogger(__name__)


class LogManager:
    """Switchboard between log call sites and the active sink.

    Every operation takes the same lock, so filter checks, writes, filter
    changes and sink replacement are totally ordered across threads. The
    manager exclusively owns its sink; nothing else should keep a reference
    to it after installation.

    If no sink is installed, logging is a silent no-op.

    The lock is not re-entrant. Messages built by a sink while it is
    writing (for example from a forwarding callback that logs through the
    same manager) are never worth reporting, so they do not deadlock.
    Calling configuration methods from inside a sink still does.
    """

    def __init__(self, sink: Optional[LogSink] = None):
        """Initialize the manager.

        Args:
            sink: Sink to install (default: a new ConsoleSink)
        """
        self._lock = threading.Lock()
        self._dispatch = threading.local()
        self._sink: Optional[LogSink] = sink if sink is not None else ConsoleSink()

    @classmethod
    def without_sink(cls) -> "LogManager":
        """Create a manager with no sink installed."""
        manager = cls.__new__(cls)
        manager._lock = threading.Lock()
        manager._dispatch = threading.local()
        manager._sink = None
        return manager

    @property
    def has_sink(self) -> bool:
        with self._lock:
            return self._sink is not None

    def should_log(self, level: LogLevel, component: LogComponent) -> bool:
        """Return True if the active sink would accept this level and component."""
        if getattr(self._dispatch, "writing", False):
            return False
        with self._lock:
            if self._sink is None:
                return False
            return self._sink.should_accept(level, component)

    def write(self, message: "LogMessage") -> None:
        """Hand a finished message to the active sink.

        Messages that were not worth reporting at construction are ignored.
        Failures inside the sink are reported through stdlib logging and
        never reach the caller.
        """
        if not message.worth_reporting:
            return
        with self._lock:
            if self._sink is None:
                return
            self._dispatch.writing = True
            try:
                self._sink.write(message)
            except Exception as e:
                logger.warning(f"Log sink {type(self._sink).__name__} failed to write message: {e}")
            finally:
                self._dispatch.writing = False

    def enable_component(self, component: LogComponent) -> None:
        with self._lock:
            if self._sink is not None:
                self._sink.enable_component(component)

    def disable_component(self, component: LogComponent) -> None:
        with self._lock:
            if self._sink is not None:
                self._sink.disable_component(component)

    def set_level(self, level: LogLevel) -> None:
        with self._lock:
            if self._sink is not None:
                self._sink.set_level(level)

    def install_sink(self, sink: Optional[LogSink]) -> None:
        """Replace the active sink.

        The old sink is closed and the new one installed while holding the
        lock, so no message is delivered to a half-replaced sink. Passing
        None uninstalls the current sink.

        Args:
            sink: New sink, or None to disable logging
        """
        with self._lock:
            old_sink = self._sink
            self._sink = None
            if old_sink is not None:
                try:
                    old_sink.close()
                except Exception as e:
                    logger.warning(f"Failed to close log sink {type(old_sink).__name__}: {e}")
            self._sink = sink
        logger.debug(
            "Installed log sink %s",
            type(sink).__name__ if sink is not None else None,
        )


_default_manager: Optional[LogManager] = None
_default_manager_lock = threading.Lock()


def get_log_manager() -> LogManager:
    """Get the process-wide manager, creating it with a console sink on first use.

    Returns:
        The default LogManager
    """
    global _default_manager
    with _default_manager_lock:
        if _default_manager is None:
            _default_manager = LogManager()
        return _default_manager


def set_default_manager(manager: Optional[LogManager]) -> None:
    """Set the process-wide manager returned by get_log_manager().

    Passing None discards the current default; the next get_log_manager()
    call creates a fresh one.

    Args:
        manager: Manager to use as the process-wide default
    """
    global _default_manager
    with _default_manager_lock:
        _default_manager = manager
