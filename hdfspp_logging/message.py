# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Lazily built log messages.

A ``LogMessage`` asks its manager once, at construction, whether a message
with its level and component would be accepted. If not, every append is a
single branch and nothing is ever formatted or buffered. The finished text
is handed to the manager by ``finish()``, normally through the
context-manager protocol:

    >>> with LogMessage(LogLevel.INFO, LogComponent.RPC) as msg:
    ...     msg.text("sent call id ").int32(call_id)
"""

from typing import Any, Optional

from .levels import LogComponent, LogLevel, component_tag, level_tag
from .manager import LogManager, get_log_manager

_ADDRESS_MASK = (1 << 64) - 1


def _render_int(value: Any, bits: int, signed: bool) -> str:
    """Render an integer reduced to a fixed-width two's-complement value.

    Values that are not integers are rendered with str() instead.
    """
    try:
        number = int(value) & ((1 << bits) - 1)
    except (TypeError, ValueError):
        return str(value)
    if signed and number >= 1 << (bits - 1):
        number -= 1 << bits
    return str(number)


class LogMessage:
    """Short-lived accumulator for one log statement."""

    def __init__(
        self,
        level: LogLevel,
        component: LogComponent = LogComponent.UNKNOWN,
        *,
        manager: Optional[LogManager] = None,
    ):
        """Create a message and decide once whether it is worth reporting.

        Args:
            level: Severity of the message
            component: Subsystem the message belongs to
            manager: Manager to dispatch through (default: process-wide manager)
        """
        self._manager = manager if manager is not None else get_log_manager()
        try:
            self._level = LogLevel(level)
            self._component = LogComponent(component)
        except (TypeError, ValueError):
            # Unrecognized level or component: never reported
            self._level = level
            self._component = component
            self._worth_reporting = False
        else:
            self._worth_reporting = self._manager.should_log(self._level, self._component)
        self._parts: list[str] = []
        self._finished = False

    @property
    def level(self) -> LogLevel:
        return self._level

    @property
    def component(self) -> LogComponent:
        return self._component

    @property
    def worth_reporting(self) -> bool:
        return self._worth_reporting

    @property
    def finished(self) -> bool:
        return self._finished

    def level_string(self) -> str:
        return level_tag(self._level)

    def component_string(self) -> str:
        return component_tag(self._component)

    def msg_string(self) -> str:
        """Return the accumulated text, or an empty string if suppressed."""
        if self._worth_reporting:
            return "".join(self._parts)
        return ""

    def text(self, value: Optional[str]) -> "LogMessage":
        """Append text as-is; None appends nothing and other values use str()."""
        if self._worth_reporting and value is not None:
            self._parts.append(value if isinstance(value, str) else str(value))
        return self

    def boolean(self, value: bool) -> "LogMessage":
        """Append ``true`` or ``false``."""
        if self._worth_reporting:
            self._parts.append("true" if value else "false")
        return self

    def int32(self, value: int) -> "LogMessage":
        if self._worth_reporting:
            self._parts.append(_render_int(value, 32, signed=True))
        return self

    def uint32(self, value: int) -> "LogMessage":
        if self._worth_reporting:
            self._parts.append(_render_int(value, 32, signed=False))
        return self

    def int64(self, value: int) -> "LogMessage":
        if self._worth_reporting:
            self._parts.append(_render_int(value, 64, signed=True))
        return self

    def uint64(self, value: int) -> "LogMessage":
        if self._worth_reporting:
            self._parts.append(_render_int(value, 64, signed=False))
        return self

    def address(self, value: Any) -> "LogMessage":
        """Append an address as 16 hex digits.

        Integers are taken as raw addresses, None as zero, and any other
        object is identified by ``id()``.
        """
        if self._worth_reporting:
            if value is None:
                addr = 0
            elif isinstance(value, int) and not isinstance(value, bool):
                addr = value
            else:
                addr = id(value)
            self._parts.append(f"0x{addr & _ADDRESS_MASK:016x}")
        return self

    def append(self, value: Any) -> "LogMessage":
        """Append a value, choosing the rendering from its type."""
        if not self._worth_reporting or value is None:
            return self
        if isinstance(value, bool):
            return self.boolean(value)
        if isinstance(value, int):
            return self.int64(value)
        if isinstance(value, str):
            return self.text(value)
        self._parts.append(str(value))
        return self

    def finish(self) -> None:
        """Dispatch the message if it is worth reporting.

        Only the first call has any effect.
        """
        if self._finished:
            return
        self._finished = True
        if self._worth_reporting:
            self._manager.write(self)

    def __enter__(self) -> "LogMessage":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.finish()

    def __repr__(self) -> str:
        return (
            f"LogMessage(level={self._level!r}, component={self._component!r}, "
            f"worth_reporting={self._worth_reporting})"
        )


def log_message(
    level: LogLevel,
    component: LogComponent = LogComponent.UNKNOWN,
    origin: Any = None,
    *,
    manager: Optional[LogManager] = None,
) -> LogMessage:
    """Create a message, prefixed with ``[this=0x...] `` when an origin object is given.

    Example:
        >>> with log_message(LogLevel.DEBUG, LogComponent.FILE_HANDLE, self) as msg:
        ...     msg.text("read offset=").uint64(offset)
    """
    msg = LogMessage(level, component, manager=manager)
    if origin is not None:
        msg.text("[this=").address(origin).text("] ")
    return msg


def log_trace(origin: Any = None, *, manager: Optional[LogManager] = None) -> LogMessage:
    return log_message(LogLevel.TRACE, LogComponent.UNKNOWN, origin, manager=manager)


def log_debug(origin: Any = None, *, manager: Optional[LogManager] = None) -> LogMessage:
    return log_message(LogLevel.DEBUG, LogComponent.UNKNOWN, origin, manager=manager)


def log_info(origin: Any = None, *, manager: Optional[LogManager] = None) -> LogMessage:
    return log_message(LogLevel.INFO, LogComponent.UNKNOWN, origin, manager=manager)


def log_warn(origin: Any = None, *, manager: Optional[LogManager] = None) -> LogMessage:
    return log_message(LogLevel.WARNING, LogComponent.UNKNOWN, origin, manager=manager)


def log_error(origin: Any = None, *, manager: Optional[LogManager] = None) -> LogMessage:
    return log_message(LogLevel.ERROR, LogComponent.UNKNOWN, origin, manager=manager)
