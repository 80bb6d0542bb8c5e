# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Abstract sink interface."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from .exceptions import LoggingConfigError
from .levels import ALL_COMPONENTS_MASK, LogLevel

if TYPE_CHECKING:
    from .message import LogMessage


class LogSink(ABC):
    """Abstract base class for log sinks.

    A sink owns its filter state: a minimum level and a mask of enabled
    components. The filter operations are plain integer checks shared by
    every sink and are not meant to be overridden; only ``write`` (and
    optionally ``close``) vary between implementations.

    Sinks are not thread-safe on their own. The manager that owns a sink
    serializes every call into it.
    """

    def __init__(self) -> None:
        self._component_mask: int = ALL_COMPONENTS_MASK
        self._level_threshold: int = int(LogLevel.TRACE)

    @property
    def level_threshold(self) -> LogLevel:
        """Minimum level this sink accepts."""
        return LogLevel(self._level_threshold)

    @property
    def component_mask(self) -> int:
        """Bitwise OR of the enabled component bits."""
        return self._component_mask

    def should_accept(self, level: int, component: int) -> bool:
        """Return True if a message with this level and component is worth formatting."""
        if int(level) < self._level_threshold:
            return False
        if not (int(component) & self._component_mask):
            return False
        return True

    def enable_component(self, component: int) -> None:
        self._component_mask = (self._component_mask | int(component)) & ALL_COMPONENTS_MASK

    def disable_component(self, component: int) -> None:
        self._component_mask &= ~int(component) & ALL_COMPONENTS_MASK

    def set_level(self, level: int) -> None:
        """Replace the minimum accepted level.

        Raises:
            LoggingConfigError: If level is not a LogLevel value
        """
        try:
            self._level_threshold = int(LogLevel(level))
        except (TypeError, ValueError) as exc:
            raise LoggingConfigError(f"Invalid log level: {level!r}") from exc

    @abstractmethod
    def write(self, message: "LogMessage") -> None:
        """Output a finished, accepted message.

        Args:
            message: The message to output
        """
        pass

    def close(self) -> None:
        """Release resources held by the sink.

        Called once when the sink is replaced. The default does nothing.
        """
        pass
