# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Configuration and factory functions for log sinks."""

import os
from dataclasses import dataclass, field
from typing import Callable, Mapping, Optional

from .capturing_sink import CapturingSink
from .console_sink import ConsoleSink
from .exceptions import LoggingConfigError
from .forwarding_sink import CallbackForwardingSink, LogCallback
from .levels import parse_component_mask, parse_level
from .manager import LogManager, get_log_manager
from .sink import LogSink


def _default(value: str | None, env_var: str, fallback: str) -> str:
    """Helper to pick an explicit value, then env var, then fallback."""
    return (value or os.getenv(env_var) or fallback)


@dataclass
class LoggingConfig:
    """Configuration for the active log sink.

    Attributes:
        sink_type: One of "console", "forwarding", "capturing", "none"
        level: Minimum level name (TRACE, DEBUG, INFO, WARNING, ERROR)
        components: Enabled component names, or ["all"]
        show_timestamp: Console only; prefix lines with a timestamp
        show_level: Console only; prefix lines with the level tag
        show_thread: Console only; prefix lines with the thread id
        show_component: Console only; prefix lines with the component tag
        callback: Forwarding only; receiver of forwarded records
    """
    sink_type: str = "console"
    level: str = "TRACE"
    components: list[str] = field(default_factory=lambda: ["all"])
    show_timestamp: bool = True
    show_level: bool = True
    show_thread: bool = True
    show_component: bool = True
    callback: Optional[LogCallback] = None

    @classmethod
    def from_env(
        cls,
        sink_type: str | None = None,
        level: str | None = None,
        components: str | None = None,
        callback: Optional[LogCallback] = None,
    ) -> "LoggingConfig":
        """Build a config from explicit values, then environment variables, then defaults.

        Environment variables:
            LOG_SINK: Sink type (default: console)
            LOG_LEVEL: Minimum level (default: TRACE)
            LOG_COMPONENTS: Comma-separated component names (default: all)

        Example:
            >>> config = LoggingConfig.from_env(level="WARNING", components="rpc,filesystem")
        """
        return cls(
            sink_type=_default(sink_type, "LOG_SINK", "console").lower(),
            level=_default(level, "LOG_LEVEL", "TRACE").upper(),
            components=[
                name.strip()
                for name in _default(components, "LOG_COMPONENTS", "all").split(",")
                if name.strip()
            ],
            callback=callback,
        )


def _build_console(config: LoggingConfig) -> LogSink:
    return ConsoleSink(
        show_timestamp=config.show_timestamp,
        show_level=config.show_level,
        show_thread=config.show_thread,
        show_component=config.show_component,
    )


def _build_forwarding(config: LoggingConfig) -> LogSink:
    return CallbackForwardingSink(callback=config.callback)


def _build_capturing(config: LoggingConfig) -> LogSink:
    return CapturingSink()


_SINK_DRIVERS: Mapping[str, Callable[[LoggingConfig], LogSink]] = {
    "console": _build_console,
    "forwarding": _build_forwarding,
    "capturing": _build_capturing,
}


def create_sink(config: LoggingConfig) -> Optional[LogSink]:
    """Create a sink from configuration and apply its filter settings.

    Args:
        config: Sink configuration

    Returns:
        Configured sink, or None for sink_type "none"

    Raises:
        LoggingConfigError: If the sink type, level, or a component is not recognized
    """
    if config is None:
        raise LoggingConfigError("logging config is required")

    sink_type = str(config.sink_type).lower()
    level = parse_level(config.level)
    mask = parse_component_mask(config.components)

    if sink_type == "none":
        return None
    try:
        factory = _SINK_DRIVERS[sink_type]
    except KeyError as exc:
        supported = ", ".join(sorted([*_SINK_DRIVERS.keys(), "none"]))
        raise LoggingConfigError(
            f"Unknown sink_type: {sink_type}. Supported sinks: {supported}"
        ) from exc

    sink = factory(config)
    sink.set_level(level)
    sink.disable_component(~0)
    sink.enable_component(mask)
    return sink


def configure_logging(
    config: Optional[LoggingConfig] = None,
    manager: Optional[LogManager] = None,
) -> LogManager:
    """Create a sink from configuration and install it.

    Args:
        config: Sink configuration (default: LoggingConfig.from_env())
        manager: Manager to configure (default: the process-wide manager)

    Returns:
        The configured manager

    Example:
        >>> configure_logging(LoggingConfig(sink_type="console", level="INFO"))
    """
    config = config if config is not None else LoggingConfig.from_env()
    manager = manager if manager is not None else get_log_manager()
    manager.install_sink(create_sink(config))
    return manager
