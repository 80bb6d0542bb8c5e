# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Lightweight, embeddable logging for the HDFS native client.

Call sites build leveled, component-tagged messages. A ``LogManager``
decides once per message whether it is worth formatting and hands accepted
messages to a single pluggable sink: a console writer, a callback that
forwards records across a plugin boundary, or an in-memory sink for tests.

Example:
    >>> from hdfspp_logging import (
    ...     CapturingSink, LogComponent, LogLevel, LogManager, LogMessage,
    ... )
    >>> manager = LogManager(CapturingSink())
    >>> manager.set_level(LogLevel.WARNING)
    >>> with LogMessage(LogLevel.ERROR, LogComponent.RPC, manager=manager) as msg:
    ...     msg.text("call failed, retries=").int32(3)
"""

__version__ = "0.1.0"

from .cancelable import CancelHandle, Cancelable, NullCancelable
from .capturing_sink import CapturingSink
from .config import LoggingConfig, configure_logging, create_sink
from .console_sink import ConsoleSink
from .exceptions import LoggingConfigError, LoggingError
from .forwarding_sink import CallbackForwardingSink, ForwardedRecord, LogCallback
from .levels import ALL_COMPONENTS_MASK, LogComponent, LogLevel
from .manager import LogManager, get_log_manager, set_default_manager
from .message import (
    LogMessage,
    log_debug,
    log_error,
    log_info,
    log_message,
    log_trace,
    log_warn,
)
from .sink import LogSink

__all__ = [
    "__version__",
    "ALL_COMPONENTS_MASK",
    "CallbackForwardingSink",
    "CancelHandle",
    "Cancelable",
    "CapturingSink",
    "ConsoleSink",
    "ForwardedRecord",
    "LogCallback",
    "LogComponent",
    "LogLevel",
    "LogManager",
    "LogMessage",
    "LogSink",
    "LoggingConfig",
    "LoggingConfigError",
    "LoggingError",
    "NullCancelable",
    "configure_logging",
    "create_sink",
    "get_log_manager",
    "log_debug",
    "log_error",
    "log_info",
    "log_message",
    "log_trace",
    "log_warn",
    "set_default_manager",
]
