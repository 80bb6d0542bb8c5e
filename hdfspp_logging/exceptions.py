# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Exceptions for logging configuration.

Only configuration surfaces raise these. Emitting a message never raises.
"""


class LoggingError(Exception):
    """Base exception for logging facility errors."""
    pass


class LoggingConfigError(LoggingError, ValueError):
    """Raised when a sink type, level, or component name is not recognized."""
    pass
