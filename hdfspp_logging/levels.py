# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Log levels and source components."""

from enum import IntEnum, IntFlag

from .exceptions import LoggingConfigError


class LogLevel(IntEnum):
    """Ordered severity of a log message.

    Comparison is numeric: TRACE < DEBUG < INFO < WARNING < ERROR.
    """

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARNING = 3
    ERROR = 4


class LogComponent(IntFlag):
    """Subsystem that produced a message.

    Each component is a distinct bit so that a sink can enable any set of
    them at once. A message itself carries exactly one component.
    """

    UNKNOWN = 1 << 0
    RPC = 1 << 1
    BLOCK_READER = 1 << 2
    FILE_HANDLE = 1 << 3
    FILE_SYSTEM = 1 << 4


# Masks are 32 bits wide; a fresh sink accepts everything.
ALL_COMPONENTS_MASK = 0xFFFFFFFF

_LEVEL_TAGS = {
    LogLevel.TRACE: "[TRACE ]",
    LogLevel.DEBUG: "[DEBUG ]",
    LogLevel.INFO: "[INFO  ]",
    LogLevel.WARNING: "[WARN  ]",
    LogLevel.ERROR: "[ERROR ]",
}

_COMPONENT_TAGS = {
    LogComponent.UNKNOWN: "[Unknown     ]",
    LogComponent.RPC: "[RPC         ]",
    LogComponent.BLOCK_READER: "[BlockReader ]",
    LogComponent.FILE_HANDLE: "[FileHandle  ]",
    LogComponent.FILE_SYSTEM: "[FileSystem  ]",
}

_COMPONENT_DISPLAY_NAMES = {
    "unknown": LogComponent.UNKNOWN,
    "rpc": LogComponent.RPC,
    "blockreader": LogComponent.BLOCK_READER,
    "filehandle": LogComponent.FILE_HANDLE,
    "filesystem": LogComponent.FILE_SYSTEM,
}


def level_tag(level: int) -> str:
    """Return the fixed-width console tag for a level."""
    try:
        return _LEVEL_TAGS[LogLevel(level)]
    except (TypeError, ValueError):
        return f"[{level!s:<6}]"


def component_tag(component: int) -> str:
    """Return the fixed-width console tag for a component.

    Anything that is not exactly one known component renders as Unknown.
    """
    for known, tag in _COMPONENT_TAGS.items():
        if component == known:
            return tag
    return _COMPONENT_TAGS[LogComponent.UNKNOWN]


def parse_level(name: str) -> LogLevel:
    """Parse a level name such as ``"info"`` or ``"WARN"``.

    Raises:
        LoggingConfigError: If the name is not a known level
    """
    normalized = name.strip().upper()
    if normalized == "WARN":
        normalized = "WARNING"
    try:
        return LogLevel[normalized]
    except KeyError as exc:
        raise LoggingConfigError(
            f"Invalid log level: {name}. Must be one of {[lvl.name for lvl in LogLevel]}"
        ) from exc


def parse_component(name: str) -> LogComponent:
    """Parse a component name.

    Accepts enum names (``BLOCK_READER``) and display names (``BlockReader``)
    in any case.

    Raises:
        LoggingConfigError: If the name is not a known component
    """
    key = name.strip().lower().replace("_", "").replace("-", "")
    try:
        return _COMPONENT_DISPLAY_NAMES[key]
    except KeyError as exc:
        raise LoggingConfigError(
            f"Unknown log component: {name}. "
            f"Must be one of: {', '.join(c.name for c in LogComponent)}"
        ) from exc


def parse_component_mask(names: list[str]) -> int:
    """Build a component mask from a list of names; ``"all"`` enables every bit."""
    mask = 0
    for name in names:
        if name.strip().lower() == "all":
            return ALL_COMPONENTS_MASK
        if not name.strip():
            continue
        mask |= int(parse_component(name))
    return mask
