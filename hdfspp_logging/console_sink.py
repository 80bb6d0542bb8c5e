# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Console sink that writes one line per message to stderr."""

import sys
import threading
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Optional, TextIO

from .levels import component_tag, level_tag
from .sink import LogSink

if TYPE_CHECKING:
    from .message import LogMessage


class ConsoleSink(LogSink):
    """Sink that writes human-readable lines to the error stream.

    Output format (each prefix can be switched off):

        [INFO  ][RPC         ][2025-01-01T12:00:00.000000Z][Thread id = 1234]    message text

    The sink does no locking of its own; the owning manager serializes
    writes so lines from different threads never interleave.
    """

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        show_timestamp: bool = True,
        show_level: bool = True,
        show_thread: bool = True,
        show_component: bool = True,
    ):
        """Initialize console sink.

        Args:
            stream: Stream to write to (default: sys.stderr, looked up on every write)
            show_timestamp: Prefix each line with a UTC timestamp
            show_level: Prefix each line with the level tag
            show_thread: Prefix each line with the writing thread's id
            show_component: Prefix each line with the component tag
        """
        super().__init__()
        self._stream = stream
        self.show_timestamp = show_timestamp
        self.show_level = show_level
        self.show_thread = show_thread
        self.show_component = show_component

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stderr

    def set_show_timestamp(self, show: bool) -> None:
        self.show_timestamp = show

    def set_show_level(self, show: bool) -> None:
        self.show_level = show

    def set_show_thread(self, show: bool) -> None:
        self.show_thread = show

    def set_show_component(self, show: bool) -> None:
        self.show_component = show

    def format(self, message: "LogMessage") -> str:
        """Render a message as a single line without the trailing newline."""
        prefix = []
        if self.show_level:
            prefix.append(level_tag(message.level))
        if self.show_component:
            prefix.append(component_tag(message.component))
        if self.show_timestamp:
            timestamp = datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
            prefix.append(f"[{timestamp}]")
        if self.show_thread:
            prefix.append(f"[Thread id = {threading.get_ident()}]")
        return f"{''.join(prefix)}    {message.msg_string()}"

    def write(self, message: "LogMessage") -> None:
        if not message.worth_reporting:
            return
        stream = self.stream
        stream.write(self.format(message) + "\n")
        stream.flush()

    def close(self) -> None:
        self.stream.flush()
