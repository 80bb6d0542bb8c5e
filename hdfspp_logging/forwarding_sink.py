# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Sink that forwards messages to a host-supplied callback.

The callback lives on the other side of a plugin boundary: it may be
replaced at any time and may want to keep message data after the log call
has returned. Each message is therefore converted into a plain
``ForwardedRecord`` that carries no reference back to the message or the
manager.

Ownership rules for receivers:

- The record passed to the callback is only valid for the duration of the
  call. The sink zeroes it as soon as the callback returns.
- To keep the data, call ``CallbackForwardingSink.copy_record`` inside the
  callback. The copy belongs to the receiver, who must release it with
  ``CallbackForwardingSink.free_record`` exactly once.
- The callback runs while the manager's lock is held. Messages it builds
  through the same manager are dropped, and it must not call the
  manager's configuration methods (``set_level``, ``install_sink``, ...),
  which would deadlock.
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional

from .sink import LogSink

if TYPE_CHECKING:
    from .message import LogMessage

logger = logging.getLogger(__name__)


@dataclass
class ForwardedRecord:
    """Plain, independently owned copy of a message's data.

    Attributes:
        level: Numeric log level
        component: Numeric component bit
        message: Message text; None once the record has been freed
    """
    level: int
    component: int
    message: Optional[str]

    @property
    def is_freed(self) -> bool:
        return self.level == 0 and self.component == 0 and self.message is None


LogCallback = Callable[[ForwardedRecord], None]


class CallbackForwardingSink(LogSink):
    """Sink that hands each accepted message to a callback as a ForwardedRecord.

    With no callback registered, writes are silently dropped.
    """

    def __init__(self, callback: Optional[LogCallback] = None):
        """Initialize forwarding sink.

        Args:
            callback: Function receiving a ForwardedRecord per message
        """
        super().__init__()
        self._callback = callback

    @property
    def callback(self) -> Optional[LogCallback]:
        return self._callback

    def set_callback(self, callback: Optional[LogCallback]) -> None:
        """Register the receiving callback; None clears it."""
        self._callback = callback

    def write(self, message: "LogMessage") -> None:
        if not message.worth_reporting:
            return

        callback = self._callback
        if callback is None:
            return

        record = ForwardedRecord(
            level=int(message.level),
            component=int(message.component),
            message=message.msg_string(),
        )
        try:
            callback(record)
        except Exception as e:
            logger.warning(f"Log callback raised an exception: {e}")
        finally:
            self.free_record(record)

    @staticmethod
    def copy_record(record: Optional[ForwardedRecord]) -> Optional[ForwardedRecord]:
        """Deep-copy a record for a receiver that needs it beyond the callback.

        Args:
            record: Record to copy

        Returns:
            A new record owned by the caller, or None if record is None or
            the copy could not be allocated
        """
        if record is None:
            return None
        # str is immutable, so sharing the text keeps the copy independent.
        try:
            return ForwardedRecord(
                level=record.level, component=record.component, message=record.message
            )
        except MemoryError:
            return None

    @staticmethod
    def free_record(record: Optional[ForwardedRecord]) -> None:
        """Release a record, zeroing it so later use is detectable.

        Args:
            record: Record to release; None is ignored
        """
        if record is None:
            return
        record.message = None
        record.level = 0
        record.component = 0
