# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Capturing sink implementation for testing."""

from typing import TYPE_CHECKING, Optional

from .forwarding_sink import ForwardedRecord
from .sink import LogSink

if TYPE_CHECKING:
    from .message import LogMessage


class CapturingSink(LogSink):
    """Sink that stores accepted messages in memory without output.

    Useful for testing to verify logging behavior without cluttering test
    output. Unlike the console sink it still honors the filter state, so
    tests can assert exactly which messages got through.
    """

    def __init__(self) -> None:
        super().__init__()
        self.records: list[ForwardedRecord] = []

    def write(self, message: "LogMessage") -> None:
        if not message.worth_reporting:
            return
        self.records.append(
            ForwardedRecord(
                level=int(message.level),
                component=int(message.component),
                message=message.msg_string(),
            )
        )

    def clear(self) -> None:
        """Clear all stored records (useful for testing)."""
        self.records.clear()

    def get_records(
        self, level: Optional[int] = None, component: Optional[int] = None
    ) -> list[ForwardedRecord]:
        """Get stored records, optionally filtered by level and/or component.

        Args:
            level: Only return records at exactly this level
            component: Only return records tagged with this component

        Returns:
            List of records in delivery order
        """
        return [
            record
            for record in self.records
            if (level is None or record.level == int(level))
            and (component is None or record.component == int(component))
        ]

    def count(self, level: Optional[int] = None, component: Optional[int] = None) -> int:
        return len(self.get_records(level=level, component=component))

    def messages(self) -> list[Optional[str]]:
        return [record.message for record in self.records]

    def has_message(self, text: str, level: Optional[int] = None) -> bool:
        """Check if a message containing the given text was captured.

        Args:
            text: Text to search for (substring match)
            level: Optional level to filter by

        Returns:
            True if found, False otherwise
        """
        return any(
            record.message is not None and text in record.message
            for record in self.get_records(level=level)
        )
