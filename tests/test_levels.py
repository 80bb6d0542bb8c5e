# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Tests for levels, components, and name parsing."""

import pytest

from hdfspp_logging import ALL_COMPONENTS_MASK, LogComponent, LogLevel, LoggingConfigError
from hdfspp_logging.levels import (
    component_tag,
    level_tag,
    parse_component,
    parse_component_mask,
    parse_level,
)


class TestEnumerations:
    """Tests for the level and component values."""

    def test_levels_are_ordered(self):
        assert LogLevel.TRACE < LogLevel.DEBUG < LogLevel.INFO < LogLevel.WARNING < LogLevel.ERROR
        assert [int(level) for level in LogLevel] == [0, 1, 2, 3, 4]

    def test_components_are_distinct_bits(self):
        values = [int(c) for c in LogComponent]

        assert values == [1, 2, 4, 8, 16]
        for value in values:
            assert value & ALL_COMPONENTS_MASK == value


class TestTags:
    """Tests for console tags."""

    def test_level_tags(self):
        assert [level_tag(level) for level in LogLevel] == [
            "[TRACE ]",
            "[DEBUG ]",
            "[INFO  ]",
            "[WARN  ]",
            "[ERROR ]",
        ]

    def test_component_tags(self):
        assert component_tag(LogComponent.RPC) == "[RPC         ]"
        assert component_tag(LogComponent.BLOCK_READER) == "[BlockReader ]"
        assert component_tag(LogComponent.FILE_HANDLE) == "[FileHandle  ]"

    def test_combined_component_renders_unknown(self):
        assert component_tag(LogComponent.RPC | LogComponent.FILE_SYSTEM) == "[Unknown     ]"


class TestParsing:
    """Tests for parsing configuration names."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("trace", LogLevel.TRACE),
            ("DEBUG", LogLevel.DEBUG),
            (" Info ", LogLevel.INFO),
            ("warn", LogLevel.WARNING),
            ("WARNING", LogLevel.WARNING),
            ("error", LogLevel.ERROR),
        ],
    )
    def test_parse_level(self, name, expected):
        assert parse_level(name) == expected

    def test_parse_invalid_level(self):
        with pytest.raises(LoggingConfigError, match="Invalid log level"):
            parse_level("LOUD")

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("rpc", LogComponent.RPC),
            ("BlockReader", LogComponent.BLOCK_READER),
            ("BLOCK_READER", LogComponent.BLOCK_READER),
            ("file-handle", LogComponent.FILE_HANDLE),
            ("FileSystem", LogComponent.FILE_SYSTEM),
            ("unknown", LogComponent.UNKNOWN),
        ],
    )
    def test_parse_component(self, name, expected):
        assert parse_component(name) == expected

    def test_parse_invalid_component(self):
        """Test that the error is also a ValueError."""
        with pytest.raises(ValueError, match="Unknown log component"):
            parse_component("datanode")

    def test_parse_mask(self):
        assert parse_component_mask(["rpc", "filesystem"]) == int(
            LogComponent.RPC | LogComponent.FILE_SYSTEM
        )
        assert parse_component_mask(["all"]) == ALL_COMPONENTS_MASK
        assert parse_component_mask([]) == 0
