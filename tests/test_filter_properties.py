# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Property-based tests for sink filtering.

Hypothesis generates thresholds, masks, and message attributes and checks
that delivery always matches ``level >= threshold and component & mask``.
"""

from hypothesis import given, settings, strategies as st

from hdfspp_logging import (
    ALL_COMPONENTS_MASK,
    CapturingSink,
    LogComponent,
    LogLevel,
    LogManager,
    LogMessage,
)

levels = st.sampled_from(list(LogLevel))
components = st.sampled_from(list(LogComponent))
masks = st.integers(min_value=0, max_value=ALL_COMPONENTS_MASK)


def _manager_with(threshold: LogLevel, mask: int) -> tuple[LogManager, CapturingSink]:
    sink = CapturingSink()
    sink.disable_component(ALL_COMPONENTS_MASK)
    sink.enable_component(mask)
    sink.set_level(threshold)
    return LogManager(sink), sink


@given(threshold=levels, mask=masks, level=levels, component=components)
@settings(max_examples=300)
def test_delivery_matches_filter(threshold, mask, level, component) -> None:
    """Test that a message is delivered iff it passes level and mask."""
    manager, sink = _manager_with(threshold, mask)

    with LogMessage(level, component, manager=manager) as msg:
        msg.text("m")

    expected = level >= threshold and (int(component) & mask) != 0
    assert (len(sink.records) == 1) == expected
    assert msg.worth_reporting == expected


@given(threshold=levels, level=levels, component=components, values=st.lists(st.integers()))
@settings(max_examples=100)
def test_suppressed_messages_stay_empty(threshold, level, component, values) -> None:
    """Test that a suppressed message never accumulates text."""
    manager, sink = _manager_with(threshold, 0)

    with LogMessage(level, component, manager=manager) as msg:
        for value in values:
            msg.int64(value).text("x").append(value)

    assert msg.msg_string() == ""
    assert sink.records == []


@given(text=st.text())
@settings(max_examples=100)
def test_text_round_trip(text: str) -> None:
    """Test that accepted text reaches the sink unchanged."""
    manager, sink = _manager_with(LogLevel.TRACE, ALL_COMPONENTS_MASK)

    with LogMessage(LogLevel.ERROR, LogComponent.RPC, manager=manager) as msg:
        msg.text(text)

    assert sink.messages() == [text]


@given(mask=masks, component=components)
@settings(max_examples=100)
def test_enable_disable_are_inverse(mask, component) -> None:
    """Test that enabling then disabling a bit only clears that bit."""
    sink = CapturingSink()
    sink.disable_component(ALL_COMPONENTS_MASK)
    sink.enable_component(mask)

    sink.enable_component(component)
    assert sink.component_mask & int(component)

    sink.disable_component(component)
    assert sink.component_mask == mask & ~int(component)
