# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Tests for cancellation handles."""

from unittest.mock import MagicMock

import pytest

from hdfspp_logging import CancelHandle, Cancelable, NullCancelable


def test_cancelable_is_abstract():
    with pytest.raises(TypeError):
        Cancelable()


def test_null_cancelable_does_nothing():
    NullCancelable().cancel()


def test_cancel_handle_delegates():
    """Test that the handle forwards cancel() to its target."""
    target = MagicMock(spec=Cancelable)
    handle = CancelHandle(target)

    handle.cancel()
    handle.cancel()

    assert target.cancel.call_count == 2
