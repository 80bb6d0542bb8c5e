# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Cancellation handles used alongside the logging facility."""

from abc import ABC, abstractmethod


class Cancelable(ABC):
    """Something whose pending work can be cancelled."""

    @abstractmethod
    def cancel(self) -> None:
        pass


class NullCancelable(Cancelable):
    """Cancelable that does nothing."""

    def cancel(self) -> None:
        pass


class CancelHandle(Cancelable):
    """Handle that forwards cancel() to a shared target."""

    def __init__(self, target: Cancelable):
        self._target = target

    def cancel(self) -> None:
        self._target.cancel()
