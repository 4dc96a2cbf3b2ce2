"""Cancellation context threaded through every SDK call."""

from __future__ import annotations

import threading
from typing import Optional


class Context:
    """Cancellable token passed to SDK operations.

    The mock completes every operation immediately; a cancelled context only
    suppresses observer notification.
    """

    def __init__(self):
        self._cancelled = threading.Event()

    @classmethod
    def background(cls) -> "Context":
        """Return a fresh, never-cancelled context."""
        return cls()

    def cancel(self) -> None:
        """Mark the context as cancelled."""
        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()


def is_cancelled(ctx: Optional[Context]) -> bool:
    """Return True if ``ctx`` is given and has been cancelled."""
    return ctx is not None and ctx.cancelled
