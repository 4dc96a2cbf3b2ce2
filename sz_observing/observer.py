"""Observer interface and the built-in null observer."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .notifier import Event

log = logging.getLogger("sz_observing")


class Observer(ABC):
    """Receiver of SDK events.

    Observers are identified by ``observer_id``; two observers with the same
    identifier are treated as the same subscriber. ``update`` is called from
    background threads and must be safe to run concurrently.
    """

    def __init__(self, observer_id: str):
        self.observer_id = observer_id

    @abstractmethod
    def update(self, event: "Event") -> None:
        """Handle one event."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Observer):
            return NotImplemented
        return self.observer_id == other.observer_id

    def __hash__(self) -> int:
        return hash(self.observer_id)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(observer_id={self.observer_id!r})"


class NullObserver(Observer):
    """Observer that discards events, logging them unless silent."""

    def __init__(self, observer_id: str, is_silent: bool = True):
        super().__init__(observer_id)
        self.is_silent = is_silent

    def update(self, event: "Event") -> None:
        if self.is_silent:
            return
        log.info("Observer %s received %s: %s", self.observer_id, event.message_id, event.details)
