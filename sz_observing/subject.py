"""Thread-safe observer registry."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, List, Tuple

from .observer import Observer

if TYPE_CHECKING:
    from .notifier import Event

log = logging.getLogger("sz_observing")


class SimpleSubject:
    """Ordered set of observers with isolated, asynchronous delivery."""

    def __init__(self):
        """Initialize an empty registry."""
        self._observers: List[Observer] = []
        self._lock = threading.Lock()

    def register_observer(self, observer: Observer) -> None:
        """Add ``observer`` unless an observer with the same id is present.

        Args:
            observer: Observer to add.
        """
        with self._lock:
            if observer not in self._observers:
                self._observers.append(observer)
                log.debug("Registered observer %s", observer.observer_id)

    def unregister_observer(self, observer: Observer) -> None:
        """Remove ``observer`` if present.

        Args:
            observer: Observer to remove.
        """
        with self._lock:
            if observer in self._observers:
                self._observers.remove(observer)
                log.debug("Unregistered observer %s", observer.observer_id)

    def has_observers(self) -> bool:
        """Return True when at least one observer is registered."""
        with self._lock:
            return bool(self._observers)

    def observers(self) -> Tuple[Observer, ...]:
        """Return a snapshot of the registered observers."""
        with self._lock:
            return tuple(self._observers)

    def notify(self, event: "Event") -> None:
        """Deliver ``event`` to every observer on its own thread.

        The observer list is snapshotted first so delivery threads never hold
        the registry lock.

        Args:
            event: Event to deliver.
        """
        for observer in self.observers():
            thread = threading.Thread(
                target=_deliver,
                args=(observer, event),
                name=f"sz-observer-{observer.observer_id}",
                daemon=True,
            )
            thread.start()


def _deliver(observer: Observer, event: "Event") -> None:
    """Call ``observer.update`` and contain any failure to this thread."""
    try:
        observer.update(event)
    except Exception:  # noqa: BLE001
        log.warning(
            "Observer %s failed to handle %s",
            observer.observer_id,
            event.message_id,
            exc_info=True,
        )
