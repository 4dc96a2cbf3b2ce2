"""Test configuration that ensures project modules are importable and provides observer fixtures."""

import queue
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so `sz_mock` and `sz_observing` can be imported in tests.
ROOT = Path(__file__).resolve().parent.parent
ROOT_STR = str(ROOT)
if ROOT_STR not in sys.path:
    sys.path.insert(0, ROOT_STR)

from sz_observing import Observer  # noqa: E402

WAIT_SECONDS = 2.0


class RecordingObserver(Observer):
    """Observer collecting events in a queue so tests can wait for async delivery."""

    def __init__(self, observer_id="recorder"):
        super().__init__(observer_id)
        self.events = queue.Queue()

    def update(self, event):
        self.events.put(event)

    def next_event(self, timeout=WAIT_SECONDS):
        """Return the next delivered event, failing the test on timeout."""
        try:
            return self.events.get(timeout=timeout)
        except queue.Empty:
            pytest.fail(f"observer {self.observer_id} received no event within {timeout}s")

    def assert_no_event(self, timeout=0.2):
        """Assert nothing is delivered within ``timeout`` seconds."""
        try:
            event = self.events.get(timeout=timeout)
        except queue.Empty:
            return
        pytest.fail(f"observer {self.observer_id} unexpectedly received {event}")


@pytest.fixture
def recorder():
    """Return a fresh recording observer.

    Returns:
        RecordingObserver: Observer whose ``next_event`` waits for delivery.
    """
    return RecordingObserver()


@pytest.fixture
def make_recorder():
    """Return a factory building recording observers with custom ids."""
    return RecordingObserver
