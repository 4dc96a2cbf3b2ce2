"""Observer registry, notifier and observers for the Senzing mock SDK."""

from .http_observer import HttpObserver
from .notifier import Event, notify
from .observer import NullObserver, Observer
from .subject import SimpleSubject

__all__ = [
    "Event",
    "HttpObserver",
    "NullObserver",
    "Observer",
    "SimpleSubject",
    "notify",
]
