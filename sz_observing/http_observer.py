"""Observer that forwards events to an HTTP endpoint."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Optional

import httpx

from sz_shared.errors import SzObserverError

from .observer import Observer, log
from .utils import dict_to_json_bytes

if TYPE_CHECKING:
    from .notifier import Event


class HttpObserver(Observer):
    """POST every event as JSON to ``url``."""

    def __init__(
        self,
        observer_id: str,
        url: str,
        client: Optional[httpx.Client] = None,
        timeout: float = 10,
    ):
        """Initialize the observer.

        Args:
            observer_id: Stable observer identifier.
            url: Endpoint receiving the events.
            client: Optional preconfigured ``httpx.Client``; one is created
                (and owned) when omitted.
            timeout: Request timeout in seconds for an owned client.
        """
        super().__init__(observer_id)
        self.url = url
        self._owns_client = client is None
        self._client = client if client is not None else httpx.Client(timeout=timeout)
        self._lock = threading.Lock()

    def update(self, event: "Event") -> None:
        """Send the event.

        Raises:
            SzObserverError: If the request fails or the endpoint answers
                with an error status.
        """
        payload = event.to_dict()
        payload["observerId"] = self.observer_id
        try:
            with self._lock:
                resp = self._client.post(
                    self.url,
                    content=dict_to_json_bytes(payload),
                    headers={"Content-Type": "application/json"},
                )
            resp.raise_for_status()
        except httpx.HTTPError as exc:
            raise SzObserverError(f"observer {self.observer_id} could not deliver {event.message_id}: {exc}") from exc
        log.debug("Observer %s delivered %s to %s", self.observer_id, event.message_id, self.url)

    def close(self) -> None:
        """Close the underlying client when this observer created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "HttpObserver":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
