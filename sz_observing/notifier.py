"""Event record and notifier used to broadcast SDK calls to observers."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Dict, Optional

from sz_shared.constants import format_message_id

if TYPE_CHECKING:
    from .subject import SimpleSubject


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, eq=False)
class Event:
    """Structured record handed to every observer.

    Events compare and hash by identity; ``details`` is a plain dict.
    """

    origin: str
    component_id: int
    event_code: int
    error: Optional[BaseException]
    details: Dict[str, str]
    timestamp: datetime = field(default_factory=_utcnow)

    @property
    def message_id(self) -> str:
        """Return the ``SZSDK`` identifier of this event."""
        return format_message_id(self.component_id, self.event_code)

    def to_dict(self) -> Dict[str, Any]:
        """Return the camelCase wire form of the event.

        Returns:
            Dict[str, Any]: JSON-serializable representation.
        """
        return {
            "origin": self.origin,
            "componentId": self.component_id,
            "eventCode": self.event_code,
            "messageId": self.message_id,
            "error": None if self.error is None else str(self.error),
            "details": dict(self.details),
            "timestamp": self.timestamp.isoformat(),
        }


def notify(
    subject: "SimpleSubject",
    origin: str,
    component_id: int,
    event_code: int,
    error: Optional[BaseException],
    details: Dict[str, str],
) -> Event:
    """Build an event and hand it to every observer registered on ``subject``.

    Delivery happens on background threads, so this returns as soon as the
    per-observer tasks are scheduled.

    Args:
        subject: Registry whose observers receive the event.
        origin: Caller supplied tag copied into the event.
        component_id: Identifier of the emitting SDK component.
        event_code: Operation specific event code.
        error: Error raised by the operation, if any.
        details: Call specific parameters and results.

    Returns:
        Event: The event that was dispatched.
    """
    event = Event(
        origin=origin,
        component_id=component_id,
        event_code=event_code,
        error=error,
        details=dict(details),
    )
    subject.notify(event)
    return event
