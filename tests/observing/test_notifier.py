import json
from datetime import timezone

from sz_observing import Event, SimpleSubject, notify
from sz_observing.utils import dict_to_json_bytes


def test_event_message_id_and_wire_form():
    event = Event(
        origin="unit-test",
        component_id=6034,
        event_code=8001,
        error=None,
        details={"dataSourceCode": "CUSTOMERS", "recordID": "1001", "flags": "0"},
    )

    wire = event.to_dict()

    assert event.message_id == "SZSDK60348001"
    assert event.timestamp.tzinfo is timezone.utc
    assert wire["componentId"] == 6034
    assert wire["eventCode"] == 8001
    assert wire["messageId"] == "SZSDK60348001"
    assert wire["error"] is None
    assert list(wire["details"]) == ["dataSourceCode", "recordID", "flags"]
    assert wire["timestamp"] == event.timestamp.isoformat()


def test_event_error_is_stringified():
    event = Event("", 6031, 8001, RuntimeError("broken"), {})
    assert event.to_dict()["error"] == "broken"


def test_events_hash_by_identity_despite_dict_details():
    """Ensure events with a dict field stay hashable and compare by identity.

    Returns:
        None
    """
    first = Event("", 6031, 8001, None, {"a": "1"})
    twin = Event("", 6031, 8001, None, {"a": "1"}, timestamp=first.timestamp)

    assert first != twin
    assert first == first
    assert len({first, twin, first}) == 2


def test_notify_copies_details_and_returns_event(recorder):
    subject = SimpleSubject()
    subject.register_observer(recorder)
    details = {"observerID": "x"}

    event = notify(subject, "origin", 6032, 8704, None, details)
    details["observerID"] = "changed"

    delivered = recorder.next_event()
    assert delivered is event
    assert delivered.origin == "origin"
    assert delivered.details == {"observerID": "x"}


def test_notify_without_observers_still_builds_event():
    event = notify(SimpleSubject(), "", 6036, 8004, None, {})
    assert event.event_code == 8004


def test_dict_to_json_bytes_is_compact():
    payload = dict_to_json_bytes({"a": 1, "name": "Müller"})
    assert payload == '{"a":1,"name":"Müller"}'.encode("utf-8")
    assert json.loads(payload) == {"a": 1, "name": "Müller"}
