"""End-to-end behavior of the mock SDK as seen by a consuming application."""

import pytest

from sz_mock import SzAbstractFactory, SzBadInputError, SzConfigManager, SzEngine, TestData


def test_add_record_round_trip(recorder):
    engine = SzEngine(add_record_result="")
    engine.register_observer(recorder)
    assert recorder.next_event().event_code == 8702

    result = engine.add_record("CUSTOMERS", "1001", '{"NAME_FULL":"Robert Smith"}', 0)

    assert result == ""
    event = recorder.next_event()
    assert event.component_id == 6034
    assert event.event_code == 8001
    assert event.details == {"dataSourceCode": "CUSTOMERS", "recordID": "1001", "flags": "0"}
    recorder.assert_no_event()


def test_unregistration_delivers_final_event(recorder):
    manager = SzConfigManager()
    manager.register_observer(recorder)
    assert recorder.next_event().event_code == 8702

    manager.unregister_observer(recorder)

    event = recorder.next_event()
    assert event.component_id == 6032
    assert event.event_code == 8704
    assert event.details == {"observerID": recorder.observer_id}
    assert manager.has_observers() is False


def test_missing_canned_value_defaults_to_zero():
    assert SzEngine().count_redo_records() == 0


def test_bad_log_level_is_rejected():
    engine = SzEngine()
    with pytest.raises(SzBadInputError):
        engine.set_log_level("BOGUS")
    assert engine._is_trace is False


def test_iterator_closes_immediately_with_one_event(recorder):
    engine = SzEngine()
    engine.register_observer(recorder)
    assert recorder.next_event().event_code == 8702

    assert list(engine.export_json_entity_report_iterator(0)) == []

    event = recorder.next_event()
    assert event.event_code == 8009
    assert event.details == {"flags": "0"}
    recorder.assert_no_event()


def test_factory_facades_share_canned_values():
    factory = SzAbstractFactory(TestData(strings={"get_license_result": "LIC"}))

    assert factory.create_product().get_license() == "LIC"
    assert factory.create_product().get_license() == "LIC"
