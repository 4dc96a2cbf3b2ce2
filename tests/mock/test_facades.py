import pytest

from sz_mock import SzConfig, SzConfigManager, SzDiagnostic, SzEngine, SzProduct, data1
from sz_mock import szconfig, szconfigmanager, szdiagnostic, szengine, szproduct

MODULES = [szconfig, szconfigmanager, szdiagnostic, szengine, szproduct]


@pytest.mark.parametrize("module", MODULES, ids=lambda m: m.__name__.rsplit(".", 1)[-1])
def test_operation_codes_are_unique_and_catalogued(module):
    """Ensure every operation has distinct codes and entry/exit messages.

    Args:
        module: Façade module under test.

    Returns:
        None
    """
    operations = list(module.OPERATIONS.values())
    facade_cls = next(v for v in vars(module).values() if isinstance(v, type) and v.__module__ == module.__name__)

    assert len({op.event_code for op in operations}) == len(operations)
    assert len({op.trace_entry for op in operations}) == len(operations)
    for op in operations:
        assert op.trace_entry % 2 == 1
        assert facade_cls.ID_MESSAGES[op.trace_entry] == f"Enter {op.name}."
        assert facade_cls.ID_MESSAGES[op.trace_exit] == f"Exit {op.name}."
        assert getattr(facade_cls, op.name).operation is op
    assert facade_cls.ID_MESSAGES[703] == "Enter register_observer."


def test_config_returns_canned_values():
    config = SzConfig(add_data_source_result='{"DSRC_ID":1001}', import_template_result=7, export_result="{}")

    assert config.add_data_source("TEST") == '{"DSRC_ID":1001}'
    assert config.import_template() == 7
    assert config.import_config("{}") == 0
    assert config.export() == "{}"
    assert config.delete_data_source("TEST") == ""
    assert config.verify_config_definition("{}") is None
    assert config.destroy() is None


def test_config_manager_creates_configs():
    manager = SzConfigManager(get_config_result='{"G2_CONFIG":{}}', register_config_result=11)

    assert manager.create_config_from_config_id(1).export() == '{"G2_CONFIG":{}}'
    assert manager.create_config_from_string('{"X":1}').export() == '{"X":1}'
    assert isinstance(manager.create_config_from_template(), SzConfig)
    assert manager.register_config("{}", "comment") == 11
    assert manager.add_config("{}", "comment") == 11


def test_config_manager_uses_config_factory():
    built = []

    def factory():
        config = SzConfig(get_data_sources_result="sources")
        built.append(config)
        return config

    manager = SzConfigManager(config_factory=factory)
    config = manager.create_config_from_template()

    assert built == [config]
    assert config.get_data_sources() == "sources"


def test_config_manager_replace_default_details(recorder):
    manager = SzConfigManager()
    manager.register_observer(recorder)
    recorder.next_event()

    manager.replace_default_config_id(1, 2)

    event = recorder.next_event()
    assert event.event_code == 8010
    assert event.details == {"currentDefaultConfigID": "1", "newDefaultConfigID": "2"}


def test_diagnostic_returns_canned_values():
    diagnostic = SzDiagnostic(**data1().canned_values(SzDiagnostic))

    assert "insertTime" in diagnostic.check_datastore_performance(1)
    assert "dataStores" in diagnostic.get_datastore_info()
    assert diagnostic.get_feature(1).startswith('{"LIB_FEAT_ID":1')
    assert diagnostic.purge_repository() is None


def test_engine_defaults_are_zero_values():
    engine = SzEngine()

    assert engine.add_record("CUSTOMERS", "1001", "{}") == ""
    assert engine.get_active_config_id() == 0
    assert engine.export_csv_entity_report("*") == 0
    assert engine.fetch_next(0) == ""
    assert engine.why_search("{}", 1) == ""
    assert engine.close_export_report(0) is None


def test_engine_returns_canned_values():
    engine = SzEngine(**data1().canned_values(SzEngine))

    assert engine.get_entity_by_entity_id(100001) == '{"RESOLVED_ENTITY":{"ENTITY_ID":100001}}'
    assert engine.get_active_config_id() == 1
    assert engine.export_json_entity_report() == 1
    assert "ENTITY_PATHS" in engine.find_network_by_record_id("{}", 1, 0, 0)
    assert engine.preprocess_record("{}") == "{}"


def test_engine_why_records_details(recorder):
    engine = SzEngine()
    engine.register_observer(recorder)
    recorder.next_event()

    engine.why_records("CUSTOMERS", "1001", "CUSTOMERS", "1002", flags=5)

    assert recorder.next_event().details == {
        "dataSourceCode1": "CUSTOMERS",
        "recordID1": "1001",
        "dataSourceCode2": "CUSTOMERS",
        "recordID2": "1002",
        "flags": "5",
    }


def test_engine_export_details_carry_handle_and_flags(recorder):
    """Ensure export calls report their handle or flags in event details.

    Args:
        recorder: Recording observer fixture.

    Returns:
        None
    """
    engine = SzEngine()
    engine.register_observer(recorder)
    recorder.next_event()

    engine.fetch_next(7)
    event = recorder.next_event()
    assert (event.event_code, event.details) == (8010, {"exportHandle": "7"})

    engine.close_export_report(7)
    event = recorder.next_event()
    assert (event.event_code, event.details) == (8002, {"exportHandle": "7"})

    list(engine.export_json_entity_report_iterator(flags=3))
    event = recorder.next_event()
    assert (event.event_code, event.details) == (8009, {"flags": "3"})


def test_product_returns_canned_values():
    product = SzProduct(get_version_result='{"VERSION":"3.5.0"}')

    assert product.get_version() == '{"VERSION":"3.5.0"}'
    assert product.get_license() == ""
    assert product.initialize("demo", "{}") is None
