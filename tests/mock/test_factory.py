import pytest

from sz_mock import SzAbstractFactory, SzConfig, TestData, data1


def test_factory_without_bag_returns_zero_values():
    factory = SzAbstractFactory()

    assert factory.create_engine().count_redo_records() == 0
    assert factory.create_product().get_version() == ""
    assert factory.create_config_manager().get_default_config_id() == 0


def test_factory_returns_fresh_facades():
    factory = SzAbstractFactory(data1())
    first, second = factory.create_engine(), factory.create_engine()

    assert first is not second
    first.set_observer_origin("first")
    assert second.get_observer_origin() == ""


def test_factory_populates_every_facade_from_bag():
    factory = SzAbstractFactory(data1())

    assert factory.create_config().add_data_source("TEST") == '{"DSRC_ID":1001}'
    assert factory.create_config_manager().register_config("{}", "comment") == 1
    assert "dataStores" in factory.create_diagnostic().get_datastore_info()
    assert factory.create_engine().get_active_config_id() == 1
    assert "Senzing SDK" in factory.create_product().get_version()


def test_config_manager_configs_come_from_factory():
    factory = SzAbstractFactory(TestData(strings={"get_data_sources_result": "sources"}, handles={"import_config_result": 3}))

    config = factory.create_config_manager().create_config_from_template()

    assert isinstance(config, SzConfig)
    assert config.get_data_sources() == "sources"
    assert config.import_config("{}") == 3


def test_factory_sets_origin_on_facades():
    factory = SzAbstractFactory(observer_origin="factory-origin")
    assert factory.create_diagnostic().get_observer_origin() == "factory-origin"


def test_from_settings_reads_bag_and_origin():
    factory = SzAbstractFactory.from_settings(
        {
            "observer_origin": "from-yaml",
            "test_data": {"strings": {"get_license_result": "LIC"}, "int64s": {"count_redo_records_result": "4"}},
        }
    )

    assert factory.observer_origin == "from-yaml"
    assert factory.create_product().get_license() == "LIC"
    assert factory.create_engine().count_redo_records() == 4


def test_from_settings_rejects_malformed_bag():
    with pytest.raises(ValueError):
        SzAbstractFactory.from_settings({"test_data": {"strings": ["not", "a", "mapping"]}})


def test_destroy_and_reinitialize_are_noops():
    factory = SzAbstractFactory()
    assert factory.destroy() is None
    assert factory.reinitialize(1) is None
