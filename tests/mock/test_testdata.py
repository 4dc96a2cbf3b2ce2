import pytest

from sz_mock import SzConfigManager, SzEngine, TestData, data1
from sz_mock.testdata import DATA1_INT64S, DATA1_INT64S_EXAMPLE


def test_accessors_fall_back_to_zero():
    bag = TestData(int64s={"a": 5}, strings={"b": "x"}, handles={"c": 9})

    assert (bag.int64("a"), bag.string("b"), bag.handle("c")) == (5, "x", 9)
    assert (bag.int64("missing"), bag.string("missing"), bag.handle("missing")) == (0, "", 0)


def test_canned_values_cover_every_declared_field():
    values = data1().canned_values(SzConfigManager)

    assert set(values) == set(SzConfigManager.CANNED_FIELDS)
    assert values["register_config_result"] == 1
    assert values["get_configs_result"].startswith('{"CONFIGS"')


def test_canned_values_use_kind_specific_zero():
    values = TestData().canned_values(SzEngine)

    assert values["count_redo_records_result"] == 0
    assert values["export_csv_entity_report_result"] == 0
    assert values["get_stats_result"] == ""


def test_from_mapping_coerces_scalars():
    bag = TestData.from_mapping({"int64s": {"x": "12"}, "strings": {"y": 3, "z": None}})

    assert bag.int64("x") == 12
    assert bag.string("y") == "3"
    assert bag.string("z") == ""
    assert bag.handles == {}


def test_from_mapping_accepts_none():
    assert TestData.from_mapping(None) == TestData()


def test_from_mapping_rejects_bad_integer():
    with pytest.raises(ValueError):
        TestData.from_mapping({"handles": {"x": "not-a-number"}})


@pytest.mark.parametrize("section", ["int64s", "handles"])
def test_from_mapping_rejects_null_integer(section):
    with pytest.raises(ValueError, match=f"test_data.{section}.some_result must be an integer, got None"):
        TestData.from_mapping({section: {"some_result": None}})


def test_from_settings_reports_null_integer_as_value_error():
    from sz_mock import SzAbstractFactory

    with pytest.raises(ValueError, match="count_redo_records_result"):
        SzAbstractFactory.from_settings({"test_data": {"int64s": {"count_redo_records_result": None}}})


def test_data1_returns_independent_copies():
    bag = data1()
    bag.strings["get_license_result"] = "changed"

    assert data1().string("get_license_result") != "changed"


def test_example_variant_only_changes_redo_count():
    assert DATA1_INT64S["count_redo_records_result"] == 0
    assert DATA1_INT64S_EXAMPLE["count_redo_records_result"] == 4
    assert {k: v for k, v in DATA1_INT64S_EXAMPLE.items() if k != "count_redo_records_result"} == {
        k: v for k, v in DATA1_INT64S.items() if k != "count_redo_records_result"
    }
