"""Canned-value bag used to populate façades, and the representative data set.

Keys are the façades' canned field names (``get_license_result``,
``count_redo_records_result``...). Lookups never fail: a missing key yields
the zero value of its kind.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Type

from .envelope import HANDLE, INT64, STRING, SzMockBase

DATA1_STRINGS: Dict[str, str] = {
    "add_data_source_result": '{"DSRC_ID":1001}',
    "add_record_result": "",
    "check_datastore_performance_result": '{"numRecordsInserted":76667,"insertTime":1000}',
    "delete_data_source_result": "",
    "delete_record_result": "",
    "export_result": '{"G2_CONFIG":{"CFG_ATTR":[{"ATTR_CLASS":"ADDRESS","ATTR_CODE":"ADDR_CITY","ATTR_ID":1608,...',
    "fetch_next_result": "",
    "find_interesting_entities_by_entity_id_result": '{"INTERESTING_ENTITIES":{"ENTITIES":[]}}',
    "find_interesting_entities_by_record_id_result": '{"INTERESTING_ENTITIES":{"ENTITIES":[]}}',
    "find_network_by_entity_id_result": (
        '{"ENTITY_PATHS":[],"ENTITIES":[{"RESOLVED_ENTITY":{"ENTITY_ID":100001}}]}'
    ),
    "find_network_by_record_id_result": (
        '{"ENTITY_PATHS":[],"ENTITIES":[{"RESOLVED_ENTITY":{"ENTITY_ID":100001}}]}'
    ),
    "find_path_by_entity_id_result": (
        '{"ENTITY_PATHS":[{"START_ENTITY_ID":100001,"END_ENTITY_ID":100001,"ENTITIES":[100001]}],'
        '"ENTITIES":[{"RESOLVED_ENTITY":{"ENTITY_ID":100001}}]}'
    ),
    "find_path_by_record_id_result": (
        '{"ENTITY_PATHS":[{"START_ENTITY_ID":100001,"END_ENTITY_ID":100001,"ENTITIES":[100001]}],'
        '"ENTITIES":[{"RESOLVED_ENTITY":{"ENTITY_ID":100001}}]}'
    ),
    "get_config_result": (
        '{"G2_CONFIG":{"CFG_ATTR":[{"ATTR_CLASS":"ADDRESS","ATTR_CODE":"ADDR_CITY","ATTR_ID":1608,'
        '"DEFAULT_VALUE":null,"FELEM_CODE":"CITY","FELEM_REQ":"Any",...'
    ),
    "get_configs_result": (
        '{"CONFIGS":[{"CONFIG_ID":41320074,"CONFIG_COMMENTS":"Example configuration",'
        '"SYS_CREATE_DT":"2023-02-16 21:43:10.171"}]}'
    ),
    "get_data_sources_result": '{"DATA_SOURCES":[{"DSRC_ID":1,"DSRC_CODE":"TEST"},{"DSRC_ID":2,"DSRC_CODE":"SEARCH"}]}',
    "get_datastore_info_result": '{"dataStores":[{"id":"CORE","type":"sqlite3","location":"nowhere"}]}',
    "get_entity_by_entity_id_result": '{"RESOLVED_ENTITY":{"ENTITY_ID":100001}}',
    "get_entity_by_record_id_result": '{"RESOLVED_ENTITY":{"ENTITY_ID":100001}}',
    "get_feature_result": (
        '{"LIB_FEAT_ID":1,"FTYPE_CODE":"NAME","ELEMENTS":[{"FELEM_CODE":"FULL_NAME","FELEM_VALUE":"Robert Smith"},'
        '{"FELEM_CODE":"SUR_NAME","FELEM_VALUE":"Smith"},{"FELEM_CODE":"GIVEN_NAME","FELEM_VALUE":"Robert"}]}'
    ),
    "get_license_result": (
        '{"billing":"YEARLY","contract":"Senzing Public Test License","customer":"Senzing Public Test License",...'
    ),
    "get_record_result": '{"DATA_SOURCE":"CUSTOMERS","RECORD_ID":"1001"}',
    "get_redo_record_result": (
        '{"REASON":"deferred delete","DATA_SOURCE":"CUSTOMERS","RECORD_ID":"1003","REEVAL_ITERATION":1,'
        '"DSRC_ACTION":"X"}'
    ),
    "get_stats_result": '{"workload":{"abortedUnresolve":0,"actualAmbiguousTest":0,"addedRecords":3,...',
    "get_version_result": (
        '{"PRODUCT_NAME":"Senzing SDK","VERSION":"3.5.0","BUILD_VERSION":"3.5.0.23041","BUILD_DATE":"2023-02-09",'
        '"BUILD_NUMBER":"2023_02_09__23_01","COMPATIBILITY_VERSION":{"CONFIG_VERSION":"10"},'
        '"SCHEMA_VERSION":{"ENGINE_SCHEMA_VERSION":"3.5","MINIMUM_REQUIRED_SCHEMA_VERSION":"3.0",'
        '"MAXIMUM_REQUIRED_SCHEMA_VERSION":"3.99"}}'
    ),
    "get_virtual_entity_by_record_id_result": '{"RESOLVED_ENTITY":{"ENTITY_ID":100001}}',
    "how_entity_by_entity_id_result": (
        '{"HOW_RESULTS":{"FINAL_STATE":{"NEED_REEVALUATION":0,"VIRTUAL_ENTITIES":[{"MEMBER_RECORDS":'
        '[{"INTERNAL_ID":1,"RECORDS":[{"DATA_SOURCE":"CUSTOMERS","RECORD_ID":null}]}],'
        '"VIRTUAL_ENTITY_ID":"V1-S1"}]},"RESOLUTION_STEPS":[]}}'
    ),
    "preprocess_record_result": "{}",
    "process_redo_record_result": "",
    "reevaluate_entity_result": "",
    "reevaluate_record_result": "",
    "search_by_attributes_result": (
        '{"RESOLVED_ENTITIES":[{"ENTITY":{"RESOLVED_ENTITY":{"ENTITY_ID":100001}},'
        '"MATCH_INFO":{"ERRULE_CODE":"SF1","MATCH_KEY":"+PNAME+EMAIL","MATCH_LEVEL_CODE":"POSSIBLY_RELATED"}}]}'
    ),
    "why_entities_result": (
        '{"WHY_RESULTS":[{"ENTITY_ID":100001,"ENTITY_ID_2":100001,"MATCH_INFO":{"WHY_KEY":"+NAME+DOB+ADDRESS+PHONE+EMAIL",'
        '"WHY_ERRULE_CODE":"SF1_SNAME_CFF_CSTAB","MATCH_LEVEL_CODE":"RESOLVED"}}],'
        '"ENTITIES":[{"RESOLVED_ENTITY":{"ENTITY_ID":100001}}]}'
    ),
    "why_record_in_entity_result": (
        '{"WHY_RESULTS":[{"INTERNAL_ID":100001,"ENTITY_ID":100001,"FOCUS_RECORDS":[{"DATA_SOURCE":"CUSTOMERS",'
        '"RECORD_ID":"1001"}],"MATCH_INFO":{"WHY_KEY":"+NAME+DOB+PHONE","WHY_ERRULE_CODE":"CNAME_CFF_CEXCL",'
        '"MATCH_LEVEL_CODE":"RESOLVED"}}],"ENTITIES":[{"RESOLVED_ENTITY":{"ENTITY_ID":100001}}]}'
    ),
    "why_records_result": '{"ENTITIES":[{"RESOLVED_ENTITY":{"ENTITY_ID":100001}}...',
    "why_search_result": '{"WHY_RESULTS":[],"ENTITIES":[{"RESOLVED_ENTITY":{"ENTITY_ID":100001}}]}',
}

DATA1_INT64S: Dict[str, int] = {
    "register_config_result": 1,
    "count_redo_records_result": 0,
    "get_active_config_id_result": 1,
    "get_default_config_id_result": 1,
}

# Variant used by documentation examples: a non-empty redo queue.
DATA1_INT64S_EXAMPLE: Dict[str, int] = {**DATA1_INT64S, "count_redo_records_result": 4}

DATA1_HANDLES: Dict[str, int] = {
    "export_csv_entity_report_result": 1,
    "export_json_entity_report_result": 1,
    "import_config_result": 1,
    "import_template_result": 1,
}


@dataclass
class TestData:
    """Three typed mappings of canned values keyed by canned field name."""

    __test__ = False  # not a pytest test class

    int64s: Dict[str, int] = field(default_factory=dict)
    strings: Dict[str, str] = field(default_factory=dict)
    handles: Dict[str, int] = field(default_factory=dict)

    def int64(self, key: str) -> int:
        return self.int64s.get(key, 0)

    def string(self, key: str) -> str:
        return self.strings.get(key, "")

    def handle(self, key: str) -> int:
        return self.handles.get(key, 0)

    def canned_values(self, facade_cls: Type[SzMockBase]) -> Dict[str, Any]:
        """Return constructor keywords populating every canned field of ``facade_cls``.

        Args:
            facade_cls: Façade class whose ``CANNED_FIELDS`` are read.

        Returns:
            Dict[str, Any]: Value per canned field, zero when the bag lacks it.
        """
        accessors = {INT64: self.int64, STRING: self.string, HANDLE: self.handle}
        return {name: accessors[kind](name) for name, kind in facade_cls.CANNED_FIELDS.items()}

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "TestData":
        """Build a bag from ``{"int64s": ..., "strings": ..., "handles": ...}``.

        Missing sections are empty. Integers are coerced with ``int`` and
        strings with ``str`` so YAML scalars of either type are accepted.

        Raises:
            ValueError: If a section is not a mapping or an integer value is
                missing or cannot be parsed.
        """
        data = data or {}
        return cls(
            int64s={k: _as_int("int64s", k, v) for k, v in _section(data, "int64s").items()},
            strings={k: "" if v is None else str(v) for k, v in _section(data, "strings").items()},
            handles={k: _as_int("handles", k, v) for k, v in _section(data, "handles").items()},
        )


def data1() -> TestData:
    """Return a fresh bag holding the representative Senzing payloads."""
    return TestData(int64s=dict(DATA1_INT64S), strings=dict(DATA1_STRINGS), handles=dict(DATA1_HANDLES))


def _section(data: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    section = data.get(name) or {}
    if not isinstance(section, Mapping):
        raise ValueError(f"test_data.{name} must be a mapping, got {type(section).__name__}")
    return section


def _as_int(section: str, key: str, value: Any) -> int:
    """Coerce one canned integer, reporting where a bad value came from."""
    if value is None or isinstance(value, bool):
        raise ValueError(f"test_data.{section}.{key} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"test_data.{section}.{key} must be an integer, got {value!r}") from exc
