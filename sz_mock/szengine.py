"""Mock implementation of the Senzing SzEngine interface.

Every method returns its canned ``<method>_result`` attribute. The two export
iterators yield nothing: they are lazy generators of :class:`StringFragment`
that trace and notify on first ``next()`` and close immediately.
"""

from __future__ import annotations

from typing import Iterator, Optional

from sz_shared.constants import SZ_NO_FLAGS, SZ_NO_LOGGING, SZENGINE_COMPONENT_ID

from . import helper
from .context import Context
from .envelope import (
    COMMON_OPERATIONS,
    HANDLE,
    INT64,
    STRING,
    Operation,
    StringFragment,
    SzMockBase,
    details,
    instrumented,
    instrumented_iterator,
)

COMPONENT_ID = SZENGINE_COMPONENT_ID

_RECORD = details(dataSourceCode="data_source_code", recordID="record_id", flags="flags")
_ENTITY = details(entityID="entity_id", flags="flags")
_NETWORK = (
    ("maxDegrees", "max_degrees"),
    ("buildOutDegrees", "build_out_degrees"),
    ("buildOutMaxEntities", "build_out_max_entities"),
    ("flags", "flags"),
)

OPERATIONS = {
    "add_record": Operation("add_record", 1, 8001, _RECORD),
    "close_export_report": Operation("close_export_report", 5, 8002, details(exportHandle="export_handle")),
    "count_redo_records": Operation("count_redo_records", 7, 8003),
    "delete_record": Operation("delete_record", 9, 8004, _RECORD),
    "destroy": Operation("destroy", 11, 8005),
    "export_csv_entity_report": Operation(
        "export_csv_entity_report", 13, 8006, details(csvColumnList="csv_column_list", flags="flags")
    ),
    "export_csv_entity_report_iterator": Operation(
        "export_csv_entity_report_iterator", 15, 8007, details(csvColumnList="csv_column_list", flags="flags")
    ),
    "export_json_entity_report": Operation("export_json_entity_report", 17, 8008, details(flags="flags")),
    "export_json_entity_report_iterator": Operation(
        "export_json_entity_report_iterator", 19, 8009, details(flags="flags")
    ),
    "fetch_next": Operation("fetch_next", 21, 8010, details(exportHandle="export_handle")),
    "find_interesting_entities_by_entity_id": Operation(
        "find_interesting_entities_by_entity_id", 23, 8011, _ENTITY
    ),
    "find_interesting_entities_by_record_id": Operation(
        "find_interesting_entities_by_record_id", 25, 8012, _RECORD
    ),
    "find_network_by_entity_id": Operation(
        "find_network_by_entity_id", 27, 8013, (("entityIDs", "entity_ids"), *_NETWORK)
    ),
    "find_network_by_record_id": Operation(
        "find_network_by_record_id", 29, 8014, (("recordKeys", "record_keys"), *_NETWORK)
    ),
    "find_path_by_entity_id": Operation(
        "find_path_by_entity_id",
        31,
        8015,
        details(
            startEntityID="start_entity_id",
            endEntityID="end_entity_id",
            maxDegrees="max_degrees",
            avoidEntityIDs="avoid_entity_ids",
            requiredDataSources="required_data_sources",
            flags="flags",
        ),
    ),
    "find_path_by_record_id": Operation(
        "find_path_by_record_id",
        33,
        8016,
        details(
            startDataSourceCode="start_data_source_code",
            startRecordID="start_record_id",
            endDataSourceCode="end_data_source_code",
            endRecordID="end_record_id",
            maxDegrees="max_degrees",
            avoidRecordKeys="avoid_record_keys",
            requiredDataSources="required_data_sources",
            flags="flags",
        ),
    ),
    "get_active_config_id": Operation("get_active_config_id", 35, 8017),
    "get_entity_by_entity_id": Operation("get_entity_by_entity_id", 37, 8018, _ENTITY),
    "get_entity_by_record_id": Operation("get_entity_by_record_id", 39, 8019, _RECORD),
    "get_record": Operation("get_record", 45, 8020, _RECORD),
    "get_redo_record": Operation("get_redo_record", 47, 8021),
    "get_stats": Operation("get_stats", 49, 8022),
    "get_virtual_entity_by_record_id": Operation(
        "get_virtual_entity_by_record_id", 51, 8023, details(recordKeys="record_keys", flags="flags")
    ),
    "how_entity_by_entity_id": Operation("how_entity_by_entity_id", 53, 8024, _ENTITY),
    "initialize": Operation(
        "initialize",
        55,
        8025,
        details(
            instanceName="instance_name",
            settings="settings",
            configID="config_id",
            verboseLogging="verbose_logging",
        ),
    ),
    "prime_engine": Operation("prime_engine", 57, 8026),
    "process_redo_record": Operation("process_redo_record", 59, 8027, details(flags="flags")),
    "reevaluate_entity": Operation("reevaluate_entity", 61, 8028, _ENTITY),
    "reevaluate_record": Operation("reevaluate_record", 63, 8029, _RECORD),
    "reinitialize": Operation("reinitialize", 65, 8030, details(configID="config_id")),
    "search_by_attributes": Operation(
        "search_by_attributes",
        69,
        8031,
        details(attributes="attributes", searchProfile="search_profile", flags="flags"),
    ),
    "why_entities": Operation(
        "why_entities", 71, 8032, details(entityID1="entity_id_1", entityID2="entity_id_2", flags="flags")
    ),
    "why_record_in_entity": Operation("why_record_in_entity", 73, 8033, _RECORD),
    "why_records": Operation(
        "why_records",
        75,
        8034,
        details(
            dataSourceCode1="data_source_code_1",
            recordID1="record_id_1",
            dataSourceCode2="data_source_code_2",
            recordID2="record_id_2",
            flags="flags",
        ),
    ),
    "preprocess_record": Operation("preprocess_record", 77, 8035, details(flags="flags")),
    "why_search": Operation(
        "why_search",
        79,
        8036,
        details(attributes="attributes", entityID="entity_id", searchProfile="search_profile", flags="flags"),
    ),
}


class SzEngine(SzMockBase):
    """Entity resolution façade returning canned JSON documents."""

    COMPONENT_ID = COMPONENT_ID
    CANNED_FIELDS = {
        "add_record_result": STRING,
        "count_redo_records_result": INT64,
        "delete_record_result": STRING,
        "export_csv_entity_report_result": HANDLE,
        "export_json_entity_report_result": HANDLE,
        "fetch_next_result": STRING,
        "find_interesting_entities_by_entity_id_result": STRING,
        "find_interesting_entities_by_record_id_result": STRING,
        "find_network_by_entity_id_result": STRING,
        "find_network_by_record_id_result": STRING,
        "find_path_by_entity_id_result": STRING,
        "find_path_by_record_id_result": STRING,
        "get_active_config_id_result": INT64,
        "get_entity_by_entity_id_result": STRING,
        "get_entity_by_record_id_result": STRING,
        "get_record_result": STRING,
        "get_redo_record_result": STRING,
        "get_stats_result": STRING,
        "get_virtual_entity_by_record_id_result": STRING,
        "how_entity_by_entity_id_result": STRING,
        "preprocess_record_result": STRING,
        "process_redo_record_result": STRING,
        "reevaluate_entity_result": STRING,
        "reevaluate_record_result": STRING,
        "search_by_attributes_result": STRING,
        "why_entities_result": STRING,
        "why_record_in_entity_result": STRING,
        "why_records_result": STRING,
        "why_search_result": STRING,
    }
    ID_MESSAGES = helper.build_id_messages([*OPERATIONS.values(), *COMMON_OPERATIONS])

    # --- Records --------------------------------------------------------------

    @instrumented(OPERATIONS["add_record"])
    def add_record(
        self,
        data_source_code: str,
        record_id: str,
        record_definition: str,
        flags: int = SZ_NO_FLAGS,
        *,
        ctx: Optional[Context] = None,
    ) -> str:
        """Add a record to the repository.

        The record definition is not included in observer details;
        only its data source, id and the flags are reported.

        Args:
            data_source_code: Data source the record belongs to.
            record_id: Identifier of the record within its data source.
            record_definition: Record JSON document.
            flags: Bit flags; ``SZ_WITH_INFO`` asks for an info document.
            ctx: Optional cancellation context.

        Returns:
            str: Canned ``add_record_result`` (an info document or ``""``).
        """
        return self.add_record_result

    @instrumented(OPERATIONS["delete_record"])
    def delete_record(
        self,
        data_source_code: str,
        record_id: str,
        flags: int = SZ_NO_FLAGS,
        *,
        ctx: Optional[Context] = None,
    ) -> str:
        """Delete a record from the repository."""
        return self.delete_record_result

    @instrumented(OPERATIONS["get_record"])
    def get_record(
        self,
        data_source_code: str,
        record_id: str,
        flags: int = SZ_NO_FLAGS,
        *,
        ctx: Optional[Context] = None,
    ) -> str:
        return self.get_record_result

    @instrumented(OPERATIONS["preprocess_record"])
    def preprocess_record(
        self, record_definition: str, flags: int = SZ_NO_FLAGS, *, ctx: Optional[Context] = None
    ) -> str:
        """Return the features Senzing would extract from ``record_definition``."""
        return self.preprocess_record_result

    @instrumented(OPERATIONS["reevaluate_record"])
    def reevaluate_record(
        self,
        data_source_code: str,
        record_id: str,
        flags: int = SZ_NO_FLAGS,
        *,
        ctx: Optional[Context] = None,
    ) -> str:
        return self.reevaluate_record_result

    # --- Redo queue -----------------------------------------------------------

    @instrumented(OPERATIONS["count_redo_records"])
    def count_redo_records(self, *, ctx: Optional[Context] = None) -> int:
        """Return the number of pending redo records."""
        return self.count_redo_records_result

    @instrumented(OPERATIONS["get_redo_record"])
    def get_redo_record(self, *, ctx: Optional[Context] = None) -> str:
        return self.get_redo_record_result

    @instrumented(OPERATIONS["process_redo_record"])
    def process_redo_record(
        self, redo_record: str, flags: int = SZ_NO_FLAGS, *, ctx: Optional[Context] = None
    ) -> str:
        return self.process_redo_record_result

    # --- Export reports -------------------------------------------------------

    @instrumented(OPERATIONS["export_csv_entity_report"])
    def export_csv_entity_report(
        self, csv_column_list: str, flags: int = SZ_NO_FLAGS, *, ctx: Optional[Context] = None
    ) -> int:
        """Open a CSV export and return its handle for :meth:`fetch_next`."""
        return self.export_csv_entity_report_result

    @instrumented_iterator(OPERATIONS["export_csv_entity_report_iterator"])
    def export_csv_entity_report_iterator(
        self, csv_column_list: str, flags: int = SZ_NO_FLAGS, *, ctx: Optional[Context] = None
    ) -> Iterator[StringFragment]:
        """Yield the CSV export line by line.

        Args:
            csv_column_list: Comma separated column names, or ``"*"``.
            flags: Export flags.
            ctx: Optional cancellation context.

        Returns:
            Iterator[StringFragment]: A lazy generator; empty in the mock.
        """
        return iter(())

    @instrumented(OPERATIONS["export_json_entity_report"])
    def export_json_entity_report(self, flags: int = SZ_NO_FLAGS, *, ctx: Optional[Context] = None) -> int:
        """Open a JSON export and return its handle for :meth:`fetch_next`."""
        return self.export_json_entity_report_result

    @instrumented_iterator(OPERATIONS["export_json_entity_report_iterator"])
    def export_json_entity_report_iterator(
        self, flags: int = SZ_NO_FLAGS, *, ctx: Optional[Context] = None
    ) -> Iterator[StringFragment]:
        """Yield the JSON export one entity at a time; empty in the mock."""
        return iter(())

    @instrumented(OPERATIONS["fetch_next"])
    def fetch_next(self, export_handle: int, *, ctx: Optional[Context] = None) -> str:
        """Return the next chunk of an export, ``""`` once exhausted."""
        return self.fetch_next_result

    @instrumented(OPERATIONS["close_export_report"])
    def close_export_report(self, export_handle: int, *, ctx: Optional[Context] = None) -> None:
        pass

    # --- Entities -------------------------------------------------------------

    @instrumented(OPERATIONS["get_entity_by_entity_id"])
    def get_entity_by_entity_id(
        self, entity_id: int, flags: int = SZ_NO_FLAGS, *, ctx: Optional[Context] = None
    ) -> str:
        """Return the resolved entity document for ``entity_id``."""
        return self.get_entity_by_entity_id_result

    @instrumented(OPERATIONS["get_entity_by_record_id"])
    def get_entity_by_record_id(
        self,
        data_source_code: str,
        record_id: str,
        flags: int = SZ_NO_FLAGS,
        *,
        ctx: Optional[Context] = None,
    ) -> str:
        """Return the resolved entity containing the given record."""
        return self.get_entity_by_record_id_result

    @instrumented(OPERATIONS["get_virtual_entity_by_record_id"])
    def get_virtual_entity_by_record_id(
        self, record_keys: str, flags: int = SZ_NO_FLAGS, *, ctx: Optional[Context] = None
    ) -> str:
        return self.get_virtual_entity_by_record_id_result

    @instrumented(OPERATIONS["how_entity_by_entity_id"])
    def how_entity_by_entity_id(
        self, entity_id: int, flags: int = SZ_NO_FLAGS, *, ctx: Optional[Context] = None
    ) -> str:
        """Describe how the entity was resolved."""
        return self.how_entity_by_entity_id_result

    @instrumented(OPERATIONS["reevaluate_entity"])
    def reevaluate_entity(self, entity_id: int, flags: int = SZ_NO_FLAGS, *, ctx: Optional[Context] = None) -> str:
        return self.reevaluate_entity_result

    @instrumented(OPERATIONS["find_interesting_entities_by_entity_id"])
    def find_interesting_entities_by_entity_id(
        self, entity_id: int, flags: int = SZ_NO_FLAGS, *, ctx: Optional[Context] = None
    ) -> str:
        return self.find_interesting_entities_by_entity_id_result

    @instrumented(OPERATIONS["find_interesting_entities_by_record_id"])
    def find_interesting_entities_by_record_id(
        self,
        data_source_code: str,
        record_id: str,
        flags: int = SZ_NO_FLAGS,
        *,
        ctx: Optional[Context] = None,
    ) -> str:
        return self.find_interesting_entities_by_record_id_result

    # --- Networks and paths ---------------------------------------------------

    @instrumented(OPERATIONS["find_network_by_entity_id"])
    def find_network_by_entity_id(
        self,
        entity_ids: str,
        max_degrees: int,
        build_out_degrees: int,
        build_out_max_entities: int,
        flags: int = SZ_NO_FLAGS,
        *,
        ctx: Optional[Context] = None,
    ) -> str:
        """Return the network of entities around ``entity_ids``.

        Args:
            entity_ids: JSON document ``{"ENTITIES":[{"ENTITY_ID":...}]}``.
            max_degrees: Maximum path length between the given entities.
            build_out_degrees: Degrees of separation to build out around them.
            build_out_max_entities: Cap on entities added by the build out.
            flags: Output flags.
            ctx: Optional cancellation context.

        Returns:
            str: Canned ``find_network_by_entity_id_result``.
        """
        return self.find_network_by_entity_id_result

    @instrumented(OPERATIONS["find_network_by_record_id"])
    def find_network_by_record_id(
        self,
        record_keys: str,
        max_degrees: int,
        build_out_degrees: int,
        build_out_max_entities: int,
        flags: int = SZ_NO_FLAGS,
        *,
        ctx: Optional[Context] = None,
    ) -> str:
        """Like :meth:`find_network_by_entity_id`, keyed by record."""
        return self.find_network_by_record_id_result

    @instrumented(OPERATIONS["find_path_by_entity_id"])
    def find_path_by_entity_id(
        self,
        start_entity_id: int,
        end_entity_id: int,
        max_degrees: int,
        avoid_entity_ids: str = "",
        required_data_sources: str = "",
        flags: int = SZ_NO_FLAGS,
        *,
        ctx: Optional[Context] = None,
    ) -> str:
        """Return the shortest path between two entities."""
        return self.find_path_by_entity_id_result

    @instrumented(OPERATIONS["find_path_by_record_id"])
    def find_path_by_record_id(
        self,
        start_data_source_code: str,
        start_record_id: str,
        end_data_source_code: str,
        end_record_id: str,
        max_degrees: int,
        avoid_record_keys: str = "",
        required_data_sources: str = "",
        flags: int = SZ_NO_FLAGS,
        *,
        ctx: Optional[Context] = None,
    ) -> str:
        """Return the shortest path between the entities of two records."""
        return self.find_path_by_record_id_result

    # --- Search and why -------------------------------------------------------

    @instrumented(OPERATIONS["search_by_attributes"])
    def search_by_attributes(
        self,
        attributes: str,
        search_profile: str = "",
        flags: int = SZ_NO_FLAGS,
        *,
        ctx: Optional[Context] = None,
    ) -> str:
        """Search entities matching an attribute document."""
        return self.search_by_attributes_result

    @instrumented(OPERATIONS["why_entities"])
    def why_entities(
        self,
        entity_id_1: int,
        entity_id_2: int,
        flags: int = SZ_NO_FLAGS,
        *,
        ctx: Optional[Context] = None,
    ) -> str:
        return self.why_entities_result

    @instrumented(OPERATIONS["why_record_in_entity"])
    def why_record_in_entity(
        self,
        data_source_code: str,
        record_id: str,
        flags: int = SZ_NO_FLAGS,
        *,
        ctx: Optional[Context] = None,
    ) -> str:
        return self.why_record_in_entity_result

    @instrumented(OPERATIONS["why_records"])
    def why_records(
        self,
        data_source_code_1: str,
        record_id_1: str,
        data_source_code_2: str,
        record_id_2: str,
        flags: int = SZ_NO_FLAGS,
        *,
        ctx: Optional[Context] = None,
    ) -> str:
        """Explain why two records resolved, or did not resolve, together."""
        return self.why_records_result

    @instrumented(OPERATIONS["why_search"])
    def why_search(
        self,
        attributes: str,
        entity_id: int,
        search_profile: str = "",
        flags: int = SZ_NO_FLAGS,
        *,
        ctx: Optional[Context] = None,
    ) -> str:
        """Explain why ``entity_id`` was or was not returned for ``attributes``."""
        return self.why_search_result

    # --- Lifecycle ------------------------------------------------------------

    @instrumented(OPERATIONS["get_active_config_id"])
    def get_active_config_id(self, *, ctx: Optional[Context] = None) -> int:
        """Return the identifier of the configuration in use."""
        return self.get_active_config_id_result

    @instrumented(OPERATIONS["get_stats"])
    def get_stats(self, *, ctx: Optional[Context] = None) -> str:
        return self.get_stats_result

    @instrumented(OPERATIONS["initialize"])
    def initialize(
        self,
        instance_name: str,
        settings: str,
        config_id: int = 0,
        verbose_logging: int = SZ_NO_LOGGING,
        *,
        ctx: Optional[Context] = None,
    ) -> None:
        """Initialize the façade; accepted and ignored by the mock."""

    @instrumented(OPERATIONS["prime_engine"])
    def prime_engine(self, *, ctx: Optional[Context] = None) -> None:
        pass

    @instrumented(OPERATIONS["reinitialize"])
    def reinitialize(self, config_id: int, *, ctx: Optional[Context] = None) -> None:
        """Switch to configuration ``config_id``."""

    @instrumented(OPERATIONS["destroy"])
    def destroy(self, *, ctx: Optional[Context] = None) -> None:
        """Release resources; nothing to release in the mock."""
