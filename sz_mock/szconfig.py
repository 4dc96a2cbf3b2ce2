"""Mock implementation of the Senzing SzConfig interface."""

from __future__ import annotations

from typing import Optional

from sz_shared.constants import SZ_NO_LOGGING, SZCONFIG_COMPONENT_ID

from . import helper
from .context import Context
from .envelope import COMMON_OPERATIONS, HANDLE, STRING, Operation, SzMockBase, details, instrumented

COMPONENT_ID = SZCONFIG_COMPONENT_ID

OPERATIONS = {
    "add_data_source": Operation(
        "add_data_source", 1, 8001, details(dataSourceCode="data_source_code"), include_return=True
    ),
    "delete_data_source": Operation("delete_data_source", 9, 8004, details(dataSourceCode="data_source_code")),
    "destroy": Operation("destroy", 11, 8005),
    "export": Operation("export", 13, 8006),
    "get_data_sources": Operation("get_data_sources", 15, 8008),
    "initialize": Operation(
        "initialize",
        17,
        8007,
        details(instanceName="instance_name", settings="settings", verboseLogging="verbose_logging"),
    ),
    "import_config": Operation("import_config", 21, 8009),
    "import_template": Operation("import_template", 23, 8010),
    "verify_config_definition": Operation("verify_config_definition", 25, 8011),
}


class SzConfig(SzMockBase):
    """Configuration authoring façade returning canned values."""

    COMPONENT_ID = COMPONENT_ID
    CANNED_FIELDS = {
        "add_data_source_result": STRING,
        "delete_data_source_result": STRING,
        "export_result": STRING,
        "get_data_sources_result": STRING,
        "import_config_result": HANDLE,
        "import_template_result": HANDLE,
    }
    ID_MESSAGES = helper.build_id_messages([*OPERATIONS.values(), *COMMON_OPERATIONS])

    @instrumented(OPERATIONS["add_data_source"])
    def add_data_source(self, data_source_code: str, *, ctx: Optional[Context] = None) -> str:
        """Add a data source to the in-memory configuration.

        Args:
            data_source_code: Unique identifier of the data source (e.g. ``"TEST_DATASOURCE"``).
            ctx: Optional cancellation context.

        Returns:
            str: JSON document describing the new data source, e.g. ``{"DSRC_ID":1001}``.
        """
        return self.add_data_source_result

    @instrumented(OPERATIONS["delete_data_source"])
    def delete_data_source(self, data_source_code: str, *, ctx: Optional[Context] = None) -> str:
        """Remove a data source from the in-memory configuration."""
        return self.delete_data_source_result

    @instrumented(OPERATIONS["destroy"])
    def destroy(self, *, ctx: Optional[Context] = None) -> None:
        """Release resources; nothing to release in the mock."""

    @instrumented(OPERATIONS["export"])
    def export(self, *, ctx: Optional[Context] = None) -> str:
        """Return the configuration JSON document."""
        return self.export_result

    @instrumented(OPERATIONS["get_data_sources"])
    def get_data_sources(self, *, ctx: Optional[Context] = None) -> str:
        """Return a JSON document listing the configured data sources."""
        return self.get_data_sources_result

    @instrumented(OPERATIONS["initialize"])
    def initialize(
        self,
        instance_name: str,
        settings: str,
        verbose_logging: int = SZ_NO_LOGGING,
        *,
        ctx: Optional[Context] = None,
    ) -> None:
        """Initialize the façade; accepted and ignored by the mock.

        Args:
            instance_name: Name used in Senzing diagnostics.
            settings: Engine settings JSON document.
            verbose_logging: ``SZ_VERBOSE_LOGGING`` to request verbose logs.
            ctx: Optional cancellation context.
        """

    @instrumented(OPERATIONS["import_config"])
    def import_config(self, config_definition: str, *, ctx: Optional[Context] = None) -> int:
        """Load a configuration JSON document and return its handle."""
        return self.import_config_result

    @instrumented(OPERATIONS["import_template"])
    def import_template(self, *, ctx: Optional[Context] = None) -> int:
        """Load the default configuration template and return its handle."""
        return self.import_template_result

    @instrumented(OPERATIONS["verify_config_definition"])
    def verify_config_definition(self, config_definition: str, *, ctx: Optional[Context] = None) -> None:
        """Accept any configuration definition."""
