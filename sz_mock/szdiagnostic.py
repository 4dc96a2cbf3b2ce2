"""Mock implementation of the Senzing SzDiagnostic interface."""

from __future__ import annotations

from typing import Optional

from sz_shared.constants import SZ_NO_LOGGING, SZDIAGNOSTIC_COMPONENT_ID

from . import helper
from .context import Context
from .envelope import COMMON_OPERATIONS, STRING, Operation, SzMockBase, details, instrumented

COMPONENT_ID = SZDIAGNOSTIC_COMPONENT_ID

_INITIALIZE_DETAILS = details(
    instanceName="instance_name",
    settings="settings",
    configID="config_id",
    verboseLogging="verbose_logging",
)

OPERATIONS = {
    "check_datastore_performance": Operation(
        "check_datastore_performance", 1, 8001, details(secondsToRun="seconds_to_run")
    ),
    "destroy": Operation("destroy", 5, 8002),
    "get_datastore_info": Operation("get_datastore_info", 7, 8003),
    "get_feature": Operation("get_feature", 9, 8004, details(featureID="feature_id")),
    "initialize": Operation("initialize", 11, 8005, _INITIALIZE_DETAILS),
    "initialize_with_config_id": Operation("initialize_with_config_id", 13, 8006, _INITIALIZE_DETAILS),
    "purge_repository": Operation("purge_repository", 15, 8007),
    "reinitialize": Operation("reinitialize", 17, 8008, details(configID="config_id")),
}


class SzDiagnostic(SzMockBase):
    COMPONENT_ID = COMPONENT_ID
    CANNED_FIELDS = {
        "check_datastore_performance_result": STRING,
        "get_datastore_info_result": STRING,
        "get_feature_result": STRING,
    }
    ID_MESSAGES = helper.build_id_messages([*OPERATIONS.values(), *COMMON_OPERATIONS])

    @instrumented(OPERATIONS["check_datastore_performance"])
    def check_datastore_performance(self, seconds_to_run: int, *, ctx: Optional[Context] = None) -> str:
        """Run a datastore insert benchmark.

        Args:
            seconds_to_run: Duration of the benchmark in seconds.
            ctx: Optional cancellation context.

        Returns:
            str: JSON document such as ``{"numRecordsInserted":0,"insertTime":0}``.
        """
        return self.check_datastore_performance_result

    @instrumented(OPERATIONS["destroy"])
    def destroy(self, *, ctx: Optional[Context] = None) -> None:
        pass

    @instrumented(OPERATIONS["get_datastore_info"])
    def get_datastore_info(self, *, ctx: Optional[Context] = None) -> str:
        return self.get_datastore_info_result

    @instrumented(OPERATIONS["get_feature"])
    def get_feature(self, feature_id: int, *, ctx: Optional[Context] = None) -> str:
        """Return the JSON description of feature ``feature_id``."""
        return self.get_feature_result

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

    @instrumented(OPERATIONS["initialize_with_config_id"])
    def initialize_with_config_id(
        self,
        instance_name: str,
        settings: str,
        config_id: int,
        verbose_logging: int = SZ_NO_LOGGING,
        *,
        ctx: Optional[Context] = None,
    ) -> None:
        """Initialize against an explicit configuration id."""

    @instrumented(OPERATIONS["purge_repository"])
    def purge_repository(self, *, ctx: Optional[Context] = None) -> None:
        """Delete all entity data; nothing is stored by the mock."""

    @instrumented(OPERATIONS["reinitialize"])
    def reinitialize(self, config_id: int, *, ctx: Optional[Context] = None) -> None:
        pass
