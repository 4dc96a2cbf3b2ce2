"""Mock implementation of the Senzing SzProduct interface."""

from __future__ import annotations

from typing import Optional

from sz_shared.constants import SZ_NO_LOGGING, SZPRODUCT_COMPONENT_ID

from . import helper
from .context import Context
from .envelope import COMMON_OPERATIONS, STRING, Operation, SzMockBase, details, instrumented

COMPONENT_ID = SZPRODUCT_COMPONENT_ID

OPERATIONS = {
    "destroy": Operation("destroy", 3, 8001),
    "initialize": Operation(
        "initialize",
        9,
        8002,
        details(instanceName="instance_name", settings="settings", verboseLogging="verbose_logging"),
    ),
    "get_license": Operation("get_license", 11, 8003),
    "get_version": Operation("get_version", 19, 8004),
}


class SzProduct(SzMockBase):
    """Product information façade returning canned license and version documents."""

    COMPONENT_ID = COMPONENT_ID
    CANNED_FIELDS = {
        "get_license_result": STRING,
        "get_version_result": STRING,
    }
    ID_MESSAGES = helper.build_id_messages([*OPERATIONS.values(), *COMMON_OPERATIONS])

    @instrumented(OPERATIONS["destroy"])
    def destroy(self, *, ctx: Optional[Context] = None) -> None:
        """Release resources; nothing to release in the mock."""

    @instrumented(OPERATIONS["initialize"])
    def initialize(
        self,
        instance_name: str,
        settings: str,
        verbose_logging: int = SZ_NO_LOGGING,
        *,
        ctx: Optional[Context] = None,
    ) -> None:
        """Initialize the façade; accepted and ignored by the mock."""

    @instrumented(OPERATIONS["get_license"])
    def get_license(self, *, ctx: Optional[Context] = None) -> str:
        """Return the license JSON document.

        Returns:
            str: Canned ``get_license_result``; empty when not configured.
        """
        return self.get_license_result

    @instrumented(OPERATIONS["get_version"])
    def get_version(self, *, ctx: Optional[Context] = None) -> str:
        """Return the version JSON document."""
        return self.get_version_result
