"""Mock implementation of the Senzing SzConfigManager interface."""

from __future__ import annotations

from typing import Any, Callable, Optional

from sz_shared.constants import SZ_NO_LOGGING, SZCONFIGMANAGER_COMPONENT_ID

from . import helper
from .context import Context
from .envelope import COMMON_OPERATIONS, INT64, STRING, Operation, SzMockBase, details, instrumented
from .szconfig import SzConfig

COMPONENT_ID = SZCONFIGMANAGER_COMPONENT_ID

OPERATIONS = {
    "register_config": Operation("register_config", 1, 8001, details(configComment="config_comment")),
    "create_config_from_config_id": Operation(
        "create_config_from_config_id", 3, 8002, details(configID="config_id")
    ),
    "create_config_from_string": Operation("create_config_from_string", 5, 8003),
    "create_config_from_template": Operation("create_config_from_template", 7, 8004),
    "destroy": Operation("destroy", 9, 8005),
    "get_config": Operation("get_config", 11, 8006, details(configID="config_id")),
    "get_configs": Operation("get_configs", 13, 8007),
    "get_default_config_id": Operation("get_default_config_id", 15, 8008),
    "initialize": Operation(
        "initialize",
        17,
        8009,
        details(instanceName="instance_name", settings="settings", verboseLogging="verbose_logging"),
    ),
    "replace_default_config_id": Operation(
        "replace_default_config_id",
        19,
        8010,
        details(
            currentDefaultConfigID="current_default_config_id",
            newDefaultConfigID="new_default_config_id",
        ),
    ),
    "set_default_config_id": Operation("set_default_config_id", 21, 8011, details(configID="config_id")),
}


class SzConfigManager(SzMockBase):
    """Configuration registry façade returning canned values.

    ``create_config_*`` methods build their :class:`SzConfig` through
    ``config_factory``, which the abstract factory points at its own
    ``create_config`` so produced configs share the factory's canned values.
    """

    COMPONENT_ID = COMPONENT_ID
    CANNED_FIELDS = {
        "register_config_result": INT64,
        "get_config_result": STRING,
        "get_configs_result": STRING,
        "get_default_config_id_result": INT64,
    }
    ID_MESSAGES = helper.build_id_messages([*OPERATIONS.values(), *COMMON_OPERATIONS])

    def __init__(self, config_factory: Optional[Callable[[], SzConfig]] = None, **canned: Any):
        super().__init__(**canned)
        self.config_factory: Callable[[], SzConfig] = config_factory or SzConfig

    @instrumented(OPERATIONS["register_config"])
    def register_config(self, config_definition: str, config_comment: str, *, ctx: Optional[Context] = None) -> int:
        """Store a configuration document and return its identifier.

        Args:
            config_definition: Senzing configuration JSON document.
            config_comment: Free-form comment stored with the configuration.
            ctx: Optional cancellation context.

        Returns:
            int: Identifier of the stored configuration.
        """
        return self.register_config_result

    def add_config(self, config_definition: str, config_comment: str, *, ctx: Optional[Context] = None) -> int:
        """Alias of :meth:`register_config` kept for older callers."""
        return self.register_config(config_definition, config_comment, ctx=ctx)

    @instrumented(OPERATIONS["create_config_from_config_id"])
    def create_config_from_config_id(self, config_id: int, *, ctx: Optional[Context] = None) -> SzConfig:
        """Return a config whose export is the canned ``get_config_result``."""
        config = self.config_factory()
        config.export_result = self.get_config_result
        return config

    @instrumented(OPERATIONS["create_config_from_string"])
    def create_config_from_string(self, config_definition: str, *, ctx: Optional[Context] = None) -> SzConfig:
        """Return a config whose export is ``config_definition``."""
        config = self.config_factory()
        config.export_result = config_definition
        return config

    @instrumented(OPERATIONS["create_config_from_template"])
    def create_config_from_template(self, *, ctx: Optional[Context] = None) -> SzConfig:
        """Return a config built from the template."""
        return self.config_factory()

    @instrumented(OPERATIONS["destroy"])
    def destroy(self, *, ctx: Optional[Context] = None) -> None:
        """Release resources; nothing to release in the mock."""

    @instrumented(OPERATIONS["get_config"])
    def get_config(self, config_id: int, *, ctx: Optional[Context] = None) -> str:
        """Return the configuration document stored under ``config_id``."""
        return self.get_config_result

    @instrumented(OPERATIONS["get_configs"])
    def get_configs(self, *, ctx: Optional[Context] = None) -> str:
        """Return a JSON document listing stored configurations."""
        return self.get_configs_result

    @instrumented(OPERATIONS["get_default_config_id"])
    def get_default_config_id(self, *, ctx: Optional[Context] = None) -> int:
        """Return the identifier of the default configuration."""
        return self.get_default_config_id_result

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

    @instrumented(OPERATIONS["replace_default_config_id"])
    def replace_default_config_id(
        self,
        current_default_config_id: int,
        new_default_config_id: int,
        *,
        ctx: Optional[Context] = None,
    ) -> None:
        """Swap the default configuration if it still equals ``current_default_config_id``."""

    @instrumented(OPERATIONS["set_default_config_id"])
    def set_default_config_id(self, config_id: int, *, ctx: Optional[Context] = None) -> None:
        """Make ``config_id`` the default configuration."""
