"""Shared exports for the Senzing mock SDK and observer library."""

from .constants import (  # noqa: F401
    EVENT_REGISTER_OBSERVER,
    EVENT_SET_LOG_LEVEL,
    EVENT_UNREGISTER_OBSERVER,
    LEVEL_TRACE_NAME,
    LOG_LEVEL_NAMES,
    SZ_NO_FLAGS,
    SZ_NO_LOGGING,
    SZ_VERBOSE_LOGGING,
    SZ_WITH_INFO,
    SZCONFIG_COMPONENT_ID,
    SZCONFIGMANAGER_COMPONENT_ID,
    SZDIAGNOSTIC_COMPONENT_ID,
    SZENGINE_COMPONENT_ID,
    SZPRODUCT_COMPONENT_ID,
    format_message_id,
)

__all__ = [
    "EVENT_REGISTER_OBSERVER",
    "EVENT_SET_LOG_LEVEL",
    "EVENT_UNREGISTER_OBSERVER",
    "LEVEL_TRACE_NAME",
    "LOG_LEVEL_NAMES",
    "SZ_NO_FLAGS",
    "SZ_NO_LOGGING",
    "SZ_VERBOSE_LOGGING",
    "SZ_WITH_INFO",
    "SZCONFIG_COMPONENT_ID",
    "SZCONFIGMANAGER_COMPONENT_ID",
    "SZDIAGNOSTIC_COMPONENT_ID",
    "SZENGINE_COMPONENT_ID",
    "SZPRODUCT_COMPONENT_ID",
    "format_message_id",
]

from .errors import SzBadInputError, SzError, SzObserverError, SzSdkError  # noqa: F401,E402

__all__ += ["SzBadInputError", "SzError", "SzObserverError", "SzSdkError"]
