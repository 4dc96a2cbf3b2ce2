"""Shared Senzing constants used by the mock SDK and the observer library."""

# Component identifiers
SZCONFIG_COMPONENT_ID = 6031
SZCONFIGMANAGER_COMPONENT_ID = 6032
SZDIAGNOSTIC_COMPONENT_ID = 6033
SZENGINE_COMPONENT_ID = 6034
SZPRODUCT_COMPONENT_ID = 6036

MESSAGE_ID_TEMPLATE = "SZSDK%04d%04d"

# Log level names
LEVEL_TRACE_NAME = "TRACE"
LEVEL_DEBUG_NAME = "DEBUG"
LEVEL_INFO_NAME = "INFO"
LEVEL_WARN_NAME = "WARN"
LEVEL_ERROR_NAME = "ERROR"
LEVEL_FATAL_NAME = "FATAL"
LEVEL_PANIC_NAME = "PANIC"

LOG_LEVEL_NAMES = (
    LEVEL_TRACE_NAME,
    LEVEL_DEBUG_NAME,
    LEVEL_INFO_NAME,
    LEVEL_WARN_NAME,
    LEVEL_ERROR_NAME,
    LEVEL_FATAL_NAME,
    LEVEL_PANIC_NAME,
)

# Observer event codes shared by every component
EVENT_REGISTER_OBSERVER = 8702
EVENT_SET_LOG_LEVEL = 8703
EVENT_UNREGISTER_OBSERVER = 8704

# Flags
SZ_NO_FLAGS = 0
SZ_NO_LOGGING = 0
SZ_VERBOSE_LOGGING = 1
SZ_WITH_INFO = 1 << 62


def format_message_id(component_id: int, number: int) -> str:
    """Return the ``SZSDKccccnnnn`` message identifier for a component message."""
    return MESSAGE_ID_TEMPLATE % (component_id, number)
