"""Mock Senzing SDK returning canned values, with tracing and observer notification."""

from sz_shared.errors import SzBadInputError, SzError, SzObserverError, SzSdkError

from .context import Context
from .envelope import Operation, StringFragment
from .logging_config import SzLogger, configure_logging
from .szabstractfactory import SzAbstractFactory
from .szconfig import SzConfig
from .szconfigmanager import SzConfigManager
from .szdiagnostic import SzDiagnostic
from .szengine import SzEngine
from .szproduct import SzProduct
from .testdata import TestData, data1

__all__ = [
    "Context",
    "Operation",
    "StringFragment",
    "SzAbstractFactory",
    "SzBadInputError",
    "SzConfig",
    "SzConfigManager",
    "SzDiagnostic",
    "SzEngine",
    "SzError",
    "SzLogger",
    "SzObserverError",
    "SzProduct",
    "SzSdkError",
    "TestData",
    "configure_logging",
    "data1",
]
