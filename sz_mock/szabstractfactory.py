"""Abstract factory producing façades that share one canned-value bag."""

from __future__ import annotations

from typing import Any, Mapping, Optional, Type, TypeVar

from .context import Context
from .envelope import SzMockBase
from .logging_config import log
from .szconfig import SzConfig
from .szconfigmanager import SzConfigManager
from .szdiagnostic import SzDiagnostic
from .szengine import SzEngine
from .szproduct import SzProduct
from .testdata import TestData

_Facade = TypeVar("_Facade", bound=SzMockBase)


class SzAbstractFactory:
    """Create mock façades populated from a shared :class:`TestData` bag.

    Every ``create_*`` call returns a new façade; façades do not share
    observers, log levels or origin, only the canned values read from the bag
    at creation time.
    """

    def __init__(self, test_data: Optional[TestData] = None, observer_origin: str = ""):
        """Initialize the factory.

        Args:
            test_data: Canned values for produced façades; an empty bag when
                omitted, so every operation returns its zero value.
            observer_origin: Origin tag set on every produced façade.
        """
        self.test_data = test_data if test_data is not None else TestData()
        self.observer_origin = observer_origin

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any]) -> "SzAbstractFactory":
        """Build a factory from a configuration mapping (see :func:`sz_mock.config.load_config`).

        Args:
            settings: Mapping with optional ``test_data`` and ``observer_origin`` keys.

        Returns:
            SzAbstractFactory: Factory using the configured bag and origin.

        Raises:
            ValueError: If ``test_data`` is malformed.
        """
        test_data = TestData.from_mapping(settings.get("test_data"))
        origin = settings.get("observer_origin") or ""
        log.debug(
            "Factory built from settings: %d int64s, %d strings, %d handles, origin=%r",
            len(test_data.int64s),
            len(test_data.strings),
            len(test_data.handles),
            origin,
        )
        return cls(test_data, observer_origin=str(origin))

    def _build(self, facade_cls: Type[_Facade], **extra: Any) -> _Facade:
        facade = facade_cls(**extra, **self.test_data.canned_values(facade_cls))
        if self.observer_origin:
            facade.set_observer_origin(self.observer_origin)
        return facade

    def create_config(self, *, ctx: Optional[Context] = None) -> SzConfig:
        return self._build(SzConfig)

    def create_config_manager(self, *, ctx: Optional[Context] = None) -> SzConfigManager:
        """Return a config manager whose ``create_config_*`` go through :meth:`create_config`."""
        return self._build(SzConfigManager, config_factory=self.create_config)

    def create_diagnostic(self, *, ctx: Optional[Context] = None) -> SzDiagnostic:
        return self._build(SzDiagnostic)

    def create_engine(self, *, ctx: Optional[Context] = None) -> SzEngine:
        return self._build(SzEngine)

    def create_product(self, *, ctx: Optional[Context] = None) -> SzProduct:
        return self._build(SzProduct)

    def destroy(self, *, ctx: Optional[Context] = None) -> None:
        """No-op; produced façades hold no shared resources."""

    def reinitialize(self, config_id: int, *, ctx: Optional[Context] = None) -> None:
        """No-op; accepted for interface compatibility."""
