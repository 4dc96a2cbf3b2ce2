"""Error hierarchy shared by the mock SDK and the observer library."""

from __future__ import annotations

from typing import Optional

from .constants import format_message_id


class SzError(Exception):
    """Base class for every error raised by the mock SDK."""

    def __init__(self, message: str, component_id: Optional[int] = None, error_number: Optional[int] = None):
        super().__init__(message)
        self.component_id = component_id
        self.error_number = error_number

    @property
    def error_code(self) -> Optional[str]:
        """Return the ``SZSDK`` code of the error when it carries one."""
        if self.component_id is None or self.error_number is None:
            return None
        return format_message_id(self.component_id, self.error_number)

    def __str__(self) -> str:
        message = super().__str__()
        code = self.error_code
        return f"{code}: {message}" if code else message


class SzBadInputError(SzError, ValueError):
    """An argument was rejected, e.g. an unknown log level name."""


class SzObserverError(SzError):
    """An observer failed to handle an event.

    Raised inside observer delivery threads only; callers of the SDK never
    see it.
    """


class SzSdkError(SzError):
    """A failure bubbled up from an SDK collaborator such as the logger."""
