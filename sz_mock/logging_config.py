"""Logging setup helpers and the Senzing logger adapter for the mock SDK."""

from __future__ import annotations

import logging
import os
import sys
import threading
from typing import Any, Dict, Mapping, Optional

from sz_shared.constants import (
    LEVEL_DEBUG_NAME,
    LEVEL_ERROR_NAME,
    LEVEL_FATAL_NAME,
    LEVEL_INFO_NAME,
    LEVEL_PANIC_NAME,
    LEVEL_TRACE_NAME,
    LEVEL_WARN_NAME,
    format_message_id,
)
from sz_shared.errors import SzBadInputError, SzSdkError

TRACE = 5
PANIC = logging.CRITICAL + 5

logging.addLevelName(TRACE, LEVEL_TRACE_NAME)
logging.addLevelName(PANIC, LEVEL_PANIC_NAME)

# Senzing level names mapped onto standard logging levels.
LEVELS: Dict[str, int] = {
    LEVEL_TRACE_NAME: TRACE,
    LEVEL_DEBUG_NAME: logging.DEBUG,
    LEVEL_INFO_NAME: logging.INFO,
    LEVEL_WARN_NAME: logging.WARNING,
    LEVEL_ERROR_NAME: logging.ERROR,
    LEVEL_FATAL_NAME: logging.CRITICAL,
    LEVEL_PANIC_NAME: PANIC,
}

# Shared application logger used across modules.
log = logging.getLogger("sz_mock")


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Configure console logging with a sensible default format and level.

    Args:
        level: Optional log level (e.g. ``\"INFO\"``, ``\"WARN\"`` or
            ``logging.DEBUG``). If omitted, the ``SENZING_LOG_LEVEL``
            environment variable is used and falls back to ``INFO`` when unset
            or invalid.

    Returns:
        logging.Logger: The configured application logger instance.
    """
    resolved_level = _coerce_level(level)

    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s - %(message)s")
        )
        root.addHandler(handler)

    root.setLevel(resolved_level)

    # Keep noisy third-party libraries at bay; adjust as needed.
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    log.setLevel(resolved_level)
    log.propagate = True
    log.debug("Logging configured at level %s", logging.getLevelName(resolved_level))
    return log


def _coerce_level(level: str | int | None) -> int:
    """Return a numeric logging level from user input or environment.

    Args:
        level: Explicit level value. When ``None``, ``SENZING_LOG_LEVEL`` from
            the environment is used instead.

    Returns:
        int: Numeric logging level understood by the standard ``logging`` module.
    """
    candidate = level if level is not None else os.getenv("SENZING_LOG_LEVEL", LEVEL_INFO_NAME)

    if isinstance(candidate, int):
        return candidate

    if isinstance(candidate, str):
        name = candidate.strip().upper()
        if name in LEVELS:
            return LEVELS[name]
        numeric = logging.getLevelName(name)
        if isinstance(numeric, int):
            return numeric

    return logging.INFO


def level_for_message_number(message_number: int) -> int:
    """Return the logging level implied by a message number.

    Message numbers are banded: below 1000 is TRACE, then DEBUG, INFO, WARN,
    ERROR and FATAL per thousand, PANIC from 6000 up.
    """
    if message_number < 1000:
        return TRACE
    if message_number < 2000:
        return logging.DEBUG
    if message_number < 3000:
        return logging.INFO
    if message_number < 4000:
        return logging.WARNING
    if message_number < 5000:
        return logging.ERROR
    if message_number < 6000:
        return logging.CRITICAL
    return PANIC


class SzLogger:
    """Message-number based logger adapter used by the SDK façades.

    Each adapter keeps its own threshold so that one façade switching to
    TRACE does not change what another façade emits. Records that pass the
    threshold are handed straight to the wrapped ``logging.Logger``'s handlers.
    """

    def __init__(
        self,
        component_id: int,
        id_messages: Mapping[int, str],
        logger: Optional[logging.Logger] = None,
        level_name: str = LEVEL_INFO_NAME,
    ):
        """Initialize the adapter.

        Args:
            component_id: Component identifier used in message ids.
            id_messages: Message text per message number.
            logger: Destination logger; defaults to the ``sz_mock`` logger.
            level_name: Initial Senzing level name.
        """
        self.component_id = component_id
        self.id_messages = dict(id_messages)
        self._logger = logger if logger is not None else log
        self._lock = threading.Lock()
        self._level_name = LEVEL_INFO_NAME
        self.set_log_level(level_name)

    @staticmethod
    def is_valid_log_level_name(log_level_name: str) -> bool:
        """Return True if ``log_level_name`` is a known Senzing level name."""
        return log_level_name in LEVELS

    def get_log_level(self) -> str:
        """Return the current Senzing level name."""
        return self._level_name

    def set_log_level(self, log_level_name: str) -> None:
        """Change the threshold of this adapter.

        Args:
            log_level_name: One of TRACE, DEBUG, INFO, WARN, ERROR, FATAL, PANIC.

        Raises:
            SzBadInputError: If the name is not a known level.
        """
        if not self.is_valid_log_level_name(log_level_name):
            raise SzBadInputError(f"invalid log level: {log_level_name}")
        with self._lock:
            self._level_name = log_level_name

    def is_enabled_for(self, level: int) -> bool:
        """Return True if records at ``level`` pass this adapter's threshold."""
        return level >= LEVELS[self._level_name]

    def log(self, message_number: int, *details: Any) -> None:
        """Emit message ``message_number`` with positional ``details``.

        Args:
            message_number: Number within the component's message catalogue.
            *details: Values attached to the record.

        Raises:
            SzSdkError: If the underlying logging machinery fails.
        """
        level = level_for_message_number(message_number)
        if not self.is_enabled_for(level):
            return
        message_id = format_message_id(self.component_id, message_number)
        text = self.id_messages.get(message_number, "")
        try:
            record = self._logger.makeRecord(
                self._logger.name,
                level,
                "(sz_mock)",
                0,
                "%s: %s %s",
                (message_id, text, _format_details(details)),
                None,
                extra={"message_id": message_id, "details": details},
            )
            self._logger.handle(record)
        except (TypeError, ValueError, KeyError) as exc:
            raise SzSdkError(f"could not log {message_id}: {exc}", self.component_id, message_number) from exc


def _format_details(details: tuple) -> str:
    """Render trace details as a bracketed, comma separated list."""
    return "[" + ", ".join(repr(detail) for detail in details) + "]"
