"""Helpers shared by the szconfig, szconfigmanager, szdiagnostic, szengine and szproduct modules."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Iterable

from .logging_config import SzLogger

if TYPE_CHECKING:
    from .envelope import Operation

_SENSITIVE_TOKENS = ("password", "secret", "token", "key")
_SENSITIVE_DETAIL_KEYS = ("settings",)
_SENSITIVE_DETAIL_TOKENS = ("password", "secret", "token")


def get_logger(component_id: int, id_messages: Dict[int, str]) -> SzLogger:
    """Return a logger adapter writing to ``sz_mock.<component_id>``.

    Args:
        component_id: Component identifier used in message ids.
        id_messages: Message text per message number.

    Returns:
        SzLogger: A new adapter at INFO level.
    """
    return SzLogger(component_id, id_messages, logging.getLogger(f"sz_mock.{component_id}"))


def build_id_messages(operations: Iterable["Operation"]) -> Dict[int, str]:
    """Build the entry/exit trace catalogue for a set of operations.

    Args:
        operations: Operation descriptors of one component.

    Returns:
        Dict[int, str]: Message text per trace number.
    """
    messages: Dict[int, str] = {}
    for operation in operations:
        messages[operation.trace_entry] = f"Enter {operation.name}."
        messages[operation.trace_exit] = f"Exit {operation.name}."
    return messages


def stringify(value: Any) -> str:
    """Render a detail value: strings unchanged, integers in base 10, None as empty."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


def mask_sensitive(data):
    """Return a copy of config data with sensitive values masked."""
    if isinstance(data, dict):
        return {k: _mask_sensitive_value(k, v) for k, v in data.items()}
    if isinstance(data, list):
        return [mask_sensitive(item) for item in data]
    return data


def mask_sensitive_details(operation_name: str, details: Dict[str, str]) -> Dict[str, str]:
    """Redactor masking credentials in observer details.

    ``settings`` documents carry database connection strings, so they are
    masked along with any key that looks like a secret.

    Args:
        operation_name: Name of the operation producing the details.
        details: Details mapping about to be sent to observers.

    Returns:
        Dict[str, str]: Details with sensitive values masked.
    """
    return {
        key: _mask(value) if _is_sensitive_detail(key) else value
        for key, value in details.items()
    }


def _mask_sensitive_value(key: str, value):
    """Mask password values; leave others unchanged."""
    if isinstance(value, dict):
        return mask_sensitive(value)
    if isinstance(value, list):
        return [_mask_sensitive_value(key, item) for item in value]
    if isinstance(value, str) and _is_sensitive_key(key):
        return _mask(value)
    return value


def _mask(value: str) -> str:
    if len(value) <= 6:
        return f"{value[:1]}***{value[-1:]}"
    return f"{value[:3]}***{value[-3:]}"


def _is_sensitive_detail(key: str) -> bool:
    """Return True for detail keys that may carry credentials."""
    key_lower = key.lower()
    return key in _SENSITIVE_DETAIL_KEYS or any(token in key_lower for token in _SENSITIVE_DETAIL_TOKENS)


def _is_sensitive_key(key: str) -> bool:
    """Return True if the key name indicates sensitive content."""
    key_lower = key.lower()
    return any(token in key_lower for token in _SENSITIVE_TOKENS)
