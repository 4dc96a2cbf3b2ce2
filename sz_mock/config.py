"""YAML configuration for the mock SDK, overlaid with environment variables."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Union

import yaml

from .helper import mask_sensitive
from .logging_config import log
from .testdata import TestData

DEFAULT_CONFIG_PATH = "sz_mock.yaml"

PathLike = Union[str, Path]


def load_config(path: Optional[PathLike] = None) -> dict:
    """Build configuration from a YAML file overlaid with environment variables.

    The file is ``path`` when given, otherwise ``$SENZING_MOCK_CONFIG`` or
    ``sz_mock.yaml`` in the working directory. A missing or malformed file is
    logged and treated as empty.

    Args:
        path: Optional explicit configuration file.

    Returns:
        dict: Configuration map with optional ``log_level``,
        ``observer_origin`` and ``test_data`` keys.
    """
    config_path = Path(path or os.getenv("SENZING_MOCK_CONFIG") or DEFAULT_CONFIG_PATH)
    cfg: dict = {}

    data = _read_yaml(config_path)
    if data is not None:
        cfg.update(data)

    # Environment variables override file values
    log_level = os.getenv("SENZING_LOG_LEVEL")
    if log_level:
        cfg["log_level"] = log_level

    origin = os.getenv("SENZING_OBSERVER_ORIGIN")
    if origin:
        cfg["observer_origin"] = origin

    if "test_data" in cfg and not isinstance(cfg["test_data"], dict):
        log.warning("Ignoring test_data in %s: expected a mapping", config_path)
        cfg.pop("test_data")

    log.info("Configuration loaded: %s", mask_sensitive(cfg))
    return cfg


def load_test_data(path: PathLike) -> TestData:
    """Read a canned-value bag from a YAML file.

    The file holds ``int64s``, ``strings`` and ``handles`` sections, either at
    the top level or under a ``test_data`` key.

    Args:
        path: YAML file to read.

    Returns:
        TestData: The bag; empty when the file is missing or malformed.

    Raises:
        ValueError: If a section is not a mapping or holds a non-integer
            value where an integer is expected.
    """
    data = _read_yaml(Path(path)) or {}
    section = data.get("test_data", data)
    return TestData.from_mapping(section if isinstance(section, dict) else {})


def _read_yaml(path: Path) -> Optional[dict]:
    """Return the mapping stored in ``path``, or None when unavailable."""
    try:
        if not path.exists():
            return None
        with path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
    except (OSError, yaml.YAMLError) as exc:
        log.warning("Failed to load config from %s: %s", path, exc)
        return None
    if not isinstance(data, dict):
        log.warning("Config file %s does not contain a mapping", path)
        return None
    return data
