"""Logic for loading and merging configuration files."""

import logging
from pathlib import Path
from typing import Any

import yaml

from kernelpath.deep_merge import deep_merge
from kernelpath.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "device_policy": "modern",
    "extended_length": False,
    "drive_stream_strictness": "strict",
    "existence_timeout": 5.0,
    "current_directory": "C:\\",
    "drive_directories": {},
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = DEFAULT_CONFIG.copy()
    if path:
        p = Path(path)
        if not p.exists():
            logger.warning("Config file %s not found, using defaults", p)
            return config
        try:
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as exc:
            msg = f"Could not parse {p}: {exc}"
            raise ConfigError(msg) from exc
        if not isinstance(user_config, dict):
            msg = f"{p} must contain a mapping, got {type(user_config).__name__}"
            raise ConfigError(msg)
        config = deep_merge(config, user_config)
    return config
