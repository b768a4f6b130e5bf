# file: aes256cbc/config.py
"""
Configuration loading from YAML with hardcoded fallback.
"""

import copy
import logging
import os
from typing import Any, Dict, Optional

import yaml


logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = os.path.join(
    os.path.dirname(__file__),
    "default_config.yaml"
)


def get_default_config() -> Dict[str, Any]:
    """
    Get hardcoded default configuration.

    Returns:
        Default configuration dictionary
    """
    return {
        "encoding": {
            "line_length": 64,
        },
        "logging": {
            "level": "WARNING",
        },
    }


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from YAML file, layered over the defaults.

    Args:
        config_path: Path to YAML config file. None uses the packaged
                     default_config.yaml.

    Returns:
        config: Configuration dictionary
    """
    defaults = get_default_config()

    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH
        if not os.path.exists(config_path):
            return defaults

    if not os.path.exists(config_path):
        logger.warning(f"Config file not found: {config_path}, using defaults")
        return defaults

    with open(config_path, 'r') as f:
        loaded = yaml.safe_load(f) or {}
    logger.info(f"Loaded configuration from {config_path}")

    if not isinstance(loaded, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping")

    return _merge(defaults, loaded)
