from __future__ import annotations

"""
Configuration Domain Management.

Defines the default runtime configuration and loads user preferences from
an optional JSON file. CLI overrides are merged on top by the interface layer.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from wintree.domain.constants import UNLIMITED_DEPTH
from wintree.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE_NAME = "config.json"

CONFIG_KEYS = (
    "input_path",
    "show_files",
    "use_ascii",
    "max_depth",
    "output_file",
    "log_level",
)


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        "input_path": os.getcwd(),
        "show_files": False,
        "use_ascii": False,
        "max_depth": UNLIMITED_DEPTH,
        "output_file": "",
        "log_level": "WARNING",
    }


def get_config_path() -> str:
    """Resolve the location of the per-user configuration file."""
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)

# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from a JSON file merged over the defaults.

    Unknown keys are dropped. A missing file yields the defaults; an
    unreadable or malformed file is logged and also yields the defaults.

    Args:
        path: Explicit config file. Defaults to the per-user file.

    Returns:
        Dict[str, Any]: The merged configuration.
    """
    defaults = get_default_config()
    config_path = path or get_config_path()

    if not os.path.exists(config_path):
        logger.debug(f"Config file not found at {config_path}. Returning defaults.")
        return defaults

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config from {config_path}: {e}. Using defaults.")
        return defaults

    if not isinstance(data, dict):
        logger.warning(f"Corrupted config file at {config_path}. Using defaults.")
        return defaults

    for key in CONFIG_KEYS:
        if key in data:
            defaults[key] = data[key]

    ignored = sorted(set(data) - set(CONFIG_KEYS))
    if ignored:
        logger.warning(f"Ignoring unknown config keys in {config_path}: {', '.join(ignored)}")

    logger.debug(f"Configuration loaded from {config_path}")
    return defaults
