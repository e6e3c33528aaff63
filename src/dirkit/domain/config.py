from __future__ import annotations

"""
Configuration Domain Management.

Handles persistent storage of user preferences as JSON in the user data
directory, with default fallback for missing or unreadable files.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from dirkit.infra.fs import get_user_data_dir
from dirkit.infra.json_io import json_load, json_save

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE_NAME = "config.json"
DEFAULT_TEMP_MODE = 0o700


def get_config_path() -> str:
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Diagnostics
        "log_level": "INFO",
        "log_file": "",

        # File loading
        "include_path": [os.curdir],

        # Temporary directories
        "temp_prefix": "",
        "temp_mode": DEFAULT_TEMP_MODE,

        # Output
        "json_indent": 2,
    }

# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the configuration from disk, merged over the defaults.

    A missing file yields the defaults. A corrupt file is logged and
    ignored.

    Args:
        path: Config file location. Defaults to the user data directory.

    Returns:
        Dict[str, Any]: The merged configuration.
    """
    path = path or get_config_path()
    config = get_default_config()

    if not os.path.exists(path):
        return config

    try:
        data = json_load(path)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Ignoring unreadable config file '{path}': {e}")
        return config

    if not isinstance(data, dict):
        logger.warning(f"Ignoring config file '{path}': top-level value is not an object.")
        return config

    config.update({k: v for k, v in data.items() if k in config})
    return config


def save_config(config: Dict[str, Any], path: Optional[str] = None) -> None:
    """Persist the configuration to disk."""
    path = path or get_config_path()
    json_save(path, config)
    logger.debug(f"Configuration saved to {path}")
