from __future__ import annotations

"""
Configuration Validation Service.

Ensures that a configuration dictionary coming from disk or the command
line has the expected keys and types, coercing where possible and
falling back to defaults otherwise.
"""

import logging
import os
from typing import Any, Dict, List, Tuple

from dirkit.domain.config import get_default_config
from dirkit.infra.logging.config import LEVEL_NAMES

logger = logging.getLogger(__name__)


def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a configuration dictionary.

    Args:
        config: Raw configuration data.
        strict: If True, raise on invalid values instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and
            a list of warnings.

    Raises:
        TypeError: In strict mode, on a non-dict config or a bad value type.
        ValueError: In strict mode, on an out-of-range value.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)

    def _reject(key: str, msg: str, exc: type = TypeError) -> None:
        if strict:
            raise exc(msg)
        warnings.append(f"{msg} Using default.")
        merged[key] = defaults[key]

    for key in config:
        if key not in defaults:
            warnings.append(f"Unknown config key ignored: '{key}'.")

    # --- log_level ---
    level = config.get("log_level", defaults["log_level"])
    if isinstance(level, str) and level.strip().upper() in LEVEL_NAMES:
        merged["log_level"] = level.strip().upper()
    else:
        _reject("log_level", f"Invalid log_level: {level!r}.", ValueError)

    # --- log_file ---
    log_file = config.get("log_file", defaults["log_file"])
    if log_file is None:
        merged["log_file"] = ""
    elif isinstance(log_file, str):
        merged["log_file"] = log_file.strip()
    else:
        _reject("log_file", f"Invalid log_file type: {type(log_file).__name__}.")

    # --- include_path ---
    include_path = config.get("include_path", defaults["include_path"])
    if isinstance(include_path, str):
        merged["include_path"] = [p for p in include_path.split(os.pathsep) if p]
    elif isinstance(include_path, (list, tuple)) and all(isinstance(p, str) for p in include_path):
        merged["include_path"] = [p for p in include_path if p]
    else:
        _reject("include_path", f"Invalid include_path: {include_path!r}.")
    if not merged["include_path"]:
        merged["include_path"] = list(defaults["include_path"])

    # --- temp_prefix ---
    prefix = config.get("temp_prefix", defaults["temp_prefix"])
    if isinstance(prefix, str) and "/" not in prefix and "\\" not in prefix:
        merged["temp_prefix"] = prefix
    else:
        _reject("temp_prefix", f"Invalid temp_prefix: {prefix!r}.", ValueError)

    # --- temp_mode / json_indent ---
    for key, low, high in (("temp_mode", 0, 0o777), ("json_indent", 0, 8)):
        value = config.get(key, defaults[key])
        if isinstance(value, str):
            try:
                value = int(value, 8) if key == "temp_mode" else int(value)
            except ValueError:
                pass
        if isinstance(value, bool) or not isinstance(value, int):
            _reject(key, f"Invalid {key} type: {type(value).__name__}.")
        elif not low <= value <= high:
            _reject(key, f"{key} out of range: {value}.", ValueError)
        else:
            merged[key] = value

    for w in warnings:
        logger.debug(f"Config validation: {w}")

    return merged, warnings
