from __future__ import annotations

"""
Configuration Domain Management.

Handles the persistent defaults used by the CLI, stored as JSON in the user
data directory. Missing keys are filled from defaults on load.
"""

import json
import logging
import os
from typing import Any, Dict

from permwalk.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE = os.path.join(get_user_data_dir(), "config.json")
CURRENT_CONFIG_VERSION = "1.0.0"
DEFAULT_PERMISSION = "755"
DEFAULT_ERROR_LOG_NAME = "permwalk_errors.txt"

# Per-invocation values that are never persisted
SESSION_KEYS = ("target_path", "permission")


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        "target_path": os.getcwd(),
        "permission": DEFAULT_PERMISSION,

        # Traversal
        "recursive": False,
        "sort_entries": True,
        "follow_symlinks": False,

        # Safety
        "dry_run": False,

        # Diagnostics
        "save_error_log": False,
        "error_log_path": os.path.join(os.getcwd(), DEFAULT_ERROR_LOG_NAME),
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config() -> Dict[str, Any]:
    """
    Load the saved configuration, merged over the defaults.

    A missing or corrupted file yields the defaults.

    Returns:
        Dict[str, Any]: The active configuration.
    """
    config = get_default_config()

    if not os.path.exists(CONFIG_FILE):
        logger.debug("Config file not found. Returning defaults.")
        return config

    try:
        with open(CONFIG_FILE, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Failed to load config: {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Using defaults.")
        return config

    settings = data.get("settings", {})
    if isinstance(settings, dict):
        config.update({k: v for k, v in settings.items() if k in config and k not in SESSION_KEYS})
    return config


def save_config(config: Dict[str, Any]) -> None:
    """
    Persist the reusable options of a configuration to disk.

    The target path and permission are left out; they are always taken from
    the command line.

    Args:
        config: Configuration dictionary to save.
    """
    settings = {k: v for k, v in config.items() if k not in SESSION_KEYS}
    state = {"version": CURRENT_CONFIG_VERSION, "settings": settings}
    try:
        os.makedirs(os.path.dirname(CONFIG_FILE), exist_ok=True)
        with open(CONFIG_FILE, "w", encoding="utf-8") as f:
            json.dump(state, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {CONFIG_FILE}")
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
