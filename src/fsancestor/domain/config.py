from __future__ import annotations

"""
Configuration Domain Management.

Persists lookup preferences as JSON in the user data directory and
falls back to defaults when the file is missing or corrupted.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from fsancestor.domain.constants import CURRENT_CONFIG_VERSION
from fsancestor.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE = os.path.join(get_user_data_dir(), "config.json")

DEFAULT_EXCLUDE_PATTERNS = [
    r"^(__pycache__|\.git|\.idea|\.vscode|node_modules)$",
    r".*\.pyc$",
]


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        "source": os.getcwd(),
        "exclude_patterns": list(DEFAULT_EXCLUDE_PATTERNS),
        "strict": False,
        "print_tree": False,
        "log_level": "WARNING",
    }

# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the configuration from disk merged over the defaults.

    Args:
        path: Config file location. Defaults to ``CONFIG_FILE``.

    Returns:
        Dict[str, Any]: The loaded configuration, or defaults on failure.
    """
    config_path = path or CONFIG_FILE
    config = get_default_config()

    if not os.path.exists(config_path):
        logger.debug("Config file not found. Returning defaults.")
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return config

    settings = data.get("settings", {})
    if isinstance(settings, dict):
        config.update({k: v for k, v in settings.items() if k in config})
    return config


def save_config(config: Dict[str, Any], path: Optional[str] = None) -> bool:
    """
    Persist the configuration to disk.

    Args:
        config: Configuration dictionary to save.
        path: Config file location. Defaults to ``CONFIG_FILE``.

    Returns:
        bool: True when the file was written.
    """
    config_path = path or CONFIG_FILE
    payload = {"version": CURRENT_CONFIG_VERSION, "settings": config}
    try:
        os.makedirs(os.path.dirname(os.path.abspath(config_path)), exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=4)
        logger.debug(f"Config saved to {config_path}")
        return True
    except OSError as e:
        logger.error(f"Failed to save config: {e}")
        return False
