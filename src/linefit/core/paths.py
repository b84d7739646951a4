"""XDG-compliant path helpers for linefit configuration and logs."""

from __future__ import annotations

import os
from pathlib import Path

from platformdirs import user_config_dir, user_data_dir

from linefit.core.constants import APP_NAME, CONFIG_FILENAME, DEBUG_LOG_FILENAME


def get_config_dir() -> Path:
    """Get the config directory (config.toml)."""
    override = os.environ.get("LINEFIT_CONFIG_DIR")
    if override:
        return Path(override).resolve()
    return Path(user_config_dir(APP_NAME))


def get_data_dir() -> Path:
    """Get the data directory (exported debug logs)."""
    override = os.environ.get("LINEFIT_DATA_DIR")
    if override:
        return Path(override).resolve()
    return Path(user_data_dir(APP_NAME))


def get_config_path() -> Path:
    """Get the path to the main config file."""
    return get_config_dir() / CONFIG_FILENAME


def get_debug_log_path() -> Path:
    """Get the path to the debug log export file."""
    return get_data_dir() / DEBUG_LOG_FILENAME
