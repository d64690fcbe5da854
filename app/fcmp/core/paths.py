"""XDG-compliant path management for fcmp.

The configuration file lives in ``$XDG_CONFIG_HOME/fcmp/`` when the variable
is set and in ``~/.config/fcmp/`` otherwise.
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "fcmp"

CONFIG_FILENAME = "config.toml"


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/fcmp/ (or XDG_CONFIG_HOME/fcmp/).
    """
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_config_path() -> Path:
    """Get the default configuration file path."""
    return get_config_dir() / CONFIG_FILENAME
