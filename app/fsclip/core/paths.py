"""Locations of fsclip's configuration files.

Files live in ``$XDG_CONFIG_HOME/fsclip`` (``~/.config/fsclip`` when the
variable is unset or empty). Nothing here touches the filesystem.
"""

import os
from pathlib import Path

APP_NAME = "fsclip"


def get_config_dir() -> Path:
    """Get the configuration directory.

    Returns:
        ``$XDG_CONFIG_HOME/fsclip``, or ``~/.config/fsclip``.
    """
    base = os.environ.get("XDG_CONFIG_HOME")
    root = Path(base) if base else Path.home() / ".config"
    return root / APP_NAME


def get_settings_path() -> Path:
    """Path of the engine settings file (``config.toml``)."""
    return get_config_dir() / "config.toml"


def get_theme_path() -> Path:
    """Path of the optional color override file (``theme.toml``)."""
    return get_config_dir() / "theme.toml"
