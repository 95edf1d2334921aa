"""XDG-compliant path management for package-assistant.

This module provides standardized paths following the XDG Base Directory
Specification for configuration and data storage.

XDG defaults:
- Config: ~/.config/package-assistant/
- Data: ~/.local/share/package-assistant/
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "package-assistant"

SETTINGS_FILENAME = "settings.toml"
DATA_FILENAME = "data.toml"


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/package-assistant/ (or XDG_CONFIG_HOME/package-assistant/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_data_dir() -> Path:
    """Get the data directory path.

    Data holds the timestamp of the last applied update.

    Returns:
        Path to ~/.local/share/package-assistant/ (or XDG_DATA_HOME/package-assistant/).
    """
    return _get_xdg_dir("XDG_DATA_HOME", ".local/share")


def get_settings_path() -> Path:
    """Get the settings file path."""
    return get_config_dir() / SETTINGS_FILENAME


def get_data_path() -> Path:
    """Get the data file path."""
    return get_data_dir() / DATA_FILENAME


def _ensure_dir(path: Path, name: str) -> Path:
    """Create directory if it doesn't exist.

    Args:
        path: Directory path to create.
        name: Human-readable name for error messages.

    Returns:
        The created/existing directory path.

    Raises:
        RuntimeError: If directory cannot be created.
    """
    try:
        path.mkdir(parents=True, exist_ok=True)
    except PermissionError as e:
        msg = f"Cannot create {name} directory {path}: Permission denied"
        raise RuntimeError(msg) from e
    except OSError as e:
        msg = f"Cannot create {name} directory {path}: {e}"
        raise RuntimeError(msg) from e
    return path


def ensure_config_dir() -> Path:
    """Create the configuration directory if it doesn't exist.

    Raises:
        RuntimeError: If the directory cannot be created.
    """
    return _ensure_dir(get_config_dir(), "config")


def ensure_data_dir() -> Path:
    """Create the data directory if it doesn't exist.

    Raises:
        RuntimeError: If the directory cannot be created.
    """
    return _ensure_dir(get_data_dir(), "data")
