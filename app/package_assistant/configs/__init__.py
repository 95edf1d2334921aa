"""Settings and data storage.

This module provides the TOML-backed settings file and the data file that
records when updates were last applied.
"""

from package_assistant.configs.data import Data, init_data, load_data, mark_updated, save_data
from package_assistant.configs.settings import Settings, init_settings, load_settings, save_settings
from package_assistant.configs.toml import (
    StorageError,
    StorageExistsError,
    StorageNotFoundError,
    StorageParseError,
)

__all__ = [
    "Data",
    "Settings",
    "StorageError",
    "StorageExistsError",
    "StorageNotFoundError",
    "StorageParseError",
    "init_data",
    "init_settings",
    "load_data",
    "load_settings",
    "mark_updated",
    "save_data",
    "save_settings",
]
