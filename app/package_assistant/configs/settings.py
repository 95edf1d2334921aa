"""User settings.

Settings are stored in ~/.config/package-assistant/settings.toml and hold
the package manager selection, the commands used to download and apply
updates, and the directory where downloaded packages are cached.
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from package_assistant.configs.toml import init_toml, read_toml, write_toml
from package_assistant.core.paths import get_settings_path
from package_assistant.models.package import PackageConfig


class Settings(BaseModel):
    """Top-level settings file.

    Attributes:
        package: Package manager configuration.
    """

    model_config = ConfigDict(extra="forbid")

    package: PackageConfig = Field(default_factory=PackageConfig)


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from a TOML file.

    Args:
        path: Settings file. If None, uses the default settings path.

    Raises:
        StorageNotFoundError: If the file doesn't exist.
        StorageParseError: If the TOML syntax is invalid.
        StorageError: If the content doesn't match the schema.
    """
    return read_toml(path or get_settings_path(), Settings)


def save_settings(settings: Settings, path: Path | None = None) -> Path:
    """Save settings to a TOML file.

    Raises:
        StorageError: If the file cannot be written.
    """
    return write_toml(settings, path or get_settings_path())


def init_settings(source: Path | None = None, path: Path | None = None) -> Path:
    """Create the settings file.

    Args:
        source: Settings file to copy. Replaces any existing settings.
        path: Destination. If None, uses the default settings path.

    Returns:
        Path of the settings file.

    Raises:
        StorageExistsError: If settings exist and no source was given.
        StorageError: If source is invalid or the file cannot be written.
    """
    return init_toml(Settings, path or get_settings_path(), source)
