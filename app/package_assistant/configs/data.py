"""Persistent application data.

The only value kept between runs is the time of the last applied update.
Changelog entries at or before that time are treated as already seen.
"""

import time
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from package_assistant.configs.toml import init_toml, read_toml, write_toml
from package_assistant.core.paths import get_data_path


class Data(BaseModel):
    """Data file contents.

    Attributes:
        update_timestamp: Unix time of the last successful update.
    """

    model_config = ConfigDict(extra="forbid")

    update_timestamp: Annotated[int, Field(ge=0)] = 0


def load_data(path: Path | None = None) -> Data:
    """Load data, falling back to defaults when the file doesn't exist yet.

    Raises:
        StorageParseError: If the TOML syntax is invalid.
        StorageError: If the content doesn't match the schema.
    """
    data_path = path or get_data_path()
    if not data_path.exists():
        return Data()
    return read_toml(data_path, Data)


def save_data(data: Data, path: Path | None = None) -> Path:
    """Save data to a TOML file.

    Raises:
        StorageError: If the file cannot be written.
    """
    return write_toml(data, path or get_data_path())


def init_data(path: Path | None = None) -> Path:
    """Create the data file with a zero timestamp.

    Raises:
        StorageExistsError: If the data file already exists.
    """
    return init_toml(Data, path or get_data_path())


def mark_updated(path: Path | None = None, now: int | None = None) -> Data:
    """Record that an update was just applied.

    Args:
        path: Data file. If None, uses the default data path.
        now: Unix time to record. Defaults to the current time.

    Returns:
        The saved Data.
    """
    data = Data(update_timestamp=int(time.time()) if now is None else now)
    save_data(data, path)
    return data
