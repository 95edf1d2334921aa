"""TOML file storage shared by the settings and data files.

Files are read with tomllib, validated with pydantic, and written
atomically with tomli_w.
"""

import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Any, TypeVar

import tomli_w
from pydantic import BaseModel, ValidationError

from package_assistant.core.errors import PackageAssistantError

ModelT = TypeVar("ModelT", bound=BaseModel)


class StorageError(PackageAssistantError):
    """Base exception for settings and data file errors."""


class StorageNotFoundError(StorageError):
    """Raised when a storage file does not exist."""


class StorageParseError(StorageError):
    """Raised when a storage file is not valid TOML."""


class StorageExistsError(StorageError):
    """Raised when initialising a file that already exists."""


def read_toml(path: Path, model: type[ModelT]) -> ModelT:
    """Load and validate a TOML file.

    Args:
        path: File to read.
        model: Pydantic model the content must match.

    Returns:
        Validated model instance.

    Raises:
        StorageNotFoundError: If the file doesn't exist.
        StorageParseError: If the TOML syntax is invalid.
        StorageError: If the file can't be read or doesn't match the schema.
    """
    if not path.exists():
        raise StorageNotFoundError(f"File not found: {path}")

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise StorageParseError(f"Invalid TOML syntax in {path}: {e}") from e
    except OSError as e:
        raise StorageError(f"Failed to read {path}: {e}") from e

    try:
        return model.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise StorageError(f"Invalid content in {path}: {e}") from e


def _to_toml_dict(model: BaseModel) -> dict[str, Any]:
    # TOML has no null; Paths and enums become strings
    return model.model_dump(mode="json", exclude_none=True)


def write_toml(model: BaseModel, path: Path) -> Path:
    """Save a model to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        model: Model to save.
        path: Destination file.

    Returns:
        Path where the file was saved.

    Raises:
        StorageError: If the file cannot be written.
    """
    tmp_path: Path | None = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(_to_toml_dict(model), f)
        os.replace(str(tmp_path), str(path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise StorageError(f"Failed to write {path}: {e}") from e

    return path


def init_toml(
    model: type[ModelT],
    path: Path,
    source: Path | None = None,
) -> Path:
    """Create a TOML file from defaults or from a user-provided file.

    A provided source replaces any existing file. Without one, defaults are
    written only if nothing exists yet.

    Args:
        model: Pydantic model describing the file.
        path: Destination file.
        source: Optional file to validate and copy.

    Returns:
        Path of the written file.

    Raises:
        StorageExistsError: If path exists and no source was given.
        StorageError: If source is invalid or the file cannot be written.
    """
    if source is not None:
        return write_toml(read_toml(source, model), path)

    if path.exists():
        raise StorageExistsError(f"File already exists: {path}")

    return write_toml(model(), path)
