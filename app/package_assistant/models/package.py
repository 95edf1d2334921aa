"""Package models for update checks and changelog retrieval.

This module defines the data structures passed between the package
manager backends and their callers. All of them are created per call.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field


class PackageManagerType(str, Enum):
    """Package managers that can be selected in settings.

    Only ZYPPER and DNF have backends; the others are recognised so that
    selecting them fails with a clear error instead of a parse failure.
    """

    ZYPPER = "zypper"
    DNF = "dnf"
    APT = "apt"
    PACMAN = "pacman"


class PackageConfig(BaseModel):
    """Package manager section of the settings file.

    Attributes:
        package_manager: Backend to use.
        download_command: Shell command that downloads pending updates.
        update_command: Shell command that applies updates interactively.
        noconfirm_update_command: Shell command that applies updates unattended.
        cached_package_path: Directory holding downloaded package archives.
        compare_installed: Also hide changelog entries already shipped in
            the installed version of each package.
    """

    model_config = ConfigDict(extra="forbid")

    package_manager: Annotated[
        PackageManagerType | None,
        Field(description="Package manager backend"),
    ] = None
    download_command: str = ""
    update_command: str = ""
    noconfirm_update_command: str = ""
    cached_package_path: Annotated[
        Path | None,
        Field(description="Directory containing downloaded packages"),
    ] = None
    compare_installed: bool = False


@dataclass(frozen=True, slots=True)
class ChangelogQuery:
    """Filter applied while collecting changelogs.

    Attributes:
        name: Case-sensitive prefix the package name must start with.
            None matches every package.
    """

    name: str | None = None


@dataclass(frozen=True, slots=True)
class ChangelogEntry:
    """A single changelog entry recorded in a package archive."""

    timestamp: int
    description: str


@dataclass(frozen=True, slots=True)
class PackageChangelogResult:
    """Changelog entries of one package, already filtered by time.

    Attributes:
        name: Declared package name.
        changelogs: Entry descriptions in archive order.
    """

    name: str
    changelogs: tuple[str, ...] = field(default=())


@dataclass(frozen=True, slots=True)
class PackageUpdateItem:
    """An available update reported by a package manager.

    Attributes:
        name: Package name.
        old_version: Installed version, if the backend reports it.
        new_version: Version that will be installed, if known.
    """

    name: str
    old_version: str | None = None
    new_version: str | None = None

    def __str__(self) -> str:
        text = self.name
        if self.new_version is not None:
            text += f" ({self.new_version})"
            if self.old_version is not None:
                text += f" -> ({self.old_version})"
        return text

    def to_dict(self) -> dict[str, str | None]:
        """Convert to a dictionary for JSON output."""
        return {
            "name": self.name,
            "old_version": self.old_version,
            "new_version": self.new_version,
        }
