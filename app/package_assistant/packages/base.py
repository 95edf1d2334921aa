"""Abstract base class for package managers.

This module defines the PackageManager interface that every backend
implements, together with the shared changelog directory walk and the
download/update operations that only depend on configured commands.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator
from pathlib import Path

from package_assistant.core.errors import (
    DownloadError,
    NoChangelogsForPackageError,
    NoChangelogsInDirectoryError,
    PackageError,
    PackageIOError,
    UnknownCachedPackagePathError,
    UpdateError,
)
from package_assistant.models.package import (
    ChangelogQuery,
    PackageChangelogResult,
    PackageConfig,
    PackageManagerType,
    PackageUpdateItem,
)
from package_assistant.utils.shell import run_interactive_shell_command, run_shell_command

logger = logging.getLogger(__name__)


def format_package_changelogs(result: PackageChangelogResult) -> str:
    """Render a package's changelogs under a name banner.

    Raises:
        NoChangelogsForPackageError: If the result holds no entries.
    """
    if not result.changelogs:
        raise NoChangelogsForPackageError()
    return "\n".join((f"==== {result.name} ====", *result.changelogs))


class PackageManager(ABC):
    """Abstract base class for all package manager backends.

    Backends supply update detection and the archive reader; everything
    that only needs the configured commands or a directory of archives
    lives here.

    Example:
        >>> manager = get_package_manager(settings.package)
        >>> for item in manager.check_update():
        ...     print(item)
        >>> print(manager.get_cached_changelogs(ChangelogQuery(), threshold))
    """

    def __init__(self, config: PackageConfig) -> None:
        """Initialize the package manager.

        Args:
            config: Package section of the settings.
        """
        self._config = config

    @property
    def config(self) -> PackageConfig:
        """Return the package configuration."""
        return self._config

    @property
    @abstractmethod
    def package_manager(self) -> PackageManagerType:
        """Return the package manager this backend drives."""

    @abstractmethod
    def is_available(self) -> bool:
        """Check if this package manager is available on the system."""

    @abstractmethod
    def get_package_changelogs_result(
        self,
        query: ChangelogQuery,
        path: Path,
        threshold: int,
    ) -> PackageChangelogResult:
        """Open the package file at path and read its new changelog entries.

        Args:
            query: Package name filter.
            path: Package archive to read.
            threshold: Only entries newer than this unix time are returned.

        Returns:
            Package name with its filtered changelog entries.

        Raises:
            PackageNameDoesNotMatchError: If the name does not match the query.
            PackageError: If the file cannot be read as a package.
        """

    @abstractmethod
    def check_update(self) -> list[PackageUpdateItem]:
        """List the updates available from the package manager.

        Returns:
            Available updates; an empty list means the system is up to date.
        """

    def get_cached_changelogs(self, query: ChangelogQuery, threshold: int = 0) -> str:
        """Collect new changelogs from the cached package directory.

        Args:
            query: Package name filter.
            threshold: Only entries newer than this unix time are shown.

        Returns:
            All matching changelogs separated by blank lines.

        Raises:
            UnknownCachedPackagePathError: If no cached package path is set.
            NoChangelogsInDirectoryError: If nothing was found.
        """
        path = self.config.cached_package_path
        if path is None:
            raise UnknownCachedPackagePathError()
        return self.get_dir_changelogs(query, Path(path), threshold)

    def get_dir_changelogs(self, query: ChangelogQuery, path: Path, threshold: int) -> str:
        """Recursively collect changelogs for all matching packages under path.

        Entries that fail for any reason are skipped, so one broken or
        unrelated file never aborts the walk.

        Raises:
            PackageIOError: If path itself cannot be listed.
            NoChangelogsInDirectoryError: If no entry produced changelogs.
        """
        changelogs = list(self._collect_changelogs(query, path, threshold))
        if not changelogs:
            raise NoChangelogsInDirectoryError()
        return "\n\n".join(changelogs)

    def _collect_changelogs(
        self,
        query: ChangelogQuery,
        path: Path,
        threshold: int,
    ) -> Iterator[str]:
        try:
            entries = sorted(path.iterdir())
        except OSError as e:
            msg = f"cannot list {path}: {e}"
            raise PackageIOError(msg) from e

        for entry in entries:
            try:
                # Symlinked directories are not followed
                if entry.is_dir() and not entry.is_symlink():
                    yield self.get_dir_changelogs(query, entry, threshold)
                else:
                    yield self.get_package_changelogs_string(query, entry, threshold)
            except PackageError as e:
                logger.debug("Skipping %s: %s", entry, e)

    def get_package_changelogs_string(
        self,
        query: ChangelogQuery,
        path: Path,
        threshold: int,
    ) -> str:
        """Render the new changelogs of a single package file.

        Raises:
            NoChangelogsForPackageError: If no entry is newer than threshold.
        """
        result = self.get_package_changelogs_result(query, path, threshold)
        return format_package_changelogs(result)

    def download_update(self) -> None:
        """Download pending updates with the configured download command.

        Raises:
            EmptyCommandError: If no download command is configured.
            DownloadError: If the command fails.
        """
        self._run_configured(self.config.download_command, DownloadError)

    def do_update(self, interactive: bool) -> None:
        """Apply pending updates.

        Args:
            interactive: Run the interactive update command attached to the
                terminal instead of the unattended one.

        Raises:
            EmptyCommandError: If the selected command is not configured.
            UpdateError: If the command fails.
        """
        if interactive:
            try:
                run_interactive_shell_command(self.config.update_command, elevate=True)
            except OSError as e:
                raise UpdateError(str(e)) from e
        else:
            self._run_configured(self.config.noconfirm_update_command, UpdateError)

    def _run_configured(self, command: str, error: type[DownloadError | UpdateError]) -> None:
        try:
            run_shell_command(command, elevate=True, error_factory=error)
        except OSError as e:
            raise error(str(e)) from e
