"""Dnf package manager backend.

Detects updates from the tabular output of ``dnf check-update``.
"""

import logging
import re
from pathlib import Path

from package_assistant.core.errors import PackageIOError, PatternError
from package_assistant.models.package import (
    ChangelogQuery,
    PackageChangelogResult,
    PackageManagerType,
    PackageUpdateItem,
)
from package_assistant.packages.base import PackageManager
from package_assistant.packages.rpm import read_rpm_changelogs
from package_assistant.utils.shell import command_exists, run_command

logger = logging.getLogger(__name__)

# One row per update: "<name.arch>  <version>  updates"
UPDATE_LINE_PATTERN = r"^(\S+)\s+(\S+)\s+updates$"

# dnf check-update exits 100 when updates are available
_EXIT_UPDATES_AVAILABLE = 100


def _compile_pattern(pattern: str) -> re.Pattern[str]:
    try:
        return re.compile(pattern, re.MULTILINE)
    except re.error as e:
        msg = f"invalid update pattern {pattern!r}: {e}"
        raise PatternError(msg) from e


def parse_dnf_updates(stdout: str, pattern: str = UPDATE_LINE_PATTERN) -> list[PackageUpdateItem]:
    """Parse the update list printed by ``dnf check-update``.

    dnf does not report the installed version, so old_version is None.

    Args:
        stdout: Captured standard output of dnf.
        pattern: Line pattern with name and version groups.

    Returns:
        Update items in output order.

    Raises:
        PatternError: If pattern does not compile.
    """
    regex = _compile_pattern(pattern)
    return [
        PackageUpdateItem(name=match.group(1), new_version=match.group(2))
        for match in regex.finditer(stdout)
    ]


class DnfManager(PackageManager):
    """Package manager backend for dnf (Fedora, RHEL).

    Exit statuses other than 0 and 100 are treated as "no updates" and
    logged, since dnf uses a nonzero status to signal pending updates.
    """

    @property
    def package_manager(self) -> PackageManagerType:
        """Return DNF as the package manager."""
        return PackageManagerType.DNF

    def is_available(self) -> bool:
        """Check if dnf is available."""
        return command_exists("dnf")

    def get_package_changelogs_result(
        self,
        query: ChangelogQuery,
        path: Path,
        threshold: int,
    ) -> PackageChangelogResult:
        """Read changelogs from a cached RPM archive."""
        return read_rpm_changelogs(
            query,
            path,
            threshold,
            compare_installed=self.config.compare_installed,
        )

    def check_update(self) -> list[PackageUpdateItem]:
        """List available updates using ``dnf check-update``.

        Raises:
            PackageIOError: If dnf cannot be executed.
        """
        try:
            result = run_command(["dnf", "check-update"])
        except OSError as e:
            msg = f"cannot run dnf: {e}"
            raise PackageIOError(msg) from e

        if result.returncode not in (0, _EXIT_UPDATES_AVAILABLE):
            logger.warning(
                "dnf check-update exited with status %d, assuming no updates: %s",
                result.returncode,
                result.stderr.strip() or "no error output",
            )
            return []

        try:
            items = parse_dnf_updates(result.stdout)
        except PatternError as e:
            logger.warning("Could not parse dnf output: %s", e)
            return []

        logger.info("dnf reported %d update(s)", len(items))
        return items
