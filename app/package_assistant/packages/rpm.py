"""RPM package archive reader.

Reads the declared name and the changelog entries of a downloaded RPM
archive, and queries the rpm database for the changelog timestamp of the
installed copy of a package.
"""

import logging
import struct
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import rpmfile
from rpmfile.errors import RPMError

from package_assistant.core.errors import (
    ArchiveFormatError,
    CommandDecodeError,
    InvalidRPMResponseError,
    PackageIOError,
    PackageNameDoesNotMatchError,
    RPMCommandError,
)
from package_assistant.models.package import (
    ChangelogEntry,
    ChangelogQuery,
    PackageChangelogResult,
)
from package_assistant.utils.shell import check_output, run_command

logger = logging.getLogger(__name__)

# RPM header tag numbers, used when rpmfile has no name for a tag
_TAG_NAME = 1000
_TAG_CHANGELOGTIME = 1080
_TAG_CHANGELOGTEXT = 1082

# Raised by rpmfile on files that are not, or not complete, RPM archives
_MALFORMED_RPM_ERRORS = (RPMError, AssertionError, struct.error, ValueError, KeyError, TypeError)


def matches_query(name: str, query: str) -> bool:
    """Check whether a package name matches a query prefix (case-sensitive)."""
    return name.startswith(query)


def _header(headers: dict[Any, Any], name: str, tag: int) -> Any:
    value = headers.get(name)
    if value is None:
        value = headers.get(tag)
    return value


def _as_text(value: Any) -> str:
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


def _as_list(value: Any) -> list[Any]:
    # rpmfile unwraps single-element arrays
    if value is None:
        return []
    if isinstance(value, (bytes, str, int)):
        return [value]
    return list(value)


def _read_headers(path: Path) -> dict[Any, Any]:
    try:
        with rpmfile.open(str(path)) as rpm:
            return dict(rpm.headers)
    except OSError as e:
        msg = f"cannot read {path}: {e}"
        raise PackageIOError(msg) from e
    except _MALFORMED_RPM_ERRORS as e:
        msg = f"{path} is not a valid RPM package: {e}"
        raise ArchiveFormatError(msg) from e


def read_changelog_entries(headers: dict[Any, Any]) -> list[ChangelogEntry]:
    """Pair the changelog time and text headers into entries.

    Args:
        headers: Header dictionary as returned by rpmfile.

    Returns:
        Changelog entries in archive order.

    Raises:
        ArchiveFormatError: If the two header arrays differ in length.
    """
    times = _as_list(_header(headers, "changelogtime", _TAG_CHANGELOGTIME))
    # rpmfile names the CHANGELOGTEXT tag "comments"
    texts = _as_list(_header(headers, "comments", _TAG_CHANGELOGTEXT))

    if len(times) != len(texts):
        msg = f"changelog header mismatch: {len(times)} timestamps, {len(texts)} entries"
        raise ArchiveFormatError(msg)

    return [
        ChangelogEntry(timestamp=int(timestamp), description=_as_text(text))
        for timestamp, text in zip(times, texts, strict=True)
    ]


def filter_changelogs(entries: Iterable[ChangelogEntry], threshold: int) -> tuple[str, ...]:
    """Keep descriptions of entries strictly newer than threshold, in order."""
    return tuple(entry.description for entry in entries if entry.timestamp > threshold)


def get_installed_changelog_timestamp(name: str) -> int:
    """Get the newest changelog timestamp of an installed package.

    Runs ``rpm -q <name> --qf %{CHANGELOGTIME}``.

    Args:
        name: Installed package name.

    Returns:
        Unix timestamp of the newest changelog entry.

    Raises:
        RPMCommandError: If the rpm query fails.
        InvalidRPMResponseError: If the output is empty or not a number.
    """
    try:
        result = run_command(["rpm", "-q", name, "--qf", "%{CHANGELOGTIME}"])
    except OSError as e:
        raise RPMCommandError(str(e)) from e

    stdout = check_output(result, RPMCommandError)
    lines = stdout.splitlines()
    if not lines:
        raise InvalidRPMResponseError()

    try:
        return int(lines[0].strip())
    except ValueError as e:
        raise InvalidRPMResponseError() from e


def read_rpm_changelogs(
    query: ChangelogQuery,
    path: Path,
    threshold: int,
    *,
    compare_installed: bool = False,
) -> PackageChangelogResult:
    """Read the changelogs of one RPM archive newer than a threshold.

    Args:
        query: Package name filter.
        path: Path to the RPM archive.
        threshold: Only entries with a timestamp strictly greater are kept.
        compare_installed: Raise the threshold to the newest changelog
            timestamp of the installed package, when one can be found.

    Returns:
        PackageChangelogResult with the declared name and new entries.

    Raises:
        PackageIOError: If the file cannot be read.
        ArchiveFormatError: If the file is not a valid RPM archive.
        PackageNameDoesNotMatchError: If the name does not match the query.
    """
    headers = _read_headers(path)

    raw_name = _header(headers, "name", _TAG_NAME)
    if raw_name is None:
        msg = f"{path} has no package name header"
        raise ArchiveFormatError(msg)
    name = _as_text(raw_name)

    if query.name is not None and not matches_query(name, query.name):
        raise PackageNameDoesNotMatchError(name, query.name)

    if compare_installed:
        try:
            threshold = max(threshold, get_installed_changelog_timestamp(name))
        except (RPMCommandError, InvalidRPMResponseError, CommandDecodeError) as e:
            logger.debug("No installed changelog timestamp for %s: %s", name, e)

    entries = read_changelog_entries(headers)
    return PackageChangelogResult(name=name, changelogs=filter_changelogs(entries, threshold))
