"""Zypper package manager backend.

Detects updates from the XML output of ``zypper --xmlout lu``.
"""

import logging
import xml.etree.ElementTree as ET
from pathlib import Path

from package_assistant.core.errors import PackageIOError, XMLParseError, ZypperError
from package_assistant.models.package import (
    ChangelogQuery,
    PackageChangelogResult,
    PackageManagerType,
    PackageUpdateItem,
)
from package_assistant.packages.base import PackageManager
from package_assistant.packages.rpm import read_rpm_changelogs
from package_assistant.utils.shell import check_output, command_exists, run_command

logger = logging.getLogger(__name__)


def parse_zypper_updates(xml_text: str) -> list[PackageUpdateItem]:
    """Parse the update list printed by ``zypper --xmlout lu``.

    The output is consumed as a stream of start events; every ``update``
    element with a non-empty ``name`` becomes one item.

    Args:
        xml_text: XML document written by zypper.

    Returns:
        Update items in document order.

    Raises:
        XMLParseError: If the XML is malformed.
    """
    parser = ET.XMLPullParser(events=("start",))
    items: list[PackageUpdateItem] = []

    try:
        parser.feed(xml_text)
        parser.close()
    except ET.ParseError as e:
        msg = f"invalid zypper XML output: {e}"
        raise XMLParseError(msg) from e

    for _event, elem in parser.read_events():
        if elem.tag != "update":
            continue

        name = elem.get("name", "")
        if not name:
            continue

        items.append(
            PackageUpdateItem(
                name=name,
                new_version=elem.get("edition"),
                old_version=elem.get("edition-old"),
            )
        )

    return items


class ZypperManager(PackageManager):
    """Package manager backend for zypper (openSUSE, SLES).

    A failing ``zypper lu`` is reported as ZypperError rather than being
    read as "no updates".
    """

    @property
    def package_manager(self) -> PackageManagerType:
        """Return ZYPPER as the package manager."""
        return PackageManagerType.ZYPPER

    def is_available(self) -> bool:
        """Check if zypper is available."""
        return command_exists("zypper")

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
        """List available updates using ``zypper --xmlout lu``.

        Raises:
            ZypperError: If zypper exits with a nonzero status.
            XMLParseError: If the output is not valid XML.
            PackageIOError: If zypper cannot be executed.
        """
        try:
            result = run_command(["zypper", "--xmlout", "lu"])
        except OSError as e:
            msg = f"cannot run zypper: {e}"
            raise PackageIOError(msg) from e

        stdout = check_output(result, ZypperError)
        items = parse_zypper_updates(stdout)
        logger.info("zypper reported %d update(s)", len(items))
        return items
