"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import struct
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

RpmHeaders = dict[str, Any]
ChangelogEntries = list[tuple[int, str]]

# RPM_HEADER_MAGIC followed by the header version and four reserved bytes
_HEADER_INTRO = b"\x8e\xad\xe8\x01\x00\x00\x00\x00"
_LEAD = struct.Struct("!4sBBhh66shh16s")
_INDEX_ENTRY = struct.Struct("!iiii")

_TYPE_INT32 = 4
_TYPE_STRING = 6
_TYPE_STRING_ARRAY = 8


@pytest.fixture
def mock_zypper_output() -> str:
    """Sample zypper --xmlout lu output for testing."""
    return """<?xml version='1.0'?>
<stream>
<message type="info">Loading repository data...</message>
<message type="info">Reading installed packages...</message>
<update-status version="0.6">
<update-list>
 <update kind="package" name="bash" edition="5.2.26-3.1" arch="x86_64" edition-old="5.2.21-1.1">
  <summary>The GNU Bourne-Again Shell</summary>
  <source url="https://download.opensuse.org/tumbleweed/repo/oss" alias="repo-oss"/>
 </update>
 <update kind="package" name="curl" edition="8.6.0-1.1" arch="x86_64" edition-old="8.5.0-2.1">
  <summary>A Tool for Transferring Data from URLs</summary>
 </update>
 <update kind="package" name="" edition="1.0" arch="noarch"/>
 <update kind="package" name="vim-data" edition="9.1.0111-1.1" arch="noarch"/>
</update-list>
</update-status>
</stream>"""

@pytest.fixture
def mock_dnf_output() -> str:
    """Sample dnf check-update output for testing."""
    return """Last metadata expiration check: 0:12:03 ago on Mon 19 Oct 2026 10:00:00 AM UTC.

bash.x86_64                          5.2.26-3.fc40                   updates
curl.x86_64                          8.6.0-7.fc40                    updates
kernel-core.x86_64                   6.8.9-300.fc40                  updates
firefox.x86_64                       125.0.3-1.fc40                  updates-testing
Obsoleting Packages
grub2-tools.x86_64                   1:2.06-121.fc40                 fedora"""

def _header_blob(entries: list[tuple[int, int, bytes, int]]) -> bytes:
    index = b""
    store = b""
    for tag, kind, data, count in entries:
        if kind == _TYPE_INT32:
            store += b"\x00" * (-len(store) % 4)
        index += _INDEX_ENTRY.pack(tag, kind, len(store), count)
        store += data
    return _HEADER_INTRO + struct.pack("!ii", len(entries), len(store)) + index + store

def build_rpm(name: str | None, entries: ChangelogEntries) -> bytes:
    """Build a minimal binary RPM: lead, empty signature and a main header.

    The main header carries NAME (1000) and the CHANGELOGTIME (1080),
    CHANGELOGNAME (1081) and CHANGELOGTEXT (1082) arrays. There is no payload.
    """
    tags: list[tuple[int, int, bytes, int]] = []
    if name is not None:
        tags.append((1000, _TYPE_STRING, name.encode() + b"\x00", 1))
    if entries:
        count = len(entries)
        times = struct.pack(f"!{count}I", *(timestamp for timestamp, _ in entries))
        tags.append((1080, _TYPE_INT32, times, count))
        tags.append((1081, _TYPE_STRING_ARRAY, b"Maintainer <m@example.org>\x00" * count, count))
        texts = b"".join(text.encode() + b"\x00" for _, text in entries)
        tags.append((1082, _TYPE_STRING_ARRAY, texts, count))

    lead = _LEAD.pack(b"\xed\xab\xee\xdb", 3, 0, 0, 1, (name or "").encode(), 1, 5, b"")
    return lead + _header_blob([]) + _header_blob(tags)

@pytest.fixture
def write_rpm() -> Callable[[Path, str | None, ChangelogEntries], Path]:
    """Write a minimal RPM archive to disk.

    Usage:
        write_rpm(tmp_path / "a.rpm", "a", [(150, "- fix")])
    """

    def _write(path: Path, name: str | None, entries: ChangelogEntries) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(build_rpm(name, entries))
        return path

    return _write

@pytest.fixture
def make_headers() -> Callable[[str, ChangelogEntries], RpmHeaders]:
    """Build headers shaped like rpmfile's for a package with changelog entries."""

    def _make(name: str, entries: ChangelogEntries) -> RpmHeaders:
        return {
            "name": name.encode(),
            "changelogtime": tuple(timestamp for timestamp, _ in entries),
            "authors": [b"Maintainer <m@example.org>" for _ in entries],
            "comments": [text.encode() for _, text in entries],
        }

    return _make
