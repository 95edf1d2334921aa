"""Data models for package-assistant.

This module exports the core data structures used throughout the application.
"""

from package_assistant.models.package import (
    ChangelogEntry,
    ChangelogQuery,
    PackageChangelogResult,
    PackageConfig,
    PackageManagerType,
    PackageUpdateItem,
)

__all__ = [
    "ChangelogEntry",
    "ChangelogQuery",
    "PackageChangelogResult",
    "PackageConfig",
    "PackageManagerType",
    "PackageUpdateItem",
]
