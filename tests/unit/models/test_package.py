"""Unit tests for package models."""

from pathlib import Path

import pytest
from package_assistant.models.package import (
    ChangelogQuery,
    PackageConfig,
    PackageManagerType,
    PackageUpdateItem,
)
from pydantic import ValidationError


class TestPackageUpdateItem:
    """Tests for PackageUpdateItem."""

    def test_str_name_only(self) -> None:
        assert str(PackageUpdateItem(name="bash")) == "bash"

    def test_str_with_new_version(self) -> None:
        assert str(PackageUpdateItem(name="bash", new_version="5.2")) == "bash (5.2)"

    def test_str_with_both_versions(self) -> None:
        item = PackageUpdateItem(name="bash", old_version="5.1", new_version="5.2")

        assert str(item) == "bash (5.2) -> (5.1)"

    def test_old_version_alone_is_not_shown(self) -> None:
        assert str(PackageUpdateItem(name="bash", old_version="5.1")) == "bash"

    def test_to_dict(self) -> None:
        item = PackageUpdateItem(name="bash", new_version="5.2")

        assert item.to_dict() == {"name": "bash", "old_version": None, "new_version": "5.2"}


class TestChangelogQuery:
    """Tests for ChangelogQuery."""

    def test_default_matches_everything(self) -> None:
        assert ChangelogQuery().name is None


class TestPackageConfig:
    """Tests for PackageConfig."""

    def test_defaults(self) -> None:
        config = PackageConfig()

        assert config.package_manager is None
        assert config.download_command == ""
        assert config.update_command == ""
        assert config.noconfirm_update_command == ""
        assert config.cached_package_path is None
        assert config.compare_installed is False

    def test_from_strings(self) -> None:
        config = PackageConfig.model_validate(
            {"package_manager": "dnf", "cached_package_path": "/var/cache/dnf"}
        )

        assert config.package_manager == PackageManagerType.DNF
        assert config.cached_package_path == Path("/var/cache/dnf")

    def test_unknown_manager_rejected(self) -> None:
        with pytest.raises(ValidationError):
            PackageConfig.model_validate({"package_manager": "brew"})

    def test_extra_fields_rejected(self) -> None:
        with pytest.raises(ValidationError):
            PackageConfig.model_validate({"check_update_command": "pkcon get-updates"})
