"""Package manager backends.

This module provides the PackageManager interface, the zypper and dnf
backends, and the factory that picks one from the settings.
"""

from package_assistant.core.errors import UnsupportedPackageManagerError
from package_assistant.models.package import PackageConfig, PackageManagerType
from package_assistant.packages.base import PackageManager
from package_assistant.packages.dnf import DnfManager
from package_assistant.packages.zypper import ZypperManager

_BACKENDS: dict[PackageManagerType, type[PackageManager]] = {
    PackageManagerType.ZYPPER: ZypperManager,
    PackageManagerType.DNF: DnfManager,
}


def get_package_manager(config: PackageConfig) -> PackageManager:
    """Create the backend selected in the package configuration.

    Args:
        config: Package section of the settings.

    Returns:
        PackageManager instance for the configured package manager.

    Raises:
        UnsupportedPackageManagerError: If no package manager is set or the
            selected one has no backend.
    """
    backend = _BACKENDS.get(config.package_manager) if config.package_manager else None
    if backend is None:
        raise UnsupportedPackageManagerError()
    return backend(config)


__all__ = ["DnfManager", "PackageManager", "ZypperManager", "get_package_manager"]
