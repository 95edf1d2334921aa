"""Exception hierarchy for package-assistant.

Every error raised by the package layer derives from PackageError so the
CLI can report it with a single except clause. Storage errors live in
package_assistant.configs and share the PackageAssistantError root.
"""


class PackageAssistantError(Exception):
    """Base exception for all package-assistant errors."""


class PackageError(PackageAssistantError):
    """Base exception for package manager errors."""


class PackageIOError(PackageError):
    """Raised when a file or subprocess cannot be accessed."""


class CommandDecodeError(PackageError):
    """Raised when command output is not valid UTF-8."""


class ArchiveFormatError(PackageError):
    """Raised when a file is not a readable RPM package archive."""


class XMLParseError(PackageError):
    """Raised when package manager XML output cannot be parsed."""


class PatternError(PackageError):
    """Raised when an output pattern fails to compile."""


class NoChangelogsForPackageError(PackageError):
    """Raised when a package has no changelog entries left to display."""

    def __init__(self) -> None:
        super().__init__("package has no changelogs to display")


class NoChangelogsInDirectoryError(PackageError):
    """Raised when a directory walk finds no package with changelogs."""

    def __init__(self) -> None:
        super().__init__("could not find any packages containing changelogs")


class PackageNameDoesNotMatchError(PackageError):
    """Raised when a package's declared name does not match the query.

    Attributes:
        name: Declared package name.
        query: Query prefix the name was tested against.
    """

    def __init__(self, name: str, query: str) -> None:
        self.name = name
        self.query = query
        super().__init__(f"package '{name}' does not match the query '{query}'")


class RPMCommandError(PackageError):
    """Raised when the rpm query command fails."""

    def __init__(self, stderr: str) -> None:
        super().__init__(f"rpm command failed: {stderr}")


class InvalidRPMResponseError(PackageError):
    """Raised when the rpm query returns output that cannot be used."""

    def __init__(self) -> None:
        super().__init__("rpm query returned an unexpected response")


class UnsupportedPackageManagerError(PackageError):
    """Raised when the configured package manager has no backend."""

    def __init__(self) -> None:
        super().__init__("'package_manager' in settings is either empty or not supported")


class UnknownCachedPackagePathError(PackageError):
    """Raised when changelogs are requested without a cached package path."""

    def __init__(self) -> None:
        super().__init__("'cached_package_path' must be provided in settings")


class EmptyCommandError(PackageError):
    """Raised when an operation needs a command that is not configured."""

    def __init__(self) -> None:
        super().__init__("update and download commands must be provided in settings")


class DownloadError(PackageError):
    """Raised when the download command fails."""

    def __init__(self, stderr: str) -> None:
        super().__init__(f"failed to download packages: {stderr}")


class UpdateError(PackageError):
    """Raised when the update command fails."""

    def __init__(self, stderr: str) -> None:
        super().__init__(f"failed to run update: {stderr}")


class ZypperError(PackageError):
    """Raised when a zypper invocation fails."""

    def __init__(self, stderr: str) -> None:
        super().__init__(f"zypper command failed: {stderr}")


class DnfError(PackageError):
    """Raised when a dnf invocation fails."""

    def __init__(self, stderr: str) -> None:
        super().__init__(f"dnf command failed: {stderr}")
