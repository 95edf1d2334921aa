"""Shell execution utilities.

Every package manager operation funnels through this module. Commands
configured by the user are run through ``sh -c`` and may be prefixed with
a privilege elevation helper.
"""

import logging
import shutil
import subprocess
from collections.abc import Callable
from dataclasses import dataclass

from package_assistant.core.errors import (
    CommandDecodeError,
    EmptyCommandError,
    PackageError,
    UpdateError,
)

logger = logging.getLogger(__name__)

# Polkit helper used to run commands as root
ELEVATION_HELPER = "pkexec"

ErrorFactory = Callable[[str], PackageError]


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Result of a shell command execution.

    Attributes:
        stdout: Standard output from the command.
        stderr: Standard error from the command.
        returncode: Exit code of the command.
    """

    stdout: str
    stderr: str
    returncode: int

    @property
    def success(self) -> bool:
        """Check if command executed successfully."""
        return self.returncode == 0


def _decode(data: bytes, stream: str) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        msg = f"command {stream} is not valid UTF-8: {e}"
        raise CommandDecodeError(msg) from e


def run_command(
    args: list[str],
    *,
    timeout: float | None = None,
) -> CommandResult:
    """Execute a command and return the result.

    Output is captured as bytes and decoded strictly as UTF-8. There is no
    timeout unless one is given; package manager runs can take a long time.

    Args:
        args: Command and arguments to execute.
        timeout: Maximum time in seconds to wait for command.

    Returns:
        CommandResult with stdout, stderr, and returncode.

    Raises:
        CommandDecodeError: If stdout or stderr is not valid UTF-8.
        subprocess.TimeoutExpired: If command exceeds timeout.
        FileNotFoundError: If command executable is not found.
    """
    logger.info("Running command: %s", " ".join(args))
    result = subprocess.run(
        args,
        capture_output=True,
        check=False,
        timeout=timeout,
    )
    return CommandResult(
        stdout=_decode(result.stdout, "stdout"),
        stderr=_decode(result.stderr, "stderr"),
        returncode=result.returncode,
    )


def command_exists(name: str) -> bool:
    """Check if a command exists in the system PATH.

    Args:
        name: Command name to check.

    Returns:
        True if command exists, False otherwise.
    """
    return shutil.which(name) is not None


def build_shell_args(command: str, elevate: bool) -> list[str]:
    """Build the argv used to run a configured command through the shell.

    Args:
        command: Shell command line.
        elevate: Prefix the command with the privilege elevation helper.

    Returns:
        Argument list for ``sh -c``.
    """
    if elevate:
        command = f"{ELEVATION_HELPER} {command}"
    return ["sh", "-c", command]


def check_output(result: CommandResult, error_factory: ErrorFactory | None) -> str:
    """Classify a finished command and return its stdout.

    A nonzero exit status is failure. When an error factory is supplied the
    decoded stderr is wrapped in that error; without one the caller gets
    stdout regardless and decides for itself.

    Raises:
        PackageError: Whatever error_factory builds, on nonzero exit.
    """
    if not result.success and error_factory is not None:
        raise error_factory(result.stderr.strip())
    return result.stdout


def run_shell_command(
    command: str,
    *,
    elevate: bool,
    error_factory: ErrorFactory | None = None,
) -> str:
    """Run a configured command through the shell and capture its output.

    Args:
        command: Shell command line. Must not be empty.
        elevate: Run the command through the privilege elevation helper.
        error_factory: Builds the error raised when the command fails.

    Returns:
        Decoded stdout of the command.

    Raises:
        EmptyCommandError: If command is empty. No process is spawned.
        CommandDecodeError: If the output is not valid UTF-8.
        PackageError: Built by error_factory on nonzero exit.
    """
    if not command:
        raise EmptyCommandError()

    result = run_command(build_shell_args(command, elevate))
    return check_output(result, error_factory)


def run_interactive_shell_command(command: str, *, elevate: bool) -> None:
    """Run a configured command attached to the user's terminal.

    Unlike run_shell_command(), this does NOT capture stdout/stderr, so the
    package manager can prompt for confirmation.

    Args:
        command: Shell command line. Must not be empty.
        elevate: Run the command through the privilege elevation helper.

    Raises:
        EmptyCommandError: If command is empty. No process is spawned.
        UpdateError: If the command exits with a nonzero status.
    """
    if not command:
        raise EmptyCommandError()

    args = build_shell_args(command, elevate)
    logger.info("Running interactive command: %s", " ".join(args))
    result = subprocess.run(args, check=False)

    if result.returncode != 0:
        raise UpdateError(f"'{command}' exited with status {result.returncode}")
