"""Unit tests for shell execution utilities."""

from unittest.mock import MagicMock, patch

import pytest
from package_assistant.core.errors import (
    CommandDecodeError,
    DownloadError,
    EmptyCommandError,
    UpdateError,
)
from package_assistant.utils.shell import (
    ELEVATION_HELPER,
    CommandResult,
    build_shell_args,
    check_output,
    run_command,
    run_interactive_shell_command,
    run_shell_command,
)


class TestCommandResult:
    """Tests for CommandResult."""

    def test_success_on_zero_exit(self) -> None:
        assert CommandResult(stdout="", stderr="", returncode=0).success is True

    def test_failure_on_nonzero_exit(self) -> None:
        assert CommandResult(stdout="", stderr="", returncode=1).success is False


class TestRunCommand:
    """Tests for run_command function."""

    @patch("package_assistant.utils.shell.subprocess.run")
    def test_decodes_output(self, mock_run: MagicMock) -> None:
        """run_command decodes captured bytes as UTF-8."""
        mock_run.return_value = MagicMock(stdout="héllo".encode(), stderr=b"", returncode=0)

        result = run_command(["echo", "héllo"])

        assert result == CommandResult(stdout="héllo", stderr="", returncode=0)
        assert mock_run.call_args.kwargs["capture_output"] is True
        assert "text" not in mock_run.call_args.kwargs

    @patch("package_assistant.utils.shell.subprocess.run")
    def test_invalid_stdout_raises(self, mock_run: MagicMock) -> None:
        """Invalid UTF-8 on stdout raises CommandDecodeError."""
        mock_run.return_value = MagicMock(stdout=b"\xff\xfe", stderr=b"", returncode=0)

        with pytest.raises(CommandDecodeError, match="stdout"):
            run_command(["cat", "binary"])

    @patch("package_assistant.utils.shell.subprocess.run")
    def test_invalid_stderr_raises(self, mock_run: MagicMock) -> None:
        """Invalid UTF-8 on stderr raises CommandDecodeError."""
        mock_run.return_value = MagicMock(stdout=b"", stderr=b"\xc3\x28", returncode=1)

        with pytest.raises(CommandDecodeError, match="stderr"):
            run_command(["false"])

    @patch("package_assistant.utils.shell.subprocess.run")
    def test_no_timeout_by_default(self, mock_run: MagicMock) -> None:
        """Commands block until completion unless a timeout is given."""
        mock_run.return_value = MagicMock(stdout=b"", stderr=b"", returncode=0)

        run_command(["true"])

        assert mock_run.call_args.kwargs["timeout"] is None


class TestBuildShellArgs:
    """Tests for build_shell_args function."""

    def test_without_elevation(self) -> None:
        assert build_shell_args("zypper up", elevate=False) == ["sh", "-c", "zypper up"]

    def test_with_elevation(self) -> None:
        assert build_shell_args("zypper up", elevate=True) == [
            "sh",
            "-c",
            f"{ELEVATION_HELPER} zypper up",
        ]


class TestCheckOutput:
    """Tests for check_output function."""

    def test_success_returns_stdout(self) -> None:
        result = CommandResult(stdout="out", stderr="", returncode=0)
        assert check_output(result, DownloadError) == "out"

    def test_failure_wraps_stderr(self) -> None:
        """Nonzero exit raises the supplied error with stderr text."""
        result = CommandResult(stdout="", stderr="no network\n", returncode=1)

        with pytest.raises(DownloadError, match="failed to download packages: no network"):
            check_output(result, DownloadError)

    def test_failure_without_factory_returns_stdout(self) -> None:
        """Without an error factory the caller gets stdout on failure."""
        result = CommandResult(stdout="partial", stderr="oops", returncode=100)
        assert check_output(result, None) == "partial"

    def test_stderr_on_success_is_not_failure(self) -> None:
        """Exit status alone decides success."""
        result = CommandResult(stdout="ok", stderr="warning: stale cache", returncode=0)
        assert check_output(result, DownloadError) == "ok"


class TestRunShellCommand:
    """Tests for run_shell_command function."""

    @patch("package_assistant.utils.shell.subprocess.run")
    def test_empty_command_raises_before_spawning(self, mock_run: MagicMock) -> None:
        """An empty command never reaches subprocess."""
        with pytest.raises(EmptyCommandError):
            run_shell_command("", elevate=True, error_factory=DownloadError)

        mock_run.assert_not_called()

    @patch("package_assistant.utils.shell.subprocess.run")
    def test_elevated_command(self, mock_run: MagicMock) -> None:
        """Elevated commands are prefixed with the elevation helper."""
        mock_run.return_value = MagicMock(stdout=b"done", stderr=b"", returncode=0)

        output = run_shell_command("dnf upgrade -y", elevate=True)

        assert output == "done"
        assert mock_run.call_args.args[0] == ["sh", "-c", "pkexec dnf upgrade -y"]

    @patch("package_assistant.utils.shell.subprocess.run")
    def test_failure_raises_factory_error(self, mock_run: MagicMock) -> None:
        mock_run.return_value = MagicMock(stdout=b"", stderr=b"locked", returncode=7)

        with pytest.raises(UpdateError, match="locked"):
            run_shell_command("zypper -n up", elevate=True, error_factory=UpdateError)


class TestRunInteractiveShellCommand:
    """Tests for run_interactive_shell_command function."""

    @patch("package_assistant.utils.shell.subprocess.run")
    def test_empty_command_raises_before_spawning(self, mock_run: MagicMock) -> None:
        with pytest.raises(EmptyCommandError):
            run_interactive_shell_command("", elevate=True)

        mock_run.assert_not_called()

    @patch("package_assistant.utils.shell.subprocess.run")
    def test_does_not_capture_output(self, mock_run: MagicMock) -> None:
        """The interactive variant inherits the terminal."""
        mock_run.return_value = MagicMock(returncode=0)

        run_interactive_shell_command("zypper up", elevate=True)

        call = mock_run.call_args
        assert call.args[0] == ["sh", "-c", "pkexec zypper up"]
        assert "capture_output" not in call.kwargs
        assert "stdout" not in call.kwargs
        assert "stderr" not in call.kwargs

    @patch("package_assistant.utils.shell.subprocess.run")
    def test_nonzero_exit_raises(self, mock_run: MagicMock) -> None:
        mock_run.return_value = MagicMock(returncode=4)

        with pytest.raises(UpdateError, match="status 4"):
            run_interactive_shell_command("zypper up", elevate=False)
