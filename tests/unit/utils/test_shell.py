"""Unit tests for shell execution utilities."""

import subprocess
import sys
from unittest.mock import MagicMock, patch

import pytest
from fcmp.utils.shell import CommandResult, command_exists, run_command


class TestCommandResult:
    """Tests for CommandResult properties."""

    def test_success(self) -> None:
        """Only exit code 0 is success."""
        assert CommandResult(stdout="", stderr="", returncode=0).success is True
        assert CommandResult(stdout="", stderr="", returncode=1).success is False

    def test_signal_from_negative_returncode(self) -> None:
        """Negative return codes carry the terminating signal."""
        assert CommandResult(stdout="", stderr="", returncode=-15).signal == 15

    def test_no_signal_for_normal_exit(self) -> None:
        """Normal exits have no signal."""
        assert CommandResult(stdout="", stderr="", returncode=2).signal is None


class TestRunCommand:
    """Tests for run_command function."""

    @patch("fcmp.utils.shell.subprocess.run")
    def test_returns_result(self, mock_run: MagicMock) -> None:
        """run_command wraps the completed process."""
        mock_run.return_value = MagicMock(stdout="out", stderr="err", returncode=1)

        result = run_command(["cmp", "a", "b"])

        assert result == CommandResult(stdout="out", stderr="err", returncode=1)

    @patch("fcmp.utils.shell.subprocess.run")
    def test_captures_output_without_timeout(self, mock_run: MagicMock) -> None:
        """Output is captured and there is no timeout by default."""
        mock_run.return_value = MagicMock(stdout="", stderr="", returncode=0)

        run_command(["cmp", "a", "b"])

        kwargs = mock_run.call_args.kwargs
        assert kwargs["capture_output"] is True
        assert kwargs["timeout"] is None
        assert kwargs["check"] is False

    @patch("fcmp.utils.shell.subprocess.run")
    def test_output_limit_spools_to_files(self, mock_run: MagicMock) -> None:
        """With output_limit, output is not piped into memory."""
        mock_run.return_value = MagicMock(returncode=0)

        result = run_command(["diff", "a", "b"], output_limit=16)

        kwargs = mock_run.call_args.kwargs
        assert "capture_output" not in kwargs
        assert kwargs["stdout"] is not subprocess.PIPE
        assert result == CommandResult(stdout="", stderr="", returncode=0)

    def test_output_limit_keeps_tail(self) -> None:
        """Only the last output_limit bytes of each stream are returned."""
        code = "import sys; print('a' * 1000 + 'END'); print('b' * 1000 + 'ERR', file=sys.stderr)"

        result = run_command([sys.executable, "-c", code], output_limit=10)

        assert result.success
        assert result.stdout == "aaaaaaEND\n"
        assert result.stderr == "bbbbbbERR\n"

    def test_raises_file_not_found(self) -> None:
        """run_command raises FileNotFoundError for missing commands."""
        with pytest.raises(FileNotFoundError):
            run_command(["nonexistent_command_xyz_12345"])


class TestCommandExists:
    """Tests for command_exists function."""

    @patch("fcmp.utils.shell.shutil.which", return_value="/usr/bin/cmp")
    def test_found(self, _mock_which: MagicMock) -> None:
        """A command on PATH exists."""
        assert command_exists("cmp") is True

    @patch("fcmp.utils.shell.shutil.which", return_value=None)
    def test_not_found(self, _mock_which: MagicMock) -> None:
        """A command missing from PATH does not exist."""
        assert command_exists("cmp") is False
