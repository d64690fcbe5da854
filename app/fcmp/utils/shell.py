"""Shell execution utilities.

Provides subprocess execution for external comparators.
"""

import os
import shutil
import subprocess
import tempfile
from dataclasses import dataclass
from typing import BinaryIO


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Result of a shell command execution.

    Attributes:
        stdout: Standard output from the command.
        stderr: Standard error from the command.
        returncode: Exit code of the command. Negative values mean the
            process was terminated by the signal of that number.
    """

    stdout: str
    stderr: str
    returncode: int

    @property
    def success(self) -> bool:
        """Check if command executed successfully."""
        return self.returncode == 0

    @property
    def signal(self) -> int | None:
        """Signal number that terminated the command, if any."""
        if self.returncode < 0:
            return -self.returncode
        return None


def run_command(
    args: list[str],
    *,
    timeout: float | None = None,
    cwd: str | None = None,
    output_limit: int | None = None,
) -> CommandResult:
    """Execute a command and return the result.

    Output is captured so it never reaches the caller's terminal.

    Args:
        args: Command and arguments to execute.
        timeout: Maximum time in seconds to wait for command. None waits
            indefinitely.
        cwd: Working directory for the command. If None, uses current directory.
        output_limit: If set, output is spooled to temporary files and only
            the last ``output_limit`` bytes of each stream are kept.

    Returns:
        CommandResult with stdout, stderr, and returncode.

    Raises:
        subprocess.TimeoutExpired: If command exceeds timeout.
        FileNotFoundError: If command executable is not found.
    """
    if output_limit is not None:
        return _run_spooled(args, timeout=timeout, cwd=cwd, limit=output_limit)

    result = subprocess.run(
        args,
        capture_output=True,
        text=True,
        errors="replace",
        check=False,
        timeout=timeout,
        cwd=cwd,
    )
    return CommandResult(
        stdout=result.stdout,
        stderr=result.stderr,
        returncode=result.returncode,
    )


def _run_spooled(
    args: list[str],
    *,
    timeout: float | None,
    cwd: str | None,
    limit: int,
) -> CommandResult:
    """Run a command with its output on disk, keeping only the tails."""
    with tempfile.TemporaryFile() as out, tempfile.TemporaryFile() as err:
        result = subprocess.run(
            args,
            stdout=out,
            stderr=err,
            check=False,
            timeout=timeout,
            cwd=cwd,
        )
        return CommandResult(
            stdout=_tail(out, limit),
            stderr=_tail(err, limit),
            returncode=result.returncode,
        )


def _tail(f: BinaryIO, limit: int) -> str:
    """Read at most the last ``limit`` bytes of a file."""
    size = f.seek(0, os.SEEK_END)
    f.seek(max(0, size - limit))
    return f.read(limit).decode(errors="replace")


def command_exists(name: str) -> bool:
    """Check if a command exists in the system PATH.

    Args:
        name: Command name to check.

    Returns:
        True if command exists, False otherwise.
    """
    return shutil.which(name) is not None
