"""Difference strategy delegating to an external comparator process.

The comparator is run as ``command *args a b`` and its exit status is taken
as the verdict, following the ``cmp``/``diff`` convention: 0 means the
files are the same, 1 means they differ, anything else is trouble.
"""

import logging

from fcmp.core.errors import ComparatorError, ComparatorExitError, ComparatorSignalError
from fcmp.diff.base import DiffStrategy
from fcmp.utils.shell import command_exists, run_command

logger = logging.getLogger(__name__)

# Comparator output is only logged; keep the end of each stream
OUTPUT_TAIL_BYTES = 4096


class ExternalProcess(DiffStrategy):
    """Compare files by running an external command.

    There is no timeout: a comparator that never exits blocks the whole
    comparison.

    Args:
        command: Executable to run.
        args: Arguments placed before the two paths.
    """

    def __init__(self, command: str, args: list[str] | tuple[str, ...] = ()) -> None:
        if not command:
            msg = "Comparator command cannot be empty"
            raise ValueError(msg)
        self._command = command
        self._args = tuple(args)

    @classmethod
    def posix_diff(cls) -> "ExternalProcess":
        """Return a strategy that runs POSIX ``diff``."""
        return cls("diff")

    @classmethod
    def posix_cmp(cls) -> "ExternalProcess":
        """Return a strategy that runs POSIX ``cmp -s``."""
        return cls("cmp", ["-s"])

    @property
    def command(self) -> str:
        """Executable to run."""
        return self._command

    @property
    def args(self) -> tuple[str, ...]:
        """Arguments placed before the two paths."""
        return self._args

    def is_available(self) -> bool:
        return command_exists(self._command)

    def differs(self, a: str, b: str) -> bool:
        argv = [self._command, *self._args, a, b]
        try:
            result = run_command(argv, output_limit=OUTPUT_TAIL_BYTES)
        except FileNotFoundError as e:
            msg = f"comparator '{self._command}' not found"
            raise ComparatorError(msg) from e
        except OSError as e:
            msg = f"comparator '{self._command}' cannot be executed: {e}"
            raise ComparatorError(msg) from e

        if result.stdout:
            logger.debug("%s stdout: %s", self._command, result.stdout.rstrip())
        if result.stderr:
            logger.debug("%s stderr: %s", self._command, result.stderr.rstrip())

        if result.returncode == 0:
            return False
        if result.returncode == 1:
            return True

        signal = result.signal
        if signal is not None:
            raise ComparatorSignalError(self._command, signal)
        raise ComparatorExitError(self._command, result.returncode)

    def __repr__(self) -> str:
        return f"ExternalProcess(command={self._command!r}, args={list(self._args)!r})"
