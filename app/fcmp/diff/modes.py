"""Selection of difference strategies by name.

Used by the command line and the configuration file to pick one strategy
per invocation.
"""

from collections.abc import Sequence
from enum import Enum

from fcmp.diff.base import DiffStrategy
from fcmp.diff.external import ExternalProcess
from fcmp.diff.internal import DEFAULT_CHUNK_SIZE, InternalByteCompare
from fcmp.diff.noop import NoOpStrategy


class DiffMode(str, Enum):
    """Available difference strategies."""

    NONE = "none"
    INTERNAL = "internal"
    CMP = "cmp"
    DIFF = "diff"
    COMMAND = "command"


def build_strategy(
    mode: DiffMode,
    command: Sequence[str] | None = None,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> DiffStrategy:
    """Get a strategy instance for a mode.

    Args:
        mode: The selected difference mode.
        command: Comparator argv (executable first), required for COMMAND.
        chunk_size: Buffer size for INTERNAL.

    Returns:
        Configured DiffStrategy.

    Raises:
        ValueError: If COMMAND is selected without a command.
    """
    if mode == DiffMode.INTERNAL:
        return InternalByteCompare(chunk_size=chunk_size)
    if mode == DiffMode.CMP:
        return ExternalProcess.posix_cmp()
    if mode == DiffMode.DIFF:
        return ExternalProcess.posix_diff()
    if mode == DiffMode.COMMAND:
        if not command:
            msg = "Diff mode 'command' requires a comparator command"
            raise ValueError(msg)
        return ExternalProcess(command[0], list(command[1:]))
    return NoOpStrategy()
