"""Errors raised by the comparison engine.

Not-found under the ``error`` policy and failures of an external comparator
are modelled here. Any other ``OSError`` (permission denied, device errors)
is propagated unchanged.
"""


class FcmpError(Exception):
    """Base exception for comparison failures."""


class MissingFileError(FcmpError):
    """Raised when a path does not exist under the ``error`` missing policy."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"file not found: '{path}'")


class ComparatorError(FcmpError):
    """Raised when an external comparator cannot produce a verdict."""


class ComparatorExitError(ComparatorError):
    """Raised when a comparator exits with a code other than 0 or 1."""

    def __init__(self, command: str, returncode: int) -> None:
        self.command = command
        self.returncode = returncode
        super().__init__(f"comparator '{command}' exited abnormally with code {returncode}")


class ComparatorSignalError(ComparatorError):
    """Raised when a comparator is terminated by a signal."""

    def __init__(self, command: str, signal: int) -> None:
        self.command = command
        self.signal = signal
        super().__init__(f"comparator '{command}' was killed by signal {signal}")
