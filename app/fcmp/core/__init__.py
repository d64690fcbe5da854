"""Comparison engine.

This module provides file snapshots, their ordering, the missing-file
policy and the reduction selecting one path out of many.
"""

from fcmp.core.errors import (
    ComparatorError,
    ComparatorExitError,
    ComparatorSignalError,
    FcmpError,
    MissingFileError,
)
from fcmp.core.filetype import FileType
from fcmp.core.ordering import Ordering
from fcmp.core.policy import MissingFilePolicy
from fcmp.core.snapshot import FileSnapshot, resolve
from fcmp.core.compare import compare_all

__all__ = [
    "ComparatorError",
    "ComparatorExitError",
    "ComparatorSignalError",
    "FcmpError",
    "FileSnapshot",
    "FileType",
    "MissingFileError",
    "MissingFilePolicy",
    "Ordering",
    "compare_all",
    "resolve",
]
