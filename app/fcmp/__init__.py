"""fcmp: find the most recently modified file.

Compares a list of paths by existence and modification time, optionally
treating files with identical content as equal, and reports the winner.
"""

__version__ = "0.3.1"

from fcmp.core.compare import compare_all
from fcmp.core.errors import FcmpError, MissingFileError
from fcmp.core.policy import MissingFilePolicy
from fcmp.core.snapshot import FileSnapshot
from fcmp.diff import DiffMode, ExternalProcess, InternalByteCompare, NoOpStrategy

__all__ = [
    "DiffMode",
    "ExternalProcess",
    "FcmpError",
    "FileSnapshot",
    "InternalByteCompare",
    "MissingFileError",
    "MissingFilePolicy",
    "NoOpStrategy",
    "__version__",
    "compare_all",
]
