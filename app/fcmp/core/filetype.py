"""Classification of filesystem entries."""

import stat
from enum import Enum


class FileType(str, Enum):
    """Type of filesystem entry.

    Attributes:
        REGULAR: Regular file.
        DIRECTORY: Directory.
        SYMLINK: Symbolic link (classified without following it).
        OTHER: FIFO, socket, device node or anything else.
    """

    REGULAR = "regular"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    OTHER = "other"

    @classmethod
    def from_mode(cls, mode: int) -> "FileType":
        """Classify an ``st_mode`` value."""
        if stat.S_ISLNK(mode):
            return cls.SYMLINK
        if stat.S_ISDIR(mode):
            return cls.DIRECTORY
        if stat.S_ISREG(mode):
            return cls.REGULAR
        return cls.OTHER
