"""File state snapshots and their pairwise ordering.

A snapshot is taken by opening a path once and reading its metadata from the
open descriptor. It is never refreshed afterwards, so every comparison made
during one reduction sees the same observation of a path.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

from fcmp.core.errors import MissingFileError
from fcmp.core.filetype import FileType
from fcmp.core.ordering import Ordering, cmp
from fcmp.core.policy import MissingFilePolicy

if TYPE_CHECKING:
    from fcmp.diff.base import DiffStrategy

logger = logging.getLogger(__name__)

# Opening a FIFO for reading would block until a writer appears
_OPEN_FLAGS = os.O_RDONLY | getattr(os, "O_NONBLOCK", 0)


@dataclass(frozen=True, slots=True)
class FileSnapshot:
    """Immutable observation of one path at one instant.

    Attributes:
        path: Path exactly as supplied by the caller.
        exists: Whether the path could be opened.
        size: Size in bytes (None if the file does not exist).
        modified_at: Modification time in nanoseconds since the epoch
            (None if the file does not exist).
        is_symlink: Whether the path itself is a symbolic link
            (None if the file does not exist).
        file_type: Classification of the path itself, without following
            symlinks (None if the file does not exist).
    """

    path: str
    exists: bool
    size: int | None = None
    modified_at: int | None = None
    is_symlink: bool | None = None
    file_type: FileType | None = None

    def __post_init__(self) -> None:
        """Validate that metadata is present exactly when the file exists."""
        metadata = (self.size, self.modified_at, self.is_symlink, self.file_type)
        if self.exists and any(field is None for field in metadata):
            msg = f"Snapshot of existing file '{self.path}' is missing metadata"
            raise ValueError(msg)
        if not self.exists and any(field is not None for field in metadata):
            msg = f"Snapshot of missing file '{self.path}' cannot carry metadata"
            raise ValueError(msg)
        if self.size is not None and self.size < 0:
            msg = f"Size must be non-negative, got {self.size}"
            raise ValueError(msg)

    @classmethod
    def not_found(cls, path: str) -> FileSnapshot:
        """Return a snapshot which behaves like a non-existent file."""
        return cls(path=path, exists=False)

    @classmethod
    def capture(cls, path: str) -> FileSnapshot:
        """Open and stat a path.

        Args:
            path: Filesystem path to observe.

        Returns:
            Snapshot of the path. A path that does not exist yields a
            snapshot with ``exists=False``.

        Raises:
            OSError: For any failure other than the path not existing.
        """
        try:
            fd = os.open(path, _OPEN_FLAGS)
        except FileNotFoundError:
            return cls.not_found(path)

        try:
            st = os.fstat(fd)
            link_st = os.lstat(path)
        finally:
            os.close(fd)

        file_type = FileType.from_mode(link_st.st_mode)
        return cls(
            path=path,
            exists=True,
            size=st.st_size,
            modified_at=st.st_mtime_ns,
            is_symlink=file_type is FileType.SYMLINK,
            file_type=file_type,
        )

    def order(
        self,
        other: FileSnapshot,
        strategy: DiffStrategy,
        missing: MissingFilePolicy,
    ) -> Ordering | None:
        """Order this snapshot against another.

        Files the strategy reports as not different are equal regardless of
        their timestamps. Otherwise existence decides first and modification
        time second.

        Args:
            other: Snapshot to compare against.
            strategy: Difference strategy deciding content equality.
            missing: Policy placing missing files relative to existing ones.

        Returns:
            Ordering of self relative to other, or None when neither
            existence nor modification time gives a basis for comparison.

        Raises:
            OSError: If the strategy fails to read either file.
            ComparatorError: If an external comparator fails.
        """
        if not strategy.differs(self.path, other.path):
            return Ordering.EQUAL

        existence = self._existence_ordering(other, missing)
        modified = self._modified_ordering(other, missing)
        if existence is None or modified is None:
            return None

        return existence.then(modified)

    def _existence_ordering(
        self, other: FileSnapshot, missing: MissingFilePolicy
    ) -> Ordering | None:
        if self.exists and other.exists:
            return Ordering.EQUAL
        return _one_missing(self.exists, other.exists, missing)

    def _modified_ordering(
        self, other: FileSnapshot, missing: MissingFilePolicy
    ) -> Ordering | None:
        if self.modified_at is not None and other.modified_at is not None:
            return cmp(self.modified_at, other.modified_at)
        return _one_missing(
            self.modified_at is not None, other.modified_at is not None, missing
        )


def _one_missing(
    self_present: bool, other_present: bool, missing: MissingFilePolicy
) -> Ordering | None:
    if self_present == other_present:
        # Both absent: nothing to compare
        return None
    if self_present:
        return missing.missing_ordering().reverse()
    return missing.missing_ordering()


def resolve(path: str, missing: MissingFilePolicy) -> FileSnapshot | None:
    """Resolve a path to a snapshot under a missing-file policy.

    Args:
        path: Filesystem path to observe.
        missing: How to handle a path that does not exist.

    Returns:
        The snapshot, or None if the path is missing and the policy is
        IGNORE (the path takes no part in the comparison).

    Raises:
        MissingFileError: If the path is missing and the policy is ERROR.
        OSError: For any other failure to open or stat the path.
    """
    snapshot = FileSnapshot.capture(path)
    if snapshot.exists:
        return snapshot

    if missing is MissingFilePolicy.ERROR:
        raise MissingFileError(path)
    if missing is MissingFilePolicy.IGNORE:
        logger.debug("Ignoring missing file: %s", path)
        return None

    logger.debug("Treating missing file as %s: %s", missing.value, path)
    return snapshot
