"""In-process byte comparison of two files.

Files are streamed through fixed-size buffers, so memory use stays bounded
regardless of file size. Reads on the two sides may return chunks of
different lengths; each step compares only the overlap of what is currently
buffered on both sides and then advances both streams by that amount.
"""

import logging
import os
from contextlib import ExitStack
from dataclasses import dataclass

from fcmp.core.filetype import FileType
from fcmp.diff.base import DiffStrategy

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 8192

_OPEN_FLAGS = os.O_RDONLY | getattr(os, "O_NONBLOCK", 0)


@dataclass(frozen=True, slots=True)
class _OpenFile:
    """An opened path with the metadata needed for the cheap checks."""

    fd: int
    size: int
    link_type: FileType
    target_type: FileType


class InternalByteCompare(DiffStrategy):
    """Compare file contents byte for byte.

    Args:
        chunk_size: Maximum number of bytes read from each file per step.
    """

    def __init__(self, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        if chunk_size < 1:
            msg = f"Chunk size must be positive, got {chunk_size}"
            raise ValueError(msg)
        self._chunk_size = chunk_size

    @property
    def chunk_size(self) -> int:
        """Maximum number of bytes read from each file per step."""
        return self._chunk_size

    def differs(self, a: str, b: str) -> bool:
        with ExitStack() as stack:
            file_a = _open(a, stack)
            file_b = _open(b, stack)

            if file_a is None or file_b is None:
                # Two missing files are equal, one missing file is not
                return (file_a is None) != (file_b is None)

            if (
                file_a.size != file_b.size
                or file_a.link_type is FileType.SYMLINK
                or file_b.link_type is FileType.SYMLINK
                or file_a.link_type is not file_b.link_type
            ):
                logger.debug("Metadata differs: %s, %s", a, b)
                return True

            if file_a.target_type is not FileType.REGULAR:
                logger.debug("Not regular files, treating as different: %s, %s", a, b)
                return True

            return not _stream_equal(file_a.fd, file_b.fd, self._chunk_size)

    def __repr__(self) -> str:
        return f"InternalByteCompare(chunk_size={self._chunk_size})"


def _open(path: str, stack: ExitStack) -> _OpenFile | None:
    """Open a path for reading, returning None if it does not exist.

    The descriptor is closed when the stack unwinds.
    """
    try:
        fd = os.open(path, _OPEN_FLAGS)
    except FileNotFoundError:
        return None
    stack.callback(os.close, fd)

    st = os.fstat(fd)
    link_st = os.lstat(path)
    return _OpenFile(
        fd=fd,
        size=st.st_size,
        link_type=FileType.from_mode(link_st.st_mode),
        target_type=FileType.from_mode(st.st_mode),
    )


def _stream_equal(fd_a: int, fd_b: int, chunk_size: int) -> bool:
    """Check whether two descriptors yield the same bytes until EOF."""
    buf_a = memoryview(b"")
    buf_b = memoryview(b"")

    while True:
        if not buf_a:
            buf_a = memoryview(os.read(fd_a, chunk_size))
        if not buf_b:
            buf_b = memoryview(os.read(fd_b, chunk_size))

        if not buf_a and not buf_b:
            return True

        step = min(len(buf_a), len(buf_b))
        if step == 0:
            # One side ended before the other
            return False

        if buf_a[:step] != buf_b[:step]:
            return False

        buf_a = buf_a[step:]
        buf_b = buf_b[step:]
