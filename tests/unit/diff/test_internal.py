"""Unit tests for the in-process byte comparison."""

# pyright: reportPrivateUsage=false

import os
from collections.abc import Callable
from pathlib import Path
from unittest.mock import patch

import pytest
from fcmp.diff.internal import InternalByteCompare, _stream_equal


def _chunked_reads(sources: dict[int, list[bytes]]) -> Callable[[int, int], bytes]:
    """Build a fake os.read that hands out pre-cut chunks per descriptor."""

    def _read(fd: int, _n: int) -> bytes:
        chunks = sources[fd]
        return chunks.pop(0) if chunks else b""

    return _read


class TestDiffers:
    """Tests for InternalByteCompare.differs."""

    def test_same_path_not_different(self, make_file: Callable[..., str]) -> None:
        """A file is never different from itself."""
        path = make_file("a.txt", b"content")

        assert InternalByteCompare().differs(path, path) is False

    def test_identical_copies_not_different(self, make_file: Callable[..., str]) -> None:
        """Two files with the same bytes are not different."""
        a = make_file("a.txt", b"same bytes", mtime=10)
        b = make_file("b.txt", b"same bytes", mtime=20)

        assert InternalByteCompare().differs(a, b) is False

    def test_empty_files_not_different(self, make_file: Callable[..., str]) -> None:
        """Two empty files are not different."""
        assert InternalByteCompare().differs(make_file("a"), make_file("b")) is False

    def test_different_sizes_short_circuit(self, make_file: Callable[..., str]) -> None:
        """Files of different sizes are different without reading them."""
        a = make_file("a.txt", b"short")
        b = make_file("b.txt", b"much longer")

        with patch("fcmp.diff.internal._stream_equal") as mock_stream:
            assert InternalByteCompare().differs(a, b) is True

        mock_stream.assert_not_called()

    @pytest.mark.parametrize("position", [3, 4])
    def test_byte_differs_at_chunk_boundary(
        self, make_file: Callable[..., str], position: int
    ) -> None:
        """A single differing byte on either side of a chunk boundary is found."""
        content = bytearray(b"abcdefgh")
        a = make_file("a.bin", bytes(content))
        content[position] = ord("X")
        b = make_file("b.bin", bytes(content))

        assert InternalByteCompare(chunk_size=4).differs(a, b) is True

    def test_difference_in_last_byte_of_large_file(self, make_file: Callable[..., str]) -> None:
        """Differences past many chunks are found."""
        data = os.urandom(100_000)
        a = make_file("a.bin", data)
        b = make_file("b.bin", data[:-1] + bytes([data[-1] ^ 0xFF]))

        assert InternalByteCompare(chunk_size=1024).differs(a, b) is True

    def test_both_missing_not_different(self, tmp_path: Path) -> None:
        """Two missing files are treated as equal."""
        a, b = str(tmp_path / "a"), str(tmp_path / "b")

        assert InternalByteCompare().differs(a, b) is False

    def test_one_missing_is_different(
        self, make_file: Callable[..., str], missing_path: str
    ) -> None:
        """An existing and a missing file are different."""
        path = make_file("a.txt", b"x")

        assert InternalByteCompare().differs(path, missing_path) is True
        assert InternalByteCompare().differs(missing_path, path) is True

    def test_symlink_is_different(self, make_file: Callable[..., str], tmp_path: Path) -> None:
        """A symlink is different even from the file it points to."""
        target = make_file("target.txt", b"same")
        link = tmp_path / "link"
        link.symlink_to(target)

        assert InternalByteCompare().differs(target, str(link)) is True

    def test_directories_are_different(self, tmp_path: Path) -> None:
        """Directories are not read and count as different."""
        a, b = tmp_path / "a", tmp_path / "b"
        a.mkdir()
        b.mkdir()

        assert InternalByteCompare().differs(str(a), str(b)) is True

    def test_reads_are_bounded(self, make_file: Callable[..., str]) -> None:
        """No single read asks for more than one chunk."""
        data = b"x" * 50_000
        a = make_file("a.bin", data)
        b = make_file("b.bin", data)
        requested: list[int] = []
        real_read = os.read

        def _spy(fd: int, n: int) -> bytes:
            requested.append(n)
            return real_read(fd, n)

        with patch("fcmp.diff.internal.os.read", side_effect=_spy):
            assert InternalByteCompare(chunk_size=512).differs(a, b) is False

        assert requested
        assert max(requested) <= 512

    def test_read_errors_propagate(self, make_file: Callable[..., str]) -> None:
        """I/O errors while streaming are raised."""
        a = make_file("a.bin", b"abc")
        b = make_file("b.bin", b"abd")

        with patch("fcmp.diff.internal.os.read", side_effect=OSError(5, "I/O error")):
            with pytest.raises(OSError, match="I/O error"):
                InternalByteCompare().differs(a, b)

    def test_invalid_chunk_size(self) -> None:
        """Chunk size must be positive."""
        with pytest.raises(ValueError, match="positive"):
            InternalByteCompare(chunk_size=0)


class TestStreamEqual:
    """Tests for streaming with unequal chunk alignment."""

    def test_misaligned_chunks_equal(self) -> None:
        """Equal data split at different points compares equal."""
        reads = _chunked_reads({1: [b"ab", b"cdef", b"g"], 2: [b"abcd", b"efg"]})

        with patch("fcmp.diff.internal.os.read", side_effect=reads):
            assert _stream_equal(1, 2, 8) is True

    def test_misaligned_chunks_mismatch(self) -> None:
        """A mismatch inside a partially consumed chunk is detected."""
        reads = _chunked_reads({1: [b"ab", b"cdef", b"g"], 2: [b"abcd", b"eXg"]})

        with patch("fcmp.diff.internal.os.read", side_effect=reads):
            assert _stream_equal(1, 2, 8) is False

    def test_one_stream_longer(self) -> None:
        """A stream ending early is not equal."""
        reads = _chunked_reads({1: [b"abc"], 2: [b"ab", b"cd"]})

        with patch("fcmp.diff.internal.os.read", side_effect=reads):
            assert _stream_equal(1, 2, 8) is False
