"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import os
from collections.abc import Callable
from pathlib import Path

import pytest

MakeFile = Callable[..., str]


@pytest.fixture(autouse=True)
def isolated_config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at an empty directory so user config never leaks in."""
    config_home = tmp_path / "xdg-config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def make_file(tmp_path: Path) -> MakeFile:
    """Factory creating a file with given content and modification time.

    Returns the path as a string, the form the comparison engine takes.
    """

    def _make(name: str, content: bytes | str = b"", mtime: float | None = None) -> str:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, str):
            content = content.encode()
        path.write_bytes(content)
        if mtime is not None:
            os.utime(path, (mtime, mtime))
        return str(path)

    return _make


@pytest.fixture
def missing_path(tmp_path: Path) -> str:
    """Path inside tmp_path that does not exist."""
    return str(tmp_path / "does-not-exist.txt")
