"""Shared fixtures."""

from collections.abc import Callable
from pathlib import Path

import pytest

from spreadfs.adapters import Sha1Adapter, StdLoggerAdapter
from spreadfs.core import SpreadFS


@pytest.fixture
def root(tmp_path: Path) -> Path:
    return tmp_path / "cache"


@pytest.fixture
def store(root: Path) -> SpreadFS:
    return SpreadFS(root, hasher=Sha1Adapter(), logger=StdLoggerAdapter(level="DEBUG"), mode=0o755)


@pytest.fixture
def write_entry(store: SpreadFS) -> Callable[[str, bytes], str]:
    """Store content under a key and return the entry path."""

    def _write(key: str, content: bytes) -> str:
        path = store.map_key(key)
        with store.create(path) as f:
            f.write(content)
        return path

    return _write
