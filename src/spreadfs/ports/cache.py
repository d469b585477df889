"""Cache store port interface."""

import threading
from collections.abc import Callable
from typing import BinaryIO, Protocol


class CacheStorePort(Protocol):
    """Port consumed by a cache manager that keeps its index in memory.

    ``reload`` hands back the absolute entry path as both key and path: the
    digest cannot be inverted, so the path is the durable handle the index
    stores and later passes to ``open``.
    """

    def map_key(self, key: str) -> str:
        """Get path where the entry for ``key`` lives."""
        ...

    def create(self, path: str) -> BinaryIO:
        """Create (or truncate) an entry and return a writable handle."""
        ...

    def open(self, path: str) -> BinaryIO:
        """Open an existing entry for reading."""
        ...

    def reload(
        self,
        visit: Callable[[str, str], None],
        cancel: threading.Event | None = None,
    ) -> int:
        """Replay every entry on disk to ``visit(key, path)``."""
        ...
