"""Example: warm-starting an in-memory cache index from disk.

A cache manager keeps its own index of live entries. After a restart it
rebuilds that index from what survived on disk, then keeps using the same
paths as handles.
"""

import threading
from collections.abc import Callable

from spreadfs import CacheStorePort, NotFoundError, create_store


class ImageCache:
    """Tiny read-through cache keyed by the paths SpreadFS hands out."""

    def __init__(self, store: CacheStorePort) -> None:
        self.store = store
        self.index: dict[str, str] = {}
        self.lock = threading.Lock()

    def warm_start(self) -> int:
        # Reload gives back paths, not original keys. map_key() returns
        # such paths unchanged, so lookups by key still land on them.
        return self.store.reload(self._remember)

    def _remember(self, key: str, path: str) -> None:
        with self.lock:
            self.index[key] = path

    def get(self, key: str, produce: Callable[[], bytes]) -> bytes:
        path = self.store.map_key(key)
        with self.lock:
            known = path in self.index
        if known:
            try:
                with self.store.open(path) as f:
                    return f.read()
            except NotFoundError:
                pass

        data = produce()
        with self.store.create(path) as f:
            f.write(data)
        with self.lock:
            self.index[path] = path
        return data


if __name__ == "__main__":
    store = create_store("/tmp/.spreadfs/example", 0o755)
    cache = ImageCache(store)
    print(f"Loaded {cache.warm_start()} entries from {store.root}")
    cover = cache.get("album:42:300", lambda: b"\x89PNG...")
    print(f"Cover is {len(cover)} bytes, stored at {store.map_key('album:42:300')}")
