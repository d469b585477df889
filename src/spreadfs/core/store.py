"""Sharded, content-addressable file store."""

import os
import shutil
import tempfile
import threading
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, cast

from ..ports import HashPort, LoggerPort
from .config import DEFAULT_DIR_MODE
from .errors import (
    NotFoundError,
    PathOutsideRootError,
    ReloadCancelledError,
    ReloadError,
    StoreInitError,
)
from .layout import ShardLayout
from .models import EntryInfo

StrPath = str | os.PathLike[str]


class SpreadFS:
    """File store that spreads cache entries across a sharded directory tree.

    Keys are mapped to ``<root>/<xx>/<yy>/<digest>`` paths. Shard directories
    are created on demand. Entries are never renamed or deleted unless the
    owning cache manager asks for it through ``remove``/``remove_all``.

    The store holds no locks: ``map_key`` is pure and distinct keys never
    share a file. Callers on an event loop should treat ``create``, ``open``
    and ``reload`` as blocking calls.
    """

    def __init__(
        self,
        root: StrPath,
        hasher: HashPort,
        logger: LoggerPort,
        mode: int = DEFAULT_DIR_MODE,
    ):
        """Initialize the store, creating the cache root if needed.

        Args:
            root: Cache root directory
            hasher: Digest used to derive entry names
            logger: Logger port
            mode: Permission bits for the root and shard directories. Entry
                files get the same bits without execute permission.

        Raises:
            StoreInitError: If the root cannot be created or accessed
        """
        self.root_path = Path(os.path.abspath(root))
        self.root = str(self.root_path)
        self.mode = mode
        self.file_mode = mode & 0o666
        self.hasher = hasher
        self.logger = logger
        self.layout = ShardLayout(self.root_path, hasher.hex_width)
        self._init_root()

    def _init_root(self) -> None:
        existed = self.root_path.is_dir()
        try:
            os.makedirs(self.root_path, self.mode, exist_ok=True)
        except OSError as e:
            raise StoreInitError(f"Cannot create cache root {self.root}: {e}") from e

        # makedirs is subject to the umask
        try:
            self.root_path.chmod(self.mode)
        except OSError as e:
            if not existed:
                raise StoreInitError(f"Cannot set permissions on {self.root}: {e}") from e
            self.logger.warning(
                "Could not set cache root permissions",
                path=self.root,
                mode=oct(self.mode),
                error=str(e),
            )

        if not os.access(self.root_path, os.R_OK | os.W_OK | os.X_OK):
            raise StoreInitError(f"Cache root is not accessible: {self.root}")

        self.logger.debug("Cache root ready", path=self.root, mode=oct(self.mode))

    # Key mapping

    def map_key(self, key: str) -> str:
        """Map a cache key to its entry path.

        Values that already have the shape of a mapped path under this root
        are returned unchanged, so ``map_key(map_key(k)) == map_key(k)``.
        """
        if self.layout.is_mapped(key):
            return key
        return self.layout.path_for(self.hasher.digest(key))

    def is_mapped(self, value: str) -> bool:
        return self.layout.is_mapped(value)

    # Entry access

    def create(self, path: StrPath) -> BinaryIO:
        """Create or truncate an entry, creating shard directories as needed.

        Concurrent writers to the same path are not arbitrated here; use
        ``atomic_create`` when readers may race with a writer.
        """
        name = self._resolve(path)
        os.makedirs(name.parent, self.mode, exist_ok=True)
        fd = os.open(name, os.O_RDWR | os.O_CREAT | os.O_TRUNC, self.file_mode)
        try:
            return cast(BinaryIO, os.fdopen(fd, "w+b"))
        except BaseException:
            os.close(fd)
            raise

    @contextmanager
    def atomic_create(self, path: StrPath) -> Iterator[BinaryIO]:
        """Write an entry through a temporary file and publish it on success.

        The temporary lives next to the final file, so ``os.replace`` stays on
        one filesystem and readers see either the old entry or the new one.

        Example:
            >>> with store.atomic_create(store.map_key("cover:42")) as f:
            ...     f.write(data)
        """
        name = self._resolve(path)
        os.makedirs(name.parent, self.mode, exist_ok=True)

        tmp = tempfile.NamedTemporaryFile(
            dir=name.parent, prefix=f".{name.name}.", suffix=".tmp", delete=False
        )
        tmp_path = Path(tmp.name)
        try:
            with tmp:
                yield cast(BinaryIO, tmp)
            tmp_path.chmod(self.file_mode)
            tmp_path.replace(name)
        except BaseException:
            tmp_path.unlink(missing_ok=True)
            raise

    def open(self, path: StrPath) -> BinaryIO:
        """Open an existing entry for reading.

        Raises:
            NotFoundError: If the entry does not exist. Nothing is created.
        """
        name = self._resolve(path)
        try:
            return cast(BinaryIO, name.open("rb"))
        except FileNotFoundError as e:
            raise NotFoundError(f"Cache entry not found: {name}") from e

    def exists(self, path: StrPath) -> bool:
        return self._resolve(path).is_file()

    def stat(self, path: StrPath) -> EntryInfo:
        name = self._resolve(path)
        try:
            st = name.stat()
        except FileNotFoundError as e:
            raise NotFoundError(f"Cache entry not found: {name}") from e
        return EntryInfo.from_stat(str(name), st)

    def remove(self, path: StrPath) -> None:
        """Remove a single entry. Shard directories are left in place."""
        name = self._resolve(path)
        try:
            name.unlink()
        except FileNotFoundError as e:
            raise NotFoundError(f"Cache entry not found: {name}") from e
        self.logger.debug("Removed cache entry", path=str(name))

    def remove_all(self) -> int:
        """Empty the cache root. The root directory itself is kept.

        Returns:
            Number of top-level items removed
        """
        children = list(self.root_path.iterdir())
        for child in children:
            if child.is_dir() and not child.is_symlink():
                shutil.rmtree(child)
            else:
                child.unlink()

        self.logger.info("Cleared cache", path=self.root, removed=len(children))
        return len(children)

    # Bootstrap reload

    def iter_entries(self, cancel: threading.Event | None = None) -> Iterator[str]:
        """Yield the absolute path of every entry found under the root.

        Order is unspecified. Files that do not have the mapped shape (for
        example in-flight ``atomic_create`` temporaries) are skipped, as are
        directories or files that cannot be read. Only a failure to list the
        root itself is raised.

        Raises:
            ReloadError: If the root cannot be listed
            ReloadCancelledError: If ``cancel`` is set during the walk
        """
        pending = [self.root]
        while pending:
            self._check_cancel(cancel)
            directory = pending.pop()
            try:
                with os.scandir(directory) as it:
                    entries = list(it)
            except OSError as e:
                if directory == self.root:
                    raise ReloadError(f"Cannot read cache root {self.root}: {e}") from e
                self.logger.warning(
                    "Skipping unreadable cache directory", path=directory, error=str(e)
                )
                continue

            for entry in entries:
                self._check_cancel(cancel)
                try:
                    if entry.is_dir(follow_symlinks=False):
                        pending.append(entry.path)
                        continue
                    is_file = entry.is_file(follow_symlinks=False)
                except OSError as e:
                    self.logger.warning(
                        "Skipping unreadable cache entry", path=entry.path, error=str(e)
                    )
                    continue

                if not is_file or not self.layout.is_mapped(entry.path):
                    self.logger.debug("Skipping file outside cache layout", path=entry.path)
                    continue
                if not os.access(entry.path, os.R_OK):
                    self.logger.warning("Skipping unreadable cache entry", path=entry.path)
                    continue
                yield entry.path

    def reload(
        self,
        visit: Callable[[str, str], None],
        cancel: threading.Event | None = None,
    ) -> int:
        """Replay every entry on disk to ``visit(key, path)``.

        The digest behind an entry name is one-way, so the original key cannot
        be recovered. ``visit`` receives the absolute entry path as both key
        and path; that path is what the caller stores and later passes back
        to ``open``. Do not change this to a recovered key: existing indexes
        depend on it.

        Returns:
            Number of entries visited
        """
        start = time.monotonic()
        count = 0
        for path in self.iter_entries(cancel):
            visit(path, path)
            count += 1

        self.logger.log_operation(
            op="reload",
            path=self.root,
            durations={"total": time.monotonic() - start},
            count=count,
        )
        return count

    def _resolve(self, path: StrPath) -> Path:
        name = Path(os.path.abspath(path))
        if not self.layout.is_under_root(name):
            raise PathOutsideRootError(f"Path is outside cache root {self.root}: {name}")
        return name

    def _check_cancel(self, cancel: threading.Event | None) -> None:
        if cancel is not None and cancel.is_set():
            self.logger.info("Reload cancelled", path=self.root)
            raise ReloadCancelledError(f"Reload of {self.root} cancelled")
