"""SpreadFS - sharded, content-addressable file cache store."""

try:
    from ._version import version as __version__
except ImportError:
    # Package is not installed, so version is not available
    __version__ = "0.0.0+unknown"

from .core import (
    EntryInfo,
    NotFoundError,
    PathOutsideRootError,
    ReloadCancelledError,
    ReloadError,
    SpreadFS,
    SpreadFSConfig,
    SpreadFSError,
    StoreInitError,
)
from .factory import create_store
from .ports import CacheStorePort

__all__ = [
    "__version__",
    "CacheStorePort",
    "EntryInfo",
    "NotFoundError",
    "PathOutsideRootError",
    "ReloadCancelledError",
    "ReloadError",
    "SpreadFS",
    "SpreadFSConfig",
    "SpreadFSError",
    "StoreInitError",
    "create_store",
]
