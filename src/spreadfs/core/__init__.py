"""Core domain for SpreadFS."""

from .config import SpreadFSConfig
from .errors import (
    NotFoundError,
    PathOutsideRootError,
    ReloadCancelledError,
    ReloadError,
    SpreadFSError,
    StoreInitError,
)
from .layout import ShardLayout
from .models import EntryInfo
from .store import SpreadFS

__all__ = [
    "EntryInfo",
    "NotFoundError",
    "PathOutsideRootError",
    "ReloadCancelledError",
    "ReloadError",
    "ShardLayout",
    "SpreadFS",
    "SpreadFSConfig",
    "SpreadFSError",
    "StoreInitError",
]
