"""Port interfaces for SpreadFS."""

from .cache import CacheStorePort
from .hash import HashPort
from .logger import LoggerPort

__all__ = ["CacheStorePort", "HashPort", "LoggerPort"]
