"""Adapters for SpreadFS ports."""

from .hash_sha1 import Sha1Adapter
from .logger_std import StdLoggerAdapter

__all__ = ["Sha1Adapter", "StdLoggerAdapter"]
