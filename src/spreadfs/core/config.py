"""Centralized configuration for SpreadFS."""

import os
from dataclasses import dataclass

DEFAULT_CACHE_DIR = "/tmp/.spreadfs/cache"
DEFAULT_DIR_MODE = 0o755


def parse_mode(value: str | int) -> int:
    """Parse a permission mode given as an octal string ("0755", "755", "0o755")."""
    if isinstance(value, int):
        mode = value
    else:
        text = value.strip().lower()
        if text.startswith("0o"):
            text = text[2:]
        try:
            mode = int(text, 8)
        except ValueError as e:
            raise ValueError(f"Invalid permission mode: {value!r}") from e
    if not 0 <= mode <= 0o7777:
        raise ValueError(f"Permission mode out of range: {oct(mode)}")
    return mode


@dataclass(slots=True)
class SpreadFSConfig:
    """All SpreadFS configuration in one place.

    Environment variables (all optional):
        SFS_CACHE_DIR:  Cache root directory. Default "/tmp/.spreadfs/cache".
        SFS_DIR_MODE:   Octal permission bits for the root and shard directories.
                        Default "0755".
        SFS_LOG_LEVEL:  Logging level. Default "INFO".
    """

    cache_dir: str = DEFAULT_CACHE_DIR
    dir_mode: int = DEFAULT_DIR_MODE
    log_level: str = "INFO"

    @classmethod
    def from_env(
        cls,
        *,
        cache_dir: str | None = None,
        dir_mode: str | int | None = None,
        log_level: str | None = None,
    ) -> "SpreadFSConfig":
        """Build config from environment variables + explicit overrides."""
        if dir_mode is None:
            dir_mode = os.environ.get("SFS_DIR_MODE", oct(DEFAULT_DIR_MODE))
        return cls(
            cache_dir=cache_dir or os.environ.get("SFS_CACHE_DIR", DEFAULT_CACHE_DIR),
            dir_mode=parse_mode(dir_mode),
            log_level=log_level or os.environ.get("SFS_LOG_LEVEL", "INFO"),
        )
