"""Store construction with wired adapters."""

import os
from dataclasses import replace

from .adapters import Sha1Adapter, StdLoggerAdapter
from .core import SpreadFS, SpreadFSConfig
from .core.config import parse_mode


def create_store(
    root: str | os.PathLike[str] | None = None,
    mode: int | str | None = None,
    log_level: str | None = None,
    config: SpreadFSConfig | None = None,
) -> SpreadFS:
    """Create a SpreadFS with default adapters.

    Explicit arguments override ``config``. Without ``config``, anything left
    unset falls back to the environment (see ``SpreadFSConfig.from_env``).

    Example:
        >>> store = create_store("/var/cache/music/images", 0o755)
        >>> with store.create(store.map_key("album:1:600")) as f:
        ...     f.write(data)
    """
    cache_dir = os.fspath(root) if root is not None else None

    if config is None:
        config = SpreadFSConfig.from_env(cache_dir=cache_dir, dir_mode=mode, log_level=log_level)
    else:
        overrides: dict[str, str | int] = {}
        if cache_dir is not None:
            overrides["cache_dir"] = cache_dir
        if mode is not None:
            overrides["dir_mode"] = parse_mode(mode)
        if log_level is not None:
            overrides["log_level"] = log_level
        config = replace(config, **overrides)

    return SpreadFS(
        config.cache_dir,
        hasher=Sha1Adapter(),
        logger=StdLoggerAdapter(level=config.log_level),
        mode=config.dir_mode,
    )
