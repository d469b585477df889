"""Core domain errors."""


class SpreadFSError(Exception):
    """Base error for SpreadFS."""

    pass


class StoreInitError(SpreadFSError):
    """Cache root could not be created or prepared."""

    pass


class NotFoundError(SpreadFSError):
    """Cache entry not found."""

    pass


class PathOutsideRootError(SpreadFSError):
    """Path does not lie under the cache root."""

    pass


class ReloadError(SpreadFSError):
    """Cache root could not be enumerated."""

    pass


class ReloadCancelledError(SpreadFSError):
    """Reload was cancelled before the walk completed."""

    pass
