"""Hash port interface."""

from typing import Protocol


class HashPort(Protocol):
    """Port for deriving fixed-width hex digests from cache keys."""

    @property
    def hex_width(self) -> int:
        """Number of hex characters produced by ``digest``."""
        ...

    def digest(self, data: str) -> str:
        """Return the lowercase hex digest of ``data``."""
        ...
