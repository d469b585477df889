"""Sharded on-disk layout for cache entries.

A digest ``d`` is stored at ``<root>/<d[0:2]>/<d[2:4]>/<d>``. Two levels of
256 buckets each keep the number of files in any single directory at about
``entries / 65536``.
"""

import string
from dataclasses import dataclass
from pathlib import Path

SHARD_DEPTH = 2
SHARD_WIDTH = 2

_HEX_DIGITS = frozenset(string.hexdigits.lower())


@dataclass(frozen=True)
class ShardLayout:
    """Pure path arithmetic for a cache root."""

    root: Path
    hex_width: int
    depth: int = SHARD_DEPTH
    width: int = SHARD_WIDTH

    def __post_init__(self) -> None:
        if self.depth * self.width > self.hex_width:
            raise ValueError(
                f"Digest too short for sharding: need at least {self.depth * self.width} "
                f"chars, got {self.hex_width}"
            )

    def shards(self, digest: str) -> list[str]:
        return [digest[i * self.width : (i + 1) * self.width] for i in range(self.depth)]

    def path_for(self, digest: str) -> str:
        """Build the mapped path for a hex digest."""
        return str(self.root.joinpath(*self.shards(digest), digest))

    def is_under_root(self, path: Path) -> bool:
        return path != self.root and path.is_relative_to(self.root)

    def is_mapped(self, value: str) -> bool:
        """Check whether ``value`` already has the shape of a mapped path.

        This is a structural check against the configured root and segment
        count, not a cryptographic one. Only the exact string ``path_for``
        would produce qualifies, so ``a//b`` or a trailing separator does not.
        """
        candidate = Path(value)
        if str(candidate) != value or not self.is_under_root(candidate):
            return False
        parts = candidate.relative_to(self.root).parts
        if len(parts) != self.depth + 1:
            return False
        *shards, leaf = parts
        if len(leaf) != self.hex_width or not _HEX_DIGITS.issuperset(leaf):
            return False
        return shards == self.shards(leaf)
