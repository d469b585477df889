"""Core domain models."""

from dataclasses import dataclass
from datetime import UTC, datetime
from os import stat_result


@dataclass(frozen=True)
class EntryInfo:
    """File information for a cache entry."""

    path: str
    size: int
    modified_at: datetime
    accessed_at: datetime

    @classmethod
    def from_stat(cls, path: str, st: stat_result) -> "EntryInfo":
        return cls(
            path=path,
            size=st.st_size,
            modified_at=datetime.fromtimestamp(st.st_mtime, tz=UTC),
            accessed_at=datetime.fromtimestamp(st.st_atime, tz=UTC),
        )

    def to_dict(self) -> dict[str, str | int]:
        return {
            "path": self.path,
            "size": self.size,
            "modified_at": self.modified_at.isoformat(),
            "accessed_at": self.accessed_at.isoformat(),
        }
