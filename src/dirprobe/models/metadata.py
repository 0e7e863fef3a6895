"""File metadata dataclass."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from dirprobe.utils import format_permissions, format_timestamp


@dataclass(frozen=True, slots=True)
class FileMetadata:
    """Metadata of a single matched entry, derived from one stat query."""

    path: Path
    size: int
    mtime: float
    mode: int
    inode: int

    @classmethod
    def from_stat(cls, path: Path, st: os.stat_result) -> FileMetadata:
        return cls(
            path=path,
            size=st.st_size,
            mtime=st.st_mtime,
            mode=st.st_mode,
            inode=st.st_ino,
        )

    @property
    def permissions(self) -> str:
        """Nine-character ``rwxrwxrwx`` style permission string."""
        return format_permissions(self.mode)

    @property
    def modified(self) -> str:
        """Last modification time in local time."""
        return format_timestamp(self.mtime)

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": str(self.path),
            "size": self.size,
            "modified": self.modified,
            "mtime": self.mtime,
            "permissions": self.permissions,
            "inode": self.inode,
        }
