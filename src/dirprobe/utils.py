"""Shared utility functions."""

from __future__ import annotations

import errno
import logging
import os
import stat
import time
from pathlib import Path

log = logging.getLogger(__name__)

# Fallbacks when pathconf cannot report the limits (Linux defaults).
_DEFAULT_PATH_MAX = 4096
_DEFAULT_NAME_MAX = 255

# (bit, character) pairs in display order: owner, group, other x read, write, execute.
_PERMISSION_BITS = (
    (stat.S_IRUSR, "r"),
    (stat.S_IWUSR, "w"),
    (stat.S_IXUSR, "x"),
    (stat.S_IRGRP, "r"),
    (stat.S_IWGRP, "w"),
    (stat.S_IXGRP, "x"),
    (stat.S_IROTH, "r"),
    (stat.S_IWOTH, "w"),
    (stat.S_IXOTH, "x"),
)


class PathTooLongError(OSError):
    """Raised when joining two path components would exceed the system limits."""

    def __init__(self, path: str) -> None:
        super().__init__(errno.ENAMETOOLONG, os.strerror(errno.ENAMETOOLONG), path)


def format_permissions(mode: int) -> str:
    """Format the nine permission bits of *mode* as e.g. ``rwxr-xr--``.

    File type, setuid/setgid and sticky bits are ignored.
    """
    return "".join(char if mode & bit else "-" for bit, char in _PERMISSION_BITS)


def format_timestamp(seconds: float) -> str:
    """Format an epoch timestamp in local time, ``ctime`` style."""
    return time.ctime(seconds)


def _pathconf(path: Path | str, name: str, default: int) -> int:
    try:
        value = os.pathconf(path, name)
    except (OSError, ValueError):
        return default
    return value if value > 0 else default


def join_path(parent: Path | str, name: str) -> Path:
    """Join a directory entry *name* onto *parent*.

    Unlike plain string splicing this never truncates: a component longer
    than ``NAME_MAX`` or a result of ``PATH_MAX`` bytes or more raises
    :class:`PathTooLongError`.
    """
    joined = os.path.join(os.fspath(parent), name)
    name_max = _pathconf(parent, "PC_NAME_MAX", _DEFAULT_NAME_MAX)
    path_max = _pathconf(parent, "PC_PATH_MAX", _DEFAULT_PATH_MAX)
    if len(os.fsencode(name)) > name_max or len(os.fsencode(joined)) >= path_max:
        raise PathTooLongError(joined)
    return Path(joined)
