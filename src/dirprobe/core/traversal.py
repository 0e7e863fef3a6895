"""Depth-bounded recursive directory walk."""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path
from typing import Callable

from dirprobe.core.errors import describe_os_error
from dirprobe.models.search import ScanCounter, SearchSpec
from dirprobe.utils import PathTooLongError, join_path

log = logging.getLogger(__name__)

MatchCallback = Callable[[Path], None]
ErrorCallback = Callable[[str, Path], None]  # (system error message, path)


def is_directory(path: Path) -> bool:
    """Check whether *path* is a directory, following symlinks.

    Entries that cannot be stat'ed count as non-directories.
    """
    try:
        return stat.S_ISDIR(os.stat(path).st_mode)
    except OSError as e:
        log.debug("Could not stat %s: %s", path, e)
        return False


def search(
    spec: SearchSpec,
    counter: ScanCounter,
    on_match: MatchCallback,
    on_error: ErrorCallback,
) -> None:
    """Walk ``spec.start_dir`` looking for entries named like the target.

    Every entry seen bumps *counter*. Subdirectories are descended into
    while ``spec.depth`` is positive; otherwise (and for non-directories)
    the entry's bare name is compared against ``spec.target_name`` and a
    match is handed to *on_match* with its full path.

    Failures to list a directory or to build an entry path go to
    *on_error* and only skip the affected directory or entry. Exceptions
    raised by *on_match* propagate to the caller.
    """
    directory = spec.start_dir
    log.debug("Entering %s (depth budget %d)", directory, spec.depth)

    try:
        entries = os.scandir(directory)
    except OSError as e:
        on_error(describe_os_error(e), directory)
        return

    with entries:
        while True:
            # scandir never yields "." or ".."
            try:
                entry = next(entries)
            except StopIteration:
                break
            except OSError as e:
                on_error(describe_os_error(e), directory)
                break
            counter.increment()
            _visit(spec, entry.name, counter, on_match, on_error)


def _visit(
    spec: SearchSpec,
    name: str,
    counter: ScanCounter,
    on_match: MatchCallback,
    on_error: ErrorCallback,
) -> None:
    try:
        full_path = join_path(spec.start_dir, name)
    except PathTooLongError as e:
        on_error(describe_os_error(e), Path(e.filename))
        return

    if spec.depth > 0 and is_directory(full_path):
        search(spec.descend(full_path), counter, on_match, on_error)
    elif name == spec.target_name:
        on_match(full_path)
