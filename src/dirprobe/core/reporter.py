"""Metadata records for matched entries."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

import click

from dirprobe.core.errors import describe_os_error, report_error
from dirprobe.models.metadata import FileMetadata
from dirprobe.models.search import SearchContext

log = logging.getLogger(__name__)


class MetadataReporter:
    """Queries and prints metadata for each matched path.

    Records go to stdout as soon as they are produced so they interleave
    with the traversal. Stat or canonicalization failures are reported to
    the error stream and the record is skipped.
    """

    def __init__(self, context: SearchContext, *, as_json: bool = False) -> None:
        self.context = context
        self.as_json = as_json
        self.failures = 0

    def collect(self, path: Path) -> FileMetadata | None:
        """Build the metadata for *path*, or ``None`` after reporting a failure."""
        try:
            st = os.stat(path)
        except OSError as e:
            self._fail(e, path)
            return None

        try:
            canonical = Path(path).resolve(strict=True)
        except OSError as e:
            self._fail(e, path)
            return None

        return FileMetadata.from_stat(canonical, st)

    def report(self, path: Path) -> None:
        """Emit the metadata record for *path*."""
        meta = self.collect(path)
        if meta is None:
            return
        log.debug("Reporting %s", meta.path)
        click.echo(self.render(meta))

    def render(self, meta: FileMetadata) -> str:
        if self.as_json:
            return json.dumps(meta.to_dict())
        return (
            f"For {meta.path}:\n"
            f"\tFile size: {meta.size} bytes\n"
            f"\tLast file modification: {meta.modified}\n"
            f"\tPermissions: {meta.permissions}\n"
            f"\tI-node number: {meta.inode}\n"
        )

    def _fail(self, exc: OSError, path: Path) -> None:
        self.failures += 1
        report_error(self.context, describe_os_error(exc), path)
