"""Reporting of recoverable filesystem errors."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import click

from dirprobe.models.search import SearchContext

log = logging.getLogger(__name__)


def describe_os_error(exc: OSError) -> str:
    """Return the system error message carried by *exc*."""
    if exc.strerror:
        return exc.strerror
    if exc.errno:
        return os.strerror(exc.errno)
    return str(exc)


def report_error(context: SearchContext, message: str, path: Path | str | None = None) -> None:
    """Write ``<program>: <message> <path>`` to the error stream.

    Never raises and never stops the traversal.
    """
    target = os.fspath(path) if path is not None else ""
    log.debug("Recoverable error: %s %s", message, target)
    click.echo(f"{context.program_name}: {message} {target}", err=True)
