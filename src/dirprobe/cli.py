"""CLI interface for Dirprobe."""

from __future__ import annotations

import errno
import json
import logging
import os
import stat
import sys

import click

from dirprobe.core.engine import SearchEngine
from dirprobe.core.errors import describe_os_error, report_error
from dirprobe.core.reporter import MetadataReporter
from dirprobe.models.search import SearchContext

DEFAULT_DEPTH = 1


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def _program_name(ctx: click.Context) -> str:
    return os.path.basename(ctx.find_root().info_name or "dirprobe")


def _require_directory(context: SearchContext, path: str) -> None:
    """Exit with status 1 unless *path* is a directory."""
    try:
        st = os.stat(path)
    except OSError as e:
        report_error(context, describe_os_error(e), path)
        sys.exit(1)
    if not stat.S_ISDIR(st.st_mode):
        report_error(context, os.strerror(errno.ENOTDIR), path)
        sys.exit(1)


@click.command()
@click.argument("args", nargs=-1, metavar="START_DIR TARGET")
@click.option(
    "-d", "--depth",
    default=DEFAULT_DEPTH,
    show_default=True,
    type=click.IntRange(min=0),
    help="Number of subdirectory levels to descend into",
)
@click.option("--json", "as_json", is_flag=True, help="Output records as JSON lines")
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug)")
@click.pass_context
def main(
    ctx: click.Context,
    args: tuple[str, ...],
    depth: int,
    as_json: bool,
    verbose: int,
) -> None:
    """Search START_DIR for entries named TARGET and show their metadata.

    Positional arguments after TARGET are ignored.
    """
    _setup_logging(verbose)
    context = SearchContext(program_name=_program_name(ctx))

    if len(args) < 2:
        report_error(context, "Missing argument")
        sys.exit(1)
    start_dir, target = args[0], args[1]

    _require_directory(context, start_dir)

    engine = SearchEngine(context, MetadataReporter(context, as_json=as_json))
    result = engine.run(start_dir, target, depth=depth)

    if as_json:
        click.echo(json.dumps({"scanned_entries": result.scanned_entries}))
    else:
        click.echo(f"Scanned entries: {result.scanned_entries}")
