"""Search orchestration engine."""

from __future__ import annotations

import logging
from pathlib import Path

from dirprobe.core.errors import report_error
from dirprobe.core.reporter import MetadataReporter
from dirprobe.core.traversal import MatchCallback, search
from dirprobe.models.search import ScanCounter, SearchContext, SearchResult, SearchSpec

log = logging.getLogger(__name__)


class SearchEngine:
    """Runs a depth-bounded search and reports every match."""

    def __init__(self, context: SearchContext, reporter: MetadataReporter | None = None) -> None:
        self.context = context
        self.reporter = reporter or MetadataReporter(context)

    def run(
        self,
        start_dir: Path | str,
        target: str,
        depth: int = 1,
        on_match: MatchCallback | None = None,
    ) -> SearchResult:
        """Search *start_dir* for entries named like *target*.

        Args:
            start_dir: Directory to start from. Must already be known to be a directory.
            target: Filename to look for. Only its final component is compared.
            depth: Number of subdirectory levels to descend into.
            on_match: Optional callback fired after each match is reported.

        Returns:
            The scanned-entry count, matched paths and recoverable error count.
        """
        spec = SearchSpec(start_dir=Path(start_dir), target=target, depth=depth)
        counter = ScanCounter()
        result = SearchResult(scanned_entries=counter.value)
        failures_before = self.reporter.failures

        def _on_match(path: Path) -> None:
            result.matches.append(path)
            self.reporter.report(path)
            if on_match:
                on_match(path)

        def _on_error(message: str, path: Path) -> None:
            result.errors += 1
            report_error(self.context, message, path)

        search(spec, counter, _on_match, _on_error)

        result.scanned_entries = counter.value
        result.errors += self.reporter.failures - failures_before
        log.info(
            "Scanned %d entries under %s: %d match(es), %d error(s)",
            result.scanned_entries,
            spec.start_dir,
            len(result.matches),
            result.errors,
        )
        return result
