"""Search parameters, shared scan counter and search result dataclasses."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True, slots=True)
class SearchContext:
    """Values every error-reporting call needs.

    ``program_name`` prefixes each line written to the error stream.
    """

    program_name: str


@dataclass(frozen=True, slots=True)
class SearchSpec:
    """Immutable (start directory, target, remaining depth) triple."""

    start_dir: Path
    target: str
    depth: int

    def __post_init__(self) -> None:
        if self.depth < 0:
            raise ValueError(f"depth budget must be non-negative, got {self.depth}")

    @property
    def target_name(self) -> str:
        """Bare final component of the target; only this is compared against entry names."""
        return os.path.basename(self.target)

    def descend(self, path: Path) -> SearchSpec:
        """Return the spec for recursing into *path* one level down."""
        return SearchSpec(start_dir=path, target=self.target, depth=self.depth - 1)


@dataclass(slots=True)
class ScanCounter:
    """Number of directory entries viewed, shared across the whole walk.

    Starts at 1 because the start directory itself counts as viewed.
    """

    value: int = 1

    def increment(self) -> None:
        self.value += 1


@dataclass(slots=True)
class SearchResult:
    """Outcome of a complete search."""

    scanned_entries: int
    matches: list[Path] = field(default_factory=list)
    errors: int = 0
