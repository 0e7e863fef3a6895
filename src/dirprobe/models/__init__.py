"""Dirprobe data models."""

from dirprobe.models.metadata import FileMetadata
from dirprobe.models.search import ScanCounter, SearchContext, SearchResult, SearchSpec

__all__ = [
    "FileMetadata",
    "ScanCounter",
    "SearchContext",
    "SearchResult",
    "SearchSpec",
]
