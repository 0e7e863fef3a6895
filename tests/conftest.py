"""Shared test fixtures."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from dirprobe.models.search import SearchContext


@pytest.fixture
def context():
    return SearchContext(program_name="dirprobe")


@pytest.fixture
def sample_tree(tmp_path):
    """Create root/{a.txt, sub/{a.txt, b.txt}}."""
    root = tmp_path / "root"
    sub = root / "sub"
    sub.mkdir(parents=True)
    (root / "a.txt").write_bytes(b"a" * 10)
    (sub / "a.txt").write_bytes(b"a" * 20)
    (sub / "b.txt").write_bytes(b"b" * 30)
    return root


@pytest.fixture
def deny_listing(monkeypatch):
    """Make ``os.scandir`` fail with EACCES for the given directories.

    Works regardless of whether the tests run as root.
    """
    denied: set[str] = set()
    real_scandir = os.scandir

    def fake_scandir(path="."):
        if os.fspath(path) in denied:
            raise PermissionError(13, "Permission denied", os.fspath(path))
        return real_scandir(path)

    monkeypatch.setattr(os, "scandir", fake_scandir)

    def _deny(*paths: Path) -> None:
        denied.update(os.fspath(p) for p in paths)

    return _deny
