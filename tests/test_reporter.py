"""Tests for the metadata reporter."""

from __future__ import annotations

import json
import os
import time
from pathlib import Path

from dirprobe.core.reporter import MetadataReporter
from dirprobe.models.metadata import FileMetadata


class TestCollect:
    def test_collects_stat_fields(self, sample_tree, context):
        path = sample_tree / "a.txt"
        path.chmod(0o640)
        meta = MetadataReporter(context).collect(path)

        st = os.stat(path)
        assert meta is not None
        assert meta.path == path.resolve()
        assert meta.size == 10
        assert meta.inode == st.st_ino
        assert meta.mtime == st.st_mtime
        assert meta.permissions == "rw-r-----"

    def test_canonical_path_is_absolute_for_relative_input(self, sample_tree, context, monkeypatch):
        monkeypatch.chdir(sample_tree)
        meta = MetadataReporter(context).collect(Path("sub/../a.txt"))
        assert meta is not None
        assert meta.path.is_absolute()
        assert meta.path == (sample_tree / "a.txt").resolve()

    def test_symlink_resolved(self, sample_tree, context):
        link = sample_tree / "link.txt"
        link.symlink_to(sample_tree / "sub" / "b.txt")
        meta = MetadataReporter(context).collect(link)
        assert meta is not None
        assert meta.path == (sample_tree / "sub" / "b.txt").resolve()
        assert meta.size == 30

    def test_stat_failure_reports_error(self, tmp_path, context, capsys):
        missing = tmp_path / "a.txt"
        missing.symlink_to(tmp_path / "gone")
        reporter = MetadataReporter(context)

        assert reporter.collect(missing) is None
        assert reporter.failures == 1
        err = capsys.readouterr().err
        assert err == f"dirprobe: No such file or directory {missing}\n"

    def test_resolve_failure_reports_error(self, sample_tree, context, capsys, monkeypatch):
        class UnresolvablePath(type(Path())):
            def resolve(self, strict=False):
                raise PermissionError(13, "Permission denied", str(self))

        monkeypatch.setattr("dirprobe.core.reporter.Path", UnresolvablePath)
        reporter = MetadataReporter(context)
        path = sample_tree / "a.txt"

        assert reporter.collect(path) is None
        assert capsys.readouterr().err == f"dirprobe: Permission denied {path}\n"


class TestReport:
    def test_text_record(self, sample_tree, context, capsys):
        path = sample_tree / "sub" / "b.txt"
        path.chmod(0o754)
        MetadataReporter(context).report(path)

        st = os.stat(path)
        out = capsys.readouterr().out
        assert out == (
            f"For {path.resolve()}:\n"
            f"\tFile size: 30 bytes\n"
            f"\tLast file modification: {time.ctime(st.st_mtime)}\n"
            f"\tPermissions: rwxr-xr--\n"
            f"\tI-node number: {st.st_ino}\n"
            "\n"
        )

    def test_json_record(self, sample_tree, context, capsys):
        path = sample_tree / "a.txt"
        MetadataReporter(context, as_json=True).report(path)

        record = json.loads(capsys.readouterr().out)
        assert record["path"] == str(path.resolve())
        assert record["size"] == 10
        assert record["inode"] == os.stat(path).st_ino
        assert len(record["permissions"]) == 9

    def test_failure_prints_nothing_to_stdout(self, tmp_path, context, capsys):
        MetadataReporter(context).report(tmp_path / "missing")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "No such file or directory" in captured.err


class TestFileMetadata:
    def test_to_dict(self):
        meta = FileMetadata(path=Path("/x/y"), size=5, mtime=0.0, mode=0o100644, inode=42)
        assert meta.to_dict() == {
            "path": "/x/y",
            "size": 5,
            "modified": time.ctime(0),
            "mtime": 0.0,
            "permissions": "rw-r--r--",
            "inode": 42,
        }
