"""Tests for output path resolution and atomic in-place replacement."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from utracy_redact.errors import InputNotFoundError, PathConflictError, TraceIOError
from utracy_redact.storage.output import (
    DEFAULT_OUTPUT_SUFFIX,
    AtomicReplace,
    open_input,
    resolve_output_path,
)


class TestResolveOutputPath:
    """Tests for resolve_output_path."""

    def test_derives_sibling_path(self, sample_trace_file: Path):
        derived = resolve_output_path(sample_trace_file)
        assert derived == sample_trace_file.resolve().parent / "capture.redacted.utracy"
        assert DEFAULT_OUTPUT_SUFFIX == ".redacted.utracy"

    def test_custom_suffix(self, sample_trace_file: Path):
        derived = resolve_output_path(sample_trace_file, suffix=".clean.utracy")
        assert derived.name == "capture.clean.utracy"

    def test_explicit_output_returned_as_given(self, sample_trace_file: Path, tmp_path: Path):
        out = tmp_path / "elsewhere" / "x.utracy"
        assert resolve_output_path(sample_trace_file, out) == out

    def test_explicit_output_equal_to_input_conflicts(self, sample_trace_file: Path):
        with pytest.raises(PathConflictError, match="--in-place"):
            resolve_output_path(sample_trace_file, sample_trace_file)

    def test_conflict_detected_through_relative_path(
        self, sample_trace_file: Path, monkeypatch: pytest.MonkeyPatch
    ):
        monkeypatch.chdir(sample_trace_file.parent)
        with pytest.raises(PathConflictError):
            resolve_output_path(sample_trace_file, Path("capture.utracy"))

    def test_derived_path_equal_to_input_conflicts(self, tmp_path: Path):
        """An input already named <stem><suffix> cannot derive a distinct output."""
        existing = tmp_path / "capture.redacted.utracy"
        existing.write_bytes(b"x")
        with pytest.raises(PathConflictError, match="derived output path"):
            resolve_output_path(existing, suffix=".utracy")


class TestOpenInput:
    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(InputNotFoundError, match="input file not found"):
            open_input(tmp_path / "missing.utracy", 4096)


class TestAtomicReplace:
    """Tests for the temp-file-then-rename commit."""

    def test_commit_replaces_target(self, tmp_path: Path):
        target = tmp_path / "trace.utracy"
        target.write_bytes(b"original")

        with AtomicReplace(target, 4096) as pending:
            pending.handle.write(b"rewritten")
            assert pending.tmp_path.parent == tmp_path
            assert pending.tmp_path.name.startswith(f"trace.redact_tmp_{os.getpid()}_")
            pending.commit()

        assert target.read_bytes() == b"rewritten"
        assert sorted(p.name for p in tmp_path.iterdir()) == ["trace.utracy"]

    def test_error_before_commit_leaves_original(self, tmp_path: Path):
        target = tmp_path / "trace.utracy"
        target.write_bytes(b"original")

        with pytest.raises(RuntimeError):
            with AtomicReplace(target, 4096) as pending:
                pending.handle.write(b"partial")
                raise RuntimeError("decode failed")

        assert target.read_bytes() == b"original"
        assert sorted(p.name for p in tmp_path.iterdir()) == ["trace.utracy"]

    def test_exit_without_commit_discards_temp(self, tmp_path: Path):
        target = tmp_path / "trace.utracy"
        target.write_bytes(b"original")

        with AtomicReplace(target, 4096) as pending:
            pending.handle.write(b"unused")
            tmp = pending.tmp_path

        assert not tmp.exists()
        assert target.read_bytes() == b"original"

    def test_failed_rename_keeps_original(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ):
        target = tmp_path / "trace.utracy"
        target.write_bytes(b"original")

        def _fail_replace(src, dst):
            raise OSError("cross-device link")

        monkeypatch.setattr(os, "replace", _fail_replace)
        with pytest.raises(TraceIOError, match="renaming temp file"):
            with AtomicReplace(target, 4096) as pending:
                pending.handle.write(b"rewritten")
                pending.commit()

        assert target.read_bytes() == b"original"
        assert sorted(p.name for p in tmp_path.iterdir()) == ["trace.utracy"]

    def test_missing_directory(self, tmp_path: Path):
        with pytest.raises(TraceIOError, match="creating temporary file"):
            with AtomicReplace(tmp_path / "nope" / "trace.utracy", 4096):
                pass

    def test_commit_outside_block_raises(self, tmp_path: Path):
        target = tmp_path / "trace.utracy"
        target.write_bytes(b"original")
        pending = AtomicReplace(target, 4096)
        with pytest.raises(RuntimeError, match="outside"):
            pending.commit()

        with pending:
            pending.handle.write(b"late")
        with pytest.raises(RuntimeError, match="outside"):
            pending.commit()
        assert target.read_bytes() == b"original"
