"""Filesystem side of redaction: opening files, output paths, in-place commits.

In-place edits never write to the input directly. The redacted stream
goes to a temporary file in the same directory, which is flushed,
fsynced and only then moved over the input with os.replace. If
anything fails before commit() the temporary file is removed and the
original is left untouched.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import BinaryIO

from utracy_redact.errors import InputNotFoundError, PathConflictError, TraceIOError

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_SUFFIX = ".redacted.utracy"


def _canonical(path: Path) -> Path:
    """Resolve path, falling back to the path as given when it cannot be resolved."""
    try:
        return path.resolve(strict=True)
    except OSError:
        return path


def open_input(path: Path, buffer_size: int) -> BinaryIO:
    try:
        return open(path, "rb", buffering=buffer_size)
    except FileNotFoundError as exc:
        raise InputNotFoundError(path) from exc
    except OSError as exc:
        raise TraceIOError(f"opening input {path}", exc) from exc


def open_output(path: Path, buffer_size: int) -> BinaryIO:
    try:
        return open(path, "wb", buffering=buffer_size)
    except OSError as exc:
        raise TraceIOError(f"creating output {path}", exc) from exc


def flush_output(writer: BinaryIO) -> None:
    try:
        writer.flush()
    except OSError as exc:
        raise TraceIOError("flushing output", exc) from exc


def resolve_output_path(
    input_path: Path,
    output: Path | None = None,
    *,
    suffix: str = DEFAULT_OUTPUT_SUFFIX,
) -> Path:
    """Pick the destination for a non-in-place run.

    Uses output when given, otherwise <input-dir>/<stem><suffix> next to
    the canonical input.

    Raises:
        PathConflictError: If the chosen path is the input itself.
    """
    canonical_in = _canonical(input_path)

    if output is not None:
        if _canonical(output) == canonical_in:
            raise PathConflictError(
                "--output path is the same as the input file; use --in-place to overwrite"
            )
        return output

    derived = canonical_in.parent / f"{canonical_in.stem}{suffix}"
    if _canonical(derived) == canonical_in:
        raise PathConflictError(
            f"derived output path ({derived}) equals the input path; "
            "use -o to specify a different path or --in-place to overwrite"
        )
    return derived


class AtomicReplace:
    """Scoped temporary file that replaces target only on commit().

    Usage:
        with AtomicReplace(target, buffer_size) as pending:
            write_everything(pending.handle)
            pending.commit()
    """

    def __init__(self, target: Path, buffer_size: int) -> None:
        self.target = target
        self.buffer_size = buffer_size
        self.tmp_path: Path | None = None
        self.handle: BinaryIO | None = None
        self.committed = False

    def __enter__(self) -> AtomicReplace:
        try:
            handle = NamedTemporaryFile(
                mode="wb",
                buffering=self.buffer_size,
                prefix=f"{self.target.stem}.redact_tmp_{os.getpid()}_",
                suffix=self.target.suffix or ".tmp",
                dir=self.target.parent,
                delete=False,
            )
        except OSError as exc:
            raise TraceIOError(f"creating temporary file next to {self.target}", exc) from exc
        self.handle = handle
        self.tmp_path = Path(handle.name)
        logger.debug("Writing in-place output to %s", self.tmp_path)
        return self

    def commit(self) -> None:
        """Flush, fsync and move the temporary file over the target."""
        if self.handle is None or self.tmp_path is None or self.handle.closed:
            raise RuntimeError("commit() called outside an open AtomicReplace block")
        try:
            self.handle.flush()
            os.fsync(self.handle.fileno())
            self.handle.close()
        except OSError as exc:
            raise TraceIOError(f"flushing temporary file {self.tmp_path}", exc) from exc

        try:
            os.replace(self.tmp_path, self.target)
        except OSError as exc:
            raise TraceIOError(
                f"renaming temp file {self.tmp_path} over {self.target}", exc
            ) from exc
        self.committed = True
        logger.debug("Replaced %s", self.target)

    def __exit__(self, exc_type, exc, tb) -> None:
        if self.handle is not None and not self.handle.closed:
            self.handle.close()
        if not self.committed and self.tmp_path is not None:
            self.tmp_path.unlink(missing_ok=True)
