"""Single-pass redaction pipeline: header, srcloc table, then tail.

The input is read strictly forward. Only one srcloc record is held in
memory at a time and the tail (event stream, symbols, etc.) is copied
through a bounded buffer without being interpreted.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import BinaryIO

from utracy_redact.codec.header import read_header
from utracy_redact.codec.primitives import U32, read_exact, write_all
from utracy_redact.codec.srcloc import decode_srcloc, encode_srcloc
from utracy_redact.errors import TraceIOError
from utracy_redact.redaction.policy import RedactionPolicy
from utracy_redact.storage.output import flush_output, open_input, open_output

logger = logging.getLogger(__name__)

BUF_SIZE = 8 * 1024 * 1024  # 8 MiB


def redact_table(
    reader: BinaryIO,
    writer: BinaryIO | None,
    policy: RedactionPolicy,
) -> list[str]:
    """Rewrite the srcloc table, returning original names of redacted functions.

    Every record is visited even after a match. When writer is None the
    table is decoded and evaluated but nothing is written.
    """
    count_bytes = read_exact(reader, U32.size, "srcloc_count")
    (srcloc_count,) = U32.unpack(count_bytes)
    logger.debug("srcloc table has %d records", srcloc_count)

    if writer is not None:
        write_all(writer, count_bytes, "srcloc_count")

    redacted_fns: list[str] = []
    for index in range(srcloc_count):
        srcloc = decode_srcloc(reader)
        if policy.matches(srcloc):
            logger.debug("Redacting srcloc #%d (%s)", index, srcloc.function)
            redacted_fns.append(srcloc.function)
            srcloc = srcloc.redacted()
        if writer is not None:
            encode_srcloc(writer, srcloc)

    return redacted_fns


def copy_tail(reader: BinaryIO, writer: BinaryIO, buffer_size: int = BUF_SIZE) -> int:
    """Copy everything left in reader to writer through one reusable buffer.

    Returns the number of bytes copied.
    """
    buf = bytearray(buffer_size)
    view = memoryview(buf)
    copied = 0
    try:
        while True:
            n = reader.readinto(buf)
            if not n:
                break
            writer.write(view[:n])
            copied += n
    except OSError as exc:
        raise TraceIOError("copying event stream", exc) from exc
    logger.debug("Copied %d tail bytes", copied)
    return copied


def _redact_after_header(
    reader: BinaryIO,
    sink: BinaryIO | None,
    header: bytes,
    policy: RedactionPolicy,
    buffer_size: int,
) -> list[str]:
    if sink is not None:
        write_all(sink, header, "header")

    redacted_fns = redact_table(reader, sink, policy)

    if sink is not None:
        copy_tail(reader, sink, buffer_size)

    return redacted_fns


def redact_stream(
    reader: BinaryIO,
    writer: BinaryIO | None,
    *,
    dry_run: bool,
    file_markers: Iterable[str],
    fn_markers: Iterable[str],
    buffer_size: int = BUF_SIZE,
) -> list[str]:
    """Redact secret srclocs from a .utracy stream.

    Args:
        reader: Binary input positioned at the start of the file.
        writer: Binary output sink, or None for no output. Ignored
            entirely in dry-run mode.
        dry_run: Decode header and table only. Nothing is written and
            the tail is never read.
        file_markers: Substrings matched against srcloc file paths.
        fn_markers: Substrings matched against srcloc function names.
        buffer_size: Chunk size used when copying the tail.

    Returns:
        Original function names of every redacted srcloc, in table order.

    Raises:
        RedactError: On the first decode, validation or I/O failure.
    """
    sink = None if dry_run else writer
    policy = RedactionPolicy.from_markers(file_markers, fn_markers)

    header = read_header(reader)
    return _redact_after_header(reader, sink, header, policy, buffer_size)


def redact_file(
    input_path: Path,
    output_path: Path | None,
    *,
    dry_run: bool,
    file_markers: Iterable[str],
    fn_markers: Iterable[str],
    buffer_size: int = BUF_SIZE,
) -> list[str]:
    """Run redact_stream from one file on disk to another.

    No output file is created in dry-run mode. Otherwise output_path is
    required, is only created once the header has been validated, and is
    flushed before returning.
    """
    if dry_run:
        with open_input(input_path, buffer_size) as reader:
            return redact_stream(
                reader,
                None,
                dry_run=True,
                file_markers=file_markers,
                fn_markers=fn_markers,
                buffer_size=buffer_size,
            )

    if output_path is None:
        raise ValueError("output_path is required unless dry_run is set")

    policy = RedactionPolicy.from_markers(file_markers, fn_markers)
    with open_input(input_path, buffer_size) as reader:
        header = read_header(reader)
        with open_output(output_path, buffer_size) as writer:
            redacted = _redact_after_header(reader, writer, header, policy, buffer_size)
            flush_output(writer)
    return redacted
