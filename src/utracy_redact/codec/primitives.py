"""Fixed-width integer and length-prefixed string codecs.

All integers on the wire are little-endian. Strings are a u32 byte
length followed by exactly that many UTF-8 bytes.
"""

from __future__ import annotations

import struct
from typing import BinaryIO

from utracy_redact.errors import InvalidEncodingError, TraceIOError, TruncatedInputError

U32 = struct.Struct("<I")
U64 = struct.Struct("<Q")


def read_exact(reader: BinaryIO, size: int, what: str) -> bytes:
    """Read exactly size bytes or raise TruncatedInputError.

    Loops over short reads so raw (unbuffered) streams behave the same
    as buffered ones.
    """
    chunks: list[bytes] = []
    remaining = size
    while remaining > 0:
        try:
            chunk = reader.read(remaining)
        except OSError as exc:
            raise TraceIOError(f"reading {what}", exc) from exc
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)

    data = b"".join(chunks)
    if len(data) != size:
        raise TruncatedInputError(what, size, len(data))
    return data


def write_all(writer: BinaryIO, data: bytes, what: str) -> None:
    """Write data to the sink, wrapping OS failures as TraceIOError."""
    try:
        writer.write(data)
    except OSError as exc:
        raise TraceIOError(f"writing {what}", exc) from exc


def read_u32(reader: BinaryIO, what: str) -> int:
    (value,) = U32.unpack(read_exact(reader, U32.size, what))
    return value


def write_u32(writer: BinaryIO, value: int, what: str) -> None:
    write_all(writer, U32.pack(value), what)


def read_lenpfx_string(reader: BinaryIO, what: str) -> str:
    """Read a u32-length-prefixed UTF-8 string."""
    length = read_u32(reader, f"{what} length")
    payload = read_exact(reader, length, f"{what} bytes")
    try:
        return payload.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidEncodingError(what, str(exc)) from exc


def write_lenpfx_string(writer: BinaryIO, value: str, what: str) -> None:
    """Write value as a u32 byte length followed by its UTF-8 bytes."""
    payload = value.encode("utf-8")
    write_u32(writer, len(payload), f"{what} length")
    write_all(writer, payload, f"{what} bytes")
