"""Builders for .utracy byte streams used across the test suite."""

from __future__ import annotations

import struct


SIGNATURE = 0x6D64796361727475
VERSION = 2
HEADER_SIZE = 1200

Srcloc = tuple[str, str, str, int, int]


def lenpfx(value: str | bytes) -> bytes:
    raw = value.encode("utf-8") if isinstance(value, str) else value
    return struct.pack("<I", len(raw)) + raw


def make_header(signature: int = SIGNATURE, version: int = VERSION) -> bytes:
    """1200-byte header with a recognisable opaque payload after the version."""
    filler = bytes(i % 251 for i in range(HEADER_SIZE - 12))
    return struct.pack("<QI", signature, version) + filler


def encode_record(name: str, function: str, file: str, line: int, color: int) -> bytes:
    return (
        lenpfx(name)
        + lenpfx(function)
        + lenpfx(file)
        + struct.pack("<I", line)
        + struct.pack("<I", color)
    )


def build_trace(
    srclocs: list[Srcloc],
    tail: bytes = b"",
    *,
    signature: int = SIGNATURE,
    version: int = VERSION,
) -> bytes:
    body = b"".join(encode_record(*s) for s in srclocs)
    return make_header(signature, version) + struct.pack("<I", len(srclocs)) + body + tail


SAMPLE_SRCLOCS: list[Srcloc] = [
    ("Compute", "compute", "/src/app.cpp", 42, 0xFF00FF),
    ("LoadKey", "load_secret_key", "/src/app.cpp", 108, 0x00FF00),
    ("Helper", "helper", "/src/code_secret/helper.cpp", 7, 0),
]

SAMPLE_TAIL = b"\x00\x01EVENTS" + bytes(range(256)) * 4


