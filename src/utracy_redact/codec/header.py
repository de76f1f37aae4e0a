"""The fixed 1200-byte .utracy file header.

Only the signature and version are interpreted. Everything else in the
block is opaque and written back untouched.
"""

from __future__ import annotations

import logging
from typing import BinaryIO

from utracy_redact.codec.primitives import U32, U64, read_exact
from utracy_redact.errors import BadSignatureError, UnsupportedVersionError

logger = logging.getLogger(__name__)

HEADER_SIZE = 1200
# "utracydm" read as a little-endian u64
FILE_SIGNATURE = 0x6D64796361727475
FILE_VERSION = 2
SIG_OFFSET = 0
VER_OFFSET = 8


def parse_header(header: bytes) -> tuple[int, int]:
    """Return (signature, version) from a raw header block."""
    (signature,) = U64.unpack_from(header, SIG_OFFSET)
    (version,) = U32.unpack_from(header, VER_OFFSET)
    return signature, version


def validate_header(header: bytes) -> None:
    """Reject a header whose signature or version does not match.

    Raises:
        BadSignatureError: If bytes [0, 8) are not FILE_SIGNATURE.
        UnsupportedVersionError: If bytes [8, 12) are not FILE_VERSION.
    """
    signature, version = parse_header(header)
    if signature != FILE_SIGNATURE:
        raise BadSignatureError(signature, FILE_SIGNATURE)
    if version != FILE_VERSION:
        raise UnsupportedVersionError(version, FILE_VERSION)


def read_header(reader: BinaryIO) -> bytes:
    """Consume and validate the header, returning the raw block."""
    header = read_exact(reader, HEADER_SIZE, f"file header (expected {HEADER_SIZE} bytes)")
    validate_header(header)
    logger.debug("Header accepted (version %d)", FILE_VERSION)
    return header
