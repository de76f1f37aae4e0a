"""Binary codec for the .utracy header and srcloc table."""

from utracy_redact.codec.header import (
    FILE_SIGNATURE,
    FILE_VERSION,
    HEADER_SIZE,
    read_header,
    validate_header,
)
from utracy_redact.codec.srcloc import REDACTED, SourceLocation, decode_srcloc, encode_srcloc

__all__ = [
    "FILE_SIGNATURE",
    "FILE_VERSION",
    "HEADER_SIZE",
    "REDACTED",
    "SourceLocation",
    "decode_srcloc",
    "encode_srcloc",
    "read_header",
    "validate_header",
]
