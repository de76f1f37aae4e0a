"""Source-location record codec.

A record on the wire is three length-prefixed strings (name, function,
file) followed by two opaque u32 values (line, color).

Plain dataclass rather than pydantic: one is built per table entry and
dropped immediately after re-encoding.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import BinaryIO

from utracy_redact.codec.primitives import (
    read_lenpfx_string,
    read_u32,
    write_lenpfx_string,
    write_u32,
)

REDACTED = "<redacted>"


@dataclass(frozen=True)
class SourceLocation:
    """One entry of the srcloc table."""

    name: str
    function: str
    file: str
    line: int
    color: int

    def redacted(self) -> SourceLocation:
        """Return a copy with all string fields replaced by REDACTED."""
        return replace(self, name=REDACTED, function=REDACTED, file=REDACTED)

    def wire_size(self) -> int:
        """Encoded size in bytes."""
        return (
            4 + len(self.name.encode("utf-8"))
            + 4 + len(self.function.encode("utf-8"))
            + 4 + len(self.file.encode("utf-8"))
            + 4
            + 4
        )


def decode_srcloc(reader: BinaryIO) -> SourceLocation:
    """Read one record, consuming exactly its wire size."""
    name = read_lenpfx_string(reader, "srcloc.name")
    function = read_lenpfx_string(reader, "srcloc.function")
    file = read_lenpfx_string(reader, "srcloc.file")
    line = read_u32(reader, "srcloc.line")
    color = read_u32(reader, "srcloc.color")
    return SourceLocation(name=name, function=function, file=file, line=line, color=color)


def encode_srcloc(writer: BinaryIO, srcloc: SourceLocation) -> None:
    write_lenpfx_string(writer, srcloc.name, "srcloc.name")
    write_lenpfx_string(writer, srcloc.function, "srcloc.function")
    write_lenpfx_string(writer, srcloc.file, "srcloc.file")
    write_u32(writer, srcloc.line, "srcloc.line")
    write_u32(writer, srcloc.color, "srcloc.color")
