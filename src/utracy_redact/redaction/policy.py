"""Marker-based secrecy policy for source locations.

A record is secret when any file marker is a substring of its file
path OR any function marker is a substring of its function name. Both
comparisons are case-insensitive. The record name is never consulted.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from utracy_redact.codec.srcloc import SourceLocation

DEFAULT_FILE_MARKERS: tuple[str, ...] = ("code_secret",)
DEFAULT_FN_MARKERS: tuple[str, ...] = ("secret",)

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def ascii_lower(value: str) -> str:
    """Lowercase ASCII letters only; other characters pass through."""
    return value.translate(_ASCII_LOWER)


def is_secret(
    file_lower: str,
    fn_lower: str,
    file_markers: Iterable[str],
    fn_markers: Iterable[str],
) -> bool:
    """Pure predicate over already-lowercased fields and markers."""
    return any(m in file_lower for m in file_markers) or any(
        m in fn_lower for m in fn_markers
    )


@dataclass(frozen=True)
class RedactionPolicy:
    """Two ordered marker lists, stored lowercased."""

    file_markers: tuple[str, ...] = ()
    fn_markers: tuple[str, ...] = ()

    @classmethod
    def from_markers(
        cls,
        file_markers: Iterable[str],
        fn_markers: Iterable[str],
    ) -> RedactionPolicy:
        return cls(
            file_markers=tuple(ascii_lower(m) for m in file_markers),
            fn_markers=tuple(ascii_lower(m) for m in fn_markers),
        )

    def matches(self, srcloc: SourceLocation) -> bool:
        return is_secret(
            ascii_lower(srcloc.file),
            ascii_lower(srcloc.function),
            self.file_markers,
            self.fn_markers,
        )
