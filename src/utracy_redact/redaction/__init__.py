"""Redaction policy: deciding which source locations are secret."""

from utracy_redact.redaction.policy import (
    DEFAULT_FILE_MARKERS,
    DEFAULT_FN_MARKERS,
    RedactionPolicy,
    ascii_lower,
    is_secret,
)

__all__ = [
    "DEFAULT_FILE_MARKERS",
    "DEFAULT_FN_MARKERS",
    "RedactionPolicy",
    "ascii_lower",
    "is_secret",
]
