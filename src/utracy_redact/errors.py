"""Exception hierarchy for trace redaction.

Every failure is fatal to the current run. The CLI catches RedactError
at the top level and turns it into a one-line message and exit code 1.
"""

from __future__ import annotations


class RedactError(Exception):
    """Base class for all errors raised while redacting a trace."""


class BadSignatureError(RedactError):
    """Raised when the header signature is not the .utracy magic."""

    def __init__(self, found: int, expected: int) -> None:
        self.found = found
        self.expected = expected
        super().__init__(
            f"invalid .utracy signature: got 0x{found:016X}, expected 0x{expected:016X}"
        )


class UnsupportedVersionError(RedactError):
    """Raised when the header carries a format version we cannot read."""

    def __init__(self, found: int, expected: int) -> None:
        self.found = found
        self.expected = expected
        super().__init__(
            f"unsupported .utracy version: got {found}, expected {expected}"
        )


class TruncatedInputError(RedactError):
    """Raised when the input ends before a fixed-size region is complete."""

    def __init__(self, what: str, expected: int, got: int) -> None:
        self.what = what
        self.expected = expected
        self.got = got
        super().__init__(
            f"truncated input while reading {what}: expected {expected} bytes, got {got}"
        )


class InvalidEncodingError(RedactError):
    """Raised when a string payload is not valid UTF-8."""

    def __init__(self, what: str, reason: str) -> None:
        self.what = what
        super().__init__(f"{what} is not valid UTF-8: {reason}")


class TraceIOError(RedactError):
    """Raised when the underlying stream or filesystem fails.

    Always chained from the original OSError.
    """

    def __init__(self, action: str, cause: OSError) -> None:
        self.action = action
        super().__init__(f"I/O error {action}: {cause}")


class PathConflictError(RedactError):
    """Raised when the output path resolves to the input path."""


class InputNotFoundError(RedactError):
    """Raised when the input trace does not exist."""

    def __init__(self, path: object) -> None:
        self.path = path
        super().__init__(f"input file not found: {path}")


class ConfigError(RedactError):
    """Raised when utracy-redact.yaml cannot be parsed or validated."""
