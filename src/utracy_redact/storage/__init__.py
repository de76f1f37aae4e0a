"""Storage subpackage: file handles, output paths and atomic in-place writes."""

from utracy_redact.storage.output import (
    DEFAULT_OUTPUT_SUFFIX,
    AtomicReplace,
    flush_output,
    open_input,
    open_output,
    resolve_output_path,
)

__all__ = [
    "DEFAULT_OUTPUT_SUFFIX",
    "AtomicReplace",
    "flush_output",
    "open_input",
    "open_output",
    "resolve_output_path",
]
