"""Command-line interface for utracy-redact."""
