"""utracy-redact: strip secret source locations from .utracy traces."""

__version__ = "0.1.0"
