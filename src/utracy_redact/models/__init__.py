"""utracy-redact data models - re-exports all public model classes."""

from utracy_redact.models.config import RedactConfig
from utracy_redact.models.report import RedactionReport

__all__ = [
    "RedactConfig",
    "RedactionReport",
]
