"""Serializable summary of one redaction run (used by --json)."""

from __future__ import annotations

from pydantic import BaseModel, Field, computed_field


class RedactionReport(BaseModel):
    input_path: str
    output_path: str | None = None
    dry_run: bool = False
    in_place: bool = False
    redacted_functions: list[str] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def redacted_count(self) -> int:
        return len(self.redacted_functions)
