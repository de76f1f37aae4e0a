"""Project configuration model for utracy-redact.

Captures utracy-redact.yaml fields with defaults matching the
built-in marker lists, so running without a config file behaves the
same as running with an empty one.
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from utracy_redact.errors import ConfigError
from utracy_redact.pipeline import BUF_SIZE
from utracy_redact.redaction.policy import DEFAULT_FILE_MARKERS, DEFAULT_FN_MARKERS
from utracy_redact.storage.output import DEFAULT_OUTPUT_SUFFIX

CONFIG_FILENAME = "utracy-redact.yaml"


class RedactConfig(BaseModel):
    """Settings loaded from utracy-redact.yaml."""

    model_config = {"extra": "forbid"}

    file_markers: list[str] = Field(default_factory=lambda: list(DEFAULT_FILE_MARKERS))
    fn_markers: list[str] = Field(default_factory=lambda: list(DEFAULT_FN_MARKERS))
    buffer_size: int = Field(default=BUF_SIZE, gt=0)
    output_suffix: str = Field(default=DEFAULT_OUTPUT_SUFFIX, min_length=1)


def find_project_root(start: Path | None = None) -> Path | None:
    """Walk up from start (default: cwd) looking for utracy-redact.yaml.

    Returns:
        The directory containing the config file, or None if there is none.
    """
    current = (start or Path.cwd()).resolve()
    if current.is_file():
        current = current.parent
    for candidate in (current, *current.parents):
        if (candidate / CONFIG_FILENAME).exists():
            return candidate
    return None


def load_config(config_path: Path | None = None) -> RedactConfig:
    """Load RedactConfig from an explicit path or the nearest config file.

    A missing or empty file yields the defaults.

    Raises:
        ConfigError: If the file is not valid YAML or fails validation.
    """
    if config_path is None:
        root = find_project_root()
        if root is None:
            return RedactConfig()
        config_path = root / CONFIG_FILENAME
    elif not config_path.exists():
        raise ConfigError(f"config file not found: {config_path}")

    try:
        raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML in {config_path}: {exc}") from exc
    if raw is None:
        return RedactConfig()

    try:
        return RedactConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(f"invalid config in {config_path}: {exc}") from exc
