"""Shared fixtures for building .utracy traces."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from helpers import SAMPLE_SRCLOCS, SAMPLE_TAIL, build_trace


@pytest.fixture
def trace_builder() -> Callable[..., bytes]:
    return build_trace


@pytest.fixture
def sample_trace() -> bytes:
    return build_trace(SAMPLE_SRCLOCS, SAMPLE_TAIL)


@pytest.fixture
def sample_trace_file(tmp_path: Path, sample_trace: bytes) -> Path:
    path = tmp_path / "capture.utracy"
    path.write_bytes(sample_trace)
    return path
