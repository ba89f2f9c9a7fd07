"""Shared test fixtures for all test modules."""

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def write_log(tmp_path: Path) -> Callable[..., Path]:
    """Write CSV text to a temporary job log and return its path."""

    def _write(content: str, name: str = "jobs.csv") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
