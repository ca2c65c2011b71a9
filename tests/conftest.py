"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import numpy as np
import pytest


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture
def make_records():
    """Build composite records from nested float lists."""
    from core.types import CompositeRecord

    def _make(rows: list[list[list[float]]]) -> list[CompositeRecord]:
        return [
            CompositeRecord(
                record_id=f"row-{index}",
                representations=tuple(np.asarray(values, dtype=float) for values in row),
            )
            for index, row in enumerate(rows)
        ]

    return _make
