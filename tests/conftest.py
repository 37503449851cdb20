"""Shared test fixtures for front-metrics tests.

This module provides common fixtures used across test modules:
- rng: Seeded random number generator
- Reference fronts (in-memory and on disk)
- Solution list builders
"""

from pathlib import Path

import numpy as np
import pytest

from front_metrics import Front, Solution


@pytest.fixture
def rng() -> np.random.Generator:
    """Provide a seeded random number generator for deterministic tests."""
    return np.random.default_rng(42)


@pytest.fixture
def three_point_reference() -> Front:
    """Evenly spaced 2D reference front: (0,1), (0.5,0.5), (1,0)."""
    return Front([[0.0, 1.0], [0.5, 0.5], [1.0, 0.0]])


@pytest.fixture
def zdt1_reference() -> Front:
    """Reference front of ZDT1 (f2 = 1 - sqrt(f1)) sampled at 101 points."""
    f1 = np.linspace(0.0, 1.0, 101)
    return Front(np.column_stack([f1, 1.0 - np.sqrt(f1)]))


@pytest.fixture
def reference_file(tmp_path: Path) -> Path:
    """Front file holding the three-point reference front."""
    path = tmp_path / "reference.pf"
    path.write_text("0.0 1.0\n0.5 0.5\n1.0 0.0\n")
    return path


@pytest.fixture
def as_solutions():
    """Convert rows of objective values into a list of Solutions."""

    def build(rows) -> list[Solution]:
        return [Solution(objectives=np.asarray(row, dtype=np.float64)) for row in rows]

    return build


@pytest.fixture
def tracking_distance():
    """Euclidean distance that records every pair it is called with.

    Returns a tuple of (distance_fn, call_log).
    """
    from front_metrics import euclidean_distance

    call_log: list[tuple] = []

    def distance(a, b) -> float:
        call_log.append((tuple(a), tuple(b)))
        return euclidean_distance(a, b)

    return distance, call_log
