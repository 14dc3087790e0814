#!/usr/bin/env python3
"""
Shared pytest fixtures for the test suite.

This module provides common fixtures used across test modules including:
- Facility and user coordinate sets
- Coordinate tables carrying identifier columns
- Configuration patching
"""
from __future__ import annotations

import sys
from pathlib import Path

# Add src directory to Python path for test imports
_project_root = Path(__file__).parent.parent
_src_path = _project_root / 'src'
if str(_src_path) not in sys.path:
    sys.path.insert(0, str(_src_path))

import pytest
import pandas as pd
import numpy as np


# ============================================================
# POINT FIXTURES
# ============================================================

@pytest.fixture
def facility_points() -> list[tuple[float, float]]:
    """Two candidate facilities in Ticino, as (lat, long)."""
    return [
        (46.19616, 8.731278),
        (46.16757, 9.027957),
    ]


@pytest.fixture
def user_points() -> list[tuple[float, float]]:
    """Ten users near the facilities, including repeated locations."""
    return [
        (46.16850, 9.004392),
        (46.17690, 8.822994),
        (46.17690, 8.822994),
        (46.17690, 8.822994),
        (46.17690, 8.822994),
        (46.01372, 8.963890),
        (46.15254, 8.773423),
        (45.92970, 8.921419),
        (45.92970, 8.921419),
        (46.00018, 8.946929),
    ]


@pytest.fixture
def random_points():
    """Factory for reproducible random (lat, long) arrays over the globe."""
    def _make(n: int, seed: int = 42) -> np.ndarray:
        rng = np.random.default_rng(seed)
        lats = rng.uniform(-90.0, 90.0, n)
        longs = rng.uniform(-180.0, 180.0, n)
        return np.column_stack([lats, longs])
    return _make


# ============================================================
# TABLE FIXTURES
# ============================================================

@pytest.fixture
def facility_df(facility_points) -> pd.DataFrame:
    """Facility table with identifier and key columns."""
    lats, longs = zip(*facility_points)
    return pd.DataFrame({
        'lat': lats,
        'long': longs,
        'facility_id': [1, 2],
        'key': [1, 1],
    })


@pytest.fixture
def user_df(user_points) -> pd.DataFrame:
    """User table with key and identifier columns ahead of the coordinates."""
    lats, longs = zip(*user_points)
    n = len(user_points)
    return pd.DataFrame({
        'key': [1] * n,
        'user_id': range(1, n + 1),
        'lat_user': lats,
        'long_user': longs,
    })


# ============================================================
# CONFIGURATION FIXTURES
# ============================================================

@pytest.fixture
def force_parallel(monkeypatch):
    """Make every non-empty matrix take the thread-pool path."""
    from sitecover import config
    monkeypatch.setattr(config, 'PARALLEL_ENABLED', True)
    monkeypatch.setattr(config, 'PARALLEL_MIN_CELLS', 0)
    monkeypatch.setattr(config, 'PARALLEL_MAX_WORKERS', 4)
