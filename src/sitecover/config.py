#!/usr/bin/env python3
"""
Configuration constants for sitecover.

This module centralizes the numeric constants and execution settings used by
the distance and coverage builders. Values here are read at call time, so a
caller (or a test) may patch them on the module before building matrices.

Usage
-----
    from sitecover.config import EARTH_RADIUS_KM, PARALLEL_ENABLED

    # Or import specific sections
    from sitecover.config import (
        # Geodesy
        EARTH_RADIUS_KM,

        # Point tables
        DEFAULT_LAT_COLUMN,
        DEFAULT_LONG_COLUMN,

        # Parallel execution
        PARALLEL_ENABLED,
        PARALLEL_MAX_WORKERS,
        PARALLEL_MIN_CELLS,
    )
"""
from __future__ import annotations


# =============================================================================
# GEODESY
# =============================================================================

# Mean Earth radius in kilometers (spherical model, no ellipsoidal correction)
EARTH_RADIUS_KM = 6371

# Meters per kilometer
METERS_PER_KM = 1000


# =============================================================================
# POINT TABLES
# =============================================================================

# Column names used when pulling coordinates out of a DataFrame
DEFAULT_LAT_COLUMN = 'lat'
DEFAULT_LONG_COLUMN = 'long'


# =============================================================================
# PARALLEL EXECUTION SETTINGS
# =============================================================================

# Enable row-partitioned matrix construction on a thread pool
PARALLEL_ENABLED = True

# Maximum number of parallel workers (None = use CPU count)
PARALLEL_MAX_WORKERS = None

# Matrices smaller than this many cells are always built serially
PARALLEL_MIN_CELLS = 250_000


# =============================================================================
# VALIDATION
# =============================================================================

def validate_config() -> bool:
    """
    Validate configuration settings.

    Returns
    -------
    bool
        True if all validations pass

    Raises
    ------
    ValueError
        If any configuration is invalid
    """
    errors = []

    if EARTH_RADIUS_KM <= 0:
        errors.append(f"EARTH_RADIUS_KM must be positive: {EARTH_RADIUS_KM}")

    if METERS_PER_KM <= 0:
        errors.append(f"METERS_PER_KM must be positive: {METERS_PER_KM}")

    if DEFAULT_LAT_COLUMN == DEFAULT_LONG_COLUMN:
        errors.append(
            f"DEFAULT_LAT_COLUMN and DEFAULT_LONG_COLUMN must differ: {DEFAULT_LAT_COLUMN}"
        )

    if PARALLEL_MAX_WORKERS is not None and PARALLEL_MAX_WORKERS < 1:
        errors.append(f"PARALLEL_MAX_WORKERS must be None or >= 1: {PARALLEL_MAX_WORKERS}")

    if PARALLEL_MIN_CELLS < 0:
        errors.append(f"PARALLEL_MIN_CELLS must be non-negative: {PARALLEL_MIN_CELLS}")

    if errors:
        raise ValueError("Configuration errors:\n" + "\n".join(f"  - {e}" for e in errors))

    return True
