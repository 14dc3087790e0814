"""
Distance calculation utilities.

Provides great-circle (haversine) distance between two coordinates and the
dense user-by-facility distance matrix built from it. The Earth is treated
as a sphere of radius ``config.EARTH_RADIUS_KM``; all distances are meters.
"""

from __future__ import annotations

import logging
import math
import multiprocessing
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Any, Optional

import numpy as np

from sitecover import config
from sitecover.core.points import as_point_array


logger = logging.getLogger(__name__)


def degrees_to_radians(degrees: float) -> float:
    """Convert an angle from degrees to radians (``deg * pi / 180``)."""
    return degrees * math.pi / 180


def spherical_distance(
    lat1: float,
    long1: float,
    lat2: float,
    long2: float,
) -> float:
    """
    Calculate great-circle distance between two points using the Haversine formula.

    Parameters
    ----------
    lat1 : float
        Latitude of the first point in degrees.
    long1 : float
        Longitude of the first point in degrees.
    lat2 : float
        Latitude of the second point in degrees.
    long2 : float
        Longitude of the second point in degrees.

    Returns
    -------
    float
        Distance between the two points in meters.

    Notes
    -----
    Coordinates outside [-90, 90] / [-180, 180] are not rejected; the
    formula is evaluated as given.

    Examples
    --------
    >>> dist = spherical_distance(46.19616, 8.731278, 46.16850, 9.004392)
    >>> print(f"{dist / 1000:.1f} km")
    21.3 km
    """
    # Same kernel as build_distance_matrix so scalar and matrix values agree bit for bit
    user = np.array([[lat1, long1]], dtype=np.float64)
    facility = np.array([[lat2, long2]], dtype=np.float64)

    return float(_haversine_block(user, facility)[0, 0])


def _haversine_block(user: np.ndarray, facility: np.ndarray) -> np.ndarray:
    """Vectorized spherical_distance for every (user, facility) pair."""
    lat1 = degrees_to_radians(user[:, 0])[:, np.newaxis]  # (n_user, 1)
    long1 = degrees_to_radians(user[:, 1])[:, np.newaxis]  # (n_user, 1)
    lat2 = degrees_to_radians(facility[:, 0])[np.newaxis, :]  # (1, n_facility)
    long2 = degrees_to_radians(facility[:, 1])[np.newaxis, :]  # (1, n_facility)

    a = np.sin((lat2 - lat1) / 2) ** 2 + np.cos(lat1) * np.cos(lat2) * np.sin((long2 - long1) / 2) ** 2
    # Rounding can push a just outside [0, 1] near coincident or antipodal points
    np.clip(a, 0.0, 1.0, out=a)

    d = 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a)) * config.EARTH_RADIUS_KM

    return d * config.METERS_PER_KM


def _fill_rows(
    out: np.ndarray,
    user: np.ndarray,
    facility: np.ndarray,
    start: int,
    stop: int,
) -> int:
    """Write distances for user rows [start, stop) into ``out``."""
    out[start:stop] = _haversine_block(user[start:stop], facility)
    return stop - start


def _resolve_workers(n_rows: int, n_cells: int, n_workers: Optional[int]) -> int:
    """Pick the number of row blocks to compute concurrently."""
    if n_workers is None:
        if not config.PARALLEL_ENABLED or n_cells < config.PARALLEL_MIN_CELLS:
            return 1
        n_workers = config.PARALLEL_MAX_WORKERS or multiprocessing.cpu_count()

    if n_workers < 1:
        raise ValueError(f"n_workers must be >= 1: {n_workers}")

    return min(n_workers, max(n_rows, 1))


def build_distance_matrix(
    facility_points: Any,
    user_points: Any,
    n_workers: Optional[int] = None,
) -> np.ndarray:
    """
    Compute the pairwise distance matrix between users and facilities.

    Parameters
    ----------
    facility_points : sequence of (lat, long), np.ndarray or pd.DataFrame
        Facility coordinates in degrees. Order defines the column index.
    user_points : sequence of (lat, long), np.ndarray or pd.DataFrame
        User coordinates in degrees. Order defines the row index.
    n_workers : int, optional
        Number of threads to split user rows across. ``None`` uses the
        configured parallel settings; ``1`` forces serial computation.

    Returns
    -------
    np.ndarray
        Distance matrix of shape (len(user_points), len(facility_points)) in
        meters. Either set being empty gives a matrix with a zero dimension.

    Raises
    ------
    InvalidShapeError
        If either point collection is not a set of (lat, long) pairs.

    Notes
    -----
    Memory complexity is O(n_user * n_facility); 10,000 x 10,000 points
    needs ~800 MB for the result alone.

    Examples
    --------
    >>> facility = [(46.19616, 8.731278), (46.16757, 9.027957)]
    >>> user = [(46.16850, 9.004392)] * 3
    >>> build_distance_matrix(facility, user).shape
    (3, 2)
    """
    facility = as_point_array(facility_points, name="facility_points")
    user = as_point_array(user_points, name="user_points")

    n_user = len(user)
    n_facility = len(facility)
    out = np.empty((n_user, n_facility), dtype=np.float64)

    if out.size == 0:
        return out

    workers = _resolve_workers(n_user, out.size, n_workers)
    logger.debug(
        "Building %d x %d distance matrix with %d worker(s)",
        n_user, n_facility, workers,
    )

    if workers == 1:
        _fill_rows(out, user, facility, 0, n_user)
        return out

    # Disjoint contiguous row blocks; each worker writes only its own slice
    bounds = np.linspace(0, n_user, workers + 1).astype(int)
    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = [
            executor.submit(_fill_rows, out, user, facility, start, stop)
            for start, stop in zip(bounds[:-1], bounds[1:])
            if stop > start
        ]
        for future in as_completed(futures):
            future.result()

    return out
