"""
Coverage matrix construction.

Turns user-to-facility distances into the binary indicator consumed by
facility-location and maximum-coverage models: a user is covered by a
facility when their distance is at most the cutoff.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import numpy as np

from sitecover.core.distance import build_distance_matrix
from sitecover.core.points import InvalidShapeError, as_point_array


logger = logging.getLogger(__name__)


def build_coverage_matrix(
    facility_points: Any,
    user_points: Any,
    cutoff: float,
    precomputed_distances: Optional[np.ndarray] = None,
) -> np.ndarray:
    """
    Build a binary matrix marking users within ``cutoff`` meters of a facility.

    Parameters
    ----------
    facility_points : sequence of (lat, long), np.ndarray or pd.DataFrame
        Facility coordinates in degrees. Order defines the column index.
    user_points : sequence of (lat, long), np.ndarray or pd.DataFrame
        User coordinates in degrees. Order defines the row index.
    cutoff : float
        Distance threshold in meters. The comparison is inclusive; a
        negative cutoff covers nothing.
    precomputed_distances : np.ndarray, optional
        Distance matrix from ``build_distance_matrix(facility_points,
        user_points)``. Pass it when both matrices are needed to skip
        recomputing distances.

    Returns
    -------
    np.ndarray
        Integer matrix of shape (len(user_points), len(facility_points));
        entry (i, j) is 1 if user i is within ``cutoff`` of facility j,
        else 0.

    Raises
    ------
    InvalidShapeError
        If a point collection is malformed, or ``precomputed_distances``
        does not have shape (len(user_points), len(facility_points)).

    Examples
    --------
    >>> facility = [(46.19616, 8.731278)]
    >>> user = [(46.16850, 9.004392)]
    >>> build_coverage_matrix(facility, user, cutoff=25_000)
    array([[1]])

    >>> # Reuse distances already computed for reporting
    >>> dist = build_distance_matrix(facility, user)
    >>> build_coverage_matrix(facility, user, 20_000, precomputed_distances=dist)
    array([[0]])
    """
    if precomputed_distances is None:
        distances = build_distance_matrix(facility_points, user_points)
    else:
        facility = as_point_array(facility_points, name="facility_points")
        user = as_point_array(user_points, name="user_points")
        distances = np.asarray(precomputed_distances, dtype=np.float64)

        expected = (len(user), len(facility))
        if distances.shape != expected:
            raise InvalidShapeError(
                f"precomputed_distances must have shape {expected}, "
                f"got {distances.shape}"
            )

    coverage = (distances <= cutoff).astype(int)

    logger.debug(
        "Coverage at %s m: %d of %d user-facility pairs covered",
        cutoff, int(coverage.sum()), coverage.size,
    )

    return coverage
