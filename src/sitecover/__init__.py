"""
Distance and coverage kernel for facility-location analysis.

This package computes great-circle distances between a set of users and a
set of candidate facilities, and turns them into the binary coverage matrix
that maximum-coverage models take as input.

Example usage:
    from sitecover import build_distance_matrix, build_coverage_matrix

    facilities = [(46.19616, 8.731278), (46.16757, 9.027957)]
    users = [(46.16850, 9.004392), (46.17690, 8.822994)]

    # Meters from each user (rows) to each facility (columns)
    dist = build_distance_matrix(facilities, users)

    # 1 where a user is within 10 km of a facility
    covered = build_coverage_matrix(facilities, users, 10_000, precomputed_distances=dist)
"""

from sitecover.core.points import InvalidShapeError, as_point_array, points_from_frame
from sitecover.core.distance import (
    degrees_to_radians,
    spherical_distance,
    build_distance_matrix,
)
from sitecover.core.coverage import build_coverage_matrix

__version__ = "0.1.0"

__all__ = [
    # Points
    "InvalidShapeError",
    "as_point_array",
    "points_from_frame",
    # Distance
    "degrees_to_radians",
    "spherical_distance",
    "build_distance_matrix",
    # Coverage
    "build_coverage_matrix",
]
