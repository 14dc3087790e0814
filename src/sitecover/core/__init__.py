"""
Core numeric kernel: point coercion, distance and coverage matrices.
"""

from sitecover.core.points import InvalidShapeError, as_point_array, points_from_frame
from sitecover.core.distance import (
    degrees_to_radians,
    spherical_distance,
    build_distance_matrix,
)
from sitecover.core.coverage import build_coverage_matrix

__all__ = [
    "InvalidShapeError",
    "as_point_array",
    "points_from_frame",
    "degrees_to_radians",
    "spherical_distance",
    "build_distance_matrix",
    "build_coverage_matrix",
]
