"""
Point set coercion.

Normalizes caller-supplied coordinate collections into ``(n, 2)`` float
arrays of ``(latitude, longitude)`` pairs in degrees. Row order is kept, and
becomes the row/column index of every matrix built from the points.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import numpy as np
import pandas as pd

from sitecover import config


logger = logging.getLogger(__name__)


class InvalidShapeError(ValueError):
    """A point collection or precomputed matrix has the wrong structure."""


def as_point_array(points: Any, name: str = "points") -> np.ndarray:
    """
    Convert a point collection into a float array of shape (n, 2).

    Parameters
    ----------
    points : sequence of (lat, long), np.ndarray or pd.DataFrame
        Ordered coordinates in degrees. A DataFrame must hold exactly the
        two coordinate columns, latitude first.
    name : str, optional
        Argument name used in error messages.

    Returns
    -------
    np.ndarray
        Array of shape (n, 2) with dtype float64. Empty input gives (0, 2).

    Raises
    ------
    InvalidShapeError
        If rows do not hold exactly two numeric values.

    Examples
    --------
    >>> as_point_array([(46.19616, 8.731278), (46.16757, 9.027957)]).shape
    (2, 2)
    """
    if isinstance(points, pd.DataFrame):
        if points.shape[1] != 2:
            raise InvalidShapeError(
                f"{name} must have exactly 2 columns (lat, long), "
                f"got {points.shape[1]}: {list(points.columns)}"
            )
        points = points.to_numpy()

    try:
        arr = np.asarray(points)
    except (TypeError, ValueError) as e:
        raise InvalidShapeError(f"{name} must contain numeric (lat, long) pairs: {e}") from e

    if arr.ndim == 1 and arr.size == 0:
        return np.empty((0, 2), dtype=np.float64)

    # Strings, objects, booleans and complex values are not coordinates, even if castable
    is_real = np.issubdtype(arr.dtype, np.integer) or np.issubdtype(arr.dtype, np.floating)
    if arr.size and not is_real:
        raise InvalidShapeError(
            f"{name} must contain numeric (lat, long) pairs, got dtype {arr.dtype}"
        )

    if arr.ndim != 2 or arr.shape[1] != 2:
        raise InvalidShapeError(
            f"{name} must have shape (n, 2), got {arr.shape}"
        )

    return arr.astype(np.float64, copy=False)


def points_from_frame(
    frame: pd.DataFrame,
    lat_col: Optional[str] = None,
    long_col: Optional[str] = None,
) -> np.ndarray:
    """
    Pull (lat, long) coordinates out of a table that carries extra columns.

    Identifier and key columns are dropped; only position survives. When the
    coordinate columns are absent but the frame has a Point ``geometry``
    column (a GeoDataFrame in EPSG:4326), coordinates are read from it.

    Parameters
    ----------
    frame : pd.DataFrame
        Table of points, one per row.
    lat_col : str, optional
        Latitude column. Defaults to ``config.DEFAULT_LAT_COLUMN``.
    long_col : str, optional
        Longitude column. Defaults to ``config.DEFAULT_LONG_COLUMN``.

    Returns
    -------
    np.ndarray
        Array of shape (len(frame), 2).

    Raises
    ------
    InvalidShapeError
        If neither the coordinate columns nor a geometry column are present.

    Examples
    --------
    >>> facilities = pd.DataFrame({
    ...     'lat': [46.19616], 'long': [8.731278], 'facility_id': [1], 'key': [1],
    ... })
    >>> points_from_frame(facilities)
    array([[46.19616 ,  8.731278]])
    """
    lat_col = lat_col or config.DEFAULT_LAT_COLUMN
    long_col = long_col or config.DEFAULT_LONG_COLUMN

    if lat_col in frame.columns and long_col in frame.columns:
        return as_point_array(frame[[lat_col, long_col]], name=f"frame[{lat_col!r}, {long_col!r}]")

    if "geometry" in frame.columns and hasattr(frame.geometry, "y"):
        logger.debug("Reading %d points from geometry column", len(frame))
        # Point geometry stores (x, y) = (long, lat)
        coords = np.column_stack([frame.geometry.y, frame.geometry.x])
        return as_point_array(coords, name="frame.geometry")

    missing = [c for c in (lat_col, long_col) if c not in frame.columns]
    raise InvalidShapeError(
        f"Coordinate columns not found: {missing}. "
        f"Available columns: {list(frame.columns)}"
    )
