"""Vectorised great-circle computations over many points at once.

These helpers evaluate the same formulas as :mod:`greatcircle.geo.spherical`
with NumPy broadcasting, which is what you want when filling distance or
bearing tables for hundreds of points. Element ``[i, j]`` of a matrix relates
``origins[i]`` to ``targets[j]``.

Example:
    >>> from greatcircle.geo import GeoPoint
    >>> depots = [GeoPoint(48.858158, 2.294825), GeoPoint(48.804766, 2.120339)]
    >>> distance_matrix(depots, depots).round(3)
    array([[    0.   , 14084.281],
           [14084.281,     0.   ]])
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from greatcircle.config import BASE_TYPE, EARTH_RADIUS_M

from .geo_point import GeoPoint


def _coordinates(points: Sequence[GeoPoint]) -> tuple[np.ndarray, np.ndarray]:
    """Latitude and longitude arrays in degrees."""
    lat = np.fromiter((p.latitude for p in points), dtype=float, count=len(points))
    lon = np.fromiter((p.longitude for p in points), dtype=float, count=len(points))
    return lat, lon


def _to_radians(degrees: BASE_TYPE) -> BASE_TYPE:
    return degrees * np.pi / 180.0


def _haversine(lat1: np.ndarray, lon1: np.ndarray, lat2: np.ndarray, lon2: np.ndarray) -> np.ndarray:
    phi1 = _to_radians(lat1)
    phi2 = _to_radians(lat2)
    delta_phi = _to_radians(lat2 - lat1)
    delta_lambda = _to_radians(lon2 - lon1)

    h = np.sin(delta_phi / 2.0) ** 2 + np.cos(phi1) * np.cos(phi2) * np.sin(delta_lambda / 2.0) ** 2
    h = np.minimum(h, 1.0)
    return EARTH_RADIUS_M * 2.0 * np.arctan2(np.sqrt(h), np.sqrt(1.0 - h))


def distance_matrix(origins: Sequence[GeoPoint], targets: Sequence[GeoPoint]) -> np.ndarray:
    """Great-circle distances in metres between every origin and every target.

    Args:
        origins: Points indexing the rows.
        targets: Points indexing the columns.

    Returns:
        np.ndarray: Array of shape ``(len(origins), len(targets))``.
    """
    lat1, lon1 = _coordinates(origins)
    lat2, lon2 = _coordinates(targets)
    return _haversine(lat1[:, None], lon1[:, None], lat2[None, :], lon2[None, :])


def initial_bearing_matrix(origins: Sequence[GeoPoint], targets: Sequence[GeoPoint]) -> np.ndarray:
    """Initial bearings in degrees from every origin towards every target.

    Entries where origin and target are equal are 0.0.

    Returns:
        np.ndarray: Array of shape ``(len(origins), len(targets))`` in ``[0, 360)``.
    """
    lat1, lon1 = _coordinates(origins)
    lat2, lon2 = _coordinates(targets)
    lat1, lon1 = lat1[:, None], lon1[:, None]
    lat2, lon2 = lat2[None, :], lon2[None, :]

    phi1 = _to_radians(lat1)
    phi2 = _to_radians(lat2)
    delta_lambda = _to_radians(lon2 - lon1)

    y = np.sin(delta_lambda) * np.cos(phi2)
    x = np.cos(phi1) * np.sin(phi2) - np.sin(phi1) * np.cos(phi2) * np.cos(delta_lambda)
    bearings = np.fmod(np.arctan2(y, x) * 180.0 / np.pi + 360.0, 360.0)

    same = (lat1 == lat2) & (lon1 == lon2)
    return np.where(same, 0.0, bearings)


def path_length(points: Sequence[GeoPoint]) -> float:
    """Total great-circle length in metres of the polyline through ``points``.

    Returns 0.0 for fewer than two points.
    """
    if len(points) < 2:
        return 0.0
    lat, lon = _coordinates(points)
    legs = _haversine(lat[:-1], lon[:-1], lat[1:], lon[1:])
    return float(legs.sum())
