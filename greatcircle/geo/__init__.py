"""Great-circle navigation on a spherical Earth.

This package provides an immutable geographic point type and the spherical
trigonometry that relates points, bearings and distances. Everything is
computed on a sphere of radius 6371 km; there is no ellipsoid model.

Components:
    GeoPoint: Latitude/longitude pair in degrees with navigation methods
    spherical: Scalar formulas (bearing, distance, midpoint, destination,
        intersection, cross-track and along-track distance)
    batch: NumPy versions of distance and bearing for many points at once

Typical Usage:
    >>> from greatcircle.geo import GeoPoint, intersection
    >>> from greatcircle.unit import Degree
    >>>
    >>> eiffel = GeoPoint.from_deg(48.858158, 2.294825)
    >>> versailles = GeoPoint.from_deg(48.804766, 2.120339)
    >>>
    >>> leg = eiffel.distance_to(versailles)          # metres
    >>> heading = eiffel.initial_bearing_to(versailles)  # degrees
    >>> checkpoint = eiffel.forward(Degree(45), 2000.0)
    >>>
    >>> fix = intersection(eiffel, heading, checkpoint, 180.0)
    >>> if fix is None:
    ...     print("no unique intersection")
"""

from .batch import distance_matrix, initial_bearing_matrix, path_length
from .geo_point import GeoPoint
from .spherical import (
    along_track_distance,
    cross_track_distance,
    cross_track_location,
    destination,
    distance,
    final_bearing,
    initial_bearing,
    intersection,
    midpoint,
    points_equal,
)

__all__ = [
    "GeoPoint",
    # Scalar formulas
    "points_equal",
    "initial_bearing",
    "final_bearing",
    "distance",
    "midpoint",
    "destination",
    "intersection",
    "cross_track_distance",
    "along_track_distance",
    "cross_track_location",
    # Vectorised helpers
    "distance_matrix",
    "initial_bearing_matrix",
    "path_length",
]
