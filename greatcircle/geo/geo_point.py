"""Immutable geographic point with great-circle navigation methods."""

from __future__ import annotations

import math
from dataclasses import dataclass

from greatcircle.unit import Angle

from . import spherical


@dataclass(frozen=True)
class GeoPoint:
    """A latitude/longitude pair in degrees on a spherical Earth.

    Two points are equal when both coordinates are exactly equal; there is no
    tolerance. The navigation methods are thin wrappers over the functions in
    :mod:`greatcircle.geo.spherical` and return plain floats (degrees, metres)
    or new ``GeoPoint`` instances.

    Attributes:
        latitude (float): Latitude in degrees, -90 (south) to +90 (north).
        longitude (float): Longitude in degrees, -180 (west) to +180 (east).

    Example:
        >>> from greatcircle.unit import Degree
        >>> eiffel = GeoPoint.from_deg(48.858158, 2.294825)
        >>> versailles = GeoPoint.from_deg(48.804766, 2.120339)
        >>> round(eiffel.distance_to(versailles))
        14084
        >>> checkpoint = eiffel.forward(Degree(90), 1000.0)
    """

    latitude: float
    longitude: float

    @classmethod
    def from_deg(cls, lat: float, lon: float) -> GeoPoint:
        """Create a GeoPoint from decimal degrees, validating the ranges.

        Args:
            lat (float): Latitude in decimal degrees (-90 to +90).
            lon (float): Longitude in decimal degrees (-180 to +180).

        Returns:
            GeoPoint: New geographic point with the specified coordinates.

        Raises:
            ValueError: If a coordinate is not finite or out of range.
        """
        lat = float(lat)
        lon = float(lon)
        if not (math.isfinite(lat) and -90.0 <= lat <= 90.0):
            raise ValueError(f"latitude must be within [-90, 90], got {lat}")
        if not (math.isfinite(lon) and -180.0 <= lon <= 180.0):
            raise ValueError(f"longitude must be within [-180, 180], got {lon}")
        return cls(lat, lon)

    @classmethod
    def from_rad(cls, lat: float, lon: float) -> GeoPoint:
        """Create a GeoPoint from latitude and longitude in radians."""
        return cls(math.degrees(lat), math.degrees(lon))

    @property
    def radians(self) -> tuple[float, float]:
        """Latitude and longitude in radians."""
        return math.radians(self.latitude), math.radians(self.longitude)

    def is_equal_to(self, other: GeoPoint) -> bool:
        return spherical.points_equal(self, other)

    def initial_bearing_to(self, other: GeoPoint) -> float:
        """Initial bearing in degrees from this point towards ``other``."""
        return spherical.initial_bearing(self, other)

    def final_bearing_to(self, other: GeoPoint) -> float:
        """Bearing in degrees on arrival at ``other`` from this point."""
        return spherical.final_bearing(self, other)

    def distance_to(self, other: GeoPoint) -> float:
        """Great-circle distance in metres to ``other``."""
        return spherical.distance(self, other)

    def midpoint_to(self, other: GeoPoint) -> GeoPoint:
        """Point half-way along the great circle to ``other``."""
        return spherical.midpoint(self, other)

    def forward(self, azimuth: float | Angle, distance: float) -> GeoPoint:
        """Calculate the point reached from here along ``azimuth`` for ``distance``.

        Args:
            azimuth: Bearing from north, degrees or an angle unit.
            distance: Distance to travel in metres.

        Returns:
            GeoPoint: New point; this instance is unchanged.

        Example:
            >>> origin = GeoPoint.from_deg(48.858158, 2.294825)
            >>> origin.forward(0.0, 0.0) is origin
            True
        """
        return spherical.destination(self, azimuth, distance)

    def cross_track_distance_to(self, path_start: GeoPoint, path_end: GeoPoint) -> float:
        """Signed distance in metres from this point to a path (positive = right)."""
        return spherical.cross_track_distance(self, path_start, path_end)

    def along_track_distance_to(self, path_start: GeoPoint, path_end: GeoPoint) -> float:
        return spherical.along_track_distance(self, path_start, path_end)

    def cross_track_location_on(self, path_start: GeoPoint, path_end: GeoPoint) -> GeoPoint:
        """Closest point to this one on the path through ``path_start`` and ``path_end``."""
        return spherical.cross_track_location(self, path_start, path_end)

    @classmethod
    def intersection_of(
        cls,
        first: GeoPoint,
        first_bearing: float | Angle,
        second: GeoPoint,
        second_bearing: float | Angle,
    ) -> GeoPoint | None:
        """Intersection of two paths given by point and bearing, or ``None``.

        See :func:`greatcircle.geo.spherical.intersection` for the cases that
        have no single intersection.
        """
        return spherical.intersection(first, first_bearing, second, second_bearing)
