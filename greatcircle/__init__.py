"""Great-circle navigation math for latitude/longitude points.

greatcircle computes navigation quantities on a spherical Earth model without
depending on any platform location framework: initial and final bearing,
distance, midpoint, destination from bearing and distance, the intersection of
two bearing lines, and cross-track deviation from a path.

Package Components:
    Geographic Math (greatcircle.geo):
        • GeoPoint: immutable latitude/longitude value in degrees
        • spherical: the scalar great-circle formulas
        • batch: NumPy distance and bearing matrices

    Measurement Framework (greatcircle.unit):
        • Radian/Degree angle quantities stored in radians
        • Accepted anywhere a bearing is expected

    Support:
        • greatcircle.config: Earth radius and numeric type alias
        • greatcircle.numeric: decimal-place rounding and comparison

Conventions:
    • Latitude in [-90, 90], longitude in [-180, 180], both in degrees
    • Bearings in degrees clockwise from true north, normalised to [0, 360)
    • Distances in metres on a sphere of radius 6371000 m
    • All functions are pure; they are safe to call from any thread

Example:
    >>> from greatcircle import GeoPoint
    >>> eiffel = GeoPoint.from_deg(48.858158, 2.294825)
    >>> versailles = GeoPoint.from_deg(48.804766, 2.120339)
    >>> round(eiffel.distance_to(versailles), 3)
    14084.281
    >>> round(eiffel.final_bearing_to(versailles), 6)
    245.003254
"""

from greatcircle.geo import GeoPoint

__version__ = "0.1.0"

__all__ = ["GeoPoint"]
