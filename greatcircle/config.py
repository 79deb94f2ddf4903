"""Shared constants and type definitions for the great-circle package.

Constants:
    EARTH_RADIUS_M: Radius of the spherical Earth model, in metres. Every
        distance in the package is computed on a sphere of this radius; it is
        the mean radius, not an ellipsoid axis.

Type Definitions:
    BASE_TYPE: Numeric types accepted by the vectorised helpers in
        :mod:`greatcircle.geo.batch`: Python scalars and NumPy arrays.

Example:
    >>> from greatcircle.config import EARTH_RADIUS_M
    >>> angular_distance = 14084.280704919687 / EARTH_RADIUS_M
"""

from numpy import ndarray

EARTH_RADIUS_M = 6371000.0

BASE_TYPE = int | float | ndarray
