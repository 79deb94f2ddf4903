"""Great-circle navigation on a spherical Earth.

All functions take and return latitude/longitude in degrees, bearings in
degrees clockwise from true north and distances in metres on a sphere of
radius :data:`greatcircle.config.EARTH_RADIUS_M`. Bearing inputs
may also be given as :mod:`greatcircle.unit` angles (``Degree(90)``,
``Radian(pi / 2)``).

Results are normalised: bearings into ``[0, 360)`` and longitudes with
``fmod(lon + 540, 360) - 180``. Coincident inputs (equal points, zero
distance) short-circuit before any formula whose denominator would vanish.

The formulas follow Chris Veness, "Latitude/longitude spherical geodesy
tools", www.movable-type.co.uk/scripts/latlong.html (MIT licence).

Example:
    >>> from greatcircle.geo import GeoPoint
    >>> eiffel = GeoPoint(48.858158, 2.294825)
    >>> versailles = GeoPoint(48.804766, 2.120339)
    >>> round(distance(eiffel, versailles), 3)
    14084.281
    >>> round(initial_bearing(eiffel, versailles), 6)
    245.134603
"""

from __future__ import annotations

import logging
import math
from dataclasses import replace
from typing import TYPE_CHECKING

from greatcircle.config import EARTH_RADIUS_M
from greatcircle.unit import Angle, Radian, UnitFloat

if TYPE_CHECKING:
    from .geo_point import GeoPoint

logger = logging.getLogger(__name__)

_TWO_PI = 2.0 * math.pi


def _to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0


def _to_degrees(radians: float) -> float:
    return radians * 180.0 / math.pi


def _bearing_radians(bearing: float | Angle) -> float:
    """Plain floats are degrees; angle units carry their own scale."""
    if isinstance(bearing, UnitFloat):
        return bearing.to(Radian)
    return _to_radians(float(bearing))


def _wrap_longitude(degrees: float) -> float:
    return math.fmod(degrees + 540.0, 360.0) - 180.0


def _wrap_bearing(degrees: float) -> float:
    return math.fmod(degrees + 360.0, 360.0)


def _clamp(value: float) -> float:
    """Clamp rounding overshoot into the domain of asin/acos."""
    return max(-1.0, min(1.0, value))


def _acos_or_zero(numerator: float, denominator: float) -> float:
    # A rounding overshoot gives 0.0 rather than the arccos of the clamped value.
    if denominator == 0.0:
        return 0.0
    cosine = numerator / denominator
    if not -1.0 <= cosine <= 1.0:
        return 0.0
    return math.acos(cosine)


def points_equal(a: GeoPoint, b: GeoPoint) -> bool:
    """Return ``True`` if both points have exactly the same coordinates.

    Coordinates compare with float ``==``: no tolerance, but ``0.0`` and
    ``-0.0`` are the same coordinate, as in the ``GeoPoint`` dataclass equality.
    """
    return a.latitude == b.latitude and a.longitude == b.longitude


def initial_bearing(origin: GeoPoint, target: GeoPoint) -> float:
    """Bearing in degrees at ``origin`` of the great circle towards ``target``.

    Returns 0.0 when the points are equal.
    """
    if points_equal(origin, target):
        return 0.0

    phi1 = _to_radians(origin.latitude)
    phi2 = _to_radians(target.latitude)
    delta_lambda = _to_radians(target.longitude - origin.longitude)

    y = math.sin(delta_lambda) * math.cos(phi2)
    x = math.cos(phi1) * math.sin(phi2) - math.sin(phi1) * math.cos(phi2) * math.cos(delta_lambda)
    theta = math.atan2(y, x)

    return _wrap_bearing(_to_degrees(theta))


def final_bearing(origin: GeoPoint, target: GeoPoint) -> float:
    """Bearing in degrees on arrival at ``target`` when coming from ``origin``.

    This is the reciprocal of the initial bearing of the reverse leg.
    Returns 0.0 when the points are equal.
    """
    if points_equal(origin, target):
        return 0.0
    return math.fmod(initial_bearing(target, origin) + 180.0, 360.0)


def distance(a: GeoPoint, b: GeoPoint) -> float:
    """Great-circle distance in metres between two points (haversine formula)."""
    if points_equal(a, b):
        return 0.0

    phi1 = _to_radians(a.latitude)
    phi2 = _to_radians(b.latitude)
    delta_phi = _to_radians(b.latitude - a.latitude)
    delta_lambda = _to_radians(b.longitude - a.longitude)

    h = (
        math.sin(delta_phi / 2.0) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(delta_lambda / 2.0) ** 2
    )
    h = min(h, 1.0)
    c = 2.0 * math.atan2(math.sqrt(h), math.sqrt(1.0 - h))

    return EARTH_RADIUS_M * c


def midpoint(a: GeoPoint, b: GeoPoint) -> GeoPoint:
    """Point half-way along the great-circle path between ``a`` and ``b``.

    Returns ``a`` itself when the points are equal.
    """
    if points_equal(a, b):
        return a

    phi1 = _to_radians(a.latitude)
    lambda1 = _to_radians(a.longitude)
    phi2 = _to_radians(b.latitude)
    delta_lambda = _to_radians(b.longitude - a.longitude)

    bx = math.cos(phi2) * math.cos(delta_lambda)
    by = math.cos(phi2) * math.sin(delta_lambda)

    phi_m = math.atan2(
        math.sin(phi1) + math.sin(phi2),
        math.sqrt((math.cos(phi1) + bx) ** 2 + by**2),
    )
    lambda_m = lambda1 + math.atan2(by, math.cos(phi1) + bx)

    return replace(
        a,
        latitude=_to_degrees(phi_m),
        longitude=_wrap_longitude(_to_degrees(lambda_m)),
    )


def destination(origin: GeoPoint, bearing: float | Angle, distance: float) -> GeoPoint:
    """Point reached by travelling ``distance`` from ``origin`` along ``bearing``.

    A negative distance travels backwards along the same great circle.
    Returns ``origin`` unchanged when the distance is zero.

    Args:
        origin: Starting point.
        bearing: Initial bearing, degrees or an angle unit.
        distance: Distance to travel in metres.

    Returns:
        GeoPoint: The destination point.
    """
    meters = float(distance)
    if meters == 0.0:
        return origin

    delta = meters / EARTH_RADIUS_M
    theta = _bearing_radians(bearing)
    phi1 = _to_radians(origin.latitude)
    lambda1 = _to_radians(origin.longitude)

    phi2 = math.asin(
        _clamp(math.sin(phi1) * math.cos(delta) + math.cos(phi1) * math.sin(delta) * math.cos(theta))
    )
    lambda2 = lambda1 + math.atan2(
        math.sin(theta) * math.sin(delta) * math.cos(phi1),
        math.cos(delta) - math.sin(phi1) * math.sin(phi2),
    )

    return replace(
        origin,
        latitude=_to_degrees(phi2),
        longitude=_wrap_longitude(_to_degrees(lambda2)),
    )


def intersection(
    first: GeoPoint,
    first_bearing: float | Angle,
    second: GeoPoint,
    second_bearing: float | Angle,
) -> GeoPoint | None:
    """Intersection of two great-circle paths given by a point and a bearing.

    Travelling from ``first`` along ``first_bearing`` and from ``second`` along
    ``second_bearing``, return the point where the two paths meet.

    Returns ``None`` when the intersection is undefined:

    - the two start points coincide;
    - the two great circles coincide (infinitely many intersections);
    - the bearings diverge (no intersection ahead of both points).

    Args:
        first: Start of the first path.
        first_bearing: Bearing of the first path, degrees or an angle unit.
        second: Start of the second path.
        second_bearing: Bearing of the second path, degrees or an angle unit.

    Returns:
        GeoPoint | None: The intersection point, or ``None``.
    """
    phi1 = _to_radians(first.latitude)
    lambda1 = _to_radians(first.longitude)
    phi2 = _to_radians(second.latitude)
    lambda2 = _to_radians(second.longitude)
    theta13 = _bearing_radians(first_bearing)
    theta23 = _bearing_radians(second_bearing)
    delta_phi = phi2 - phi1
    delta_lambda = lambda2 - lambda1

    delta12 = 2.0 * math.asin(
        min(
            1.0,
            math.sqrt(
                math.sin(delta_phi / 2.0) ** 2
                + math.cos(phi1) * math.cos(phi2) * math.sin(delta_lambda / 2.0) ** 2
            ),
        )
    )
    if delta12 == 0.0:
        logger.debug("No intersection: %s and %s coincide", first, second)
        return None

    theta_a = _acos_or_zero(
        math.sin(phi2) - math.sin(phi1) * math.cos(delta12),
        math.sin(delta12) * math.cos(phi1),
    )
    theta_b = _acos_or_zero(
        math.sin(phi1) - math.sin(phi2) * math.cos(delta12),
        math.sin(delta12) * math.cos(phi2),
    )

    if math.sin(delta_lambda) > 0.0:
        theta12 = theta_a
        theta21 = _TWO_PI - theta_b
    else:
        theta12 = _TWO_PI - theta_a
        theta21 = theta_b

    alpha1 = (theta13 - theta12 + math.pi) % _TWO_PI - math.pi
    alpha2 = (theta21 - theta23 + math.pi) % _TWO_PI - math.pi
    sin_alpha1 = math.sin(alpha1)
    sin_alpha2 = math.sin(alpha2)

    if sin_alpha1 == 0.0 and sin_alpha2 == 0.0:
        logger.debug("No intersection: paths from %s and %s lie on one great circle", first, second)
        return None

    if sin_alpha1 * sin_alpha2 < 0.0:
        logger.debug("No intersection: paths from %s and %s diverge", first, second)
        return None

    alpha3 = math.acos(
        _clamp(-math.cos(alpha1) * math.cos(alpha2) + sin_alpha1 * sin_alpha2 * math.cos(delta12))
    )
    delta13 = math.atan2(
        math.sin(delta12) * sin_alpha1 * sin_alpha2,
        math.cos(alpha2) + math.cos(alpha1) * math.cos(alpha3),
    )
    phi3 = math.asin(
        _clamp(
            math.sin(phi1) * math.cos(delta13)
            + math.cos(phi1) * math.sin(delta13) * math.cos(theta13)
        )
    )
    delta_lambda13 = math.atan2(
        math.sin(theta13) * math.sin(delta13) * math.cos(phi1),
        math.cos(delta13) - math.sin(phi1) * math.sin(phi3),
    )
    lambda3 = lambda1 + delta_lambda13

    return replace(
        first,
        latitude=_to_degrees(phi3),
        longitude=_wrap_longitude(_to_degrees(lambda3)),
    )


def _track_angles(point: GeoPoint, path_start: GeoPoint, path_end: GeoPoint) -> tuple[float, float]:
    """Angular distance start->point and the angle between start->point and the path."""
    delta13 = distance(path_start, point) / EARTH_RADIUS_M
    theta13 = _to_radians(initial_bearing(path_start, point))
    theta12 = _to_radians(initial_bearing(path_start, path_end))
    return delta13, theta13 - theta12


def cross_track_distance(point: GeoPoint, path_start: GeoPoint, path_end: GeoPoint) -> float:
    """Signed distance in metres from ``point`` to the path ``path_start`` -> ``path_end``.

    Positive when the point lies to the right of the direction of travel,
    negative when it lies to the left.
    """
    delta13, delta_theta = _track_angles(point, path_start, path_end)
    return math.asin(math.sin(delta13) * math.sin(delta_theta)) * EARTH_RADIUS_M


def along_track_distance(point: GeoPoint, path_start: GeoPoint, path_end: GeoPoint) -> float:
    """Signed distance in metres from ``path_start`` to the foot of the perpendicular from ``point``.

    Negative when the foot lies behind ``path_start`` relative to ``path_end``.
    """
    delta13, delta_theta = _track_angles(point, path_start, path_end)
    # Napier: tan(along) = tan(delta13) * cos(delta_theta) in the right triangle
    along = math.atan2(math.sin(delta13) * math.cos(delta_theta), math.cos(delta13))
    return along * EARTH_RADIUS_M


def cross_track_location(point: GeoPoint, path_start: GeoPoint, path_end: GeoPoint) -> GeoPoint:
    """Closest point to ``point`` on the path from ``path_start`` towards ``path_end``.

    The point is reached from ``path_start`` along the path bearing after the
    distance ``delta13 * cos(asin(sin(delta13) * sin(theta13 - theta12))) * R``.
    That distance is never negative, so a point behind ``path_start`` maps
    ahead of it. Use :func:`along_track_distance` for a signed distance.
    """
    delta13, delta_theta = _track_angles(point, path_start, path_end)
    cross = math.asin(_clamp(math.sin(delta13) * math.sin(delta_theta)))
    along = delta13 * math.cos(cross) * EARTH_RADIUS_M
    return destination(path_start, initial_bearing(path_start, path_end), along)
