"""Angle units accepted wherever a bearing is expected.

Example:
    >>> heading = Degree(90)
    >>> print(heading)
    90.0 °
    >>> round(heading.to(Radian), 4)
    1.5708
"""

from __future__ import annotations

from math import pi

from .unit_float import UnitFloat


class Radian(UnitFloat):
    """Root of the angle family."""

    IS_FAMILY_ROOT = True
    SYMBOL = "rad"


class Degree(Radian):
    """Compass-style angle; stored as radians."""

    SCALE_TO_ROOT = pi / 180
    SYMBOL = "°"


Angle = Radian | Degree
