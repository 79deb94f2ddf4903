"""Typed angles for bearing inputs.

The great-circle functions take bearings as plain degree floats or as these
quantities, e.g. ``destination(origin, Radian(pi / 2), 5000.0)``. Degree and
Radian combine with each other; comparing or adding anything else raises
``TypeError``.

Example:
    >>> from greatcircle.unit import Degree, Radian
    >>> round((Degree(30) + Degree(60)).to(Degree), 6)
    90.0
"""

from .unit_angle import Angle, Degree, Radian
from .unit_base import Unit
from .unit_float import UnitFloat

__all__ = [
    "Unit",
    "UnitFloat",
    "Radian",
    "Degree",
    "Angle",
]
