"""Float-backed quantities.

A :class:`UnitFloat` is constructed from a value in its own scale and stores
the value in the family's root scale, so ``float(Degree(180))`` is ``pi``.
The great-circle functions read an angle with ``bearing.to(Radian)``.

Example:
    >>> round(float(Degree(180)), 6)
    3.141593
    >>> str(Degree(90))
    '90.0 °'
"""

from __future__ import annotations

from typing import ClassVar

from .unit_base import Unit


class UnitFloat(float, Unit):
    """A ``float`` in root scale that only combines with its own family.

    Attributes:
        SCALE_TO_ROOT (ClassVar[float]): Root-scale value of one native unit.
    """

    SCALE_TO_ROOT: ClassVar[float] = 1.0

    def __new__(cls, value: int | float):
        return float.__new__(cls, float(value) * cls.SCALE_TO_ROOT)

    @classmethod
    def _wrap(cls, root_value: float) -> UnitFloat:
        return float.__new__(cls, root_value)

    def to(self, unit_type: type[UnitFloat]) -> float:
        """Value as a plain float in the scale of ``unit_type``.

        Raises:
            TypeError: If ``unit_type`` belongs to another family.
        """
        self._require_family(unit_type)
        return float(self) / unit_type.SCALE_TO_ROOT

    def __add__(self, other: UnitFloat) -> UnitFloat:
        self._require_family(type(other))
        return self._wrap(float(self) + float(other))

    __radd__ = __add__

    def __sub__(self, other: UnitFloat) -> UnitFloat:
        self._require_family(type(other))
        return self._wrap(float(self) - float(other))

    def __neg__(self) -> UnitFloat:
        return self._wrap(-float(self))

    def __eq__(self, other: object) -> bool:
        self._require_family(type(other))
        return float(self) == float(other)

    def __ne__(self, other: object) -> bool:
        return not self == other

    __hash__ = float.__hash__

    def __str__(self) -> str:
        return f"{self.to(type(self))} {self.SYMBOL}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to(type(self))!r})"
