"""Family resolution for typed quantities.

A family is named by its root class: the nearest class in the MRO that sets
``IS_FAMILY_ROOT = True``. ``Degree`` derives from ``Radian``, so both resolve
to ``Radian`` and may be mixed freely. Anything with another root, or no root
at all (a plain ``float``), is rejected with ``TypeError``.
"""

from __future__ import annotations

from typing import ClassVar


class Unit:
    """Mixin giving a quantity type its family root and display symbol."""

    __slots__ = ()

    ROOT: ClassVar[type[Unit]]
    SYMBOL: ClassVar[str] = ""
    IS_FAMILY_ROOT: ClassVar[bool] = False

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls.ROOT = next(
            (base for base in cls.__mro__ if base.__dict__.get("IS_FAMILY_ROOT", False)),
            cls,
        )

    @classmethod
    def _require_family(cls, other_type: type) -> None:
        """Raise ``TypeError`` unless ``other_type`` shares this family root."""
        if getattr(other_type, "ROOT", None) is not cls.ROOT:
            raise TypeError(f"incompatible units: {cls.ROOT.__name__} and {other_type.__name__}")
