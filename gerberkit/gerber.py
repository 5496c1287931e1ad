"""A parsed Gerber image: levels, apertures and units."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from gerberkit.bound_box import BoundBox

_VERY_LARGE = 1e5
_VERY_LITTLE = -1e5


class Unit(Enum):
    INCHES = 0
    MILLIMETERS = 1


def to_mm(number: float, unit: Unit) -> float:
    """Convert ``number`` given in ``unit`` to millimetres."""
    if unit is Unit.INCHES:
        return number * 25.4
    return number


@dataclass
class Gerber:
    """The whole image as a list of levels plus an aperture table."""

    negative: bool = False
    unit: Unit = Unit.INCHES
    levels: list[Any] = field(default_factory=list)
    name: str = ""
    apertures: dict[int, Any] = field(default_factory=dict)

    def bounding_box(self) -> BoundBox:
        """Return the box covering every level, repeats included."""
        if not self.levels:
            return BoundBox(0.0, 0.0, 0.0, 0.0)

        box = BoundBox(_VERY_LARGE, _VERY_LITTLE, _VERY_LITTLE, _VERY_LARGE)
        for level in self.levels:
            box.update(level.bound_box.left, level.right(), level.top(), level.bound_box.bottom)
        return box