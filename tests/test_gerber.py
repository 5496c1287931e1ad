import pytest

from gerberkit.bound_box import BoundBox
from gerberkit.gerber import Gerber, Unit, to_mm


class _Level:
    def __init__(self, box, right=None, top=None):
        self.bound_box = box
        self._right = box.right if right is None else right
        self._top = box.top if top is None else top

    def right(self):
        return self._right

    def top(self):
        return self._top


def test_inches_to_mm():
    assert to_mm(1.0, Unit.INCHES) == pytest.approx(25.4)


def test_millimetres_unchanged():
    assert to_mm(3.5, Unit.MILLIMETERS) == 3.5


def test_defaults():
    gerber = Gerber()
    assert gerber.unit is Unit.INCHES
    assert gerber.negative is False
    assert gerber.levels == []
    assert gerber.apertures == {}


def test_empty_bounding_box():
    assert Gerber().bounding_box() == BoundBox(0.0, 0.0, 0.0, 0.0)


def test_bounding_box_covers_all_levels():
    gerber = Gerber(levels=[
        _Level(BoundBox(0.0, 2.0, 3.0, 1.0)),
        _Level(BoundBox(-1.0, 1.0, 5.0, 2.0)),
    ])
    assert gerber.bounding_box() == BoundBox(-1.0, 2.0, 5.0, 1.0)


def test_bounding_box_uses_repeated_extent():
    gerber = Gerber(levels=[_Level(BoundBox(0.0, 2.0, 3.0, 1.0), right=10.0, top=7.0)])
    assert gerber.bounding_box() == BoundBox(0.0, 10.0, 7.0, 1.0)