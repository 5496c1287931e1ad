import pytest

from gerberkit.bound_box import BoundBox


def test_width_height_center():
    box = BoundBox(1.0, 4.0, 9.0, 2.0)
    assert box.width() == 3.0
    assert box.height() == 7.0
    assert box.center() == (2.5, 5.5)


def test_default_box_is_empty():
    box = BoundBox()
    assert box.width() < 0
    assert box.height() < 0


def test_first_update_adopts_extent():
    box = BoundBox()
    box.update(1.0, 2.0, 3.0, 0.5)
    assert box == BoundBox(1.0, 2.0, 3.0, 0.5)


def test_update_never_shrinks():
    box = BoundBox(0.0, 10.0, 10.0, 0.0)
    box.update(2.0, 5.0, 5.0, 2.0)
    assert box == BoundBox(0.0, 10.0, 10.0, 0.0)


def test_update_box_is_union():
    box = BoundBox(0.0, 1.0, 1.0, 0.0)
    box.update_box(BoundBox(-2.0, 0.5, 4.0, 0.25))
    assert box == BoundBox(-2.0, 1.0, 4.0, 0.0)


def test_scaled_leaves_original_untouched():
    box = BoundBox(1.0, 3.0, 5.0, 2.0)
    bigger = box.scaled(2.0)
    assert box == BoundBox(1.0, 3.0, 5.0, 2.0)
    assert bigger.width() == pytest.approx(2.0 * box.width())
    assert bigger.height() == pytest.approx(2.0 * box.height())


def test_scale_in_place():
    box = BoundBox(1.0, 3.0, 5.0, 2.0)
    box.scale(10.0)
    assert box == BoundBox(10.0, 30.0, 50.0, 20.0)


def test_equality_compares_all_edges():
    assert BoundBox(0.0, 1.0, 1.0, 0.0) != BoundBox(0.0, 1.0, 1.0, -1.0)
    assert BoundBox(0.0, 1.0, 1.0, 0.0) == BoundBox(0.0, 1.0, 1.0, 0.0)