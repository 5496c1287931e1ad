import pytest

from gerberkit.apertures import CircleAperture
from gerberkit.bound_box import BoundBox
from gerberkit.commands import Command, Exposure, Interpolation
from gerberkit.gerber import Unit
from gerberkit.gerber_level import GerberLevel
from gerberkit.plotter import Plotter


def _kinds(level):
    return [command.command for command in level.render_commands]


def _plotter(unit=Unit.MILLIMETERS):
    level = GerberLevel(None, unit)
    return level, Plotter(level, None)


def test_flash_adds_command_and_covers_aperture():
    level, plotter = _plotter()
    plotter.aperture_select(CircleAperture(10, 1.0), 1)
    plotter.x, plotter.y = 2.0, 3.0
    plotter.exposure = Exposure.FLASH
    plotter.do(1)

    assert _kinds(level) == [Command.APERTURE_SELECT, Command.FLASH]
    flash = level.render_commands[-1]
    assert (flash.x, flash.y) == (2.0, 3.0)
    assert level.bound_box == BoundBox(2.0 - 0.5, 2.0 + 0.5, 3.0 + 0.5, 3.0 - 0.5)
    assert plotter.exposure is Exposure.OFF


def test_line_then_move_emits_stroke():
    level, plotter = _plotter()
    plotter.aperture_select(CircleAperture(10, 0.2), 1)
    plotter.exposure = Exposure.ON
    plotter.x = 1.0
    plotter.do(1)
    plotter.exposure = Exposure.OFF
    plotter.do(2)

    assert _kinds(level) == [
        Command.APERTURE_SELECT,
        Command.BEGIN_LINE,
        Command.LINE,
        Command.STROKE,
    ]
    begin, segment, end = level.render_commands[1:]
    assert (begin.x, begin.y) == (0.0, 0.0)
    assert (segment.x, segment.y) == (1.0, 0.0)
    assert (end.end_x, end.end_y) == (1.0, 0.0)


def test_repeated_point_adds_no_line():
    level, plotter = _plotter()
    plotter.exposure = Exposure.ON
    plotter.x = 1.0
    plotter.do(1)
    plotter.do(2)
    assert _kinds(level).count(Command.LINE) == 1


def test_inches_are_converted_to_millimetres():
    level, plotter = _plotter(Unit.INCHES)
    plotter.exposure = Exposure.ON
    plotter.x = 1.0
    plotter.do(1)
    assert level.render_commands[-1].x == pytest.approx(25.4)


def test_linear_10x_scales_coordinates():
    level, plotter = _plotter()
    plotter.interpolation = Interpolation.LINEAR_10X
    plotter.exposure = Exposure.ON
    plotter.x = 1.0
    plotter.do(1)
    assert level.render_commands[-1].x == pytest.approx(10.0)


def test_open_outline_is_closed_and_filled():
    level, plotter = _plotter()
    plotter.outline_begin(1)
    plotter.exposure = Exposure.ON
    plotter.x, plotter.y = 1.0, 0.0
    plotter.do(2)
    plotter.x, plotter.y = 1.0, 1.0
    plotter.do(3)
    plotter.outline_end(4)

    assert _kinds(level) == [
        Command.BEGIN_OUTLINE,
        Command.BEGIN_LINE,
        Command.LINE,
        Command.LINE,
        Command.CLOSE,
        Command.FILL,
        Command.END_OUTLINE,
    ]
    assert level.bound_box == BoundBox(0.0, 1.0, 1.0, 0.0)


def test_closed_outline_needs_no_close():
    level, plotter = _plotter()
    plotter.outline_begin(1)
    plotter.exposure = Exposure.ON
    for x, y in [(1.0, 0.0), (1.0, 1.0), (0.0, 0.0)]:
        plotter.x, plotter.y = x, y
        plotter.do(2)
    plotter.outline_end(3)
    assert Command.CLOSE not in _kinds(level)
    assert _kinds(level)[-2:] == [Command.FILL, Command.END_OUTLINE]


def test_multi_quadrant_arc():
    level, plotter = _plotter()
    plotter.x = 1.0
    plotter.do(1)
    plotter.multi_quadrant = True
    plotter.interpolation = Interpolation.COUNTERCLOCKWISE_CIRCULAR
    plotter.exposure = Exposure.ON
    plotter.x, plotter.y, plotter.i, plotter.j = 0.0, 1.0, -1.0, 0.0
    plotter.do(2)

    arc = level.render_commands[-1]
    assert arc.command is Command.ARC
    assert (arc.x, arc.y) == (0.0, 0.0)
    assert arc.a == pytest.approx(90.0)
    assert (arc.end_x, arc.end_y) == (0.0, 1.0)
    box = level.bound_box
    assert (box.left, box.right, box.top, box.bottom) == pytest.approx((0.0, 1.0, 1.0, 0.0))
    assert (plotter.i, plotter.j) == (0.0, 0.0)


def test_single_quadrant_arc_picks_matching_centre():
    level, plotter = _plotter()
    plotter.x = 1.0
    plotter.do(1)
    plotter.interpolation = Interpolation.COUNTERCLOCKWISE_CIRCULAR
    plotter.exposure = Exposure.ON
    plotter.x, plotter.y, plotter.i, plotter.j = 0.0, 1.0, 1.0, 0.0
    plotter.do(2)

    arc = level.render_commands[-1]
    assert (arc.x, arc.y) == pytest.approx((0.0, 0.0))
    assert arc.a == pytest.approx(90.0)


def test_angle_direction_and_full_circle():
    _, plotter = _plotter()
    plotter.multi_quadrant = True
    plotter.interpolation = Interpolation.COUNTERCLOCKWISE_CIRCULAR
    assert plotter.angle(1.0, 0.0, 0.0, 1.0) == pytest.approx(90.0)
    assert plotter.angle(1.0, 0.0, 1.0, 0.0) == pytest.approx(360.0)
    plotter.interpolation = Interpolation.CLOCKWISE_CIRCULAR
    assert plotter.angle(1.0, 0.0, 0.0, 1.0) == pytest.approx(90.0 - 360.0)


def test_new_plotter_inherits_state():
    level, old = _plotter()
    aperture = CircleAperture(12, 0.5)
    old.aperture_select(aperture, 1)
    old.interpolation = Interpolation.CLOCKWISE_CIRCULAR
    old.x, old.y = 5.0, 6.0
    new = Plotter(GerberLevel(level, Unit.MILLIMETERS), old)
    assert (new.x, new.y) == (5.0, 6.0)
    assert new.interpolation is Interpolation.CLOCKWISE_CIRCULAR
    assert new.current_aperture is aperture