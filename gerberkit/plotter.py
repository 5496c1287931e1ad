"""Turns coordinate and mode changes into render commands of a level."""

from __future__ import annotations

import logging
import math
from typing import Any

from gerberkit.commands import (
    Exposure,
    Interpolation,
    aperture_select,
    arc,
    begin_line,
    begin_outline,
    close,
    end_outline,
    fill,
    flash,
    line,
    stroke,
)
from gerberkit.gerber import to_mm

logger = logging.getLogger(__name__)

_ARC_STEPS = 1000

_LINEAR_FACTORS = {
    Interpolation.LINEAR: 1.0,
    Interpolation.LINEAR_10X: 10.0,
    Interpolation.LINEAR_0_1X: 0.1,
    Interpolation.LINEAR_0_01X: 0.01,
}


class Plotter:
    """Tracks the plot head of one level and records what it draws.

    Set ``x``, ``y``, ``i``, ``j``, ``exposure`` and ``interpolation``,
    then call :meth:`do` to carry out the operation.
    """

    def __init__(self, level: Any, old_plotter: Plotter | None = None) -> None:
        self.level = level
        self.x = 0.0
        self.y = 0.0
        self.i = 0.0
        self.j = 0.0
        self.multi_quadrant = False
        self.exposure = Exposure.OFF
        self.interpolation = Interpolation.LINEAR
        self.current_aperture: Any = None

        self._drawing_line = False
        self._drawing_outline = False
        self._pre_x = 0.0
        self._pre_y = 0.0
        self._first_x = 0.0
        self._first_y = 0.0

        if old_plotter is not None:
            self.exposure = old_plotter.exposure
            self.multi_quadrant = old_plotter.multi_quadrant
            self.interpolation = old_plotter.interpolation
            self.current_aperture = old_plotter.current_aperture
            self._pre_x = old_plotter._pre_x
            self._pre_y = old_plotter._pre_y
            self.x = old_plotter.x
            self.y = old_plotter.y
            self._drawing_line = old_plotter._drawing_line

    def _mm(self, value: float) -> float:
        return to_mm(value, self.level.unit)

    def _uses_aperture_box(self) -> bool:
        return self.current_aperture is not None and not self._drawing_outline

    def _cover(self, x: float, y: float) -> None:
        """Grow the level box to cover the head at ``(x, y)``."""
        if self._uses_aperture_box():
            box = self.current_aperture.bound_box
            self.level.bound_box.update(x + box.left, x + box.right, y + box.top, y + box.bottom)
        else:
            self.level.bound_box.update(x, x, y, y)

    def outline_begin(self, line_number: int) -> None:
        self.exposure = Exposure.OFF
        self._move(line_number)
        self.level.add(begin_outline())
        self._drawing_outline = True

    def outline_end(self, line_number: int) -> None:
        self.exposure = Exposure.OFF
        self._move(line_number)
        self.level.add(end_outline())
        self._drawing_outline = False

    def do(self, line_number: int) -> None:
        """Carry out the current exposure at the current coordinates."""
        if self.exposure is Exposure.ON:
            self._line()
        elif self.exposure is Exposure.OFF:
            self._move(line_number)
        elif self.exposure is Exposure.FLASH:
            self._move(line_number)
            self._flash()
            self.exposure = Exposure.OFF
        self.i = self.j = 0.0

    def aperture_select(self, aperture: Any, line_number: int) -> None:
        self.exposure = Exposure.OFF
        self._move(line_number)
        self.level.add(aperture_select(aperture))
        self.current_aperture = aperture

    def _move(self, line_number: int) -> None:
        if self._drawing_line:
            if self._drawing_outline:
                if self._first_x != self._pre_x or self._first_y != self._pre_y:
                    logger.warning(
                        "Line %d - Warning: Deprecated feature: Open contours", line_number
                    )
                    self.level.add(close())
                command = fill()
            else:
                command = stroke()
            command.end_x, command.end_y = self._pre_x, self._pre_y
            self.level.add(command)

        self._drawing_line = False
        self._first_x = self._mm(self.x)
        self._first_y = self._mm(self.y)
        self._pre_x = self._first_x
        self._pre_y = self._first_y

    def _line(self) -> None:
        target_x, target_y = self._mm(self.x), self._mm(self.y)
        if not self._drawing_line:
            self._cover(self._pre_x, self._pre_y)
            command = begin_line(self._pre_x, self._pre_y)
            command.end_x, command.end_y = self._pre_x, self._pre_y
            self.level.add(command)
        elif (
            self._pre_x == target_x
            and self._pre_y == target_y
            and self.i == 0.0
            and self.j == 0.0
        ):
            return
        self._drawing_line = True

        factor = _LINEAR_FACTORS.get(self.interpolation)
        if factor is not None:
            command = line(target_x * factor, target_y * factor)
            command.end_x, command.end_y = command.x, command.y
            self.level.add(command)
        else:
            self._arc()

        self._pre_x, self._pre_y = target_x, target_y
        self._cover(self._pre_x, self._pre_y)

    def _arc(self) -> None:
        target_x, target_y = self._mm(self.x), self._mm(self.y)
        i_mm, j_mm = self._mm(self.i), self._mm(self.j)

        if self.multi_quadrant:
            x1, y1 = -i_mm, -j_mm
            x2 = target_x - self._pre_x - i_mm
            y2 = target_y - self._pre_y - j_mm
            x3 = self._pre_x + i_mm
            y3 = self._pre_y + j_mm
        else:
            candidates = [(i_mm, j_mm), (-i_mm, j_mm), (-i_mm, -j_mm), (i_mm, -j_mm)]
            best = 0
            best_error = math.inf
            for index, (ci, cj) in enumerate(candidates):
                ex = target_x - self._pre_x - ci
                ey = target_y - self._pre_y - cj
                angle = self.angle(-ci, -cj, ex, ey)
                if self.interpolation is Interpolation.CLOCKWISE_CIRCULAR:
                    if angle > 0.0:
                        continue
                elif angle < 0.0:
                    continue
                error = abs((ci * ci + cj * cj) - (ex * ex + ey * ey))
                if error < best_error:
                    best, best_error = index, error

            ci, cj = candidates[best]
            x3, y3 = self._pre_x + ci, self._pre_y + cj
            x1, y1 = -ci, -cj
            x2, y2 = target_x - x3, target_y - y3

        angle = self.angle(x1, y1, x2, y2)

        command = arc(x3, y3, angle)
        self._pre_x, self._pre_y = target_x, target_y
        command.end_x, command.end_y = target_x, target_y
        self.level.add(command)

        left = right = x3 + x1
        bottom = top = y3 + y1
        direction = math.atan2(y1, x1)
        radius = math.sqrt(x1 * x1 + y1 * y1)
        step = angle * math.pi / 180e3
        for _ in range(_ARC_STEPS):
            px = x3 + radius * math.cos(direction)
            py = y3 + radius * math.sin(direction)
            left, right = min(left, px), max(right, px)
            bottom, top = min(bottom, py), max(top, py)
            direction += step

        if self._uses_aperture_box():
            box = self.current_aperture.bound_box
            left += box.left
            bottom += box.bottom
            right += box.right
            top += box.top

        self.level.bound_box.update(left, right, top, bottom)

    def _flash(self) -> None:
        self.level.add(flash(self._pre_x, self._pre_y))
        if self.current_aperture is not None:
            box = self.current_aperture.bound_box
            self.level.bound_box.update(
                self._pre_x + box.left,
                self._pre_x + box.right,
                self._pre_y + box.top,
                self._pre_y + box.bottom,
            )

    def angle(self, x1: float, y1: float, x2: float, y2: float) -> float:
        """Sweep in degrees from start to end, both relative to the centre.

        The sign follows the interpolation direction; in single-quadrant
        mode the sweep is kept within 90 degrees.
        """
        a = (math.atan2(y2, x2) - math.atan2(y1, x1)) * 180.0 / math.pi

        if self.interpolation is Interpolation.CLOCKWISE_CIRCULAR:
            while a >= 0.0:
                a -= 360.0
            if not self.multi_quadrant and a < -90.001:
                a += 360.0
        else:
            while a <= 0.0:
                a += 360.0
            if not self.multi_quadrant and a > 90.001:
                a -= 360.0

        if self.multi_quadrant and abs(a) < 0.001:
            a = a + 360.0 if a >= 0.0 else a - 360.0

        return a