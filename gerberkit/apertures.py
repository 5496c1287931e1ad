"""Aperture shapes and the render commands that draw them."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Protocol

from gerberkit.bound_box import BoundBox
from gerberkit.commands import (
    Command,
    RenderCommand,
    arc,
    begin_line,
    circle,
    close,
    fill,
    line,
)

_VERY_LARGE = 1e5
_VERY_LITTLE = -1e5


class _Macro(Protocol):
    def render(self, modifiers: Sequence[float]) -> list[RenderCommand]: ...


class Aperture(ABC):
    """A tool shape identified by its D-code.

    A hole size that is not positive means no hole; a hole with a
    negative ``hole_y`` is round.
    """

    def __init__(self, code: int) -> None:
        self.code = code
        self.dimension_x = -1.0
        self.dimension_y = -1.0
        self.hole_x = -1.0
        self.hole_y = -1.0
        self.rotation = 0.0
        self.bound_box = BoundBox(_VERY_LARGE, _VERY_LITTLE, _VERY_LITTLE, _VERY_LARGE)
        self._commands: list[RenderCommand] = []

    def _set_hole(self, hole_x: float, hole_y: float) -> None:
        if hole_x > 0.0:
            if hole_y > 0.0:
                self.hole_x, self.hole_y = hole_x, hole_y
            else:
                self.hole_x, self.hole_y = hole_x, -1.0

    def _render_hole(self) -> None:
        if self.hole_x <= 0.0:
            return
        hx, hy = self.hole_x / 2.0, self.hole_y / 2.0
        if self.hole_y < 0.0:
            self._commands += [begin_line(hx, 0.0), arc(0.0, 0.0, -360.0)]
        else:
            self._commands += [
                begin_line(hx, -hy),
                line(-hx, -hy),
                line(-hx, hy),
                line(hx, hy),
                close(),
            ]

    @abstractmethod
    def _render_aperture(self) -> None:
        """Fill ``self._commands`` with the shape."""

    def render(self) -> list[RenderCommand]:
        """Return the commands drawing this aperture around its origin."""
        if not self._commands:
            self._render_aperture()
        return list(self._commands)

    def solid_circle(self) -> bool:
        return False

    def solid_rectangle(self) -> bool:
        return False


class CircleAperture(Aperture):
    def __init__(self, code: int, diameter: float, hole_x: float = 0.0, hole_y: float = 0.0) -> None:
        super().__init__(code)
        self.dimension_x = diameter
        half = diameter / 2.0
        self.bound_box = BoundBox(-half, half, half, -half)
        self._set_hole(hole_x, hole_y)

    def _render_aperture(self) -> None:
        self._commands.append(circle(0.0, 0.0, self.dimension_x))
        self._render_hole()
        self._commands.append(fill())

    def solid_circle(self) -> bool:
        return self.hole_x < 0.0 and self.hole_y < 0.0


class RectangleAperture(Aperture):
    def __init__(
        self, code: int, width: float, height: float, hole_x: float = 0.0, hole_y: float = 0.0
    ) -> None:
        super().__init__(code)
        self.dimension_x = width
        self.dimension_y = height
        self.bound_box = BoundBox(-width / 2.0, width / 2.0, height / 2.0, -height / 2.0)
        self._set_hole(hole_x, hole_y)

    def _render_aperture(self) -> None:
        self._commands.append(
            RenderCommand(
                Command.RECTANGLE,
                x=-self.dimension_x / 2.0,
                y=-self.dimension_y / 2.0,
                w=self.dimension_x,
                h=self.dimension_y,
            )
        )
        self._render_hole()
        self._commands.append(fill())

    def solid_rectangle(self) -> bool:
        return self.hole_x < 0.0 and self.hole_y < 0.0


class ObroundAperture(Aperture):
    def __init__(
        self, code: int, width: float, height: float, hole_x: float = 0.0, hole_y: float = 0.0
    ) -> None:
        super().__init__(code)
        self.dimension_x = width
        self.dimension_y = height
        self.bound_box = BoundBox(-width / 2.0, width / 2.0, height / 2.0, -height / 2.0)
        self._set_hole(hole_x, hole_y)

    def _render_aperture(self) -> None:
        if self.dimension_x > self.dimension_y:
            r = self.dimension_y / 2.0
            t = self.dimension_x / 2.0 - r
            self._commands += [
                begin_line(t, -r),
                arc(t, 0.0, 180.0),
                line(-t, r),
                arc(-t, 0.0, 180.0),
            ]
        else:
            r = self.dimension_x / 2.0
            t = self.dimension_y / 2.0 - r
            self._commands += [
                begin_line(r, t),
                arc(0.0, t, 180.0),
                line(-r, -t),
                arc(0.0, -t, 180.0),
            ]
        self._commands.append(close())
        self._render_hole()
        self._commands.append(fill())


class PolygonAperture(Aperture):
    """A regular polygon with its first vertex at ``rotation`` degrees."""

    def __init__(
        self,
        code: int,
        width: float,
        sides: int,
        rotation: float = 0.0,
        hole_x: float = 0.0,
        hole_y: float = 0.0,
    ) -> None:
        super().__init__(code)
        self.dimension_x = width
        self.sides = sides
        self.rotation = rotation
        half = width / 2.0
        self.bound_box = BoundBox(-half, half, half, -half)
        self._set_hole(hole_x, hole_y)

    def _render_aperture(self) -> None:
        self.rotation %= 360.0
        r = self.dimension_x / 2.0
        rot = self.rotation * math.pi / 180.0
        self._commands.append(begin_line(r * math.cos(rot), r * math.sin(rot)))

        if self.sides > 0:
            step = 2.0 * math.pi / self.sides
            limit = 2.0 * math.pi - step / 2.0
            angle = step
            while angle < limit:
                self._commands.append(line(r * math.cos(angle + rot), r * math.sin(angle + rot)))
                angle += step

        self._commands.append(close())
        self._render_hole()
        self._commands.append(fill())


class MacroAperture(Aperture):
    """An aperture whose commands come from an aperture macro."""

    def __init__(self, code: int, macro: _Macro, modifiers: Sequence[float]) -> None:
        super().__init__(code)
        self._commands = list(macro.render(list(modifiers)))

        x = y = 0.0
        for index, command in enumerate(self._commands):
            match command.command:
                case Command.RECTANGLE:
                    left, bottom = command.x, command.y
                    right, top = command.x + command.w, command.y + command.h
                    x, y = left, bottom
                case Command.CIRCLE:
                    radius = command.w / 2.0
                    left, bottom = command.x - radius, command.y - radius
                    right, top = command.x + radius, command.y + radius
                    x, y = right, 0.0
                case Command.BEGIN_LINE | Command.LINE:
                    left = right = command.x
                    bottom = top = command.y
                    x, y = left, bottom
                case Command.ARC:
                    c = x - command.x
                    d = y - command.y
                    radius = math.sqrt(c * c + d * d)
                    end_angle = math.atan2(d, c) + command.a * math.pi / 180.0
                    # Assume a full circle to be safe.
                    left, bottom = command.x - radius, command.y - radius
                    right, top = command.x + radius, command.y + radius
                    x = command.x + radius * math.cos(end_angle)
                    y = command.y + radius * math.sin(end_angle)
                case _:
                    left = right = x
                    bottom = top = y

            if index == 0:
                self.bound_box = BoundBox(left, right, top, bottom)
            else:
                self.bound_box.update(left, right, top, bottom)

    def _render_aperture(self) -> None:
        pass