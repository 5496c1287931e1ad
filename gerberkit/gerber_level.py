"""One level (layer) of a Gerber image and how it draws itself into paths."""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from gerberkit.aperture_level import ApertureLevel
from gerberkit.bound_box import BoundBox
from gerberkit.commands import Command, RenderCommand
from gerberkit.gerber import Unit
from gerberkit.paths import UNITS_PER_MM, Path, PathElement, Primitive, PrimitiveType
from gerberkit.strokes import StrokesToFillsConverter

_VERY_LARGE = 1e5
_VERY_LITTLE = -1e5


class RenderError(Exception):
    """A level holds commands that cannot be drawn."""


class GerberLevel:
    """Render commands sharing polarity and step-and-repeat settings.

    Drawing turns the commands into ``primitives``, whose paths are in
    millimetres times ``UNITS_PER_MM``.
    """

    def __init__(self, previous_level: GerberLevel | None = None, unit: Unit = Unit.MILLIMETERS) -> None:
        self.render_commands: list[RenderCommand] = []
        self.name = ""
        self.negative = False
        self.unit = unit
        self.bound_box = BoundBox(_VERY_LARGE, _VERY_LITTLE, _VERY_LITTLE, _VERY_LARGE)

        self.count_x = 1
        self.count_y = 1
        self.step_x = 0.0
        self.step_y = 0.0

        self.primitive = Primitive()
        self.primitives: list[Primitive] = []
        self.engine: Any = None

        if previous_level is not None:
            self.name = previous_level.name
            self.count_x = previous_level.count_x
            self.count_y = previous_level.count_y
            self.step_x = previous_level.step_x
            self.step_y = previous_level.step_y
            self.negative = previous_level.negative

    def is_copy_layer(self) -> bool:
        """True when the level is repeated by step-and-repeat."""
        return self.count_x > 1 or self.count_y > 1

    def right(self) -> float:
        """Right edge including all horizontal repeats."""
        box = self.bound_box
        if self.count_x > 1:
            return box.left + self.step_x * (self.count_x - 1) + box.right - box.left
        return box.right

    def top(self) -> float:
        """Top edge including all vertical repeats."""
        box = self.bound_box
        if self.count_y > 1:
            return box.bottom + self.step_y * (self.count_y - 1) + box.top - box.bottom
        return box.top

    def add(self, command: RenderCommand) -> None:
        self.render_commands.append(command)

    def convert_strokes_to_fills(self) -> None:
        StrokesToFillsConverter(self).convert()

    def new_primitive(self, type: PrimitiveType, line_width: float) -> None:
        """Keep the current primitive, if it holds a path, as ``type`` and start a new one."""
        if not self.primitive.path.is_empty():
            self.primitive.type = type
            self.primitive.line_width = line_width
            self.primitives.append(self.primitive)
        self.primitive = Primitive()

    def render(self, engine: Any) -> None:
        """Draw every command with ``engine`` holding the shared drawing state.

        The engine provides ``convert_strokes_to_fills``, ``outline_path``,
        ``rect_x``, ``rect_y``, ``aperture_images`` (a dict by D-code),
        ``aperture_image`` (a dataclass with ``aperture`` and ``primitives``)
        and ``add_aperture(code)``, which files the current image under ``code``.
        """
        self.engine = engine
        if engine.convert_strokes_to_fills:
            self.convert_strokes_to_fills()
        for command in list(self.render_commands):
            self.draw(command)

    def _aperture(self) -> Any:
        image = getattr(self.engine, "aperture_image", None)
        aperture = getattr(image, "aperture", None)
        if aperture is None:
            raise RenderError("Error: No aperture selected")
        return aperture

    def _aperture_width(self) -> float:
        return self._aperture().bound_box.width() * UNITS_PER_MM

    def draw(self, command: RenderCommand) -> None:
        """Draw one command into the current primitive."""
        k = UNITS_PER_MM
        path = self.primitive.path
        match command.command:
            case Command.RECTANGLE:
                path.add_rect(command.x * k, command.y * k, command.w * k, command.h * k)
            case Command.CIRCLE:
                r = command.w / 2.0 * k
                path.add_ellipse(command.x * k - r, command.y * k - r, r * 2, r * 2)
            case Command.BEGIN_LINE:
                if self.engine.outline_path:
                    path.move_to(command.x * k, command.y * k)
                elif self._aperture().solid_circle():
                    path.move_to(command.x * k, command.y * k)
                elif self._aperture().solid_rectangle():
                    self.engine.rect_x = command.x
                    self.engine.rect_y = command.y
                else:
                    raise RenderError(
                        "Error: Only solid circular or rectangular apertures can be used for paths"
                    )
            case Command.LINE:
                if self.engine.outline_path or self._aperture().solid_circle():
                    path.line_to(command.x * k, command.y * k)
                elif self._aperture().solid_rectangle():
                    box = self._aperture().bound_box
                    self.draw_rect_line(
                        self.engine.rect_x,
                        self.engine.rect_y,
                        command.x,
                        command.y,
                        box.width(),
                        box.height(),
                    )
                    self.engine.rect_x = command.x
                    self.engine.rect_y = command.y
                else:
                    raise RenderError(
                        "Error: Only solid circular or rectangular apertures can be used for paths"
                    )
            case Command.ARC:
                if self.engine.outline_path or self._aperture().solid_circle():
                    path.arc_to(command.x * k, command.y * k, command.a)
                else:
                    raise RenderError("Error: Only solid circular apertures can be used for arcs")
            case Command.FLASH:
                self._flash(command.x, command.y)
            case Command.STROKE:
                self.new_primitive(PrimitiveType.STROKE, self._aperture_width())
            case Command.BEGIN_OUTLINE:
                self.new_primitive(PrimitiveType.NORMAL, 1.0)
                self.engine.outline_path = True
            case Command.END_OUTLINE:
                self.new_primitive(PrimitiveType.NORMAL, 1.0)
                self.engine.outline_path = False
            case Command.APERTURE_SELECT:
                self._select_aperture(command.aperture)
            case _:
                pass

    def _select_aperture(self, aperture: Any) -> None:
        if aperture is None:
            raise RenderError("Error: Null Aperture")
        engine = self.engine
        cached = engine.aperture_images.get(aperture.code)
        if cached is not None:
            engine.aperture_image = cached
            return
        aperture_level = ApertureLevel(aperture.render(), aperture.bound_box)
        aperture_level.draw()
        engine.aperture_image = replace(
            engine.aperture_image, aperture=aperture, primitives=aperture_level.primitives
        )
        engine.add_aperture(aperture.code)

    def _flash(self, x: float, y: float) -> None:
        """Place the current aperture's shape with its box centred on ``(x, y)``."""
        aperture = self._aperture()
        center_x, center_y = aperture.bound_box.center()
        dx = (x - center_x) * UNITS_PER_MM
        dy = (y - center_y) * UNITS_PER_MM
        for primitive in self.engine.aperture_image.primitives:
            path = Path()
            path.elements = [
                PathElement(element.kind, tuple((px + dx, py + dy) for px, py in element.points))
                for element in primitive.path.elements
            ]
            self.primitives.append(Primitive(path, primitive.type, primitive.line_width))

    def draw_rect_line(self, x1: float, y1: float, x2: float, y2: float, w: float, h: float) -> None:
        """Draw the area a ``w`` by ``h`` rectangle sweeps from one point to another."""
        k = UNITS_PER_MM
        x1, y1, x2, y2 = x1 * k, y1 * k, x2 * k, y2 * k
        hw = w * k / 2.0
        hh = h * k / 2.0

        if x2 > x1:
            if y2 > y1:
                corners = [
                    (x1 - hw, y1 - hh), (x1 + hw, y1 - hh), (x2 + hw, y2 - hh),
                    (x2 + hw, y2 + hh), (x2 - hw, y2 + hh), (x1 - hw, y1 + hh),
                ]
            elif y1 > y2:
                corners = [
                    (x1 - hw, y1 - hh), (x2 - hw, y2 - hh), (x2 + hw, y2 - hh),
                    (x2 + hw, y2 + hh), (x1 + hw, y1 + hh), (x1 - hw, y1 + hh),
                ]
            else:
                corners = [(x1 - hw, y1 - hh), (x2 + hw, y2 - hh), (x2 + hw, y2 + hh), (x1 - hw, y1 + hh)]
        elif x1 > x2:
            if y2 > y1:
                corners = [
                    (x2 - hw, y2 - hh), (x1 - hw, y1 - hh), (x1 + hw, y1 - hh),
                    (x1 + hw, y1 + hh), (x2 + hw, y2 + hh), (x2 - hw, y2 + hh),
                ]
            elif y1 > y2:
                corners = [
                    (x2 - hw, y2 - hh), (x2 + hw, y2 - hh), (x1 + hw, y1 - hh),
                    (x1 + hw, y1 + hh), (x1 - hw, y1 + hh), (x2 - hw, y2 + hh),
                ]
            else:
                corners = [(x2 - hw, y2 - hh), (x1 + hw, y1 - hh), (x1 + hw, y1 + hh), (x2 - hw, y2 + hh)]
        elif y2 > y1:
            corners = [(x1 - hw, y1 - hh), (x1 + hw, y1 - hh), (x2 + hw, y2 + hh), (x2 - hw, y2 + hh)]
        else:
            corners = [(x2 - hw, y2 - hh), (x2 + hw, y2 - hh), (x1 + hw, y1 + hh), (x1 - hw, y1 + hh)]

        path = self.primitive.path
        path.move_to(*corners[0])
        for corner in corners[1:]:
            path.line_to(*corner)

        self.new_primitive(PrimitiveType.RECT_LINE, w * k)