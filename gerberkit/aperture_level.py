"""Turns an aperture's render commands into painted primitives."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from gerberkit.bound_box import BoundBox
from gerberkit.commands import Command, RenderCommand
from gerberkit.paths import UNITS_PER_MM, Primitive

logger = logging.getLogger(__name__)

_OBJECT_ENDS = {Command.STROKE, Command.FILL, Command.ERASE}


class ApertureLevel:
    """Draws one aperture into a list of primitives in path units."""

    def __init__(self, commands: Iterable[RenderCommand], bound_box: BoundBox) -> None:
        self.commands = list(commands)
        self.bound_box = bound_box
        self.primitive = Primitive()
        self.primitives: list[Primitive] = []

    def draw(self) -> None:
        """Draw every command; objects ending in stroke, fill or erase go last-first."""
        self.new_primitive()

        objects: list[list[RenderCommand]] = [[]]
        for command in self.commands:
            objects[-1].append(command)
            if command.command in _OBJECT_ENDS:
                objects.append([])

        for group in reversed(objects):
            for command in group:
                self._draw_command(command)

    def _draw_command(self, command: RenderCommand) -> None:
        match command.command:
            case Command.RECTANGLE:
                self.draw_rect(command.x, command.y, command.w, command.h)
            case Command.CIRCLE:
                self.draw_circle(command.x, command.y, command.w)
            case Command.BEGIN_LINE:
                self.begin_line(command.x, command.y)
            case Command.LINE:
                self.draw_line(command.x, command.y)
            case Command.ARC:
                self.draw_arc(command.x, command.y, command.a)
            case Command.CLOSE:
                self.close()
            case Command.STROKE:
                self.stroke()
            case Command.FILL:
                self.fill()
            case Command.ERASE:
                self.erase(self.bound_box)
            case _:
                logger.error("Error: Unrecognised Aperture Render Command %s", command.command)

    def new_primitive(self) -> None:
        """Keep the current primitive if it holds anything and start a new one."""
        if not self.primitive.path.is_empty():
            self.primitives.append(self.primitive)
        self.primitive = Primitive()

    def erase(self, box: BoundBox) -> None:
        """Erasing is not drawn."""

    def fill(self) -> None:
        self.new_primitive()

    def stroke(self) -> None:
        self.fill()

    def close(self) -> None:
        self.fill()

    def draw_line(self, x: float, y: float) -> None:
        self.primitive.path.line_to(x * UNITS_PER_MM, y * UNITS_PER_MM)

    def begin_line(self, x: float, y: float) -> None:
        self.primitive.path.move_to(x * UNITS_PER_MM, y * UNITS_PER_MM)

    def draw_circle(self, x: float, y: float, w: float) -> None:
        self.primitive.path.add_ellipse(
            (x - w / 2.0) * UNITS_PER_MM,
            (y - w / 2.0) * UNITS_PER_MM,
            w * UNITS_PER_MM,
            w * UNITS_PER_MM,
        )

    def draw_rect(self, x: float, y: float, w: float, h: float) -> None:
        self.primitive.path.add_rect(
            x * UNITS_PER_MM, y * UNITS_PER_MM, w * UNITS_PER_MM, h * UNITS_PER_MM
        )

    def draw_arc(self, x: float, y: float, degree: float) -> None:
        self.primitive.path.arc_to(x * UNITS_PER_MM, y * UNITS_PER_MM, degree)