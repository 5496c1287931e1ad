"""Render commands and plotting modes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any


class Command(IntEnum):
    # Begin path
    RECTANGLE = 0
    CIRCLE = 1
    BEGIN_LINE = 2
    # Continue path
    LINE = 3
    ARC = 4
    # Close path
    CLOSE = 5
    # Render path
    STROKE = 6
    FILL = 7
    ERASE = 8
    # Other
    BEGIN_OUTLINE = 9
    END_OUTLINE = 10
    APERTURE_SELECT = 11
    FLASH = 12


class Interpolation(Enum):
    LINEAR = 0
    LINEAR_10X = 1
    LINEAR_0_1X = 2
    LINEAR_0_01X = 3
    CLOCKWISE_CIRCULAR = 4
    COUNTERCLOCKWISE_CIRCULAR = 5


class Exposure(Enum):
    ON = 0
    OFF = 1
    FLASH = 2


@dataclass(eq=False)
class RenderCommand:
    """One drawing step; ``w`` and ``h`` are sizes, ``a`` an angle in degrees."""

    command: Command
    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0
    a: float = 0.0
    end_x: float = 0.0
    end_y: float = 0.0
    aperture: Any = None


def aperture_select(aperture: Any) -> RenderCommand:
    return RenderCommand(Command.APERTURE_SELECT, aperture=aperture)


def rectangle() -> RenderCommand:
    return RenderCommand(Command.RECTANGLE)


def circle(x: float, y: float, diameter: float) -> RenderCommand:
    return RenderCommand(Command.CIRCLE, x=x, y=y, w=diameter)


def begin_line(x: float, y: float) -> RenderCommand:
    return RenderCommand(Command.BEGIN_LINE, x=x, y=y)


def line(x: float, y: float) -> RenderCommand:
    return RenderCommand(Command.LINE, x=x, y=y)


def arc(x: float, y: float, angle: float) -> RenderCommand:
    return RenderCommand(Command.ARC, x=x, y=y, a=angle)


def close() -> RenderCommand:
    return RenderCommand(Command.CLOSE)


def stroke() -> RenderCommand:
    return RenderCommand(Command.STROKE)


def fill() -> RenderCommand:
    return RenderCommand(Command.FILL)


def erase() -> RenderCommand:
    return RenderCommand(Command.ERASE)


def begin_outline() -> RenderCommand:
    return RenderCommand(Command.BEGIN_OUTLINE)


def end_outline() -> RenderCommand:
    return RenderCommand(Command.END_OUTLINE)


def flash(x: float, y: float) -> RenderCommand:
    return RenderCommand(Command.FLASH, x=x, y=y)