"""Renders a Gerber image into coloured vector layers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from gerberkit.bound_box import BoundBox
from gerberkit.gerber import Gerber
from gerberkit.paths import UNITS_PER_MM, Primitive, PrimitiveType
from gerberkit.transformation import Transformation

Color = tuple[int, int, int, int]

_WHITE: Color = (255, 255, 255, 255)
_LEVEL_STEP = 155
_COUNT_MODULUS = 2**32


@dataclass
class ApertureImage:
    """An aperture together with the primitives drawing its shape."""

    aperture: Any = None
    primitives: list[Primitive] = field(default_factory=list)


@dataclass
class DrawnLayer:
    """The painted primitives of one level.

    Normal and rect-line primitives are filled with ``fill``; stroke
    primitives are outlined with ``stroke`` at their line width.  The
    whole layer is drawn once at every entry of ``offsets`` (path units);
    ``image_size`` is the device size of one copy of a repeated layer.
    """

    level: Any
    primitives: list[Primitive]
    fill: Color
    stroke: Color
    offsets: list[tuple[float, float]]
    image_size: tuple[int, int] | None = None

    def filled(self) -> list[Primitive]:
        return [p for p in self.primitives if p.type is not PrimitiveType.STROKE]

    def stroked(self) -> list[Primitive]:
        return [p for p in self.primitives if p.type is PrimitiveType.STROKE]


class PathEngine:
    """Holds the drawing state shared by the levels while they render."""

    def __init__(self, bound_box: BoundBox, offset: BoundBox, width: int, height: int) -> None:
        self.transformation = Transformation(bound_box.scaled(UNITS_PER_MM), offset)
        self.transformation.set_physical_size(width, height)
        self.aperture_images: dict[int, ApertureImage] = {}
        self.aperture_image = ApertureImage()
        self.outline_path = False
        self.convert_strokes_to_fills = False
        self.rect_x = 0.0
        self.rect_y = 0.0
        self.count = 0

    def resize(self, width: int, height: int) -> None:
        self.transformation.set_physical_size(width, height)

    def scale(self, delta: float, center_x: float = 0.0, center_y: float = 0.0) -> bool:
        """Zoom the view; a successful zoom drops the cached aperture images."""
        if self.transformation.scale(delta, center_x, center_y):
            self.aperture_images.clear()
            return True
        return False

    def move(self, delta_x: int, delta_y: int) -> None:
        self.transformation.move(delta_x, delta_y)

    def add_aperture(self, code: int) -> None:
        """File the current aperture image under ``code``."""
        self.aperture_images[code] = self.aperture_image

    def _level_color(self) -> Color:
        count = self.count
        return (count % 256, (count + 53) % 256, (count + 125) % 256, 200)

    def fill_color(self, negative: bool) -> Color:
        """Fill colour of the level being drawn: white when it is negative."""
        return _WHITE if negative else self._level_color()

    def render_gerber(self, gerber: Gerber) -> list[DrawnLayer]:
        """Draw every level in order; raises RenderError on an undrawable level."""
        layers: list[DrawnLayer] = []
        for level in gerber.levels:
            level.new_primitive(PrimitiveType.NORMAL, 1.0)
            if not level.primitives:
                level.render(self)
            layers.append(self._drawn_layer(level))
            self.count = (self.count + _LEVEL_STEP) % _COUNT_MODULUS
        self.count = 0
        return layers

    def _drawn_layer(self, level: Any) -> DrawnLayer:
        offsets = [(0.0, 0.0)]
        image_size = None
        if level.is_copy_layer():
            box = level.bound_box
            width = max(self.transformation.translate_logic_coord(box.width() * UNITS_PER_MM), 1)
            height = max(self.transformation.translate_logic_coord(box.height() * UNITS_PER_MM), 1)
            image_size = (int(width), int(height))
            step_x = level.step_x * UNITS_PER_MM
            step_y = level.step_y * UNITS_PER_MM
            offsets = [
                (column * step_x, row * step_y)
                for row in range(level.count_y)
                for column in range(level.count_x)
            ]
        return DrawnLayer(
            level=level,
            primitives=list(level.primitives),
            fill=self.fill_color(level.negative),
            stroke=self._level_color(),
            offsets=offsets,
            image_size=image_size,
        )