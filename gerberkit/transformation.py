"""Mapping between board (logical) coordinates and device pixels."""

from __future__ import annotations

from dataclasses import dataclass

from gerberkit.bound_box import BoundBox

_MIN_SCALE = 0.1
_MAX_SCALE = 20.0
_MARGIN = 0.95


@dataclass(frozen=True)
class Rect:
    """An integer rectangle; height may be negative for a flipped window."""

    x: int
    y: int
    width: int
    height: int


class Transformation:
    """Zoom and pan state fitting a board box into a device area."""

    def __init__(self, box: BoundBox, offset: BoundBox) -> None:
        self._box = box
        self._offset = offset
        self._scaled = 1.0
        self._with_scale = False
        self._left = 0.0
        self._top = 0.0
        self._move_x = 0.0
        self._move_y = 0.0
        self._physical_width = 0.0
        self._physical_height = 0.0

    @property
    def zoom(self) -> float:
        return self._scaled

    def painter_window(self) -> Rect:
        """The logical rectangle shown on the device."""
        return Rect(
            int(self._left),
            int(self._top),
            int(self._logic_width() / self._scaled),
            int(-self._logic_height() / self._scaled),
        )

    def painter_viewport(self) -> Rect:
        """The device rectangle the window is drawn into."""
        offset = self._offset
        return Rect(
            int(self._physical_width * offset.left + self._move_x),
            int(self._physical_height * offset.top + self._move_y),
            int(self._physical_width * (1 - offset.left - offset.right)),
            int(self._physical_height * (1 - offset.top - offset.bottom)),
        )

    def move(self, delta_x: int, delta_y: int) -> None:
        self._move_x += delta_x
        self._move_y += delta_y

    def scale(self, delta: float, center_x: float = 0.0, center_y: float = 0.0) -> bool:
        """Zoom by ``delta`` around a relative centre; False if out of range."""
        new_scale = self._scaled + delta
        if not _MIN_SCALE <= new_scale <= _MAX_SCALE:
            return False
        left = self._zoomed_left(center_x, delta)
        top = self._zoomed_top(center_y, delta)
        self._left, self._top = left, top
        self._scaled = new_scale
        self._with_scale = True
        return True

    def set_physical_size(self, width: int, height: int) -> None:
        self._physical_width = float(width)
        self._physical_height = float(height)
        if not self._with_scale:
            self._left = self._logic_left()
            self._top = self._logic_top()

    def translate_pen_width(self, width: float) -> float:
        return width / self._scale_ratio()

    def translate_logic_coord(self, coord: float) -> float:
        return coord * self._scale_ratio()

    def _scale_x(self) -> float:
        return self._physical_width * _MARGIN / self._box.width() * self._scaled

    def _scale_y(self) -> float:
        return self._physical_height * _MARGIN / self._box.height() * self._scaled

    def _scale_ratio(self) -> float:
        return min(self._scale_x(), self._scale_y())

    def _width_dominates(self) -> bool:
        return self._scale_x() >= self._scale_y()

    def _logic_left(self) -> float:
        scale_x, scale_y = self._scale_x(), self._scale_y()
        if scale_x < scale_y:
            return self._box.left
        return self._box.left - self._box.width() * (scale_x / scale_y - 1) / 2

    def _logic_top(self) -> float:
        scale_x, scale_y = self._scale_x(), self._scale_y()
        if scale_x < scale_y:
            return self._box.top + self._box.height() * (scale_y / scale_x - 1) / 2
        return self._box.top

    def _width_ratio(self) -> float:
        if not self._width_dominates():
            return 1.0
        return self._physical_width / self._physical_height * self._box.height() / self._box.width()

    def _height_ratio(self) -> float:
        if self._width_dominates():
            return 1.0
        return self._physical_height / self._physical_width * self._box.width() / self._box.height()

    def _logic_width(self) -> float:
        return self._box.width() * self._width_ratio()

    def _logic_height(self) -> float:
        return self._box.height() * self._height_ratio()

    def _zoomed_left(self, center_x: float, delta: float) -> float:
        if self._width_dominates():
            old_width = self._logic_width() / self._scaled
            width = self._logic_width() / (self._scaled + delta)
            return self._left + (old_width - width) * center_x
        shrink = 1.0 / self._scaled - 1.0 / (self._scaled + delta)
        return self._left + self._box.width() * shrink * center_x

    def _zoomed_top(self, center_y: float, delta: float) -> float:
        if self._width_dominates():
            shrink = 1.0 / self._scaled - 1.0 / (self._scaled + delta)
            return self._top - self._box.height() * shrink * center_y
        old_height = self._logic_height() / self._scaled
        height = self._logic_height() / (self._scaled + delta)
        return self._top - (old_height - height) * center_y