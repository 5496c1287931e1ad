"""Axis-aligned bounding boxes in board coordinates."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass
class BoundBox:
    """A rectangle given by its left, right, top and bottom edges.

    The default box is "inverted" (left > right, bottom > top) so that
    the first update makes it equal to the updated extent.
    """

    left: float = 1.0e8
    right: float = -1.0e8
    top: float = -1.0e8
    bottom: float = 1.0e8

    def center(self) -> tuple[float, float]:
        """Return the centre point as ``(x, y)``."""
        return (self.left + self.right) / 2.0, (self.top + self.bottom) / 2.0

    def width(self) -> float:
        return self.right - self.left

    def height(self) -> float:
        return self.top - self.bottom

    def update(self, left: float, right: float, top: float, bottom: float) -> None:
        """Grow the box so that it also covers the given edges."""
        self.left = min(self.left, left)
        self.bottom = min(self.bottom, bottom)
        self.right = max(self.right, right)
        self.top = max(self.top, top)

    def update_box(self, box: BoundBox) -> None:
        """Grow the box so that it also covers ``box``."""
        self.update(box.left, box.right, box.top, box.bottom)

    def scale(self, times: float) -> None:
        """Multiply every edge by ``times`` in place."""
        self.left *= times
        self.right *= times
        self.top *= times
        self.bottom *= times

    def scaled(self, times: float) -> BoundBox:
        """Return a copy with every edge multiplied by ``times``."""
        copy = replace(self)
        copy.scale(times)
        return copy