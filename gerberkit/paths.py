"""Vector paths and the primitives that carry them."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum

UNITS_PER_MM = 10000
"""Path coordinates are millimetres multiplied by this factor."""

_KAPPA = 0.5522847498307936
_MAX_NEWTON_STEPS = 100


class PrimitiveType(Enum):
    NORMAL = 0
    STROKE = 1
    RECT_LINE = 2


class ElementKind(Enum):
    MOVE = 0
    LINE = 1
    CUBIC = 2


@dataclass(frozen=True)
class PathElement:
    """One path step; ``points`` ends with the point the pen moves to."""

    kind: ElementKind
    points: tuple[tuple[float, float], ...]

    @property
    def end(self) -> tuple[float, float]:
        return self.points[-1]


class Path:
    """A sequence of moves, lines and cubic curves, filled odd-even."""

    def __init__(self) -> None:
        self.elements: list[PathElement] = []

    def _ensure_start(self) -> None:
        if not self.elements:
            self.elements.append(PathElement(ElementKind.MOVE, ((0.0, 0.0),)))

    def move_to(self, x: float, y: float) -> None:
        """Start a new sub-path; a move right after a move replaces it."""
        element = PathElement(ElementKind.MOVE, ((x, y),))
        if self.elements and self.elements[-1].kind is ElementKind.MOVE:
            self.elements[-1] = element
        else:
            self.elements.append(element)

    def line_to(self, x: float, y: float) -> None:
        self._ensure_start()
        self.elements.append(PathElement(ElementKind.LINE, ((x, y),)))

    def cubic_to(self, x1: float, y1: float, x2: float, y2: float, x3: float, y3: float) -> None:
        self._ensure_start()
        self.elements.append(PathElement(ElementKind.CUBIC, ((x1, y1), (x2, y2), (x3, y3))))

    def add_ellipse(self, x: float, y: float, width: float, height: float) -> None:
        """Add a closed ellipse inscribed in the given rectangle."""
        rx, ry = width / 2.0, height / 2.0
        cx, cy = x + rx, y + ry
        kx, ky = _KAPPA * rx, _KAPPA * ry
        self.move_to(cx + rx, cy)
        self.cubic_to(cx + rx, cy + ky, cx + kx, cy + ry, cx, cy + ry)
        self.cubic_to(cx - kx, cy + ry, cx - rx, cy + ky, cx - rx, cy)
        self.cubic_to(cx - rx, cy - ky, cx - kx, cy - ry, cx, cy - ry)
        self.cubic_to(cx + kx, cy - ry, cx + rx, cy - ky, cx + rx, cy)

    def add_rect(self, x: float, y: float, width: float, height: float) -> None:
        """Add a closed rectangle; the pen ends at its first corner."""
        self.move_to(x, y)
        self.line_to(x + width, y)
        self.line_to(x + width, y + height)
        self.line_to(x, y + height)
        self.line_to(x, y)

    def is_empty(self) -> bool:
        """True when the path holds nothing but possibly a single move."""
        return not self.elements or (
            len(self.elements) == 1 and self.elements[0].kind is ElementKind.MOVE
        )

    def current_position(self) -> tuple[float, float]:
        if not self.elements:
            return 0.0, 0.0
        return self.elements[-1].end

    def arc_to(self, x: float, y: float, degree: float) -> None:
        """Sweep ``degree`` degrees around centre ``(x, y)`` from the current point.

        Arcs wider than 45 degrees are split in halves; each piece is one
        cubic curve fitted so that its point at t = 1/3 lies on the circle.
        """
        px, py = self.current_position()
        if abs(px - x) < 1e-15 and abs(py - y) < 1e-15:
            return

        if abs(degree) > 45.001:
            half = degree / 2.0
            self.arc_to(x, y, half)
            self.arc_to(x, y, half)
            return

        dx, dy = px - x, py - y
        radius = math.sqrt(dx * dx + dy * dy)
        half_angle = degree * math.pi / 180 / 2.0
        start_angle = math.atan2(dy, dx)

        end_angle = start_angle + degree * math.pi / 180
        x4, y4 = radius * math.cos(end_angle), radius * math.sin(end_angle)

        mid_angle = start_angle + half_angle
        x5, y5 = radius * math.cos(mid_angle), radius * math.sin(mid_angle)

        cos_half = math.cos(half_angle)
        x6, y6 = x5 / cos_half, y5 / cos_half

        tx = 6 * x6 - 3 * dx - 3 * x4
        ty = 6 * y6 - 3 * dy - 3 * y4
        if tx == 0.0 and ty == 0.0:
            self.line_to(x4 + x, y4 + y)
            return
        if abs(tx) > abs(ty):
            t = (8 * x5 - 4 * dx - 4 * x4) / tx
        else:
            t = (8 * y5 - 4 * dy - 4 * y4) / ty

        radius_sq = radius * radius
        s2 = 1.0 / 3.0
        s1 = 1.0 - s2

        def controls(u: float) -> tuple[float, float, float, float]:
            return (
                (1.0 - u) * dx + u * x6,
                (1.0 - u) * dy + u * y6,
                (1.0 - u) * x4 + u * x6,
                (1.0 - u) * y4 + u * y6,
            )

        def error(u: float) -> float:
            x2, y2, x3, y3 = controls(u)
            xb = s1**3 * dx + 3.0 * s1 * s1 * s2 * x2 + 3.0 * s1 * s2 * s2 * x3 + s2**3 * x4
            yb = s1**3 * dy + 3.0 * s1 * s1 * s2 * y2 + 3.0 * s1 * s2 * s2 * y3 + s2**3 * y4
            return xb * xb + yb * yb - radius_sq

        step = 1e-3
        err = error(t)
        for _ in range(_MAX_NEWTON_STEPS):
            if err <= 1e-12:
                break
            slope = (error(t + step) - err) / step
            if slope == 0.0:
                break
            t -= err / slope
            err = error(t)

        x2, y2, x3, y3 = controls(t)
        self.cubic_to(x2 + x, y2 + y, x3 + x, y3 + y, x4 + x, y4 + y)


@dataclass
class Primitive:
    """A path together with how it is to be painted."""

    path: Path = field(default_factory=Path)
    type: PrimitiveType = PrimitiveType.NORMAL
    line_width: float = 1.0