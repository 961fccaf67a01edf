"""Lines, squares, triangles and circles built from points."""

from __future__ import annotations

import math
from typing import Any

from cgdisplay.graphic import GraphicObject, Painter, _format_number, color_name
from cgdisplay.matrix import Matrix
from cgdisplay.point import Point

_CIRCLE_SAMPLES = 1000


def _fmt(value: float) -> str:
    return _format_number(value)


class Line(GraphicObject):
    """A segment between two points."""

    def __init__(self, p1: Point, p2: Point, color: Any = "black") -> None:
        super().__init__(color)
        self.p1 = p1.copy()
        self.p2 = p2.copy()

    def __str__(self) -> str:
        return (
            f"Reta(({_fmt(self.p1.x)}, {_fmt(self.p1.y)}) -> "
            f"({_fmt(self.p2.x)}, {_fmt(self.p2.y)}), cor: {color_name(self.color)})"
        )

    def draw(self, painter: Painter) -> None:
        super().draw(painter)
        painter.draw_line(self.p1.x, self.p1.y, self.p2.x, self.p2.y)

    def apply_transform(self, transform: Matrix) -> None:
        """Apply ``transform`` about the segment's midpoint."""
        center = Point((self.p1.x + self.p2.x) / 2.0, (self.p1.y + self.p2.y) / 2.0, self.p1.color)
        self.p1.apply_transform(transform, center)
        self.p2.apply_transform(transform, center)

    def normalize(self) -> None:
        self.p1.normalize()
        self.p2.normalize()

    def is_3d(self) -> bool:
        return self.p1.is_3d() or self.p2.is_3d()


class Square(GraphicObject):
    """A quadrilateral with opposite corners ``p1``/``p2`` and the others ``p3``/``p4``.

    A square with a non-empty ``name`` is the clipping window.
    """

    def __init__(
        self,
        p1: Point,
        p2: Point,
        p3: Point,
        p4: Point,
        color: Any = "black",
        name: str = "",
    ) -> None:
        super().__init__(color)
        self.p1 = p1.copy()
        self.p2 = p2.copy()
        self.p3 = p3.copy()
        self.p4 = p4.copy()
        self.name = name

    def __str__(self) -> str:
        label = "Window" if self.name else "Quadrado"
        return (
            f"{label}: P1({_fmt(self.p1.x)}, {_fmt(self.p1.y)}), "
            f"P2({_fmt(self.p2.x)}, {_fmt(self.p2.y)}), Cor: {color_name(self.color)}"
        )

    def draw(self, painter: Painter) -> None:
        super().draw(painter)
        for a, b in ((self.p1, self.p3), (self.p3, self.p2), (self.p2, self.p4), (self.p4, self.p1)):
            painter.draw_line(a.x, a.y, b.x, b.y)

    def apply_transform(self, transform: Matrix) -> None:
        """Apply ``transform`` about the midpoint of ``p1`` and ``p2``."""
        center = Point((self.p1.x + self.p2.x) / 2.0, (self.p1.y + self.p2.y) / 2.0, self.p1.color)
        corners = [p.copy() for p in (self.p1, self.p2, self.p3, self.p4)]
        for corner in corners:
            corner.apply_transform(transform, center)
        self.p1, self.p2, self.p3, self.p4 = corners

    def normalize(self) -> None:
        self.p1.normalize()
        self.p2.normalize()

    def is_3d(self) -> bool:
        return self.p1.is_3d() or self.p2.is_3d()


class Triangle(GraphicObject):
    """A triangle through three points."""

    def __init__(self, p1: Point, p2: Point, p3: Point, color: Any = "black") -> None:
        super().__init__(color)
        self.p1 = p1.copy()
        self.p2 = p2.copy()
        self.p3 = p3.copy()

    def __str__(self) -> str:
        return (
            f"Triangulo(({_fmt(self.p1.x)}, {_fmt(self.p1.y)}), "
            f"({_fmt(self.p2.x)}, {_fmt(self.p2.y)}), "
            f"({_fmt(self.p3.x)}, {_fmt(self.p3.y)}), cor: {color_name(self.color)})"
        )

    def draw(self, painter: Painter) -> None:
        super().draw(painter)
        for a, b in ((self.p1, self.p2), (self.p2, self.p3), (self.p3, self.p1)):
            painter.draw_line(a.x, a.y, b.x, b.y)

    def apply_transform(self, transform: Matrix) -> None:
        """Apply ``transform`` about the centroid."""
        points = (self.p1, self.p2, self.p3)
        center = Point(
            sum(p.x for p in points) / 3.0,
            sum(p.y for p in points) / 3.0,
            self.p1.color,
        )
        moved = [p.copy() for p in points]
        for p in moved:
            p.apply_transform(transform, center)
        self.p1, self.p2, self.p3 = moved

    def normalize(self) -> None:
        for p in (self.p1, self.p2, self.p3):
            p.normalize()

    def is_3d(self) -> bool:
        return self.p1.is_3d() or self.p2.is_3d() or self.p3.is_3d()


class Circle(GraphicObject):
    """A circle given by its centre and radius."""

    def __init__(self, center: Point, radius: float, color: Any = "black") -> None:
        super().__init__(color)
        self.center = center.copy()
        self.radius = float(radius)

    def __str__(self) -> str:
        return (
            f"Circunferencia: P1({_fmt(self.center.x)}, {_fmt(self.center.y)}), "
            f"Raio {_fmt(self.radius)}, Cor: {color_name(self.color)}"
        )

    def draw(self, painter: Painter) -> None:
        """Plot the circumference as a ring of sample points."""
        super().draw(painter)
        cx, cy = self.center.x, self.center.y
        for i in range(_CIRCLE_SAMPLES):
            angle = i * 2 * math.pi / _CIRCLE_SAMPLES
            x = cx + self.radius * math.cos(angle)
            y = cy + self.radius * math.sin(angle)
            painter.draw_line(x, y, x, y)

    def apply_transform(self, transform: Matrix) -> None:
        """Transform the centre and a rim point; the new radius is their truncated distance."""
        rim = Point(self.center.x + self.radius, self.center.y, self.center.color)
        new_center = self.center.copy()
        new_center.apply_transform(transform, self.center)
        rim.apply_transform(transform, self.center)
        self.center = new_center
        self.radius = float(int(new_center.distance(rim)))

    def normalize(self) -> None:
        self.center.normalize()

    def is_3d(self) -> bool:
        return self.center.is_3d()