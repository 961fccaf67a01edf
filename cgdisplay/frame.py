"""The drawing surface: window-to-viewport mapping and shape creation."""

from __future__ import annotations

from typing import Any, NamedTuple

from cgdisplay.factory import ShapeFactory, register_default_shapes
from cgdisplay.graphic import GraphicObject, Painter, is_valid_color
from cgdisplay.point import Point
from cgdisplay.repository import DisplayFile
from cgdisplay.shapes import Circle, Line, Square, Triangle

_WINDOW_COLOR = "#00000000"
_WINDOW_NAME = "Window"


class _Rect(NamedTuple):
    left: float
    top: float
    width: float
    height: float

    @classmethod
    def from_bounds(cls, min_x: float, min_y: float, max_x: float, max_y: float) -> _Rect:
        return cls(min_x, min_y, max_x - min_x, max_y - min_y)


class DrawingFrame:
    """Maps world coordinates from the window onto a pixel surface and paints the display file."""

    def __init__(
        self,
        width: int = 400,
        height: int = 400,
        factory: ShapeFactory | None = None,
    ) -> None:
        self.width = width
        self.height = height
        self.factory = factory if factory is not None else register_default_shapes()
        self.repository: DisplayFile | None = None
        self.window = _Rect(0.0, 0.0, 0.0, 0.0)
        self.viewport = _Rect(0.0, 0.0, 1.0, 1.0)

    def set_repository(self, repository: DisplayFile | None) -> None:
        self.repository = repository

    def set_window(self, min_x: float, min_y: float, max_x: float, max_y: float) -> None:
        self.window = _Rect.from_bounds(min_x, min_y, max_x, max_y)

    def set_viewport(self, min_x: float, min_y: float, max_x: float, max_y: float) -> None:
        self.viewport = _Rect.from_bounds(min_x, min_y, max_x, max_y)

    def to_viewport(self, x: float, y: float) -> tuple[float, float]:
        """Map a world point to pixel coordinates; the y axis is flipped."""
        window, viewport = self.window, self.viewport
        if window.width == 0 or window.height == 0:
            raise ValueError("the window has zero width or height")
        x_view = (x - window.left) / window.width * viewport.width + viewport.left
        y_view = (1.0 - (y - window.top) / window.height) * viewport.height + viewport.top
        return x_view * self.width, y_view * self.height

    def _draw_closed(self, painter: Painter, corners: list[tuple[float, float]]) -> None:
        for (ax, ay), (bx, by) in zip(corners, corners[1:] + corners[:1]):
            painter.draw_line(ax, ay, bx, by)

    def paint(self, painter: Painter) -> None:
        """Draw every object of the repository through the window/viewport mapping."""
        if self.repository is None:
            return
        for obj in self.repository:
            if obj is None:
                continue
            if isinstance(obj, Point):
                painter.set_pen(obj.pen())
                painter.draw_point(*self.to_viewport(obj.x, obj.y))
            elif isinstance(obj, Line):
                ax, ay = self.to_viewport(obj.p1.x, obj.p1.y)
                bx, by = self.to_viewport(obj.p2.x, obj.p2.y)
                painter.set_pen(obj.pen())
                painter.draw_line(ax, ay, bx, by)
            elif isinstance(obj, Square):
                corners = [self.to_viewport(p.x, p.y) for p in (obj.p1, obj.p3, obj.p2, obj.p4)]
                painter.set_pen(obj.pen())
                self._draw_closed(painter, corners)
            elif isinstance(obj, Triangle):
                corners = [self.to_viewport(p.x, p.y) for p in (obj.p1, obj.p2, obj.p3)]
                painter.set_pen(obj.pen())
                self._draw_closed(painter, corners)
            elif isinstance(obj, Circle):
                cx, cy = self.to_viewport(obj.center.x, obj.center.y)
                scale_x = self.viewport.width / self.window.width
                scale_y = self.viewport.height / self.window.height
                radius = obj.radius * min(scale_x, scale_y) * self.width
                ring = Circle(Point(cx, cy, obj.color), radius, obj.color)
                ring.size = obj.size
                ring.draw(painter)

    def _ensure_window(self) -> None:
        if self.repository is None or len(self.repository) > 0:
            return
        window = self.factory.create_complex("Quadrado", 0, 0, 100, 100, _WINDOW_COLOR)
        if not isinstance(window, Square):
            raise LookupError("no 'Quadrado' shape is registered for the window")
        window.name = _WINDOW_NAME
        self.repository.add(window)
        self.set_window(window.p1.x, window.p2.y, window.p2.x, window.p1.y)

    def add_shape(
        self,
        kind: str,
        x1: float,
        y1: float,
        x2: float = 0,
        y2: float = 0,
        x3: float = 0,
        y3: float = 0,
        radius: float = 0,
        color: Any = "black",
        index: int = -1,
    ) -> GraphicObject | None:
        """Create a shape and store it at ``index``, or append it when ``index`` is out of range.

        The first shape added to an empty repository is preceded by the window square.
        Returns the new object, or None when nothing was created.
        """
        if self.repository is None or not is_valid_color(color):
            return None
        self._ensure_window()

        created: GraphicObject | None = None
        if kind == "Ponto":
            created = self.factory.create_simple(kind, x1, y1, color)
        elif kind in ("Reta", "Quadrado"):
            created = self.factory.create_complex(kind, x1, y1, x2, y2, color)
        elif kind == "Triangulo":
            created = self.factory.create_triangle(kind, x1, y1, x2, y2, x3, y3, color)
        elif kind == "Circunferencia":
            created = self.factory.create_circle(kind, x1, y1, radius, color)

        if created is None:
            return None
        if 0 <= index < len(self.repository):
            self.repository.update(index, created)
        else:
            self.repository.add(created)
        return created