"""Registry of shape constructors keyed by shape name."""

from __future__ import annotations

from typing import Any, Callable, ClassVar

from cgdisplay.graphic import GraphicObject
from cgdisplay.point import Point
from cgdisplay.shapes import Circle, Line, Square, Triangle

SimpleCreator = Callable[[float, float, Any], GraphicObject]
ComplexCreator = Callable[[float, float, float, float, Any], GraphicObject]
TriangleCreator = Callable[[float, float, float, float, float, float, Any], GraphicObject]
CircleCreator = Callable[[float, float, float, Any], GraphicObject]


class ShapeFactory:
    """Creates shapes by name, one registry per constructor signature."""

    _instance: ClassVar[ShapeFactory | None] = None

    def __init__(self) -> None:
        self._simple: dict[str, SimpleCreator] = {}
        self._complex: dict[str, ComplexCreator] = {}
        self._triangle: dict[str, TriangleCreator] = {}
        self._circle: dict[str, CircleCreator] = {}

    @classmethod
    def instance(cls) -> ShapeFactory:
        """Return the shared factory."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def register_simple(self, name: str, creator: SimpleCreator) -> None:
        self._simple[name] = creator

    def register_complex(self, name: str, creator: ComplexCreator) -> None:
        self._complex[name] = creator

    def register_triangle(self, name: str, creator: TriangleCreator) -> None:
        self._triangle[name] = creator

    def register_circle(self, name: str, creator: CircleCreator) -> None:
        self._circle[name] = creator

    def names(self) -> list[str]:
        """All registered names: each registry sorted, in simple, complex, triangle, circle order."""
        return [
            name
            for registry in (self._simple, self._complex, self._triangle, self._circle)
            for name in sorted(registry)
        ]

    def create_simple(self, name: str, x: float, y: float, color: Any) -> GraphicObject | None:
        creator = self._simple.get(name)
        return creator(x, y, color) if creator else None

    def create_complex(
        self, name: str, x1: float, y1: float, x2: float, y2: float, color: Any
    ) -> GraphicObject | None:
        creator = self._complex.get(name)
        return creator(x1, y1, x2, y2, color) if creator else None

    def create_triangle(
        self,
        name: str,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        x3: float,
        y3: float,
        color: Any,
    ) -> GraphicObject | None:
        creator = self._triangle.get(name)
        return creator(x1, y1, x2, y2, x3, y3, color) if creator else None

    def create_circle(
        self, name: str, x: float, y: float, radius: float, color: Any
    ) -> GraphicObject | None:
        creator = self._circle.get(name)
        return creator(x, y, radius, color) if creator else None


def _make_square(x1: float, y1: float, x2: float, y2: float, color: Any) -> Square:
    return Square(
        Point(x1, y1, color),
        Point(x2, y2, color),
        Point(x1, y2, color),
        Point(x2, y1, color),
        color,
    )


def register_default_shapes(factory: ShapeFactory | None = None) -> ShapeFactory:
    """Register Ponto, Reta, Triangulo, Quadrado and Circunferencia; return the factory."""
    if factory is None:
        factory = ShapeFactory.instance()
    factory.register_simple("Ponto", lambda x, y, color: Point(x, y, color))
    factory.register_complex(
        "Reta",
        lambda x1, y1, x2, y2, color: Line(Point(x1, y1, color), Point(x2, y2, color), color),
    )
    factory.register_triangle(
        "Triangulo",
        lambda x1, y1, x2, y2, x3, y3, color: Triangle(
            Point(x1, y1, color), Point(x2, y2, color), Point(x3, y3, color), color
        ),
    )
    factory.register_complex("Quadrado", _make_square)
    factory.register_circle(
        "Circunferencia", lambda x, y, radius, color: Circle(Point(x, y, color), radius, color)
    )
    return factory