import pytest

from cgdisplay.factory import ShapeFactory, register_default_shapes
from cgdisplay.point import Point
from cgdisplay.shapes import Circle, Line, Square, Triangle


@pytest.fixture
def factory():
    return register_default_shapes(ShapeFactory())


def test_instance_is_shared():
    first = ShapeFactory.instance()
    first.register_simple("SharedProbe", lambda x, y, c: Point(x, y, c))
    second = ShapeFactory.instance()
    assert "SharedProbe" in second.names()
    created = second.create_simple("SharedProbe", 5, 6, "#000000")
    assert (created.x, created.y) == (5, 6)


def test_default_registration_targets_shared_instance():
    shared = register_default_shapes()
    assert shared is ShapeFactory.instance()
    assert "Ponto" in shared.names()


def test_names_order(factory):
    assert factory.names() == ["Ponto", "Quadrado", "Reta", "Triangulo", "Circunferencia"]


def test_empty_factory_has_no_names():
    assert ShapeFactory().names() == []


def test_create_point(factory):
    p = factory.create_simple("Ponto", 3, 4, "#ff0000")
    assert isinstance(p, Point)
    assert (p.x, p.y, p.color) == (3, 4, "#ff0000")


def test_create_line(factory):
    line = factory.create_complex("Reta", 1, 2, 3, 4, "#ff0000")
    assert isinstance(line, Line)
    assert (line.p1.x, line.p1.y, line.p2.x, line.p2.y) == (1, 2, 3, 4)


def test_create_square_corners(factory):
    sq = factory.create_complex("Quadrado", 1, 2, 5, 6, "#ff0000")
    assert isinstance(sq, Square)
    assert (sq.p1.x, sq.p1.y) == (1, 2)
    assert (sq.p2.x, sq.p2.y) == (5, 6)
    assert (sq.p3.x, sq.p3.y) == (1, 6)
    assert (sq.p4.x, sq.p4.y) == (5, 2)
    assert sq.name == ""


def test_create_triangle(factory):
    tri = factory.create_triangle("Triangulo", 0, 0, 4, 0, 0, 3, "#ff0000")
    assert isinstance(tri, Triangle)
    assert [(p.x, p.y) for p in (tri.p1, tri.p2, tri.p3)] == [(0, 0), (4, 0), (0, 3)]


def test_create_circle(factory):
    circle = factory.create_circle("Circunferencia", 1, 2, 7, "#ff0000")
    assert isinstance(circle, Circle)
    assert (circle.center.x, circle.center.y, circle.radius) == (1, 2, 7)


def test_unknown_names_give_none(factory):
    assert factory.create_simple("Reta", 0, 0, "#000000") is None
    assert factory.create_complex("Ponto", 0, 0, 1, 1, "#000000") is None
    assert factory.create_triangle("Nada", 0, 0, 1, 1, 2, 2, "#000000") is None
    assert factory.create_circle("Nada", 0, 0, 1, "#000000") is None


def test_custom_creator_receives_arguments():
    factory = ShapeFactory()
    calls = []

    def creator(x, y, color):
        calls.append((x, y, color))
        return Point(x, y, color)

    factory.register_simple("Custom", creator)
    result = factory.create_simple("Custom", 8, 9, "#123456")
    assert calls == [(8, 9, "#123456")]
    assert (result.x, result.y) == (8, 9)


def test_reregistering_replaces_creator():
    factory = ShapeFactory()
    factory.register_simple("P", lambda x, y, c: Point(x, y, c))
    factory.register_simple("P", lambda x, y, c: Point(y, x, c))
    p = factory.create_simple("P", 1, 2, "#000000")
    assert (p.x, p.y) == (2, 1)
    assert factory.names() == ["P"]