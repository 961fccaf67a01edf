import math

import pytest

from cgdisplay.factory import ShapeFactory, register_default_shapes
from cgdisplay.graphic import Pen, RecordingPainter
from cgdisplay.point import Point
from cgdisplay.repository import DisplayFile
from cgdisplay.shapes import Circle, Square, Triangle
from cgdisplay.frame import DrawingFrame


def make_frame():
    frame = DrawingFrame(400, 400, register_default_shapes(ShapeFactory()))
    repo = DisplayFile()
    frame.set_repository(repo)
    return frame, repo


def test_unset_window_cannot_map():
    frame, _ = make_frame()
    with pytest.raises(ValueError):
        frame.to_viewport(1, 1)


def test_plain_window_maps_corners_with_flipped_y():
    frame, _ = make_frame()
    frame.set_window(0, 0, 100, 100)
    assert frame.to_viewport(0, 0) == (0.0, float(frame.height))
    assert frame.to_viewport(100, 100) == (float(frame.width), 0.0)


def test_smaller_viewport_halves_coordinates():
    frame, _ = make_frame()
    frame.set_window(0, 0, 100, 100)
    full = frame.to_viewport(100, 30)
    frame.set_viewport(0, 0, 0.5, 0.5)
    half = frame.to_viewport(100, 30)
    assert half == pytest.approx((full[0] / 2, full[1] / 2))


def test_first_shape_adds_window():
    frame, repo = make_frame()
    created = frame.add_shape("Ponto", 50, 50, color="red")
    assert len(repo) == 2
    window = repo[0]
    assert isinstance(window, Square)
    assert window.name == "Window"
    assert str(window) == "Window: P1(0, 0), P2(100, 100), Cor: #000000"
    assert repo[1] is created
    assert frame.to_viewport(0, 0) == (0.0, 0.0)
    assert frame.to_viewport(100, 100) == (float(frame.width), float(frame.height))


def test_invalid_color_creates_nothing():
    frame, repo = make_frame()
    assert frame.add_shape("Ponto", 1, 1, color="#zzz") is None
    assert len(repo) == 0


def test_without_repository_nothing_is_created():
    frame = DrawingFrame(400, 400, register_default_shapes(ShapeFactory()))
    assert frame.add_shape("Ponto", 1, 1, color="red") is None


def test_unknown_kind_still_adds_window():
    frame, repo = make_frame()
    assert frame.add_shape("Hexagono", 1, 1, color="red") is None
    assert len(repo) == 1


def test_index_replaces_existing_object():
    frame, repo = make_frame()
    frame.add_shape("Ponto", 1, 2, color="red")
    replaced = frame.add_shape("Triangulo", 0, 0, 10, 0, 0, 10, color="blue", index=1)
    assert len(repo) == 2
    assert isinstance(repo[1], Triangle)
    assert repo[1] is replaced


def test_out_of_range_index_appends():
    frame, repo = make_frame()
    frame.add_shape("Ponto", 1, 2, color="red")
    frame.add_shape("Circunferencia", 5, 5, radius=3, color="blue", index=9)
    assert len(repo) == 3
    assert isinstance(repo[2], Circle)


def test_paint_without_repository_draws_nothing():
    frame = DrawingFrame(400, 400, register_default_shapes(ShapeFactory()))
    painter = RecordingPainter()
    frame.paint(painter)
    assert painter.operations == []


def test_paint_point_uses_mapping_and_pen():
    frame, _ = make_frame()
    frame.add_shape("Ponto", 50, 20, color="red")
    painter = RecordingPainter()
    frame.paint(painter)
    x, y = frame.to_viewport(50, 20)
    assert painter.operations[-1] == ("point", Pen("red", 1), x, y)


def test_paint_window_is_closed_outline():
    frame, _ = make_frame()
    frame.add_shape("Ponto", 50, 50, color="red")
    painter = RecordingPainter()
    frame.paint(painter)
    lines = painter.operations[:4]
    assert all(op[0] == "line" and op[1] == Pen("#00000000", 1) for op in lines)
    for current, following in zip(lines, lines[1:] + lines[:1]):
        assert current[4:6] == following[2:4]


def test_paint_triangle_has_three_connected_edges():
    frame, _ = make_frame()
    frame.add_shape("Triangulo", 10, 10, 90, 10, 50, 80, color="blue")
    painter = RecordingPainter()
    frame.paint(painter)
    edges = painter.operations[4:]
    assert len(edges) == 3
    assert edges[0][2:4] == frame.to_viewport(10, 10)
    for current, following in zip(edges, edges[1:] + edges[:1]):
        assert current[4:6] == following[2:4]


def test_paint_circle_samples_lie_on_ring():
    frame, _ = make_frame()
    frame.add_shape("Circunferencia", 50, 50, radius=10, color="green")
    painter = RecordingPainter()
    frame.paint(painter)
    samples = painter.operations[4:]
    cx, cy = frame.to_viewport(50, 50)
    assert len(samples) > 0
    for op in samples:
        assert math.hypot(op[2] - cx, op[3] - cy) == pytest.approx(40.0)
        assert op[1] == Pen("green", 1)


def test_added_shapes_keep_given_coordinates():
    frame, repo = make_frame()
    frame.add_shape("Reta", 3, 4, 7, 8, color="red")
    line = repo[1]
    assert (line.p1.x, line.p1.y, line.p2.x, line.p2.y) == (3, 4, 7, 8)
    assert isinstance(line.p1, Point)