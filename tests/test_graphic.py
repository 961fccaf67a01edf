import pytest

from cgdisplay.graphic import (
    GraphicObject,
    Painter,
    Pen,
    RecordingPainter,
    color_name,
    is_valid_color,
)


@pytest.mark.parametrize(
    "value", ["#ff0000", "#FF0000", "#f00", "#00000000", "black", "Blue", (1, 2, 3), (1, 2, 3, 4)]
)
def test_valid_colors(value):
    assert is_valid_color(value) is True


@pytest.mark.parametrize(
    "value", ["", "#", "#12", "#12345", "#gg0000", "nope", (300, 0, 0), (1, 2), (True, 0, 0), None, 5]
)
def test_invalid_colors(value):
    assert is_valid_color(value) is False


def test_color_name_lowercases_hex():
    assert color_name("#FF00AA") == "#ff00aa"


def test_color_name_expands_short_form():
    assert color_name("#f00") == "#ff0000"


def test_color_name_drops_alpha():
    assert color_name("#80ff0000") == "#ff0000"
    assert color_name("#00000000") == "#000000"


def test_color_name_of_named_and_tuple():
    assert color_name("black") == "#000000"
    assert color_name((255, 128, 0)) == "#ff8000"


def test_color_name_invalid_raises():
    with pytest.raises(ValueError):
        color_name("#xyz")


def test_graphic_object_defaults():
    obj = GraphicObject("#123456")
    assert obj.color == "#123456"
    assert obj.size == 1.0
    assert obj.radius == 1.0
    assert obj.model_transformed is False
    assert obj.viewport_transformed is False


def test_transform_flags():
    obj = GraphicObject()
    obj.mark_model_transformed()
    obj.mark_viewport_transformed()
    assert obj.model_transformed and obj.viewport_transformed
    obj.reset_model_transformed()
    assert obj.model_transformed is False
    assert obj.viewport_transformed is True
    obj.reset_viewport_transformed()
    assert obj.viewport_transformed is False


def test_pen_uses_color_and_integer_size():
    obj = GraphicObject("red")
    assert obj.pen() == Pen("red", 1)
    obj.size = 4.0
    pen = obj.pen()
    assert pen.width == 4
    assert isinstance(pen.width, int)


def test_draw_selects_pen():
    obj = GraphicObject("#abcdef")
    painter = RecordingPainter()
    obj.draw(painter)
    assert painter.pen == obj.pen()
    assert painter.operations == []


def test_recording_painter_records_strokes():
    painter = RecordingPainter()
    assert isinstance(painter, Painter)
    pen = Pen("blue", 2)
    painter.set_pen(pen)
    painter.draw_point(1.0, 2.0)
    painter.draw_line(0.0, 0.0, 5.0, 6.0)
    assert painter.operations == [
        ("point", pen, 1.0, 2.0),
        ("line", pen, 0.0, 0.0, 5.0, 6.0),
    ]