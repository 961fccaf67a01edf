# cgdisplay

`cgdisplay` is a small model of a 2D vector drawing program. It has
homogeneous-coordinate matrices, graphic objects (points, lines, squares,
triangles and circles), a display file that holds them, a shape factory, a
drawing frame that maps a world window onto a viewport, and an editor that
ties these together.

It needs no third-party libraries. Drawing goes through a painter object, so
the model works without any GUI toolkit. `RecordingPainter` keeps every
`set_pen`, `draw_point` and `draw_line` call in its `operations` list.

## Matrices (`cgdisplay.matrix`)

```python
from cgdisplay.matrix import Matrix

rotate = Matrix.rotation_2d(90)
move = Matrix.translation_2d(5, -2)
combined = move @ rotate          # same as move * rotate or move.multiply(rotate)

print(combined.is_square())       # True
print(Matrix.identity(4))
```

2D transforms are 3×3 matrices (`translation_2d`, `scaling_2d`,
`rotation_2d`). 3D transforms are 4×4 matrices (`translation_3d`,
`scaling_3d`, `rotation_x_3d`, `rotation_y_3d`, `rotation_z_3d`). Angles are
in degrees. Entries are read and written as `m[i][j]`. `resize` changes the
shape, keeps the entries that overlap and fills the rest with zeros.
`Matrix.random(rows, cols, low, high)` draws values uniformly from the range.

The following raise `ValueError`:

- multiplying matrices whose shapes do not fit;
- asking for a matrix with a non-positive size (`Matrix()` with no arguments
  is an empty 0×0 matrix).

## Colours, pens and painters (`cgdisplay.graphic`)

Colours are given as strings or tuples:

- `"#rgb"`, `"#rrggbb"` or `"#aarrggbb"`;
- a few names such as `"black"`, `"red"` or `"transparent"`;
- an RGB or RGBA tuple of integers from 0 to 255.

`is_valid_color` checks a value. `color_name` returns it as lower-case
`#rrggbb`; it raises `ValueError` for an invalid colour.

Every drawable derives from `GraphicObject`. It holds:

- a `color` and a `size`; `pen()` returns a `Pen` whose width is `int(size)`;
- flags for model and viewport transforms.

## Shapes (`cgdisplay.point`, `cgdisplay.shapes`)

### Points

`Point(x, y, color, z=None)` is a homogeneous column vector. It is 3×1 for a
2D point. It becomes 4×1 once a depth is given, either at construction or
through `set_z`. `distance`, `normalize` and `is_3d` work on it directly.

### Line, Square, Triangle and Circle

These take copies of the points they are given.

| Shape | `apply_transform` transforms about |
| --- | --- |
| `Line` | its midpoint |
| `Square` | the midpoint of `p1` and `p2` |
| `Triangle` | its centroid |
| `Circle` | its centre |

A `Circle` transforms its centre and a point on its rim. The new radius is
the distance between them, truncated to a whole number.

## Shape factory and display file (`cgdisplay.factory`, `cgdisplay.repository`)

```python
from cgdisplay.factory import ShapeFactory, register_default_shapes
from cgdisplay.repository import DisplayFile

factory = ShapeFactory.instance()
register_default_shapes(factory)
print(factory.names())            # ['Ponto', 'Quadrado', 'Reta', 'Triangulo', 'Circunferencia']

display = DisplayFile()
display.add(factory.create_complex("Reta", 0, 0, 40, 30, "#ff0000"))
display.add(factory.create_circle("Circunferencia", 50, 50, 10, "#0000ff"))

for shape in display:
    print(shape)
```

The factory keeps one registry per constructor signature:

- `create_simple` for a point;
- `create_complex` for a line or a square given by two corners;
- `create_triangle`;
- `create_circle`.

It returns `None` for a name that has not been registered. `names()` lists
the names of each registry in sorted order.

`DisplayFile.update` and `DisplayFile.remove` ignore an index that is out of
range. Indexing with `display[i]` raises `IndexError` for such an index.

## Frame and editor (`cgdisplay.frame`, `cgdisplay.editor`)

```python
from cgdisplay.frame import DrawingFrame
from cgdisplay.editor import Editor
from cgdisplay.graphic import RecordingPainter

frame = DrawingFrame(400, 400)    # uses the shared factory with the default shapes
editor = Editor(frame)

editor.choose_color("#008000")
editor.draw("Triangulo", 10, 10, 60, 10, 35, 50)

print(editor.entries())           # the window square comes first, then the triangle

painter = RecordingPainter()
frame.paint(painter)
print(len(painter.operations))
```

### The window

The first shape added to an empty display file comes after a square named
`"Window"`, from (0, 0) to (100, 100). Its corners set the world window.

`DrawingFrame.to_viewport(x, y)` maps a world point into the viewport and
then to pixels, with the y axis flipped. It raises `ValueError` while the
window has no width or height. `paint` draws each object through this
mapping. Circles are drawn as a ring of sample points.

### Editing

- `editor.select(index)` selects an entry. It loads that entry's coordinates
  and colour, and the next `draw` then replaces the entry.
- `delete_selected` removes the selected entry.
- `transform(scale=..., rotation=..., translation=...)` scales, then rotates,
  then translates the selected shape about its centre. Transforming the window
  square (index 0) moves the world window with it.
- `visible_fields(shape)` tells which input values a shape kind uses.

Refused actions raise `EditorError` with a message, for example:

- drawing before a colour is chosen;
- transforming with nothing selected or no transform given;
- a zero scale factor, a zero rotation or a zero translation.

## What it does not do

The package has no window, widgets or on-screen rendering, and no command to
start. It is a model to drive from Python code, and it paints only through a
painter object you supply. It does not save drawings to files. Shape
transforms are 2D: they take 3×3 matrices.

## Running the tests

The test suite uses pytest, listed in the `test` extra:

```
pip install -e .[test]
pytest
```