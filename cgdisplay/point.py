"""Points held as homogeneous column vectors."""

from __future__ import annotations

import math
from copy import deepcopy
from typing import Any

from cgdisplay.graphic import GraphicObject, Painter, _format_number
from cgdisplay.matrix import Matrix


class Point(GraphicObject, Matrix):
    """A drawable point: a 3x1 column ``(x, y, 1)``, or 4x1 ``(x, y, z, 1)`` once it has depth."""

    def __init__(self, x: float, y: float, color: Any = "black", z: float | None = None) -> None:
        GraphicObject.__init__(self, color)
        Matrix.__init__(self, 3, 1, 1.0)
        self._data[0][0] = float(x)
        self._data[1][0] = float(y)
        if z is not None:
            self.set_z(z)

    def __str__(self) -> str:
        if self.is_3d():
            return (
                f"Ponto3D({_format_number(self.x)}, {_format_number(self.y)}, "
                f"{_format_number(self.z)})"
            )
        return f"Ponto({_format_number(self.x)}, {_format_number(self.y)})"

    @property
    def x(self) -> float:
        return self._data[0][0]

    @x.setter
    def x(self, value: float) -> None:
        self._data[0][0] = value

    @property
    def y(self) -> float:
        return self._data[1][0]

    @y.setter
    def y(self, value: float) -> None:
        self._data[1][0] = value

    @property
    def z(self) -> float:
        """Depth; a 2D point has depth 0."""
        if self.rows == 3:
            return 0.0
        return self._data[2][0]

    def set_z(self, z: float) -> None:
        """Set the depth, turning a 2D point into a 3D one if needed."""
        if self.rows != 4:
            self.resize(4, 1)
            self._data[3][0] = 1.0
        self._data[2][0] = z

    def copy(self) -> Point:
        return deepcopy(self)

    def draw(self, painter: Painter) -> None:
        super().draw(painter)
        painter.draw_point(self.x, self.y)

    def apply_transform(self, transform: Matrix, center: Point) -> None:
        """Apply ``transform`` about ``center`` in place."""
        n = self.rows
        if transform.rows != n or transform.cols != n:
            raise ValueError("the transform must be an NxN matrix matching the point")
        to_origin = Matrix.translation_2d(-center.x, -center.y)
        back = Matrix.translation_2d(center.x, center.y)
        result = back @ transform @ to_origin @ self
        for target, source in zip(self._data, result._data):
            target[0] = source[0]

    def normalize(self) -> None:
        """Divide by the homogeneous component unless it is 0 or 1."""
        w = self._data[-1][0]
        if w != 0 and w != 1:
            for row in self._data[:-1]:
                row[0] /= w
            self._data[-1][0] = 1.0

    def distance(self, other: Point) -> float:
        """Euclidean distance over the coordinates both points have."""
        dims = min(self.rows, other.rows) - 1
        return math.sqrt(
            sum((a[0] - b[0]) ** 2 for a, b in zip(self._data[:dims], other._data[:dims]))
        )

    def is_3d(self) -> bool:
        return self.rows == 4

    def assign(self, matrix: Matrix) -> Point:
        """Take the shape and values of ``matrix``, keeping this point's colour."""
        if matrix is not self:
            self.rows = matrix.rows
            self.cols = matrix.cols
            self._data = [list(row) for row in matrix._data]
        return self