"""Dense real matrices and homogeneous transformation matrices."""

from __future__ import annotations

import math
import random as _random


class Matrix:
    """A ``rows`` x ``cols`` matrix of floats, indexed as ``m[i][j]``."""

    def __init__(self, rows: int = 0, cols: int = 0, fill: float = 0.0) -> None:
        if (rows, cols) != (0, 0) and (rows <= 0 or cols <= 0):
            raise ValueError("matrix dimensions must be positive")
        self.rows = rows
        self.cols = cols
        self._data = [[float(fill)] * cols for _ in range(rows)]

    def __getitem__(self, index: int) -> list[float]:
        """Return row ``index``; the row is live, so ``m[i][j] = v`` writes through."""
        return self._data[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (self.rows, self.cols) == (other.rows, other.cols) and self._data == other._data

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"

    def __str__(self) -> str:
        return "\n".join(" ".join(f"{value:g}" for value in row) for row in self._data)

    def __matmul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    def __mul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    def multiply(self, other: Matrix) -> Matrix:
        """Return the matrix product ``self x other``."""
        if self.cols != other.rows:
            raise ValueError("incompatible dimensions for multiplication")
        result = Matrix(self.rows, other.cols)
        columns = list(zip(*other._data))
        result._data = [
            [sum(a * b for a, b in zip(row, column)) for column in columns]
            for row in self._data
        ]
        return result

    def resize(self, rows: int, cols: int) -> None:
        """Change the shape, keeping overlapping entries and zero-filling the rest."""
        if rows < 0 or cols < 0:
            raise ValueError("matrix dimensions must not be negative")
        old = self._data
        self._data = [
            [
                old[i][j] if i < self.rows and j < self.cols else 0.0
                for j in range(cols)
            ]
            for i in range(rows)
        ]
        self.rows = rows
        self.cols = cols

    def same_shape(self, other: Matrix) -> bool:
        return self.rows == other.rows and self.cols == other.cols

    def is_square(self) -> bool:
        return self.rows == self.cols

    @staticmethod
    def identity(size: int) -> Matrix:
        if size <= 0:
            raise ValueError("invalid identity size")
        result = Matrix(size, size, 0.0)
        for i, row in enumerate(result._data):
            row[i] = 1.0
        return result

    @staticmethod
    def translation_2d(tx: float, ty: float) -> Matrix:
        result = Matrix.identity(3)
        result[0][2] = tx
        result[1][2] = ty
        return result

    @staticmethod
    def scaling_2d(sx: float, sy: float) -> Matrix:
        result = Matrix.identity(3)
        result[0][0] = sx
        result[1][1] = sy
        return result

    @staticmethod
    def rotation_2d(degrees: float) -> Matrix:
        cos, sin = _cos_sin(degrees)
        result = Matrix.identity(3)
        result[0][0] = cos
        result[0][1] = -sin
        result[1][0] = sin
        result[1][1] = cos
        return result

    @staticmethod
    def translation_3d(tx: float, ty: float, tz: float) -> Matrix:
        result = Matrix.identity(4)
        result[0][3] = tx
        result[1][3] = ty
        result[2][3] = tz
        return result

    @staticmethod
    def scaling_3d(sx: float, sy: float, sz: float) -> Matrix:
        result = Matrix.identity(4)
        result[0][0] = sx
        result[1][1] = sy
        result[2][2] = sz
        return result

    @staticmethod
    def rotation_x_3d(degrees: float) -> Matrix:
        cos, sin = _cos_sin(degrees)
        result = Matrix.identity(4)
        result[1][1] = cos
        result[1][2] = -sin
        result[2][1] = sin
        result[2][2] = cos
        return result

    @staticmethod
    def rotation_y_3d(degrees: float) -> Matrix:
        cos, sin = _cos_sin(degrees)
        result = Matrix.identity(4)
        result[0][0] = cos
        result[0][2] = sin
        result[2][0] = -sin
        result[2][2] = cos
        return result

    @staticmethod
    def rotation_z_3d(degrees: float) -> Matrix:
        cos, sin = _cos_sin(degrees)
        result = Matrix.identity(4)
        result[0][0] = cos
        result[0][1] = -sin
        result[1][0] = sin
        result[1][1] = cos
        return result

    @staticmethod
    def random(rows: int, cols: int, low: float = 0.0, high: float = 10.0) -> Matrix:
        """Return a matrix of values drawn uniformly from ``[low, high]``."""
        result = Matrix(rows, cols)
        result._data = [[_random.uniform(low, high) for _ in range(cols)] for _ in range(rows)]
        return result


def _cos_sin(degrees: float) -> tuple[float, float]:
    radians = degrees * math.pi / 180.0
    return math.cos(radians), math.sin(radians)