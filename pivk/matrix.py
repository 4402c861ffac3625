"""4x4 matrices and 3D vector helpers for row-vector transforms."""

from __future__ import annotations

import math
from typing import Iterable, Iterator, Sequence

Vec3 = tuple[float, float, float]
Vec4 = tuple[float, float, float, float]

PI_180 = math.pi / 180.0
D180_PI = 180.0 / math.pi


def degrees_to_radians(angle: float) -> float:
    """Convert an angle from degrees to radians."""
    return angle * PI_180


def radians_to_degrees(angle: float) -> float:
    """Convert an angle from radians to degrees."""
    return angle * D180_PI


def dot(a: Sequence[float], b: Sequence[float]) -> float:
    """Dot product of two vectors of equal length."""
    if len(a) != len(b):
        raise ValueError("vectors must have the same length")
    return sum(x * y for x, y in zip(a, b))


def cross(a: Sequence[float], b: Sequence[float]) -> Vec3:
    """Cross product of two 3D vectors."""
    ax, ay, az = a
    bx, by, bz = b
    return (ay * bz - az * by, az * bx - ax * bz, ax * by - ay * bx)


def normalize(v: Sequence[float]) -> tuple[float, ...]:
    """Return the vector scaled to unit length; a zero vector is returned unchanged."""
    length = math.sqrt(dot(v, v))
    if length == 0:
        return tuple(float(c) for c in v)
    return tuple(c / length for c in v)


def determ3x3(a11, a12, a13, a21, a22, a23, a31, a32, a33) -> float:
    """Determinant of a 3x3 matrix given by its nine elements."""
    return (a11 * a22 * a33 + a12 * a23 * a31 + a13 * a21 * a32
            - a11 * a23 * a32 - a12 * a21 * a33 - a13 * a22 * a31)


_SIGNS = (1, -1)
_MINOR_INDICES = ((1, 2, 3), (0, 2, 3), (0, 1, 3), (0, 1, 2))


class Matrix:
    """Immutable 4x4 matrix; vectors are treated as rows and multiplied on the left."""

    __slots__ = ("_rows",)

    def __init__(self, rows: Iterable[Iterable[float]]):
        rows = tuple(tuple(float(x) for x in row) for row in rows)
        if len(rows) != 4 or any(len(row) != 4 for row in rows):
            raise ValueError("a matrix needs 4 rows of 4 values")
        self._rows = rows

    @classmethod
    def identity(cls) -> "Matrix":
        """The identity matrix."""
        return cls((1.0 if i == j else 0.0 for j in range(4)) for i in range(4))

    @classmethod
    def from_values(cls, *args: float) -> "Matrix":
        """Build a matrix from 16 values in row-major order."""
        if len(args) != 16:
            raise ValueError("a matrix needs exactly 16 values")
        return cls(args[i:i + 4] for i in range(0, 16, 4))

    @classmethod
    def translate(cls, t: Sequence[float]) -> "Matrix":
        """Translation by the vector t."""
        tx, ty, tz = t
        return cls.from_values(1, 0, 0, 0,
                               0, 1, 0, 0,
                               0, 0, 1, 0,
                               tx, ty, tz, 1)

    @classmethod
    def scale(cls, s: Sequence[float]) -> "Matrix":
        """Scaling by the components of s."""
        sx, sy, sz = s
        return cls.from_values(sx, 0, 0, 0,
                               0, sy, 0, 0,
                               0, 0, sz, 0,
                               0, 0, 0, 1)

    def __mul__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        columns = tuple(zip(*other._rows))
        return Matrix(
            (sum(a * b for a, b in zip(row, col)) for col in columns)
            for row in self._rows
        )

    def __getitem__(self, index: int) -> tuple[float, ...]:
        if not isinstance(index, int) or not 0 <= index <= 3:
            raise IndexError("matrix row index must be in 0..3")
        return self._rows[index]

    def __iter__(self) -> Iterator[tuple[float, ...]]:
        return iter(self._rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)

    def __repr__(self) -> str:
        return f"Matrix({[list(row) for row in self._rows]!r})"

    def __str__(self) -> str:
        lines = [",".join(f"{v:g}" for v in row) for row in self._rows]
        return "(" + ",\n ".join(lines) + ")"

    def transpose(self) -> "Matrix":
        """The transposed matrix."""
        return Matrix(zip(*self._rows))

    def _minor(self, i: int, j: int) -> float:
        ri, cj = _MINOR_INDICES[i], _MINOR_INDICES[j]
        m = self._rows
        return determ3x3(*(m[r][c] for r in ri for c in cj))

    def determinant(self) -> float:
        """Determinant of the matrix."""
        row = self._rows[0]
        return sum(_SIGNS[j % 2] * row[j] * self._minor(0, j) for j in range(4))

    def inverse(self) -> "Matrix":
        """Inverse of the matrix; the identity when the matrix is singular."""
        det = self.determinant()
        if det == 0:
            return Matrix.identity()
        return Matrix(
            (_SIGNS[(i + j) % 2] * self._minor(i, j) / det for i in range(4))
            for j in range(4)
        )

    def _apply(self, v: Sequence[float], w: float) -> Vec4:
        x, y, z = v
        m = self._rows
        return tuple(x * m[0][k] + y * m[1][k] + z * m[2][k] + w * m[3][k]
                     for k in range(4))

    def transform_point(self, v: Sequence[float]) -> Vec3:
        """Transform a point, applying translation."""
        return self._apply(v, 1.0)[:3]

    def transform_vector(self, v: Sequence[float]) -> Vec3:
        """Transform a direction, ignoring translation."""
        return self._apply(v, 0.0)[:3]

    def transform_normal(self, v: Sequence[float]) -> Vec3:
        """Transform a normal by the inverse transpose of the matrix."""
        return self.transpose().inverse().transform_vector(v)

    def transform4x4(self, v: Sequence[float]) -> tuple[float, ...]:
        """Full 4x4 transform: a 3D point is divided by w, a 4D vector is returned whole."""
        if len(v) == 3:
            x, y, z, w = self._apply(v, 1.0)
            return (x / w, y / w, z / w)
        if len(v) == 4:
            m = self._rows
            return tuple(sum(v[r] * m[r][k] for r in range(4)) for k in range(4))
        raise ValueError("transform4x4 takes a 3D or 4D vector")