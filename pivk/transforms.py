"""Rotation, viewing and projection matrices built on :class:`Matrix`."""

from __future__ import annotations

import math
from typing import Sequence

from .matrix import Matrix, cross, degrees_to_radians, dot, normalize


def _sin_cos(angle: float) -> tuple[float, float]:
    radians = degrees_to_radians(angle)
    return math.sin(radians), math.cos(radians)


def rotate_x(angle: float) -> Matrix:
    """Rotation around the X axis by an angle in degrees."""
    s, c = _sin_cos(angle)
    return Matrix.from_values(1, 0, 0, 0,
                              0, c, s, 0,
                              0, -s, c, 0,
                              0, 0, 0, 1)


def rotate_y(angle: float) -> Matrix:
    """Rotation around the Y axis by an angle in degrees."""
    s, c = _sin_cos(angle)
    return Matrix.from_values(c, 0, -s, 0,
                              0, 1, 0, 0,
                              s, 0, c, 0,
                              0, 0, 0, 1)


def rotate_z(angle: float) -> Matrix:
    """Rotation around the Z axis by an angle in degrees."""
    s, c = _sin_cos(angle)
    return Matrix.from_values(c, s, 0, 0,
                              -s, c, 0, 0,
                              0, 0, 1, 0,
                              0, 0, 0, 1)


def rotate(angle: float, axis: Sequence[float]) -> Matrix:
    """Rotation around an arbitrary axis by an angle in degrees."""
    s, c = _sin_cos(angle)
    x, y, z = normalize(axis)
    k = 1 - c
    return Matrix.from_values(
        c + x * x * k, x * y * k + z * s, x * z * k - y * s, 0,
        y * x * k - z * s, c + y * y * k, y * z * k + x * s, 0,
        z * x * k + y * s, z * y * k - x * s, c + z * z * k, 0,
        0, 0, 0, 1,
    )


def view(loc: Sequence[float], at: Sequence[float], up: Sequence[float]) -> Matrix:
    """Look-at viewer matrix from a location, a target point and an approximate up."""
    direction = normalize(tuple(a - l for a, l in zip(at, loc)))
    right = normalize(cross(direction, up))
    true_up = normalize(cross(right, direction))
    return Matrix.from_values(
        right[0], true_up[0], -direction[0], 0,
        right[1], true_up[1], -direction[1], 0,
        right[2], true_up[2], -direction[2], 0,
        -dot(loc, right), -dot(loc, true_up), dot(loc, direction), 1,
    )


def frustum(left: float, right: float, bottom: float, top: float,
            near: float, far: float) -> Matrix:
    """Perspective projection matrix for the given frustum."""
    return Matrix.from_values(
        2 * near / (right - left), 0, 0, 0,
        0, 2 * near / (top - bottom), 0, 0,
        (right + left) / (right - left), (top + bottom) / (top - bottom),
        -(far + near) / (far - near), -1,
        0, 0, -2 * near * far / (far - near), 0,
    )


def ortho(left: float, right: float, bottom: float, top: float,
          near: float, far: float) -> Matrix:
    """Orthographic projection matrix for the given box."""
    return Matrix.from_values(
        2 / (right - left), 0, 0, 0,
        0, 2 / (top - bottom), 0, 0,
        0, 0, -2 / (far - near), 0,
        -(right + left) / (right - left), -(top + bottom) / (top - bottom),
        -(far + near) / (far - near), 1,
    )