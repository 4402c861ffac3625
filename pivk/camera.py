"""Perspective camera holding view and projection matrices."""

from __future__ import annotations

from typing import Sequence

from .matrix import Matrix, Vec3
from .transforms import frustum, view


def _add(a: Sequence[float], b: Sequence[float]) -> Vec3:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def _mul(a: Sequence[float], k: float) -> Vec3:
    return (a[0] * k, a[1] * k, a[2] * k)


class Camera:
    """A camera in space with a location, a basis and a frustum projection."""

    def __init__(self):
        self.loc: Vec3 = (0.0, 0.0, 5.0)
        self.dir: Vec3 = (0.0, 0.0, -1.0)
        self.up: Vec3 = (0.0, 1.0, 0.0)
        self.right: Vec3 = (1.0, 0.0, 0.0)
        self.at: Vec3 = (0.0, 0.0, 0.0)
        self.proj_dist = 0.1
        self.far_clip = 500.0
        self.size = 0.1
        self.frame_w = 30
        self.frame_h = 30
        self.wp = self.size
        self.hp = self.size
        self.view = view(self.loc, self.at, self.up)
        self.proj = Matrix.identity()
        self.vp = self.view * self.proj
        self._update_proj()

    def _update_proj(self) -> None:
        rx = ry = self.size
        if self.frame_w > self.frame_h:
            rx *= self.frame_w / self.frame_h
        else:
            ry *= self.frame_h / self.frame_w
        self.wp, self.hp = rx, ry
        self.proj = frustum(-rx / 2, rx / 2, -ry / 2, ry / 2,
                            self.proj_dist, self.far_clip)
        self.vp = self.view * self.proj

    def set_proj(self, size: float, proj_dist: float, far_clip: float) -> "Camera":
        """Set the projection plane size and the near and far distances."""
        self.size = size
        self.proj_dist = proj_dist
        self.far_clip = far_clip
        self._update_proj()
        return self

    def resize(self, frame_w: int, frame_h: int) -> "Camera":
        """Set the frame size in pixels."""
        self.frame_w = frame_w
        self.frame_h = frame_h
        self._update_proj()
        return self

    def set_loc_at_up(self, loc: Sequence[float], at: Sequence[float],
                      up: Sequence[float] = (0.0, 1.0, 0.0)) -> "Camera":
        """Place the camera at loc looking at at, with the approximate up direction."""
        self.view = view(loc, at, up)
        m = self.view
        self.right = (m[0][0], m[1][0], m[2][0])
        self.up = (m[0][1], m[1][1], m[2][1])
        self.dir = (-m[0][2], -m[1][2], -m[2][2])
        self.loc = tuple(float(c) for c in loc)
        self.at = tuple(float(c) for c in at)
        self.vp = self.view * self.proj
        return self

    def frame_ray(self, xs: float, ys: float) -> tuple[Vec3, Vec3]:
        """Ray through the frame pixel (xs, ys) as (origin, direction)."""
        half_w = int(self.frame_w / 2)
        half_h = int(self.frame_h / 2)
        q = _add(
            _add(_mul(self.dir, self.proj_dist),
                 _mul(self.right, (xs - half_w) * self.wp / self.frame_w)),
            _mul(self.up, (half_h - ys) * self.hp / self.frame_h),
        )
        return _add(self.loc, q), q