"""Vertex formats and primitive topologies."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]


class PrimType(Enum):
    """How the vertices of a primitive form a shape."""

    TRIMESH = "trimesh"
    POINTS = "points"
    STRIP = "strip"


@dataclass
class Vertex:
    """Standard vertex: position, texture coordinates and normal."""

    p: Vec3 = (0.0, 0.0, 0.0)
    t: Vec2 = (0.0, 0.0)
    n: Vec3 = (0.0, 0.0, 0.0)


@dataclass
class PointVertex:
    """Vertex holding only a position."""

    p: Vec3 = (0.0, 0.0, 0.0)


@dataclass
class Topology:
    """Primitive type with its vertex and index arrays."""

    type: PrimType = PrimType.TRIMESH
    vertices: list = field(default_factory=list)
    indices: list[int] = field(default_factory=list)

    def __post_init__(self):
        self.vertices = list(self.vertices)
        self.indices = list(self.indices)


class TriMesh(Topology):
    """Triangle mesh topology."""

    def __init__(self, vertices: Iterable, indices: Iterable[int] = ()):
        super().__init__(PrimType.TRIMESH, list(vertices), list(indices))