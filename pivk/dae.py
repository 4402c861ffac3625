"""Triangle geometry loading from COLLADA scene documents."""

from __future__ import annotations

import re
from enum import Enum
from itertools import islice
from pathlib import Path
from typing import Callable, Iterable, Iterator, TypeVar, Union

from .topology import Vertex
from .xml import XmlNode, parse_file, parse_text

N = TypeVar("N", int, float)

Primitive = tuple[list[Vertex], list[int]]

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


class _Semantic(Enum):
    VERTEX = "VERTEX"
    NORMAL = "NORMAL"
    TEXCOORD = "TEXCOORD"
    UNKNOWN = "UNKNOWN"


_SEMANTICS = {
    "VERTEX": _Semantic.VERTEX,
    "NORMAL": _Semantic.NORMAL,
    "TEXCOORD": _Semantic.TEXCOORD,
}


def _leading_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _numbers(text: str, convert: Callable[[str], N]) -> Iterator[N]:
    """Numbers read from whitespace separated text, up to the first bad token."""
    for token in text.split():
        try:
            yield convert(token)
        except ValueError:
            return


def _read_sources(mesh: XmlNode) -> dict[str, list[float]]:
    sources: dict[str, list[float]] = {}
    for source in mesh.find_elems("source"):
        array = source.find_elem("float_array")
        if array is None:
            continue
        size = max(0, _leading_int(array.args.get("count", "")))
        values = list(islice(_numbers(array.data, float), size))
        values.extend([0.0] * (size - len(values)))
        technique = source.find_elem("technique_common")
        if technique is None or technique.find_elem("accessor") is None:
            continue
        sources["#" + source.args.get("id", "")] = values
    return sources


def _read_positions(mesh: XmlNode) -> dict[str, str]:
    positions: dict[str, str] = {}
    for vertices in mesh.find_elems("vertices"):
        first_input = vertices.find_elem("input")
        if first_input is None:
            continue
        positions["#" + vertices.args.get("id", "")] = first_input.args.get("source", "")
    return positions


def _triple(sources: dict[str, list[float]], key: str, index: int) -> tuple[float, float, float]:
    data = sources.get(key)
    if data is None:
        raise ValueError(f"unknown source {key!r}")
    if index < 0 or 3 * index + 3 > len(data):
        raise ValueError(f"index {index} is out of range for source {key!r}")
    x, y, z = data[3 * index:3 * index + 3]
    return (x, y, z)


class Dae:
    """A parsed COLLADA document."""

    def __init__(self, nodes: Iterable[XmlNode]):
        self.nodes = list(nodes)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "Dae":
        """Read a document from a file."""
        return cls(parse_file(path))

    @classmethod
    def from_text(cls, text: str) -> "Dae":
        """Parse a document held in a string."""
        return cls(parse_text(text))

    def load_geometry(self) -> list[Primitive]:
        """Vertices and indices of every triangle group of every mesh."""
        prims: list[Primitive] = []
        if not self.nodes:
            return prims
        library = self.nodes[0].find_elem("library_geometries")
        if library is None:
            return prims

        for geometry in library.find_elems("geometry"):
            mesh = geometry.find_elem("mesh")
            if mesh is None:
                continue
            sources = _read_sources(mesh)
            positions = _read_positions(mesh)
            for triangles in mesh.find_elems("triangles"):
                prim = self._read_triangles(triangles, sources, positions)
                if prim is not None:
                    prims.append(prim)
        return prims

    @staticmethod
    def _read_triangles(triangles: XmlNode, sources: dict[str, list[float]],
                        positions: dict[str, str]) -> Union[Primitive, None]:
        layout = [
            (_SEMANTICS.get(item.args.get("semantic", ""), _Semantic.UNKNOWN),
             item.args.get("source", ""))
            for item in triangles.find_elems("input")
        ]
        p = triangles.find_elem("p")
        if p is None:
            return None

        count = max(0, _leading_int(triangles.args.get("count", "")))
        vertices = [Vertex() for _ in range(count)]
        indices = list(range(count))
        numbers = _numbers(p.data, int)

        for vertex in vertices:
            for semantic, source in layout:
                index = next(numbers, None)
                if index is None:
                    break
                if semantic is _Semantic.VERTEX:
                    key = positions.get(source)
                    if key is None:
                        raise ValueError(f"unknown vertices {source!r}")
                    vertex.p = _triple(sources, key, index)
                elif semantic is _Semantic.NORMAL:
                    vertex.n = _triple(sources, source, index)
        return vertices, indices