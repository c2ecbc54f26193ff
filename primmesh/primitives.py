"""
primmesh.primitives: procedural plane / cube / UV-sphere buffers.

Every builder returns a MeshGeometry holding flat numpy buffers ready for a
renderer:

• positions: float32, consecutive (x, y, z) triples
• indices:   uint32, three per triangle (indexed mode only)

Each builder comes in two flavours selected by ``indexed``:

• indexed=True  shared vertex list plus index list (compact)
• indexed=False triangle soup, every triangle corner stored on its own

Both flavours walk the same triangulation through a *vertex sink*, so they
always agree on surface, triangle order and winding. Triangles wind
counter-clockwise seen from outside the solid. Soup meshes never weld
coincident corners (cube edges, sphere seam); flat-shaded consumers rely on
that.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple, Union

import numpy as np

from .config import DEFAULT_SEGMENTS

logger = logging.getLogger(__name__)

Vec3 = Tuple[float, float, float]
Tri = Tuple[Vec3, Vec3, Vec3]
Handle = Union[int, Vec3]


# --------------
# Mesh container
# --------------

@dataclass(frozen=True, eq=False)
class MeshGeometry:
    positions: np.ndarray                  # float32, 3 per vertex
    indices: Optional[np.ndarray] = None   # uint32, 3 per triangle; None for soup

    @property
    def is_indexed(self) -> bool:
        return self.indices is not None

    @property
    def vertex_count(self) -> int:
        return int(self.positions.size // 3)

    @property
    def triangle_count(self) -> int:
        if self.indices is not None:
            return int(self.indices.size // 3)
        return self.vertex_count // 3

    def vertex(self, i: int) -> Vec3:
        x, y, z = self.positions[3 * i:3 * i + 3]
        return (float(x), float(y), float(z))

    def triangles(self) -> Iterator[Tri]:
        """Yield each triangle's three corners in emission order."""
        if self.indices is not None:
            for k in range(0, self.indices.size, 3):
                a, b, c = self.indices[k:k + 3]
                yield (self.vertex(int(a)), self.vertex(int(b)), self.vertex(int(c)))
        else:
            for k in range(0, self.vertex_count, 3):
                yield (self.vertex(k), self.vertex(k + 1), self.vertex(k + 2))

    def to_soup(self) -> "MeshGeometry":
        """Expand shared vertices so every triangle owns its corners."""
        if self.indices is None:
            return MeshGeometry(self.positions.copy())
        xyz = self.positions.reshape(-1, 3)
        return MeshGeometry(np.ascontiguousarray(xyz[self.indices].reshape(-1)))

    def bounds(self) -> Tuple[Vec3, Vec3]:
        if self.vertex_count == 0:
            return (0.0, 0.0, 0.0), (0.0, 0.0, 0.0)
        xyz = self.positions.reshape(-1, 3)
        x0, y0, z0 = xyz.min(axis=0).tolist()
        x1, y1, z1 = xyz.max(axis=0).tolist()
        return (x0, y0, z0), (x1, y1, z1)


def empty_mesh(indexed: bool = True) -> MeshGeometry:
    return MeshGeometry(
        np.zeros(0, dtype=np.float32),
        np.zeros(0, dtype=np.uint32) if indexed else None,
    )


# -------------
# Vertex sinks
# -------------

class IndexedSink:
    """Stores each vertex once; triangles refer to vertices by index."""

    def __init__(self) -> None:
        self._coords: List[float] = []
        self._indices: List[int] = []

    def add_vertex(self, v: Vec3) -> int:
        self._coords.extend(v)
        return len(self._coords) // 3 - 1

    def add_triangle(self, a: int, b: int, c: int) -> None:
        self._indices.extend((a, b, c))

    def build(self) -> MeshGeometry:
        return MeshGeometry(
            np.asarray(self._coords, dtype=np.float32),
            np.asarray(self._indices, dtype=np.uint32),
        )


class SoupSink:
    """Writes every triangle corner out in full; nothing is shared."""

    def __init__(self) -> None:
        self._coords: List[float] = []

    def add_vertex(self, v: Vec3) -> Vec3:
        return v

    def add_triangle(self, a: Vec3, b: Vec3, c: Vec3) -> None:
        self._coords.extend(a)
        self._coords.extend(b)
        self._coords.extend(c)

    def build(self) -> MeshGeometry:
        return MeshGeometry(np.asarray(self._coords, dtype=np.float32))


def _sink(indexed: bool) -> Union[IndexedSink, SoupSink]:
    return IndexedSink() if indexed else SoupSink()


def _emit_quad(sink, a: Handle, b: Handle, c: Handle, d: Handle) -> None:
    # a, b, c, d counter-clockwise from outside
    sink.add_triangle(a, b, c)
    sink.add_triangle(a, c, d)


# -----------------------
# Primitive constructors
# -----------------------

def create_plane(width: float = 1.0, height: float = 1.0, *, indexed: bool = True) -> MeshGeometry:
    """Single quad in the XY plane (z = 0), centered on the origin, facing +Z."""
    w = width / 2
    h = height / 2
    sink = _sink(indexed)
    corners = [sink.add_vertex(v) for v in (
        (-w, -h, 0.0), (w, -h, 0.0), (w, h, 0.0), (-w, h, 0.0),
    )]
    _emit_quad(sink, *corners)
    mesh = sink.build()
    logger.debug("plane %sx%s: %d vertices, %d triangles",
                 width, height, mesh.vertex_count, mesh.triangle_count)
    return mesh


def _cube_faces(s: float) -> Sequence[Sequence[Vec3]]:
    # each face lists its corners counter-clockwise seen from outside
    return (
        # front (+z)
        ((-s, -s, s), (s, -s, s), (s, s, s), (-s, s, s)),
        # back (-z)
        ((-s, -s, -s), (-s, s, -s), (s, s, -s), (s, -s, -s)),
        # top (+y)
        ((-s, s, -s), (-s, s, s), (s, s, s), (s, s, -s)),
        # bottom (-y)
        ((-s, -s, -s), (s, -s, -s), (s, -s, s), (-s, -s, s)),
        # right (+x)
        ((s, -s, -s), (s, s, -s), (s, s, s), (s, -s, s)),
        # left (-x)
        ((-s, -s, -s), (-s, -s, s), (-s, s, s), (-s, s, -s)),
    )


def create_cube(size: float = 1.0, *, indexed: bool = True) -> MeshGeometry:
    """Axis-aligned cube centered on the origin; faces do not share corners."""
    sink = _sink(indexed)
    for face in _cube_faces(size / 2):
        _emit_quad(sink, *[sink.add_vertex(v) for v in face])
    mesh = sink.build()
    logger.debug("cube %s: %d vertices, %d triangles",
                 size, mesh.vertex_count, mesh.triangle_count)
    return mesh


def sphere_vertex(lat: int, lon: int, segments: int, radius: float) -> Vec3:
    """Grid point (lat, lon) of a UV sphere with Y as the polar axis."""
    theta = (lat * math.pi) / segments
    phi = (lon * 2 * math.pi) / segments
    st, ct = math.sin(theta), math.cos(theta)
    sp, cp = math.sin(phi), math.cos(phi)
    return (radius * (cp * st), radius * ct, radius * (sp * st))


def create_unit_sphere(radius: float = 1.0, segments: int = DEFAULT_SEGMENTS, *,
                       indexed: bool = True) -> MeshGeometry:
    """
    UV sphere with ``segments`` latitude bands and ``segments`` longitude bands.

    Indexed meshes keep the closing longitude column and both pole rows as
    distinct vertices, (segments + 1)^2 in total. Pole triangles are
    degenerate and are kept.
    """
    if segments <= 0:
        return empty_mesh(indexed)
    sink = _sink(indexed)
    row = segments + 1
    grid = [sink.add_vertex(sphere_vertex(lat, lon, segments, radius))
            for lat in range(segments + 1)
            for lon in range(segments + 1)]
    for lat in range(segments):
        for lon in range(segments):
            first = lat * row + lon
            second = first + row
            sink.add_triangle(grid[first], grid[first + 1], grid[second])
            sink.add_triangle(grid[second], grid[first + 1], grid[second + 1])
    mesh = sink.build()
    logger.debug("sphere r=%s segments=%d: %d vertices, %d triangles",
                 radius, segments, mesh.vertex_count, mesh.triangle_count)
    return mesh
