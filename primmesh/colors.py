# primmesh/colors.py
"""
Per-vertex RGBA byte buffers and their pairing with a mesh.

A color buffer holds 4 uint8 values per vertex. Entry i colors the vertex
stored at position offset 3 * i, so a soup mesh gets one color per triangle
corner and an indexed mesh one color per shared vertex.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Dict, Tuple

import numpy as np

from .config import COLOR_CHANNELS, OPAQUE
from .primitives import MeshGeometry

logger = logging.getLogger(__name__)

_THIRD_TURN = math.pi * 2 / 3
_TWO_THIRDS_TURN = math.pi * 4 / 3


class VertexCountMismatch(ValueError):
    """A color buffer does not cover exactly the vertices of its mesh."""


def _alpha_byte(alpha: float) -> int:
    if math.isnan(alpha):
        return 0
    a = max(0.0, min(1.0, alpha))
    return math.floor(a * 255)


def _wave_byte(angle: float) -> int:
    return math.floor((math.sin(angle) * 0.5 + 0.5) * 255)


def make_uniform_vertex_colors(vertex_count: int, r: int, g: int, b: int,
                               alpha: float = OPAQUE) -> np.ndarray:
    """Same (r, g, b, alpha) on every vertex. Channels wrap modulo 256."""
    rgba = np.array([int(r) % 256, int(g) % 256, int(b) % 256, _alpha_byte(alpha)], dtype=np.uint8)
    return np.tile(rgba, max(0, vertex_count))


def make_gradient_vertex_colors(vertex_count: int, alpha: float = OPAQUE) -> np.ndarray:
    """
    Hue cycle red -> green -> blue -> red across the vertex range.

    Vertex i sits at angle 2*pi*i/vertex_count; each channel is a sine wave
    a third of a turn apart from the previous one.
    """
    if vertex_count <= 0:
        return np.zeros(0, dtype=np.uint8)
    a = _alpha_byte(alpha)
    out = np.empty(vertex_count * COLOR_CHANNELS, dtype=np.uint8)
    for i in range(vertex_count):
        t = i / vertex_count
        angle = t * math.pi * 2
        k = i * COLOR_CHANNELS
        out[k] = _wave_byte(angle)
        out[k + 1] = _wave_byte(angle + _THIRD_TURN)
        out[k + 2] = _wave_byte(angle + _TWO_THIRDS_TURN)
        out[k + 3] = a
    return out


# ---------------------
# Mesh + color pairing
# ---------------------

@dataclass(frozen=True, eq=False)
class ColoredMesh:
    mesh: MeshGeometry
    colors: np.ndarray

    def __post_init__(self) -> None:
        expected = COLOR_CHANNELS * self.mesh.vertex_count
        if self.colors.size != expected:
            raise VertexCountMismatch(
                f"color buffer has {self.colors.size} bytes, mesh needs {expected} "
                f"({self.mesh.vertex_count} vertices)"
            )

    @property
    def vertex_count(self) -> int:
        return self.mesh.vertex_count

    def color(self, i: int) -> Tuple[int, int, int, int]:
        r, g, b, a = self.colors[i * COLOR_CHANNELS:(i + 1) * COLOR_CHANNELS].tolist()
        return (r, g, b, a)

    def geometry_data(self) -> Dict[str, np.ndarray]:
        """Buffers keyed the way the renderer expects them."""
        data = {"position": self.mesh.positions, "color": self.colors}
        if self.mesh.indices is not None:
            data["index"] = self.mesh.indices
        return data


def uniform_colored(mesh: MeshGeometry, r: int, g: int, b: int, alpha: float = OPAQUE) -> ColoredMesh:
    colored = ColoredMesh(mesh, make_uniform_vertex_colors(mesh.vertex_count, r, g, b, alpha))
    logger.debug("uniform color (%d, %d, %d) on %d vertices", r, g, b, mesh.vertex_count)
    return colored


def gradient_colored(mesh: MeshGeometry, alpha: float = OPAQUE) -> ColoredMesh:
    colored = ColoredMesh(mesh, make_gradient_vertex_colors(mesh.vertex_count, alpha))
    logger.debug("gradient color on %d vertices", mesh.vertex_count)
    return colored
