"""
primmesh: colored primitive mesh buffers (plane, cube, UV sphere) for
renderers that take flat position / index / RGBA byte arrays.
"""
from .colors import (
    ColoredMesh,
    VertexCountMismatch,
    gradient_colored,
    make_gradient_vertex_colors,
    make_uniform_vertex_colors,
    uniform_colored,
)
from .primitives import MeshGeometry, create_cube, create_plane, create_unit_sphere

__all__ = [
    "ColoredMesh",
    "MeshGeometry",
    "VertexCountMismatch",
    "create_cube",
    "create_plane",
    "create_unit_sphere",
    "gradient_colored",
    "make_gradient_vertex_colors",
    "make_uniform_vertex_colors",
    "uniform_colored",
]

__version__ = "0.1.0"
