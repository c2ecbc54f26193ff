# primmesh/host.py
"""
The viewer side of mesh placement.

Nothing in the builders or the color encoders depends on this module. It
describes what an external renderer accepts (flat position / color / index
buffers plus a column-major 4x4 transform) and keeps track of the meshes a
caller has handed over so they can be removed together.
"""
from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Protocol, Sequence, Tuple

import numpy as np

from .colors import ColoredMesh

logger = logging.getLogger(__name__)

Transform = Tuple[float, ...]  # 16 floats, column-major


def identity() -> Transform:
    return translation(0.0, 0.0, 0.0)


def translation(x: float, y: float, z: float) -> Transform:
    """Column-major 4x4 with the offset in the last column."""
    return (
        1.0, 0.0, 0.0, 0.0,   # column 1 (X axis)
        0.0, 1.0, 0.0, 0.0,   # column 2 (Y axis)
        0.0, 0.0, 1.0, 0.0,   # column 3 (Z axis)
        float(x), float(y), float(z), 1.0,
    )


class MeshHost(Protocol):
    def add_mesh(self, positions: np.ndarray, colors: np.ndarray,
                 indices: Optional[np.ndarray], transform: Transform) -> str:
        ...

    def remove_all(self, ids: Sequence[str]) -> None:
        ...


@dataclass
class PlacedMesh:
    positions: np.ndarray
    colors: np.ndarray
    indices: Optional[np.ndarray]
    transform: Transform


@dataclass
class InMemoryHost:
    """Host that just records what it is given."""
    meshes: Dict[str, PlacedMesh] = field(default_factory=dict)
    _ids: Iterator[int] = field(default_factory=lambda: itertools.count(1), repr=False)

    def add_mesh(self, positions: np.ndarray, colors: np.ndarray,
                 indices: Optional[np.ndarray], transform: Transform) -> str:
        if len(transform) != 16:
            raise ValueError(f"transform needs 16 values, got {len(transform)}")
        mesh_id = f"mesh-{next(self._ids)}"
        self.meshes[mesh_id] = PlacedMesh(positions, colors, indices, tuple(transform))
        return mesh_id

    def remove_all(self, ids: Sequence[str]) -> None:
        for mesh_id in ids:
            self.meshes.pop(mesh_id, None)


class MeshSession:
    """Places colored meshes on a host and remembers their ids for cleanup."""

    def __init__(self, host: MeshHost) -> None:
        self.host = host
        self.ids: List[str] = []

    def add(self, colored: ColoredMesh, transform: Optional[Transform] = None) -> str:
        if transform is None:
            transform = identity()
        mesh = colored.mesh
        try:
            mesh_id = self.host.add_mesh(mesh.positions, colored.colors, mesh.indices, transform)
        except Exception:
            logger.exception("Failed to add mesh with %d vertices", mesh.vertex_count)
            raise
        self.ids.append(mesh_id)
        logger.info("Added mesh %s (%d vertices, %d triangles)",
                    mesh_id, mesh.vertex_count, mesh.triangle_count)
        return mesh_id

    def cleanup(self) -> None:
        logger.info("Cleaning up %d meshes", len(self.ids))
        try:
            self.host.remove_all(list(self.ids))
        except Exception:
            logger.exception("Failed to remove %d meshes", len(self.ids))
            raise
        self.ids.clear()
