# primmesh/analysis.py
from __future__ import annotations

import math
from typing import Tuple

from .primitives import MeshGeometry

Vec3 = Tuple[float, float, float]

ORIGIN: Vec3 = (0.0, 0.0, 0.0)


# ----------------------------
# Small local vector utilities
# ----------------------------

def v_sub(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])

def v_cross(a: Vec3, b: Vec3) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )

def v_dot(a: Vec3, b: Vec3) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]

def v_len(a: Vec3) -> float:
    return math.sqrt(v_dot(a, a))


# --------------------------------
# Per-triangle and whole-mesh maths
# --------------------------------

def triangle_normal(a: Vec3, b: Vec3, c: Vec3) -> Vec3:
    """Un-normalized (b - a) x (c - a); points out of a CCW front face."""
    return v_cross(v_sub(b, a), v_sub(c, a))

def triangle_area(a: Vec3, b: Vec3, c: Vec3) -> float:
    return 0.5 * v_len(triangle_normal(a, b, c))

def surface_area(mesh: MeshGeometry) -> float:
    return sum(triangle_area(a, b, c) for a, b, c in mesh.triangles())

def signed_volume(mesh: MeshGeometry) -> float:
    """
    Signed volume of a closed mesh, summing origin-based tetrahedra:
    V = sum(dot(a, cross(b, c))) / 6. Positive when faces wind outward.
    """
    vol6 = 0.0
    for a, b, c in mesh.triangles():
        vol6 += v_dot(a, v_cross(b, c))
    return vol6 / 6.0


def winding_is_outward(mesh: MeshGeometry, center: Vec3 = ORIGIN, eps: float = 1e-9) -> bool:
    """
    True when every non-degenerate triangle faces away from ``center``.

    The check dots each face normal with the direction from ``center`` to the
    triangle centroid. Triangles whose normal is shorter than ``eps`` (the
    collapsed ones at sphere poles) are skipped. For a flat mesh lying through
    ``center`` pass a point behind its front face instead.
    """
    for a, b, c in mesh.triangles():
        n = triangle_normal(a, b, c)
        if v_len(n) <= eps:
            continue
        centroid = ((a[0] + b[0] + c[0]) / 3, (a[1] + b[1] + c[1]) / 3, (a[2] + b[2] + c[2]) / 3)
        if v_dot(n, v_sub(centroid, center)) <= 0.0:
            return False
    return True


def max_radius_error(mesh: MeshGeometry, radius: float, center: Vec3 = ORIGIN) -> float:
    """Largest | |p - center| - |radius| | over all vertices (0 for an empty mesh)."""
    worst = 0.0
    for i in range(mesh.vertex_count):
        worst = max(worst, abs(v_len(v_sub(mesh.vertex(i), center)) - abs(radius)))
    return worst
