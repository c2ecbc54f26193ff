import math
import unittest
from pathlib import Path
import sys


_ROOT = Path(__file__).resolve().parents[1]
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from primmesh.analysis import (  # noqa: E402
    max_radius_error,
    signed_volume,
    surface_area,
    triangle_area,
    triangle_normal,
    winding_is_outward,
)
from primmesh.primitives import MeshGeometry, create_cube, create_plane, create_unit_sphere  # noqa: E402

import numpy as np  # noqa: E402


class TestTriangleMaths(unittest.TestCase):
    def test_ccw_triangle_normal_points_up(self) -> None:
        n = triangle_normal((0, 0, 0), (1, 0, 0), (0, 1, 0))
        self.assertEqual(n, (0, 0, 1))

    def test_triangle_area(self) -> None:
        self.assertAlmostEqual(triangle_area((0, 0, 0), (2, 0, 0), (0, 2, 0)), 2.0)


class TestMeshMaths(unittest.TestCase):
    def test_cube_area_and_volume(self) -> None:
        mesh = create_cube(2)
        self.assertAlmostEqual(surface_area(mesh), 24.0, places=5)
        self.assertAlmostEqual(signed_volume(mesh), 8.0, places=5)

    def test_sphere_volume_approaches_analytic(self) -> None:
        mesh = create_unit_sphere(1.0, 48)
        self.assertAlmostEqual(signed_volume(mesh), 4.0 / 3.0 * math.pi, delta=0.05)

    def test_reversed_winding_is_detected(self) -> None:
        mesh = create_cube(1)
        flipped = MeshGeometry(mesh.positions, mesh.indices.reshape(-1, 3)[:, ::-1].copy().reshape(-1))
        self.assertFalse(winding_is_outward(flipped))
        self.assertLess(signed_volume(flipped), 0.0)

    def test_radius_error_of_plane(self) -> None:
        # plane corners sit at distance sqrt(2) from the origin
        mesh = create_plane(2, 2)
        self.assertAlmostEqual(max_radius_error(mesh, math.sqrt(2)), 0.0, places=6)

    def test_empty_mesh(self) -> None:
        mesh = MeshGeometry(np.zeros(0, dtype=np.float32))
        self.assertEqual(surface_area(mesh), 0.0)
        self.assertTrue(winding_is_outward(mesh))
        self.assertEqual(max_radius_error(mesh, 1.0), 0.0)


if __name__ == "__main__":
    unittest.main()
