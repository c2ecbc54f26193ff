import unittest
from pathlib import Path
import sys

import numpy as np


_ROOT = Path(__file__).resolve().parents[1]
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from primmesh.colors import (  # noqa: E402
    ColoredMesh,
    VertexCountMismatch,
    gradient_colored,
    make_gradient_vertex_colors,
    make_uniform_vertex_colors,
    uniform_colored,
)
from primmesh.primitives import create_cube, create_plane, create_unit_sphere  # noqa: E402


class TestUniformColors(unittest.TestCase):
    def test_every_vertex_gets_the_same_rgba(self) -> None:
        for count in (1, 2, 7, 441):
            with self.subTest(count=count):
                colors = make_uniform_vertex_colors(count, 255, 0, 0, 1)
                self.assertEqual(colors.dtype, np.uint8)
                self.assertEqual(colors.size, 4 * count)
                self.assertTrue(np.all(colors.reshape(-1, 4) == [255, 0, 0, 255]))

    def test_zero_vertices_gives_empty_buffer(self) -> None:
        self.assertEqual(make_uniform_vertex_colors(0, 10, 20, 30).size, 0)

    def test_alpha_is_floored_and_clamped(self) -> None:
        cases = {0.5: 127, 1.0: 255, 0.0: 0, 2.0: 255, -3.0: 0, 0.999: 254}
        for alpha, expected in cases.items():
            with self.subTest(alpha=alpha):
                self.assertEqual(int(make_uniform_vertex_colors(1, 0, 0, 0, alpha)[3]), expected)

    def test_nan_alpha_encodes_as_zero(self) -> None:
        self.assertEqual(int(make_uniform_vertex_colors(1, 1, 2, 3, float("nan"))[3]), 0)

    def test_channels_wrap_like_bytes(self) -> None:
        colors = make_uniform_vertex_colors(1, 256, -1, 300)
        self.assertEqual(colors.tolist()[:3], [0, 255, 44])

    def test_default_alpha_is_opaque(self) -> None:
        self.assertEqual(make_uniform_vertex_colors(2, 0, 0, 255).tolist(), [0, 0, 255, 255] * 2)


class TestGradientColors(unittest.TestCase):
    def test_first_vertex_follows_the_formula(self) -> None:
        colors = make_gradient_vertex_colors(100, 1)
        self.assertEqual(colors[:4].tolist(), [127, 237, 17, 255])

    def test_quarter_turn_is_full_red(self) -> None:
        colors = make_gradient_vertex_colors(4, 1)
        r, g, b, a = colors[4:8].tolist()
        self.assertEqual((r, g, b, a), (255, 63, 63, 255))

    def test_length_and_alpha(self) -> None:
        colors = make_gradient_vertex_colors(33, 0.5)
        self.assertEqual(colors.size, 132)
        self.assertTrue(np.all(colors[3::4] == 127))

    def test_zero_vertices_gives_empty_buffer(self) -> None:
        colors = make_gradient_vertex_colors(0)
        self.assertEqual(colors.size, 0)
        self.assertEqual(colors.dtype, np.uint8)

    def test_colors_vary_across_vertices(self) -> None:
        rgb = make_gradient_vertex_colors(12).reshape(-1, 4)[:, :3]
        self.assertEqual(len({tuple(c) for c in rgb.tolist()}), 12)


class TestColoredMesh(unittest.TestCase):
    def test_indexed_mesh_gets_one_color_per_unique_vertex(self) -> None:
        colored = uniform_colored(create_unit_sphere(1.0, 4), 0, 255, 0)
        self.assertEqual(colored.colors.size, 4 * 25)
        self.assertEqual(colored.color(24), (0, 255, 0, 255))

    def test_soup_mesh_gets_one_color_per_triangle_corner(self) -> None:
        colored = gradient_colored(create_cube(1, indexed=False))
        self.assertEqual(colored.vertex_count, 36)
        self.assertEqual(colored.colors.size, 144)

    def test_mismatched_buffer_is_rejected(self) -> None:
        mesh = create_plane()
        with self.assertRaises(VertexCountMismatch):
            ColoredMesh(mesh, make_uniform_vertex_colors(5, 1, 2, 3))
        with self.assertRaises(ValueError):
            ColoredMesh(mesh.to_soup(), make_uniform_vertex_colors(4, 1, 2, 3))

    def test_color_is_a_tuple_of_ints(self) -> None:
        colored = gradient_colored(create_plane())
        rgba = colored.color(0)
        self.assertEqual(rgba, (127, 237, 17, 255))
        self.assertTrue(all(type(c) is int for c in rgba))

    def test_pairing_helpers_log_at_debug(self) -> None:
        mesh = create_plane(indexed=False)
        with self.assertLogs("primmesh.colors", level="DEBUG") as logs:
            gradient_colored(mesh)
            uniform_colored(mesh, 1, 2, 3)
        self.assertIn("gradient color on 6 vertices", logs.output[0])
        self.assertEqual(len(logs.output), 2)

    def test_geometry_data_includes_index_only_when_indexed(self) -> None:
        indexed = uniform_colored(create_plane(), 1, 2, 3).geometry_data()
        soup = uniform_colored(create_plane(indexed=False), 1, 2, 3).geometry_data()

        self.assertEqual(sorted(indexed), ["color", "index", "position"])
        self.assertEqual(sorted(soup), ["color", "position"])
        self.assertEqual(soup["position"].size, 18)


if __name__ == "__main__":
    unittest.main()
