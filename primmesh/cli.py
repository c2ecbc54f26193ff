# primmesh/cli.py
from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from .colors import ColoredMesh, gradient_colored, uniform_colored
from .config import DISPLAY_ELEVATION, DISPLAY_SEGMENTS, DISPLAY_SIZE, OPAQUE
from .host import InMemoryHost, MeshSession, translation
from .logging_config import setup_logging
from .primitives import MeshGeometry, create_cube, create_plane, create_unit_sphere

logger = logging.getLogger(__name__)

_DEF_HELP = """
Examples:
  primmesh --shape sphere --radius 5 --segments 32 --color 255 0 0
  primmesh --shape sphere --gradient --soup
  primmesh --shape cube --size 5 --color 0 255 0 --offset 10 0 10
  primmesh --shape plane --width 5 --height 5 --color 0 0 255 --alpha 0.5
"""


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="primmesh", description="primmesh: colored primitive mesh buffers",
                                epilog=_DEF_HELP, formatter_class=argparse.RawTextHelpFormatter)
    p.add_argument("--shape", required=True, choices=["sphere", "cube", "plane"])
    p.add_argument("--soup", action="store_true", help="Emit a triangle soup instead of an indexed mesh")
    p.add_argument("--radius", type=float, default=DISPLAY_SIZE)
    p.add_argument("--segments", type=int, default=DISPLAY_SEGMENTS)
    p.add_argument("--size", type=float, default=DISPLAY_SIZE)
    p.add_argument("--width", type=float, default=DISPLAY_SIZE)
    p.add_argument("--height", type=float, default=DISPLAY_SIZE)
    colors = p.add_mutually_exclusive_group()
    colors.add_argument("--color", type=int, nargs=3, metavar=("R", "G", "B"), default=[255, 255, 255])
    colors.add_argument("--gradient", action="store_true", help="Hue cycle across the vertices")
    p.add_argument("--alpha", type=float, default=OPAQUE)
    p.add_argument("--offset", type=float, nargs=3, metavar=("X", "Y", "Z"),
                   default=[0.0, 0.0, DISPLAY_ELEVATION])
    p.add_argument("-v", "--verbose", action="store_true")
    return p


def build_mesh(args: argparse.Namespace) -> MeshGeometry:
    indexed = not args.soup
    if args.shape == "sphere":
        return create_unit_sphere(args.radius, args.segments, indexed=indexed)
    if args.shape == "cube":
        return create_cube(args.size, indexed=indexed)
    if args.shape == "plane":
        return create_plane(args.width, args.height, indexed=indexed)
    raise SystemExit(f"Unknown shape: {args.shape}")


def color_mesh(mesh: MeshGeometry, args: argparse.Namespace) -> ColoredMesh:
    if args.gradient:
        return gradient_colored(mesh, args.alpha)
    r, g, b = args.color
    return uniform_colored(mesh, r, g, b, args.alpha)


def summarize(colored: ColoredMesh, mesh_id: str, samples: int = 3) -> List[str]:
    mesh = colored.mesh
    lines = [
        f"id: {mesh_id}",
        f"mode: {'indexed' if mesh.is_indexed else 'soup'}",
        f"vertices: {mesh.vertex_count}",
        f"triangles: {mesh.triangle_count}",
    ]
    for i in range(min(samples, mesh.vertex_count)):
        r, g, b, a = colored.color(i)
        lines.append(f"vertex {i}: rgba({r}, {g}, {b}, {a})")
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    mesh = build_mesh(args)
    colored = color_mesh(mesh, args)
    session = MeshSession(InMemoryHost())
    mesh_id = session.add(colored, translation(*args.offset))
    for line in summarize(colored, mesh_id):
        print(line)
    session.cleanup()
    return 0
