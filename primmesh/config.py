# primmesh/config.py
"""Shared defaults for the primitive builders and the command line."""

# Sphere tessellation
DEFAULT_SEGMENTS = 20        # builder default
DISPLAY_SEGMENTS = 32        # smoother spheres for on-screen use

# Placement used by the command line demo
DISPLAY_SIZE = 5.0           # radius / edge length / plane extent
DISPLAY_ELEVATION = 10.0     # lift above the ground plane (z)

# Colors are RGBA bytes per vertex
COLOR_CHANNELS = 4
OPAQUE = 1.0
