"""Core geometry engine for glyphsdf.

This module contains the outline-to-raster pipeline:

- roots: Closed-form polynomial root solvers (linear, quadratic, cubic)
- segments: Bounding box, evaluation, scanline crossings and closest point
  for linear, quadratic and cubic segments
- shape: Edge and Shape, the immutable assembled outline
- builder: ShapeBuilder, the outline command state machine
- scanline: Per-row sorted crossings with even-odd fill test
- rasterizer: Pixel grid loop emitting bitmap or SDF values

All components are pure computations with no I/O.
"""

from glyphsdf.core.builder import ShapeBuilder
from glyphsdf.core.rasterizer import Rasterizer, encode_distance
from glyphsdf.core.roots import (
    solve_cubic,
    solve_cubic_depressed,
    solve_cubic_normalized,
    solve_linear,
    solve_quadratic,
)
from glyphsdf.core.scanline import Scanline, ScanlineCursor
from glyphsdf.core.shape import Edge, Shape

__all__ = [
    # Roots
    "solve_linear",
    "solve_quadratic",
    "solve_cubic_depressed",
    "solve_cubic_normalized",
    "solve_cubic",
    # Shapes
    "Edge",
    "Shape",
    "ShapeBuilder",
    # Raster
    "Scanline",
    "ScanlineCursor",
    "Rasterizer",
    "encode_distance",
]
