"""Domain models for glyphsdf.

This module contains the value types the geometry engine works on. All
models are immutable frozen dataclasses and hashable.

Key classes:
- Point: A 2D point / vector
- BoundingBox: Axis-aligned min/max box
- LinearSegment, QuadraticSegment, CubicSegment: Edge segment variants
- EdgeColor: Reserved per-edge channel tag
- Precision: Scalar precision selecting the epsilon tolerance
"""

from glyphsdf.domain.geometry import BoundingBox, Point
from glyphsdf.domain.scalar import DOUBLE_EPSILON, SINGLE_EPSILON, Precision
from glyphsdf.domain.segment import (
    CubicSegment,
    EdgeColor,
    EdgeSegment,
    LinearSegment,
    QuadraticSegment,
)

__all__: list[str] = [
    # Enums
    "EdgeColor",
    "Precision",
    # Constants
    "DOUBLE_EPSILON",
    "SINGLE_EPSILON",
    # Core types
    "Point",
    "BoundingBox",
    "LinearSegment",
    "QuadraticSegment",
    "CubicSegment",
    "EdgeSegment",
]
