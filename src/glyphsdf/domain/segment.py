"""Edge segment variants.

An edge segment is one of three immutable kinds, each storing only its own
control points:
- LinearSegment: straight line from start to end
- QuadraticSegment: quadratic Bezier with one control point
- CubicSegment: cubic Bezier with two control points

EdgeSegment is the tagged union of the three. Geometric operations live in
glyphsdf.core.segments and dispatch on the variant with ``match``.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import TypeAlias

from glyphsdf.domain.geometry import Point


class EdgeColor(IntEnum):
    """Channel mask reserved for multi-channel distance fields.

    Every edge is currently WHITE (all channels); nothing reads the color.
    """

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7


@dataclass(frozen=True, slots=True)
class LinearSegment:
    """Straight line segment."""

    start: Point
    end: Point


@dataclass(frozen=True, slots=True)
class QuadraticSegment:
    """Quadratic Bezier segment."""

    start: Point
    ctrl: Point
    end: Point


@dataclass(frozen=True, slots=True)
class CubicSegment:
    """Cubic Bezier segment."""

    start: Point
    ctrl0: Point
    ctrl1: Point
    end: Point


EdgeSegment: TypeAlias = LinearSegment | QuadraticSegment | CubicSegment
