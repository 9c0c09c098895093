"""Core geometric value types.

This module defines the fundamental 2D types shared by every outline and
raster operation:
- Point: An immutable 2D point / vector
- BoundingBox: An axis-aligned bounding box
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable. Also used as a 2D vector: supports addition,
    subtraction and scaling by a scalar.

    Attributes:
        x: X coordinate in outline units
        y: Y coordinate in outline units
    """

    x: float
    y: float

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> "Point":
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def dot(self, other: "Point") -> float:
        """Dot product with another vector."""
        return self.x * other.x + self.y * other.y

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def lerp(self, other: "Point", t: float) -> "Point":
        """Linear interpolation between this point (t=0) and other (t=1)."""
        return Point(
            self.x * (1.0 - t) + other.x * t,
            self.y * (1.0 - t) + other.y * t,
        )

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Axis-aligned bounding box.

    Invariant: min_x <= max_x and min_y <= max_y.

    Attributes:
        min_x: Smallest x coordinate
        min_y: Smallest y coordinate
        max_x: Largest x coordinate
        max_y: Largest y coordinate
    """

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @classmethod
    def from_point(cls, point: Point) -> "BoundingBox":
        """Create a zero-sized box around a single point."""
        return cls(point.x, point.y, point.x, point.y)

    def expand_to_point(self, point: Point) -> "BoundingBox":
        """Return the smallest box containing this box and point."""
        return BoundingBox(
            min(self.min_x, point.x),
            min(self.min_y, point.y),
            max(self.max_x, point.x),
            max(self.max_y, point.y),
        )

    def union(self, other: "BoundingBox") -> "BoundingBox":
        """Return the smallest box containing both boxes."""
        return BoundingBox(
            min(self.min_x, other.min_x),
            min(self.min_y, other.min_y),
            max(self.max_x, other.max_x),
            max(self.max_y, other.max_y),
        )

    def spans_y(self, y: float) -> bool:
        """Check whether the horizontal line at y touches the box."""
        return self.min_y <= y <= self.max_y

    def contains_point(self, point: Point, tolerance: float = 0.0) -> bool:
        """Check whether point lies inside the box (borders included)."""
        return (
            self.min_x - tolerance <= point.x <= self.max_x + tolerance
            and self.min_y - tolerance <= point.y <= self.max_y + tolerance
        )

    def potentially_within(self, point: Point, distance: float) -> bool:
        """Check whether any part of the box could be within distance of point.

        This is the box grown by distance on every side, so it may accept
        points near the corners that are actually farther away.
        """
        return self.contains_point(point, distance)

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    def to_tuple(self) -> tuple[float, float, float, float]:
        """Convert to (min_x, min_y, max_x, max_y) tuple."""
        return (self.min_x, self.min_y, self.max_x, self.max_y)
