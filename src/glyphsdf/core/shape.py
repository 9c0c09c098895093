"""Shapes: closed outlines assembled from edges.

A Shape is the immutable result of ShapeBuilder.finish(). It owns its edges
in drawing order and answers the two queries the rasterizer needs per row
and per pixel: scanline crossings and the closest boundary point.

Shapes hold no mutable state, so one shape can be rasterized any number of
times without any state leaking between runs.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from glyphsdf.core import segments
from glyphsdf.core.scanline import Scanline
from glyphsdf.domain import BoundingBox, EdgeColor, EdgeSegment, Point, Precision

if TYPE_CHECKING:
    from glyphsdf.core.builder import ShapeBuilder


@dataclass(frozen=True, slots=True)
class Edge:
    """One segment of a contour with its cached bounding box.

    Attributes:
        segment: Linear, quadratic or cubic segment
        bbox: Tight bounding box of the segment
        is_new_contour: True for the first edge after a move_to
        color: Reserved channel tag, always WHITE
    """

    segment: EdgeSegment
    bbox: BoundingBox
    is_new_contour: bool
    color: EdgeColor = EdgeColor.WHITE

    @classmethod
    def from_segment(
        cls,
        segment: EdgeSegment,
        is_new_contour: bool,
        precision: Precision = Precision.DOUBLE,
    ) -> "Edge":
        """Create an edge, computing its bounding box."""
        return cls(
            segment=segment,
            bbox=segments.bounding_box(segment, precision.epsilon),
            is_new_contour=is_new_contour,
        )

    @property
    def start(self) -> Point:
        return self.segment.start

    @property
    def end(self) -> Point:
        return self.segment.end

    def evaluate(self, t: float) -> Point:
        """Position on the edge at parameter t."""
        return segments.evaluate(self.segment, t)

    def scanline_crossings(self, y: float, epsilon: float) -> list[float]:
        """X coordinates where the edge crosses the line at height y."""
        return segments.scanline_crossings(self.segment, y, epsilon)

    def closest_point(self, point: Point, epsilon: float) -> tuple[float, Point]:
        """Distance and nearest point on the edge."""
        return segments.closest_point(self.segment, point, epsilon)


@dataclass(frozen=True)
class Shape:
    """Immutable outline made of closed contours.

    Attributes:
        edges: Edges in drawing order; contour boundaries are marked by
            Edge.is_new_contour
        bbox: Union of all edge bounding boxes
        precision: Scalar precision for epsilon comparisons
    """

    edges: tuple[Edge, ...]
    bbox: BoundingBox
    precision: Precision = field(default=Precision.DOUBLE)

    @classmethod
    def builder(cls, precision: Precision = Precision.DOUBLE) -> "ShapeBuilder":
        """Create a builder for a new shape."""
        from glyphsdf.core.builder import ShapeBuilder

        return ShapeBuilder(precision=precision)

    @property
    def epsilon(self) -> float:
        return self.precision.epsilon

    @property
    def contour_count(self) -> int:
        """Number of contours in the shape."""
        return sum(1 for edge in self.edges if edge.is_new_contour)

    def contours(self) -> list[list[Edge]]:
        """Split the flat edge list into contours."""
        result: list[list[Edge]] = []
        for edge in self.edges:
            if edge.is_new_contour or not result:
                result.append([])
            result[-1].append(edge)
        return result

    def scanline_crossings(self, y: float) -> list[float]:
        """Collect unsorted boundary crossings with the line at height y.

        Edges whose bounding box does not span y are skipped.

        Args:
            y: Height of the horizontal line

        Returns:
            Crossing x coordinates in edge order
        """
        if not self.bbox.spans_y(y):
            return []

        epsilon = self.epsilon
        crossings: list[float] = []
        for edge in self.edges:
            if edge.bbox.spans_y(y):
                crossings.extend(edge.scanline_crossings(y, epsilon))
        return crossings

    def scanline(self, y: float) -> Scanline:
        """Build the sorted scanline for the row at height y."""
        return Scanline.from_crossings(y, self.scanline_crossings(y))

    def is_filled(self, point: Point) -> bool:
        """Even-odd fill test for a single point."""
        return self.scanline(point.y).is_filled(point.x)

    def closest_point(
        self,
        point: Point,
        max_distance: float,
        epsilon: float,
    ) -> tuple[float, Point] | None:
        """Find the nearest boundary point within max_distance.

        Edges whose box grown by max_distance does not contain point are
        skipped before the exact per-segment search. On equal distances the
        earlier edge wins.

        Args:
            point: Query point
            max_distance: Search radius
            epsilon: Parameter resolution for curve searches

        Returns:
            Tuple of (distance, nearest point), or None when no edge lies
            within max_distance
        """
        if not self.bbox.potentially_within(point, max_distance):
            return None

        best: tuple[float, Point] | None = None
        for edge in self.edges:
            if not edge.bbox.potentially_within(point, max_distance):
                continue
            distance, nearest = edge.closest_point(point, epsilon)
            if distance <= max_distance and (best is None or distance < best[0]):
                best = (distance, nearest)
        return best
