"""Shape assembly from an outline command stream.

ShapeBuilder is a small state machine fed with move/line/curve/close
commands, the way a glyph decoder emits them. It accumulates edges, closes
every contour automatically and hands the edges over to an immutable Shape.

State:
- no contour: nothing drawn since creation; drawing commands are rejected
- open contour: a move_to set the contour start; the pen follows each edge

Example:
    builder = ShapeBuilder()
    builder.move_to(0, 0).line_to(10, 0).line_to(10, 10).line_to(0, 10)
    shape = builder.finish()
"""

from glyphsdf.core.shape import Edge, Shape
from glyphsdf.domain import (
    CubicSegment,
    EdgeSegment,
    LinearSegment,
    Point,
    Precision,
    QuadraticSegment,
)
from glyphsdf.exceptions import PenNotPlacedError


class ShapeBuilder:
    """Accumulates outline commands into a Shape.

    Every command returns the builder so calls can be chained.
    """

    def __init__(self, precision: Precision = Precision.DOUBLE) -> None:
        self._precision = precision
        self._edges: list[Edge] = []
        self._contour_start: Point | None = None
        # None right after move_to/close: the next edge opens a contour
        self._pen: Point | None = None

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    def _next_start(self, command: str) -> Point:
        if self._pen is not None:
            return self._pen
        if self._contour_start is not None:
            return self._contour_start
        raise PenNotPlacedError(command)

    def _push(self, segment: EdgeSegment) -> "ShapeBuilder":
        is_new_contour = self._pen is None
        self._edges.append(Edge.from_segment(segment, is_new_contour, self._precision))
        self._pen = segment.end
        return self

    def close(self) -> "ShapeBuilder":
        """Close the open contour with a line back to its start.

        No line is added when the pen already sits on the contour start.
        """
        if self._pen is not None and self._contour_start is not None:
            pen, self._pen = self._pen, None
            if pen != self._contour_start:
                self._edges.append(
                    Edge.from_segment(
                        LinearSegment(pen, self._contour_start),
                        is_new_contour=False,
                        precision=self._precision,
                    )
                )
        return self

    def move_to(self, x: float, y: float) -> "ShapeBuilder":
        """Start a new contour at (x, y), closing any open one."""
        self.close()
        self._contour_start = Point(x, y)
        return self

    def line_to(self, x: float, y: float) -> "ShapeBuilder":
        """Draw a line to (x, y). Zero-length lines are dropped."""
        start = self._next_start("line_to")
        end = Point(x, y)
        if start == end:
            return self
        return self._push(LinearSegment(start, end))

    def quadratic_to(self, cx: float, cy: float, x: float, y: float) -> "ShapeBuilder":
        """Draw a quadratic Bezier with control point (cx, cy) to (x, y)."""
        start = self._next_start("quadratic_to")
        return self._push(QuadraticSegment(start, Point(cx, cy), Point(x, y)))

    def cubic_to(
        self,
        cx0: float,
        cy0: float,
        cx1: float,
        cy1: float,
        x: float,
        y: float,
    ) -> "ShapeBuilder":
        """Draw a cubic Bezier with control points (cx0, cy0), (cx1, cy1) to (x, y)."""
        start = self._next_start("cubic_to")
        return self._push(
            CubicSegment(start, Point(cx0, cy0), Point(cx1, cy1), Point(x, y))
        )

    def finish(self) -> Shape | None:
        """Close any open contour and build the Shape.

        The builder gives up its edges; it is empty afterwards.

        Returns:
            The finished Shape, or None when no edge was ever added
            (an empty glyph, for example)
        """
        self.close()
        edges, self._edges = tuple(self._edges), []
        self._contour_start = None
        if not edges:
            return None

        bbox = edges[0].bbox
        for edge in edges[1:]:
            bbox = bbox.union(edge.bbox)
        return Shape(edges=edges, bbox=bbox, precision=self._precision)
