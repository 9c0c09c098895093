"""fontTools pen adapter feeding glyph outlines into a ShapeBuilder.

fontTools glyphs draw themselves onto a pen. ShapePen is a BasePen, so
TrueType quadratic splines with several off-curve points (and contours made
only of off-curve points) are split into single quadratic segments before
they reach the builder. CFF cubic outlines pass straight through.
"""

from typing import Any

from fontTools.pens.basePen import BasePen

from glyphsdf.core.builder import ShapeBuilder
from glyphsdf.core.shape import Shape
from glyphsdf.domain import Precision

Coordinate = tuple[float, float]


class ShapePen(BasePen):
    """Pen that records a glyph outline as a Shape.

    Example:
        pen = ShapePen()
        glyph_set["A"].draw(pen)
        shape = pen.finish()
    """

    def __init__(
        self,
        glyph_set: Any = None,
        builder: ShapeBuilder | None = None,
        precision: Precision = Precision.DOUBLE,
    ) -> None:
        super().__init__(glyph_set)
        self.builder = builder if builder is not None else ShapeBuilder(precision=precision)

    def _moveTo(self, pt: Coordinate) -> None:
        self.builder.move_to(*pt)

    def _lineTo(self, pt: Coordinate) -> None:
        self.builder.line_to(*pt)

    def _qCurveToOne(self, pt1: Coordinate, pt2: Coordinate) -> None:
        self.builder.quadratic_to(*pt1, *pt2)

    def _curveToOne(self, pt1: Coordinate, pt2: Coordinate, pt3: Coordinate) -> None:
        self.builder.cubic_to(*pt1, *pt2, *pt3)

    def _closePath(self) -> None:
        self.builder.close()

    def _endPath(self) -> None:
        # Open paths are closed as well: every contour of a Shape is closed
        self.builder.close()

    def finish(self) -> Shape | None:
        """Build the Shape from everything drawn so far."""
        return self.builder.finish()
