"""Unit tests for scanlines and even-odd fill."""

import random

import pytest

from glyphsdf.core import Scanline, ScanlineCursor, ShapeBuilder
from glyphsdf.domain import Point

L_SHAPE = [(0, 0), (10, 0), (10, 4), (4, 4), (4, 10), (0, 10)]
STAR = [(5, 0), (6, 4), (10, 4), (7, 6), (9, 10), (5, 7), (1, 10), (3, 6), (0, 4), (4, 4)]


def _polygon(points, builder: ShapeBuilder | None = None) -> ShapeBuilder:
    builder = builder or ShapeBuilder()
    builder.move_to(*points[0])
    for point in points[1:]:
        builder.line_to(*point)
    return builder


def _ray_cast(points, x: float, y: float) -> bool:
    """Reference even-odd test by classic ray casting."""
    inside = False
    count = len(points)
    for i in range(count):
        x0, y0 = points[i]
        x1, y1 = points[(i + 1) % count]
        if (y0 > y) != (y1 > y):
            x_cross = x0 + (y - y0) * (x1 - x0) / (y1 - y0)
            if x < x_cross:
                inside = not inside
    return inside


class TestScanline:
    """Tests for Scanline."""

    def test_from_crossings_sorts(self):
        """Test crossings are stored in ascending order."""
        scanline = Scanline.from_crossings(1.0, [7.0, -2.0, 3.0, 5.0])
        assert scanline.crossings == (-2.0, 3.0, 5.0, 7.0)
        assert len(scanline) == 4

    def test_even_odd_fill(self):
        """Test fill alternates between crossings."""
        scanline = Scanline.from_crossings(0.0, [0.0, 10.0, 20.0, 30.0])
        assert not scanline.is_filled(-1.0)
        assert scanline.is_filled(5.0)
        assert not scanline.is_filled(15.0)
        assert scanline.is_filled(25.0)
        assert not scanline.is_filled(35.0)

    def test_fill_at_crossing(self):
        """Test a point exactly on a crossing counts that crossing."""
        scanline = Scanline.from_crossings(0.0, [0.0, 10.0])
        assert scanline.crossing_index(0.0) == 1
        assert scanline.is_filled(0.0)
        assert not scanline.is_filled(10.0)

    def test_empty_scanline(self):
        """Test nothing is filled on a row without crossings."""
        scanline = Scanline.from_crossings(0.0, [])
        assert not scanline.is_filled(0.0)
        assert scanline.cursor().locate(100.0) == 0


class TestScanlineCursor:
    """Tests for ScanlineCursor."""

    def test_forward_queries(self):
        """Test increasing queries match the stateless answer."""
        scanline = Scanline.from_crossings(0.0, [1.0, 2.0, 4.0, 8.0])
        cursor = scanline.cursor()
        for i in range(100):
            x = i * 0.1
            assert cursor.is_filled(x) == scanline.is_filled(x)

    def test_backward_queries(self):
        """Test decreasing queries match the stateless answer."""
        scanline = Scanline.from_crossings(0.0, [1.0, 2.0, 4.0, 8.0])
        cursor = ScanlineCursor(scanline)
        for i in reversed(range(100)):
            x = i * 0.1
            assert cursor.locate(x) == scanline.crossing_index(x)

    def test_random_query_order(self):
        """Test arbitrary query order matches the stateless answer."""
        rng = random.Random(7)
        crossings = [rng.uniform(-50, 50) for _ in range(20)]
        crossings.append(crossings[0])
        scanline = Scanline.from_crossings(0.0, crossings)
        cursor = scanline.cursor()
        queries = [rng.uniform(-60, 60) for _ in range(500)] + crossings
        rng.shuffle(queries)
        for x in queries:
            assert cursor.locate(x) == scanline.crossing_index(x)
            assert cursor.is_filled(x) == scanline.is_filled(x)

    def test_reset(self):
        """Test reset rewinds the cursor."""
        scanline = Scanline.from_crossings(0.0, [1.0, 2.0])
        cursor = scanline.cursor()
        assert cursor.locate(5.0) == 2
        cursor.reset()
        assert cursor.locate(1.5) == 1

    def test_independent_cursors(self):
        """Test cursors on the same scanline do not share state."""
        scanline = Scanline.from_crossings(0.0, [1.0, 2.0, 3.0])
        first = scanline.cursor()
        second = scanline.cursor()
        first.locate(10.0)
        assert second.locate(1.5) == 1


class TestShapeFill:
    """Tests for Shape scanlines and fill classification."""

    def test_square_scanline(self):
        """Test a row through a square crosses both sides."""
        shape = _polygon([(0, 0), (10, 0), (10, 10), (0, 10)]).finish()

        assert shape is not None
        assert shape.scanline(5.0).crossings == (0.0, 10.0)
        assert shape.is_filled(Point(5, 5))
        assert shape.is_filled(Point(0, 5))
        assert not shape.is_filled(Point(10, 5))
        assert not shape.is_filled(Point(-1, 5))

    def test_row_outside_bbox(self):
        """Test rows outside the shape box have no crossings."""
        shape = _polygon([(0, 0), (10, 0), (10, 10), (0, 10)]).finish()

        assert shape is not None
        assert shape.scanline_crossings(-0.5) == []
        assert shape.scanline_crossings(10.5) == []

    def test_row_through_side_vertices(self):
        """Test a row through two diamond vertices crosses exactly twice."""
        shape = _polygon([(5, 0), (10, 5), (5, 10), (0, 5)]).finish()

        assert shape is not None
        assert shape.scanline(5.0).crossings == (0.0, 10.0)

    def test_row_through_apex(self):
        """Test a row through the top vertex of a triangle crosses nothing."""
        shape = _polygon([(0, 0), (10, 0), (5, 10)]).finish()

        assert shape is not None
        assert shape.scanline_crossings(10.0) == []

    def test_row_along_horizontal_edge(self):
        """Test a row along a horizontal edge still yields an even count."""
        shape = _polygon(L_SHAPE).finish()

        assert shape is not None
        assert len(shape.scanline(4.0)) % 2 == 0
        assert len(shape.scanline(0.0)) % 2 == 0

    @pytest.mark.parametrize("points", [L_SHAPE, STAR])
    def test_matches_ray_casting(self, points):
        """Test fill classification against a reference ray cast."""
        shape = _polygon(points).finish()

        assert shape is not None
        for j in range(-2, 24):
            y = j * 0.5 + 0.13
            for i in range(-2, 24):
                x = i * 0.5 + 0.07
                assert shape.is_filled(Point(x, y)) == _ray_cast(points, x, y), (x, y)

    def test_square_with_hole(self):
        """Test even-odd fill leaves the inner contour empty."""
        builder = _polygon([(0, 0), (10, 0), (10, 10), (0, 10)])
        _polygon([(3, 3), (7, 3), (7, 7), (3, 7)], builder)
        shape = builder.finish()

        assert shape is not None
        assert shape.is_filled(Point(1, 5))
        assert not shape.is_filled(Point(5, 5))
        assert shape.is_filled(Point(8.5, 5))

    def test_quadratic_outline(self):
        """Test fill inside a rounded outline made of quadratics."""
        shape = (
            ShapeBuilder()
            .move_to(0, -10)
            .quadratic_to(10, -10, 10, 0)
            .quadratic_to(10, 10, 0, 10)
            .quadratic_to(-10, 10, -10, 0)
            .quadratic_to(-10, -10, 0, -10)
            .finish()
        )

        assert shape is not None
        assert shape.is_filled(Point(0.1, 0.1))
        assert shape.is_filled(Point(5, 5))
        assert shape.is_filled(Point(-7, -7))
        assert not shape.is_filled(Point(9, 9))
        assert not shape.is_filled(Point(-9, 9))
        assert not shape.is_filled(Point(11, 0.5))

    def test_cubic_outline(self):
        """Test fill inside a lens made of two cubics."""
        shape = (
            ShapeBuilder()
            .move_to(0, 0)
            .cubic_to(0, 10, 10, 10, 10, 0)
            .cubic_to(10, -10, 0, -10, 0, 0)
            .finish()
        )

        assert shape is not None
        assert shape.is_filled(Point(5, 0.5))
        assert shape.is_filled(Point(5, -7))
        assert not shape.is_filled(Point(5, 8))
        assert not shape.is_filled(Point(0.2, 6))
