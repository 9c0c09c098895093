"""Tests for domain models and configuration."""

import sys

import pytest
from pydantic import ValidationError

from glyphsdf.config import GlyphSdfSettings, RasterConfig, RenderMode, get_default_settings
from glyphsdf.domain import (
    DOUBLE_EPSILON,
    SINGLE_EPSILON,
    BoundingBox,
    CubicSegment,
    EdgeColor,
    LinearSegment,
    Point,
    Precision,
    QuadraticSegment,
)
from glyphsdf.exceptions import (
    FontError,
    GlyphNotFoundError,
    GlyphRenderError,
    GlyphSdfError,
    PenNotPlacedError,
    RenderError,
)


class TestPoint:
    """Tests for Point."""

    def test_creation(self):
        """Test basic point creation."""
        p = Point(x=1.5, y=-2.0)
        assert p.x == 1.5
        assert p.y == -2.0

    def test_immutable(self):
        """Test points are frozen."""
        p = Point(0.0, 0.0)
        with pytest.raises(AttributeError):
            p.x = 1.0  # type: ignore[misc]

    def test_hashable(self):
        """Test equal points hash equally."""
        assert len({Point(1, 2), Point(1.0, 2.0), Point(2, 1)}) == 2

    def test_vector_arithmetic(self):
        """Test addition, subtraction and scaling."""
        a = Point(1, 2)
        b = Point(3, 5)
        assert a + b == Point(4, 7)
        assert b - a == Point(2, 3)
        assert a * 2 == Point(2, 4)
        assert 2 * a == Point(2, 4)

    def test_dot_and_distance(self):
        """Test dot product and Euclidean distance."""
        assert Point(1, 2).dot(Point(3, 4)) == 11
        assert Point(0, 0).distance_to(Point(3, 4)) == 5.0

    def test_lerp(self):
        """Test interpolation between two points."""
        a = Point(0, 0)
        b = Point(10, -10)
        assert a.lerp(b, 0.0) == a
        assert a.lerp(b, 1.0) == b
        assert a.lerp(b, 0.5) == Point(5, -5)

    def test_to_tuple(self):
        """Test conversion to a plain tuple."""
        assert Point(3, 4).to_tuple() == (3, 4)


class TestBoundingBox:
    """Tests for BoundingBox."""

    def test_from_point(self):
        """Test a zero-sized box around one point."""
        box = BoundingBox.from_point(Point(2, 3))
        assert box.to_tuple() == (2, 3, 2, 3)
        assert box.width == 0
        assert box.height == 0

    def test_expand_to_point(self):
        """Test growing a box to include a point."""
        box = BoundingBox.from_point(Point(0, 0)).expand_to_point(Point(4, -2))
        assert box.to_tuple() == (0, -2, 4, 0)

    def test_union(self):
        """Test union of two boxes."""
        a = BoundingBox(0, 0, 2, 2)
        b = BoundingBox(1, -1, 5, 1)
        assert a.union(b) == BoundingBox(0, -1, 5, 2)

    def test_spans_y(self):
        """Test the vertical range check includes the borders."""
        box = BoundingBox(0, 0, 10, 10)
        assert box.spans_y(0)
        assert box.spans_y(10)
        assert not box.spans_y(10.01)

    def test_contains_point_with_tolerance(self):
        """Test containment with and without tolerance."""
        box = BoundingBox(0, 0, 10, 10)
        assert box.contains_point(Point(10, 0))
        assert not box.contains_point(Point(11, 5))
        assert box.contains_point(Point(11, 5), tolerance=1)

    def test_potentially_within(self):
        """Test the grown-box proximity check."""
        box = BoundingBox(0, 0, 10, 10)
        assert box.potentially_within(Point(-3, 5), 3)
        assert not box.potentially_within(Point(-3.5, 5), 3)
        # Corners are accepted even when the true distance is larger
        assert box.potentially_within(Point(-3, -3), 3)


class TestSegments:
    """Tests for the segment variants."""

    def test_endpoints(self):
        """Test start and end of each variant."""
        line = LinearSegment(Point(0, 0), Point(1, 1))
        quad = QuadraticSegment(Point(0, 0), Point(1, 2), Point(2, 0))
        cubic = CubicSegment(Point(0, 0), Point(0, 1), Point(1, 1), Point(1, 0))

        assert (line.start, line.end) == (Point(0, 0), Point(1, 1))
        assert quad.end == Point(2, 0)
        assert cubic.ctrl0 == Point(0, 1)
        assert cubic.end == Point(1, 0)

    def test_value_equality(self):
        """Test segments compare by value."""
        assert LinearSegment(Point(0, 0), Point(1, 1)) == LinearSegment(Point(0, 0), Point(1, 1))
        assert LinearSegment(Point(0, 0), Point(1, 1)) != LinearSegment(Point(1, 1), Point(0, 0))

    def test_immutable(self):
        """Test segments are frozen."""
        quad = QuadraticSegment(Point(0, 0), Point(1, 2), Point(2, 0))
        with pytest.raises(AttributeError):
            quad.ctrl = Point(5, 5)  # type: ignore[misc]


class TestEnums:
    """Tests for EdgeColor and Precision."""

    def test_edge_color_channels(self):
        """Test color values as RGB bit masks."""
        assert EdgeColor.BLACK == 0
        assert EdgeColor.WHITE == 7
        assert EdgeColor.RED | EdgeColor.GREEN | EdgeColor.BLUE == EdgeColor.WHITE

    def test_precision_epsilon(self):
        """Test the epsilon of each precision."""
        assert Precision.DOUBLE.epsilon == DOUBLE_EPSILON == sys.float_info.epsilon
        assert Precision.SINGLE.epsilon == SINGLE_EPSILON == 2.0**-23

    def test_precision_from_string(self):
        """Test precision lookup by value."""
        assert Precision("single") is Precision.SINGLE
        with pytest.raises(ValueError):
            Precision("half")


class TestRasterConfig:
    """Tests for RasterConfig."""

    def test_defaults(self):
        """Test default configuration values."""
        config = RasterConfig()
        assert config.mode == RenderMode.SDF
        assert config.size == 64
        assert config.offset == 8
        assert config.precision == Precision.DOUBLE

    def test_scale_for(self):
        """Test pixels per font unit."""
        assert RasterConfig(size=64).scale_for(2048) == pytest.approx(0.03125)

    def test_margin(self):
        """Test margin follows the mode."""
        assert RasterConfig(mode=RenderMode.SDF, offset=5).margin == 5
        assert RasterConfig(mode=RenderMode.BITMAP, padding=2).margin == 2

    @pytest.mark.parametrize("offset", [0, 128])
    def test_offset_range(self, offset):
        """Test offsets outside 1..127 are rejected."""
        with pytest.raises(ValidationError):
            RasterConfig(offset=offset)

    def test_size_range(self):
        """Test sizes below the minimum are rejected."""
        with pytest.raises(ValidationError):
            RasterConfig(size=1)

    def test_round_trip_through_dict(self):
        """Test the config survives the dict form sent to workers."""
        config = RasterConfig(mode=RenderMode.BITMAP, size=32, precision=Precision.SINGLE)
        assert RasterConfig(**config.model_dump()) == config

    def test_default_settings(self):
        """Test default application settings."""
        settings = get_default_settings()
        assert isinstance(settings, GlyphSdfSettings)
        assert settings.processing.max_workers is None
        assert settings.logging.log_level == "WARNING"


class TestExceptions:
    """Tests for the exception hierarchy."""

    def test_hierarchy(self):
        """Test every error derives from GlyphSdfError."""
        assert issubclass(GlyphNotFoundError, FontError)
        assert issubclass(GlyphRenderError, RenderError)
        for error in (FontError, RenderError, PenNotPlacedError):
            assert issubclass(error, GlyphSdfError)

    def test_messages(self):
        """Test error messages carry their context."""
        assert "line_to" in str(PenNotPlacedError("line_to"))
        assert "'A'" in str(GlyphNotFoundError("A"))
        error = GlyphRenderError("B", "boom")
        assert error.glyph_name == "B"
        assert "boom" in str(error)
