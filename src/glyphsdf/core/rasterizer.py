"""Pixel grid rasterization of shapes.

The Rasterizer maps pixel coordinates to shape space and emits one value per
pixel through a callback:
- Bitmap mode: even-odd fill result as a bool
- SDF mode: signed distance to the boundary encoded in one byte

Pixel (px, py) samples the shape at its center:

    x = (px + 0.5) / scale_x - translate_x
    y = (py + 0.5) / scale_y - translate_y

Rows are computed from low to high shape-space y and flipped on output, so
output row 0 holds the largest y, as in an image with a top-left origin.
"""

from collections.abc import Callable
from dataclasses import dataclass, replace

from glyphsdf.core.shape import Shape
from glyphsdf.domain import Point

SDF_BOUNDARY = 128
SDF_MAX_MAGNITUDE = 127
SDF_UNKNOWN = 0

BitmapCallback = Callable[[int, int, bool], None]
SdfCallback = Callable[[int, int, int], None]


def encode_distance(distance: float, filled: bool, scaled_offset: float) -> int:
    """Encode a boundary distance into one SDF byte.

    The distance is scaled so scaled_offset maps to 128, rounded half up and
    clamped to 127, then added to 128 inside the shape and subtracted from
    128 outside.

    Args:
        distance: Distance to the nearest boundary point in shape units
        filled: Whether the sample point is inside the shape
        scaled_offset: Distance in shape units matching the full SDF spread

    Returns:
        Encoded value in 1..255
    """
    magnitude = min(int(distance * 128.0 / scaled_offset + 0.5), SDF_MAX_MAGNITUDE)
    if filled:
        return SDF_BOUNDARY + magnitude
    return SDF_BOUNDARY - magnitude


@dataclass(frozen=True)
class Rasterizer:
    """Maps a pixel grid onto shape space and renders shapes into it.

    Attributes:
        scale_x: Pixels per shape unit along x
        scale_y: Pixels per shape unit along y
        translate_x: Shape-space offset subtracted from sample x
        translate_y: Shape-space offset subtracted from sample y

    Example:
        rasterizer = Rasterizer().with_scale(0.05).with_translate(-min_x, -min_y)
        rasterizer.rasterize_bitmap(shape, width, height, image.draw_bitmap_pixel)
    """

    scale_x: float = 1.0
    scale_y: float = 1.0
    translate_x: float = 0.0
    translate_y: float = 0.0

    def __post_init__(self) -> None:
        if self.scale_x <= 0.0 or self.scale_y <= 0.0:
            raise ValueError(f"Scale must be positive, got ({self.scale_x}, {self.scale_y})")

    def with_scale(self, scale: float) -> "Rasterizer":
        """Return a copy using the same scale on both axes."""
        return replace(self, scale_x=scale, scale_y=scale)

    def with_scale_xy(self, scale_x: float, scale_y: float) -> "Rasterizer":
        """Return a copy with independent axis scales."""
        return replace(self, scale_x=scale_x, scale_y=scale_y)

    def with_translate(self, x: float, y: float) -> "Rasterizer":
        """Return a copy with the given translation."""
        return replace(self, translate_x=x, translate_y=y)

    @property
    def min_scale(self) -> float:
        return min(self.scale_x, self.scale_y)

    def pixel_to_shape(self, px: int, py: int) -> Point:
        """Shape-space position of the center of pixel (px, py).

        py counts from the bottom of the grid, before the output flip.
        """
        return Point(self._column_x(px), self._row_y(py))

    def _column_x(self, px: int) -> float:
        return (px + 0.5) / self.scale_x - self.translate_x

    def _row_y(self, py: int) -> float:
        return (py + 0.5) / self.scale_y - self.translate_y

    def rasterize_bitmap(
        self,
        shape: Shape,
        width: int,
        height: int,
        draw_pixel: BitmapCallback,
    ) -> None:
        """Render the even-odd fill of shape.

        Args:
            shape: Shape to render
            width: Grid width in pixels
            height: Grid height in pixels
            draw_pixel: Called once per pixel with (x, y, filled)
        """
        _check_size(width, height)
        for y in range(height):
            cursor = shape.scanline(self._row_y(y)).cursor()
            out_y = height - y - 1
            for x in range(width):
                draw_pixel(x, out_y, cursor.is_filled(self._column_x(x)))

    def rasterize_sdf(
        self,
        shape: Shape,
        width: int,
        height: int,
        offset: int,
        draw_pixel: SdfCallback,
    ) -> None:
        """Render a single-channel signed distance field of shape.

        Values above 128 are inside, below 128 outside, 128 is the boundary.
        Pixels farther than offset pixels from every edge get 0.

        Args:
            shape: Shape to render
            width: Grid width in pixels
            height: Grid height in pixels
            offset: Distance spread in pixels (1..127)
            draw_pixel: Called once per pixel with (x, y, value)

        Raises:
            ValueError: If offset is outside 1..127
        """
        _check_size(width, height)
        if not 1 <= offset <= SDF_MAX_MAGNITUDE:
            raise ValueError(f"SDF offset must be in 1..{SDF_MAX_MAGNITUDE}, got {offset}")

        min_scale = self.min_scale
        epsilon = min_scale / offset
        scaled_offset = offset / min_scale

        for y in range(height):
            p_y = self._row_y(y)
            cursor = shape.scanline(p_y).cursor()
            out_y = height - y - 1
            for x in range(width):
                p_x = self._column_x(x)
                filled = cursor.is_filled(p_x)
                closest = shape.closest_point(Point(p_x, p_y), scaled_offset, epsilon)
                if closest is None:
                    value = SDF_UNKNOWN
                else:
                    value = encode_distance(closest[0], filled, scaled_offset)
                draw_pixel(x, out_y, value)


def _check_size(width: int, height: int) -> None:
    if width < 0 or height < 0:
        raise ValueError(f"Grid size must not be negative, got {width}x{height}")
