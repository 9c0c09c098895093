"""Pixel sink writing rasterizer output into grayscale images.

GrayscaleImage collects the rasterizer's per-pixel callbacks into a Pillow
``"L"`` image and saves it as PNG.
"""

from pathlib import Path

from PIL import Image

BITMAP_FILLED = 0
BITMAP_EMPTY = 255


class GrayscaleImage:
    """8-bit grayscale image used as a rasterizer callback target.

    Example:
        image = GrayscaleImage(width, height)
        rasterizer.rasterize_sdf(shape, width, height, 8, image.draw_sdf_pixel)
        image.save(Path("A_sdf.png"))
    """

    def __init__(self, width: int, height: int) -> None:
        self._image = Image.new("L", (width, height), color=BITMAP_EMPTY)
        self._pixels = self._image.load()

    @property
    def width(self) -> int:
        return self._image.width

    @property
    def height(self) -> int:
        return self._image.height

    @property
    def image(self) -> Image.Image:
        """Underlying Pillow image."""
        return self._image

    def draw_bitmap_pixel(self, x: int, y: int, filled: bool) -> None:
        """Bitmap callback: filled pixels are black, empty ones white."""
        self._pixels[x, y] = BITMAP_FILLED if filled else BITMAP_EMPTY

    def draw_sdf_pixel(self, x: int, y: int, value: int) -> None:
        """SDF callback: store the encoded byte as is."""
        self._pixels[x, y] = value

    def get_pixel(self, x: int, y: int) -> int:
        return self._pixels[x, y]

    def to_rows(self) -> list[list[int]]:
        """Pixel values as rows, top row first."""
        return [[self._pixels[x, y] for x in range(self.width)] for y in range(self.height)]

    @staticmethod
    def get_output_path(output_dir: Path, glyph_name: str, mode: str) -> Path:
        """Build the output file path for a rendered glyph.

        Args:
            output_dir: Directory receiving the images
            glyph_name: Glyph name (e.g., "A", "at")
            mode: Render mode name

        Returns:
            Path like ``output_dir/A_sdf.png``
        """
        return output_dir / f"{glyph_name}_{mode}.png"

    def save(self, path: Path) -> None:
        """Save the image as PNG, creating parent directories as needed."""
        path.parent.mkdir(parents=True, exist_ok=True)
        self._image.save(path, format="PNG")
