"""Font reader for loading TTF/OTF fonts.

This module provides the FontReader class for loading font files
and turning glyph outlines into shapes.
"""

from collections.abc import Iterator
from pathlib import Path

from fontTools.ttLib import TTFont

from glyphsdf.core.shape import Shape
from glyphsdf.domain import Precision
from glyphsdf.exceptions import GlyphNotFoundError
from glyphsdf.io.pen import ShapePen


class FontReader:
    """Loads TTF/OTF fonts and extracts glyph shapes.

    Example:
        with FontReader(Path("font.ttf")) as reader:
            shape = reader.get_shape(reader.glyph_name_for_char("A"))
    """

    def __init__(self, font_path: Path) -> None:
        """Initialize the font reader.

        Args:
            font_path: Path to the TTF or OTF font file
        """
        self._font_path = font_path
        self._font: TTFont | None = None

    def load(self) -> None:
        """Load the font file.

        Raises:
            FileNotFoundError: If font file does not exist
            Exception: If font file is invalid or cannot be loaded
        """
        if not self._font_path.exists():
            raise FileNotFoundError(f"Font file not found: {self._font_path}")

        self._font = TTFont(str(self._font_path))

    def _require_font(self) -> TTFont:
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")
        return self._font

    @property
    def format(self) -> str:
        """Return font format.

        Returns:
            'TrueType' for TTF fonts, 'OpenType' for OTF fonts

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        font = self._require_font()
        if "CFF " in font or "CFF2" in font:
            return "OpenType"
        return "TrueType"

    @property
    def units_per_em(self) -> int:
        """Return font's units per em.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        return self._require_font()["head"].unitsPerEm  # type: ignore[attr-defined]

    @property
    def glyph_count(self) -> int:
        """Return total number of glyphs in the font.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        return self._require_font()["maxp"].numGlyphs

    def iter_glyph_names(self) -> Iterator[str]:
        """Iterate over glyph names in font order.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        yield from self._require_font().getGlyphOrder()

    def glyph_name_for_char(self, char: str) -> str:
        """Map a character to its glyph name through the best cmap.

        Args:
            char: Single character

        Returns:
            Glyph name

        Raises:
            GlyphNotFoundError: If the font does not map the character
            RuntimeError: If font has not been loaded yet
        """
        cmap = self._require_font().getBestCmap() or {}
        name = cmap.get(ord(char))
        if name is None:
            raise GlyphNotFoundError(char)
        return name

    def get_shape(self, name: str, precision: Precision = Precision.DOUBLE) -> Shape | None:
        """Build the Shape of a glyph.

        Args:
            name: Glyph name
            precision: Scalar precision for the shape

        Returns:
            The glyph's Shape, or None for glyphs without outline (space)

        Raises:
            GlyphNotFoundError: If the glyph does not exist
            RuntimeError: If font has not been loaded yet
        """
        glyph_set = self._require_font().getGlyphSet()
        if name not in glyph_set:
            raise GlyphNotFoundError(name)

        pen = ShapePen(glyph_set, precision=precision)
        glyph_set[name].draw(pen)
        return pen.finish()

    def close(self) -> None:
        """Close the font file and free resources."""
        if self._font is not None:
            self._font.close()
            self._font = None

    def __enter__(self) -> "FontReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
