"""Font and image I/O layer for glyphsdf.

This module connects the geometry engine to its collaborators: fontTools
decodes glyph outlines into drawing commands, Pillow stores the rasterized
pixels.

Key classes:
- FontReader: Load fonts and build glyph shapes
- ShapePen: fontTools pen feeding a ShapeBuilder
- GrayscaleImage: Pixel sink for bitmap and SDF output
"""

from glyphsdf.io.pen import ShapePen
from glyphsdf.io.reader import FontReader
from glyphsdf.io.writer import GrayscaleImage

__all__ = [
    "FontReader",
    "GrayscaleImage",
    "ShapePen",
]
