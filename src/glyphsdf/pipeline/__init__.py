"""Batch rendering pipeline for glyphsdf.

Ties the font reader, the geometry engine and the image writer together.

Key components:
- GlyphRenderer: Render a set of characters to PNG files
- render_glyph: Picklable single-glyph job
- rasterize_shape: Render one shape into a GrayscaleImage
"""

from glyphsdf.pipeline.renderer import (
    GlyphRenderer,
    image_size,
    rasterize_shape,
    render_glyph,
)

__all__ = [
    "GlyphRenderer",
    "image_size",
    "rasterize_shape",
    "render_glyph",
]
