"""glyphsdf - Rasterize vector outlines into bitmaps and signed distance fields.

glyphsdf turns move/line/quadratic/cubic outlines, such as font glyphs, into
a binary even-odd bitmap or a single-channel signed distance field suitable
for resolution-independent text rendering.

Example:
    $ glyphsdf Roboto-Regular.ttf "Ag" --mode sdf

This will write out/A_sdf.png and out/g_sdf.png.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
