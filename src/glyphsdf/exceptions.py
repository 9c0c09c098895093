"""Exception hierarchy for glyphsdf."""


class GlyphSdfError(Exception):
    """Base exception for all glyphsdf errors."""

    pass


class OutlineError(GlyphSdfError):
    """Errors related to the outline command stream."""

    pass


class PenNotPlacedError(OutlineError):
    """A drawing command arrived before any move_to.

    This is a contract violation by the caller feeding the outline, the
    library never recovers from it.
    """

    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__(f"'{command}' called before move_to")


class FontError(GlyphSdfError):
    """Errors related to font loading."""

    pass


class FontLoadError(FontError):
    """Error loading a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class GlyphNotFoundError(FontError):
    """Requested glyph not found in font."""

    def __init__(self, glyph_name: str) -> None:
        self.glyph_name = glyph_name
        super().__init__(f"Glyph '{glyph_name}' not found in font")


class RenderError(GlyphSdfError):
    """Errors related to rendering glyph images."""

    pass


class GlyphRenderError(RenderError):
    """Error rendering a specific glyph."""

    def __init__(self, glyph_name: str, reason: str) -> None:
        self.glyph_name = glyph_name
        self.reason = reason
        super().__init__(f"Error rendering glyph '{glyph_name}': {reason}")
