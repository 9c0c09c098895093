"""Configuration settings for glyphsdf."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

from glyphsdf.domain import Precision


class RenderMode(str, Enum):
    """Output image kind."""

    BITMAP = "bitmap"
    SDF = "sdf"


class RasterConfig(BaseModel):
    """Configuration for glyph rasterization.

    Sizes are in pixels. The outline scale is derived from the font's UPM so
    that one em spans ``size`` pixels.
    """

    mode: RenderMode = Field(
        default=RenderMode.SDF,
        description="Render a bitmap or a signed distance field",
    )
    size: float = Field(
        default=64.0,
        ge=4.0,
        le=2048.0,
        description="Pixels per em",
    )
    offset: int = Field(
        default=8,
        ge=1,
        le=127,
        description="SDF spread in pixels, also the margin around the glyph",
    )
    padding: int = Field(
        default=1,
        ge=0,
        le=64,
        description="Margin around the glyph in bitmap mode",
    )
    precision: Precision = Field(
        default=Precision.DOUBLE,
        description="Scalar precision used for epsilon comparisons",
    )

    def scale_for(self, upm: int) -> float:
        """Get the outline-to-pixel scale for a font.

        Args:
            upm: Units per em of the font

        Returns:
            Pixels per font unit
        """
        return self.size / upm

    @property
    def margin(self) -> int:
        """Pixels kept free around the glyph outline."""
        return self.offset if self.mode is RenderMode.SDF else self.padding


class ProcessingConfig(BaseModel):
    """Configuration for batch rendering."""

    max_workers: int | None = Field(
        default=None,
        description="Max worker processes (None = auto)",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class GlyphSdfSettings(BaseModel):
    """Main application settings."""

    raster: RasterConfig = Field(default_factory=RasterConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> GlyphSdfSettings:
    """Get default application settings."""
    return GlyphSdfSettings()
