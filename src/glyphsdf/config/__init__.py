"""Configuration management for glyphsdf.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- RasterConfig: Rasterization settings (mode, size, SDF offset, precision)
- ProcessingConfig: Batch rendering settings
- LoggingConfig: Logging settings
- GlyphSdfSettings: Main application settings
"""

from glyphsdf.config.settings import (
    GlyphSdfSettings,
    LoggingConfig,
    ProcessingConfig,
    RasterConfig,
    RenderMode,
    get_default_settings,
)

__all__ = [
    "GlyphSdfSettings",
    "LoggingConfig",
    "ProcessingConfig",
    "RasterConfig",
    "RenderMode",
    "get_default_settings",
]
