"""Utility functions for glyphsdf.

This module provides utility functions including:

- Logging setup and configuration
- Rendering statistics and progress reporting helpers
"""

from glyphsdf.utils.logging import (
    RenderLogger,
    RenderStats,
    configure_logging,
)

__all__ = [
    "RenderLogger",
    "RenderStats",
    "configure_logging",
]
