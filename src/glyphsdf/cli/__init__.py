"""Command-line interface for glyphsdf.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Bitmap and SDF rendering of any characters in a font
- Progress bar for glyph rendering
- Verbose/quiet output modes
- Detailed error reporting
"""

from glyphsdf.cli.app import cli, main

__all__ = ["cli", "main"]
