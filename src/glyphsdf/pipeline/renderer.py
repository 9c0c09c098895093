"""Glyph rendering orchestration.

This module runs the full pipeline for a set of characters: load the font,
build each glyph's Shape, rasterize it as bitmap or SDF and save a PNG per
glyph. Glyphs are rendered in worker processes with ProcessPoolExecutor;
each worker builds its own shapes and scanlines, nothing is shared.

Key components:
- rasterize_shape: Size the pixel grid around a shape and render it
- render_glyph: Top-level picklable function for parallel execution
- GlyphRenderer: Main orchestrator class for batch rendering
"""

import time
import traceback
from collections.abc import Callable
from concurrent.futures import ProcessPoolExecutor, as_completed
from pathlib import Path
from typing import Any

from glyphsdf.config import GlyphSdfSettings, RasterConfig, RenderMode
from glyphsdf.core import Rasterizer, Shape
from glyphsdf.exceptions import GlyphRenderError
from glyphsdf.io import FontReader, GrayscaleImage
from glyphsdf.utils import RenderLogger, RenderStats, configure_logging

ProgressCallback = Callable[[int, int, str, bool], None]


def image_size(shape: Shape, config: RasterConfig, scale: float) -> tuple[int, int]:
    """Pixel size of the image holding shape with its margin.

    Bitmaps get one extra pixel so the far edge of the outline is sampled;
    SDF images are padded by the distance spread on every side.

    Args:
        shape: Shape to render
        config: Raster configuration
        scale: Pixels per shape unit

    Returns:
        Tuple of (width, height)
    """
    bbox = shape.bbox
    extra = 2 * config.margin
    if config.mode is RenderMode.BITMAP:
        extra += 1
    return int(bbox.width * scale) + extra, int(bbox.height * scale) + extra


def rasterize_shape(shape: Shape, config: RasterConfig, scale: float) -> GrayscaleImage:
    """Render a shape into a new grayscale image.

    The outline's bounding box is moved to the margin corner of the image.

    Args:
        shape: Shape to render
        config: Raster configuration
        scale: Pixels per shape unit

    Returns:
        Rendered image
    """
    width, height = image_size(shape, config, scale)
    margin = config.margin / scale
    rasterizer = (
        Rasterizer()
        .with_scale(scale)
        .with_translate(-shape.bbox.min_x + margin, -shape.bbox.min_y + margin)
    )

    image = GrayscaleImage(width, height)
    if config.mode is RenderMode.SDF:
        rasterizer.rasterize_sdf(shape, width, height, config.offset, image.draw_sdf_pixel)
    else:
        rasterizer.rasterize_bitmap(shape, width, height, image.draw_bitmap_pixel)
    return image


def render_glyph(
    font_path: str,
    char: str,
    config_dict: dict[str, Any],
    output_dir: str,
) -> dict[str, Any]:
    """Render a single character to a PNG file.

    Top-level function designed to be picklable for use with ProcessPoolExecutor.

    Args:
        font_path: Path to the font file
        char: Character to render
        config_dict: Serialized raster configuration
        output_dir: Directory receiving the image

    Returns:
        Dictionary containing either:
        - Success: {"glyph_name", "char", "output_path", "width", "height",
          "edges", "contours", "duration_ms"}
        - Empty outline: {"skipped": str, "glyph_name", "char", "duration_ms"}
        - Error: {"error": str, "glyph_name": str, "traceback": str, "duration_ms": float}
    """
    start_time = time.time()
    glyph_name = char

    try:
        config = RasterConfig(**config_dict)

        with FontReader(Path(font_path)) as reader:
            glyph_name = reader.glyph_name_for_char(char)
            scale = config.scale_for(reader.units_per_em)
            shape = reader.get_shape(glyph_name, config.precision)

        if shape is None:
            return {
                "skipped": "empty outline",
                "glyph_name": glyph_name,
                "char": char,
                "duration_ms": (time.time() - start_time) * 1000,
            }

        image = rasterize_shape(shape, config, scale)
        output_path = GrayscaleImage.get_output_path(
            Path(output_dir), glyph_name, config.mode.value
        )
        image.save(output_path)

        return {
            "glyph_name": glyph_name,
            "char": char,
            "output_path": str(output_path),
            "width": image.width,
            "height": image.height,
            "edges": len(shape.edges),
            "contours": shape.contour_count,
            "duration_ms": (time.time() - start_time) * 1000,
        }

    except Exception as e:
        duration_ms = (time.time() - start_time) * 1000
        tb = traceback.format_exc()
        return {
            "error": str(GlyphRenderError(glyph_name, str(e))),
            "glyph_name": glyph_name,
            "traceback": tb,
            "duration_ms": duration_ms,
        }


class GlyphRenderer:
    """Orchestrates batch rendering of glyphs into images.

    Example:
        settings = GlyphSdfSettings()
        renderer = GlyphRenderer(settings)
        stats = renderer.render(
            font_path=Path("font.ttf"),
            text="ABC",
            output_dir=Path("out"),
            max_workers=4,
        )
    """

    def __init__(self, config: GlyphSdfSettings) -> None:
        """Initialize the renderer with configuration.

        Args:
            config: Settings containing raster, processing and logging config
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
            quiet=False,
        )

    def render(
        self,
        font_path: Path,
        text: str,
        output_dir: Path,
        max_workers: int | None = None,
        progress_callback: ProgressCallback | None = None,
    ) -> RenderStats:
        """Render every distinct character of text.

        Args:
            font_path: Path to input font file (TTF or OTF)
            text: Characters to render; duplicates are rendered once
            output_dir: Directory receiving one PNG per glyph
            max_workers: Maximum worker processes (None = config, then auto);
                1 renders in the calling process
            progress_callback: Optional callback(completed, total, char, success)

        Returns:
            RenderStats with counts, timing, and error details

        Raises:
            FileNotFoundError: If font file does not exist
            KeyboardInterrupt: If rendering is cancelled by user
        """
        stats = RenderStats()
        stats.start_time = time.time()
        render_logger = RenderLogger(self.logger, stats)

        if max_workers is None:
            max_workers = self.config.processing.max_workers

        if not font_path.exists():
            raise FileNotFoundError(f"Font file not found: {font_path}")

        chars = list(dict.fromkeys(text))
        self.logger.info(
            "Starting glyph rendering",
            font=str(font_path),
            output_dir=str(output_dir),
            glyphs=len(chars),
            mode=self.config.raster.mode.value,
            max_workers=max_workers,
        )

        config_dict = self.config.raster.model_dump()
        args = [(str(font_path), char, config_dict, str(output_dir)) for char in chars]

        if max_workers == 1:
            for completed, job in enumerate(args, start=1):
                render_logger.log_glyph_start(job[1])
                success = self._record_result(render_logger, render_glyph(*job))
                if progress_callback is not None:
                    progress_callback(completed, len(args), job[1], success)
        else:
            self._render_parallel(args, max_workers, render_logger, progress_callback)

        stats.end_time = time.time()
        self.logger.info(
            "Rendering complete",
            rendered=stats.rendered_count,
            skipped=stats.skipped_count,
            errors=stats.error_count,
            pixels=stats.pixel_count,
            duration_seconds=round(stats.duration_seconds, 2),
        )
        return stats

    def _render_parallel(
        self,
        args: list[tuple[str, str, dict[str, Any], str]],
        max_workers: int | None,
        render_logger: RenderLogger,
        progress_callback: ProgressCallback | None,
    ) -> None:
        """Render glyphs in worker processes."""
        total = len(args)
        completed = 0
        pending_futures: dict = {}

        with ProcessPoolExecutor(max_workers=max_workers) as executor:
            for job in args:
                render_logger.log_glyph_start(job[1])
                pending_futures[executor.submit(render_glyph, *job)] = job[1]

            try:
                for future in as_completed(pending_futures):
                    char = pending_futures.pop(future)
                    success = False

                    try:
                        success = self._record_result(render_logger, future.result())
                    except Exception as e:
                        # Executor-level error
                        render_logger.log_glyph_error(
                            glyph_name=char,
                            error=e,
                            traceback=traceback.format_exc(),
                        )

                    completed += 1
                    if progress_callback is not None:
                        progress_callback(completed, total, char, success)

            except KeyboardInterrupt:
                self.logger.info("Cancellation requested by user")
                render_logger.stats.was_cancelled = True
                render_logger.stats.cancelled_count = len(pending_futures)
                executor.shutdown(wait=True, cancel_futures=True)
                raise

    def _record_result(self, render_logger: RenderLogger, result: dict[str, Any]) -> bool:
        """Log one job result. Returns True when an image was written."""
        if "error" in result:
            render_logger.log_glyph_error(
                glyph_name=result["glyph_name"],
                error=result["error"],
                traceback=result.get("traceback"),
            )
            return False

        if "skipped" in result:
            render_logger.log_glyph_skipped(result["glyph_name"], result["skipped"])
            return True

        render_logger.log_shape_analysis(
            glyph_name=result["glyph_name"],
            edge_count=result["edges"],
            contour_count=result["contours"],
        )
        render_logger.log_glyph_complete(
            glyph_name=result["glyph_name"],
            width=result["width"],
            height=result["height"],
            duration_ms=result["duration_ms"],
            output_path=result["output_path"],
        )
        return True
