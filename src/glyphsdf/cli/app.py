"""CLI application entry point for glyphsdf.

This module provides the main CLI interface using Typer.
"""

import os
from pathlib import Path
from typing import Annotated

import typer

from glyphsdf import __version__
from glyphsdf.cli.output import (
    console,
    create_progress,
    print_cancellation_summary,
    print_error,
    print_errors,
    print_font_info,
    print_header,
    print_render_info,
    print_step,
    print_success,
)
from glyphsdf.config import (
    GlyphSdfSettings,
    LoggingConfig,
    ProcessingConfig,
    RasterConfig,
    RenderMode,
)
from glyphsdf.domain import Precision
from glyphsdf.exceptions import FontLoadError, GlyphSdfError
from glyphsdf.io import FontReader
from glyphsdf.pipeline import GlyphRenderer

# Create the Typer app
app = typer.Typer(
    name="glyphsdf",
    help="Rasterize font glyphs into bitmaps or signed distance fields.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]glyphsdf[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def render(
    input_font: Annotated[
        Path,
        typer.Argument(
            help="Path to input TTF/OTF font file",
            show_default=False,
        ),
    ],
    text: Annotated[
        str,
        typer.Argument(
            help="Characters to render, one image per distinct character",
            show_default=False,
        ),
    ],
    output_dir: Annotated[
        Path,
        typer.Option(
            "--output",
            "-o",
            help="Output directory for the PNG images",
        ),
    ] = Path("out"),
    mode: Annotated[
        str,
        typer.Option(
            "--mode",
            "-m",
            help="Output kind (bitmap|sdf)",
        ),
    ] = "sdf",
    size: Annotated[
        float,
        typer.Option(
            "--size",
            "-s",
            help="Pixels per em (4-2048)",
            min=4.0,
            max=2048.0,
        ),
    ] = 64.0,
    offset: Annotated[
        int,
        typer.Option(
            "--offset",
            help="SDF spread and margin in pixels (1-127)",
            min=1,
            max=127,
        ),
    ] = 8,
    precision: Annotated[
        str,
        typer.Option(
            "--precision",
            help="Scalar precision for tolerances (single|double)",
        ),
    ] = "double",
    workers: Annotated[
        int | None,
        typer.Option(
            "--workers",
            "-j",
            help="Number of parallel workers (default: auto)",
            min=1,
        ),
    ] = None,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Render glyphs of a font as bitmaps or signed distance fields.

    Writes one grayscale PNG per distinct character of TEXT into the output
    directory, named after the glyph and the mode (e.g. A_sdf.png).

    Example:
        glyphsdf Roboto-Regular.ttf "ABC" --mode sdf --size 64
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if not input_font.exists():
        print_error(
            f"Input file not found: {input_font}",
            details=f"The file '{input_font}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not input_font.is_file():
        print_error(
            f"Input path is not a file: {input_font}",
            details="Please provide a path to a TTF or OTF font file.",
        )
        raise typer.Exit(code=1)

    try:
        render_mode = RenderMode(mode.lower())
    except ValueError:
        print_error(f"Invalid mode: {mode}", details="Valid values: bitmap, sdf")
        raise typer.Exit(code=1)

    try:
        scalar_precision = Precision(precision.lower())
    except ValueError:
        print_error(f"Invalid precision: {precision}", details="Valid values: single, double")
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    settings = GlyphSdfSettings(
        raster=RasterConfig(
            mode=render_mode,
            size=size,
            offset=offset,
            precision=scalar_precision,
        ),
        processing=ProcessingConfig(max_workers=workers),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "WARNING",
        ),
    )

    try:
        if not quiet:
            print_step("Loading font")
            try:
                with FontReader(input_font) as reader:
                    print_font_info(
                        font_path=str(input_font),
                        font_type=reader.format,
                        glyph_count=reader.glyph_count,
                        upm=reader.units_per_em,
                    )
            except Exception as e:
                raise FontLoadError(str(input_font), str(e)) from e

            glyph_total = len(dict.fromkeys(text))
            worker_desc = f"{workers} workers" if workers else f"{os.cpu_count() or 1} workers (auto)"
            print_step("Rendering")
            print_render_info(render_mode.value, size, offset, glyph_total, worker_desc)

        renderer = GlyphRenderer(settings)

        try:
            if not quiet:
                with create_progress() as progress:
                    task_id = progress.add_task("Rendering", total=len(dict.fromkeys(text)))

                    def update_progress(completed: int, *_: object) -> None:
                        progress.update(task_id, completed=completed)

                    stats = renderer.render(
                        font_path=input_font,
                        text=text,
                        output_dir=output_dir,
                        max_workers=workers,
                        progress_callback=update_progress,
                    )
            else:
                stats = renderer.render(
                    font_path=input_font,
                    text=text,
                    output_dir=output_dir,
                    max_workers=workers,
                )
        except KeyboardInterrupt:
            if not quiet:
                print_cancellation_summary(rendered=0, cancelled=len(dict.fromkeys(text)))
            raise typer.Exit(code=130) from None  # Standard Unix SIGINT exit code

        if not quiet:
            print_success(
                output_dir=str(output_dir),
                total_time_s=stats.duration_seconds,
                rendered=stats.rendered_count,
                skipped=stats.skipped_count,
                errors=stats.error_count,
                avg_time_ms=stats.avg_glyph_time_ms,
            )
            if verbose:
                print_errors(stats.errors)

        if stats.error_count:
            raise typer.Exit(code=1)

    except FontLoadError as e:
        print_error(f"Could not load font: {e.reason}")
        raise typer.Exit(code=1)
    except GlyphSdfError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
