"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with progress bars and formatted messages.
"""

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.text import Text

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def create_progress() -> Progress:
    """Create a rich progress bar for glyph rendering.

    Returns:
        Configured Progress instance with bar and time elapsed.
    """
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=40, complete_style="green", finished_style="green"),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=False,
    )


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]glyphsdf[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_font_info(font_path: str, font_type: str, glyph_count: int, upm: int) -> None:
    """Print font information.

    Args:
        font_path: Path to the font file
        font_type: Font format type (e.g., "TrueType", "OpenType")
        glyph_count: Total number of glyphs in font
        upm: Units per em value
    """
    # Use Text to safely handle paths with special characters
    line1 = Text("  ")
    line1.append(font_path)
    line1.append(f" ({font_type})")
    console.print(line1)
    console.print(f"  {glyph_count:,} glyphs {SYM_DOT} {upm:,} UPM")


def print_render_info(mode: str, size: float, offset: int, glyphs: int, workers: str) -> None:
    """Print rendering configuration.

    Args:
        mode: Render mode name
        size: Pixels per em
        offset: SDF spread in pixels
        glyphs: Number of distinct characters to render
        workers: Worker count description
    """
    details = f"{size:g} px/em"
    if mode == "sdf":
        details += f" {SYM_DOT} spread {offset} px"
    console.print(f"  {glyphs} glyphs {SYM_DOT} {mode} {SYM_DOT} {details}")
    console.print(f"  {workers} {SYM_DOT} Ctrl+C to cancel")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_success(
    output_dir: str,
    total_time_s: float,
    rendered: int,
    skipped: int,
    errors: int,
    avg_time_ms: float | None = None,
) -> None:
    """Print success message with summary.

    Args:
        output_dir: Directory receiving the images
        total_time_s: Total rendering time in seconds
        rendered: Number of images written
        skipped: Number of glyphs without outline
        errors: Number of errors encountered
        avg_time_ms: Average rendering time per glyph in milliseconds
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}")

    line = Text("  ")
    line.append(output_dir, style="bold")
    console.print(line)

    error_style = "red" if errors > 0 else "green"
    console.print(
        f"  {rendered} images {SYM_DOT} {skipped} empty {SYM_DOT} "
        f"[{error_style}]{errors} errors[/{error_style}]"
    )

    if avg_time_ms is not None:
        console.print(f"  {avg_time_ms:.1f}ms avg per glyph")


def print_errors(errors: list[tuple[str, str]]) -> None:
    """Print per-glyph error lines.

    Args:
        errors: List of (glyph name, message) pairs
    """
    for glyph_name, message in errors:
        console.print(f"  [red]{SYM_ERR}[/red] {glyph_name}: {message}")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")


def print_cancellation_summary(rendered: int, cancelled: int) -> None:
    """Print cancellation summary.

    Args:
        rendered: Number of glyphs rendered before cancellation
        cancelled: Number of pending tasks that were cancelled
    """
    console.print(f"\n{SYM_DOT} [bold]Cancelled[/bold]")
    console.print(f"  {rendered} glyphs rendered {SYM_DOT} {cancelled} tasks cancelled")
