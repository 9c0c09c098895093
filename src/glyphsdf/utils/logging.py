"""Logging utilities for glyphsdf."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

import structlog


@dataclass
class RenderStats:
    """Statistics from a rendering run."""

    rendered_count: int = 0
    skipped_count: int = 0
    error_count: int = 0
    pixel_count: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    glyph_times_ms: list[float] = field(default_factory=list)
    was_cancelled: bool = False
    cancelled_count: int = 0
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate rendering duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def avg_glyph_time_ms(self) -> float | None:
        if not self.glyph_times_ms:
            return None
        return sum(self.glyph_times_ms) / len(self.glyph_times_ms)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (auto-generated if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    if log_file is None:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = Path(f"glyphsdf_{timestamp}.log")

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(getattr(logging, file_level.upper()))
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("glyphsdf")
    logger.info("Logging initialized", log_file=str(log_file), level=file_level)

    return logger


class RenderLogger:
    """Logger for tracking rendering progress and statistics."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger,
        stats: RenderStats | None = None,
    ) -> None:
        self._logger = logger
        self._stats = stats if stats is not None else RenderStats()

    def log_glyph_start(self, glyph_name: str) -> None:
        """Log start of glyph rendering."""
        self._logger.debug("Rendering glyph", glyph=glyph_name)

    def log_glyph_complete(
        self,
        glyph_name: str,
        width: int,
        height: int,
        duration_ms: float,
        output_path: str | None = None,
    ) -> None:
        """Log successful glyph rendering."""
        self._logger.info(
            "Glyph rendered",
            glyph=glyph_name,
            width=width,
            height=height,
            output=output_path,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.rendered_count += 1
        self._stats.pixel_count += width * height
        self._stats.glyph_times_ms.append(duration_ms)

    def log_glyph_skipped(self, glyph_name: str, reason: str) -> None:
        """Log skipped glyph."""
        self._logger.debug("Glyph skipped", glyph=glyph_name, reason=reason)
        self._stats.skipped_count += 1

    def log_glyph_error(
        self,
        glyph_name: str,
        error: Exception | str,
        traceback: str | None = None,
    ) -> None:
        """Log glyph rendering error."""
        self._logger.error(
            "Glyph rendering failed",
            glyph=glyph_name,
            error=str(error),
            error_type=type(error).__name__ if isinstance(error, Exception) else None,
            traceback=traceback,
        )
        self._stats.error_count += 1
        self._stats.errors.append((glyph_name, str(error)))

    def log_shape_analysis(
        self,
        glyph_name: str,
        edge_count: int,
        contour_count: int,
    ) -> None:
        """Log outline structure of a glyph."""
        self._logger.debug(
            "Shape assembled",
            glyph=glyph_name,
            edges=edge_count,
            contours=contour_count,
        )

    @property
    def stats(self) -> RenderStats:
        """Get current rendering statistics."""
        return self._stats
