"""Logging utilities for scanfill."""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class RenderStats:
    """Statistics from a rendering run."""

    polygons_filled: int = 0
    polygons_skipped: int = 0
    pixels_covered: int = 0
    coverage: list[tuple[str, int]] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate rendering duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
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

    logger = structlog.get_logger("scanfill")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class RenderLogger:
    """Logger for tracking polygon fills and coverage statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = RenderStats()

    def start(self, width: int, height: int, polygon_count: int) -> None:
        """Log start of a rendering run."""
        self._stats.start_time = time.time()
        self._logger.info(
            "Rendering started",
            width=width,
            height=height,
            polygons=polygon_count,
        )

    def log_polygon_filled(self, name: str, vertices: int, pixels: int) -> None:
        """Log a completed polygon fill."""
        self._logger.debug("Polygon filled", polygon=name, vertices=vertices, pixels=pixels)
        self._stats.polygons_filled += 1
        self._stats.pixels_covered += pixels
        self._stats.coverage.append((name, pixels))

    def log_polygon_skipped(self, name: str, reason: str) -> None:
        """Log a polygon that contributed nothing."""
        self._logger.debug("Polygon skipped", polygon=name, reason=reason)
        self._stats.polygons_skipped += 1
        self._stats.coverage.append((name, 0))

    def finish(self) -> None:
        """Log end of a rendering run."""
        self._stats.end_time = time.time()
        self._logger.info(
            "Rendering complete",
            filled=self._stats.polygons_filled,
            skipped=self._stats.polygons_skipped,
            pixels=self._stats.pixels_covered,
            duration_ms=round(self._stats.duration_seconds * 1000, 2),
        )

    @property
    def stats(self) -> RenderStats:
        """Get current rendering statistics."""
        return self._stats
