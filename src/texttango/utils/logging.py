"""Logging utilities for TextTango."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

import structlog


@dataclass
class GenerationStats:
    """Statistics from a generation run."""

    pairs_generated: int = 0
    spaces: int = 0
    missing_glyphs: int = 0
    degenerate_pairs: int = 0
    failed_parts: int = 0
    supports_added: int = 0
    bridges_added: int = 0
    islands_removed: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate generation duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


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
        log_file = Path(f"texttango_{timestamp}.log")

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

    logger = structlog.get_logger("texttango")
    logger.info("Logging initialized", log_file=str(log_file), level=file_level)

    return logger


class GenerationLogger:
    """Logger for tracking per-position events and run statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else structlog.get_logger("texttango")
        self._stats = GenerationStats()

    def log_generation_start(self, text1: str, text2: str, positions: int) -> None:
        """Log start of a generation run."""
        self._logger.info("Generation started", text1=text1, text2=text2, positions=positions)

    def log_pair_complete(self, index: int, label: str, width: float, height: float) -> None:
        """Log a position that produced geometry."""
        self._logger.debug(
            "Pair generated",
            index=index,
            pair=label,
            width=round(width, 3),
            height=round(height, 3),
        )
        self._stats.pairs_generated += 1

    def log_space(self, index: int) -> None:
        """Log a position with no geometry on either side."""
        self._logger.debug("Position is empty", index=index)
        self._stats.spaces += 1

    def log_missing_glyph(self, index: int, char: str, font_id: str) -> None:
        """Log a character the font has no outlines for."""
        self._logger.warning("Missing glyph", index=index, char=char, font=font_id)
        self._stats.missing_glyphs += 1

    def log_degenerate(self, index: int, label: str, width: float, height: float) -> None:
        """Log an intersection too thin to print."""
        self._logger.warning(
            "Degenerate intersection treated as space",
            index=index,
            pair=label,
            width=round(width, 6),
            height=round(height, 6),
        )
        self._stats.degenerate_pairs += 1

    def log_part_error(self, part: str, index: int, error: Exception) -> None:
        """Log a failed part that was skipped."""
        self._logger.error(
            "Part generation failed",
            part=part,
            index=index,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.failed_parts += 1
        self._stats.errors.append((f"{part}[{index}]", str(error)))

    def log_support(self, index: int, bottom: float, top: float) -> None:
        """Log a support pillar."""
        self._logger.debug("Support added", index=index, bottom=round(bottom, 3), top=round(top, 3))
        self._stats.supports_added += 1

    def log_bridges(self, index: int, count: int, manual: bool = False) -> None:
        """Log connectors added to a pair."""
        if count:
            self._logger.debug("Bridges added", index=index, count=count, manual=manual)
        self._stats.bridges_added += count

    def log_islands_removed(self, kept: int, removed: int) -> None:
        """Log floating-island filtering."""
        self._logger.info("Floating islands filtered", kept=kept, removed=removed)
        self._stats.islands_removed += removed

    def log_generation_complete(self, triangles: int, duration_ms: float) -> None:
        """Log the end of a generation run."""
        self._logger.info(
            "Generation complete",
            triangles=triangles,
            pairs=self._stats.pairs_generated,
            duration_ms=round(duration_ms, 2),
        )

    @property
    def logger(self) -> structlog.stdlib.BoundLogger:
        """The underlying structlog logger."""
        return self._logger

    @property
    def stats(self) -> GenerationStats:
        """Get current generation statistics."""
        return self._stats
