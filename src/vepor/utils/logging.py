"""Logging utilities for Vepor."""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path

import structlog

_installed_handlers: list[logging.Handler] = []


@dataclass
class ResolutionStats:
    """Statistics from a run of shape resolutions and queries."""

    scenes_resolved: int = 0
    segments_produced: int = 0
    intersections_found: int = 0
    queries_answered: int = 0
    error_count: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate run duration."""
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

    Handlers installed by a previous call are removed first, so repeated
    configuration does not duplicate output.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)
        _installed_handlers.append(console_handler)

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

    logger = structlog.get_logger("vepor")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class ResolutionLogger:
    """Logger for tracking scene resolutions, queries and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ResolutionStats()

    def start_run(self) -> None:
        """Mark the start of a run."""
        self._stats.start_time = time.time()

    def finish_run(self) -> ResolutionStats:
        """Mark the end of a run and log its summary.

        Returns:
            Final statistics for the run
        """
        self._stats.end_time = time.time()
        self._logger.info(
            "Run complete",
            scenes=self._stats.scenes_resolved,
            segments=self._stats.segments_produced,
            intersections=self._stats.intersections_found,
            queries=self._stats.queries_answered,
            errors=self._stats.error_count,
            failed_scenes=[name for name, _ in self._stats.errors],
            duration_seconds=round(self._stats.duration_seconds, 4),
        )
        return self._stats

    def log_scene_start(self, scene_name: str) -> None:
        """Log start of a scene resolution."""
        self._logger.debug("Resolving scene", scene=scene_name)

    def log_scene_resolved(
        self,
        scene_name: str,
        segments: int,
        intersections: int,
        duration_ms: float,
    ) -> None:
        """Log a successful scene resolution."""
        self._logger.info(
            "Scene resolved",
            scene=scene_name,
            segments=segments,
            intersections=intersections,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.scenes_resolved += 1
        self._stats.segments_produced += segments
        self._stats.intersections_found += intersections

    def log_containment_query(
        self,
        scene_name: str,
        x: float,
        y: float,
        inside: bool,
    ) -> None:
        """Log a point-in-shape query."""
        self._logger.debug(
            "Containment query",
            scene=scene_name,
            x=x,
            y=y,
            inside=inside,
        )
        self._stats.queries_answered += 1

    def log_scene_error(self, scene_name: str, error: Exception) -> None:
        """Log a scene failure."""
        self._logger.error(
            "Scene failed",
            scene=scene_name,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.error_count += 1
        self._stats.errors.append((scene_name, str(error)))

    @property
    def stats(self) -> ResolutionStats:
        """Get current statistics."""
        return self._stats
