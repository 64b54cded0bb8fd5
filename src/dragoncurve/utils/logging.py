"""Logging utilities for Dragoncurve."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

# Handlers installed by configure_logging, replaced on reconfiguration
_installed_handlers: list[logging.Handler] = []


@dataclass
class RenderStats:
    """Statistics from a rendering session."""

    depth_changes: int = 0
    grows: int = 0
    shrinks: int = 0
    rebuilds: int = 0
    segments_drawn: int = 0
    files_written: int = 0
    outputs: list[str] = field(default_factory=list)
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
        quiet: If True, suppress console output except errors

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

    console_handler = logging.StreamHandler()
    console_handler.setLevel(
        logging.ERROR if quiet else getattr(logging, console_level.upper())
    )
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

    logger = structlog.get_logger("dragoncurve")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class RenderLogger:
    """Logger for tracking curve updates, exports and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = RenderStats()

    def log_created(self, variant: str, start: str) -> None:
        """Log the first curve built for a session."""
        self._logger.debug("Curve created", variant=variant, start=start)

    def log_rebuild(self, variant: str, start: str) -> None:
        """Log a curve rebuilt after a variant or start change."""
        self._logger.info("Curve rebuilt", variant=variant, start=start)
        self._stats.rebuilds += 1

    def log_depth_change(
        self,
        old_depth: int,
        new_depth: int,
        segments: int,
        duration_ms: float,
    ) -> None:
        """Log a depth adjustment."""
        self._logger.debug(
            "Depth changed",
            old_depth=old_depth,
            new_depth=new_depth,
            segments=segments,
            direction="grow" if new_depth > old_depth else "shrink",
            duration_ms=round(duration_ms, 3),
        )
        self._stats.depth_changes += 1
        if new_depth > old_depth:
            self._stats.grows += 1
        else:
            self._stats.shrinks += 1

    def log_export(
        self,
        output: str,
        segments: int,
        colored: bool,
        duration_ms: float,
    ) -> None:
        """Log a completed export."""
        self._logger.info(
            "Curve exported",
            output=output,
            segments=segments,
            colored=colored,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.segments_drawn += segments
        self._stats.files_written += 1
        self._stats.outputs.append(output)

    def log_export_error(self, output: str, error: Exception) -> None:
        """Log a failed export."""
        self._logger.error(
            "Curve export failed",
            output=output,
            error=str(error),
            error_type=type(error).__name__,
        )

    @property
    def stats(self) -> RenderStats:
        """Get current rendering statistics."""
        return self._stats
