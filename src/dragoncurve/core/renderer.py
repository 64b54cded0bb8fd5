"""Rendering orchestration.

This module ties settings, the curve session and the SVG emitters together:

- CurveRenderer: builds the configured curve and exports it as plain or
  coloured SVG, logging each step and keeping statistics
"""

import io
import time
from pathlib import Path
from typing import TextIO

from dragoncurve.config import Coloring, DragonSettings
from dragoncurve.core.curve import DragonCurve
from dragoncurve.core.session import CurveSession
from dragoncurve.exceptions import SvgWriteError
from dragoncurve.render import (
    SegmentPainter,
    make_stroke,
    paint_curve,
    start_point,
    write_colored_svg,
    write_svg,
)
from dragoncurve.utils import RenderLogger, RenderStats, configure_logging


class CurveRenderer:
    """Renders the configured curve to SVG.

    Manages the complete workflow:
    1. Build the curve at the configured depth
    2. Paint it (single path, or stroked segments when colouring is enabled)
    3. Write the SVG document
    4. Record statistics

    Example:
        settings = DragonSettings(curve=CurveConfig(depth=10))
        renderer = CurveRenderer(settings)
        stats = renderer.render_to_file(Path("dragon.svg"))
    """

    def __init__(self, config: DragonSettings) -> None:
        """Initialize renderer with configuration.

        Args:
            config: Dragoncurve settings containing curve and display config
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level.value,
            file_level=config.logging.file_log_level.value,
        )
        self.render_logger = RenderLogger(self.logger)
        self.session = CurveSession(config.curve, self.render_logger)

    @property
    def curve(self) -> DragonCurve:
        """The curve being rendered."""
        return self.session.curve

    @property
    def stats(self) -> RenderStats:
        """Statistics collected so far."""
        return self.render_logger.stats

    @property
    def colored(self) -> bool:
        """True when segments are drawn with individual strokes."""
        return self.config.display.coloring != Coloring.NONE

    def write(self, writer: TextIO) -> int:
        """Write the SVG document for the current curve.

        Args:
            writer: Text stream receiving the document

        Returns:
            Number of segments written
        """
        display = self.config.display
        curve = self.curve

        if not self.colored:
            write_svg(curve, display.size, writer)
            return len(curve)

        painter = SegmentPainter(
            start_point(display.size),
            make_stroke(display, len(curve)),
        )
        paint_curve(curve, painter, display.size)
        write_colored_svg(painter.segments, display.size, writer)
        return len(painter.segments)

    def render_to_string(self) -> str:
        """Render the current curve to an SVG string.

        Returns:
            Complete SVG document
        """
        started = time.perf_counter()
        buf = io.StringIO()
        segments = self.write(buf)
        self.render_logger.log_export(
            output="<string>",
            segments=segments,
            colored=self.colored,
            duration_ms=(time.perf_counter() - started) * 1000,
        )
        return buf.getvalue()

    def render_to_file(self, output_path: Path) -> RenderStats:
        """Render the current curve to an SVG file.

        Args:
            output_path: Destination file

        Returns:
            Statistics including this export

        Raises:
            SvgWriteError: If the file cannot be written
        """
        stats = self.stats
        if stats.start_time is None:
            stats.start_time = time.time()

        started = time.perf_counter()
        try:
            with output_path.open("w", encoding="utf-8") as fh:
                segments = self.write(fh)
        except OSError as e:
            self.render_logger.log_export_error(str(output_path), e)
            raise SvgWriteError(str(output_path), str(e)) from e

        self.render_logger.log_export(
            output=str(output_path),
            segments=segments,
            colored=self.colored,
            duration_ms=(time.perf_counter() - started) * 1000,
        )
        stats.end_time = time.time()
        return stats
