"""Retained curve state for interactive front ends.

A front end calls ``CurveSession.update`` once per frame with whatever the user
currently has selected. The session rebuilds the curve when the variant or
start direction changes and otherwise only adjusts the depth, which is free
when nothing changed.
"""

import time

from dragoncurve.config import CurveConfig
from dragoncurve.core.curve import DragonCurve
from dragoncurve.utils import RenderLogger


class CurveSession:
    """View-model owning the current curve and the settings that built it.

    Example:
        session = CurveSession()
        session.update(CurveConfig(depth=8))
        session.update(CurveConfig(depth=8, levy=True))  # rebuilt
        session.curve.depth  # 8
    """

    def __init__(
        self,
        config: CurveConfig | None = None,
        render_logger: RenderLogger | None = None,
    ) -> None:
        """Initialize the session and build its first curve.

        Args:
            config: Initial curve settings (defaults if None)
            render_logger: Optional logger receiving rebuild and depth events
        """
        self._config = config if config is not None else CurveConfig()
        self._render_logger = render_logger
        self._curve = DragonCurve(self._config.start, self._config.flags())
        if self._render_logger is not None:
            self._render_logger.log_created(self._curve.flags.name, self._curve.start.name)
        self._apply_depth(self._config.depth)

    @property
    def curve(self) -> DragonCurve:
        """The current curve."""
        return self._curve

    @property
    def config(self) -> CurveConfig:
        """Settings last applied to the session."""
        return self._config

    def _rebuild(self, config: CurveConfig) -> DragonCurve:
        curve = DragonCurve(config.start, config.flags())
        if self._render_logger is not None:
            self._render_logger.log_rebuild(curve.flags.name, curve.start.name)
        return curve

    def _apply_depth(self, depth: int) -> bool:
        old_depth = self._curve.depth
        if depth == old_depth:
            return False

        started = time.perf_counter()
        self._curve.set_depth(depth)
        if self._render_logger is not None:
            self._render_logger.log_depth_change(
                old_depth=old_depth,
                new_depth=depth,
                segments=len(self._curve),
                duration_ms=(time.perf_counter() - started) * 1000,
            )
        return True

    def update(self, config: CurveConfig) -> bool:
        """Bring the curve in line with ``config``.

        A change of ``levy``, ``flip`` or ``start`` replaces the curve with a
        fresh one; the depth is then applied unconditionally.

        Args:
            config: Currently selected curve settings

        Returns:
            True if the curve changed
        """
        rebuilt = False
        if (
            config.levy != self._config.levy
            or config.flip != self._config.flip
            or config.start != self._config.start
        ):
            self._curve = self._rebuild(config)
            rebuilt = True

        self._config = config
        resized = self._apply_depth(config.depth)
        return rebuilt or resized
