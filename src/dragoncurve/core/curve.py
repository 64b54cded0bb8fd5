"""Curve container with in-place depth adjustment.

This module provides DragonCurve, the ordered sequence of segment directions
for one approximation of a dragon or Levy curve.
"""

from collections.abc import Iterator

from dragoncurve.core.depth import coarsen, subdivide
from dragoncurve.domain import DIRECTION_COUNT, DRAGON, CurveFlags, Direction
from dragoncurve.exceptions import InvalidDepthError


class DragonCurve:
    """One approximation of a dragon-family curve.

    The curve always holds exactly ``2**depth`` segments. Changing the depth
    grows or shrinks the sequence in place; the flags never change after
    construction.

    Example:
        curve = DragonCurve(Direction.E)
        curve.set_depth(10)
        len(curve)  # 1024
        curve.set_depth(3)  # reuses the first 8 segments
    """

    def __init__(self, start: Direction, flags: CurveFlags = DRAGON) -> None:
        """Create a depth-0 curve.

        Args:
            start: Direction of the single initial segment
            flags: Curve variant
        """
        self._segments: list[Direction] = [Direction(start)]
        self._depth = 0
        self._flags = flags

    @property
    def depth(self) -> int:
        """Current recursion depth."""
        return self._depth

    @property
    def flags(self) -> CurveFlags:
        """Variant the curve was created with."""
        return self._flags

    @property
    def segments(self) -> tuple[Direction, ...]:
        """Snapshot of the segment directions."""
        return tuple(self._segments)

    @property
    def start(self) -> Direction:
        """Direction of the first segment."""
        return self._segments[0]

    def __len__(self) -> int:
        return len(self._segments)

    def __iter__(self) -> Iterator[Direction]:
        return iter(self._segments)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DragonCurve):
            return NotImplemented
        return (
            self._depth == other._depth
            and self._flags == other._flags
            and self._segments == other._segments
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"DragonCurve(start={self.start.name}, depth={self._depth}, "
            f"flags={self._flags.name!r}, segments={len(self._segments)})"
        )

    def copy(self) -> "DragonCurve":
        """Return an independent copy of this curve."""
        clone = DragonCurve(self.start, self._flags)
        clone._segments = list(self._segments)
        clone._depth = self._depth
        return clone

    def rotate_by(self, by: int) -> None:
        """Rotate every segment clockwise by ``by`` eighths of a turn.

        Args:
            by: Number of 45 degree steps
        """
        by %= DIRECTION_COUNT
        if by == 0:
            return
        self._segments = [seg.rotate(by) for seg in self._segments]

    def rotate_to(self, target: Direction) -> None:
        """Rotate the whole curve so its first segment faces ``target``.

        Args:
            target: Desired direction of the first segment
        """
        self.rotate_by(target.value - self._segments[0].value)

    def set_depth(self, depth: int) -> None:
        """Grow or shrink the curve to ``depth``.

        Growing subdivides once per added level. Shrinking keeps the
        self-similar prefix and rotates it, costing O(2**depth) regardless of
        the current depth. Calling with the current depth does nothing.

        Args:
            depth: Target recursion depth

        Raises:
            InvalidDepthError: If depth is negative
        """
        if depth < 0:
            raise InvalidDepthError(depth)

        if depth == self._depth:
            return

        if depth > self._depth:
            segments = self._segments
            for _ in range(depth - self._depth):
                segments = subdivide(segments, self._flags)
            self._segments = segments
        else:
            self._segments = coarsen(self._segments, self._depth, depth, self._flags)

        self._depth = depth
