"""Generic traversal of a curve through a drawing capability."""

import math
from collections.abc import Iterable
from typing import TYPE_CHECKING

from dragoncurve.domain import DIAGONAL_SCALE, Direction
from dragoncurve.render.draw import Draw, Output

if TYPE_CHECKING:
    from dragoncurve.core.curve import DragonCurve


def step_length(size: float, depth: int) -> float:
    """Nominal segment length that keeps the curve's extent constant.

    Every two levels halve the step; odd depths are additionally scaled by
    1/sqrt(2) because their segments are diagonal.

    Args:
        size: Edge length of the square drawing area
        depth: Curve depth

    Returns:
        Step length for each segment
    """
    step = size / math.ldexp(1.0, depth // 2 + 1)
    if depth % 2:
        step *= DIAGONAL_SCALE
    return step


def start_point(size: float) -> tuple[float, float]:
    """Starting pen position inside a square drawing area.

    Args:
        size: Edge length of the square drawing area

    Returns:
        Tuple of (x, y) at a quarter of the width and half the height
    """
    return (size * 0.25, size * 0.5)


def paint(
    segments: Iterable[Direction],
    drawer: Draw[Output],
    step: float,
) -> list[Output]:
    """Draw each segment in order.

    The first exception raised by the drawer aborts the walk and propagates
    unchanged.

    Args:
        segments: Segment directions, usually a DragonCurve
        drawer: Drawing capability receiving one move per segment
        step: Nominal step length

    Returns:
        The drawer's output for each segment
    """
    return [seg.draw(drawer, step) for seg in segments]


def paint_curve(curve: "DragonCurve", drawer: Draw[Output], size: float) -> list[Output]:
    """Draw a whole curve scaled to a square drawing area.

    Args:
        curve: Curve to draw
        drawer: Drawing capability positioned at ``start_point(size)``
        size: Edge length of the square drawing area

    Returns:
        The drawer's output for each segment
    """
    return paint(curve, drawer, step_length(size, curve.depth))
