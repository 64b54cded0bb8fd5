"""Compass directions used by the curve segments.

A curve only ever steps in one of eight directions spaced 45 degrees apart.
Directions are encoded as the integers 0-7 in clockwise order (with +y up), so
rotating by k steps is addition modulo 8.
"""

import math
from enum import IntEnum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from dragoncurve.render.draw import Draw

# Diagonal steps are scaled so every segment at a given depth has equal length
DIAGONAL_SCALE = 1.0 / math.sqrt(2.0)

DIRECTION_COUNT = 8


def format_number(value: float) -> str:
    """Format a coordinate as the shortest decimal that round-trips.

    Integral values are written without a trailing ``.0``.

    Args:
        value: Number to format

    Returns:
        Decimal string representation
    """
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


class Direction(IntEnum):
    """One unit step on a compass rose.

    Members are named after the compass point they face, with +x as east and
    +y as north.
    """

    NE = 0
    E = 1
    SE = 2
    S = 3
    SW = 4
    W = 5
    NW = 6
    N = 7

    def rotate(self, by: int) -> "Direction":
        """Rotate clockwise by ``by`` eighths of a turn.

        Args:
            by: Number of 45 degree steps (any integer, negatives turn left)

        Returns:
            Rotated direction
        """
        return Direction((self.value + by) % DIRECTION_COUNT)

    def right(self) -> "Direction":
        """Rotate one step clockwise."""
        return self.rotate(1)

    def left(self) -> "Direction":
        """Rotate one step counter-clockwise."""
        return self.rotate(DIRECTION_COUNT - 1)

    def mirror(self, axis: "Direction") -> "Direction":
        """Reflect this direction about the line through ``axis``.

        Args:
            axis: Direction lying on the mirror line

        Returns:
            Reflected direction
        """
        return Direction((2 * axis.value - self.value) % DIRECTION_COUNT)

    @property
    def is_diagonal(self) -> bool:
        """True for the four directions between the axes."""
        return self.value % 2 == 0

    @property
    def unit(self) -> tuple[int, int]:
        """Sign of the x and y components of a step."""
        return _UNITS[self]

    def to_move(self, length: float) -> tuple[float, float]:
        """Convert a step of nominal ``length`` into a displacement.

        Diagonal steps are scaled by 1/sqrt(2) on both axes so they have the
        same Euclidean length as axis-aligned steps.

        Args:
            length: Nominal step length

        Returns:
            Tuple of (dx, dy)
        """
        ux, uy = _UNITS[self]
        if self.is_diagonal:
            length *= DIAGONAL_SCALE
        return (ux * length, uy * length)

    def draw(self, out: "Draw", length: float) -> Any:
        """Issue this step as a primitive move on a drawer.

        Axis-aligned steps go through ``horiz``/``vert``, diagonals through
        ``line``.

        Args:
            out: Drawing capability receiving the move
            length: Nominal step length

        Returns:
            Whatever the drawer returns for the move
        """
        dx, dy = self.to_move(length)
        if self.is_diagonal:
            return out.line(dx, dy)
        if self.unit[1] == 0:
            return out.horiz(dx)
        return out.vert(dy)

    def path_command(self, length: float) -> str:
        """Format this step as a relative SVG path command.

        Args:
            length: Nominal step length

        Returns:
            ``l{dx} {dy}``, ``h{dx}`` or ``v{dy}``
        """
        dx, dy = self.to_move(length)
        if self.is_diagonal:
            return f"l{format_number(dx)} {format_number(dy)}"
        if self.unit[1] == 0:
            return f"h{format_number(dx)}"
        return f"v{format_number(dy)}"


_UNITS: dict[Direction, tuple[int, int]] = {
    Direction.NE: (1, 1),
    Direction.E: (1, 0),
    Direction.SE: (1, -1),
    Direction.S: (0, -1),
    Direction.SW: (-1, -1),
    Direction.W: (-1, 0),
    Direction.NW: (-1, 1),
    Direction.N: (0, 1),
}
