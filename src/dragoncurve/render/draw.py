"""Drawing capability consumed by curve export.

A drawer turns relative displacements into primitive moves. Only ``line`` is
required; ``horiz`` and ``vert`` default to it and may be overridden when the
backend has dedicated axis-aligned primitives.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

Output = TypeVar("Output")


class Draw(ABC, Generic[Output]):
    """Abstract pen that draws relative moves."""

    @abstractmethod
    def line(self, dx: float, dy: float) -> Output:
        """Draw a move by (dx, dy)."""

    def horiz(self, dx: float) -> Output:
        """Draw a horizontal move by dx."""
        return self.line(dx, 0.0)

    def vert(self, dy: float) -> Output:
        """Draw a vertical move by dy."""
        return self.line(0.0, dy)
