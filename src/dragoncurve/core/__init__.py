"""Core curve algorithms for dragoncurve.

This module contains:

- The curve container (segment sequence, depth, flags, rotation)
- Depth adjustment (subdivision to grow, prefix reuse to shrink)
- Retained session state for interactive use
- Rendering orchestration

Key functions:
- subdivide: Double a segment sequence by one level
- coarsen: Reduce a segment sequence to a lower depth via its prefix
- shrink_rotation: Rotation offset between a prefix and the coarser curve

Key classes:
- DragonCurve: One approximation of a dragon or Levy curve
- CurveSession: View-model rebuilding or resizing the curve on demand
- CurveRenderer: Exports the configured curve to SVG
"""

from dragoncurve.core.curve import DragonCurve
from dragoncurve.core.depth import coarsen, shrink_rotation, subdivide
from dragoncurve.core.renderer import CurveRenderer
from dragoncurve.core.session import CurveSession

__all__ = [
    # Classes
    "CurveRenderer",
    "CurveSession",
    "DragonCurve",
    # Depth functions
    "coarsen",
    "shrink_rotation",
    "subdivide",
]
