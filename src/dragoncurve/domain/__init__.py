"""Domain models for dragoncurve.

This module contains the value types a curve is built from. All models are:

- Immutable (enum members and frozen dataclasses)
- Free of rendering or UI concerns

Key classes:
- Direction: One of eight compass steps with modulo-8 rotation
- CurveFlags: Variant selection (Levy rule, mirroring)
"""

from dragoncurve.domain.direction import (
    DIAGONAL_SCALE,
    DIRECTION_COUNT,
    Direction,
    format_number,
)
from dragoncurve.domain.flags import DRAGON, FLIP, LEVY, LEVY_FLIP, CurveFlags

__all__: list[str] = [
    # Constants
    "DIAGONAL_SCALE",
    "DIRECTION_COUNT",
    "DRAGON",
    "FLIP",
    "LEVY",
    "LEVY_FLIP",
    # Core types
    "CurveFlags",
    "Direction",
    "format_number",
]
