"""Rendering layer for dragoncurve.

This module turns curves into drawings. The curve itself knows nothing about
output formats; everything goes through the Draw capability or the SVG
emitter.

Key responsibilities:
- Scale segments so the curve keeps a constant extent across depths
- Emit SVG path data (single path) or stroked line segments
- Colour segments along the curve

Key classes:
- Draw: Abstract drawer with ``line`` and derived ``horiz``/``vert``
- SvgPath: Drawer writing relative SVG path commands
- SegmentPainter: Immediate-mode drawer recording stroked segments
- StrokeMaker: Per-segment stroke source (solid, gradient, bands)
"""

from dragoncurve.render.coloring import (
    BAND_PALETTES,
    RAINBOW_FLAG,
    TRANS_FLAG,
    GradientBands,
    GradientStroke,
    SolidBands,
    SolidStroke,
    Stroke,
    StrokeMaker,
    band_colors,
    gradient,
    make_stroke,
)
from dragoncurve.render.draw import Draw
from dragoncurve.render.paint import paint, paint_curve, start_point, step_length
from dragoncurve.render.painter import PaintedSegment, SegmentPainter, write_colored_svg
from dragoncurve.render.svg import SvgPath, render_svg, svg_header, write_svg

__all__ = [
    # Palettes
    "BAND_PALETTES",
    "RAINBOW_FLAG",
    "TRANS_FLAG",
    # Drawers
    "Draw",
    "PaintedSegment",
    "SegmentPainter",
    "SvgPath",
    # Stroke makers
    "GradientBands",
    "GradientStroke",
    "SolidBands",
    "SolidStroke",
    "Stroke",
    "StrokeMaker",
    # Functions
    "band_colors",
    "gradient",
    "make_stroke",
    "paint",
    "paint_curve",
    "render_svg",
    "start_point",
    "step_length",
    "svg_header",
    "write_colored_svg",
    "write_svg",
]
