"""Immediate-mode line painter.

SegmentPainter is a drawer that keeps a pen position and records every move
as a stroked line segment, the way an immediate-mode UI painter would. The
recorded segments can then be written as an SVG of individually coloured
lines.
"""

from dataclasses import dataclass
from typing import TextIO

from dragoncurve.domain import format_number
from dragoncurve.render.coloring import SolidStroke, Stroke, StrokeMaker
from dragoncurve.render.draw import Draw
from dragoncurve.render.svg import svg_header


@dataclass(frozen=True, slots=True)
class PaintedSegment:
    """One painted line segment.

    Attributes:
        start: Pen position before the move
        end: Pen position after the move
        stroke: Stroke the segment was painted with
    """

    start: tuple[float, float]
    end: tuple[float, float]
    stroke: Stroke

    @property
    def is_horizontal(self) -> bool:
        return self.start[1] == self.end[1]

    @property
    def is_vertical(self) -> bool:
        return self.start[0] == self.end[0]


class SegmentPainter(Draw[PaintedSegment]):
    """Drawer that records stroked segments while moving a pen.

    Example:
        painter = SegmentPainter(start_point(size), make_stroke(display, len(curve)))
        paint_curve(curve, painter, size)
        painter.segments  # one PaintedSegment per curve segment
    """

    def __init__(
        self,
        pos: tuple[float, float],
        stroke: StrokeMaker | None = None,
    ) -> None:
        """Initialize the painter.

        Args:
            pos: Initial pen position
            stroke: Stroke maker consulted once per segment (black if None)
        """
        self.pos = pos
        self.stroke = stroke if stroke is not None else SolidStroke(1.0, "#000000")
        self.segments: list[PaintedSegment] = []

    def _move_to(self, end: tuple[float, float]) -> PaintedSegment:
        segment = PaintedSegment(self.pos, end, self.stroke.stroke())
        self.segments.append(segment)
        self.pos = end
        return segment

    def line(self, dx: float, dy: float) -> PaintedSegment:
        x, y = self.pos
        return self._move_to((x + dx, y + dy))

    def horiz(self, dx: float) -> PaintedSegment:
        x, y = self.pos
        return self._move_to((x + dx, y))

    def vert(self, dy: float) -> PaintedSegment:
        x, y = self.pos
        return self._move_to((x, y + dy))


def write_colored_svg(
    segments: list[PaintedSegment],
    size: float,
    writer: TextIO,
) -> None:
    """Write painted segments as an SVG of individual ``<line>`` elements.

    Args:
        segments: Segments recorded by a SegmentPainter
        size: Width and height of the image
        writer: Text stream receiving the document
    """
    writer.write(svg_header(size))
    writer.write('<g fill="none" stroke-linecap="round">')
    for seg in segments:
        (x1, y1), (x2, y2) = seg.start, seg.end
        writer.write(
            f'<line x1="{format_number(x1)}" y1="{format_number(y1)}" '
            f'x2="{format_number(x2)}" y2="{format_number(y2)}" '
            f'stroke="{seg.stroke.color}" '
            f'stroke-width="{format_number(seg.stroke.width)}"/>'
        )
    writer.write("</g></svg>")
