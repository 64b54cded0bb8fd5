"""SVG export for curves.

This module provides two ways to produce SVG path data:

- SvgPath: a drawer that formats each move as a relative path command
- write_svg: a self-contained emitter for a complete single-path document

Write failures from the underlying text stream propagate unchanged from the
first failing segment; nothing is retried.
"""

import io
from typing import TYPE_CHECKING, TextIO

from dragoncurve.domain import format_number
from dragoncurve.render.draw import Draw
from dragoncurve.render.paint import start_point, step_length

if TYPE_CHECKING:
    from dragoncurve.core.curve import DragonCurve

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
PATH_STYLE = "stroke:black;stroke-width:1;fill:none"


class SvgPath(Draw[None]):
    """Drawer that writes relative SVG path commands to a text stream.

    Horizontal and vertical moves use the dedicated ``h``/``v`` commands.

    Example:
        buf = io.StringIO()
        paint(curve, SvgPath(buf), step)
    """

    def __init__(self, writer: TextIO, separator: str = "") -> None:
        """Initialize the path writer.

        Args:
            writer: Text stream receiving the commands
            separator: Text written before every command
        """
        self.writer = writer
        self.separator = separator

    def line(self, dx: float, dy: float) -> None:
        self.writer.write(f"{self.separator}l{format_number(dx)} {format_number(dy)}")

    def horiz(self, dx: float) -> None:
        self.writer.write(f"{self.separator}h{format_number(dx)}")

    def vert(self, dy: float) -> None:
        self.writer.write(f"{self.separator}v{format_number(dy)}")


def svg_header(size: float) -> str:
    """Opening ``<svg>`` element for a square image.

    Args:
        size: Width and height of the image

    Returns:
        Opening tag text
    """
    dim = format_number(size)
    return f'<svg width="{dim}" height="{dim}" xmlns="{SVG_NAMESPACE}">'


def write_svg(curve: "DragonCurve", size: float, writer: TextIO) -> None:
    """Write a curve as a single-path SVG document.

    The path starts with a move to the start point, has one relative command
    per segment and ends with a move back to the start point.

    Args:
        curve: Curve to export
        size: Width and height of the image
        writer: Text stream receiving the document

    Raises:
        Exception: Whatever the writer raises, from the first failing write
    """
    step = step_length(size, curve.depth)
    sx, sy = start_point(size)
    start = f"{format_number(sx)} {format_number(sy)}"

    writer.write(f'{svg_header(size)}<path style="{PATH_STYLE}" d="M{start}')
    for seg in curve:
        writer.write(f" {seg.path_command(step)}")
    writer.write(f' M{start}"/></svg>')


def render_svg(curve: "DragonCurve", size: float) -> str:
    """Render a curve as an SVG document string.

    Args:
        curve: Curve to export
        size: Width and height of the image

    Returns:
        Complete SVG document
    """
    buf = io.StringIO()
    write_svg(curve, size, buf)
    return buf.getvalue()
