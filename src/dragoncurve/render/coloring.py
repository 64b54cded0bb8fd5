"""Per-segment stroke colouring.

A stroke maker hands out one Stroke per painted segment, advancing an internal
counter as it goes, so colours can vary along the curve:

- SolidStroke: the same stroke for every segment
- GradientStroke: a continuous colormap sampled along the curve
- SolidBands: the curve split into equal runs of flag colours
- GradientBands: flag colours blended smoothly from one band to the next

Continuous gradients are matplotlib colormaps.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from dataclasses import dataclass

import matplotlib
from matplotlib.colors import to_hex, to_rgb

from dragoncurve.config import BandPalette, Coloring, DisplayConfig, GradientKind
from dragoncurve.exceptions import UnknownPaletteError

RAINBOW_FLAG: tuple[str, ...] = (
    "#e50000",
    "#fe8d00",
    "#ffee00",
    "#028121",
    "#004cff",
    "#760088",
)

TRANS_FLAG: tuple[str, ...] = (
    "#5bcffb",
    "#f5abb9",
    "#ffffff",
    "#f5abb9",
    "#5bcffb",
)

BAND_PALETTES: dict[BandPalette, tuple[str, ...]] = {
    BandPalette.RAINBOW: RAINBOW_FLAG,
    BandPalette.TRANS: TRANS_FLAG,
}

# Closest matplotlib colormap for each gradient
GRADIENT_COLORMAPS: dict[GradientKind, str] = {
    GradientKind.VIRIDIS: "viridis",
    GradientKind.PLASMA: "plasma",
    GradientKind.WARM: "autumn",
    GradientKind.COOL: "cool",
    GradientKind.SINEBOW: "hsv",
}

FRACTION_EPSILON = 1e-6

Gradient = Callable[[float], str]


@dataclass(frozen=True, slots=True)
class Stroke:
    """Stroke applied to one painted segment.

    Attributes:
        width: Stroke width
        color: Hex colour string (``#rrggbb``)
    """

    width: float
    color: str


def band_colors(palette: BandPalette | str) -> tuple[str, ...]:
    """Look up the colours of a flag palette.

    Args:
        palette: Palette enum member or its name

    Returns:
        Tuple of hex colours, one per band

    Raises:
        UnknownPaletteError: If the palette does not exist
    """
    try:
        return BAND_PALETTES[BandPalette(palette)]
    except ValueError:
        raise UnknownPaletteError(str(palette)) from None


def gradient(kind: GradientKind | str) -> Gradient:
    """Build a function mapping t in [0, 1] to a hex colour.

    Args:
        kind: Gradient enum member or its name

    Returns:
        Callable sampling the gradient

    Raises:
        UnknownPaletteError: If the gradient does not exist
    """
    try:
        cmap = matplotlib.colormaps[GRADIENT_COLORMAPS[GradientKind(kind)]]
    except (KeyError, ValueError):
        raise UnknownPaletteError(str(kind)) from None

    def sample(t: float) -> str:
        return to_hex(cmap(min(max(t, 0.0), 1.0)))

    return sample


def lerp_color(a: str, b: str, t: float) -> str:
    """Linearly blend two colours channel by channel.

    Args:
        a: Start colour
        b: End colour
        t: Blend factor, 0 gives ``a`` and 1 gives ``b``

    Returns:
        Blended hex colour
    """
    ra, ga, ba = to_rgb(a)
    rb, gb, bb = to_rgb(b)
    return to_hex((ra + (rb - ra) * t, ga + (gb - ga) * t, ba + (bb - ba) * t))


class StrokeMaker(ABC):
    """Source of strokes, called once per segment in drawing order."""

    @abstractmethod
    def stroke(self) -> Stroke:
        """Return the stroke for the next segment."""


class SolidStroke(StrokeMaker):
    """Same stroke for every segment."""

    def __init__(self, width: float, color: str) -> None:
        self._stroke = Stroke(width, to_hex(color))

    def stroke(self) -> Stroke:
        return self._stroke


class GradientStroke(StrokeMaker):
    """Samples a continuous gradient from start to end of the curve.

    The sample position is ``min(count, max) / max``; the counter stops at
    ``max``, so extra segments reuse the final colour.
    """

    def __init__(self, width: float, max_count: int, grad: Gradient) -> None:
        self.width = width
        self.count = 0
        self.max = max(max_count, 1)
        self.grad = grad

    def stroke(self) -> Stroke:
        color = self.grad(min(self.count, self.max) / self.max)
        if self.count < self.max:
            self.count += 1
        return Stroke(self.width, color)


class SolidBands(StrokeMaker):
    """Splits the curve into equal runs, one per palette colour."""

    def __init__(self, width: float, max_count: int, colors: Sequence[str]) -> None:
        self.width = width
        self.count = 0
        self.max = max(max_count, 1)
        self.colors = tuple(colors)

    def stroke(self) -> Stroke:
        idx = (self.count * len(self.colors)) // self.max
        if self.count < self.max - 1:
            self.count += 1
        return Stroke(self.width, self.colors[idx])


class GradientBands(StrokeMaker):
    """Blends between consecutive palette colours along the curve.

    The first segment gets the first colour exactly; later segments
    interpolate between the two colours around ``count * (n - 1) / max``.
    """

    def __init__(self, width: float, max_count: int, colors: Sequence[str]) -> None:
        self.width = width
        self.count = 0
        self.max = max(max_count, 1)
        self.colors = tuple(colors)

    def stroke(self) -> Stroke:
        ratio = self.count * (len(self.colors) - 1) / self.max
        idx = int(ratio)
        frac = ratio - idx
        if frac < FRACTION_EPSILON:
            color = self.colors[idx]
        else:
            color = lerp_color(self.colors[idx], self.colors[idx + 1], frac)
        if self.count < self.max - 1:
            self.count += 1
        return Stroke(self.width, color)


def make_stroke(display: DisplayConfig, segment_count: int) -> StrokeMaker:
    """Create the stroke maker selected by a display configuration.

    Args:
        display: Display settings (colouring mode, palettes, stroke)
        segment_count: Number of segments that will be painted

    Returns:
        Stroke maker for one pass over the curve
    """
    width = display.stroke_width
    if display.coloring == Coloring.GRADIENT:
        return GradientStroke(width, segment_count, gradient(display.gradient))
    if display.coloring == Coloring.SOLID_BANDS:
        return SolidBands(width, segment_count, band_colors(display.bands))
    if display.coloring == Coloring.GRADIENT_BANDS:
        return GradientBands(width, segment_count, band_colors(display.bands))
    return SolidStroke(width, display.stroke_color)
