"""Tests for per-segment stroke colouring."""

import pytest

from dragoncurve.config import BandPalette, Coloring, DisplayConfig, GradientKind
from dragoncurve.exceptions import UnknownPaletteError
from dragoncurve.render.coloring import (
    RAINBOW_FLAG,
    TRANS_FLAG,
    GradientBands,
    GradientStroke,
    SolidBands,
    SolidStroke,
    Stroke,
    band_colors,
    gradient,
    lerp_color,
    make_stroke,
)


def take(maker, n: int) -> list[Stroke]:
    """Collect the next n strokes from a stroke maker."""
    return [maker.stroke() for _ in range(n)]


class TestPalettes:
    """Tests for palette lookup."""

    def test_band_colors(self) -> None:
        assert band_colors(BandPalette.RAINBOW) == RAINBOW_FLAG
        assert band_colors("trans") == TRANS_FLAG

    def test_unknown_band_palette(self) -> None:
        with pytest.raises(UnknownPaletteError, match="plaid"):
            band_colors("plaid")

    def test_gradient_endpoints(self) -> None:
        viridis = gradient(GradientKind.VIRIDIS)
        assert viridis(0.0) == "#440154"
        assert viridis(1.0) == "#fde725"

    def test_gradient_clamps(self) -> None:
        viridis = gradient("viridis")
        assert viridis(-1.0) == viridis(0.0)
        assert viridis(2.0) == viridis(1.0)

    @pytest.mark.parametrize("kind", list(GradientKind))
    def test_all_gradients_available(self, kind: GradientKind) -> None:
        color = gradient(kind)(0.5)
        assert color.startswith("#")
        assert len(color) == 7

    def test_unknown_gradient(self) -> None:
        with pytest.raises(UnknownPaletteError):
            gradient("rainbowish")

    def test_lerp_color(self) -> None:
        assert lerp_color("#000000", "#ffffff", 0.0) == "#000000"
        assert lerp_color("#000000", "#ffffff", 1.0) == "#ffffff"
        assert lerp_color("#000000", "#ffffff", 0.5) == "#808080"


class TestStrokeMakers:
    """Tests for the stroke makers."""

    def test_solid_stroke(self) -> None:
        strokes = take(SolidStroke(1.5, "blue"), 3)
        assert strokes == [Stroke(1.5, "#0000ff")] * 3

    def test_gradient_stroke_samples_along_curve(self) -> None:
        maker = GradientStroke(1.0, 4, lambda t: f"{t:.2f}")
        colors = [s.color for s in take(maker, 6)]
        assert colors == ["0.00", "0.25", "0.50", "0.75", "1.00", "1.00"]

    def test_solid_bands_split_evenly(self) -> None:
        maker = SolidBands(1.0, 12, RAINBOW_FLAG)
        colors = [s.color for s in take(maker, 12)]
        expected = [c for c in RAINBOW_FLAG for _ in range(2)]
        assert colors == expected

    def test_solid_bands_hold_last_color(self) -> None:
        maker = SolidBands(1.0, 3, ("#111111", "#222222", "#333333"))
        colors = [s.color for s in take(maker, 5)]
        assert colors == ["#111111", "#222222", "#333333", "#333333", "#333333"]

    def test_gradient_bands_blend(self) -> None:
        maker = GradientBands(1.0, 2, ("#000000", "#ffffff"))
        colors = [s.color for s in take(maker, 3)]
        assert colors == ["#000000", "#808080", "#808080"]

    def test_gradient_bands_hit_band_colors(self) -> None:
        """Test segments falling exactly on a band boundary get the band colour."""
        maker = GradientBands(1.0, 10, TRANS_FLAG)
        colors = [s.color for s in take(maker, 10)]
        # ratio = count * 4 / 10 is integral at counts 0 and 5
        assert colors[0] == TRANS_FLAG[0]
        assert colors[5] == TRANS_FLAG[2]

    def test_single_segment_curves(self) -> None:
        """Test makers cope with a one-segment curve."""
        for maker in (
            GradientStroke(1.0, 1, gradient("plasma")),
            SolidBands(1.0, 1, TRANS_FLAG),
            GradientBands(1.0, 1, TRANS_FLAG),
        ):
            assert isinstance(maker.stroke(), Stroke)


class TestMakeStroke:
    """Tests for make_stroke()."""

    @pytest.mark.parametrize(
        ("coloring", "expected"),
        [
            (Coloring.NONE, SolidStroke),
            (Coloring.GRADIENT, GradientStroke),
            (Coloring.SOLID_BANDS, SolidBands),
            (Coloring.GRADIENT_BANDS, GradientBands),
        ],
    )
    def test_selects_maker(self, coloring: Coloring, expected: type) -> None:
        display = DisplayConfig(coloring=coloring)
        assert isinstance(make_stroke(display, 64), expected)

    def test_uses_display_stroke(self) -> None:
        display = DisplayConfig(stroke_width=3.0, stroke_color="#123456")
        assert make_stroke(display, 8).stroke() == Stroke(3.0, "#123456")

    def test_uses_band_palette(self) -> None:
        display = DisplayConfig(coloring=Coloring.SOLID_BANDS, bands=BandPalette.TRANS)
        maker = make_stroke(display, 5)
        assert [s.color for s in take(maker, 5)] == list(TRANS_FLAG)
