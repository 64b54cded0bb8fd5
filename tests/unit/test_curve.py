"""Unit tests for DragonCurve.

Covers the structural properties the depth adjustment relies on: segment count,
idempotence, grow/shrink round trips, prefix self-similarity and mirror
symmetry.
"""

import pytest

from dragoncurve.core.curve import DragonCurve
from dragoncurve.core.depth import shrink_rotation
from dragoncurve.domain import DRAGON, FLIP, LEVY, LEVY_FLIP, CurveFlags, Direction
from dragoncurve.exceptions import InvalidDepthError

ALL_FLAGS = [DRAGON, LEVY, FLIP, LEVY_FLIP]


def curve_at(depth: int, flags: CurveFlags = DRAGON, start: Direction = Direction.E) -> DragonCurve:
    """Build a curve grown directly to ``depth``."""
    curve = DragonCurve(start, flags)
    curve.set_depth(depth)
    return curve


class TestConstruction:
    """Tests for curve construction and accessors."""

    def test_new_curve_is_single_segment(self) -> None:
        curve = DragonCurve(Direction.E)
        assert curve.depth == 0
        assert curve.segments == (Direction.E,)
        assert curve.flags == DRAGON
        assert curve.start == Direction.E
        assert len(curve) == 1

    def test_flags_kept(self) -> None:
        curve = DragonCurve(Direction.N, LEVY_FLIP)
        curve.set_depth(3)
        assert curve.flags == LEVY_FLIP

    def test_iteration_matches_segments(self) -> None:
        curve = curve_at(4)
        assert tuple(curve) == curve.segments

    def test_copy_is_independent(self) -> None:
        """Test copies do not share segment storage."""
        curve = curve_at(3)
        clone = curve.copy()
        assert clone == curve
        clone.set_depth(5)
        assert curve.depth == 3
        assert len(curve) == 8

    def test_equality(self) -> None:
        assert curve_at(3) == curve_at(3)
        assert curve_at(3) != curve_at(4)
        assert curve_at(3) != curve_at(3, LEVY)
        assert curve_at(3) != curve_at(3, start=Direction.N)


class TestRotation:
    """Tests for whole-curve rotation."""

    def test_rotate_by(self) -> None:
        curve = curve_at(2)
        curve.rotate_by(2)
        assert curve.segments == (Direction.E, Direction.S, Direction.W, Direction.S)

    def test_rotate_by_full_turn_is_identity(self) -> None:
        curve = curve_at(5)
        before = curve.segments
        curve.rotate_by(8)
        assert curve.segments == before
        curve.rotate_by(-16)
        assert curve.segments == before

    @pytest.mark.parametrize("target", list(Direction))
    def test_rotate_to_lands_first_segment(self, target: Direction) -> None:
        """Test rotate_to puts the first segment on the target."""
        curve = curve_at(4)
        before = curve.segments
        curve.rotate_to(target)
        assert curve.start == target
        by = (target - before[0]) % 8
        assert curve.segments == tuple(seg.rotate(by) for seg in before)


class TestDepthAdjustment:
    """Tests for set_depth()."""

    def test_dragon_scenario(self) -> None:
        """Test the first levels of the canonical dragon from east."""
        curve = DragonCurve(Direction.E)
        assert curve.segments == (Direction.E,)

        curve.set_depth(1)
        assert curve.segments == (Direction.E.left(), Direction.E.right())
        assert curve.segments == (Direction.NE, Direction.SE)

        curve.set_depth(2)
        assert curve.segments == (Direction.N, Direction.E, Direction.S, Direction.E)

    @pytest.mark.parametrize("flags", ALL_FLAGS)
    def test_length_invariant(self, flags: CurveFlags) -> None:
        """Test a depth-d curve has exactly 2**d segments."""
        curve = DragonCurve(Direction.E, flags)
        for depth in [0, 1, 2, 5, 9, 3, 0, 7]:
            curve.set_depth(depth)
            assert curve.depth == depth
            assert len(curve) == 2**depth

    @pytest.mark.parametrize("flags", ALL_FLAGS)
    def test_same_depth_is_noop(self, flags: CurveFlags) -> None:
        """Test repeating the current depth leaves the sequence unchanged."""
        curve = curve_at(6, flags)
        before = curve.segments
        curve.set_depth(6)
        curve.set_depth(6)
        assert curve.segments == before

    @pytest.mark.parametrize("flags", ALL_FLAGS)
    def test_direct_grow_matches_stepwise(self, flags: CurveFlags) -> None:
        """Test growing five levels at once equals five single-level grows."""
        direct = curve_at(5, flags)
        stepwise = DragonCurve(Direction.E, flags)
        for depth in range(1, 6):
            stepwise.set_depth(depth)
        assert direct.segments == stepwise.segments

    @pytest.mark.parametrize("flags", ALL_FLAGS)
    @pytest.mark.parametrize("start", [Direction.E, Direction.NW])
    @pytest.mark.parametrize(("depth", "extra"), [(0, 1), (0, 9), (2, 3), (4, 1), (5, 6)])
    def test_grow_then_shrink_restores(
        self, flags: CurveFlags, start: Direction, depth: int, extra: int
    ) -> None:
        """Test growing by k levels and shrinking back reproduces the curve."""
        curve = curve_at(depth, flags, start)
        before = curve.segments
        curve.set_depth(depth + extra)
        curve.set_depth(depth)
        assert curve.segments == before

    @pytest.mark.parametrize("flags", ALL_FLAGS)
    def test_prefix_self_similarity(self, flags: CurveFlags) -> None:
        """Test the rotated prefix of a deep curve is the shallower curve."""
        deep_depth = 8
        deep = curve_at(deep_depth, flags).segments
        for depth in range(deep_depth):
            rot = shrink_rotation(deep_depth - depth, flags)
            prefix = tuple(seg.rotate(rot) for seg in deep[: 2**depth])
            assert prefix == curve_at(depth, flags).segments

    @pytest.mark.parametrize("levy", [False, True])
    @pytest.mark.parametrize("start", list(Direction))
    def test_flip_mirrors_curve(self, levy: bool, start: Direction) -> None:
        """Test the flipped curve is the mirror image about the start axis."""
        plain = curve_at(7, CurveFlags(use_alternate_subdivision=levy), start)
        flipped = curve_at(7, CurveFlags(mirrored=True, use_alternate_subdivision=levy), start)
        assert flipped.segments == tuple(seg.mirror(start) for seg in plain.segments)

    def test_shrink_to_zero_from_deep(self) -> None:
        """Test shrinking to depth 0 restores the start for every variant."""
        for flags in ALL_FLAGS:
            curve = curve_at(11, flags, Direction.SW)
            curve.set_depth(0)
            assert curve.segments == (Direction.SW,)

    def test_shrink_after_rotation_keeps_rotation(self) -> None:
        """Test shrinking a rotated curve yields the rotated coarse curve."""
        curve = curve_at(6)
        curve.rotate_to(Direction.S)
        curve.set_depth(2)
        expected = curve_at(2)
        expected.rotate_by(curve.segments[0] - expected.segments[0])
        assert curve.segments == expected.segments

    def test_negative_depth_rejected(self) -> None:
        curve = curve_at(3)
        with pytest.raises(InvalidDepthError) as excinfo:
            curve.set_depth(-1)
        assert excinfo.value.depth == -1
        assert curve.depth == 3
        assert len(curve) == 8

    def test_negative_depth_is_value_error(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            DragonCurve(Direction.E).set_depth(-4)
