"""Depth adjustment for dragon and Levy curves.

Growing applies the subdivision rule once per level: every segment is replaced
by two segments turned 45 degrees either way. Shrinking never regenerates
anything. The first ``2**d`` segments of a deeper curve are the depth-``d``
curve rotated by a fixed offset, so coarsening is a prefix copy plus a
rotation.

All functions are pure: they return new lists and leave their input intact.
"""

from dragoncurve.domain import DIRECTION_COUNT, CurveFlags, Direction


def subdivide(segments: list[Direction], flags: CurveFlags) -> list[Direction]:
    """Double the resolution of a curve by one level.

    Walks the input once, writing two output segments per input segment.
    Parity starts out true and alternates per input segment; the Levy rule
    ignores it and mirroring inverts the turn.

    Args:
        segments: Segments of the curve at depth d
        flags: Curve variant

    Returns:
        Segments of the curve at depth d + 1
    """
    out: list[Direction] = [Direction.E] * (2 * len(segments))
    parity = True

    for i, seg in enumerate(segments):
        turn_right = (flags.levy or parity) != flags.flip
        if turn_right:
            out[2 * i] = seg.left()
            out[2 * i + 1] = seg.right()
        else:
            out[2 * i] = seg.right()
            out[2 * i + 1] = seg.left()
        parity = not parity

    return out


def shrink_rotation(levels: int, flags: CurveFlags) -> int:
    """Rotation that maps a prefix of a deeper curve back onto a coarser one.

    Args:
        levels: Number of levels removed
        flags: Curve variant

    Returns:
        Clockwise rotation in eighths of a turn (0-7)
    """
    rot = levels % DIRECTION_COUNT
    if flags.flip:
        rot = (DIRECTION_COUNT - rot) % DIRECTION_COUNT
    return rot


def coarsen(
    segments: list[Direction],
    depth: int,
    new_depth: int,
    flags: CurveFlags,
) -> list[Direction]:
    """Reduce a curve to a lower depth using its self-similar prefix.

    Only the first ``2**new_depth`` segments are read, so the cost does not
    depend on the current depth.

    Args:
        segments: Segments of the curve at ``depth``
        depth: Current depth
        new_depth: Target depth, at most ``depth``
        flags: Curve variant the segments were generated with

    Returns:
        Segments of the curve at ``new_depth``
    """
    rot = shrink_rotation(depth - new_depth, flags)
    return [seg.rotate(rot) for seg in segments[: 1 << new_depth]]
