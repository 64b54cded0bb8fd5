"""Variant selection for a curve.

Two orthogonal toggles pick one of four curves: the Heighway dragon (neither
set), the Levy C curve, and the mirrored form of each.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class CurveFlags:
    """Subdivision variant of a curve.

    Flags are fixed for the lifetime of a curve; build a new curve to change
    them.

    Attributes:
        mirrored: Mirror the curve's handedness (turn left where the
            unmirrored curve turns right)
        use_alternate_subdivision: Use the Levy C rule, where every segment
            turns the same way, instead of the alternating dragon rule
    """

    mirrored: bool = False
    use_alternate_subdivision: bool = False

    @property
    def levy(self) -> bool:
        """True when the Levy C subdivision rule is selected."""
        return self.use_alternate_subdivision

    @property
    def flip(self) -> bool:
        """True when the curve is mirrored."""
        return self.mirrored

    @property
    def name(self) -> str:
        """Human-readable variant name, e.g. ``"levy (flipped)"``."""
        base = "levy" if self.use_alternate_subdivision else "dragon"
        return f"{base} (flipped)" if self.mirrored else base

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with levy and flip fields
        """
        return {"levy": self.levy, "flip": self.flip}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CurveFlags":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with levy and flip fields

        Returns:
            CurveFlags instance
        """
        return cls(
            mirrored=bool(data.get("flip", False)),
            use_alternate_subdivision=bool(data.get("levy", False)),
        )


DRAGON = CurveFlags()
LEVY = CurveFlags(use_alternate_subdivision=True)
FLIP = CurveFlags(mirrored=True)
LEVY_FLIP = CurveFlags(mirrored=True, use_alternate_subdivision=True)
