"""Exception hierarchy for Dragoncurve."""


class DragonCurveError(Exception):
    """Base exception for all Dragoncurve errors."""

    pass


class CurveError(DragonCurveError):
    """Errors related to curve construction or depth adjustment."""

    pass


class InvalidDepthError(CurveError, ValueError):
    """Requested depth is not a non-negative integer."""

    def __init__(self, depth: int) -> None:
        self.depth = depth
        super().__init__(f"Curve depth must be non-negative, got {depth}")


class RenderError(DragonCurveError):
    """Errors related to rendering or exporting a curve."""

    pass


class SvgWriteError(RenderError):
    """Error writing an SVG file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write SVG '{path}': {reason}")


class UnknownPaletteError(RenderError):
    """Requested gradient or band palette does not exist."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown palette '{name}'")
