"""Dragoncurve - Render Heighway dragon and Levy C fractal curves.

Dragoncurve keeps a curve as a sequence of eight compass directions and adjusts
its recursion depth in place: growing subdivides every segment, shrinking
reuses the self-similar prefix of the deeper curve instead of regenerating it.

Example:
    $ dragoncurve render dragon.svg --depth 12

This will write dragon.svg containing a depth-12 Heighway dragon.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
