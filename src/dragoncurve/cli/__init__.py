"""Command-line interface for dragoncurve.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- SVG export with optional per-segment colouring
- Curve inspection (segment count, step length, leading segments)
- Quiet mode and file logging
"""

from dragoncurve.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
