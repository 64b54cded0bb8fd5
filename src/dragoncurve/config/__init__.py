"""Configuration management for dragoncurve.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- CurveConfig: Depth, variant and start direction of the curve
- DisplayConfig: Drawing area size and segment colouring
- LoggingConfig: Logging settings
- LogLevel: Accepted log levels
- DragonSettings: Main application settings
"""

from dragoncurve.config.settings import (
    MAX_DEPTH,
    BandPalette,
    Coloring,
    CurveConfig,
    DisplayConfig,
    DragonSettings,
    GradientKind,
    LogLevel,
    LoggingConfig,
    get_default_settings,
)

__all__ = [
    "MAX_DEPTH",
    "BandPalette",
    "Coloring",
    "CurveConfig",
    "DisplayConfig",
    "DragonSettings",
    "GradientKind",
    "LogLevel",
    "LoggingConfig",
    "get_default_settings",
]
