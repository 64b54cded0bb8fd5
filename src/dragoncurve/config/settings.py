"""Configuration settings for Dragoncurve."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from dragoncurve.domain import CurveFlags, Direction

MAX_DEPTH = 16


class Coloring(str, Enum):
    """How segments are coloured when painted."""

    NONE = "none"
    GRADIENT = "gradient"
    SOLID_BANDS = "solid_bands"
    GRADIENT_BANDS = "gradient_bands"


class GradientKind(str, Enum):
    """Continuous gradient sampled along the curve."""

    VIRIDIS = "viridis"
    PLASMA = "plasma"
    WARM = "warm"
    COOL = "cool"
    SINEBOW = "sinebow"


class BandPalette(str, Enum):
    """Flag palette split into colour bands along the curve."""

    RAINBOW = "rainbow"
    TRANS = "trans"


class LogLevel(str, Enum):
    """Threshold for emitted log records."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class CurveConfig(BaseModel):
    """Configuration for the curve itself."""

    depth: int = Field(
        default=0,
        ge=0,
        le=MAX_DEPTH,
        description="Recursion depth (the curve has 2**depth segments)",
    )
    levy: bool = Field(
        default=False,
        description="Use the Levy C subdivision rule instead of the dragon rule",
    )
    flip: bool = Field(
        default=False,
        description="Mirror the curve's handedness",
    )
    start: Direction = Field(
        default=Direction.E,
        description="Direction of the initial segment",
    )

    @field_validator("start", mode="before")
    @classmethod
    def _parse_start(cls, value: object) -> object:
        """Accept compass names such as "E" or "ne" as well as integers."""
        if isinstance(value, str) and not value.isdigit():
            try:
                return Direction[value.upper()]
            except KeyError:
                raise ValueError(
                    f"Invalid start direction '{value}' "
                    f"(expected one of {', '.join(d.name for d in Direction)})"
                ) from None
        return value

    def flags(self) -> CurveFlags:
        """Build the curve flags selected by this configuration."""
        return CurveFlags(mirrored=self.flip, use_alternate_subdivision=self.levy)


class DisplayConfig(BaseModel):
    """Configuration for drawing a curve."""

    size: float = Field(
        default=512.0,
        gt=0.0,
        description="Width and height of the square drawing area",
    )
    coloring: Coloring = Field(
        default=Coloring.NONE,
        description="Segment colouring mode",
    )
    gradient: GradientKind = Field(
        default=GradientKind.VIRIDIS,
        description="Gradient used by the gradient colouring mode",
    )
    bands: BandPalette = Field(
        default=BandPalette.RAINBOW,
        description="Palette used by the band colouring modes",
    )
    stroke_width: float = Field(
        default=1.0,
        gt=0.0,
        description="Stroke width of each segment",
    )
    stroke_color: str = Field(
        default="#000000",
        description="Stroke colour when colouring is disabled",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: LogLevel = Field(
        default=LogLevel.WARNING,
        description="Console log level",
    )
    file_log_level: LogLevel = Field(
        default=LogLevel.DEBUG,
        description="File log level (more verbose)",
    )

    @field_validator("log_level", "file_log_level", mode="before")
    @classmethod
    def _lower_level(cls, value: object) -> object:
        """Accept level names in any case, such as "WARNING"."""
        if isinstance(value, str):
            return value.lower()
        return value


class DragonSettings(BaseModel):
    """Main application settings."""

    curve: CurveConfig = Field(default_factory=CurveConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> DragonSettings:
    """Get default application settings."""
    return DragonSettings()
