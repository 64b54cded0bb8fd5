"""CLI application entry point for dragoncurve.

This module provides the main CLI interface using Typer.
"""

import time
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from dragoncurve import __version__
from dragoncurve.cli.output import (
    PREVIEW_SEGMENTS,
    console,
    print_curve_info,
    print_error,
    print_header,
    print_segment_table,
    print_step,
    print_success,
)
from dragoncurve.config import (
    MAX_DEPTH,
    BandPalette,
    Coloring,
    CurveConfig,
    DisplayConfig,
    DragonSettings,
    GradientKind,
    LogLevel,
    LoggingConfig,
)
from dragoncurve.core import CurveRenderer, CurveSession
from dragoncurve.exceptions import DragonCurveError, SvgWriteError
from dragoncurve.render import step_length

# Create the Typer app
app = typer.Typer(
    name="dragoncurve",
    help="Render Heighway dragon and Levy C fractal curves to SVG.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Dragoncurve[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Render Heighway dragon and Levy C fractal curves to SVG."""


def _parse_choice(enum_cls: type, value: str, option: str):
    """Convert a CLI string to an enum member or exit with an error."""
    try:
        return enum_cls(value.lower())
    except ValueError:
        valid = ", ".join(member.value for member in enum_cls)
        print_error(f"Invalid {option}: {value}", details=f"Valid values: {valid}")
        raise typer.Exit(code=1) from None


def _curve_config(depth: int, levy: bool, flip: bool, start: str) -> CurveConfig:
    """Build a validated curve configuration or exit with an error."""
    try:
        return CurveConfig(depth=depth, levy=levy, flip=flip, start=start)
    except ValidationError as e:
        first = e.errors()[0]
        print_error(f"Invalid curve settings: {first['msg']}")
        raise typer.Exit(code=1) from None


def _console_level(level: LogLevel, verbose: bool, quiet: bool) -> LogLevel:
    """Apply the --verbose and --quiet overrides to the console log level."""
    if verbose:
        return LogLevel.DEBUG
    if quiet:
        return LogLevel.WARNING
    return level


DepthOption = Annotated[
    int,
    typer.Option(
        "--depth",
        "-d",
        help=f"Recursion depth (0-{MAX_DEPTH})",
        min=0,
        max=MAX_DEPTH,
    ),
]
LevyOption = Annotated[
    bool,
    typer.Option("--levy", help="Use the Levy C rule instead of the dragon rule"),
]
FlipOption = Annotated[
    bool,
    typer.Option("--flip", help="Mirror the curve"),
]
StartOption = Annotated[
    str,
    typer.Option(
        "--start",
        help="Direction of the first segment (N|NE|E|SE|S|SW|W|NW)",
    ),
]
SizeOption = Annotated[
    float,
    typer.Option(
        "--size",
        "-s",
        help="Width and height of the image",
        min=1.0,
    ),
]


@app.command()
def render(
    output: Annotated[
        Path,
        typer.Argument(
            help="Path of the SVG file to write",
            show_default=False,
        ),
    ],
    depth: DepthOption = 10,
    levy: LevyOption = False,
    flip: FlipOption = False,
    start: StartOption = "E",
    size: SizeOption = 512.0,
    coloring: Annotated[
        str,
        typer.Option(
            "--coloring",
            "-c",
            help="Segment colouring (none|gradient|solid_bands|gradient_bands)",
        ),
    ] = "none",
    gradient: Annotated[
        str,
        typer.Option(
            "--gradient",
            "-g",
            help="Gradient for --coloring gradient (viridis|plasma|warm|cool|sinebow)",
        ),
    ] = "viridis",
    bands: Annotated[
        str,
        typer.Option(
            "--bands",
            "-b",
            help="Palette for band colouring (rainbow|trans)",
        ),
    ] = "rainbow",
    stroke_width: Annotated[
        float,
        typer.Option(
            "--stroke-width",
            help="Stroke width of coloured segments",
            min=0.01,
        ),
    ] = 1.0,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
) -> None:
    """Render a curve to an SVG file.

    Example:
        dragoncurve render dragon.svg --depth 12 --coloring gradient
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    coloring_mode = _parse_choice(Coloring, coloring, "coloring")
    gradient_kind = _parse_choice(GradientKind, gradient, "gradient")
    band_palette = _parse_choice(BandPalette, bands, "bands")
    console_level = _parse_choice(LogLevel, log_level, "log level")
    curve_config = _curve_config(depth, levy, flip, start)

    if not quiet:
        print_header(__version__)

    settings = DragonSettings(
        curve=curve_config,
        display=DisplayConfig(
            size=size,
            coloring=coloring_mode,
            gradient=gradient_kind,
            bands=band_palette,
            stroke_width=stroke_width,
        ),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=_console_level(console_level, verbose, quiet),
        ),
    )

    try:
        if not quiet:
            print_step("Building curve")

        started = time.perf_counter()
        renderer = CurveRenderer(settings)
        curve = renderer.curve

        if not quiet:
            print_curve_info(
                variant=curve.flags.name,
                depth=curve.depth,
                segments=len(curve),
                step=step_length(size, curve.depth),
            )
            print_step("Writing SVG")

        stats = renderer.render_to_file(output)

        if not quiet:
            print_success(
                output_path=str(output),
                file_size=_format_file_size(output),
                total_time_s=time.perf_counter() - started,
                segments=stats.segments_drawn,
                colored=renderer.colored,
            )

    except SvgWriteError as e:
        print_error(f"Could not write SVG: {e.reason}")
        raise typer.Exit(code=1)
    except DragonCurveError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


@app.command()
def info(
    depth: DepthOption = 4,
    levy: LevyOption = False,
    flip: FlipOption = False,
    start: StartOption = "E",
    size: SizeOption = 512.0,
) -> None:
    """Show a curve's size and its leading segments."""
    curve_config = _curve_config(depth, levy, flip, start)
    curve = CurveSession(curve_config).curve

    print_curve_info(
        variant=curve.flags.name,
        depth=curve.depth,
        segments=len(curve),
        step=step_length(size, curve.depth),
    )
    preview = tuple(seg.name for seg in curve.segments[:PREVIEW_SEGMENTS])
    print_segment_table(preview, len(curve))


def _format_file_size(path: Path) -> str:
    """Format file size in human-readable form.

    Args:
        path: Path to file

    Returns:
        Human-readable file size (e.g., "428 KB")
    """
    try:
        size_bytes = path.stat().st_size
    except OSError:
        return "unknown"
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.0f} KB"
    else:
        return f"{size_bytes / (1024 * 1024):.1f} MB"


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
