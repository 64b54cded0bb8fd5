"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info

# Segments shown by the info command before truncating
PREVIEW_SEGMENTS = 16


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Dragoncurve[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_curve_info(variant: str, depth: int, segments: int, step: float) -> None:
    """Print a one-line curve summary.

    Args:
        variant: Curve variant name
        depth: Curve depth
        segments: Number of segments
        step: Step length at the configured size
    """
    console.print(
        f"  {variant} {SYM_DOT} depth {depth} {SYM_DOT} "
        f"{segments:,} segments {SYM_DOT} step {step:.4g}"
    )


def print_segment_table(segments: tuple[str, ...], total: int) -> None:
    """Print the leading segments of a curve as a table.

    Args:
        segments: Names of the leading segment directions
        total: Total number of segments in the curve
    """
    table = Table(show_header=True, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("Direction")
    for idx, name in enumerate(segments):
        table.add_row(str(idx), name)
    console.print(table)
    if total > len(segments):
        console.print(f"  {SYM_DOT}{SYM_DOT}{SYM_DOT} (+{total - len(segments):,} more)")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_success(
    output_path: str,
    file_size: str,
    total_time_s: float,
    segments: int,
    colored: bool,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        file_size: Human-readable file size string
        total_time_s: Total rendering time in seconds
        segments: Number of segments written
        colored: Whether segments were individually coloured
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({file_size})")
    console.print(line)

    mode = "coloured lines" if colored else "single path"
    console.print(f"  {segments:,} segments {SYM_DOT} {mode}")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {escape(message)}")
    if details:
        console.print(f"  {escape(details)}")
