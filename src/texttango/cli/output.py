"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with progress bars and formatted messages.
"""


from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.text import Text

from texttango.domain import BoundingBox
from texttango.utils.logging import GenerationStats

console = Console()

SYM_STEP = "▸"
SYM_OK = "✓"
SYM_ERR = "✗"
SYM_WARN = "!"
SYM_DOT = "·"


def create_progress() -> Progress:
    """Create a rich progress bar for per-position generation.

    Returns:
        Configured Progress instance with bar and time elapsed.
    """
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=40, complete_style="green", finished_style="green"),
        TaskProgressColumn(),
        TextColumn("{task.fields[pair]}"),
        TimeElapsedColumn(),
        console=console,
        transient=False,
    )


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]TextTango[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_font_info(font_path: str, family: str, font_type: str, upm: int) -> None:
    """Print font information.

    Args:
        font_path: Path to the font file
        family: Font family name
        font_type: Font format type (e.g., "TrueType", "OpenType")
        upm: Units per em value
    """
    line1 = Text("  ")
    line1.append(font_path)
    line1.append(f" ({font_type})")
    console.print(line1)
    console.print(f"  {family} {SYM_DOT} {upm:,} UPM")


def print_texts(text1: str, text2: str, positions: int) -> None:
    """Print the two texts being combined."""
    line = Text("  ")
    line.append(repr(text1), style="bold")
    line.append(" × ")
    line.append(repr(text2), style="bold")
    line.append(f" {SYM_DOT} {positions} positions")
    console.print(line)


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
    triangles: int,
    bounds: BoundingBox,
    stats: GenerationStats,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        file_size: Human-readable file size string
        total_time_s: Total generation time in seconds
        triangles: Triangle count of the exported mesh
        bounds: Bounding box of the exported mesh
        stats: Generation statistics
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({file_size})")
    console.print(line)

    console.print(
        f"  {triangles:,} triangles {SYM_DOT} "
        f"{bounds.width:.1f} × {bounds.height:.1f} × {bounds.depth:.1f}"
    )

    error_style = "red" if stats.failed_parts > 0 else "green"
    console.print(
        f"  {stats.pairs_generated} pairs {SYM_DOT} {stats.supports_added} supports {SYM_DOT} "
        f"{stats.bridges_added} bridges {SYM_DOT} {stats.islands_removed} islands removed {SYM_DOT} "
        f"[{error_style}]{stats.failed_parts} errors[/{error_style}]"
    )

    skipped = stats.missing_glyphs + stats.degenerate_pairs
    if skipped:
        console.print(
            f"  [yellow]{SYM_WARN}[/yellow] {stats.missing_glyphs} missing glyphs {SYM_DOT} "
            f"{stats.degenerate_pairs} empty intersections"
        )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
