"""Rich console output helpers for the CLI.

This module provides user-friendly console output using the Rich library.
"""

from rich.console import Console
from rich.text import Text

from svgcombiner.utils import CombineStats

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]SVG Combiner[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_scene_info(svg_path: str, width: float, height: float, path_count: int) -> None:
    """Print information about the parsed document.

    Args:
        svg_path: Path to the SVG file
        width: Canvas width
        height: Canvas height
        path_count: Number of path shapes in the document
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(svg_path)
    console.print(line)
    console.print(f"  {width:g} × {height:g} {SYM_DOT} {path_count:,} paths")


def print_settings(tolerance: float, offset: float, min_area: float) -> None:
    """Print the main combine parameters."""
    console.print(
        f"  tolerance {tolerance:g} {SYM_DOT} offset {offset:g} {SYM_DOT} min area {min_area:g}"
    )


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


def print_success(output_path: str, file_size: str, stats: CombineStats) -> None:
    """Print success message with statistics.

    Args:
        output_path: Path to output file
        file_size: Human-readable file size string
        stats: Statistics of the run
    """
    console.print(
        f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(stats.duration_seconds)}"
    )

    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({file_size})")
    console.print(line)

    console.print("\n[bold]Statistics[/bold]")
    console.print(f"  Paths             {stats.shape_count}")
    if stats.empty_group_count:
        console.print(f"  Without contours  {stats.empty_group_count}")
    console.print(f"  Input polygons    {stats.input_polygons}")
    console.print(f"  Input vertices    {stats.input_vertices}")
    console.print(f"  Output polygons   {stats.output_polygons}")
    console.print(f"  Output vertices   {stats.output_vertices}")

    reduction = stats.vertex_reduction
    if reduction is not None:
        console.print(f"  Vertex reduction  [green]{reduction:.1f}%[/green]")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
