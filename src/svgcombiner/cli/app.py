"""CLI application entry point for svgcombiner.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from svgcombiner import __version__
from svgcombiner.cli.output import (
    console,
    print_error,
    print_header,
    print_scene_info,
    print_settings,
    print_step,
    print_success,
)
from svgcombiner.config import (
    CombineConfig,
    CombinerSettings,
    FlattenConfig,
    LoggingConfig,
    OutputConfig,
)
from svgcombiner.core import SvgCombiner
from svgcombiner.exceptions import (
    ClipError,
    DocumentReadError,
    OutputWriteError,
    ParseError,
    SvgCombinerError,
)

# Create the Typer app
app = typer.Typer(
    name="svg-combiner",
    help="Merge all shapes of an SVG into one simplified, artifact-free path.",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]SVG Combiner[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def combine(
    input_svg: Annotated[
        Path,
        typer.Argument(
            help="Path to input SVG file",
        ),
    ] = Path("init.svg"),
    output: Annotated[
        Path,
        typer.Option(
            "--output",
            "-o",
            help="Output SVG path",
        ),
    ] = Path("output.svg"),
    tolerance: Annotated[
        float,
        typer.Option(
            "--tolerance",
            "-t",
            help="Curve flattening tolerance in document units",
            min=0.001,
            max=10.0,
        ),
    ] = 0.25,
    offset: Annotated[
        float,
        typer.Option(
            "--offset",
            help="Offset applied to each shape before subtraction (negative contracts)",
            min=-100.0,
            max=100.0,
        ),
    ] = -1.0,
    coarse_simplify: Annotated[
        float,
        typer.Option(
            "--coarse-simplify",
            help="Tolerance of the first simplification pass",
            min=0.0,
        ),
    ] = 0.25,
    fine_simplify: Annotated[
        float,
        typer.Option(
            "--fine-simplify",
            help="Tolerance of the final simplification pass",
            min=0.0,
        ),
    ] = 0.05,
    min_area: Annotated[
        float,
        typer.Option(
            "--min-area",
            help="Drop contours with a smaller area",
            min=0.0,
        ),
    ] = 1.0,
    scale: Annotated[
        float,
        typer.Option(
            "--scale",
            help="Integer scale used by the clipping engine",
            min=1.0,
        ),
    ] = 1000.0,
    unit: Annotated[
        str,
        typer.Option(
            "--unit",
            help="Unit suffix for output width/height (mm|px|cm|in|pt|pc or empty)",
        ),
    ] = "mm",
    precision: Annotated[
        int,
        typer.Option(
            "--precision",
            help="Decimal places of output coordinates",
            min=0,
            max=10,
        ),
    ] = 4,
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
    """Combine every shape of an SVG document into a single path.

    Curves are flattened into polygons, the polygons of each shape are merged
    into the result one shape at a time, and the result is simplified and
    cleaned of tiny artifacts before being written as one filled path.

    Example:
        svg-combiner drawing.svg -o combined.svg
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR"):
        print_error(
            f"Invalid log level: {log_level}",
            details="Valid values: DEBUG, INFO, WARNING, ERROR",
        )
        raise typer.Exit(code=1)

    try:
        settings = CombinerSettings(
            flatten=FlattenConfig(tolerance=tolerance),
            combine=CombineConfig(
                offset=offset,
                coarse_simplify=coarse_simplify,
                fine_simplify=fine_simplify,
                min_area=min_area,
                scale=scale,
            ),
            output=OutputConfig(unit=unit, precision=precision),
            logging=LoggingConfig(
                log_file=log_file,
                log_level="DEBUG" if verbose else log_level,
            ),
        )
    except ValueError as e:
        print_error("Invalid settings", details=str(e))
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)
        print_step("Loading document")

    try:
        combiner = SvgCombiner(settings, quiet=quiet)
        scene = combiner.load_scene(input_svg)

        if not quiet:
            print_scene_info(
                svg_path=str(input_svg),
                width=scene.canvas.width,
                height=scene.canvas.height,
                path_count=scene.count_paths(),
            )
            print_step("Combining")
            print_settings(tolerance, offset, min_area)

        stats = combiner.process_scene(scene, output_path=output)

        if not quiet:
            print_success(
                output_path=str(output),
                file_size=_format_file_size(output),
                stats=stats,
            )

    except DocumentReadError as e:
        print_error(f"Could not read document: {e.reason}")
        raise typer.Exit(code=1)
    except ParseError as e:
        print_error(f"Could not parse document: {e.reason}")
        raise typer.Exit(code=1)
    except ClipError as e:
        print_error(f"Geometry operation failed: {e.reason}", details=f"operation: {e.operation}")
        raise typer.Exit(code=1)
    except OutputWriteError as e:
        print_error(f"Could not write output: {e.reason}")
        raise typer.Exit(code=1)
    except SvgCombinerError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def _format_file_size(path: Path) -> str:
    """Format file size in human-readable form.

    Args:
        path: Path to file

    Returns:
        Human-readable file size (e.g., "12 KB")
    """
    try:
        size_bytes = path.stat().st_size
    except OSError:
        return "unknown"
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.0f} KB"
    return f"{size_bytes / (1024 * 1024):.1f} MB"


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
