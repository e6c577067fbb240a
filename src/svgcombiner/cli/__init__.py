"""Command-line interface for svgcombiner.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Tunable flattening, offset and cleanup parameters
- Verbose/quiet output modes
- Statistics summary with vertex reduction
- Detailed error reporting
"""

from svgcombiner.cli.app import cli, main

__all__ = ["cli", "main"]
