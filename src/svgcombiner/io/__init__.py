"""Document I/O layer for svgcombiner.

This module handles reading SVG documents into scenes and writing the
combined single-path document.

Key classes:
- SvgReader: Load an SVG file into a Scene
- SvgWriter: Save an OutputDocument
"""

from svgcombiner.io.reader import SvgReader, parse_svg_bytes
from svgcombiner.io.writer import SvgWriter

__all__ = [
    "SvgReader",
    "SvgWriter",
    "parse_svg_bytes",
]
