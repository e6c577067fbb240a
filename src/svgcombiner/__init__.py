"""SVG Combiner - Merge the shapes of an SVG into one clean outline.

SVG Combiner is a CLI tool that reads an SVG document, flattens every path
shape into polygons, and combines them with offset and boolean operations
into a single simplified, artifact-free path.

Example:
    $ svg-combiner drawing.svg -o output.svg

This will write output.svg containing one filled path with the union of all
shapes in drawing.svg.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
