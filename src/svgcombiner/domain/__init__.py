"""Domain models for svgcombiner.

This module contains the core domain models representing the parsed shape
tree and the polygons derived from it. Models are:

- Immutable where possible (using frozen dataclasses)
- Independent of the SVG parser and the geometry engines

Key classes:
- Point: A 2D point
- PathNode, GroupNode, OtherNode: The shape tree
- Scene: Shape tree plus canvas size
- Contour: A closed polygon
- OutputDocument: The emitted single-path SVG
"""

from svgcombiner.domain.document import OutputDocument
from svgcombiner.domain.polygon import Contour, PolygonGroup, PolygonSet, count_vertices
from svgcombiner.domain.scene import (
    Canvas,
    Close,
    CubicTo,
    GroupNode,
    LineTo,
    MoveTo,
    OtherNode,
    PathNode,
    PathSegment,
    Point,
    QuadTo,
    Scene,
    ShapeNode,
)

__all__: list[str] = [
    # Scene types
    "Canvas",
    "Close",
    "CubicTo",
    "GroupNode",
    "LineTo",
    "MoveTo",
    "OtherNode",
    "PathNode",
    "PathSegment",
    "Point",
    "QuadTo",
    "Scene",
    "ShapeNode",
    # Output
    "OutputDocument",
    # Polygon types
    "Contour",
    "PolygonGroup",
    "PolygonSet",
    "count_vertices",
]
