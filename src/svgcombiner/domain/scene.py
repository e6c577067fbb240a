"""Scene types produced by the SVG reader.

This module defines the shape tree handed from the parser to the pipeline:
- Point: A 2D point
- PathSegment: MoveTo, LineTo, QuadTo, CubicTo and Close commands
- ShapeNode: PathNode, GroupNode or OtherNode
- Canvas: Declared document size
- Scene: Root group plus canvas
"""

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Attributes:
        x: X coordinate in document units
        y: Y coordinate in document units
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)


@dataclass(frozen=True, slots=True)
class MoveTo:
    """Start a new subpath at ``to``."""

    to: Point


@dataclass(frozen=True, slots=True)
class LineTo:
    """Straight line to ``to``."""

    to: Point


@dataclass(frozen=True, slots=True)
class QuadTo:
    """Quadratic Bezier with one control point."""

    control: Point
    to: Point


@dataclass(frozen=True, slots=True)
class CubicTo:
    """Cubic Bezier with two control points."""

    control1: Point
    control2: Point
    to: Point


@dataclass(frozen=True, slots=True)
class Close:
    """Close the current subpath."""


PathSegment = Union[MoveTo, LineTo, QuadTo, CubicTo, Close]


@dataclass(frozen=True)
class PathNode:
    """A path element with its (already transformed) segments.

    Attributes:
        segments: Drawing commands in document order
        id: Element id, if any
    """

    segments: tuple[PathSegment, ...]
    id: str | None = None


@dataclass(frozen=True)
class GroupNode:
    """A container element.

    Attributes:
        children: Child nodes in document order
        id: Element id, if any
    """

    children: tuple["ShapeNode", ...] = field(default_factory=tuple)
    id: str | None = None


@dataclass(frozen=True)
class OtherNode:
    """Any element that carries no path geometry (text, image, defs, ...).

    Attributes:
        tag: Local element name
        id: Element id, if any
    """

    tag: str
    id: str | None = None


ShapeNode = Union[PathNode, GroupNode, OtherNode]


@dataclass(frozen=True, slots=True)
class Canvas:
    """Declared document size in user units."""

    width: float
    height: float


@dataclass(frozen=True)
class Scene:
    """A parsed document: the shape tree and its canvas.

    Attributes:
        root: Root group (the <svg> element)
        canvas: Declared canvas size
    """

    root: GroupNode
    canvas: Canvas

    def count_paths(self) -> int:
        """Count PathNodes reachable from the root.

        Returns:
            Number of path nodes at any depth
        """
        count = 0
        stack: list[ShapeNode] = [self.root]
        while stack:
            node = stack.pop()
            if isinstance(node, PathNode):
                count += 1
            elif isinstance(node, GroupNode):
                stack.extend(node.children)
        return count
