"""Curve tessellation into flattening events.

A PathShape is the tessellator's own view of one PathNode: a sequence of
subpaths, each with a start point, its drawing segments, and whether it was
explicitly closed. Tessellating a shape yields a lazy stream of events:

- Begin(at): a subpath starts
- Line(to): the approximation continues to a point
- End(close): the subpath ends, closed or open
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Protocol, Union

from svgcombiner.core._bezier import flatten_cubic, flatten_quadratic
from svgcombiner.domain import (
    Close,
    CubicTo,
    LineTo,
    MoveTo,
    PathNode,
    Point,
    QuadTo,
)

CurveSegment = Union[LineTo, QuadTo, CubicTo]


@dataclass(frozen=True)
class Subpath:
    """One subpath of a path shape."""

    start: Point
    segments: tuple[CurveSegment, ...]
    closed: bool


@dataclass(frozen=True)
class PathShape:
    """Tessellation-ready form of a single path node."""

    subpaths: tuple[Subpath, ...]

    @classmethod
    def from_node(cls, node: PathNode) -> "PathShape":
        """Split a path node's segments into subpaths.

        A MoveTo starts a new subpath and ends any open one. Drawing
        commands without a preceding MoveTo continue from the start of the
        previous subpath (the origin for the first one).

        Args:
            node: Path node from the shape tree

        Returns:
            PathShape with one entry per subpath
        """
        subpaths: list[Subpath] = []
        start: Point | None = None
        last_start = Point(0.0, 0.0)
        segments: list[CurveSegment] = []

        for segment in node.segments:
            if isinstance(segment, MoveTo):
                if start is not None:
                    subpaths.append(Subpath(start, tuple(segments), closed=False))
                start = segment.to
                last_start = start
                segments = []
            elif isinstance(segment, Close):
                if start is None:
                    continue
                subpaths.append(Subpath(start, tuple(segments), closed=True))
                start = None
                segments = []
            else:
                if start is None:
                    start = last_start
                segments.append(segment)

        if start is not None:
            subpaths.append(Subpath(start, tuple(segments), closed=False))

        return cls(subpaths=tuple(subpaths))


@dataclass(frozen=True, slots=True)
class Begin:
    """A subpath begins at ``at``."""

    at: Point


@dataclass(frozen=True, slots=True)
class Line:
    """The approximation continues to ``to``."""

    to: Point


@dataclass(frozen=True, slots=True)
class End:
    """The current subpath ends; ``close`` is True if it was closed."""

    close: bool


FlattenEvent = Union[Begin, Line, End]


class Tessellator(Protocol):
    """Turns a path shape into flattening events."""

    def flatten(self, shape: PathShape, tolerance: float) -> Iterator[FlattenEvent]:
        ...


class BezierTessellator:
    """Recursive-subdivision tessellator.

    Every curve is approximated by line segments deviating from the true
    curve by at most ``tolerance``.
    """

    def flatten(self, shape: PathShape, tolerance: float) -> Iterator[FlattenEvent]:
        """Yield flattening events for every subpath of ``shape``.

        Args:
            shape: Path shape to tessellate
            tolerance: Maximum curve deviation in document units

        Yields:
            Begin, Line and End events in drawing order
        """
        for subpath in shape.subpaths:
            yield Begin(subpath.start)
            current = subpath.start

            for segment in subpath.segments:
                if isinstance(segment, LineTo):
                    yield Line(segment.to)
                elif isinstance(segment, QuadTo):
                    points = flatten_quadratic([current, segment.control, segment.to], tolerance)
                    for point in points[1:]:
                        yield Line(point)
                else:
                    points = flatten_cubic(
                        [current, segment.control1, segment.control2, segment.to], tolerance
                    )
                    for point in points[1:]:
                        yield Line(point)
                current = segment.to

            yield End(close=subpath.closed)
