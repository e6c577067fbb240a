"""Conversion of path shapes into polygon groups.

Each path shape is tessellated into flattening events; every explicitly
closed subpath with at least three points becomes one contour of the
shape's polygon group. Open subpaths and degenerate subpaths are dropped.
"""

from collections.abc import Iterable

from svgcombiner.core.tessellation import (
    Begin,
    BezierTessellator,
    End,
    FlattenEvent,
    Line,
    PathShape,
    Tessellator,
)
from svgcombiner.domain import Contour, Point, PolygonGroup, count_vertices
from svgcombiner.utils import ProcessingLogger

MIN_CONTOUR_POINTS = 3


def contours_from_events(events: Iterable[FlattenEvent]) -> PolygonGroup:
    """Assemble contours from a stream of flattening events.

    A closed subpath is kept when it has at least three points as emitted.
    A trailing point equal to the start is then dropped, unless that would
    leave fewer than three points.

    Args:
        events: Begin/Line/End events of one path shape

    Returns:
        Committed contours in event order
    """
    group: PolygonGroup = []
    current: list[Point] = []

    for event in events:
        if isinstance(event, Begin):
            current = [event.at]
        elif isinstance(event, Line):
            current.append(event.to)
        elif isinstance(event, End):
            if event.close and len(current) >= MIN_CONTOUR_POINTS:
                # Curves that end on the start point repeat it
                if len(current) > MIN_CONTOUR_POINTS and current[-1] == current[0]:
                    current.pop()
                group.append(Contour(points=current))
            current = []

    return group


def flatten_shape(
    shape: PathShape,
    tolerance: float,
    tessellator: Tessellator | None = None,
) -> PolygonGroup:
    """Flatten one path shape into its polygon group.

    Args:
        shape: Path shape to flatten
        tolerance: Maximum curve deviation in document units
        tessellator: Tessellation engine (BezierTessellator if None)

    Returns:
        Polygon group, possibly empty
    """
    engine = tessellator if tessellator is not None else BezierTessellator()
    return contours_from_events(engine.flatten(shape, tolerance))


class ContourFlattener:
    """Flattens path shapes and records input statistics."""

    def __init__(
        self,
        tolerance: float,
        tessellator: Tessellator | None = None,
        processing_logger: ProcessingLogger | None = None,
    ) -> None:
        self.tolerance = tolerance
        self.tessellator = tessellator if tessellator is not None else BezierTessellator()
        self.processing_logger = processing_logger

    def flatten(self, shape: PathShape, shape_idx: int = 0) -> PolygonGroup:
        """Flatten a single shape, logging its contour and vertex counts."""
        group = flatten_shape(shape, self.tolerance, self.tessellator)

        if self.processing_logger is not None:
            self.processing_logger.log_shape_flattened(
                shape_idx, contours=len(group), vertices=count_vertices(group)
            )
            if not group:
                self.processing_logger.log_group_skipped(shape_idx)

        return group

    def flatten_all(self, shapes: list[PathShape]) -> list[PolygonGroup]:
        """Flatten shapes in order, one polygon group per shape."""
        return [self.flatten(shape, idx) for idx, shape in enumerate(shapes)]
