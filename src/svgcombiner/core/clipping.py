"""Polygon clipping operations.

The combine algorithm only needs a handful of polygon-set operations. They
are collected behind the ClippingEngine protocol; PyclipperEngine provides
them with pyclipper, which works on integer coordinates, so every call
scales document units up by ``scale`` and back down afterwards.

All boolean operations use the nonzero fill rule for both operands.
"""

from enum import Enum
from typing import Protocol

import pyclipper

from svgcombiner.domain import Contour, PolygonSet
from svgcombiner.exceptions import ClipError

IntPath = list[tuple[int, int]]


class JoinType(Enum):
    """Corner style used when offsetting."""

    ROUND = pyclipper.JT_ROUND
    SQUARE = pyclipper.JT_SQUARE
    MITER = pyclipper.JT_MITER


class EndType(Enum):
    """How path ends are treated when offsetting."""

    CLOSED_POLYGON = pyclipper.ET_CLOSEDPOLYGON
    CLOSED_LINE = pyclipper.ET_CLOSEDLINE


class ClippingEngine(Protocol):
    """Polygon-set operations consumed by the group combiner."""

    def offset(
        self,
        polygons: PolygonSet,
        delta: float,
        join: JoinType = JoinType.ROUND,
        end: EndType = EndType.CLOSED_POLYGON,
    ) -> PolygonSet:
        ...

    def union(self, subject: PolygonSet, clip: PolygonSet) -> PolygonSet:
        ...

    def difference(self, subject: PolygonSet, clip: PolygonSet) -> PolygonSet:
        ...

    def simplify(self, polygons: PolygonSet, tolerance: float) -> PolygonSet:
        ...

    def filter_small_area(self, polygons: PolygonSet, min_area: float) -> PolygonSet:
        ...


def _is_clippable(path: IntPath) -> bool:
    """Check whether clipper accepts a closed path.

    Paths with fewer than three distinct points or zero area enclose
    nothing under the nonzero rule, and clipper rejects them.
    """
    if len(set(path)) < 3:
        return False
    return pyclipper.Area(path) != 0


class PyclipperEngine:
    """ClippingEngine backed by pyclipper.

    Example:
        engine = PyclipperEngine(scale=1000.0)
        merged = engine.union(shapes_a, shapes_b)
    """

    def __init__(
        self,
        scale: float = 1000.0,
        miter_limit: float = 2.0,
        arc_tolerance: float = 0.25,
    ) -> None:
        """Initialize the engine.

        Args:
            scale: Factor converting document units to clipper integers
            miter_limit: Miter limit for offset joins
            arc_tolerance: Maximum deviation of round joins (document units)
        """
        self.scale = scale
        self.miter_limit = miter_limit
        self.arc_tolerance = arc_tolerance

    def _to_clipper(self, polygons: PolygonSet) -> list[IntPath]:
        paths: list[IntPath] = []
        for contour in polygons:
            path = [
                (int(round(p.x * self.scale)), int(round(p.y * self.scale)))
                for p in contour.points
            ]
            if _is_clippable(path):
                paths.append(path)
        return paths

    def _from_clipper(self, paths: list[IntPath]) -> PolygonSet:
        polygons: PolygonSet = []
        for path in paths:
            if len(path) < 3:
                continue
            polygons.append(
                Contour.from_tuples([(x / self.scale, y / self.scale) for x, y in path])
            )
        return polygons

    def _execute(
        self,
        operation: str,
        clip_type: int,
        subject: list[IntPath],
        clip: list[IntPath],
    ) -> PolygonSet:
        clipper = pyclipper.Pyclipper()
        try:
            if subject:
                clipper.AddPaths(subject, pyclipper.PT_SUBJECT, True)
            if clip:
                clipper.AddPaths(clip, pyclipper.PT_CLIP, True)
            solution = clipper.Execute(clip_type, pyclipper.PFT_NONZERO, pyclipper.PFT_NONZERO)
        except pyclipper.ClipperException as e:
            raise ClipError(operation, str(e)) from e
        return self._from_clipper(solution)

    def offset(
        self,
        polygons: PolygonSet,
        delta: float,
        join: JoinType = JoinType.ROUND,
        end: EndType = EndType.CLOSED_POLYGON,
    ) -> PolygonSet:
        """Grow (delta > 0) or shrink (delta < 0) every contour.

        Args:
            polygons: Contours to offset
            delta: Perpendicular offset distance in document units
            join: Corner join style
            end: End treatment

        Returns:
            Offset contours
        """
        paths = self._to_clipper(polygons)
        if not paths:
            return []

        offsetter = pyclipper.PyclipperOffset(self.miter_limit, self.arc_tolerance * self.scale)
        try:
            offsetter.AddPaths(paths, join.value, end.value)
            solution = offsetter.Execute(delta * self.scale)
        except pyclipper.ClipperException as e:
            raise ClipError("offset", str(e)) from e
        return self._from_clipper(solution)

    def union(self, subject: PolygonSet, clip: PolygonSet) -> PolygonSet:
        """Union of two polygon sets.

        A union with an empty clip set normalizes the subject: overlaps are
        merged and self-intersections resolved.
        """
        subject_paths = self._to_clipper(subject)
        clip_paths = self._to_clipper(clip)
        if not subject_paths:
            subject_paths, clip_paths = clip_paths, []
        if not subject_paths:
            return []
        return self._execute("union", pyclipper.CT_UNION, subject_paths, clip_paths)

    def difference(self, subject: PolygonSet, clip: PolygonSet) -> PolygonSet:
        """Area of ``subject`` not covered by ``clip``."""
        subject_paths = self._to_clipper(subject)
        if not subject_paths:
            return []
        return self._execute(
            "difference",
            pyclipper.CT_DIFFERENCE,
            subject_paths,
            self._to_clipper(clip),
        )

    def simplify(self, polygons: PolygonSet, tolerance: float) -> PolygonSet:
        """Remove vertices within ``tolerance`` of a neighbour or of the line
        through their neighbours.

        Contours reduced below three points are dropped.
        """
        paths = self._to_clipper(polygons)
        if not paths:
            return []
        if tolerance <= 0:
            return self._from_clipper(paths)

        try:
            cleaned = pyclipper.CleanPolygons(paths, tolerance * self.scale)
        except pyclipper.ClipperException as e:
            raise ClipError("simplify", str(e)) from e
        return self._from_clipper(cleaned)

    def filter_small_area(self, polygons: PolygonSet, min_area: float) -> PolygonSet:
        """Drop contours whose unsigned area is below ``min_area``."""
        return [contour for contour in polygons if contour.area() >= min_area]
