"""Polygon types for flattened and combined geometry.

This module defines:
- Contour: A closed polygonal approximation of one subpath
- PolygonGroup: All contours of one path shape
- PolygonSet: A set of contours under the nonzero fill rule
"""

from dataclasses import dataclass, field

from svgcombiner.domain.scene import Point


@dataclass
class Contour:
    """A closed polygon.

    The closing edge from the last point back to the first is implicit;
    the first point is not repeated at the end.

    Attributes:
        points: List of points forming the contour
    """

    points: list[Point]
    _cached_area: float | None = field(default=None, repr=False, init=False, compare=False)

    def __len__(self) -> int:
        return len(self.points)

    def signed_area(self) -> float:
        """Calculate signed area using shoelace formula.

        The sign of the area indicates winding direction in a y-up frame:
        - Positive area: counter-clockwise winding
        - Negative area: clockwise winding

        Result is cached for efficiency.

        Returns:
            Signed area of the contour
        """
        if self._cached_area is not None:
            return self._cached_area

        n = len(self.points)
        if n < 3:
            self._cached_area = 0.0
            return 0.0

        area = 0.0
        for i in range(n):
            j = (i + 1) % n
            area += self.points[i].x * self.points[j].y
            area -= self.points[j].x * self.points[i].y

        self._cached_area = area / 2.0
        return self._cached_area

    def area(self) -> float:
        """Unsigned area of the contour."""
        return abs(self.signed_area())

    def bounding_box(self) -> tuple[float, float, float, float]:
        """Calculate bounding box of the contour.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        if not self.points:
            return (0.0, 0.0, 0.0, 0.0)

        xs = [p.x for p in self.points]
        ys = [p.y for p in self.points]
        return (min(xs), min(ys), max(xs), max(ys))

    def to_tuples(self) -> list[tuple[float, float]]:
        """Convert to a list of (x, y) tuples."""
        return [p.to_tuple() for p in self.points]

    @classmethod
    def from_tuples(cls, coords: "list[tuple[float, float]]") -> "Contour":
        """Build a contour from (x, y) pairs."""
        return cls(points=[Point(float(x), float(y)) for x, y in coords])


# One path shape's contours, in flattening order
PolygonGroup = list[Contour]

# Contours combined under the nonzero fill rule
PolygonSet = list[Contour]


def count_vertices(polygons: PolygonSet) -> int:
    """Total number of points across all contours."""
    return sum(len(contour) for contour in polygons)
