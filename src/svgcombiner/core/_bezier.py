"""Internal Bezier curve flattening algorithms.

This is an internal module containing helper functions for the tessellator.
Not intended for public use.
"""

import math

from svgcombiner.domain import Point

# Subdivision stops here even if the tolerance is not yet met
MAX_DEPTH = 16


def _distance_to_chord(point: Point, start: Point, end: Point) -> float:
    """Distance from a control point to the chord segment start-end."""
    dx = end.x - start.x
    dy = end.y - start.y
    length_sq = dx * dx + dy * dy
    if length_sq < 1e-18:
        return math.hypot(point.x - start.x, point.y - start.y)

    t = ((point.x - start.x) * dx + (point.y - start.y) * dy) / length_sq
    t = max(0.0, min(1.0, t))
    return math.hypot(point.x - (start.x + t * dx), point.y - (start.y + t * dy))


def _midpoint(a: Point, b: Point) -> Point:
    return Point((a.x + b.x) / 2, (a.y + b.y) / 2)


def flatten_quadratic(points: list[Point], tolerance: float, depth: int = 0) -> list[Point]:
    """Flatten a quadratic Bezier curve using recursive subdivision.

    The curve lies inside the hull of its control points, so once the
    control point is within tolerance of the chord the chord is used.

    Args:
        points: List of 3 control points [p0, p1, p2]
        tolerance: Maximum distance from true curve
        depth: Current recursion depth

    Returns:
        List of points approximating the curve, including both endpoints
    """
    p0, p1, p2 = points

    if depth >= MAX_DEPTH or _distance_to_chord(p1, p0, p2) <= tolerance:
        return [p0, p2]

    # Subdivide at t=0.5
    q1 = _midpoint(p0, p1)
    r1 = _midpoint(p1, p2)
    mid = _midpoint(q1, r1)

    left = flatten_quadratic([p0, q1, mid], tolerance, depth + 1)
    right = flatten_quadratic([mid, r1, p2], tolerance, depth + 1)

    # Combine, avoiding duplicate midpoint
    return left[:-1] + right


def flatten_cubic(points: list[Point], tolerance: float, depth: int = 0) -> list[Point]:
    """Flatten a cubic Bezier curve using recursive subdivision.

    Uses De Casteljau's algorithm for subdivision.

    Args:
        points: List of 4 control points [p0, p1, p2, p3]
        tolerance: Maximum distance from true curve
        depth: Current recursion depth

    Returns:
        List of points approximating the curve, including both endpoints
    """
    p0, p1, p2, p3 = points

    flatness = max(_distance_to_chord(p1, p0, p3), _distance_to_chord(p2, p0, p3))
    if depth >= MAX_DEPTH or flatness <= tolerance:
        return [p0, p3]

    # First level
    q1 = _midpoint(p0, p1)
    q2 = _midpoint(p1, p2)
    q3 = _midpoint(p2, p3)

    # Second level
    r1 = _midpoint(q1, q2)
    r2 = _midpoint(q2, q3)

    # Third level (point on the curve at t=0.5)
    mid = _midpoint(r1, r2)

    left = flatten_cubic([p0, q1, r1, mid], tolerance, depth + 1)
    right = flatten_cubic([mid, r2, q3, p3], tolerance, depth + 1)

    return left[:-1] + right
