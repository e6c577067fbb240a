"""Tests for domain models to verify they work correctly."""

import pytest

from svgcombiner.domain import (
    Canvas,
    Close,
    Contour,
    GroupNode,
    LineTo,
    MoveTo,
    OtherNode,
    OutputDocument,
    PathNode,
    Point,
    Scene,
    count_vertices,
)


def _square_path(x: float, y: float, size: float) -> PathNode:
    return PathNode(
        segments=(
            MoveTo(Point(x, y)),
            LineTo(Point(x + size, y)),
            LineTo(Point(x + size, y + size)),
            LineTo(Point(x, y + size)),
            Close(),
        )
    )


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(100.0, 200.0)
        assert p.x == 100.0
        assert p.y == 200.0

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        assert Point(1.5, -2.0).to_tuple() == (1.5, -2.0)

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(100.0, 200.0)
        with pytest.raises(AttributeError):
            p.x = 300.0  # type: ignore

    def test_point_hashable(self) -> None:
        """Points can be used in sets."""
        assert len({Point(0, 0), Point(0.0, 0.0), Point(1, 0)}) == 2


class TestContour:
    """Tests for Contour class."""

    def test_signed_area_ccw(self) -> None:
        """Counter-clockwise square has positive area."""
        contour = Contour.from_tuples([(0, 0), (10, 0), (10, 10), (0, 10)])
        assert contour.signed_area() == pytest.approx(100.0)
        assert contour.area() == pytest.approx(100.0)

    def test_signed_area_cw(self) -> None:
        """Clockwise square has negative signed area but positive area."""
        contour = Contour.from_tuples([(0, 0), (0, 10), (10, 10), (10, 0)])
        assert contour.signed_area() == pytest.approx(-100.0)
        assert contour.area() == pytest.approx(100.0)

    def test_degenerate_area(self) -> None:
        """Fewer than three points enclose nothing."""
        assert Contour.from_tuples([(0, 0), (5, 5)]).area() == 0.0

    def test_bounding_box(self) -> None:
        """Test bounding box calculation."""
        contour = Contour.from_tuples([(1, 2), (5, -1), (3, 7)])
        assert contour.bounding_box() == (1.0, -1.0, 5.0, 7.0)

    def test_empty_bounding_box(self) -> None:
        """Empty contour has a zero bounding box."""
        assert Contour(points=[]).bounding_box() == (0.0, 0.0, 0.0, 0.0)

    def test_round_trip_tuples(self) -> None:
        """Tuples survive conversion."""
        coords = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0)]
        assert Contour.from_tuples(coords).to_tuples() == coords

    def test_count_vertices(self) -> None:
        """Vertex count sums all contours."""
        polygons = [
            Contour.from_tuples([(0, 0), (1, 0), (1, 1)]),
            Contour.from_tuples([(0, 0), (1, 0), (1, 1), (0, 1)]),
        ]
        assert count_vertices(polygons) == 7
        assert count_vertices([]) == 0


class TestScene:
    """Tests for the shape tree."""

    def test_count_paths_nested(self) -> None:
        """Paths are counted at any group depth."""
        root = GroupNode(
            children=(
                _square_path(0, 0, 1),
                GroupNode(
                    children=(
                        GroupNode(children=(_square_path(2, 0, 1),)),
                        OtherNode(tag="text"),
                        _square_path(4, 0, 1),
                    )
                ),
            )
        )
        scene = Scene(root=root, canvas=Canvas(10, 10))
        assert scene.count_paths() == 3

    def test_count_paths_empty(self) -> None:
        """A scene without paths counts zero."""
        scene = Scene(root=GroupNode(), canvas=Canvas(10, 10))
        assert scene.count_paths() == 0


class TestOutputDocument:
    """Tests for the emitted document."""

    def test_to_svg_contains_canvas(self) -> None:
        """Width, height and viewBox are copied from the canvas."""
        document = OutputDocument(path_data="M 0 0 L 1 0 L 1 1 Z", canvas=Canvas(210, 297.5))
        svg = document.to_svg()

        assert svg.startswith('<?xml version="1.0" encoding="UTF-8"?>')
        assert 'viewBox="0 0 210 297.5"' in svg
        assert 'width="210mm"' in svg
        assert 'height="297.5mm"' in svg
        assert 'd="M 0 0 L 1 0 L 1 1 Z"' in svg
        assert 'fill-rule="nonzero"' in svg
        assert 'stroke="none"' in svg

    def test_to_svg_without_unit(self) -> None:
        """An empty unit leaves plain user units."""
        document = OutputDocument(path_data="", canvas=Canvas(64, 32), unit="")
        svg = document.to_svg()
        assert 'width="64"' in svg
        assert 'height="32"' in svg
        assert 'd=""' in svg
