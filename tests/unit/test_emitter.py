"""Tests for path data emission."""

from svgcombiner.core.emitter import build_document, polygons_to_path_data
from svgcombiner.domain import Canvas, Contour


class TestPolygonsToPathData:
    """Tests for polygons_to_path_data."""

    def test_single_contour(self) -> None:
        """A contour becomes M, L commands and Z."""
        contour = Contour.from_tuples([(0, 0), (1, 0), (1, 1)])
        assert polygons_to_path_data([contour], precision=0) == "M 0 0 L 1 0 L 1 1 Z"

    def test_multiple_contours(self) -> None:
        """Each contour is its own subpath."""
        polygons = [
            Contour.from_tuples([(0, 0), (1, 0), (1, 1)]),
            Contour.from_tuples([(5, 5), (6, 5), (6, 6)]),
        ]
        path_data = polygons_to_path_data(polygons, precision=0)
        assert path_data == "M 0 0 L 1 0 L 1 1 Z M 5 5 L 6 5 L 6 6 Z"

    def test_precision(self) -> None:
        """Coordinates are written with a fixed number of decimals."""
        contour = Contour.from_tuples([(0.123456, 1.5), (2, 0), (2, 2)])
        assert polygons_to_path_data([contour], precision=2).startswith("M 0.12 1.50 L 2.00")

    def test_negative_zero(self) -> None:
        """Values rounding to zero never carry a sign."""
        contour = Contour.from_tuples([(-0.00001, -0.0), (1, 0), (1, 1)])
        assert polygons_to_path_data([contour], precision=3).startswith("M 0.000 0.000 ")

    def test_empty(self) -> None:
        """No polygons give empty path data."""
        assert polygons_to_path_data([]) == ""

    def test_empty_contour_skipped(self) -> None:
        """Contours without points are not written."""
        polygons = [Contour(points=[]), Contour.from_tuples([(0, 0), (1, 0), (1, 1)])]
        assert polygons_to_path_data(polygons, precision=0) == "M 0 0 L 1 0 L 1 1 Z"


class TestBuildDocument:
    """Tests for build_document."""

    def test_document_fields(self) -> None:
        """The document carries the path data, canvas and unit."""
        contour = Contour.from_tuples([(0, 0), (1, 0), (1, 1)])
        document = build_document([contour], Canvas(50, 20), unit="px", precision=1)

        assert document.path_data == "M 0.0 0.0 L 1.0 0.0 L 1.0 1.0 Z"
        assert document.canvas == Canvas(50, 20)
        assert 'width="50px"' in document.to_svg()

    def test_empty_document(self) -> None:
        """An empty result still produces a valid document."""
        svg = build_document([], Canvas(10, 10)).to_svg()
        assert 'd=""' in svg
        assert 'viewBox="0 0 10 10"' in svg
