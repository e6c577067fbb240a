"""End-to-end tests that combine SVG documents and verify the written output."""

import math
from pathlib import Path
from xml.etree import ElementTree

import pytest

from svgcombiner.config import CombineConfig, CombinerSettings
from svgcombiner.core import extract_paths
from svgcombiner.core.processor import SvgCombiner
from svgcombiner.io import SvgReader

SVG_NS = "http://www.w3.org/2000/svg"


def write_svg(path: Path, body: str, attrs: str = 'width="100" height="100"') -> Path:
    path.write_text(f'<svg xmlns="{SVG_NS}" {attrs}>{body}</svg>', encoding="utf-8")
    return path


def read_output(path: Path) -> tuple[ElementTree.Element, list[list[tuple[float, float]]]]:
    """Parse an output document into its root and the contours of its path."""
    root = ElementTree.parse(path).getroot()
    paths = root.findall(f"{{{SVG_NS}}}path")
    assert len(paths) == 1

    contours: list[list[tuple[float, float]]] = []
    tokens = paths[0].get("d", "").split()
    i = 0
    while i < len(tokens):
        command = tokens[i]
        if command == "M":
            contours.append([(float(tokens[i + 1]), float(tokens[i + 2]))])
            i += 3
        elif command == "L":
            contours[-1].append((float(tokens[i + 1]), float(tokens[i + 2])))
            i += 3
        else:
            assert command == "Z"
            i += 1
    return root, contours


def signed_area(points: list[tuple[float, float]]) -> float:
    area = 0.0
    for (x1, y1), (x2, y2) in zip(points, points[1:] + points[:1]):
        area += x1 * y2 - x2 * y1
    return area / 2.0


def run(input_path: Path, output_path: Path, **combine):
    settings = CombinerSettings(combine=CombineConfig(**combine))
    return SvgCombiner(settings, quiet=True).process(input_path, output_path)


class TestEndToEndOutput:
    """Full pipeline runs on small documents."""

    def test_disjoint_squares(self, tmp_path: Path) -> None:
        """Two disjoint unit squares stay two four-vertex subpaths."""
        source = write_svg(
            tmp_path / "in.svg",
            '<rect x="0" y="0" width="1" height="1"/><rect x="3" y="0" width="1" height="1"/>',
            attrs='width="10" height="10"',
        )
        output = tmp_path / "out.svg"

        stats = run(source, output, offset=0.0, min_area=0.01)

        _, contours = read_output(output)
        assert len(contours) == 2
        assert all(len(contour) == 4 for contour in contours)
        assert stats.input_polygons == 2
        assert stats.output_polygons == 2

    def test_single_square_corners(self, tmp_path: Path) -> None:
        """A lone square comes back with its exact corners."""
        source = write_svg(tmp_path / "in.svg", '<rect x="0" y="0" width="10" height="10"/>')
        output = tmp_path / "out.svg"

        run(source, output, offset=0.0)

        _, contours = read_output(output)
        assert len(contours) == 1
        assert set(contours[0]) == {(0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 10.0)}

    def test_overlapping_circles_merge(self, tmp_path: Path) -> None:
        """Overlapping circles become one contour with a negative offset."""
        source = write_svg(
            tmp_path / "in.svg",
            '<circle cx="20" cy="20" r="10"/><circle cx="32" cy="20" r="10"/>',
            attrs='width="60" height="40"',
        )
        output = tmp_path / "out.svg"

        stats = run(source, output, offset=-1.0)

        _, contours = read_output(output)
        assert len(contours) == 1
        xs = [x for x, _ in contours[0]]
        assert min(xs) == pytest.approx(10.0, abs=1.0)
        assert max(xs) == pytest.approx(42.0, abs=1.0)
        assert stats.output_vertices < stats.input_vertices
        assert stats.vertex_reduction is not None

    def test_overlapping_circles_with_gap(self, tmp_path: Path) -> None:
        """A positive offset separates the earlier circle from the later one."""
        source = write_svg(
            tmp_path / "in.svg",
            '<circle cx="20" cy="20" r="10"/><circle cx="32" cy="20" r="10"/>',
            attrs='width="60" height="40"',
        )
        output = tmp_path / "out.svg"

        run(source, output, offset=1.0)

        _, contours = read_output(output)
        assert len(contours) == 2

    def test_merged_area(self, tmp_path: Path) -> None:
        """The union of two overlapping circles covers about the expected area."""
        source = write_svg(
            tmp_path / "in.svg",
            '<circle cx="20" cy="20" r="10"/><circle cx="32" cy="20" r="10"/>',
            attrs='width="60" height="40"',
        )
        output = tmp_path / "out.svg"

        run(source, output, offset=-1.0)

        _, contours = read_output(output)
        # Lens overlap of two r=10 circles 12 apart
        d, r = 12.0, 10.0
        lens = 2 * r * r * math.acos(d / (2 * r)) - d / 2 * math.sqrt(4 * r * r - d * d)
        expected = 2 * math.pi * r * r - lens
        assert abs(signed_area(contours[0])) == pytest.approx(expected, rel=0.06)

    def test_hole_preserved(self, tmp_path: Path) -> None:
        """A ring drawn with opposite winding keeps its hole."""
        source = write_svg(
            tmp_path / "in.svg",
            '<path d="M0 0 L20 0 L20 20 L0 20 Z M5 5 L5 15 L15 15 L15 5 Z"/>',
        )
        output = tmp_path / "out.svg"

        run(source, output, offset=0.0)

        _, contours = read_output(output)
        assert len(contours) == 2
        areas = sorted(signed_area(contour) for contour in contours)
        assert areas[0] * areas[1] < 0
        assert abs(sum(areas)) == pytest.approx(300.0)

    def test_empty_document(self, tmp_path: Path) -> None:
        """A document without shapes produces an empty path."""
        source = write_svg(tmp_path / "in.svg", "<text>nothing</text>", attrs='width="10" height="20"')
        output = tmp_path / "out.svg"

        stats = run(source, output)

        root, contours = read_output(output)
        assert contours == []
        assert root.find(f"{{{SVG_NS}}}path").get("d") == ""
        assert root.get("viewBox") == "0 0 10 20"
        assert stats.output_polygons == 0
        assert stats.vertex_reduction is None

    def test_small_artifact_removed(self, tmp_path: Path) -> None:
        """Slivers below the minimum area do not reach the output."""
        source = write_svg(
            tmp_path / "in.svg",
            '<rect x="0" y="0" width="10" height="10"/><rect x="50" y="50" width="0.5" height="0.5"/>',
        )
        output = tmp_path / "out.svg"

        run(source, output, offset=0.0, min_area=1.0)

        _, contours = read_output(output)
        assert len(contours) == 1
        assert abs(signed_area(contours[0])) >= 1.0

    def test_output_attributes(self, tmp_path: Path) -> None:
        """The output path is filled with the nonzero rule and no stroke."""
        source = write_svg(
            tmp_path / "in.svg",
            '<rect x="1" y="1" width="5" height="5"/>',
            attrs='width="210" height="297" viewBox="0 0 210 297"',
        )
        output = tmp_path / "out.svg"

        run(source, output)

        root, _ = read_output(output)
        path = root.find(f"{{{SVG_NS}}}path")
        assert root.get("width") == "210mm"
        assert root.get("height") == "297mm"
        assert root.get("viewBox") == "0 0 210 297"
        assert path.get("fill-rule") == "nonzero"
        assert path.get("stroke") == "none"

    def test_inch_sized_document_keeps_shapes(self, tmp_path: Path) -> None:
        """Shapes in a document sized in inches survive the default cleanup."""
        source = write_svg(
            tmp_path / "in.svg",
            '<circle cx="48" cy="48" r="40"/>',
            attrs='width="1in" height="1in" viewBox="0 0 96 96"',
        )
        output = tmp_path / "out.svg"

        stats = run(source, output)

        root, contours = read_output(output)
        assert root.get("viewBox") == "0 0 96 96"
        assert stats.input_vertices > 16
        assert stats.output_polygons == 1
        assert abs(signed_area(contours[0])) == pytest.approx(math.pi * 40 * 40, rel=0.03)

    def test_millimetre_canvas_in_user_units(self, tmp_path: Path) -> None:
        """Millimetre sizes become user units at 96 per inch."""
        source = write_svg(
            tmp_path / "in.svg",
            '<rect x="10" y="10" width="50" height="50"/>',
            attrs='width="25.4mm" height="50.8mm" viewBox="0 0 96 192"',
        )
        output = tmp_path / "out.svg"

        run(source, output, offset=0.0)

        root, contours = read_output(output)
        assert root.get("viewBox") == "0 0 96 192"
        assert set(contours[0]) == {(10.0, 10.0), (60.0, 10.0), (60.0, 60.0), (10.0, 60.0)}

    def test_deterministic(self, tmp_path: Path) -> None:
        """The same input always yields the same bytes."""
        source = write_svg(
            tmp_path / "in.svg",
            '<circle cx="20" cy="20" r="10"/><rect x="25" y="15" width="20" height="10"/>'
            '<ellipse cx="40" cy="30" rx="8" ry="4"/>',
        )
        first = tmp_path / "a.svg"
        second = tmp_path / "b.svg"

        run(source, first)
        run(source, second)

        assert first.read_bytes() == second.read_bytes()

    def test_extraction_matches_path_count(self, tmp_path: Path) -> None:
        """Every drawable path in the tree is extracted exactly once."""
        source = write_svg(
            tmp_path / "in.svg",
            '<g><rect width="1" height="1"/><g><circle r="2"/></g></g>'
            '<path d="M0 0 L1 1"/><defs><rect width="1" height="1"/></defs>',
        )
        scene = SvgReader(source).load()

        assert len(extract_paths(scene.root)) == scene.count_paths() == 3
