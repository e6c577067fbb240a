"""Tests for path shape extraction."""

from svgcombiner.core.extractor import extract_paths
from svgcombiner.domain import (
    Canvas,
    Close,
    GroupNode,
    LineTo,
    MoveTo,
    OtherNode,
    PathNode,
    Point,
    Scene,
)


def _path(x: float) -> PathNode:
    return PathNode(
        segments=(
            MoveTo(Point(x, 0)),
            LineTo(Point(x + 1, 0)),
            LineTo(Point(x + 1, 1)),
            Close(),
        ),
        id=f"p{x:g}",
    )


class TestExtractPaths:
    """Tests for extract_paths."""

    def test_flat_group(self) -> None:
        """Each path node yields one shape."""
        root = GroupNode(children=(_path(0), _path(2), _path(4)))
        assert len(extract_paths(root)) == 3

    def test_nested_groups_preserve_document_order(self) -> None:
        """Shapes come out in pre-order regardless of nesting depth."""
        root = GroupNode(
            children=(
                _path(0),
                GroupNode(children=(GroupNode(children=(_path(2),)), _path(4))),
                _path(6),
            )
        )
        shapes = extract_paths(root)

        starts = [shape.subpaths[0].start.x for shape in shapes]
        assert starts == [0, 2, 4, 6]

    def test_count_matches_path_nodes(self) -> None:
        """The shape count equals the number of reachable path nodes."""
        root = GroupNode(
            children=(
                GroupNode(children=(GroupNode(children=(GroupNode(children=(_path(0),)),)),)),
                OtherNode(tag="text"),
                _path(2),
                GroupNode(),
            )
        )
        scene = Scene(root=root, canvas=Canvas(10, 10))
        assert len(extract_paths(scene.root)) == scene.count_paths() == 2

    def test_other_nodes_ignored(self) -> None:
        """Non-path leaves contribute nothing."""
        root = GroupNode(children=(OtherNode(tag="image"), OtherNode(tag="text")))
        assert extract_paths(root) == []

    def test_single_path_root(self) -> None:
        """A bare path node is its own single shape."""
        assert len(extract_paths(_path(0))) == 1

    def test_path_with_multiple_subpaths(self) -> None:
        """Subpaths stay grouped in one shape."""
        node = PathNode(
            segments=(
                MoveTo(Point(0, 0)),
                LineTo(Point(4, 0)),
                LineTo(Point(4, 4)),
                Close(),
                MoveTo(Point(1, 1)),
                LineTo(Point(1, 2)),
                LineTo(Point(2, 2)),
                Close(),
            )
        )
        shapes = extract_paths(GroupNode(children=(node,)))
        assert len(shapes) == 1
        assert len(shapes[0].subpaths) == 2
