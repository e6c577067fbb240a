"""Extraction of path shapes from the shape tree."""

from svgcombiner.core.tessellation import PathShape
from svgcombiner.domain import GroupNode, PathNode, ShapeNode


def extract_paths(root: ShapeNode) -> list[PathShape]:
    """Collect every path shape under ``root`` in document order.

    Groups are walked depth-first in child order; each PathNode yields
    exactly one PathShape and every other node kind is ignored.

    Args:
        root: Root of the shape tree (usually the scene's root group)

    Returns:
        Path shapes in pre-order
    """
    shapes: list[PathShape] = []
    _collect(root, shapes)
    return shapes


def _collect(node: ShapeNode, shapes: list[PathShape]) -> None:
    if isinstance(node, PathNode):
        shapes.append(PathShape.from_node(node))
    elif isinstance(node, GroupNode):
        for child in node.children:
            _collect(child, shapes)
