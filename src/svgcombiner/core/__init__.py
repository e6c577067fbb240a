"""Core processing algorithms for svgcombiner.

This module contains the core algorithms for:

- Curve tessellation (Bezier subdivision into line segments)
- Polygon clipping (offset, union, difference, simplify)
- Shape extraction from the scene tree
- Contour flattening into polygon groups
- Incremental group combination and cleanup
- Path data emission

Key functions:
- extract_paths: Collect path shapes in document order
- flatten_shape: Convert a path shape into its polygon group
- combine_groups: Fold polygon groups into one polygon set
- polygons_to_path_data: Serialize contours as SVG path data

Key classes:
- BezierTessellator: Default curve tessellator
- PyclipperEngine: Default clipping engine
- ContourFlattener: Flattens shapes and records statistics
- GroupCombiner: Combines polygon groups
- SvgCombiner: Runs the whole pipeline
"""

from svgcombiner.core.clipping import (
    ClippingEngine,
    EndType,
    JoinType,
    PyclipperEngine,
)
from svgcombiner.core.combiner import (
    CombineParams,
    GroupCombiner,
    cleanup,
    combine_groups,
    combine_step,
)
from svgcombiner.core.emitter import build_document, polygons_to_path_data
from svgcombiner.core.extractor import extract_paths
from svgcombiner.core.flattener import ContourFlattener, contours_from_events, flatten_shape
from svgcombiner.core.processor import SvgCombiner
from svgcombiner.core.tessellation import (
    Begin,
    BezierTessellator,
    End,
    FlattenEvent,
    Line,
    PathShape,
    Subpath,
    Tessellator,
)

__all__ = [
    # Tessellation
    "Begin",
    "BezierTessellator",
    "End",
    "FlattenEvent",
    "Line",
    "PathShape",
    "Subpath",
    "Tessellator",
    # Clipping
    "ClippingEngine",
    "EndType",
    "JoinType",
    "PyclipperEngine",
    # Pipeline stages
    "CombineParams",
    "ContourFlattener",
    "GroupCombiner",
    "SvgCombiner",
    "build_document",
    "cleanup",
    "combine_groups",
    "combine_step",
    "contours_from_events",
    "extract_paths",
    "flatten_shape",
    "polygons_to_path_data",
]
