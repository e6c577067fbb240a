"""Incremental combination of polygon groups.

Groups are folded into a running result one at a time, in extraction order:

1. ``expanded = offset(group, offset)``
2. the first time the result is empty it is seeded with the group itself
3. otherwise ``result = union(difference(result, expanded), group)``

Subtracting the offset footprint before adding the exact group back keeps
every shape's own boundary intact while earlier shapes yield to it. After
the fold a fixed cleanup pass runs: coarse simplify, small-area filter,
self-union, fine simplify. The order of both stages is part of the result.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from svgcombiner.config import CombineConfig
from svgcombiner.core.clipping import ClippingEngine, EndType, JoinType
from svgcombiner.domain import PolygonGroup, PolygonSet
from svgcombiner.utils import ProcessingLogger


@dataclass(frozen=True)
class CombineParams:
    """Numeric parameters of the combine fold and cleanup pass."""

    offset: float = -1.0
    coarse_simplify: float = 0.25
    fine_simplify: float = 0.05
    min_area: float = 1.0

    @classmethod
    def from_config(cls, config: CombineConfig) -> "CombineParams":
        return cls(
            offset=config.offset,
            coarse_simplify=config.coarse_simplify,
            fine_simplify=config.fine_simplify,
            min_area=config.min_area,
        )


def combine_step(
    combined: PolygonSet,
    group: PolygonGroup,
    engine: ClippingEngine,
    offset: float,
) -> PolygonSet:
    """Fold one polygon group into the accumulated result.

    Args:
        combined: Result accumulated so far
        group: Next polygon group
        engine: Clipping engine
        offset: Offset distance applied to the group before subtraction

    Returns:
        New accumulated result
    """
    expanded = engine.offset(group, offset, JoinType.ROUND, EndType.CLOSED_POLYGON)

    if not combined:
        return list(group)

    combined = engine.difference(combined, expanded)
    return engine.union(combined, group)


def cleanup(
    combined: PolygonSet,
    engine: ClippingEngine,
    params: CombineParams,
    processing_logger: ProcessingLogger | None = None,
) -> PolygonSet:
    """Run the post-fold cleanup pass.

    Args:
        combined: Result of the fold
        engine: Clipping engine
        params: Simplification tolerances and minimum area
        processing_logger: Optional logger for per-step contour counts

    Returns:
        Cleaned polygon set
    """
    steps = (
        ("simplify_coarse", lambda p: engine.simplify(p, params.coarse_simplify)),
        ("filter_small_area", lambda p: engine.filter_small_area(p, params.min_area)),
        ("self_union", lambda p: engine.union(p, [])),
        ("simplify_fine", lambda p: engine.simplify(p, params.fine_simplify)),
    )
    for name, step in steps:
        combined = step(combined)
        if processing_logger is not None:
            processing_logger.log_cleanup_step(name, len(combined))
    return combined


def combine_groups(
    groups: Iterable[PolygonGroup],
    engine: ClippingEngine,
    params: CombineParams | None = None,
    processing_logger: ProcessingLogger | None = None,
) -> PolygonSet:
    """Combine polygon groups into one cleaned polygon set.

    An empty input yields an empty set. Empty groups pass through the fold
    without changing the result.

    Args:
        groups: Polygon groups in extraction order
        engine: Clipping engine
        params: Combine parameters (defaults if None)
        processing_logger: Optional logger for progress

    Returns:
        Combined polygon set
    """
    params = params if params is not None else CombineParams()
    combined: PolygonSet = []

    for idx, group in enumerate(groups):
        combined = combine_step(combined, group, engine, params.offset)
        if processing_logger is not None:
            processing_logger.log_group_combined(idx, len(combined))

    return cleanup(combined, engine, params, processing_logger)


class GroupCombiner:
    """Combines polygon groups with a fixed engine and parameters.

    Example:
        combiner = GroupCombiner(PyclipperEngine(), CombineParams(offset=-1.0))
        result = combiner.combine(groups)
    """

    def __init__(
        self,
        engine: ClippingEngine,
        params: CombineParams | None = None,
        processing_logger: ProcessingLogger | None = None,
    ) -> None:
        self.engine = engine
        self.params = params if params is not None else CombineParams()
        self.processing_logger = processing_logger

    def combine(self, groups: Iterable[PolygonGroup]) -> PolygonSet:
        """Combine groups and return the cleaned result."""
        return combine_groups(groups, self.engine, self.params, self.processing_logger)
