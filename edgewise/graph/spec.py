"""
Graph spec data model and validation.
"""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import Iterable

from edgewise.errors import OutOfRangeError, ValidationError
from edgewise.graph.edges import RawEdge

# Any simple path weighs at most the total absolute edge weight, and one relaxation
# adds two such paths; keeping the total under half the float range rules out overflow.
MAX_TOTAL_WEIGHT = sys.float_info.max / 2


@dataclass(frozen=True)
class GraphSpec:
    """Input of one analysis: node count, flags, and the raw edge list in input order."""

    node_count: int
    directed: bool
    weighted: bool
    raw_edges: tuple[RawEdge, ...]


def build_graph_spec(
    node_count: int,
    edges: Iterable[RawEdge | tuple],
    *,
    directed: bool = False,
    weighted: bool = False,
) -> GraphSpec:
    """
    Build a GraphSpec; edges may be RawEdge instances or (source, target[, weight]) tuples.
    Does not validate; see validate_graph_spec.
    """
    raw: list[RawEdge] = []
    for e in edges:
        if isinstance(e, RawEdge):
            raw.append(e)
        else:
            raw.append(RawEdge(*e))
    return GraphSpec(
        node_count=node_count,
        directed=directed,
        weighted=weighted,
        raw_edges=tuple(raw),
    )


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _magnitude(weight: float) -> float:
    try:
        return abs(float(weight))
    except OverflowError:
        return math.inf


def validate_graph_spec(spec: GraphSpec) -> None:
    """
    Reject a malformed spec before any analysis.

    Raises:
        ValidationError: node_count is not a non-negative int, or a weighted edge
            has a missing, non-numeric or non-finite weight, or the
            weights add up past MAX_TOTAL_WEIGHT.
        OutOfRangeError: an endpoint is outside [0, node_count).
    """
    n = spec.node_count
    if not isinstance(n, int) or isinstance(n, bool):
        raise ValidationError(f"node_count must be an integer, got {type(n).__name__}")
    if n < 0:
        raise ValidationError(f"node_count must be >= 0, got {n}")

    total_weight = 0.0
    for index, edge in enumerate(spec.raw_edges):
        for node in (edge.source, edge.target):
            if not isinstance(node, int) or isinstance(node, bool):
                raise ValidationError(
                    f"Edge {index}: node ids must be integers, got {type(node).__name__}"
                )
            if not 0 <= node < n:
                raise OutOfRangeError(node, n)
        if spec.weighted:
            if edge.weight is None:
                raise ValidationError(f"Edge {index}: weight is required for a weighted graph")
            if not _is_number(edge.weight) or not math.isfinite(_magnitude(edge.weight)):
                raise ValidationError(
                    f"Edge {index}: weight must be a finite number, got {edge.weight!r}"
                )
            total_weight += _magnitude(edge.weight)

    if total_weight > MAX_TOTAL_WEIGHT:
        raise ValidationError(
            f"Total absolute edge weight {total_weight!r} is too large to sum without overflow"
        )
