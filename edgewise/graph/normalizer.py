"""
Edge normalization: collapse parallel edges into one canonical edge per endpoint pair.
"""

from __future__ import annotations

from typing import Iterable

from edgewise.errors import OutOfRangeError
from edgewise.graph.edges import CanonicalEdge, RawEdge


def _edge_key(edge: RawEdge, directed: bool) -> tuple[int, int]:
    if directed:
        return (edge.source, edge.target)
    return (min(edge.source, edge.target), max(edge.source, edge.target))


def normalize_edges(
    node_count: int,
    directed: bool,
    weighted: bool,
    raw_edges: Iterable[RawEdge],
) -> tuple[CanonicalEdge, ...]:
    """
    Deduplicate raw edges in input order.

    On a repeated key a weighted graph keeps the strictly lighter edge (ties keep the
    first seen); an unweighted graph always keeps the first seen. Result order is the
    order of first appearance per key. Unweighted edges get weight 1.

    Raises:
        OutOfRangeError: an endpoint is outside [0, node_count).
    """
    retained: dict[tuple[int, int], CanonicalEdge] = {}
    for edge in raw_edges:
        for node in (edge.source, edge.target):
            if not 0 <= node < node_count:
                raise OutOfRangeError(node, node_count)
        weight = edge.weight if weighted else 1
        key = _edge_key(edge, directed)
        existing = retained.get(key)
        if existing is None:
            retained[key] = CanonicalEdge(edge.source, edge.target, weight)
        elif weighted and weight < existing.weight:
            # dict keeps the key's original insertion position on reassignment
            retained[key] = CanonicalEdge(edge.source, edge.target, weight)
    return tuple(retained.values())
