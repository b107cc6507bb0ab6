"""
Adjacency matrix and adjacency list built from canonical edges.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from edgewise.graph.edges import CanonicalEdge


@dataclass(frozen=True)
class Adjacency:
    """
    Adjacency-list view of one normalized graph; neighbor order is edge-insertion order.
    Undirected edges appear in both endpoints' lists.
    """

    node_count: int
    directed: bool
    weighted: bool
    neighbors: tuple[tuple[int, ...], ...]

    def successors(self, node: int) -> tuple[int, ...]:
        return self.neighbors[node]

    def out_degree(self, node: int) -> int:
        return len(self.neighbors[node])


def build_adjacency(
    node_count: int,
    directed: bool,
    weighted: bool,
    edges: Iterable[CanonicalEdge],
) -> Adjacency:
    """Build the adjacency list. O(node_count + |edges|)."""
    neighbors: list[list[int]] = [[] for _ in range(node_count)]
    for e in edges:
        neighbors[e.source].append(e.target)
        if not directed:
            neighbors[e.target].append(e.source)
    return Adjacency(
        node_count=node_count,
        directed=directed,
        weighted=weighted,
        neighbors=tuple(tuple(row) for row in neighbors),
    )


def build_adjacency_matrix(
    node_count: int,
    directed: bool,
    weighted: bool,
    edges: Iterable[CanonicalEdge],
) -> tuple[tuple[float, ...], ...]:
    """
    Build the node_count x node_count matrix: the weight (1 if unweighted) at
    [source][target], mirrored when undirected.

    A 0 cell means "no edge" and is indistinguishable from an edge of weight 0.
    """
    matrix: list[list[float]] = [[0] * node_count for _ in range(node_count)]
    for e in edges:
        weight = e.weight if weighted else 1
        matrix[e.source][e.target] = weight
        if not directed:
            matrix[e.target][e.source] = weight
    return tuple(tuple(row) for row in matrix)
