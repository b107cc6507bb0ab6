"""
All-pairs shortest distances (Floyd-Warshall) with negative-cycle propagation.

Reachability is tracked in its own boolean matrix so that no float value doubles
as the "no path" marker. A relaxation that underflows to -inf can only come from
a negative cycle and is reported as NEGATIVE_INFINITY.
"""

from __future__ import annotations

import math
from typing import Iterable

from edgewise.graph.adjacency import Adjacency
from edgewise.graph.distance import (
    NEGATIVE_INFINITY,
    UNREACHABLE,
    ZERO,
    DistanceCell,
    finite,
)
from edgewise.graph.edges import CanonicalEdge

_NEG_INF = -math.inf

Matrix = list[list[float]]
Mask = list[list[bool]]


def _initial_distances(
    adjacency: Adjacency,
    edges: Iterable[CanonicalEdge],
) -> tuple[Matrix, Mask]:
    """Edge weights (unit if unweighted) on top of a zero diagonal, with the matching reachability mask."""
    n = adjacency.node_count
    dist: Matrix = [[0.0] * n for _ in range(n)]
    reach: Mask = [[False] * n for _ in range(n)]
    for i in range(n):
        dist[i][i] = 0
        reach[i][i] = True
    for e in edges:
        weight = e.weight if adjacency.weighted else 1
        if e.source == e.target:
            # a negative self loop is a negative cycle; a non-negative one changes nothing
            dist[e.source][e.source] = min(dist[e.source][e.source], weight)
            continue
        dist[e.source][e.target] = weight
        reach[e.source][e.target] = True
        if not adjacency.directed:
            dist[e.target][e.source] = weight
            reach[e.target][e.source] = True
    return dist, reach


def _relax(dist: Matrix, reach: Mask) -> None:
    """Floyd-Warshall relaxation; k must stay the outermost loop."""
    n = len(dist)
    for k in range(n):
        row_k = dist[k]
        reach_k = reach[k]
        for i in range(n):
            if not reach[i][k]:
                continue
            d_ik = dist[i][k]
            row_i = dist[i]
            reach_i = reach[i]
            for j in range(n):
                if not reach_k[j]:
                    continue
                candidate = d_ik + row_k[j]
                if math.isnan(candidate):
                    # -inf met +inf: one side already runs through a negative cycle
                    candidate = _NEG_INF
                if not reach_i[j] or candidate < row_i[j]:
                    row_i[j] = candidate
                    reach_i[j] = True


def _still_decreasing(dist: Matrix, reach: Mask) -> Mask:
    """
    Second relaxation pass: pairs that can still strictly decrease lie on or after a
    negative cycle. Cells that already hit -inf are marked outright, since -inf never
    compares as decreasing.
    """
    n = len(dist)
    marked = [[reach[i][j] and dist[i][j] == _NEG_INF for j in range(n)] for i in range(n)]
    for k in range(n):
        row_k = dist[k]
        reach_k = reach[k]
        for i in range(n):
            if not reach[i][k]:
                continue
            d_ik = dist[i][k]
            row_i = dist[i]
            for j in range(n):
                if reach_k[j] and d_ik + row_k[j] < row_i[j]:
                    marked[i][j] = True
    return marked


def _propagate(reach: Mask, marked: Mask) -> None:
    """
    Spread negative infinity from every node on a negative cycle (a marked diagonal cell):
    (i, j) is marked when i reaches such a node k and k reaches j. Reachability is already
    transitive after relaxation, so one sweep per cycle node is enough.
    """
    n = len(reach)
    cycle_nodes = [k for k in range(n) if marked[k][k]]
    for k in cycle_nodes:
        reach_k = reach[k]
        downstream = [j for j in range(n) if reach_k[j]]
        for i in range(n):
            if not reach[i][k]:
                continue
            row_marked = marked[i]
            for j in downstream:
                row_marked[j] = True


def compute_distance_matrix(
    adjacency: Adjacency,
    edges: Iterable[CanonicalEdge],
) -> tuple[tuple[DistanceCell, ...], ...]:
    """
    All-pairs distances as DistanceCells.

    The diagonal is always ZERO. Pairs affected by a negative cycle are
    NEGATIVE_INFINITY; pairs with no path are UNREACHABLE. O(node_count^3).

    Raises:
        OverflowError: a reachable pair's shortest distance exceeds the float range.
            validate_graph_spec bounds the total weight so analyze() never gets here.
    """
    dist, reach = _initial_distances(adjacency, edges)
    _relax(dist, reach)
    marked = _still_decreasing(dist, reach)
    _propagate(reach, marked)

    n = adjacency.node_count
    rows: list[tuple[DistanceCell, ...]] = []
    for i in range(n):
        row: list[DistanceCell] = []
        for j in range(n):
            if i == j:
                row.append(ZERO)
            elif marked[i][j]:
                row.append(NEGATIVE_INFINITY)
            elif not reach[i][j]:
                row.append(UNREACHABLE)
            elif dist[i][j] == math.inf:
                raise OverflowError(f"Distance from {i} to {j} exceeds the float range")
            else:
                row.append(finite(dist[i][j]))
        rows.append(tuple(row))
    return tuple(rows)
