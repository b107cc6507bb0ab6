"""
Bridges and articulation points of an undirected graph via Tarjan's low-link DFS.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from edgewise.graph.adjacency import Adjacency
from edgewise.graph.edges import CanonicalEdge

_NO_PARENT = -1


@dataclass
class _LowLinkState:
    """Scratch tables for one traversal, indexed by node id; disc 0 means unvisited."""

    disc: list[int]
    low: list[int]
    parent: list[int]
    position: list[int]
    is_articulation: list[bool]
    bridges: list[CanonicalEdge] = field(default_factory=list)
    time: int = 0

    @classmethod
    def for_nodes(cls, node_count: int) -> _LowLinkState:
        return cls(
            disc=[0] * node_count,
            low=[0] * node_count,
            parent=[_NO_PARENT] * node_count,
            position=[0] * node_count,
            is_articulation=[False] * node_count,
        )

    def discover(self, node: int) -> None:
        self.time += 1
        self.disc[node] = self.time
        self.low[node] = self.time


def _traverse_from(
    root: int,
    adjacency: Adjacency,
    weights: dict[tuple[int, int], float],
    state: _LowLinkState,
) -> None:
    """Iterative DFS from root; a finished child updates its parent exactly as a recursive return would."""
    disc, low, parent, position = state.disc, state.low, state.parent, state.position
    state.discover(root)
    root_children = 0
    stack = [root]

    while stack:
        u = stack[-1]
        succ = adjacency.successors(u)
        if position[u] < len(succ):
            v = succ[position[u]]
            position[u] += 1
            if disc[v] == 0:
                parent[v] = u
                state.discover(v)
                stack.append(v)
                if u == root:
                    root_children += 1
            elif v != parent[u]:
                low[u] = min(low[u], disc[v])
            continue

        stack.pop()
        p = parent[u]
        if p == _NO_PARENT:
            continue
        low[p] = min(low[p], low[u])
        if low[u] > disc[p]:
            state.bridges.append(CanonicalEdge(p, u, weights[(min(p, u), max(p, u))]))
        if p != root and low[u] >= disc[p]:
            state.is_articulation[p] = True

    if root_children > 1:
        state.is_articulation[root] = True


def find_bridges_and_articulation_points(
    adjacency: Adjacency,
    edges: Iterable[CanonicalEdge],
) -> tuple[tuple[CanonicalEdge, ...] | None, tuple[int, ...] | None]:
    """
    Return (bridges, articulation_points) from a single traversal of every component.

    Bridges are canonical edges oriented parent -> child in DFS-finish order;
    articulation points are sorted node ids. Both are None for directed graphs.
    """
    if adjacency.directed:
        return (None, None)
    weights = {(min(e.source, e.target), max(e.source, e.target)): e.weight for e in edges}
    state = _LowLinkState.for_nodes(adjacency.node_count)
    for node in range(adjacency.node_count):
        if state.disc[node] == 0:
            _traverse_from(node, adjacency, weights, state)
    points = tuple(n for n, flag in enumerate(state.is_articulation) if flag)
    return (tuple(state.bridges), points)
