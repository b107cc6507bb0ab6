"""
Cycle detection: three-color DFS (directed), parent-tracking DFS (undirected), and
Bellman-Ford negative-cycle detection for weighted directed graphs.

Traversals keep their frames on an explicit list so deep graphs never hit the
interpreter's recursion limit.
"""

from __future__ import annotations

from typing import Iterable

from edgewise.graph.adjacency import Adjacency
from edgewise.graph.edges import CanonicalEdge

WHITE = 0
GRAY = 1
BLACK = 2

_NO_PARENT = -1


def _has_cycle_directed(adjacency: Adjacency) -> bool:
    """A cycle exists iff the DFS meets an edge back to a gray (on-stack) node."""
    n = adjacency.node_count
    color = [WHITE] * n
    position = [0] * n

    for root in range(n):
        if color[root] != WHITE:
            continue
        color[root] = GRAY
        stack = [root]
        while stack:
            node = stack[-1]
            succ = adjacency.successors(node)
            if position[node] < len(succ):
                nxt = succ[position[node]]
                position[node] += 1
                if color[nxt] == GRAY:
                    return True
                if color[nxt] == WHITE:
                    color[nxt] = GRAY
                    stack.append(nxt)
            else:
                color[node] = BLACK
                stack.pop()
    return False


def _has_cycle_undirected(adjacency: Adjacency) -> bool:
    """A cycle exists iff the DFS meets a visited neighbor that is not the current node's parent."""
    n = adjacency.node_count
    visited = [False] * n
    parent = [_NO_PARENT] * n
    position = [0] * n

    for root in range(n):
        if visited[root]:
            continue
        visited[root] = True
        stack = [root]
        while stack:
            node = stack[-1]
            succ = adjacency.successors(node)
            if position[node] < len(succ):
                nxt = succ[position[node]]
                position[node] += 1
                if not visited[nxt]:
                    visited[nxt] = True
                    parent[nxt] = node
                    stack.append(nxt)
                elif nxt != parent[node]:
                    return True
            else:
                stack.pop()
    return False


def has_cycle(adjacency: Adjacency) -> bool:
    """True if the graph has any cycle; visits every component and stops at the first one found."""
    if adjacency.directed:
        return _has_cycle_directed(adjacency)
    return _has_cycle_undirected(adjacency)


def has_negative_cycle(
    node_count: int,
    directed: bool,
    weighted: bool,
    edges: Iterable[CanonicalEdge],
) -> bool:
    """
    Bellman-Ford check for weighted directed graphs; False for any other kind of graph.
    Every node starts at distance 0, so a negative cycle is found wherever it lies,
    not only when it is reachable from node 0.
    """
    if not weighted or not directed:
        return False
    edge_list = list(edges)
    dist = [0.0] * node_count

    for _ in range(node_count - 1):
        improved = False
        for e in edge_list:
            if dist[e.source] + e.weight < dist[e.target]:
                dist[e.target] = dist[e.source] + e.weight
                improved = True
        if not improved:
            return False

    for e in edge_list:
        if dist[e.source] + e.weight < dist[e.target]:
            return True
    return False
