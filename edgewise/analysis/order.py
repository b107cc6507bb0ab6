"""
Topological order of a directed acyclic graph (Kahn's algorithm).
"""

from __future__ import annotations

from collections import deque

from edgewise.graph.adjacency import Adjacency


def topological_sort(adjacency: Adjacency) -> tuple[int, ...] | None:
    """
    Kahn's algorithm with zero in-degree nodes seeded in id order.
    Returns None for undirected graphs and when a cycle leaves nodes unordered.
    """
    if not adjacency.directed:
        return None
    n = adjacency.node_count
    in_degree = [0] * n
    for node in range(n):
        for succ in adjacency.successors(node):
            in_degree[succ] += 1

    q: deque[int] = deque(node for node in range(n) if in_degree[node] == 0)
    order: list[int] = []
    while q:
        node = q.popleft()
        order.append(node)
        for succ in adjacency.successors(node):
            in_degree[succ] -= 1
            if in_degree[succ] == 0:
                q.append(succ)

    if len(order) != n:
        return None
    return tuple(order)
