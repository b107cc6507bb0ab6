"""
Minimum spanning tree by Kruskal's algorithm over a union-find structure.
"""

from __future__ import annotations

from typing import Iterable

from edgewise.graph.edges import CanonicalEdge


class UnionFind:
    """Disjoint sets over node ids 0..size-1 with path compression and union by rank."""

    def __init__(self, size: int) -> None:
        self._parent = list(range(size))
        self._rank = [0] * size

    def find(self, x: int) -> int:
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the sets of x and y; False if they were already one set."""
        rx = self.find(x)
        ry = self.find(y)
        if rx == ry:
            return False
        if self._rank[rx] < self._rank[ry]:
            self._parent[rx] = ry
        elif self._rank[rx] > self._rank[ry]:
            self._parent[ry] = rx
        else:
            self._parent[ry] = rx
            self._rank[rx] += 1
        return True

    def connected(self, x: int, y: int) -> bool:
        return self.find(x) == self.find(y)


def kruskal_spanning_tree(
    node_count: int,
    edges: Iterable[CanonicalEdge],
) -> tuple[CanonicalEdge, ...] | None:
    """
    Minimum spanning tree edges in selection order, or None if the graph is disconnected.

    Edges are sorted by weight with a stable sort, so equal weights keep input order and
    negative weights come first. Edge direction is ignored.
    """
    needed = node_count - 1
    if needed <= 0:
        return ()
    uf = UnionFind(node_count)
    tree: list[CanonicalEdge] = []

    for e in sorted(edges, key=lambda e: e.weight):
        if uf.union(e.source, e.target):
            tree.append(e)
            if len(tree) == needed:
                break

    if len(tree) < needed:
        return None
    return tuple(tree)
