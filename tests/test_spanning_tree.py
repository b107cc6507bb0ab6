"""Tests for Kruskal's spanning tree and the union-find structure."""

from edgewise.analysis import UnionFind, kruskal_spanning_tree
from edgewise.graph import CanonicalEdge


def test_union_find_merges_and_reports():
    uf = UnionFind(4)
    assert uf.union(0, 1) is True
    assert uf.union(1, 0) is False
    assert uf.connected(0, 1)
    assert not uf.connected(0, 2)
    assert uf.union(2, 3) is True
    assert uf.union(1, 3) is True
    assert uf.find(0) == uf.find(3)


def test_union_find_long_chain():
    n = 50_000
    uf = UnionFind(n)
    for i in range(n - 1):
        uf.union(i, i + 1)
    assert uf.connected(0, n - 1)


def test_four_node_example():
    edges = [
        CanonicalEdge(0, 1, 1),
        CanonicalEdge(1, 2, 2),
        CanonicalEdge(2, 3, 3),
        CanonicalEdge(0, 3, 10),
    ]
    tree = kruskal_spanning_tree(4, edges)
    assert tree is not None
    assert len(tree) == 3
    assert sum(e.weight for e in tree) == 6
    assert CanonicalEdge(0, 3, 10) not in tree


def test_disconnected_graph_has_no_tree():
    edges = [CanonicalEdge(0, 1, 1), CanonicalEdge(2, 3, 1)]
    assert kruskal_spanning_tree(4, edges) is None


def test_negative_weights_sort_first():
    edges = [
        CanonicalEdge(0, 1, 5),
        CanonicalEdge(1, 2, -2),
        CanonicalEdge(0, 2, 1),
    ]
    tree = kruskal_spanning_tree(3, edges)
    assert tree == (CanonicalEdge(1, 2, -2), CanonicalEdge(0, 2, 1))


def test_ties_keep_input_order():
    edges = [
        CanonicalEdge(0, 1, 1),
        CanonicalEdge(1, 2, 1),
        CanonicalEdge(0, 2, 1),
    ]
    tree = kruskal_spanning_tree(3, edges)
    assert tree == (CanonicalEdge(0, 1, 1), CanonicalEdge(1, 2, 1))


def test_self_loops_are_skipped():
    edges = [CanonicalEdge(0, 0, -5), CanonicalEdge(0, 1, 2)]
    assert kruskal_spanning_tree(2, edges) == (CanonicalEdge(0, 1, 2),)


def test_single_node_and_empty_graph():
    assert kruskal_spanning_tree(1, []) == ()
    assert kruskal_spanning_tree(0, []) == ()


def test_directed_edges_are_treated_as_undirected():
    edges = [CanonicalEdge(1, 0, 3), CanonicalEdge(2, 1, 4)]
    assert kruskal_spanning_tree(3, edges) == (CanonicalEdge(1, 0, 3), CanonicalEdge(2, 1, 4))
