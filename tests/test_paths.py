"""Tests for all-pairs distances: Floyd-Warshall, sentinels, negative-cycle propagation."""

import json
import math

import pytest

from edgewise.analysis import compute_distance_matrix
from edgewise.graph import (
    NEGATIVE_INFINITY,
    UNREACHABLE,
    ZERO,
    DistanceCell,
    RawEdge,
    build_adjacency,
    finite,
    normalize_edges,
)


def _distances(n, edges, *, directed, weighted):
    canonical = normalize_edges(n, directed, weighted, [RawEdge(*e) for e in edges])
    adj = build_adjacency(n, directed, weighted, canonical)
    return compute_distance_matrix(adj, canonical)


def test_cell_sentinels():
    assert ZERO.to_sentinel() == 0
    assert finite(2.5).to_sentinel() == 2.5
    assert UNREACHABLE.to_sentinel() == -1
    assert NEGATIVE_INFINITY.to_sentinel() == "-Infinity"


def test_cell_kind_and_value_must_agree():
    with pytest.raises(ValueError):
        DistanceCell("finite")
    with pytest.raises(ValueError):
        DistanceCell("unreachable", 3)


def test_finite_zero_is_not_zero_cell():
    """A zero-length path between distinct nodes is finite(0), not the diagonal ZERO."""
    assert finite(0) != ZERO
    assert finite(0).to_sentinel() == 0


def test_unweighted_directed_chain():
    d = _distances(3, [(0, 1), (1, 2)], directed=True, weighted=False)
    assert d[0] == (ZERO, finite(1), finite(2))
    assert d[1] == (UNREACHABLE, ZERO, finite(1))
    assert d[2] == (UNREACHABLE, UNREACHABLE, ZERO)


def test_weighted_undirected_shortcut_and_symmetry():
    d = _distances(3, [(0, 1, 4), (1, 2, 1), (0, 2, 10)], directed=False, weighted=True)
    assert d[0][2] == finite(5)
    for i in range(3):
        for j in range(3):
            assert d[i][j] == d[j][i]


def test_negative_edge_without_cycle():
    d = _distances(3, [(0, 1, 2), (1, 2, -1), (0, 2, 5)], directed=True, weighted=True)
    assert d[0][2] == finite(1)
    assert d[0][1] == finite(2)


def test_diagonal_is_zero_for_every_node():
    d = _distances(4, [(0, 1, 1), (1, 2, -3), (2, 1, 1), (3, 3, 5)], directed=True, weighted=True)
    for i in range(4):
        assert d[i][i] == ZERO


def test_negative_cycle_propagates_downstream():
    """Cycle 1 <-> 2 has total weight -2; everything reached through it is negative infinity."""
    edges = [(0, 1, 1), (1, 2, -3), (2, 1, 1), (2, 3, 2)]
    d = _distances(4, edges, directed=True, weighted=True)
    for i, j in [(0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 1), (2, 3)]:
        assert d[i][j] == NEGATIVE_INFINITY, (i, j)
    assert d[1][0] == UNREACHABLE
    assert d[3][0] == UNREACHABLE
    assert d[3][1] == UNREACHABLE


def test_pair_not_through_negative_cycle_stays_finite():
    """4 -> 3 does not pass through the cycle, even though 3 is downstream of it."""
    edges = [(0, 1, 1), (1, 2, -3), (2, 1, 1), (2, 3, 2), (4, 3, 7)]
    d = _distances(5, edges, directed=True, weighted=True)
    assert d[4][3] == finite(7)
    assert d[0][3] == NEGATIVE_INFINITY


def test_negative_cycle_unreachable_from_node_zero():
    d = _distances(3, [(1, 2, -1), (2, 1, -1)], directed=True, weighted=True)
    assert d[1][2] == NEGATIVE_INFINITY
    assert d[2][1] == NEGATIVE_INFINITY
    assert d[0][1] == UNREACHABLE
    assert d[1][0] == UNREACHABLE


def test_negative_self_loop_is_a_negative_cycle():
    d = _distances(2, [(0, 0, -1), (0, 1, 3)], directed=True, weighted=True)
    assert d[0][1] == NEGATIVE_INFINITY
    assert d[0][0] == ZERO
    assert d[1][0] == UNREACHABLE


def test_positive_self_loop_changes_nothing():
    d = _distances(2, [(0, 0, 4), (0, 1, 3)], directed=True, weighted=True)
    assert d[0] == (ZERO, finite(3))


def test_zero_weight_cycle_is_not_negative():
    d = _distances(2, [(0, 1, 0), (1, 0, 0)], directed=True, weighted=True)
    assert d[0][1] == finite(0)
    assert d[1][0] == finite(0)


def test_undirected_negative_edge_poisons_component():
    """An undirected negative edge is a negative cycle of length two."""
    d = _distances(4, [(0, 1, -1), (1, 2, 2)], directed=False, weighted=True)
    for i in range(3):
        for j in range(3):
            if i != j:
                assert d[i][j] == NEGATIVE_INFINITY
    assert d[0][3] == UNREACHABLE
    assert d[3][3] == ZERO


def test_empty_graph():
    assert _distances(0, [], directed=True, weighted=False) == ()


def test_finite_cell_rejects_infinite_values():
    with pytest.raises(ValueError):
        DistanceCell("finite", math.inf)
    with pytest.raises(ValueError):
        DistanceCell("finite", -math.inf)
    with pytest.raises(ValueError):
        DistanceCell("finite", math.nan)


def test_overflowing_path_is_not_reported_unreachable():
    """A path whose length exceeds the float range is an overflow, never a missing path."""
    with pytest.raises(OverflowError):
        _distances(3, [(0, 1, 1e308), (1, 2, 1e308)], directed=True, weighted=True)


def test_large_weights_below_overflow_stay_finite():
    d = _distances(3, [(0, 1, 8e307), (1, 2, 8e307)], directed=True, weighted=True)
    assert d[0][2] == finite(8e307 * 2)
    assert d[2][0] == UNREACHABLE


def test_negative_cycle_overflowing_to_minus_inf_is_negative_infinity():
    d = _distances(3, [(0, 1, -1e308), (1, 0, -1e308), (1, 2, 1)], directed=True, weighted=True)
    assert d[0][1] == NEGATIVE_INFINITY
    assert d[1][0] == NEGATIVE_INFINITY
    assert d[0][2] == NEGATIVE_INFINITY
    assert d[1][2] == NEGATIVE_INFINITY
    assert d[2][0] == UNREACHABLE
    sentinels = [[cell.to_sentinel() for cell in row] for row in d]
    json.dumps(sentinels, allow_nan=False)
