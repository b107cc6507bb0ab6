"""
GraphReport: the immutable result of one analysis, and its deterministic JSON form.
"""

from __future__ import annotations

from dataclasses import dataclass

from edgewise.graph.distance import DistanceCell
from edgewise.graph.edges import CanonicalEdge, edge_to_dict
from edgewise.graph.spec import GraphSpec

REPORT_SCHEMA_VERSION = "1.0"


@dataclass(frozen=True)
class GraphReport:
    """
    Everything computed for one GraphSpec.

    Optional fields are None when the analysis does not apply: topological_order for
    undirected or cyclic graphs, spanning_tree for unweighted or disconnected graphs,
    bridges and articulation_points for directed graphs.
    """

    spec: GraphSpec
    edges: tuple[CanonicalEdge, ...]
    adjacency_matrix: tuple[tuple[float, ...], ...]
    adjacency_list: tuple[tuple[int, ...], ...]
    distance_matrix: tuple[tuple[DistanceCell, ...], ...]
    has_cycle: bool
    has_negative_cycle: bool
    topological_order: tuple[int, ...] | None
    spanning_tree: tuple[CanonicalEdge, ...] | None
    bridges: tuple[CanonicalEdge, ...] | None
    articulation_points: tuple[int, ...] | None  # sorted, distinct

    @property
    def spanning_tree_weight(self) -> float | None:
        if self.spanning_tree is None:
            return None
        return sum(e.weight for e in self.spanning_tree)


def _edges_or_none(edges: tuple[CanonicalEdge, ...] | None) -> list[dict] | None:
    if edges is None:
        return None
    return [edge_to_dict(e) for e in edges]


def graph_report_to_dict(report: GraphReport) -> dict:
    """
    Return a JSON-serializable dict with deterministic ordering.
    Keys follow the rendering contract (adjacencyMatrix, distanceMatrix, ...); absent
    results are None; distances use -1 for unreachable and "-Infinity" for negative infinity.
    """
    spec = report.spec
    topo = report.topological_order
    points = report.articulation_points
    return {
        "schema_version": REPORT_SCHEMA_VERSION,
        "nodes": spec.node_count,
        "directed": spec.directed,
        "weighted": spec.weighted,
        "edges": [edge_to_dict(e) for e in report.edges],
        "adjacencyMatrix": [list(row) for row in report.adjacency_matrix],
        "adjacencyList": [list(row) for row in report.adjacency_list],
        "distanceMatrix": [
            [cell.to_sentinel() for cell in row] for row in report.distance_matrix
        ],
        "hasCycle": report.has_cycle,
        "hasNegativeCycle": report.has_negative_cycle,
        "topologicalOrder": list(topo) if topo is not None else None,
        "spanningTree": _edges_or_none(report.spanning_tree),
        "spanningTreeWeight": report.spanning_tree_weight,
        "bridges": _edges_or_none(report.bridges),
        "articulationPoints": list(points) if points is not None else None,
    }
