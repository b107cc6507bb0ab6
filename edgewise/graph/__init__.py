"""Graph specs, normalized edges, adjacency views and analysis reports."""

from edgewise.graph.adjacency import Adjacency, build_adjacency, build_adjacency_matrix
from edgewise.graph.distance import (
    NEGATIVE_INFINITY,
    NEGATIVE_INFINITY_SENTINEL,
    UNREACHABLE,
    UNREACHABLE_SENTINEL,
    ZERO,
    DistanceCell,
    finite,
)
from edgewise.graph.edges import CanonicalEdge, RawEdge, edge_to_dict
from edgewise.graph.normalizer import normalize_edges
from edgewise.graph.report import GraphReport, graph_report_to_dict
from edgewise.graph.spec import GraphSpec, build_graph_spec, validate_graph_spec

__all__ = [
    "Adjacency",
    "CanonicalEdge",
    "DistanceCell",
    "GraphReport",
    "GraphSpec",
    "NEGATIVE_INFINITY",
    "NEGATIVE_INFINITY_SENTINEL",
    "RawEdge",
    "UNREACHABLE",
    "UNREACHABLE_SENTINEL",
    "ZERO",
    "build_adjacency",
    "build_adjacency_matrix",
    "build_graph_spec",
    "edge_to_dict",
    "finite",
    "graph_report_to_dict",
    "normalize_edges",
    "validate_graph_spec",
]
