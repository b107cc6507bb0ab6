"""Edgewise: structural and algorithmic analysis of finite graphs."""

from edgewise.analysis import GraphAnalyzer, analyze
from edgewise.errors import OutOfRangeError, ValidationError
from edgewise.graph import (
    CanonicalEdge,
    DistanceCell,
    GraphReport,
    GraphSpec,
    RawEdge,
    build_graph_spec,
    graph_report_to_dict,
)

__all__ = [
    "CanonicalEdge",
    "DistanceCell",
    "GraphAnalyzer",
    "GraphReport",
    "GraphSpec",
    "OutOfRangeError",
    "RawEdge",
    "ValidationError",
    "analyze",
    "build_graph_spec",
    "graph_report_to_dict",
]
