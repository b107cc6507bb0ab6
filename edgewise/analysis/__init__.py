"""Graph analyses: distances, cycles, ordering, spanning tree, connectivity, GraphAnalyzer."""

from edgewise.analysis.analyzer import GraphAnalyzer, analyze
from edgewise.analysis.connectivity import find_bridges_and_articulation_points
from edgewise.analysis.cycles import has_cycle, has_negative_cycle
from edgewise.analysis.order import topological_sort
from edgewise.analysis.paths import compute_distance_matrix
from edgewise.analysis.spanning_tree import UnionFind, kruskal_spanning_tree

__all__ = [
    "GraphAnalyzer",
    "UnionFind",
    "analyze",
    "compute_distance_matrix",
    "find_bridges_and_articulation_points",
    "has_cycle",
    "has_negative_cycle",
    "kruskal_spanning_tree",
    "topological_sort",
]
