"""
GraphAnalyzer: validate, normalize, build adjacency, run the analyses, assemble a GraphReport.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable

from edgewise.graph.adjacency import build_adjacency, build_adjacency_matrix
from edgewise.graph.normalizer import normalize_edges
from edgewise.graph.report import GraphReport
from edgewise.graph.spec import GraphSpec, validate_graph_spec

from edgewise.analysis.connectivity import find_bridges_and_articulation_points
from edgewise.analysis.cycles import has_cycle, has_negative_cycle
from edgewise.analysis.order import topological_sort
from edgewise.analysis.paths import compute_distance_matrix
from edgewise.analysis.spanning_tree import kruskal_spanning_tree

logger = logging.getLogger(__name__)


class GraphAnalyzer:
    """
    Run every analysis on a GraphSpec and return one GraphReport.

    Parameters
    ----------
    max_workers:
        When greater than 1, the independent analyses run on a thread pool of that
        size and are joined before the report is assembled. Otherwise they run in turn.
    """

    def __init__(self, max_workers: int | None = None) -> None:
        self.max_workers = max_workers

    def analyze(self, spec: GraphSpec) -> GraphReport:
        """
        Build a GraphReport from a GraphSpec.

        Raises:
            ValidationError: spec is malformed; nothing is computed.
        """
        validate_graph_spec(spec)
        edges = normalize_edges(spec.node_count, spec.directed, spec.weighted, spec.raw_edges)
        adjacency = build_adjacency(spec.node_count, spec.directed, spec.weighted, edges)
        matrix = build_adjacency_matrix(spec.node_count, spec.directed, spec.weighted, edges)
        logger.debug(
            "Analyzing graph: %d nodes, %d raw edges, %d canonical edges, directed=%s, weighted=%s",
            spec.node_count,
            len(spec.raw_edges),
            len(edges),
            spec.directed,
            spec.weighted,
        )

        tasks: dict[str, Callable[[], Any]] = {
            "distance_matrix": lambda: compute_distance_matrix(adjacency, edges),
            "has_cycle": lambda: has_cycle(adjacency),
            "has_negative_cycle": lambda: has_negative_cycle(
                spec.node_count, spec.directed, spec.weighted, edges
            ),
            "topological_order": lambda: topological_sort(adjacency),
            "spanning_tree": lambda: (
                kruskal_spanning_tree(spec.node_count, edges) if spec.weighted else None
            ),
            "connectivity": lambda: find_bridges_and_articulation_points(adjacency, edges),
        }
        results = self._run(tasks)

        cyclic = results["has_cycle"]
        topo = results["topological_order"] if spec.directed and not cyclic else None
        bridges, articulation_points = results["connectivity"]

        return GraphReport(
            spec=spec,
            edges=edges,
            adjacency_matrix=matrix,
            adjacency_list=adjacency.neighbors,
            distance_matrix=results["distance_matrix"],
            has_cycle=cyclic,
            has_negative_cycle=results["has_negative_cycle"],
            topological_order=topo,
            spanning_tree=results["spanning_tree"],
            bridges=bridges,
            articulation_points=articulation_points,
        )

    def _run(self, tasks: dict[str, Callable[[], Any]]) -> dict[str, Any]:
        if not self.max_workers or self.max_workers <= 1:
            return {name: task() for name, task in tasks.items()}
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = {name: executor.submit(task) for name, task in tasks.items()}
            return {name: future.result() for name, future in futures.items()}


def analyze(spec: GraphSpec, *, max_workers: int | None = None) -> GraphReport:
    """Convenience: run GraphAnalyzer(max_workers=...).analyze(spec)."""
    return GraphAnalyzer(max_workers=max_workers).analyze(spec)
