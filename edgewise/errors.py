"""
Exceptions raised when a graph spec is rejected before analysis.
"""

from __future__ import annotations


class ValidationError(ValueError):
    """A graph spec is malformed; raised before any analysis runs."""


class OutOfRangeError(ValidationError):
    """An edge endpoint is not a node id in [0, node_count)."""

    def __init__(self, node: int, node_count: int) -> None:
        self.node = node
        self.node_count = node_count
        super().__init__(f"Node {node} is out of range [0, {node_count})")
