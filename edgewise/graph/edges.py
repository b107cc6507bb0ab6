"""Edge types for graph specs and normalized graphs."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RawEdge:
    """An edge as supplied by the caller; weight may be omitted for unweighted graphs."""

    source: int
    target: int
    weight: float | None = None


@dataclass(frozen=True)
class CanonicalEdge:
    """A deduplicated edge: one per ordered pair (directed) or unordered pair (undirected)."""

    source: int
    target: int
    weight: float = 1


def edge_to_dict(edge: CanonicalEdge) -> dict:
    """JSON-serializable form using the from/to/weight keys of the report contract."""
    return {"from": edge.source, "to": edge.target, "weight": edge.weight}
