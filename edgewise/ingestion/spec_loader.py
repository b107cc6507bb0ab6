"""
Graph spec loader: supports YAML/JSON files, dicts, and GraphSpec instances.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from edgewise.errors import ValidationError
from edgewise.graph.edges import RawEdge
from edgewise.graph.spec import GraphSpec

logger = logging.getLogger(__name__)

# Largest node count the input form accepts.
MAX_NODES = 200_000


def load_graph_spec(source: GraphSpec | str | Path | dict) -> GraphSpec:
    """
    Load a GraphSpec from various sources.

    Args:
        source: Can be:
            - GraphSpec instance: returned as-is
            - str or Path: treated as a YAML or JSON file path
            - dict: constructed directly from dict keys

    Returns:
        GraphSpec instance (not yet validated against its node range; see validate_graph_spec)

    Raises:
        FileNotFoundError: If source is a file path that doesn't exist
        ValidationError: If the document is unparsable, empty, or has missing or mistyped fields
        TypeError: If source is of an unsupported type
    """
    if isinstance(source, GraphSpec):
        return source

    if isinstance(source, (str, Path)):
        return _load_from_file(source)

    if isinstance(source, dict):
        return _load_from_dict(source)

    raise TypeError(
        f"Unsupported source type for load_graph_spec: {type(source).__name__}"
    )


def _load_from_file(path: str | Path) -> GraphSpec:
    """Load a GraphSpec from a YAML file; JSON documents parse as YAML too."""
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"Graph spec file not found: {file_path}")

    try:
        data = yaml.safe_load(file_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValidationError(f"Failed to parse {file_path}: {e}") from e

    if data is None:
        raise ValidationError(f"Graph spec file {file_path} is empty")
    if not isinstance(data, dict):
        raise ValidationError(
            f"Graph spec file {file_path}: expected a mapping, got {type(data).__name__}"
        )
    logger.debug("Loaded graph spec document from %s", file_path)
    return _load_from_dict(data)


def _load_edge(index: int, item: object) -> RawEdge:
    """One edge from [from, to], [from, to, weight] or {from, to, weight}."""
    if isinstance(item, dict):
        if "from" not in item or "to" not in item:
            raise ValidationError(f"Edge {index}: 'from' and 'to' are required")
        return RawEdge(item["from"], item["to"], item.get("weight"))
    if isinstance(item, (list, tuple)) and len(item) in (2, 3):
        return RawEdge(*item)
    raise ValidationError(
        f"Edge {index}: expected [from, to], [from, to, weight] or a mapping, got {item!r}"
    )


def _load_bool(data: dict, key: str) -> bool:
    value = data.get(key, False)
    if not isinstance(value, bool):
        raise ValidationError(f"Graph spec '{key}' must be a boolean, got {type(value).__name__}")
    return value


def _load_from_dict(data: dict) -> GraphSpec:
    """
    Construct a GraphSpec from a dict.

    Args:
        data: Dict with 'nodes' (required), 'directed', 'weighted' (default False)
            and 'edges' (default empty)

    Raises:
        ValidationError: If required fields are missing or have invalid types
    """
    nodes = data.get("nodes")
    if nodes is None:
        raise ValidationError("Graph spec 'nodes' is required")
    if not isinstance(nodes, int) or isinstance(nodes, bool):
        raise ValidationError(f"Graph spec 'nodes' must be an integer, got {type(nodes).__name__}")
    if nodes > MAX_NODES:
        raise ValidationError(f"Graph spec 'nodes' must be <= {MAX_NODES}, got {nodes}")

    directed = _load_bool(data, "directed")
    weighted = _load_bool(data, "weighted")

    edges = data.get("edges", [])
    if edges is None:
        edges = []
    if not isinstance(edges, list):
        raise ValidationError(f"Graph spec 'edges' must be a list, got {type(edges).__name__}")

    return GraphSpec(
        node_count=nodes,
        directed=directed,
        weighted=weighted,
        raw_edges=tuple(_load_edge(i, item) for i, item in enumerate(edges)),
    )
