"""Graph spec loading, discovery, and batch analysis."""

from edgewise.ingestion.pipeline import (
    DEFAULT_IGNORE_DIRS,
    SPEC_SUFFIXES,
    discover_spec_files,
    run_analysis_on_directory,
)
from edgewise.ingestion.spec_loader import MAX_NODES, load_graph_spec

__all__ = [
    "DEFAULT_IGNORE_DIRS",
    "MAX_NODES",
    "SPEC_SUFFIXES",
    "discover_spec_files",
    "load_graph_spec",
    "run_analysis_on_directory",
]
