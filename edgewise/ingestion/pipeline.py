"""
Safe pipeline runner: discover spec files, load, analyze, serialize.
Never raises for invalid or unreadable files; collects warnings.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable

from edgewise.analysis import GraphAnalyzer
from edgewise.errors import ValidationError
from edgewise.graph.report import graph_report_to_dict
from edgewise.ingestion.spec_loader import load_graph_spec

logger = logging.getLogger(__name__)

SPEC_SUFFIXES: tuple[str, ...] = (".yaml", ".yml", ".json")

# Tool and environment directories that never hold graph specs worth analyzing.
DEFAULT_IGNORE_DIRS: tuple[str, ...] = (
    ".git",
    ".venv",
    "venv",
    "__pycache__",
    "node_modules",
)


def discover_spec_files(
    root_path: Path | str,
    *,
    ignore_dirs: Iterable[str] | None = None,
) -> list[Path]:
    """
    Graph spec files (.yaml, .yml, .json) under root_path, sorted by path.

    Ignored directories are pruned before they are entered. Symlinked files and
    directories are skipped. A root that is not a directory yields [].
    """
    root = Path(root_path).resolve()
    if not root.is_dir():
        return []
    pruned = frozenset(DEFAULT_IGNORE_DIRS if ignore_dirs is None else ignore_dirs)

    found: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = [d for d in dirnames if d not in pruned]
        here = Path(dirpath)
        found.extend(
            here / name
            for name in filenames
            if Path(name).suffix.lower() in SPEC_SUFFIXES and not (here / name).is_symlink()
        )
    return sorted(found)


def run_analysis_on_directory(
    root_path: Path | str,
    *,
    max_workers: int | None = None,
) -> tuple[list[dict], list[str]]:
    """
    Analyze every graph spec under a directory (or a single spec file) and serialize
    each report to a dict. Unreadable or invalid files are skipped with a warning.

    Args:
        root_path: Directory to scan, or path to one spec file
        max_workers: Passed to GraphAnalyzer; >1 runs the analyses of each graph on a thread pool

    Returns:
        (list of report dicts, each with a "source" key holding the path relative to the
        root, list of warning strings).
    """
    root = Path(root_path).resolve()
    if root.is_file():
        paths = [root]
        root = root.parent
    else:
        paths = discover_spec_files(root)
    logger.debug("Found %d spec file(s) under %s", len(paths), root)

    analyzer = GraphAnalyzer(max_workers=max_workers)
    results: list[dict] = []
    warnings: list[str] = []

    for path in paths:
        source = str(path.relative_to(root))
        try:
            spec = load_graph_spec(path)
            report = analyzer.analyze(spec)
        except (OSError, UnicodeDecodeError):
            warnings.append(f"{source}: could not read")
            continue
        except ValidationError as e:
            warnings.append(f"{source}: {e}")
            continue

        result = graph_report_to_dict(report)
        result["source"] = source
        results.append(result)
        logger.debug("Analyzed %s", source)

    return (results, warnings)
