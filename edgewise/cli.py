"""
Edgewise CLI: analyze graph spec files and print their reports as JSON.

Exit codes: 0 when every spec was analyzed, 1 when a spec was skipped or the
output could not be written, 130 on Ctrl-C.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from edgewise.ingestion import run_analysis_on_directory

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="edgewise",
        description="Edgewise: structural analysis of graph specs (YAML/JSON)",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    analyze_parser = subparsers.add_parser("analyze", help="Analyze graph specs")
    analyze_parser.add_argument("path", type=Path, help="A spec file or a directory of spec files")
    analyze_parser.add_argument(
        "--output",
        type=Path,
        help="Write the JSON report here instead of stdout",
    )
    analyze_parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Run the analyses of each graph on this many threads",
    )
    analyze_parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug messages to stderr",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse arguments and dispatch; returns the process exit code."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command != "analyze":
        parser.print_help()
        return EXIT_FAILURE

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    try:
        return _analyze(args.path, args.output, args.workers)
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return EXIT_INTERRUPTED


def _analyze(path: Path, output: Path | None, workers: int | None) -> int:
    """
    Analyze everything under path and emit the reports.

    Bad spec files never abort the run: the pipeline turns them into warnings,
    which are echoed to stderr and make the exit code non-zero.
    """
    if not path.exists():
        print(f"Error: Path does not exist: {path}", file=sys.stderr)
        return EXIT_FAILURE

    results, warnings = run_analysis_on_directory(path, max_workers=workers)
    report = json.dumps(results, indent=2, sort_keys=True)

    if output is None:
        print(report)
    else:
        try:
            output.write_text(report, encoding="utf-8")
        except OSError as e:
            print(f"Error: Could not write {output}: {e.strerror or e}", file=sys.stderr)
            return EXIT_FAILURE

    for warning in warnings:
        print(f"Warning: {warning}", file=sys.stderr)
    return EXIT_FAILURE if warnings else EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
