"""Command-line interface for wgraph."""

from __future__ import annotations

import argparse
import logging
import math
import sys
from pathlib import Path
from typing import List, Optional, TextIO

import numpy as np

from wgraph.config import ENGINE_CONFIG
from wgraph.exceptions import GraphError, NegativeCycleDetected
from wgraph.io import format_weight, load_adjacency, read_edge_list
from wgraph.lib.algorithms.base import WeightedEdge
from wgraph.lib.algorithms.bellman_ford import bellman_ford
from wgraph.lib.algorithms.kruskal import minimum_spanning_forest
from wgraph.logging import get_logger, set_global_log_level

logger = get_logger(__name__)


def _read_input(path: Optional[Path], stdin: TextIO) -> str:
    if path is None or str(path) == "-":
        return stdin.read()
    return path.read_text()


def _format_shortest_paths(
    vertex_count: int, edges: List[WeightedEdge], source: int
) -> List[str]:
    """Return the harness output lines for a Bellman-Ford run.

    The first vertex_count lines are "<vertex>: <distance>", followed by one
    line per vertex with the path from source as space-separated indices.
    Unreachable vertices show "inf" and an empty path line.
    """
    try:
        result = bellman_ford(vertex_count, edges, source)
    except NegativeCycleDetected:
        return ["Negative cycle detected"]

    lines = [
        f"{vertex}: {format_weight(distance)}"
        for vertex, distance in enumerate(result.distances)
    ]
    for vertex in range(vertex_count):
        if result.is_reachable(vertex):
            lines.append(" ".join(str(node) for node in result.path_to(vertex)))
        else:
            lines.append("")
    return lines


def _format_forest(graph: object) -> List[str]:
    """Return one "<u> - <v>: <weight>" line per forest edge plus the total."""
    forest = minimum_spanning_forest(graph)  # type: ignore[arg-type]
    if isinstance(forest, np.ndarray):
        size = forest.shape[0]
        edges = [
            (u, v, forest[u, v])
            for u in range(size - 1)
            for v in range(u + 1, size)
            if not math.isinf(forest[u, v])
        ]
    else:
        edges = [
            (u, v, weight)
            for u, neighbors in enumerate(forest)
            for v, weight in sorted(neighbors.items())
            if u < v
        ]

    lines = [f"{u} - {v}: {format_weight(weight)}" for u, v, weight in edges]
    total = sum(weight for _, _, weight in edges)
    lines.append(f"Total weight: {format_weight(total)}")
    return lines


def _run_shortest_paths(path: Optional[Path], source: int) -> None:
    text = _read_input(path, sys.stdin)
    vertex_count, edges = read_edge_list(text)
    logger.debug(
        "Read %d vertices and %d edges; source=%d", vertex_count, len(edges), source
    )
    for line in _format_shortest_paths(vertex_count, edges, source):
        print(line)


def _run_mst(path: Path) -> None:
    graph = load_adjacency(_read_input(path, sys.stdin))
    logger.debug("Loaded graph with %d vertices from %s", len(graph), path)
    for line in _format_forest(graph):
        print(line)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``wgraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="wgraph",
        description="Shortest paths and minimum spanning forests of weighted graphs.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{shortest-paths,mst}",
        help="Available commands",
    )

    sp_parser = subparsers.add_parser(
        "shortest-paths",
        help="Bellman-Ford distances and paths from an edge list",
        description=(
            "Read 'V E' followed by E triples 'src dst weight' and print the"
            " distance and path from the source to every vertex."
        ),
    )
    sp_parser.add_argument(
        "input",
        type=Path,
        nargs="?",
        default=None,
        help="Edge-list file (default: read standard input)",
    )
    sp_parser.add_argument(
        "--source",
        "-s",
        type=int,
        default=ENGINE_CONFIG.default_source,
        help="Source vertex index (default: %(default)s)",
    )

    mst_parser = subparsers.add_parser(
        "mst",
        help="Kruskal minimum spanning forest of a YAML adjacency file",
    )
    mst_parser.add_argument(
        "input", type=Path, help="YAML file with a 'matrix' or 'adjacency' key"
    )

    effective_args = sys.argv[1:] if argv is None else argv
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    try:
        if args.command == "shortest-paths":
            _run_shortest_paths(args.input, args.source)
        elif args.command == "mst":
            _run_mst(args.input)
    except FileNotFoundError as exc:
        logger.error(f"Input file not found: {exc.filename}")
        print(f"Error: input file not found: {exc.filename}", file=sys.stderr)
        sys.exit(1)
    except (GraphError, ValueError) as exc:
        logger.error(f"{type(exc).__name__}: {exc}")
        print(f"Error: {type(exc).__name__}: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
