"""Text readers for the command-line harness."""

from __future__ import annotations

import math
from typing import Any, Dict, List, Optional, Tuple, Union

import yaml

from wgraph.lib.algorithms.base import INF, WeightedEdge
from wgraph.logging import get_logger

logger = get_logger(__name__)

_NO_EDGE_TOKENS = {"inf", "+inf", "infinity", "none", "-"}


def read_edge_list(text: str) -> Tuple[int, List[WeightedEdge]]:
    """
    Parse the edge-list harness format.

    The text holds whitespace-separated integers: the vertex count V, the edge
    count E, then E triples "src dst weight".

    Args:
        text: Input text.

    Returns:
        A tuple of (vertex_count, edges).

    Raises:
        ValueError: If a token is not an integer, the header is missing, or
            fewer than E triples follow it.
    """
    tokens = text.split()
    if len(tokens) < 2:
        raise ValueError("Expected vertex and edge counts.")
    try:
        numbers = [int(token) for token in tokens]
    except ValueError as exc:
        raise ValueError(f"Edge list must contain integers only: {exc}") from exc

    vertex_count, edge_count = numbers[0], numbers[1]
    if vertex_count < 0 or edge_count < 0:
        raise ValueError("Vertex and edge counts must be non-negative.")
    body = numbers[2:]
    if len(body) < 3 * edge_count:
        raise ValueError(
            f"Expected {edge_count} edges but found {len(body) // 3} complete triples."
        )

    edges = [
        WeightedEdge(body[i], body[i + 1], body[i + 2])
        for i in range(0, 3 * edge_count, 3)
    ]
    if len(body) > 3 * edge_count:
        logger.debug(
            "Ignoring %d token(s) after the last edge", len(body) - 3 * edge_count
        )
    return vertex_count, edges


def _parse_weight(value: Any) -> float:
    if value is None:
        return INF
    if isinstance(value, str):
        if value.strip().lower() in _NO_EDGE_TOKENS:
            return INF
        return float(value)
    if isinstance(value, bool):
        raise ValueError(f"Invalid edge weight: {value!r}")
    return float(value)


def _as_number(weight: float) -> Union[int, float]:
    if math.isfinite(weight) and weight.is_integer():
        return int(weight)
    return weight


def load_adjacency(
    text: str,
) -> Union[List[List[float]], List[Dict[int, Union[int, float]]]]:
    """
    Load a weighted graph from a YAML document.

    Two layouts are accepted::

        matrix:            # N rows of N weights; null, .inf or "inf" = no edge
          - [null, 1, 3]
          - [1, null, 2]
          - [3, 2, null]

        adjacency:         # one {neighbor: weight} mapping per vertex; null = absent
          - {1: 1, 2: 3}
          - {0: 1, 2: 2}
          - {0: 3, 1: 2}

    Returns:
        A matrix (list of float rows) or an adjacency list.

    Raises:
        ValueError: If the document has neither key or malformed entries.
    """
    data = yaml.safe_load(text)
    if not isinstance(data, dict):
        raise ValueError("Adjacency document must be a mapping.")

    if "matrix" in data:
        rows = data["matrix"] or []
        if not isinstance(rows, list) or not all(isinstance(r, list) for r in rows):
            raise ValueError("'matrix' must be a list of rows.")
        return [[_parse_weight(w) for w in row] for row in rows]

    if "adjacency" in data:
        entries = data["adjacency"] or []
        if not isinstance(entries, list):
            raise ValueError("'adjacency' must be a list of mappings.")
        adjacency: List[Dict[int, Union[int, float]]] = []
        for idx, entry in enumerate(entries):
            entry = entry or {}
            if not isinstance(entry, dict):
                raise ValueError(f"Adjacency entry {idx} must be a mapping.")
            # null or inf means no edge, same as leaving the neighbor out
            weights = {int(nbr): _parse_weight(w) for nbr, w in entry.items()}
            adjacency.append(
                {nbr: _as_number(w) for nbr, w in weights.items() if not math.isinf(w)}
            )
        return adjacency

    raise ValueError("Adjacency document needs a 'matrix' or 'adjacency' key.")


def format_weight(weight: Optional[float]) -> str:
    """Return an integral weight without a trailing '.0'; 'inf' for no edge."""
    if weight is None or math.isinf(weight):
        return "inf"
    return str(_as_number(float(weight)))
