from __future__ import annotations

import math
from typing import Dict, List, Mapping, Sequence, Union

import numpy as np

from wgraph.config import ENGINE_CONFIG
from wgraph.exceptions import AsymmetricGraphError
from wgraph.lib.algorithms.base import INF, Cost, WeightedEdge
from wgraph.lib.disjoint_set import DisjointSet
from wgraph.lib.graph import Edge, Graph, GraphType
from wgraph.lib.util import collect_edges
from wgraph.logging import get_logger

logger = get_logger(__name__)

#: Square matrix of weights; INF (or None in nested sequences) means "no edge".
AdjacencyMatrix = Union[np.ndarray, Sequence[Sequence[Cost]]]

#: One {neighbor_index: weight} mapping per vertex.
AdjacencyList = Sequence[Mapping[int, Cost]]


def _select_forest_edges(
    vertex_count: int, edges: Sequence[WeightedEdge]
) -> List[int]:
    disjoint_set: DisjointSet[int] = DisjointSet()
    nodes = [disjoint_set.make_set(idx) for idx in range(vertex_count)]

    selected: List[int] = []
    for pos in sorted(range(len(edges)), key=lambda p: edges[p].weight):
        if len(selected) == vertex_count - 1:
            break
        src, dst, _ = edges[pos]
        if disjoint_set.union(nodes[src], nodes[dst]):
            selected.append(pos)

    logger.debug(
        "Kruskal selected %d of %d edges; %d component(s)",
        len(selected),
        len(edges),
        disjoint_set.set_count,
    )
    return selected


def minimum_spanning_forest_edges(
    vertex_count: int, edges: Sequence[WeightedEdge]
) -> List[WeightedEdge]:
    """
    Select the edges of a minimum spanning forest with Kruskal's algorithm.

    Edges are taken in ascending weight order (stable, so equal weights keep
    their input order) and accepted whenever they join two different
    components. A disconnected input yields one tree per component.

    Args:
        vertex_count: Number of vertices, indexed 0..vertex_count - 1.
        edges: Undirected edges as (u, v, weight). Listing both (u, v) and
            (v, u) is harmless: the second one is rejected as a cycle.

    Returns:
        The accepted edges, in the order they were accepted.
    """
    edges = [WeightedEdge(*edge) for edge in edges]
    return [edges[pos] for pos in _select_forest_edges(vertex_count, edges)]


def _as_matrix(matrix: AdjacencyMatrix) -> np.ndarray:
    if isinstance(matrix, np.ndarray):
        array = matrix.astype(float)
    else:
        for idx, row in enumerate(matrix):
            if len(row) != len(matrix):
                raise AsymmetricGraphError(
                    f"Adjacency matrix must be square: row {idx} has {len(row)} "
                    f"entries, expected {len(matrix)}."
                )
        array = np.array(
            [[INF if w is None else w for w in row] for row in matrix], dtype=float
        )
    if array.size == 0:
        return array.reshape(0, 0)
    if array.ndim != 2 or array.shape[0] != array.shape[1]:
        raise AsymmetricGraphError(
            f"Adjacency matrix must be square, got shape {array.shape}."
        )
    return array


def _validate_matrix(matrix: np.ndarray) -> None:
    size = matrix.shape[0]
    for i in range(size - 1):
        for j in range(i + 1, size):
            if not ENGINE_CONFIG.is_symmetric_pair(matrix[i, j], matrix[j, i]):
                raise AsymmetricGraphError(
                    f"Adjacency matrix must be symmetric: "
                    f"w({i}, {j})={matrix[i, j]} but w({j}, {i})={matrix[j, i]}."
                )


def _validate_adjacency_list(adjacency: AdjacencyList) -> None:
    size = len(adjacency)
    for i, neighbors in enumerate(adjacency):
        for j, weight in neighbors.items():
            if not 0 <= j < size:
                raise AsymmetricGraphError(
                    f"Vertex {i} lists neighbor {j} outside [0, {size})."
                )
            if i not in adjacency[j]:
                raise AsymmetricGraphError(
                    f"Adjacency list must be undirected: {i}->{j} has no {j}->{i}."
                )
            if not ENGINE_CONFIG.is_symmetric_pair(weight, adjacency[j][i]):
                raise AsymmetricGraphError(
                    f"Adjacency list must be undirected: w({i}, {j})={weight} "
                    f"but w({j}, {i})={adjacency[j][i]}."
                )


def kruskal_matrix(matrix: AdjacencyMatrix) -> np.ndarray:
    """
    Compute a minimum spanning forest of a symmetric adjacency matrix.

    Only the upper triangle is read for edges; INF entries (and None in
    nested sequences) mean "no edge" and the diagonal is ignored.

    Args:
        matrix: N x N weight matrix, as nested sequences or a numpy array.

    Returns:
        A new N x N float array holding only the forest edges, written in both
        directions; every other entry, the diagonal included, is INF.

    Raises:
        AsymmetricGraphError: If the matrix is not square or not symmetric
            within ENGINE_CONFIG.symmetry_tolerance.
    """
    array = _as_matrix(matrix)
    _validate_matrix(array)

    size = array.shape[0]
    edges = [
        WeightedEdge(i, j, array[i, j])
        for i in range(size - 1)
        for j in range(i + 1, size)
        if math.isfinite(array[i, j])
    ]

    forest = np.full((size, size), INF, dtype=float)
    for u, v, weight in minimum_spanning_forest_edges(size, edges):
        forest[u, v] = weight
        forest[v, u] = weight
    return forest


def kruskal_adjacency_list(adjacency: AdjacencyList) -> List[Dict[int, Cost]]:
    """
    Compute a minimum spanning forest of a symmetric adjacency list.

    Args:
        adjacency: adjacency[i] maps each neighbor index j to the weight of
            the edge between i and j.

    Returns:
        A new adjacency list with the same number of vertices holding only
        the forest edges, listed under both endpoints.

    Raises:
        AsymmetricGraphError: If some i->j entry has no matching j->i entry
            with the same weight, or names a vertex out of range.
    """
    _validate_adjacency_list(adjacency)

    size = len(adjacency)
    edges = [
        WeightedEdge(i, j, weight)
        for i, neighbors in enumerate(adjacency)
        for j, weight in neighbors.items()
    ]

    forest: List[Dict[int, Cost]] = [{} for _ in range(size)]
    for u, v, _ in minimum_spanning_forest_edges(size, edges):
        weight = adjacency[u][v]
        forest[u][v] = weight
        forest[v][u] = weight
    return forest


def minimum_spanning_forest(
    graph: Union[AdjacencyMatrix, AdjacencyList],
) -> Union[np.ndarray, List[Dict[int, Cost]]]:
    """
    Compute a minimum spanning forest, keeping the input representation.

    A non-empty sequence of mappings is treated as an adjacency list and
    anything else as an adjacency matrix. See kruskal_matrix and
    kruskal_adjacency_list.

    Raises:
        AsymmetricGraphError: If the input is not a symmetric weighted graph.
    """
    if (
        not isinstance(graph, np.ndarray)
        and len(graph) > 0
        and all(isinstance(row, Mapping) for row in graph)
    ):
        return kruskal_adjacency_list(graph)  # type: ignore[arg-type]
    return kruskal_matrix(graph)  # type: ignore[arg-type]


def graph_minimum_spanning_forest(graph: Graph) -> List[Edge]:
    """
    Compute a minimum spanning forest over a Graph's wired edges.

    An edge and its reciprocal are both offered to the algorithm; whichever
    comes first in vertex order is the one returned.

    Args:
        graph: An UNDIRECTED graph.

    Returns:
        The selected Edge objects in acceptance order.

    Raises:
        AsymmetricGraphError: If graph is DIRECTED.
    """
    if graph.graph_type != GraphType.UNDIRECTED:
        raise AsymmetricGraphError(
            "Minimum spanning forest requires an UNDIRECTED graph."
        )
    vertices, weighted_edges, edge_refs = collect_edges(graph)
    return [
        edge_refs[pos] for pos in _select_forest_edges(len(vertices), weighted_edges)
    ]
