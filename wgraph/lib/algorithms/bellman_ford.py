from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple, Union

from wgraph.config import ENGINE_CONFIG
from wgraph.exceptions import (
    InvalidEdgeError,
    InvalidSourceError,
    NegativeCycleDetected,
)
from wgraph.lib.algorithms.base import INF, Cost, WeightedEdge
from wgraph.lib.algorithms.types import ShortestPaths
from wgraph.lib.graph import CostPathPair, CostVertexPair, Graph, Vertex
from wgraph.lib.util import collect_edges, index_vertices
from wgraph.logging import get_logger

logger = get_logger(__name__)

EdgeLike = Union[WeightedEdge, Tuple[int, int, Cost]]


def _normalize_edges(
    vertex_count: int, edges: Iterable[EdgeLike]
) -> List[WeightedEdge]:
    normalized: List[WeightedEdge] = []
    for edge in edges:
        src, dst, weight = edge
        if not (0 <= src < vertex_count and 0 <= dst < vertex_count):
            raise InvalidEdgeError(
                f"Edge ({src}, {dst}) references a vertex outside [0, {vertex_count})."
            )
        normalized.append(WeightedEdge(src, dst, weight))
    return normalized


def bellman_ford(
    vertex_count: int,
    edges: Iterable[EdgeLike],
    source: int,
    early_exit: Optional[bool] = None,
) -> ShortestPaths:
    """
    Compute single-source shortest paths with the Bellman-Ford algorithm.

    Negative edge weights are allowed. Edges are relaxed vertex_count - 1 times;
    an edge (u, v, w) relaxes only when u has been reached and
    distance[u] + w < distance[v]. A final pass that can still relax any edge
    proves a negative cycle reachable from the source; in that case no
    distances are reported at all.

    Args:
        vertex_count: Number of vertices, indexed 0..vertex_count - 1.
        edges: Directed edges as (src, dst, weight) triples.
        source: Index of the source vertex.
        early_exit: Stop relaxing once a full pass changes nothing. Defaults to
            ENGINE_CONFIG.early_exit. The result is the same either way.

    Returns:
        ShortestPaths with distances (INF for unreachable vertices) and
        predecessor links.

    Raises:
        InvalidSourceError: If source is outside [0, vertex_count).
        InvalidEdgeError: If an edge endpoint is outside [0, vertex_count).
        NegativeCycleDetected: If a negative cycle is reachable from source.
    """
    if not 0 <= source < vertex_count:
        raise InvalidSourceError(
            f"Source vertex {source} is outside [0, {vertex_count})."
        )
    if early_exit is None:
        early_exit = ENGINE_CONFIG.early_exit

    edge_list = _normalize_edges(vertex_count, edges)
    logger.debug(
        "Bellman-Ford from %d over %d vertices and %d edges",
        source,
        vertex_count,
        len(edge_list),
    )

    distance: List[Cost] = [INF] * vertex_count
    predecessor: List[Optional[int]] = [None] * vertex_count
    predecessor_edge: List[Optional[int]] = [None] * vertex_count
    distance[source] = 0

    for iteration in range(vertex_count - 1):
        changed = False
        for e_idx, (src, dst, weight) in enumerate(edge_list):
            if distance[src] == INF:
                continue
            new_cost = distance[src] + weight
            if new_cost < distance[dst]:
                distance[dst] = new_cost
                predecessor[dst] = src
                predecessor_edge[dst] = e_idx
                changed = True
        if early_exit and not changed:
            logger.debug("Relaxation converged after %d passes", iteration + 1)
            break

    for src, dst, weight in edge_list:
        if distance[src] != INF and distance[src] + weight < distance[dst]:
            logger.debug("Edge (%d, %d) still relaxes: negative cycle", src, dst)
            raise NegativeCycleDetected(
                f"Negative cycle detected reachable from vertex {source}."
            )

    return ShortestPaths(
        source=source,
        distances=distance,
        predecessors=predecessor,
        predecessor_edges=predecessor_edge,
    )


def shortest_path(
    vertex_count: int,
    edges: Sequence[EdgeLike],
    source: int,
    target: int,
) -> Tuple[Cost, List[int]]:
    """
    Return (cost, vertex path) of a shortest path from source to target.

    Raises:
        InvalidSourceError: If source is outside [0, vertex_count).
        NegativeCycleDetected: If a negative cycle is reachable from source.
        UnreachableVertexError: If target cannot be reached.
    """
    result = bellman_ford(vertex_count, edges, source)
    path = result.path_to(target)
    return result.distances[target], path


def _source_index(vertices: List[Vertex], source: Vertex) -> int:
    for idx, vertex in enumerate(vertices):
        if vertex is source:
            return idx
    raise InvalidSourceError(f"Source vertex {source!r} is not in the graph.")


def graph_shortest_paths(
    graph: Graph, source: Vertex
) -> List[Optional[CostPathPair]]:
    """
    Run Bellman-Ford over a Graph and return the shortest path to every vertex.

    Vertices are matched by identity, not by Vertex equality. The result is
    aligned with graph.vertices: a vertex object listed twice gets the same
    entry at both positions.

    Args:
        graph: The graph; only wired edges are followed.
        source: The source vertex object.

    Returns:
        A list holding, for each entry of graph.vertices, a CostPathPair with
        the path cost and its Edge objects, or None if the vertex is
        unreachable.

    Raises:
        InvalidSourceError: If source is not a vertex of the graph.
        NegativeCycleDetected: If a negative cycle is reachable from source.
    """
    vertices, weighted_edges, edge_refs = collect_edges(graph)
    result = bellman_ford(
        len(vertices), weighted_edges, _source_index(vertices, source)
    )

    by_index: List[Optional[CostPathPair]] = []
    for idx in range(len(vertices)):
        if not result.is_reachable(idx):
            by_index.append(None)
            continue
        path = [edge_refs[e_idx] for e_idx in result.edges_to(idx)]
        by_index.append(CostPathPair(result.distances[idx], path))

    _, index = index_vertices(graph)
    return [by_index[index[id(vertex)]] for vertex in graph.vertices]


def rank_vertices(graph: Graph, source: Vertex) -> List[CostVertexPair]:
    """
    Return the vertices reachable from source ordered by shortest-path cost.

    Equal costs keep the graph's vertex order.

    Raises:
        InvalidSourceError: If source is not a vertex of the graph.
        NegativeCycleDetected: If a negative cycle is reachable from source.
    """
    vertices, weighted_edges, _ = collect_edges(graph)
    result = bellman_ford(
        len(vertices), weighted_edges, _source_index(vertices, source)
    )
    ranked = [
        CostVertexPair(vertex, result.distances[idx])
        for idx, vertex in enumerate(vertices)
        if result.is_reachable(idx)
    ]
    ranked.sort()
    return ranked
