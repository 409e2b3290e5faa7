"""Conversions from the Graph model to index-based representations.

The algorithms in ``wgraph.lib.algorithms`` work on integer vertex indices.
These helpers flatten a Graph into an edge list, an adjacency matrix, an
adjacency list or a NetworkX graph. Vertices are indexed by object identity in
the order of ``graph.vertices``; a vertex object listed twice keeps its first
index, and equal-but-distinct vertices get separate indices.

Only wired edges (reachable through ``vertex.edges``) are exported; edges whose
target vertex is not part of the graph are skipped.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

import networkx as nx
import numpy as np

from wgraph.lib.algorithms.base import INF, WeightedEdge
from wgraph.lib.graph import Edge, Graph, Vertex


def index_vertices(graph: Graph) -> Tuple[List[Vertex], Dict[int, int]]:
    """
    Assign a dense index to every distinct vertex object of a graph.

    Args:
        graph: The graph to index.

    Returns:
        A tuple of (vertices, index):
          - vertices: distinct vertex objects in first-seen order.
          - index: maps id(vertex) to its position in vertices.
    """
    vertices: List[Vertex] = []
    index: Dict[int, int] = {}
    for vertex in graph.vertices:
        if id(vertex) not in index:
            index[id(vertex)] = len(vertices)
            vertices.append(vertex)
    return vertices, index


def collect_edges(
    graph: Graph,
) -> Tuple[List[Vertex], List[WeightedEdge], List[Edge]]:
    """
    Flatten the wired edges of a graph.

    Returns:
        A tuple of (vertices, weighted_edges, edge_refs) where weighted_edges[i]
        is the index form of the Edge object edge_refs[i].
    """
    vertices, index = index_vertices(graph)
    weighted_edges: List[WeightedEdge] = []
    edge_refs: List[Edge] = []
    for src, vertex in enumerate(vertices):
        for edge in vertex.edges:
            dst = index.get(id(edge.to_vertex))
            if dst is None:
                continue
            weighted_edges.append(WeightedEdge(src, dst, edge.cost))
            edge_refs.append(edge)
    return vertices, weighted_edges, edge_refs


def to_edge_list(graph: Graph) -> Tuple[int, List[WeightedEdge]]:
    """Return (vertex_count, edges) suitable for the shortest-path engine."""
    vertices, weighted_edges, _ = collect_edges(graph)
    return len(vertices), weighted_edges


def to_adjacency_matrix(graph: Graph) -> np.ndarray:
    """
    Return an N x N float matrix of edge costs with INF meaning "no edge".

    Parallel edges collapse to their minimal cost; self-loops are dropped.
    """
    vertices, weighted_edges, _ = collect_edges(graph)
    matrix = np.full((len(vertices), len(vertices)), INF, dtype=float)
    for src, dst, weight in weighted_edges:
        if src != dst and weight < matrix[src, dst]:
            matrix[src, dst] = weight
    return matrix


def to_adjacency_list(graph: Graph) -> List[Dict[int, float]]:
    """
    Return one {neighbor: cost} mapping per vertex.

    Parallel edges collapse to their minimal cost; self-loops are dropped.
    """
    vertices, weighted_edges, _ = collect_edges(graph)
    adjacency: List[Dict[int, float]] = [{} for _ in vertices]
    for src, dst, weight in weighted_edges:
        if src == dst:
            continue
        current = adjacency[src].get(dst)
        if current is None or weight < current:
            adjacency[src][dst] = weight
    return adjacency


def to_networkx(graph: Graph) -> nx.MultiDiGraph:
    """
    Convert a Graph to a NetworkX MultiDiGraph.

    Nodes are vertex indices carrying 'value' and 'weight' attributes. Every
    wired edge (reciprocals included) becomes one directed edge with a 'cost'
    attribute, keyed by its position in the flattened edge list.
    """
    vertices, weighted_edges, _ = collect_edges(graph)
    nx_graph = nx.MultiDiGraph(graph_type=graph.graph_type.name)
    for idx, vertex in enumerate(vertices):
        nx_graph.add_node(idx, value=vertex.value, weight=vertex.weight)
    for key, (src, dst, weight) in enumerate(weighted_edges):
        nx_graph.add_edge(src, dst, key=key, cost=weight)
    return nx_graph
