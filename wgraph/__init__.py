"""wgraph: weighted-graph engine.

Provides a vertex/edge graph model for directed and undirected graphs, a
Bellman-Ford shortest-path engine with negative-cycle detection, and a
Kruskal minimum-spanning-forest engine built on a disjoint-set structure.

Primary API:
    Graph, Vertex, Edge, GraphType - Graph model
    bellman_ford() - Single-source shortest paths over an index edge list
    graph_shortest_paths() - Shortest paths over a Graph
    minimum_spanning_forest() - Kruskal over an adjacency matrix or list
    graph_minimum_spanning_forest() - Kruskal over an undirected Graph

Example:
    from wgraph import bellman_ford, minimum_spanning_forest

    result = bellman_ford(3, [(0, 1, 4), (0, 2, 1), (2, 1, 1)], source=0)
    result.distances      # [0, 2, 1]
    result.path_to(1)     # [0, 2, 1]

    INF = float("inf")
    forest = minimum_spanning_forest([[INF, 1, 3], [1, INF, 2], [3, 2, INF]])
"""

from __future__ import annotations

from wgraph import cli, logging
from wgraph._version import __version__
from wgraph.exceptions import (
    AsymmetricGraphError,
    GraphError,
    InvalidEdgeError,
    InvalidSourceError,
    NegativeCycleDetected,
    UnreachableVertexError,
)
from wgraph.lib.algorithms.base import INF, WeightedEdge
from wgraph.lib.algorithms.bellman_ford import (
    bellman_ford,
    graph_shortest_paths,
    rank_vertices,
    shortest_path,
)
from wgraph.lib.algorithms.kruskal import (
    graph_minimum_spanning_forest,
    kruskal_adjacency_list,
    kruskal_matrix,
    minimum_spanning_forest,
    minimum_spanning_forest_edges,
)
from wgraph.lib.algorithms.types import ShortestPaths
from wgraph.lib.disjoint_set import DisjointSet
from wgraph.lib.graph import (
    CostPathPair,
    CostVertexPair,
    Edge,
    Graph,
    GraphType,
    Vertex,
)

__all__ = [
    # Version
    "__version__",
    # Model
    "Graph",
    "GraphType",
    "Vertex",
    "Edge",
    "CostVertexPair",
    "CostPathPair",
    "DisjointSet",
    # Algorithms
    "bellman_ford",
    "shortest_path",
    "graph_shortest_paths",
    "rank_vertices",
    "minimum_spanning_forest",
    "minimum_spanning_forest_edges",
    "kruskal_matrix",
    "kruskal_adjacency_list",
    "graph_minimum_spanning_forest",
    # Types
    "INF",
    "ShortestPaths",
    "WeightedEdge",
    # Errors
    "GraphError",
    "InvalidEdgeError",
    "InvalidSourceError",
    "NegativeCycleDetected",
    "AsymmetricGraphError",
    "UnreachableVertexError",
    # Utilities
    "cli",
    "logging",
]
