"""Graph model, disjoint-set structure and representation converters."""

from wgraph.lib.disjoint_set import DisjointSet, DisjointSetNode
from wgraph.lib.graph import (
    CostPathPair,
    CostVertexPair,
    Edge,
    Graph,
    GraphType,
    Vertex,
)
from wgraph.lib.util import (
    to_adjacency_list,
    to_adjacency_matrix,
    to_edge_list,
    to_networkx,
)

__all__ = [
    "CostPathPair",
    "CostVertexPair",
    "DisjointSet",
    "DisjointSetNode",
    "Edge",
    "Graph",
    "GraphType",
    "Vertex",
    "to_adjacency_list",
    "to_adjacency_matrix",
    "to_edge_list",
    "to_networkx",
]
