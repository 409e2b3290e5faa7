"""Graph algorithms: Bellman-Ford shortest paths and Kruskal spanning forests."""
