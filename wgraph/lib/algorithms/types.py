"""Result types returned by the wgraph algorithms."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional

from wgraph.exceptions import UnreachableVertexError
from wgraph.lib.algorithms.base import Cost
from wgraph.lib.algorithms.path_utils import resolve_to_path


@dataclass(frozen=True)
class ShortestPaths:
    """Single-source shortest-path distances and predecessor links.

    Attributes:
        source: Index of the source vertex.
        distances: distances[i] is the minimal cost from source to i, or INF
            when i is unreachable.
        predecessors: predecessors[i] is the vertex that last improved
            distances[i]; None for the source and for unreachable vertices.
        predecessor_edges: predecessor_edges[i] is the position (in the edge
            sequence given to the algorithm) of the edge that last improved
            distances[i]; None where predecessors[i] is None.
    """

    source: int
    distances: List[Cost]
    predecessors: List[Optional[int]]
    predecessor_edges: List[Optional[int]]

    def is_reachable(self, target: int) -> bool:
        return not math.isinf(self.distances[target])

    def path_to(self, target: int) -> List[int]:
        """Return the vertex indices of a shortest path from source to target.

        Raises:
            IndexError: If target is not a vertex index.
            UnreachableVertexError: If target cannot be reached from source.
        """
        if not 0 <= target < len(self.distances):
            raise IndexError(f"Vertex {target} is out of range.")
        if not self.is_reachable(target):
            raise UnreachableVertexError(
                f"Vertex {target} is not reachable from vertex {self.source}."
            )
        return resolve_to_path(self.predecessors, target)

    def edges_to(self, target: int) -> List[int]:
        """Return the edge positions of a shortest path from source to target.

        Raises:
            IndexError: If target is not a vertex index.
            UnreachableVertexError: If target cannot be reached from source.
        """
        path = self.path_to(target)
        return [self.predecessor_edges[node] for node in path[1:]]
