from __future__ import annotations

from enum import IntEnum
from typing import Any, Generic, Iterable, List, Optional, Tuple, TypeVar

from wgraph.exceptions import InvalidEdgeError
from wgraph.lib.algorithms.base import INF, Cost
from wgraph.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class GraphType(IntEnum):
    """Direction semantics of a Graph."""

    DIRECTED = 1
    UNDIRECTED = 2


class Vertex(Generic[T]):
    """
    A graph vertex holding a value, an auxiliary weight and its outgoing edges.

    Equality and ordering look at the value, the weight and the sequence of
    outgoing edge *costs*. Edge targets are not compared, so two vertices whose
    edges lead to different places but carry the same costs compare equal.
    This cost-sequence equality is kept on purpose for compatibility; do not
    rely on Vertex equality to detect structurally identical vertices.

    Vertices are hashable by the same fields. Adding edges changes the hash,
    so do not mutate a vertex while it is used as a dict key or set member.
    """

    def __init__(self, value: T, weight: int = 0) -> None:
        self._value = value
        self.weight = weight
        self._edges: List[Edge[T]] = []

    @classmethod
    def from_vertex(cls, other: Vertex[T]) -> Vertex[T]:
        """
        Clone a vertex. The edge list is copied but the Edge objects are shared.
        """
        vertex = cls(other.value, other.weight)
        vertex._edges.extend(other.edges)
        return vertex

    @property
    def value(self) -> T:
        return self._value

    @property
    def edges(self) -> List[Edge[T]]:
        """Outgoing edges (the live list)."""
        return self._edges

    def add_edge(self, edge: Edge[T]) -> None:
        self._edges.append(edge)

    def get_edge(self, vertex: Vertex[T]) -> Optional[Edge[T]]:
        """
        Return the first outgoing edge whose target equals vertex, or None.
        """
        for edge in self._edges:
            if edge.to_vertex == vertex:
                return edge
        return None

    def path_to(self, vertex: Vertex[T]) -> bool:
        """Return True if some outgoing edge leads to vertex."""
        return self.get_edge(vertex) is not None

    def _key(self) -> Tuple[Any, int, int, Tuple[Cost, ...]]:
        return (
            self._value,
            self.weight,
            len(self._edges),
            tuple(edge.cost for edge in self._edges),
        )

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Vertex):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: Vertex[T]) -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"Vertex({self._value!r}, weight={self.weight})"

    def __str__(self) -> str:
        lines = [f"Value={self._value} weight={self.weight}\n"]
        lines.extend(f"\t{edge}" for edge in self._edges)
        return "".join(lines)


class Edge(Generic[T]):
    """
    A directed, weighted connection between two vertices.

    The endpoints are fixed at construction; the cost may be changed.

    Raises:
        InvalidEdgeError: If either endpoint is None.
    """

    def __init__(self, cost: int, from_vertex: Vertex[T], to_vertex: Vertex[T]) -> None:
        if from_vertex is None or to_vertex is None:
            raise InvalidEdgeError("Both 'from' and 'to' vertices must be non-None.")
        self.cost = cost
        self._from = from_vertex
        self._to = to_vertex

    @classmethod
    def from_edge(cls, other: Edge[T]) -> Edge[T]:
        """Copy an edge; the endpoint vertices are shared."""
        return cls(other.cost, other.from_vertex, other.to_vertex)

    @property
    def from_vertex(self) -> Vertex[T]:
        return self._from

    @property
    def to_vertex(self) -> Vertex[T]:
        return self._to

    def _key(self) -> Tuple[Cost, Any, Any]:
        return (self.cost, self._from._key(), self._to._key())

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Edge):
            return NotImplemented
        return (
            self.cost == other.cost
            and self._from == other._from
            and self._to == other._to
        )

    def __lt__(self, other: Edge[T]) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"Edge({self.cost}, {self._from!r}, {self._to!r})"

    def __str__(self) -> str:
        return (
            f"[ {self._from.value}({self._from.weight}) ] -> "
            f"[ {self._to.value}({self._to.weight}) ] = {self.cost}\n"
        )


class Graph(Generic[T]):
    """
    A weighted graph of Vertex and Edge objects, directed or undirected.

    Both the vertex list and the edge list may contain duplicates. In an
    UNDIRECTED graph every wired edge u->v is mirrored by a reciprocal edge
    v->u with the same cost, which is attached to v and appended to the edge
    list.

    Edges whose endpoints are not among the graph's vertices are kept in the
    edge list but never wired into a vertex's outgoing edges.

    Two graphs are equal when they have the same type, the same multiset of
    vertices and the same multiset of edges, regardless of insertion order.
    """

    def __init__(
        self,
        graph_type: GraphType = GraphType.UNDIRECTED,
        vertices: Optional[Iterable[Vertex[T]]] = None,
        edges: Optional[Iterable[Edge[T]]] = None,
    ) -> None:
        """
        Initialize a Graph, optionally wiring a collection of vertices and edges.

        Args:
            graph_type: DIRECTED or UNDIRECTED. Defaults to UNDIRECTED.
            vertices: Vertices to copy into the graph.
            edges: Edges to copy into the graph. Each edge with both endpoints
                among the vertices is attached to its 'from' vertex (plus a
                reciprocal edge when UNDIRECTED).
        """
        self._type = GraphType(graph_type)
        self._vertices: List[Vertex[T]] = list(vertices) if vertices else []
        self._edges: List[Edge[T]] = list(edges) if edges else []

        # Reciprocals are appended to self._edges while wiring
        for edge in self._edges[:]:
            self._wire(edge)

    @classmethod
    def from_collections(
        cls,
        vertices: Iterable[Vertex[T]],
        edges: Iterable[Edge[T]],
        graph_type: GraphType = GraphType.UNDIRECTED,
    ) -> Graph[T]:
        """Build a graph from vertex and edge collections. See __init__."""
        return cls(graph_type, vertices, edges)

    def copy(self) -> Graph[T]:
        """
        Create a copy of this graph.

        Vertices are cloned; their Edge objects are shared with this graph.
        The edge list of the copy is gathered from the cloned vertices, so
        dangling edges are not carried over.
        """
        graph: Graph[T] = Graph(self._type)
        graph._vertices = [Vertex.from_vertex(v) for v in self._vertices]
        for vertex in graph._vertices:
            graph._edges.extend(vertex.edges)
        return graph

    @property
    def graph_type(self) -> GraphType:
        return self._type

    @property
    def vertices(self) -> List[Vertex[T]]:
        """All vertices (the live list)."""
        return self._vertices

    @property
    def edges(self) -> List[Edge[T]]:
        """All edges including reciprocals (the live list)."""
        return self._edges

    def add_vertex(self, vertex: Vertex[T]) -> None:
        self._vertices.append(vertex)

    def add_edge(self, edge: Edge[T]) -> bool:
        """
        Add an edge and wire it into its 'from' vertex.

        Returns:
            True if the edge was wired, False if one of its endpoints is not
            a vertex of this graph (the edge is still recorded).
        """
        self._edges.append(edge)
        return self._wire(edge)

    def _wire(self, edge: Edge[T]) -> bool:
        from_vertex = edge.from_vertex
        to_vertex = edge.to_vertex
        if from_vertex not in self._vertices or to_vertex not in self._vertices:
            logger.debug("Skipping dangling edge %r", edge)
            return False

        from_vertex.add_edge(edge)
        if self._type == GraphType.UNDIRECTED:
            reciprocal = Edge(edge.cost, to_vertex, from_vertex)
            to_vertex.add_edge(reciprocal)
            self._edges.append(reciprocal)
        return True

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Graph):
            return NotImplemented
        if self._type != other._type:
            return False
        if len(self._vertices) != len(other._vertices):
            return False
        if len(self._edges) != len(other._edges):
            return False
        return sorted(self._vertices) == sorted(other._vertices) and sorted(
            self._edges
        ) == sorted(other._edges)

    def __hash__(self) -> int:
        return hash(
            (
                self._type,
                tuple(v._key() for v in sorted(self._vertices)),
                tuple(e._key() for e in sorted(self._edges)),
            )
        )

    def __str__(self) -> str:
        return "".join(str(vertex) for vertex in self._vertices)


class CostVertexPair(Generic[T]):
    """A vertex ranked by a cost. Pairs order by cost only."""

    def __init__(self, vertex: Vertex[T], cost: Cost = INF) -> None:
        if vertex is None:
            raise ValueError("vertex cannot be None.")
        self.cost = cost
        self._vertex = vertex

    @property
    def vertex(self) -> Vertex[T]:
        return self._vertex

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CostVertexPair):
            return NotImplemented
        return self.cost == other.cost and self._vertex == other._vertex

    def __lt__(self, other: CostVertexPair[T]) -> bool:
        if not isinstance(other, CostVertexPair):
            return NotImplemented
        return self.cost < other.cost

    def __hash__(self) -> int:
        return hash((self.cost, self._vertex))

    def __repr__(self) -> str:
        return f"CostVertexPair({self._vertex!r}, cost={self.cost})"

    def __str__(self) -> str:
        return f"{self._vertex.value} ({self._vertex.weight}) cost={self.cost}\n"


class CostPathPair(Generic[T]):
    """The total cost of a path and its edges in travel order."""

    def __init__(self, cost: Cost, path: List[Edge[T]]) -> None:
        if path is None:
            raise ValueError("path cannot be None.")
        self.cost = cost
        self._path = path

    @property
    def path(self) -> List[Edge[T]]:
        return self._path

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CostPathPair):
            return NotImplemented
        return self.cost == other.cost and self._path == other._path

    def __hash__(self) -> int:
        return hash((self.cost, tuple(self._path)))

    def __repr__(self) -> str:
        return f"CostPathPair(cost={self.cost}, path={self._path!r})"

    def __str__(self) -> str:
        return f"Cost = {self.cost}\n" + "".join(f"\t{edge}" for edge in self._path)
