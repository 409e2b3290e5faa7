import pytest

from wgraph.exceptions import InvalidEdgeError
from wgraph.lib.algorithms.base import INF
from wgraph.lib.graph import (
    CostPathPair,
    CostVertexPair,
    Edge,
    Graph,
    GraphType,
    Vertex,
)


def _build(graph_type, vertex_order, edge_order):
    # A-B [1], C-D [2], A-C [3]
    a, b, c, d = Vertex("A"), Vertex("B"), Vertex("C"), Vertex("D")
    specs = [(1, a, b), (2, c, d), (3, a, c)]
    vertices = [[a, b, c, d][i] for i in vertex_order]
    edges = [Edge(*specs[i]) for i in edge_order]
    return Graph(graph_type, vertices, edges)


class TestVertex:
    def test_defaults(self):
        v = Vertex("A")
        assert v.value == "A"
        assert v.weight == 0
        assert v.edges == []

    def test_add_and_get_edge(self):
        a, b, c = Vertex("A"), Vertex("B"), Vertex("C")
        e = Edge(5, a, b)
        a.add_edge(e)
        assert a.get_edge(b) is e
        assert a.get_edge(c) is None
        assert a.path_to(b)
        assert not a.path_to(c)

    def test_cost_sequence_equality(self):
        """Vertices with equal edge costs compare equal even if targets differ."""
        x, y = Vertex("X"), Vertex("Y")
        a1, a2 = Vertex("A"), Vertex("A")
        a1.add_edge(Edge(3, a1, x))
        a2.add_edge(Edge(3, a2, y))
        assert a1 == a2
        assert hash(a1) == hash(a2)

    def test_equality_fields(self):
        assert Vertex("A", 1) != Vertex("A", 2)
        assert Vertex("A") != Vertex("B")
        a1, a2, b = Vertex("A"), Vertex("A"), Vertex("B")
        a1.add_edge(Edge(1, a1, b))
        a2.add_edge(Edge(2, a2, b))
        assert a1 != a2

    def test_ordering(self):
        a, b = Vertex("A"), Vertex("B")
        assert a < b
        assert Vertex("A", 1) < Vertex("A", 2)
        with_edge = Vertex("A")
        with_edge.add_edge(Edge(1, with_edge, b))
        assert a < with_edge
        assert sorted([b, with_edge, a]) == [a, with_edge, b]

    def test_from_vertex_shares_edges(self):
        a, b = Vertex("A", 4), Vertex("B")
        e = Edge(1, a, b)
        a.add_edge(e)
        clone = Vertex.from_vertex(a)
        assert clone is not a
        assert clone == a
        assert clone.edges[0] is e
        assert clone.edges is not a.edges

    def test_str(self):
        a, b = Vertex("A", 1), Vertex("B", 2)
        a.add_edge(Edge(7, a, b))
        assert str(a) == "Value=A weight=1\n\t[ A(1) ] -> [ B(2) ] = 7\n"


class TestEdge:
    def test_missing_endpoint(self):
        with pytest.raises(InvalidEdgeError):
            Edge(1, None, Vertex("B"))
        with pytest.raises(InvalidEdgeError):
            Edge(1, Vertex("A"), None)

    def test_invalid_edge_is_value_error(self):
        with pytest.raises(ValueError):
            Edge(1, None, None)

    def test_cost_is_mutable(self):
        e = Edge(1, Vertex("A"), Vertex("B"))
        e.cost = 9
        assert e.cost == 9

    def test_endpoints_read_only(self):
        e = Edge(1, Vertex("A"), Vertex("B"))
        with pytest.raises(AttributeError):
            e.from_vertex = Vertex("C")

    def test_equality_and_order(self):
        a, b = Vertex("A"), Vertex("B")
        assert Edge(1, a, b) == Edge(1, a, b)
        assert Edge(1, a, b) != Edge(1, b, a)
        assert Edge(1, a, b) < Edge(2, a, b)
        assert Edge(1, a, b) < Edge(1, b, a)

    def test_from_edge(self):
        a, b = Vertex("A"), Vertex("B")
        e = Edge(3, a, b)
        copy = Edge.from_edge(e)
        assert copy == e
        assert copy is not e
        assert copy.from_vertex is a


class TestGraph:
    def test_empty(self):
        g = Graph()
        assert g.graph_type == GraphType.UNDIRECTED
        assert g.vertices == []
        assert g.edges == []
        assert Graph(GraphType.DIRECTED).graph_type == GraphType.DIRECTED

    def test_undirected_symmetry(self, triangle_graph):
        """Every inserted edge u->v has a reciprocal v->u with the same cost."""
        a, b, c = triangle_graph.vertices
        assert len(triangle_graph.edges) == 6
        for u, v, cost in [(a, b, 1), (b, c, 2), (a, c, 4)]:
            assert u.get_edge(v).cost == cost
            back = v.get_edge(u)
            assert back.cost == cost
            assert back.from_vertex is v and back.to_vertex is u
            assert back in triangle_graph.edges

    def test_directed_no_reciprocal(self, directed_diamond):
        a, b, c, d = directed_diamond.vertices
        assert len(directed_diamond.edges) == 4
        assert b.get_edge(a) is None
        assert len(d.edges) == 0

    def test_edges_reachable_from_vertices(self, triangle_graph):
        for edge in triangle_graph.edges:
            assert any(e is edge for e in edge.from_vertex.edges)

    def test_dangling_edge_ignored(self):
        a, b, outsider = Vertex("A"), Vertex("B"), Vertex("Z")
        dangling = Edge(9, a, outsider)
        g = Graph(GraphType.UNDIRECTED, [a, b], [Edge(1, a, b), dangling])
        assert dangling in g.edges
        assert all(e is not dangling for e in a.edges)
        assert outsider.edges == []
        # one wired edge plus its reciprocal plus the dangling edge
        assert len(g.edges) == 3

    def test_from_collections_defaults_undirected(self):
        a, b = Vertex("A"), Vertex("B")
        g = Graph.from_collections([a, b], [Edge(1, a, b)])
        assert g.graph_type == GraphType.UNDIRECTED
        assert b.get_edge(a).cost == 1

    def test_incremental_construction(self):
        a, b = Vertex("A"), Vertex("B")
        g = Graph(GraphType.UNDIRECTED)
        g.add_vertex(a)
        assert not g.add_edge(Edge(1, a, b))
        g.add_vertex(b)
        assert g.add_edge(Edge(2, a, b))
        assert b.get_edge(a).cost == 2

    def test_equality_order_independent(self):
        for graph_type in GraphType:
            assert _build(graph_type, [0, 1, 2, 3], [0, 1, 2]) == _build(
                graph_type, [3, 1, 0, 2], [1, 0, 2]
            )

    def test_equality_follows_cost_order_per_vertex(self):
        """A's outgoing costs (1, 3) versus (3, 1) make the vertices differ."""
        assert _build(GraphType.DIRECTED, [0, 1, 2, 3], [0, 1, 2]) != _build(
            GraphType.DIRECTED, [0, 1, 2, 3], [2, 1, 0]
        )

    def test_equality_hash(self):
        g1 = _build(GraphType.DIRECTED, [0, 1, 2, 3], [0, 1, 2])
        g2 = _build(GraphType.DIRECTED, [1, 2, 3, 0], [1, 0, 2])
        assert hash(g1) == hash(g2)

    def test_inequality(self):
        assert _build(GraphType.DIRECTED, [0, 1, 2, 3], [0, 1, 2]) != _build(
            GraphType.UNDIRECTED, [0, 1, 2, 3], [0, 1, 2]
        )
        assert _build(GraphType.DIRECTED, [0, 1, 2, 3], [0, 1, 2]) != _build(
            GraphType.DIRECTED, [0, 1, 2, 3], [0, 1]
        )

    def test_copy(self, triangle_graph):
        copy = triangle_graph.copy()
        assert copy == triangle_graph
        assert copy.graph_type == triangle_graph.graph_type
        assert all(c is not o for c, o in zip(copy.vertices, triangle_graph.vertices))
        # edges are shared, not cloned
        assert copy.vertices[0].edges[0] is triangle_graph.vertices[0].edges[0]

    def test_copy_drops_dangling_edges(self):
        a, outsider = Vertex("A"), Vertex("Z")
        g = Graph(GraphType.DIRECTED, [a], [Edge(1, a, outsider)])
        assert len(g.edges) == 1
        assert g.copy().edges == []

    def test_accessors_are_live(self):
        g = Graph()
        g.vertices.append(Vertex("A"))
        assert len(g.vertices) == 1

    def test_str(self):
        a, b = Vertex("A"), Vertex("B")
        g = Graph(GraphType.DIRECTED, [a, b], [Edge(3, a, b)])
        assert str(g) == "Value=A weight=0\n\t[ A(0) ] -> [ B(0) ] = 3\nValue=B weight=0\n"


class TestPairs:
    def test_cost_vertex_pair_default_infinite(self):
        pair = CostVertexPair(Vertex("A"))
        assert pair.cost == INF

    def test_cost_vertex_pair_requires_vertex(self):
        with pytest.raises(ValueError):
            CostVertexPair(None, 1)

    def test_cost_vertex_pair_orders_by_cost(self):
        a, b = Vertex("A"), Vertex("B")
        pairs = sorted([CostVertexPair(a, 5), CostVertexPair(b, 2)])
        assert [p.vertex for p in pairs] == [b, a]
        assert CostVertexPair(a, 1) == CostVertexPair(a, 1)
        assert CostVertexPair(a, 1) != CostVertexPair(b, 1)

    def test_cost_path_pair(self):
        a, b = Vertex("A"), Vertex("B")
        e = Edge(2, a, b)
        pair = CostPathPair(2, [e])
        assert pair == CostPathPair(2, [Edge(2, a, b)])
        assert pair.path[0] is e
        assert str(pair) == "Cost = 2\n\t[ A(0) ] -> [ B(0) ] = 2\n"
        with pytest.raises(ValueError):
            CostPathPair(0, None)
