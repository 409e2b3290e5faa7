from wgraph.lib.disjoint_set import DisjointSet


def test_make_set_singletons():
    ds = DisjointSet()
    nodes = [ds.make_set(i) for i in range(4)]
    assert len(ds) == 4
    assert ds.set_count == 4
    for node in nodes:
        assert ds.find(node) is node
        assert node.rank == 0


def test_union_merges_and_reports():
    ds = DisjointSet()
    a, b, c = ds.make_set("a"), ds.make_set("b"), ds.make_set("c")
    assert ds.union(a, b)
    assert ds.same_set(a, b)
    assert not ds.same_set(a, c)
    assert ds.set_count == 2
    # already joined
    assert not ds.union(b, a)
    assert ds.set_count == 2


def test_union_by_rank():
    ds = DisjointSet()
    a, b, c = ds.make_set(0), ds.make_set(1), ds.make_set(2)
    ds.union(a, b)
    root = ds.find(a)
    assert root.rank == 1
    # the lower-rank tree is attached under the higher-rank root
    ds.union(c, a)
    assert ds.find(c) is root
    assert root.rank == 1


def test_path_compression():
    ds = DisjointSet()
    nodes = [ds.make_set(i) for i in range(4)]
    # build a chain 0 <- 1 <- 2 <- 3 by hand
    for child, parent in zip(nodes[1:], nodes[:-1]):
        child.parent = parent
    nodes[0].rank = 3

    assert ds.find(nodes[3]) is nodes[0]
    assert all(node.parent is nodes[0] for node in nodes)


def test_equal_values_are_distinct_sets():
    ds = DisjointSet()
    x1, x2 = ds.make_set("x"), ds.make_set("x")
    assert not ds.same_set(x1, x2)


def test_transitive_union():
    ds = DisjointSet()
    nodes = [ds.make_set(i) for i in range(6)]
    ds.union(nodes[0], nodes[1])
    ds.union(nodes[2], nodes[3])
    ds.union(nodes[1], nodes[3])
    assert ds.same_set(nodes[0], nodes[2])
    assert not ds.same_set(nodes[0], nodes[4])
    assert ds.set_count == 3
