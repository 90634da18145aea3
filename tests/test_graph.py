import pytest

from algolab.graph import Graph


@pytest.fixture
def triangle():
    g = Graph()
    a = g.add_vertex("A")
    b = g.add_vertex("B")
    c = g.add_vertex("C")
    g.add_edge(a, c, distance=2.0)
    g.add_edge(a, b, distance=1.0)
    g.add_edge(b, c, capacity=7, flow=3)
    return g, a, b, c


def test_vertices_are_consecutive(triangle):
    g, a, b, c = triangle
    assert list(g.vertices()) == [a, b, c]
    assert [a, b, c] == [0, 1, 2]
    assert len(g) == 3


def test_names_round_trip(triangle):
    g, a, b, c = triangle
    assert [g.name(v) for v in g.vertices()] == ["A", "B", "C"]


def test_adjacent_vertices_keep_insertion_order(triangle):
    g, a, b, c = triangle
    assert g.adjacent_vertices(a) == [c, b]
    assert g.adjacent_vertices(c) == []


def test_edge_lookup_and_properties(triangle):
    g, a, b, c = triangle
    e = g.edge(b, c)
    assert e is not None
    assert (e.source, e.target, e.capacity, e.flow) == (b, c, 7, 3)
    assert g.edge(c, b) is None


def test_edge_properties_are_mutable(triangle):
    g, a, b, c = triangle
    g.edge(b, c).flow += 2
    assert g.edge(b, c).flow == 5


def test_edges_grouped_by_source(triangle):
    g, a, b, c = triangle
    pairs = [(e.source, e.target) for e in g.edges()]
    assert pairs == [(a, c), (a, b), (b, c)]


def test_out_edges_match_adjacency(triangle):
    g, a, b, c = triangle
    for v in g.vertices():
        assert [e.target for e in g.out_edges(v)] == g.adjacent_vertices(v)


def test_membership(triangle):
    g, a, b, c = triangle
    assert a in g
    assert len(g) not in g
    assert -1 not in g


def test_bad_vertex_raises(triangle):
    g, a, b, c = triangle
    with pytest.raises(IndexError):
        g.add_edge(a, 10)
    with pytest.raises(IndexError):
        g.adjacent_vertices(-1)
    with pytest.raises(IndexError):
        g.name(3)


def test_unknown_property_raises(triangle):
    g, a, b, c = triangle
    with pytest.raises(TypeError):
        g.add_edge(a, b, weight=1)