import pytest

from kruskal_mst.edge import Edge, sort_edges


def test_sort_edges_by_weight(example_edges):
    sorted_edges = sort_edges(example_edges)

    assert [edge.weight for edge in sorted_edges] == [4, 5, 6, 10, 15]
    assert sorted(sorted_edges) == sorted(example_edges)


def test_sort_edges_leaves_input_untouched(example_edges):
    original = list(example_edges)
    sort_edges(example_edges)

    assert example_edges == original


def test_sort_edges_accepts_triples_and_floats():
    sorted_edges = sort_edges([(0, 1, 2.5), (1, 2, -1), (0, 2, 2)])

    assert sorted_edges == [Edge(1, 2, -1), Edge(0, 2, 2), Edge(0, 1, 2.5)]
    assert all(isinstance(edge, Edge) for edge in sorted_edges)


def test_sort_edges_empty():
    assert sort_edges([]) == []


def test_edge_str():
    assert str(Edge(2, 3, 4)) == '2 -- 3 == 4'


def test_edge_endpoints_are_undirected():
    assert Edge(0, 3, 5).endpoints() == Edge(3, 0, 5).endpoints()


@pytest.mark.parametrize("bad_edge", [(0, 1), (0, 1, 2, 3), 5, None])
def test_edge_from_bad_tuple(bad_edge):
    with pytest.raises(ValueError) as excinfo:
        Edge.from_tuple(bad_edge)

    assert excinfo.value.__suppress_context__
