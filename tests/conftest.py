import pytest

from kruskal_mst import Edge


@pytest.fixture()
def example_edges() -> list[Edge]:
    return [
        Edge(0, 1, 10),
        Edge(0, 2, 6),
        Edge(0, 3, 5),
        Edge(1, 3, 15),
        Edge(2, 3, 4),
    ]


# Every graph here has at most 6 vertices so brute force enumeration stays cheap
@pytest.fixture()
def small_graphs() -> list[tuple[int, list[Edge]]]:
    return [
        (1, []),
        (2, [Edge(0, 1, 7)]),
        (3, [Edge(0, 1, 1), Edge(1, 2, 1), Edge(0, 2, 1)]),
        (4, [Edge(0, 1, 10), Edge(0, 2, 6), Edge(0, 3, 5), Edge(1, 3, 15), Edge(2, 3, 4)]),
        (5, [Edge(0, 1, 2), Edge(0, 3, 6), Edge(1, 2, 3), Edge(1, 3, 8), Edge(1, 4, 5),
             Edge(2, 4, 7), Edge(3, 4, 9)]),
        (6, [Edge(0, 1, 4), Edge(0, 2, 4), Edge(1, 2, 2), Edge(2, 3, 3), Edge(2, 5, 2),
             Edge(2, 4, 4), Edge(3, 4, 3), Edge(5, 4, 3), Edge(0, 5, 1.5)]),
        (6, [Edge(0, 1, -3), Edge(1, 2, 0), Edge(2, 3, -1), Edge(3, 4, 2), Edge(4, 5, 2),
             Edge(5, 0, 2), Edge(1, 4, -2), Edge(0, 3, 1)]),
    ]
