from typing import NamedTuple, Union

Weight = Union[int, float]


class Edge(NamedTuple):
    src: int
    dest: int
    weight: Weight

    @classmethod
    def from_tuple(cls, edge) -> 'Edge':
        if isinstance(edge, cls):
            return edge
        try:
            src, dest, weight = edge
        except (TypeError, ValueError):
            raise ValueError(f"Edge must be a (src, dest, weight) triple, got {edge!r}") from None
        return cls(src, dest, weight)

    def endpoints(self) -> frozenset:
        # (src, dest) and (dest, src) are the same undirected edge
        return frozenset((self.src, self.dest))

    def __str__(self):
        return f'{self.src} -- {self.dest} == {self.weight}'


def sort_edges(edges) -> list[Edge]:
    """
    Sort edges in non-decreasing order of weight.
    :param edges: iterable of Edge objects or (src, dest, weight) triples
    :return: a new list of Edge objects; the input is left untouched
    """
    return sorted((Edge.from_tuple(edge) for edge in edges), key=lambda edge: edge.weight)
