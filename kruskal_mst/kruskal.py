from enum import Enum
from numbers import Integral

import networkx as nx

from .disjoint_set import DisjointSetForest
from .edge import Edge, Weight, sort_edges


class BuilderState(Enum):
    ACCUMULATING = 'accumulating'
    DONE = 'done'


def _validate_input(n_vertices, edges) -> list[Edge]:
    if isinstance(n_vertices, bool) or not isinstance(n_vertices, Integral):
        raise ValueError(f'Number of vertices should be an integer, got {n_vertices!r}')
    if n_vertices < 0:
        raise ValueError(f'Number of vertices should be an integer >= 0, got {n_vertices}')

    checked = []
    for edge in edges:
        edge = Edge.from_tuple(edge)
        for endpoint in (edge.src, edge.dest):
            if isinstance(endpoint, bool) or not isinstance(endpoint, Integral):
                raise ValueError(f'Edge {edge} has a non-integer endpoint {endpoint!r}')
            if not 0 <= endpoint < n_vertices:
                raise ValueError(f'Edge {edge} references vertex {endpoint} outside [0, {n_vertices})')
        checked.append(edge)
    return checked


class MSTBuilder:
    """
    Greedy Kruskal loop over a fixed vertex count and edge list.

    The builder starts ACCUMULATING and moves to DONE once n_vertices - 1 edges have been accepted
    or the sorted edges run out. A disconnected graph ends with a spanning forest.
    """
    forest: DisjointSetForest
    sorted_edges: list[Edge]
    accepted_edges: list[Edge]
    rejected_edges: list[Edge]
    total_cost: Weight
    edges_scanned: int

    def __init__(self, n_vertices: int, edges):
        edges = _validate_input(n_vertices, edges)
        self.n_vertices = n_vertices
        self.sorted_edges = sort_edges(edges)
        self.forest = DisjointSetForest(n_vertices)
        self.accepted_edges = []
        self.rejected_edges = []
        self.total_cost = 0
        self.edges_scanned = 0

    @property
    def edges_needed(self) -> int:
        return max(self.n_vertices - 1, 0)

    @property
    def state(self) -> BuilderState:
        if len(self.accepted_edges) >= self.edges_needed:
            return BuilderState.DONE
        if self.edges_scanned >= len(self.sorted_edges):
            return BuilderState.DONE
        return BuilderState.ACCUMULATING

    def step(self):
        """
        Scan the next edge in weight order.
        :return: the edge if it was accepted, None if it was discarded as a cycle
        """
        if self.state is BuilderState.DONE:
            raise RuntimeError('MST builder has already finished')

        edge = self.sorted_edges[self.edges_scanned]
        self.edges_scanned += 1

        x = self.forest.find_root(edge.src)
        y = self.forest.find_root(edge.dest)
        if x == y:
            self.rejected_edges.append(edge)
            return None

        self.accepted_edges.append(edge)
        self.total_cost += edge.weight
        self.forest.union(x, y)
        return edge

    def run(self) -> tuple[list[Edge], Weight]:
        while self.state is BuilderState.ACCUMULATING:
            self.step()
        return list(self.accepted_edges), self.total_cost


def compute_mst(n_vertices: int, edges) -> tuple[list[Edge], Weight]:
    """
    Kruskal's minimum spanning tree.
    :param n_vertices: number of vertices, labelled 0..n_vertices-1
    :param edges: iterable of Edge objects or (src, dest, weight) triples
    :return: accepted edges in acceptance order, and the sum of their weights
    """
    return MSTBuilder(n_vertices, edges).run()


@nx.utils.not_implemented_for('directed')
def kruskal_nx(graph: nx.Graph, weight: str = 'weight') -> nx.Graph:
    """
    Minimum spanning forest of an undirected networkx graph with arbitrary node labels.
    :param graph: undirected networkx graph whose edges carry a numeric weight attribute
    :param weight: name of the edge attribute holding the weight
    :return: graph with every node of the input and the accepted edges
    """
    nodes = list(graph.nodes())
    index = {node: i for i, node in enumerate(nodes)}

    edges = []
    for u, v, w in graph.edges(data=weight):
        if w is None:
            raise ValueError(f'Edge ({u}, {v}) has no {weight!r} attribute')
        edges.append(Edge(index[u], index[v], w))

    accepted, _ = compute_mst(len(nodes), edges)

    F = nx.Graph()
    F.add_nodes_from(graph.nodes(data=True))
    for edge in accepted:
        F.add_edge(nodes[edge.src], nodes[edge.dest], **{weight: edge.weight})
    return F
