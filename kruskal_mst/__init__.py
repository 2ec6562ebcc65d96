from .edge import Edge, sort_edges
from .disjoint_set import DisjointSetForest
from .kruskal import BuilderState, MSTBuilder, compute_mst, kruskal_nx
from .utils import is_spanning_tree, count_components, brute_force_mst_cost, random_connected_edges, format_mst

__version__ = "0.1.0"

__all__ = [
    'Edge',
    'sort_edges',
    'DisjointSetForest',
    'BuilderState',
    'MSTBuilder',
    'compute_mst',
    'kruskal_nx',
    'is_spanning_tree',
    'count_components',
    'brute_force_mst_cost',
    'random_connected_edges',
    'format_mst'
]
