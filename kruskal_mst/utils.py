import time
from datetime import datetime
from itertools import combinations
from math import comb
from pathlib import Path

import networkx as nx
import numpy as np
import psutil
from tqdm import tqdm

from .edge import Edge

BRUTE_FORCE_MAX_VERTICES = 8


def _out_of_range(n_vertices: int, edges) -> list[Edge]:
    return [edge for edge in edges if not (0 <= edge.src < n_vertices and 0 <= edge.dest < n_vertices)]


def _edges_to_graph(n_vertices: int, edges) -> nx.MultiGraph:
    G = nx.MultiGraph()
    G.add_nodes_from(range(n_vertices))
    G.add_edges_from((edge.src, edge.dest) for edge in edges)
    return G


def count_components(n_vertices: int, edges) -> int:
    edges = [Edge.from_tuple(edge) for edge in edges]
    bad_edges = _out_of_range(n_vertices, edges)
    if bad_edges:
        raise ValueError(f'Edge {bad_edges[0]} references a vertex outside [0, {n_vertices})')
    return nx.number_connected_components(_edges_to_graph(n_vertices, edges))


def is_spanning_tree(n_vertices: int, edges) -> bool:
    """
    True if the edges connect all n_vertices vertices without a cycle.
    Edges touching a vertex outside 0..n_vertices-1 never form a spanning tree.
    """
    edges = [Edge.from_tuple(edge) for edge in edges]
    if _out_of_range(n_vertices, edges):
        return False
    if n_vertices == 0:
        return len(edges) == 0
    if len(edges) != n_vertices - 1:
        return False
    G = _edges_to_graph(n_vertices, edges)
    reachable = nx.node_connected_component(G, 0)
    return reachable == set(range(n_vertices))


def brute_force_mst_cost(n_vertices: int, edges, progress: bool = False):
    """
    Minimum total weight over every spanning tree, found by enumerating all (V-1)-edge subsets.
    :param n_vertices: number of vertices, at most BRUTE_FORCE_MAX_VERTICES
    :param edges: iterable of Edge objects or (src, dest, weight) triples
    :param progress: show a tqdm progress bar
    :return: the minimum cost, or None if the graph has no spanning tree
    """
    if n_vertices > BRUTE_FORCE_MAX_VERTICES:
        raise ValueError(f'Brute force enumeration is limited to {BRUTE_FORCE_MAX_VERTICES} vertices, '
                         f'got {n_vertices}')
    edges = [Edge.from_tuple(edge) for edge in edges]
    k = max(n_vertices - 1, 0)

    best = None
    subsets = combinations(edges, k)
    if progress:
        subsets = tqdm(subsets, total=comb(len(edges), k))
    for subset in subsets:
        if not is_spanning_tree(n_vertices, subset):
            continue
        cost = sum(edge.weight for edge in subset)
        if best is None or cost < best:
            best = cost
    return best


def random_connected_edges(n_vertices: int,
                           density: float = 0.5,
                           min_weight: int = 1,
                           max_weight: int = 100,
                           seed: int = 0) -> list[Edge]:
    """
    Random connected graph: a shuffled spanning path plus extra edges up to the requested density.
    """
    if n_vertices < 0:
        raise ValueError(f'Number of vertices should be an integer >= 0, got {n_vertices}')
    if not 0 <= density <= 1:
        raise ValueError(f'Density should be in [0, 1], got {density}')
    if min_weight < 1:
        raise ValueError(f'min_weight should be >= 1, got {min_weight}')
    if min_weight > max_weight:
        raise ValueError(f'min_weight ({min_weight}) is larger than max_weight ({max_weight})')

    rng = np.random.default_rng(seed)
    adj_matrix = np.zeros((n_vertices, n_vertices), dtype=int)

    order = rng.permutation(n_vertices)
    for u, v in zip(order[:-1], order[1:]):
        i, j = min(u, v), max(u, v)
        adj_matrix[i, j] = rng.integers(min_weight, max_weight, endpoint=True)

    total_edges = max(int(density * n_vertices * (n_vertices - 1) / 2), n_vertices - 1)
    free = [(i, j) for i in range(n_vertices) for j in range(i + 1, n_vertices) if adj_matrix[i, j] == 0]
    n_extra = min(total_edges - (n_vertices - 1), len(free))
    if n_extra > 0:
        for idx in rng.choice(len(free), size=n_extra, replace=False):
            i, j = free[idx]
            adj_matrix[i, j] = rng.integers(min_weight, max_weight, endpoint=True)

    # Only the upper triangle is filled
    rows, cols = np.nonzero(np.triu(adj_matrix, k=1))
    return [Edge(int(i), int(j), int(adj_matrix[i, j])) for i, j in zip(rows, cols)]


def format_mst(accepted_edges, total_cost) -> str:
    lines = ['Following are the edges of the constructed MST:']
    lines.extend(str(Edge.from_tuple(edge)) for edge in accepted_edges)
    lines.append(f'Total cost of MST: {total_cost}')
    return '\n'.join(lines)


def log_action(log_path, start_time: float, action: str, n_vertices: int = None, n_edges: int = None) -> str:
    """
    Append a timing line to a CSV log: timestamp, elapsed seconds, resident memory, action, graph size.
    :param log_path: str or Path of the log file, created if missing
    :return: the line that was written, without the newline
    """
    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    memory_mb = psutil.Process().memory_info().rss / 1024 / 1024
    elapsed = time.time() - start_time

    graph_size = '' if n_vertices is None else f'V={n_vertices}'
    if n_edges is not None:
        graph_size = f'{graph_size} E={n_edges}'.strip()

    log_entry = f"{timestamp},{elapsed:.2f} s,{memory_mb:.2f} MB,{action},{graph_size}"
    with Path(log_path).open("a") as log_file:
        log_file.write(log_entry + "\n")
    return log_entry
