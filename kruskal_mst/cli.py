#!/usr/bin/env python3

import argparse
import sys
import time

from .edge import Edge
from .kruskal import compute_mst
from .utils import format_mst, log_action, random_connected_edges

EXAMPLE_VERTICES = 4
EXAMPLE_EDGES = [
    Edge(0, 1, 10),
    Edge(0, 2, 6),
    Edge(0, 3, 5),
    Edge(1, 3, 15),
    Edge(2, 3, 4),
]


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Compute a minimum spanning tree with Kruskal's algorithm",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument(
        "--random",
        help="Use a random connected graph on this many vertices instead of the built-in example",
        type=int,
        metavar="N",
        default=None
    )

    parser.add_argument(
        "--density",
        help="Fraction of vertex pairs joined by an edge in the random graph (default: 0.5)",
        type=float,
        default=0.5
    )

    parser.add_argument(
        "--min-weight",
        help="Smallest edge weight in the random graph (default: 1)",
        type=int,
        default=1
    )

    parser.add_argument(
        "--max-weight",
        help="Largest edge weight in the random graph (default: 100)",
        type=int,
        default=100
    )

    parser.add_argument(
        "--seed",
        help="Random seed (default: 0)",
        type=int,
        default=0
    )

    parser.add_argument(
        "--log-path",
        help="Append timing and memory usage to this file",
        default=None
    )

    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    start_time = time.time()

    try:
        if args.random is None:
            n_vertices, edges = EXAMPLE_VERTICES, EXAMPLE_EDGES
        else:
            print(f"Generating a graph on {args.random} vertices...")
            n_vertices = args.random
            edges = random_connected_edges(args.random,
                                           density=args.density,
                                           min_weight=args.min_weight,
                                           max_weight=args.max_weight,
                                           seed=args.seed)
            print(f"  Edges: {len(edges)}")
        if args.log_path:
            log_action(args.log_path, start_time, "Built graph", n_vertices=n_vertices, n_edges=len(edges))

        accepted, total_cost = compute_mst(n_vertices, edges)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.log_path:
        log_action(args.log_path, start_time, "Computed MST", n_vertices=n_vertices, n_edges=len(accepted))

    print(format_mst(accepted, total_cost))
    if len(accepted) < n_vertices - 1:
        print(f"Graph is disconnected: spanning forest has {len(accepted)} of {n_vertices - 1} edges")


if __name__ == "__main__":
    main()
