"""
Demo driver for simplegraph.

Builds a small graph, then prints a shortest path, the max-degree vertex,
the cycle check and the adjacency list.

Usage:
    python demo.py
"""

import logging

from adjacency_set_graph import AdjacencySetGraph
from bfs_engine import shortest_path
from config import LOG_FORMAT, LOG_LEVEL
from cycles import is_cyclic
from degree import max_degree
from errors import NoPathError

logger = logging.getLogger(__name__)


def build_example_graph() -> AdjacencySetGraph:
    """A-B, A-C, C-D, D-E, D-G, E-G plus the isolated vertex H."""
    g = AdjacencySetGraph()
    for a, b in [("A", "B"), ("A", "C"), ("C", "D"), ("D", "E"), ("D", "G"), ("E", "G")]:
        g.add_edge(a, b)
    g.add_vertex("H")
    return g


def main() -> None:
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)

    g = build_example_graph()
    logger.info(f"Built graph with {g.vertex_count} vertices and {g.edge_count} edges")

    path = shortest_path(g, "A", "G")
    print(" -> ".join(v.name for v in path))

    try:
        shortest_path(g, "A", "H")
    except NoPathError as exc:
        print(exc)

    print(max_degree(g))
    print(is_cyclic(g))
    print("adjList:")
    print(g, end="")


if __name__ == "__main__":
    main()
