"""
Dense numpy views of a graph.

Rows and columns follow the graph's vertex iteration order.
"""

from typing import Dict, List

import numpy as np

from config import MATRIX_DTYPE
from graph import Graph


def vertex_order(graph: Graph) -> List[str]:
    """Names in the row/column order used by adjacency_matrix."""
    return [v.name for v in graph.vertices()]


def adjacency_matrix(graph: Graph) -> np.ndarray:
    """
    Symmetric 0/1 matrix with A[i, j] == 1 iff vertices i and j are adjacent.

    A self-loop sets the diagonal entry to 1.
    """
    names = vertex_order(graph)
    index: Dict[str, int] = {name: i for i, name in enumerate(names)}
    matrix = np.zeros((len(names), len(names)), dtype=MATRIX_DTYPE)
    for name in names:
        i = index[name]
        for neighbour in graph.adjacent_to(name):
            matrix[i, index[neighbour.name]] = 1
    return matrix


def degree_sequence(graph: Graph) -> np.ndarray:
    """Adjacency-set size of each vertex, in vertex iteration order."""
    return np.fromiter((graph.degree(v) for v in graph.vertices()), dtype=np.int64)
