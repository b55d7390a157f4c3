"""
Unit tests for the numpy matrix views.
"""

import numpy as np

from adjacency_set_graph import AdjacencySetGraph
from matrix import adjacency_matrix, degree_sequence, vertex_order


def test_empty_graph_matrix():
    m = adjacency_matrix(AdjacencySetGraph())

    assert m.shape == (0, 0)


def test_adjacency_matrix_is_symmetric():
    g = AdjacencySetGraph()
    g.add_edge("A", "B")
    g.add_edge("B", "C")
    g.add_edge("C", "C")
    g.add_vertex("D")

    m = adjacency_matrix(g)

    assert vertex_order(g) == ["A", "B", "C", "D"]
    expected = np.array(
        [
            [0, 1, 0, 0],
            [1, 0, 1, 0],
            [0, 1, 1, 0],
            [0, 0, 0, 0],
        ]
    )
    assert np.array_equal(m, expected)
    assert np.array_equal(m, m.T)
    assert m.dtype == np.int8


def test_degree_sequence_matches_row_sums():
    g = AdjacencySetGraph()
    for a, b in [("A", "B"), ("A", "C"), ("C", "D"), ("D", "E"), ("D", "G"), ("E", "G")]:
        g.add_edge(a, b)
    g.add_vertex("H")

    degrees = degree_sequence(g)

    assert degrees.tolist() == [2, 1, 2, 3, 2, 2, 0]
    assert np.array_equal(degrees, adjacency_matrix(g).sum(axis=1))
    assert int(degrees.sum()) == 2 * g.edge_count
